"""Structured page data model.

Example:
    >>> from shopforge.schema import load_page, dump_page
    >>> page = load_page({"pageType": "landing", "title": "Morning Ritual"})
    >>> page.page_type
    'landing'
    >>> dump_page(page)
    {'pageType': 'landing', 'title': 'Morning Ritual'}
"""

from .lib import (
    DEFAULT_PRESET,
    ChatMessage,
    ConversationTurn,
    CtaBanner,
    Faq,
    FaqItem,
    Feature,
    Features,
    Footer,
    FooterColumn,
    Hero,
    LandingContent,
    LandingPage,
    Link,
    LogoBar,
    NavBar,
    Newsletter,
    PageModel,
    PageType,
    Pricing,
    PricingTier,
    ProductContent,
    ProductPage,
    ProductSection,
    RelatedProduct,
    RelatedProducts,
    RenderedArtifact,
    Review,
    Reviews,
    Role,
    StatItem,
    Stats,
    StructuredPage,
    StylePreset,
    Team,
    TeamMember,
    Testimonial,
    Testimonials,
    dump_page,
    load_page,
    page_content,
    page_to_json,
)

__all__ = [
    # Enums
    "PageType",
    "StylePreset",
    "DEFAULT_PRESET",
    "Role",
    # Sections
    "PageModel",
    "Link",
    "NavBar",
    "Hero",
    "Feature",
    "Features",
    "PricingTier",
    "Pricing",
    "Testimonial",
    "Testimonials",
    "FaqItem",
    "Faq",
    "StatItem",
    "Stats",
    "Newsletter",
    "TeamMember",
    "Team",
    "LogoBar",
    "CtaBanner",
    "FooterColumn",
    "Footer",
    "ProductSection",
    "Review",
    "Reviews",
    "RelatedProduct",
    "RelatedProducts",
    # Pages
    "LandingContent",
    "ProductContent",
    "LandingPage",
    "ProductPage",
    "StructuredPage",
    "load_page",
    "dump_page",
    "page_to_json",
    "page_content",
    # Conversation / output
    "ConversationTurn",
    "ChatMessage",
    "RenderedArtifact",
]
