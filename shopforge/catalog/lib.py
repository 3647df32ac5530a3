"""Catalog of insertable page sections.

Each SectionTemplate names one section a user can add or replace, and carries
the natural-language instruction sent to the model by the insertion flow.
The catalog is static data; the prompt text is the only part the pipeline
consumes.
"""

from dataclasses import dataclass

from shopforge.schema import PageType


@dataclass(frozen=True)
class SectionTemplate:
    """A catalog entry for an insertable section.

    Attributes:
        id: Stable identifier (e.g. 'pricing-3col').
        label: Display label, also sent to the model as the section label.
        description: Short description for pickers.
        icon: Material Symbols icon name.
        category: Grouping for pickers (Hero, Features, Social Proof, ...).
        page_type: Page type the template applies to.
        section_key: StructuredPage section the template edits.
        prompt: Instruction sent to the model.
    """

    id: str
    label: str
    description: str
    icon: str
    category: str
    page_type: PageType
    section_key: str
    prompt: str


# =============================================================================
# Landing Sections
# =============================================================================

LANDING_TEMPLATES: tuple[SectionTemplate, ...] = (
    SectionTemplate(
        id="hero-centered",
        label="Hero - Centered",
        description="Full-height centered hero with gradient headline",
        icon="web_asset",
        category="Hero",
        page_type=PageType.LANDING,
        section_key="hero",
        prompt=(
            "Replace the current hero with a full-height centered hero. The page "
            "keeps exactly one hero. Write a large headline, a persuasive "
            "subheadline and two calls to action (primary and outline), keeping "
            "the brand colors, spacing and typography of the existing page."
        ),
    ),
    SectionTemplate(
        id="hero-split",
        label="Hero - Split",
        description="Two-column hero with image on right",
        icon="view_column",
        category="Hero",
        page_type=PageType.LANDING,
        section_key="hero",
        prompt=(
            "Replace the current hero with a two-column split hero: copy on the "
            "left and a large brand image on the right (set backgroundImage). "
            "The page keeps exactly one hero and its current palette."
        ),
    ),
    SectionTemplate(
        id="features-grid",
        label="Features - Grid",
        description="3-column feature cards with icons",
        icon="grid_view",
        category="Features",
        page_type=PageType.LANDING,
        section_key="features",
        prompt=(
            "Replace the features section with a three-column grid of feature "
            "cards, each with an emoji icon, a bold title and a description, plus "
            "a section label and heading. The features array must contain exactly "
            "3 objects with non-empty icon, title and description."
        ),
    ),
    SectionTemplate(
        id="features-list",
        label="Features - List",
        description="Alternating feature rows with images",
        icon="view_agenda",
        category="Features",
        page_type=PageType.LANDING,
        section_key="features",
        prompt=(
            "Replace the features section with a vertical list of 3 alternating "
            "rows that reads differently from a grid. The features array must "
            "contain exactly 3 objects with non-empty icon, title and description."
        ),
    ),
    SectionTemplate(
        id="pricing-3col",
        label="Pricing - 3 Tiers",
        description="Three pricing cards with highlighted middle",
        icon="payments",
        category="Pricing",
        page_type=PageType.LANDING,
        section_key="pricing",
        prompt=(
            "Replace the pricing section with three tiers (Starter, Pro, "
            "Enterprise). Only the middle tier has highlighted set to true. Each "
            "tier has name, price, period, a features list of at least 4 items "
            "and a ctaLabel. The tiers array must contain exactly 3 objects."
        ),
    ),
    SectionTemplate(
        id="testimonials",
        label="Testimonials",
        description="3 customer review cards",
        icon="format_quote",
        category="Social Proof",
        page_type=PageType.LANDING,
        section_key="testimonials",
        prompt=(
            "Replace the testimonials section with 3 believable customer quotes, "
            "each with quote, name, role and a portrait avatar URL. The "
            "testimonials array must contain exactly 3 objects."
        ),
    ),
    SectionTemplate(
        id="stats",
        label="Stats / Numbers",
        description="4 key metrics in a row",
        icon="bar_chart",
        category="Social Proof",
        page_type=PageType.LANDING,
        section_key="stats",
        prompt=(
            "Add a stats section with 4 impressive metrics for this brand, each "
            "with a short label and a value such as '10k+'. Leave the core "
            "sections untouched. The items array must contain exactly 4 objects."
        ),
    ),
    SectionTemplate(
        id="cta-banner",
        label="CTA Banner",
        description="Full-width gradient call to action",
        icon="campaign",
        category="CTA",
        page_type=PageType.LANDING,
        section_key="ctaBanner",
        prompt=(
            "Replace the closing call-to-action banner. headline, subtext and "
            "ctaLabel must all be non-empty and on brand."
        ),
    ),
    SectionTemplate(
        id="newsletter",
        label="Newsletter",
        description="Email capture with input",
        icon="email",
        category="CTA",
        page_type=PageType.LANDING,
        section_key="newsletter",
        prompt=(
            "Add a newsletter signup section. heading, subtext, placeholder and "
            "buttonLabel must all be non-empty strings."
        ),
    ),
    SectionTemplate(
        id="faq",
        label="FAQ",
        description="Frequently asked questions",
        icon="help",
        category="Content",
        page_type=PageType.LANDING,
        section_key="faq",
        prompt=(
            "Add an FAQ section with 5 questions a customer of this brand would "
            "ask, each answered in 2-3 sentences. The items array must contain "
            "exactly 5 objects with non-empty question and answer."
        ),
    ),
    SectionTemplate(
        id="team",
        label="Team",
        description="Team member cards",
        icon="group",
        category="Content",
        page_type=PageType.LANDING,
        section_key="team",
        prompt=(
            "Add a team section with 3 members, each with name, role, a 1-2 "
            "sentence bio and a portrait,professional avatar URL. The members "
            "array must contain exactly 3 objects."
        ),
    ),
    SectionTemplate(
        id="logo-bar",
        label="Logo Bar",
        description="Trusted by / partner logos",
        icon="business",
        category="Social Proof",
        page_type=PageType.LANDING,
        section_key="logoBar",
        prompt=(
            "Add a 'Trusted by' logo bar with 5 plausible company names. The "
            "logos array must contain exactly 5 non-empty strings."
        ),
    ),
)

# =============================================================================
# Product Sections
# =============================================================================

PRODUCT_TEMPLATES: tuple[SectionTemplate, ...] = (
    SectionTemplate(
        id="product-hero",
        label="Product Display",
        description="Two-column product with images",
        icon="shopping_bag",
        category="Product",
        page_type=PageType.PRODUCT,
        section_key="productSection",
        prompt=(
            "Replace product.productSection with a refined two-column layout: "
            "image gallery on the left, details on the right (title, price, "
            "description, colors, sizes, buy button). Keep nav and footer."
        ),
    ),
    SectionTemplate(
        id="product-reviews",
        label="Product Reviews",
        description="Customer review cards",
        icon="star",
        category="Product",
        page_type=PageType.PRODUCT,
        section_key="reviews",
        prompt=(
            "Add or replace product.reviews with an average rating, a review "
            "count and 3 reviews, each with name, portrait avatar URL, rating "
            "(4 or 5), title and 2-3 sentences of text."
        ),
    ),
    SectionTemplate(
        id="related-products",
        label="Related Products",
        description="4 product recommendation cards",
        icon="grid_view",
        category="Product",
        page_type=PageType.PRODUCT,
        section_key="relatedProducts",
        prompt=(
            "Add or replace product.relatedProducts with 4 complementary "
            "products, each with title, image URL and price. The items array "
            "must contain exactly 4 objects."
        ),
    ),
)

_BY_ID: dict[str, SectionTemplate] = {
    t.id: t for t in LANDING_TEMPLATES + PRODUCT_TEMPLATES
}


def list_templates(page_type: PageType | str | None = None) -> list[SectionTemplate]:
    """List catalog entries, optionally filtered by page type.

    Args:
        page_type: Page type to filter by. None returns every template.

    Returns:
        Templates in catalog order.
    """
    if page_type is None:
        return list(LANDING_TEMPLATES + PRODUCT_TEMPLATES)
    if PageType(page_type) is PageType.LANDING:
        return list(LANDING_TEMPLATES)
    return list(PRODUCT_TEMPLATES)


def get_template(template_id: str) -> SectionTemplate:
    """Look up a template by id.

    Raises:
        KeyError: If no template has that id.
    """
    try:
        return _BY_ID[template_id]
    except KeyError:
        raise KeyError(f"Unknown section template: {template_id}") from None


__all__ = [
    "SectionTemplate",
    "LANDING_TEMPLATES",
    "PRODUCT_TEMPLATES",
    "list_templates",
    "get_template",
]
