"""Structured page data model.

StructuredPage is the validated JSON intermediate representation produced by
the LLM and consumed by the validator, merge engine and renderer. It is a
closed tagged union over PageType:

    {"pageType": "landing", "title": ..., "landing": {...}}
    {"pageType": "product", "title": ..., "product": {...}}

JSON keys are camelCase; Python attributes are snake_case. Models accept
either spelling and always serialize with the camelCase aliases.

Model output is unreliable, so scalar fields are lenient: null text becomes
"", numbers become their string form, nested objects become compact JSON
text, null flags and counts fall back to their defaults, and an unknown
preset name is dropped. Section sub-objects that the page contract requires
are still typed optional here so that partial output can be loaded and then
reported by the validator with a precise path.
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, TypeVar, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
)
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class PageType(str, Enum):
    """Kinds of page the generator can produce."""

    LANDING = "landing"
    PRODUCT = "product"


class StylePreset(str, Enum):
    """Named visual themes applied at render time."""

    MINIMALIST = "minimalist"
    BOLD = "bold"
    LUXURY = "luxury"
    PLAYFUL = "playful"


DEFAULT_PRESET = StylePreset.BOLD


class Role(str, Enum):
    """Conversation participant."""

    USER = "user"
    ASSISTANT = "assistant"


# =============================================================================
# Lenient Field Types
# =============================================================================


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _coerce_optional_text(value: Any) -> str | None:
    return None if value is None else _coerce_text(value)


def _none_to_empty(value: Any) -> Any:
    return [] if value is None else value


def _known_preset(value: Any) -> Any:
    if isinstance(value, StylePreset):
        return value
    try:
        return StylePreset(value)
    except ValueError:
        return None


def _none_to(default: Any):
    def coerce(value: Any) -> Any:
        return default if value is None else value

    return coerce


Text = Annotated[str, BeforeValidator(_coerce_text)]
OptionalText = Annotated[str | None, BeforeValidator(_coerce_optional_text)]
Items = Annotated[list[T], BeforeValidator(_none_to_empty)]
Flag = Annotated[bool, BeforeValidator(_none_to(False))]
Count = Annotated[int, BeforeValidator(_none_to(0))]
Rating = Annotated[float, BeforeValidator(_none_to(0.0))]
KnownPreset = Annotated[StylePreset | None, BeforeValidator(_known_preset)]


class PageModel(BaseModel):
    """Base for all page models: camelCase aliases, immutable, extra keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# =============================================================================
# Section Value Types
# =============================================================================


class Link(PageModel):
    label: Text = ""
    href: Text = "#"


class NavBar(PageModel):
    logo: Text = ""
    links: Items[Link] = Field(default_factory=list)
    cta_label: Text = ""
    accent_color: Text = ""


class Hero(PageModel):
    headline: Text = ""
    subheadline: Text = ""
    primary_cta: Text = ""
    secondary_cta: Text = ""
    background_image: OptionalText = None


class Feature(PageModel):
    icon: Text = ""
    title: Text = ""
    description: Text = ""


class Features(PageModel):
    section_label: Text = ""
    heading: Text = ""
    features: Items[Feature] = Field(default_factory=list)


class PricingTier(PageModel):
    name: Text = ""
    price: Text = ""
    period: Text = ""
    features: Items[Text] = Field(default_factory=list)
    cta_label: Text = ""
    highlighted: Flag = False


class Pricing(PageModel):
    section_label: Text = ""
    heading: Text = ""
    tiers: Items[PricingTier] = Field(default_factory=list)


class Testimonial(PageModel):
    quote: Text = ""
    name: Text = ""
    role: Text = ""
    avatar: Text = ""


class Testimonials(PageModel):
    section_label: Text = ""
    heading: Text = ""
    testimonials: Items[Testimonial] = Field(default_factory=list)


class FaqItem(PageModel):
    question: Text = ""
    answer: Text = ""


class Faq(PageModel):
    section_label: Text = ""
    heading: Text = ""
    items: Items[FaqItem] = Field(default_factory=list)


class StatItem(PageModel):
    label: Text = ""
    value: Text = ""


class Stats(PageModel):
    heading: Text = ""
    items: Items[StatItem] = Field(default_factory=list)


class Newsletter(PageModel):
    heading: Text = ""
    subtext: Text = ""
    placeholder: Text = ""
    button_label: Text = ""


class TeamMember(PageModel):
    name: Text = ""
    role: Text = ""
    bio: Text = ""
    avatar: Text = ""


class Team(PageModel):
    heading: Text = ""
    members: Items[TeamMember] = Field(default_factory=list)


class LogoBar(PageModel):
    heading: Text = ""
    logos: Items[Text] = Field(default_factory=list)


class CtaBanner(PageModel):
    headline: Text = ""
    subtext: Text = ""
    cta_label: Text = ""


class FooterColumn(PageModel):
    heading: Text = ""
    links: Items[Link] = Field(default_factory=list)


class Footer(PageModel):
    logo: Text = ""
    columns: Items[FooterColumn] = Field(default_factory=list)
    copyright: Text = ""


class ProductSection(PageModel):
    title: Text = ""
    description: Text = ""
    price: Text = ""
    original_price: Text = ""
    images: Items[Text] = Field(default_factory=list)
    colors: Items[Text] = Field(default_factory=list)
    sizes: Items[Text] = Field(default_factory=list)
    cta_label: OptionalText = None


class Review(PageModel):
    """A single customer review; rating is always an int in 1..5."""

    name: Text = ""
    avatar: Text = ""
    rating: int = 5
    title: Text = ""
    text: Text = ""

    @field_validator("rating", mode="before")
    @classmethod
    def _clamp_rating(cls, value: Any) -> Any:
        if value is None:
            return 5
        if isinstance(value, (int, float, str)) and not isinstance(value, bool):
            try:
                return min(5, max(1, round(float(value))))
            except (ValueError, OverflowError):
                return value
        return value


class Reviews(PageModel):
    heading: Text = ""
    summary_text: Text = ""
    average_rating: Rating = 0.0
    review_count: Count = 0
    reviews: Items[Review] = Field(default_factory=list)

    @field_validator("average_rating")
    @classmethod
    def _clamp_average(cls, value: float) -> float:
        return min(5.0, max(0.0, value))


class RelatedProduct(PageModel):
    title: Text = ""
    image: Text = ""
    price: Text = ""


class RelatedProducts(PageModel):
    heading: Text = ""
    items: Items[RelatedProduct] = Field(default_factory=list)


# =============================================================================
# Page Content Branches
# =============================================================================


class LandingContent(PageModel):
    """Sections of a landing page.

    nav, hero, features, pricing, testimonials, cta_banner and footer are
    required by the page contract; the rest are optional.
    """

    nav: NavBar | None = None
    hero: Hero | None = None
    features: Features | None = None
    pricing: Pricing | None = None
    testimonials: Testimonials | None = None
    cta_banner: CtaBanner | None = None
    footer: Footer | None = None
    faq: Faq | None = None
    stats: Stats | None = None
    newsletter: Newsletter | None = None
    team: Team | None = None
    logo_bar: LogoBar | None = None


class ProductContent(PageModel):
    """Sections of a product page; nav and product_section are required."""

    nav: NavBar | None = None
    product_section: ProductSection | None = None
    reviews: Reviews | None = None
    related_products: RelatedProducts | None = None
    footer: Footer | None = None


class LandingPage(PageModel):
    page_type: Literal["landing"] = "landing"
    title: Text
    preset: KnownPreset = None
    landing: LandingContent | None = None


class ProductPage(PageModel):
    page_type: Literal["product"] = "product"
    title: Text
    preset: KnownPreset = None
    product: ProductContent | None = None


StructuredPage = Annotated[
    Union[LandingPage, ProductPage], Field(discriminator="page_type")
]

_PAGE_ADAPTER: TypeAdapter = TypeAdapter(StructuredPage)


def load_page(data: dict[str, Any]) -> LandingPage | ProductPage:
    """Validate a decoded JSON object into a StructuredPage.

    Args:
        data: Decoded JSON object with camelCase keys.

    Returns:
        LandingPage or ProductPage depending on pageType.

    Raises:
        pydantic.ValidationError: If the data does not fit the page model.
    """
    return _PAGE_ADAPTER.validate_python(data)


def dump_page(page: LandingPage | ProductPage) -> dict[str, Any]:
    """Serialize a page to its camelCase JSON form, omitting unset sections."""
    return page.model_dump(by_alias=True, exclude_none=True, mode="json")


def page_to_json(page: LandingPage | ProductPage, indent: int | None = None) -> str:
    """Serialize a page to a JSON string."""
    return json.dumps(dump_page(page), indent=indent, ensure_ascii=False)


def page_content(page: LandingPage | ProductPage) -> LandingContent | ProductContent | None:
    """Return the content branch matching the page type."""
    if isinstance(page, LandingPage):
        return page.landing
    return page.product


# =============================================================================
# Conversation and Artifacts
# =============================================================================


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConversationTurn(BaseModel):
    """One immutable message in a page conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    timestamp: datetime = Field(default_factory=_utcnow)


class ChatMessage(BaseModel):
    """A provider-bound message: the prompt-shaped form of a ConversationTurn."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class RenderedArtifact(PageModel):
    """Deterministic render output of a StructuredPage.

    Attributes:
        title: Page title.
        component_code: Self-contained `function App()` JSX component.
        css_code: Global stylesheet for the component.
    """

    title: str
    component_code: str
    css_code: str


__all__ = [
    "PageType",
    "StylePreset",
    "DEFAULT_PRESET",
    "Role",
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
    "LandingContent",
    "ProductContent",
    "LandingPage",
    "ProductPage",
    "StructuredPage",
    "load_page",
    "dump_page",
    "page_to_json",
    "page_content",
    "ConversationTurn",
    "ChatMessage",
    "RenderedArtifact",
]
