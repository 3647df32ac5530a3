"""Section merge engine for incremental page edits.

When a user inserts or replaces one section, the model returns a whole page.
Models routinely drop or blank out sections they were not asked to touch, so
the proposal is never taken wholesale. Each section is decided on its own:
the proposed value wins only when it carries real content, otherwise the
original section is kept.
"""

import logging
from typing import Any, Callable

from pydantic import BaseModel

from shopforge.schema import (
    CtaBanner,
    Faq,
    Features,
    Footer,
    Hero,
    LandingContent,
    LandingPage,
    LogoBar,
    NavBar,
    Newsletter,
    Pricing,
    ProductContent,
    ProductPage,
    ProductSection,
    RelatedProducts,
    Reviews,
    Stats,
    Team,
    Testimonials,
)

logger = logging.getLogger(__name__)

SectionRule = Callable[[Any], bool]


# =============================================================================
# Section Predicates
# =============================================================================


def _nav_ok(nav: NavBar) -> bool:
    return bool(nav.links)


def _hero_ok(hero: Hero) -> bool:
    return bool(hero.headline.strip())


def _features_ok(features: Features) -> bool:
    return bool(features.features)


def _pricing_ok(pricing: Pricing) -> bool:
    return bool(pricing.tiers)


def _testimonials_ok(testimonials: Testimonials) -> bool:
    return bool(testimonials.testimonials)


def _faq_ok(faq: Faq) -> bool:
    return bool(faq.items)


def _stats_ok(stats: Stats) -> bool:
    return bool(stats.items)


def _newsletter_ok(newsletter: Newsletter) -> bool:
    return bool(newsletter.heading.strip())


def _team_ok(team: Team) -> bool:
    return bool(team.members)


def _logo_bar_ok(logo_bar: LogoBar) -> bool:
    return bool(logo_bar.logos)


def _cta_banner_ok(cta: CtaBanner) -> bool:
    return bool(cta.headline.strip())


def _footer_ok(footer: Footer) -> bool:
    return bool(footer.columns)


def _product_section_ok(section: ProductSection) -> bool:
    return bool(section.title.strip()) and bool(section.images)


def _reviews_ok(reviews: Reviews) -> bool:
    return bool(reviews.reviews)


def _related_ok(related: RelatedProducts) -> bool:
    return bool(related.items)


# Section key (JSON spelling) -> "proposal is usable" predicate
LANDING_SECTION_RULES: dict[str, SectionRule] = {
    "nav": _nav_ok,
    "hero": _hero_ok,
    "features": _features_ok,
    "pricing": _pricing_ok,
    "testimonials": _testimonials_ok,
    "faq": _faq_ok,
    "stats": _stats_ok,
    "newsletter": _newsletter_ok,
    "team": _team_ok,
    "logoBar": _logo_bar_ok,
    "ctaBanner": _cta_banner_ok,
    "footer": _footer_ok,
}

PRODUCT_SECTION_RULES: dict[str, SectionRule] = {
    "nav": _nav_ok,
    "productSection": _product_section_ok,
    "reviews": _reviews_ok,
    "relatedProducts": _related_ok,
    "footer": _footer_ok,
}


# =============================================================================
# Merge
# =============================================================================


def _field_names(model: type[BaseModel]) -> dict[str, str]:
    """Map JSON keys to attribute names for a content model."""
    return {(info.alias or name): name for name, info in model.model_fields.items()}


_LANDING_FIELDS = _field_names(LandingContent)
_PRODUCT_FIELDS = _field_names(ProductContent)


def _merge_content(
    original: BaseModel,
    proposed: BaseModel | None,
    rules: dict[str, SectionRule],
    fields: dict[str, str],
) -> BaseModel:
    updates: dict[str, Any] = {}
    for key, rule in rules.items():
        attr = fields[key]
        candidate = getattr(proposed, attr) if proposed is not None else None
        if candidate is not None and rule(candidate):
            updates[attr] = candidate
        else:
            updates[attr] = getattr(original, attr)
            if candidate is not None:
                logger.debug(f"Keeping original '{key}': proposed section is empty")
    return original.model_copy(update=updates)


def merge_pages(
    original: LandingPage | ProductPage,
    proposed: LandingPage | ProductPage,
) -> LandingPage | ProductPage:
    """Merge a model-proposed page into the original, section by section.

    pageType and preset always come from the original. The title comes from
    the proposal when it is non-empty. A proposal of a different page type
    contributes only its title.

    Args:
        original: The page being edited.
        proposed: The full page returned by the model.

    Returns:
        The merged page. If the original has no content branch, the proposal
        is returned unchanged.
    """
    title = proposed.title if proposed.title.strip() else original.title

    if isinstance(original, LandingPage):
        if original.landing is None:
            return proposed
        candidate = proposed.landing if isinstance(proposed, LandingPage) else None
        content = _merge_content(
            original.landing, candidate, LANDING_SECTION_RULES, _LANDING_FIELDS
        )
        return original.model_copy(update={"title": title, "landing": content})

    if original.product is None:
        return proposed
    candidate = proposed.product if isinstance(proposed, ProductPage) else None
    content = _merge_content(
        original.product, candidate, PRODUCT_SECTION_RULES, _PRODUCT_FIELDS
    )
    return original.model_copy(update={"title": title, "product": content})


__all__ = [
    "SectionRule",
    "LANDING_SECTION_RULES",
    "PRODUCT_SECTION_RULES",
    "merge_pages",
]
