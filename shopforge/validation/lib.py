"""Required-field checks for parsed pages.

A page can load through the schema and still be unusable: the model may drop
a section or leave its list empty. These checks enforce the page contract for
the page's declared type only; optional sections are not inspected.

Paths are dotted camelCase keys relative to the content branch, e.g.
"pricing.tiers". A missing content branch is reported as "landing" or
"product".
"""

from dataclasses import dataclass

from shopforge.core.errors import ValidationError
from shopforge.schema import LandingContent, LandingPage, ProductContent, ProductPage


@dataclass(frozen=True)
class ValidationIssue:
    """A single contract violation.

    Attributes:
        path: Dotted path of the offending field.
        message: Human-readable description.
    """

    path: str
    message: str


def _empty(path: str) -> ValidationIssue:
    return ValidationIssue(path, f"{path} is empty")


def _missing(path: str) -> ValidationIssue:
    return ValidationIssue(path, f"{path} is missing")


def _landing_issues(landing: LandingContent) -> list[ValidationIssue]:
    issues = []
    if not (landing.nav and landing.nav.links):
        issues.append(_empty("nav.links"))
    if not (landing.hero and landing.hero.headline.strip()):
        issues.append(_empty("hero.headline"))
    if not (landing.features and landing.features.features):
        issues.append(_empty("features.features"))
    if not (landing.pricing and landing.pricing.tiers):
        issues.append(_empty("pricing.tiers"))
    if not (landing.testimonials and landing.testimonials.testimonials):
        issues.append(_empty("testimonials.testimonials"))
    if not (landing.cta_banner and landing.cta_banner.headline.strip()):
        issues.append(_empty("ctaBanner.headline"))
    if not (landing.footer and landing.footer.columns):
        issues.append(_empty("footer.columns"))
    return issues


def _product_issues(product: ProductContent) -> list[ValidationIssue]:
    issues = []
    if not (product.nav and product.nav.links):
        issues.append(_empty("nav.links"))
    section = product.product_section
    if not (section and section.title.strip()):
        issues.append(_empty("productSection.title"))
    if not (section and section.images):
        issues.append(_empty("productSection.images"))
    return issues


def collect_issues(page: LandingPage | ProductPage) -> list[ValidationIssue]:
    """Enumerate every required-field violation of a page.

    Args:
        page: Parsed page.

    Returns:
        Issues in contract order; empty when the page is valid.
    """
    if isinstance(page, LandingPage):
        if page.landing is None:
            return [_missing("landing")]
        return _landing_issues(page.landing)
    if page.product is None:
        return [_missing("product")]
    return _product_issues(page.product)


def validate_page(page: LandingPage | ProductPage) -> None:
    """Raise for the first required-field violation.

    Raises:
        ValidationError: Naming the first offending path.
    """
    issues = collect_issues(page)
    if issues:
        first = issues[0]
        raise ValidationError(first.path, first.message)


def is_valid(page: LandingPage | ProductPage) -> bool:
    return not collect_issues(page)


__all__ = [
    "ValidationIssue",
    "collect_issues",
    "validate_page",
    "is_valid",
]
