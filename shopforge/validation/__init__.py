"""Schema validation of parsed pages.

Example:
    >>> from shopforge.validation import collect_issues
    >>> for issue in collect_issues(page):
    ...     print(issue.message)
    pricing.tiers is empty
"""

from .lib import ValidationIssue, collect_issues, is_valid, validate_page

__all__ = [
    "ValidationIssue",
    "collect_issues",
    "validate_page",
    "is_valid",
]
