"""Section-level merge of model proposals into existing pages.

Example:
    >>> from shopforge.merge import merge_pages
    >>> merged = merge_pages(current_page, proposed_page)
"""

from .lib import LANDING_SECTION_RULES, PRODUCT_SECTION_RULES, SectionRule, merge_pages

__all__ = [
    "SectionRule",
    "LANDING_SECTION_RULES",
    "PRODUCT_SECTION_RULES",
    "merge_pages",
]
