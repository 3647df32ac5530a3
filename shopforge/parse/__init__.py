"""Response parsing and JSON repair.

Example:
    >>> from shopforge.parse import parse_page
    >>> page = parse_page('```json\\n{"pageType": "landing", "title": "Cafe"}\\n```')
    >>> page.title
    'Cafe'
"""

from .lib import (
    extract_json_object,
    parse_json_object,
    parse_page,
    repair_json_strings,
    strip_code_fences,
)

__all__ = [
    "parse_page",
    "parse_json_object",
    "strip_code_fences",
    "extract_json_object",
    "repair_json_strings",
]
