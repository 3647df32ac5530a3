"""Tolerant extraction of StructuredPage JSON from model output.

Models wrap JSON in code fences, prepend chatter, or leave raw control
characters inside string literals. parse_page() accepts all of those and
raises ParseError for anything it cannot turn into a page object.
"""

import json
import logging
import re
from typing import Any

import pydantic

from shopforge.core.errors import ParseError, ValidationError
from shopforge.schema import LandingPage, PageType, ProductPage, load_page

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^\s*```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```\s*$")

# Raw control characters that must be escaped inside JSON string literals
_STRING_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}

_PAGE_TYPES = frozenset(t.value for t in PageType)


# =============================================================================
# Text Helpers
# =============================================================================


def strip_code_fences(text: str) -> str:
    """Remove one leading and one trailing markdown code fence.

    Example:
        >>> strip_code_fences('```json\\n{"a": 1}\\n```')
        '{"a": 1}'
    """
    text = text.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def extract_json_object(text: str) -> str:
    """Slice text from the first '{' to the last '}'.

    Raises:
        ParseError: If the text has no brace pair.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise ParseError("no JSON found")
    return text[start : end + 1]


def repair_json_strings(text: str) -> str:
    """Escape raw newlines, carriage returns and tabs inside string literals.

    Characters outside strings are left alone, so pretty-printed JSON keeps
    its layout.
    """
    out: list[str] = []
    in_string = False
    escaped = False
    for char in text:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            elif char in _STRING_ESCAPES:
                out.append(_STRING_ESCAPES[char])
                continue
        elif char == '"':
            in_string = True
        out.append(char)
    return "".join(out)


# =============================================================================
# Parsing
# =============================================================================


def parse_json_object(raw_text: str) -> dict[str, Any]:
    """Decode model output into a page-shaped JSON object.

    Runs fence stripping, outer-span extraction, strict decoding, one repair
    pass on decode failure, and the pageType/title presence check.

    Args:
        raw_text: Raw completion text.

    Returns:
        Decoded JSON object.

    Raises:
        ParseError: If no usable JSON object can be recovered.
    """
    candidate = extract_json_object(strip_code_fences(raw_text))
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.debug(f"Strict JSON decode failed ({e}), repairing string literals")
        try:
            data = json.loads(repair_json_strings(candidate))
        except json.JSONDecodeError:
            raise ParseError("missing required fields") from e

    if (
        not isinstance(data, dict)
        or not data.get("pageType")
        or not data.get("title")
    ):
        raise ParseError("missing required fields")
    return data


def _error_path(error: pydantic.ValidationError) -> str:
    """Dotted path of the first error, relative to the content branch."""
    parts = [str(p) for p in error.errors()[0]["loc"]]
    # loc starts with the union tag, then the branch key ("landing", "landing", ...)
    if parts and parts[0] in _PAGE_TYPES:
        parts = parts[1:]
    if len(parts) > 1 and parts[0] in _PAGE_TYPES:
        parts = parts[1:]
    return ".".join(parts) or "page"


def parse_page(raw_text: str) -> LandingPage | ProductPage:
    """Parse raw model output into a StructuredPage.

    Args:
        raw_text: Raw completion text.

    Returns:
        LandingPage or ProductPage.

    Raises:
        ParseError: If no JSON object is found, it cannot be decoded, it
            lacks pageType/title, or pageType is unsupported.
        ValidationError: If a section has the wrong shape.
    """
    data = parse_json_object(raw_text)
    page_type = data["pageType"]
    if not isinstance(page_type, str) or page_type not in _PAGE_TYPES:
        raise ParseError(f"unsupported pageType: {page_type!r}")

    try:
        return load_page(data)
    except pydantic.ValidationError as e:
        path = _error_path(e)
        raise ValidationError(path, f"{path} has an invalid shape") from e


__all__ = [
    "strip_code_fences",
    "extract_json_object",
    "repair_json_strings",
    "parse_json_object",
    "parse_page",
]
