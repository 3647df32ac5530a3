"""MCP tool implementations.

Plain functions behind the FastMCP tools and the CLI. Every tool takes a
request dict (camelCase or snake_case keys) and an optional PageGenerator,
and returns a JSON-ready dict. Failures come back as {errorKind, message};
tools never raise.

Example:
    >>> from shopforge.mcp.tools import generate_page
    >>> result = generate_page({"messages": [...], "pageType": "landing"})
    >>> result.get("errorKind")  # None on success
"""

from .catalog import list_section_templates, template_to_dict
from .generate import generate_page, generate_variants
from .insert import insert_section
from .requests import (
    GenerateRequest,
    InsertRequest,
    ToolRequest,
    VariantsRequest,
    error_response,
    load_current_page,
    parse_request,
)

__all__ = [
    "generate_page",
    "generate_variants",
    "insert_section",
    "list_section_templates",
    "template_to_dict",
    "ToolRequest",
    "GenerateRequest",
    "VariantsRequest",
    "InsertRequest",
    "parse_request",
    "load_current_page",
    "error_response",
]
