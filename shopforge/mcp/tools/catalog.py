"""Section template listing tool for MCP server."""

from typing import Any

from shopforge.catalog import SectionTemplate, list_templates
from shopforge.llm import coerce_page_type

from .requests import error_response


def template_to_dict(template: SectionTemplate) -> dict[str, str]:
    """Serialize a catalog entry to its JSON form."""
    return {
        "id": template.id,
        "label": template.label,
        "description": template.description,
        "icon": template.icon,
        "category": template.category,
        "pageType": template.page_type.value,
        "sectionKey": template.section_key,
    }


def list_section_templates(page_type: str | None = None) -> dict[str, Any]:
    """List the sections that insert_section can add.

    Args:
        page_type: "landing" or "product". None lists every template.

    Returns:
        {"templates": [...]} in catalog order, or errorKind and message
        for an invalid page type.
    """
    try:
        kind = coerce_page_type(page_type) if page_type is not None else None
    except Exception as e:
        return error_response(e, "template listing")
    return {"templates": [template_to_dict(t) for t in list_templates(kind)]}


__all__ = ["list_section_templates", "template_to_dict"]
