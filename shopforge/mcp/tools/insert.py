"""Section insertion tool for MCP server."""

import logging
from collections.abc import Mapping
from typing import Any

from shopforge.catalog import get_template
from shopforge.core.errors import RequestError
from shopforge.llm import PageGenerator, coerce_page_type

from .requests import InsertRequest, error_response, load_current_page, parse_request

logger = logging.getLogger(__name__)


def _resolve_section(request: InsertRequest) -> tuple[str, str]:
    """Return (prompt, label), filling gaps from the catalog template."""
    prompt = request.section_prompt
    label = request.section_label
    if request.section_id:
        try:
            template = get_template(request.section_id)
        except KeyError:
            raise RequestError(f"Unknown section template: {request.section_id}") from None
        prompt = prompt or template.prompt
        label = label or template.label
    if not prompt or not prompt.strip():
        raise RequestError("No section prompt provided")
    return prompt, label or "Section"


def insert_section(
    request: InsertRequest | Mapping[str, Any],
    generator: PageGenerator | None = None,
) -> dict[str, Any]:
    """Add or update one section of an existing page.

    The model proposes a full page; it is merged into currentPageData so that
    every section the model left out is preserved.

    Args:
        request: InsertRequest or its JSON form:
            - currentPageData: The page's structuredPage.
            - sectionId: Optional catalog template id (see list_section_templates).
            - sectionPrompt / sectionLabel: Section instruction and label.
            - pageType: "landing" or "product".
            - preset: Optional style preset; defaults to the page's own.
        generator: Page generator to use. Creates one from the environment if None.

    Returns:
        On success the same fields as generate_page, for the merged page.
        On failure: errorKind and message.
    """
    try:
        parsed = parse_request(InsertRequest, request)
        page_type = coerce_page_type(parsed.page_type)
        prompt, label = _resolve_section(parsed)
        page = load_current_page(parsed.current_page_data, page_type)

        generator = generator or PageGenerator()
        output = generator.insert_section(
            page,
            prompt,
            label,
            page_type=page_type,
            preset=parsed.preset,
        )
    except Exception as e:
        return error_response(e, "section insertion")
    return output.to_dict()


__all__ = ["insert_section"]
