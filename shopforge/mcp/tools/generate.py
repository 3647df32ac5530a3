"""Page generation tools for MCP server.

generate_page creates (or refines) a page from a conversation;
generate_variants produces one page per style preset for comparison.
"""

import logging
from collections.abc import Mapping
from typing import Any

from shopforge.llm import PageGenerator, coerce_page_type
from shopforge.prompt import build_refinement_turns

from .requests import (
    GenerateRequest,
    VariantsRequest,
    error_response,
    load_current_page,
    parse_request,
)

logger = logging.getLogger(__name__)


def generate_page(
    request: GenerateRequest | Mapping[str, Any],
    generator: PageGenerator | None = None,
) -> dict[str, Any]:
    """Generate a page from a conversation.

    Args:
        request: GenerateRequest or its JSON form:
            - messages: Conversation turns ({role, content}); the last user
              turn is the request, earlier turns make it a refinement.
            - pageType: "landing" or "product".
            - referenceUrl: Optional design inspiration URL.
            - preset: Optional style preset (minimalist, bold, luxury, playful).
            - currentPageData: Optional structuredPage being refined. With more
              than one turn, it replaces the replayed history as context.
            - currentCode: Optional {componentCode, cssCode, title} of the page
              being refined, used as context when currentPageData is absent.
        generator: Page generator to use. Creates one from the environment if None.

    Returns:
        On success: html, componentCode, cssCode, title, structuredPage,
        providerUsed. On failure: errorKind and message.

    Example:
        >>> result = generate_page({
        ...     "messages": [{"role": "user", "content": "Coffee shop landing"}],
        ...     "pageType": "landing",
        ... })
        >>> result["componentCode"].startswith("function App()")
        True
    """
    try:
        parsed = parse_request(GenerateRequest, request)
        turns = parsed.messages
        if len(turns) > 1 and (parsed.current_page_data or parsed.current_code):
            page = None
            if parsed.current_page_data:
                page = load_current_page(
                    parsed.current_page_data, coerce_page_type(parsed.page_type)
                )
            turns = build_refinement_turns(
                turns[:-1], turns[-1], page_data=page, last_code=parsed.current_code
            )

        generator = generator or PageGenerator()
        output = generator.generate(
            turns,
            parsed.page_type,
            preset=parsed.preset,
            reference_url=parsed.reference_url,
        )
    except Exception as e:
        return error_response(e, "page generation")
    return output.to_dict()


def generate_variants(
    request: VariantsRequest | Mapping[str, Any],
    generator: PageGenerator | None = None,
) -> dict[str, Any]:
    """Generate three styled variants of a page concurrently.

    Args:
        request: VariantsRequest or its JSON form (message, pageType, referenceUrl).
        generator: Page generator to use. Creates one from the environment if None.

    Returns:
        On success: {"variants": [...]} in preset order, each carrying id,
        label, style, preset and the generate_page fields. Failed variants
        are omitted. On failure of every variant: errorKind and message.
    """
    try:
        parsed = parse_request(VariantsRequest, request)
        generator = generator or PageGenerator()
        variants = generator.generate_variants(
            parsed.message,
            parsed.page_type,
            reference_url=parsed.reference_url,
        )
    except Exception as e:
        return error_response(e, "variant generation")
    return {"variants": [variant.to_dict() for variant in variants]}


__all__ = ["generate_page", "generate_variants"]
