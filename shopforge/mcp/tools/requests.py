"""Request models and error responses shared by the MCP tools.

Tool inputs arrive as camelCase JSON objects (the web client's shape) or as
snake_case keyword dicts (the CLI). Both are accepted.
"""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from shopforge.core.errors import RequestError, ShopForgeError, describe_error
from shopforge.schema import (
    ConversationTurn,
    LandingPage,
    PageType,
    ProductPage,
    RenderedArtifact,
    load_page,
)

logger = logging.getLogger(__name__)


class ToolRequest(BaseModel):
    """Base for tool requests: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class GenerateRequest(ToolRequest):
    """Generate or refine a page from a conversation.

    When `current_page_data` is given on a refinement, the conversation is
    compacted to the original request, the current page and the new request.
    `current_code` stands in as that anchor when no page data is available.
    """

    messages: list[ConversationTurn] = Field(default_factory=list)
    page_type: str | None = None
    reference_url: str | None = None
    preset: str | None = None
    current_page_data: dict[str, Any] | None = None
    current_code: RenderedArtifact | None = None


class VariantsRequest(ToolRequest):
    """Generate one page per style preset from a single request."""

    message: str = ""
    page_type: str | None = None
    reference_url: str | None = None


class InsertRequest(ToolRequest):
    """Add or update one section of an existing page.

    Either `section_id` names a catalog template, or `section_prompt` and
    `section_label` describe the section directly. Explicit values win over
    the template's.
    """

    current_page_data: dict[str, Any] = Field(default_factory=dict)
    section_id: str | None = None
    section_prompt: str | None = None
    section_label: str | None = None
    page_type: str | None = None
    preset: str | None = None


R = TypeVar("R", bound=ToolRequest)


def parse_request(model: type[R], request: R | Mapping[str, Any]) -> R:
    """Validate a raw request into its model.

    Raises:
        RequestError: If the request does not fit the model.
    """
    if isinstance(request, model):
        return request
    try:
        return model.model_validate(request)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "request"
        raise RequestError(f"Invalid request: {location}: {first['msg']}") from e


def load_current_page(
    data: Mapping[str, Any], page_type: PageType
) -> LandingPage | ProductPage:
    """Load caller-supplied page data, which must be of page_type.

    Raises:
        RequestError: If the data does not load or is another page type.
    """
    try:
        page = load_page({"pageType": page_type.value, **data})
    except PydanticValidationError:
        raise RequestError("Invalid current page data") from None
    if page.page_type != page_type.value:
        raise RequestError(f"Current page data is not a {page_type.value} page")
    return page


def error_response(exc: BaseException, action: str) -> dict[str, str]:
    """Log a tool failure and return its caller-safe description."""
    info = describe_error(exc)
    if isinstance(exc, RequestError):
        logger.info(f"Rejected {action} request: {exc}")
    elif isinstance(exc, ShopForgeError):
        logger.warning(f"{action} failed ({info.error_kind.value}): {exc}")
    else:
        logger.exception(f"Unexpected error during {action}")
    return info.to_dict()


__all__ = [
    "ToolRequest",
    "GenerateRequest",
    "VariantsRequest",
    "InsertRequest",
    "parse_request",
    "load_current_page",
    "error_response",
]
