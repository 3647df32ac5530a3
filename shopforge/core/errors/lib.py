"""Exception hierarchy for the generation pipeline.

Every failure the pipeline can produce is a ShopForgeError subclass carrying
two class-level facts:

    retryable: whether the orchestrator may re-attempt the request.
    error_kind: the user-facing category the failure resolves to.

Callers never inspect error message text to decide what to do; they read
these attributes, or call describe_error() for a stable human message.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """User-facing failure categories."""

    AUTH_CONFIGURATION = "auth-configuration"
    RATE_LIMITED = "rate-limited"
    BILLING = "billing"
    MALFORMED_OUTPUT = "malformed-output"
    INVALID_REQUEST = "invalid-request"
    UNKNOWN = "unknown"


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.AUTH_CONFIGURATION: (
        "API key error: check that the API key for the selected provider "
        "is configured."
    ),
    ErrorKind.RATE_LIMITED: "Rate limit reached. Please wait a moment and try again.",
    ErrorKind.BILLING: "Insufficient credits. Please top up your API account.",
    ErrorKind.MALFORMED_OUTPUT: (
        "AI had trouble formatting the response. Please try again."
    ),
    ErrorKind.INVALID_REQUEST: "Invalid request.",
    ErrorKind.UNKNOWN: "Failed to generate page. Please try again.",
}


class ShopForgeError(Exception):
    """Base exception for all pipeline errors."""

    retryable: bool = False
    error_kind: ErrorKind = ErrorKind.UNKNOWN


class ConfigurationError(ShopForgeError):
    """Raised when a provider credential is missing or rejected."""

    error_kind = ErrorKind.AUTH_CONFIGURATION


class ProviderError(ShopForgeError):
    """Raised when a provider call fails for a non-specific reason."""


class ProviderRateLimitError(ProviderError):
    """Raised when the provider rate limit is exceeded.

    Attributes:
        retry_after: Suggested wait time in seconds, when the provider sends one.
    """

    error_kind = ErrorKind.RATE_LIMITED

    def __init__(self, message: str, retry_after: float | None = None):
        super().__init__(message)
        self.retry_after = retry_after


class ProviderBillingError(ProviderError):
    """Raised when the provider account has no remaining credit."""

    error_kind = ErrorKind.BILLING


class EmptyCompletionError(ProviderError):
    """Raised when a provider returns no usable text content."""


class ParseError(ShopForgeError):
    """Raised when model output cannot be turned into a JSON page object."""

    retryable = True
    error_kind = ErrorKind.MALFORMED_OUTPUT


class ValidationError(ShopForgeError):
    """Raised when a parsed page is missing a required field.

    Attributes:
        path: Dotted path of the offending field (e.g. "pricing.tiers").
    """

    retryable = True
    error_kind = ErrorKind.MALFORMED_OUTPUT

    def __init__(self, path: str, message: str | None = None):
        super().__init__(message or f"{path} is empty")
        self.path = path


class RenderError(ShopForgeError):
    """Raised when a page cannot be rendered despite passing validation."""


class RequestError(ShopForgeError):
    """Raised when an inbound request is malformed."""

    error_kind = ErrorKind.INVALID_REQUEST


class VariantsFailedError(ShopForgeError):
    """Raised when every variant in a fan-out fails.

    Attributes:
        errors: Per-variant errors in preset order.
    """

    def __init__(self, errors: list[ShopForgeError]):
        super().__init__(f"All {len(errors)} variants failed")
        self.errors = errors
        if errors:
            self.error_kind = errors[0].error_kind


@dataclass(frozen=True)
class ErrorInfo:
    """Stable, caller-safe description of a failure."""

    error_kind: ErrorKind
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"errorKind": self.error_kind.value, "message": self.message}


def describe_error(exc: BaseException) -> ErrorInfo:
    """Map any exception to a stable error category and message.

    Provider-internal text is never exposed. Request errors keep their own
    message since it was written for the caller.

    Args:
        exc: The exception to describe.

    Returns:
        ErrorInfo with the category and human-readable message.
    """
    if isinstance(exc, RequestError):
        return ErrorInfo(ErrorKind.INVALID_REQUEST, str(exc))
    if isinstance(exc, ShopForgeError):
        return ErrorInfo(exc.error_kind, ERROR_MESSAGES[exc.error_kind])
    return ErrorInfo(ErrorKind.UNKNOWN, ERROR_MESSAGES[ErrorKind.UNKNOWN])


__all__ = [
    "ErrorKind",
    "ErrorInfo",
    "ERROR_MESSAGES",
    "ShopForgeError",
    "ConfigurationError",
    "ProviderError",
    "ProviderRateLimitError",
    "ProviderBillingError",
    "EmptyCompletionError",
    "ParseError",
    "ValidationError",
    "RenderError",
    "RequestError",
    "VariantsFailedError",
    "describe_error",
]
