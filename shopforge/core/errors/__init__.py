"""Error taxonomy and user-facing error categories."""

from .lib import (
    ERROR_MESSAGES,
    ConfigurationError,
    EmptyCompletionError,
    ErrorInfo,
    ErrorKind,
    ParseError,
    ProviderBillingError,
    ProviderError,
    ProviderRateLimitError,
    RenderError,
    RequestError,
    ShopForgeError,
    ValidationError,
    VariantsFailedError,
    describe_error,
)

__all__ = [
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
    "ErrorKind",
    "ErrorInfo",
    "describe_error",
]
