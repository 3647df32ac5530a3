"""Core utilities shared by every shopforge module."""

from .errors import (
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
from .log import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
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
