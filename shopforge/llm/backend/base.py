"""Abstract base class for LLM backends.

A backend turns (system prompt, messages, sampling) into raw completion text
with exactly one outbound call. Retrying, parsing and validation belong to
the orchestrator.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence

from ...core.errors import (
    ConfigurationError,
    EmptyCompletionError,
    ProviderBillingError,
    ProviderError,
    ProviderRateLimitError,
    ShopForgeError,
)
from ...schema import ChatMessage

DEFAULT_MAX_OUTPUT_TOKENS = 8192

_BILLING_MARKERS = ("credit balance", "insufficient_quota", "billing", "credits")


@dataclass(frozen=True)
class SamplingParams:
    """Sampling settings for one provider call.

    Attributes:
        temperature: Sampling temperature.
        max_output_tokens: Maximum tokens to generate.
    """

    temperature: float = 0.7
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS


class LLMBackend(ABC):
    """Abstract interface for LLM completion backends.

    Implementations wrap a provider SDK (Anthropic, OpenAI, Gemini, Groq).
    SDK clients are created lazily on first use, with SDK-level retries
    disabled and an explicit timeout.

    Example:
        >>> backend = AnthropicBackend()
        >>> text = backend.complete(
        ...     "You are ShopForge...",
        ...     [ChatMessage(role="user", content="A coffee shop")],
        ...     SamplingParams(temperature=0.7),
        ... )
    """

    @abstractmethod
    def complete(
        self,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        sampling: SamplingParams | None = None,
    ) -> str:
        """Run one completion.

        Args:
            system_prompt: System instruction.
            messages: Conversation, oldest first; the last message is the new turn.
            sampling: Sampling settings.

        Returns:
            Trimmed completion text.

        Raises:
            ConfigurationError: If the credential is missing or rejected.
            ProviderRateLimitError: If the provider rate limit is hit.
            ProviderBillingError: If the account is out of credit.
            EmptyCompletionError: If the provider returns no text.
            ProviderError: For any other provider failure.
        """

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Get the model identifier."""

    @property
    @abstractmethod
    def provider(self) -> str:
        """Get the provider identifier (e.g. 'anthropic')."""

    @property
    def name(self) -> str:
        """Get backend identifier for logging, as 'provider:model'."""
        return f"{self.provider}:{self.model_name}"


# =============================================================================
# Error Mapping
# =============================================================================


def _retry_after(error: Exception) -> float | None:
    response = getattr(error, "response", None)
    headers = getattr(response, "headers", None)
    if not headers:
        return None
    try:
        return float(headers.get("retry-after"))
    except (TypeError, ValueError):
        return None


def map_provider_error(error: Exception, provider: str) -> ShopForgeError:
    """Convert an SDK exception into the pipeline's error taxonomy.

    Works on the Anthropic, OpenAI and google-genai exception types through
    their shared shape: an HTTP status on `status_code` (or `code`) and an
    optional `response` carrying headers.

    Args:
        error: Exception raised by the SDK.
        provider: Provider name, for the message.

    Returns:
        The mapped ShopForgeError (not raised).
    """
    status = getattr(error, "status_code", None)
    if not isinstance(status, int):
        status = getattr(error, "code", None)
    if not isinstance(status, int):
        status = None
    text = str(error)
    lowered = text.lower()
    message = f"{provider} request failed: {text}"

    if status == 402 or any(marker in lowered for marker in _BILLING_MARKERS):
        return ProviderBillingError(message)
    if status in (401, 403) or "api key" in lowered or "authentication" in lowered:
        return ConfigurationError(message)
    if status == 429 or "rate limit" in lowered or "rate_limit" in lowered:
        return ProviderRateLimitError(message, retry_after=_retry_after(error))
    return ProviderError(message)


def require_text(text: Any) -> str:
    """Return trimmed completion text, or raise if there is none."""
    if not isinstance(text, str) or not text.strip():
        raise EmptyCompletionError("Provider returned an empty completion")
    return text.strip()


__all__ = [
    "ChatMessage",
    "SamplingParams",
    "LLMBackend",
    "DEFAULT_MAX_OUTPUT_TOKENS",
    "map_provider_error",
    "require_text",
]
