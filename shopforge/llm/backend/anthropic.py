"""Anthropic Claude backend implementation."""

import logging
import threading
from typing import Any, NoReturn, Sequence

import httpx

from ...config import EnvVar, get_environment
from ...core.errors import ConfigurationError, EmptyCompletionError
from .base import ChatMessage, LLMBackend, SamplingParams, map_provider_error, require_text
from .model_spec import LLMProviderType, resolve_spec

logger = logging.getLogger(__name__)


class AnthropicBackend(LLMBackend):
    """Anthropic Claude backend.

    The system prompt travels in the dedicated `system=` parameter. Only the
    first content block of the response is read, and it must be text.

    Environment:
        ANTHROPIC_API_KEY: API key (required if not passed to constructor).
        ANTHROPIC_MODEL: Optional model override.

    Example:
        >>> backend = AnthropicBackend()
        >>> text = backend.complete("You are ShopForge...", messages)
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize Anthropic backend.

        Args:
            api_key: Anthropic API key. Falls back to ANTHROPIC_API_KEY env var.
            model: Model name. Falls back to ANTHROPIC_MODEL, then the default.
            timeout: Request timeout in seconds. Falls back to LLM_TIMEOUT.

        Raises:
            ConfigurationError: If no API key available.
        """
        self._api_key = api_key or get_environment(EnvVar.ANTHROPIC_API_KEY)
        if not self._api_key:
            raise ConfigurationError(
                "ANTHROPIC_API_KEY is not set in environment variables."
            )

        self._spec = resolve_spec(
            LLMProviderType.ANTHROPIC,
            model or get_environment(EnvVar.ANTHROPIC_MODEL),
        )
        self._timeout = timeout or get_environment(EnvVar.LLM_TIMEOUT)
        self._client: Any = None
        self._client_lock = threading.Lock()

    def _get_client(self) -> Any:
        """Lazily initialize Anthropic client.

        Returns:
            Anthropic client instance.

        Raises:
            ImportError: If anthropic package not installed.
        """
        with self._client_lock:
            if self._client is None:
                try:
                    import anthropic
                except ImportError as e:
                    raise ImportError(
                        "anthropic package required. Install with: pip install anthropic"
                    ) from e
                self._client = anthropic.Anthropic(
                    api_key=self._api_key,
                    timeout=httpx.Timeout(self._timeout),
                    max_retries=0,
                )
        return self._client

    @property
    def model_name(self) -> str:
        """Get the model identifier."""
        return self._spec.name

    @property
    def provider(self) -> str:
        """Get the provider identifier."""
        return LLMProviderType.ANTHROPIC.value

    def complete(
        self,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        sampling: SamplingParams | None = None,
    ) -> str:
        """Run one completion through the Messages API."""
        sampling = sampling or SamplingParams()
        client = self._get_client()

        try:
            response = client.messages.create(
                model=self._spec.name,
                system=system_prompt,
                messages=[
                    {"role": message.role.value, "content": message.content}
                    for message in messages
                ],
                max_tokens=sampling.max_output_tokens,
                temperature=sampling.temperature,
            )
        except Exception as e:
            self._handle_error(e)

        blocks = response.content or []
        if not blocks or getattr(blocks[0], "type", None) != "text":
            raise EmptyCompletionError("Unexpected response type from Anthropic")
        return require_text(blocks[0].text)

    def _handle_error(self, error: Exception) -> NoReturn:
        """Convert provider errors to the shopforge error taxonomy.

        Raises:
            ShopForgeError: Always; the mapped error.
        """
        mapped = map_provider_error(error, self.provider)
        logger.warning(f"{self.name} call failed: {type(mapped).__name__}")
        raise mapped from error


__all__ = ["AnthropicBackend"]
