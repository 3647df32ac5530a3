"""OpenAI GPT backend implementation.

Also serves OpenAI-compatible endpoints through `base_url`.
"""

import logging
import threading
from typing import Any, NoReturn, Sequence

import httpx

from ...config import EnvVar, get_environment
from ...core.errors import ConfigurationError
from .base import ChatMessage, LLMBackend, SamplingParams, map_provider_error, require_text
from .model_spec import LLMProviderType, resolve_spec

logger = logging.getLogger(__name__)


class OpenAIBackend(LLMBackend):
    """OpenAI GPT backend.

    The system prompt is sent as a leading `system` message.

    Environment:
        OPENAI_API_KEY: API key (required if not passed to constructor).
        OPENAI_MODEL: Optional model override.

    Example:
        >>> backend = OpenAIBackend(model="gpt-4o-mini")
        >>> text = backend.complete("You are ShopForge...", messages)
    """

    provider_type = LLMProviderType.OPENAI
    api_key_var = EnvVar.OPENAI_API_KEY
    model_var = EnvVar.OPENAI_MODEL

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize OpenAI backend.

        Args:
            api_key: API key. Falls back to the `api_key_var` env var.
            model: Model name. Falls back to the `model_var` env var, then the
                provider default.
            base_url: Optional custom API endpoint. Falls back to the model's
                own endpoint, if it has one.
            timeout: Request timeout in seconds. Falls back to LLM_TIMEOUT.

        Raises:
            ConfigurationError: If no API key available.
        """
        self._api_key = api_key or get_environment(self.api_key_var)
        if not self._api_key:
            raise ConfigurationError(
                f"{self.api_key_var.value.name} is not set in environment variables."
            )

        self._spec = resolve_spec(
            self.provider_type, model or get_environment(self.model_var)
        )
        self._base_url = base_url or self._spec.base_url
        self._timeout = timeout or get_environment(EnvVar.LLM_TIMEOUT)
        self._client: Any = None
        self._client_lock = threading.Lock()

    def _get_client(self) -> Any:
        """Lazily initialize OpenAI client.

        Returns:
            OpenAI client instance.

        Raises:
            ImportError: If openai package not installed.
        """
        with self._client_lock:
            if self._client is None:
                try:
                    import openai
                except ImportError as e:
                    raise ImportError(
                        "openai package required. Install with: pip install openai"
                    ) from e
                self._client = openai.OpenAI(
                    api_key=self._api_key,
                    base_url=self._base_url,
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
        return self.provider_type.value

    def _system_content(self, system_prompt: str) -> str:
        return system_prompt

    def complete(
        self,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        sampling: SamplingParams | None = None,
    ) -> str:
        """Run one completion through the Chat Completions API."""
        sampling = sampling or SamplingParams()
        client = self._get_client()

        payload: list[dict[str, str]] = [
            {"role": "system", "content": self._system_content(system_prompt)}
        ]
        payload.extend(
            {"role": message.role.value, "content": message.content}
            for message in messages
        )

        try:
            response = client.chat.completions.create(
                model=self._spec.name,
                messages=payload,
                max_tokens=sampling.max_output_tokens,
                temperature=sampling.temperature,
            )
        except Exception as e:
            self._handle_error(e)

        content = response.choices[0].message.content if response.choices else None
        return require_text(content)

    def _handle_error(self, error: Exception) -> NoReturn:
        """Convert provider errors to the shopforge error taxonomy.

        Raises:
            ShopForgeError: Always; the mapped error.
        """
        mapped = map_provider_error(error, self.provider)
        logger.warning(f"{self.name} call failed: {type(mapped).__name__}")
        raise mapped from error


__all__ = ["OpenAIBackend"]
