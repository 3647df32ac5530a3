"""Google Gemini backend implementation (google-genai SDK)."""

import logging
import threading
from typing import Any, NoReturn, Sequence

from ...config import EnvVar, get_environment
from ...core.errors import ConfigurationError
from ...schema import Role
from .base import ChatMessage, LLMBackend, SamplingParams, map_provider_error, require_text
from .model_spec import LLMProviderType, resolve_spec

logger = logging.getLogger(__name__)

# Gemini names the assistant side of a conversation "model"
_ROLE_MAP = {Role.USER: "user", Role.ASSISTANT: "model"}


class GeminiBackend(LLMBackend):
    """Google Gemini backend.

    The system prompt goes into `system_instruction`. Prior turns become the
    chat history and the last message is the new user turn.

    Environment:
        GEMINI_API_KEY: API key (required if not passed to constructor).
        GEMINI_MODEL: Optional model override.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize Gemini backend.

        Args:
            api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
            model: Model name. Falls back to GEMINI_MODEL, then the default.
            timeout: Request timeout in seconds. Falls back to LLM_TIMEOUT.

        Raises:
            ConfigurationError: If no API key available.
        """
        self._api_key = api_key or get_environment(EnvVar.GEMINI_API_KEY)
        if not self._api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set in environment variables.")

        self._spec = resolve_spec(
            LLMProviderType.GEMINI, model or get_environment(EnvVar.GEMINI_MODEL)
        )
        self._timeout = timeout or get_environment(EnvVar.LLM_TIMEOUT)
        self._client: Any = None
        self._client_lock = threading.Lock()

    def _get_client(self) -> Any:
        """Lazily initialize the google-genai client.

        Returns:
            genai.Client instance.

        Raises:
            ImportError: If google-genai package not installed.
        """
        with self._client_lock:
            if self._client is None:
                try:
                    from google import genai
                    from google.genai import types
                except ImportError as e:
                    raise ImportError(
                        "google-genai package required. Install with: pip install google-genai"
                    ) from e
                # HttpOptions.timeout is in milliseconds
                self._client = genai.Client(
                    api_key=self._api_key,
                    http_options=types.HttpOptions(timeout=int(self._timeout * 1000)),
                )
        return self._client

    @property
    def model_name(self) -> str:
        """Get the model identifier."""
        return self._spec.name

    @property
    def provider(self) -> str:
        """Get the provider identifier."""
        return LLMProviderType.GEMINI.value

    def complete(
        self,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        sampling: SamplingParams | None = None,
    ) -> str:
        """Run one completion through generate_content."""
        from google.genai import types

        sampling = sampling or SamplingParams()
        client = self._get_client()

        contents = [
            types.Content(
                role=_ROLE_MAP[message.role],
                parts=[types.Part(text=message.content)],
            )
            for message in messages
        ]
        config = types.GenerateContentConfig(
            system_instruction=system_prompt,
            max_output_tokens=sampling.max_output_tokens,
            temperature=sampling.temperature,
        )

        try:
            response = client.models.generate_content(
                model=self._spec.name,
                contents=contents,
                config=config,
            )
        except Exception as e:
            self._handle_error(e)

        return require_text(getattr(response, "text", None))

    def _handle_error(self, error: Exception) -> NoReturn:
        """Convert provider errors to the shopforge error taxonomy.

        Raises:
            ShopForgeError: Always; the mapped error.
        """
        mapped = map_provider_error(error, self.provider)
        logger.warning(f"{self.name} call failed: {type(mapped).__name__}")
        raise mapped from error


__all__ = ["GeminiBackend"]
