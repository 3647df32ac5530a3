"""Backend factory for creating LLM backends by provider.

Provides a unified entry point for creating any supported LLM backend.
"""

from typing import Any

from ...config import EnvVar, get_environment
from .base import LLMBackend
from .model_spec import DEFAULT_PROVIDER, LLMProviderType


def resolve_provider(value: Any) -> LLMProviderType:
    """Map an AI_PROVIDER setting to a provider.

    `openai`, `gemini` and `groq` select that backend. Anything else,
    including an unset or unrecognized value, selects Anthropic.

    Args:
        value: Raw configuration value.

    Returns:
        The selected provider.
    """
    if isinstance(value, LLMProviderType):
        return value
    normalized = str(value or "").strip().lower()
    for provider in LLMProviderType:
        if provider.value == normalized:
            return provider
    return DEFAULT_PROVIDER


def parse_provider(value: str | LLMProviderType) -> LLMProviderType:
    """Strictly parse an explicitly requested provider name.

    Raises:
        ValueError: If the name is not a known provider.
    """
    if isinstance(value, LLMProviderType):
        return value
    try:
        return LLMProviderType(value.strip().lower())
    except ValueError:
        known = ", ".join(p.value for p in LLMProviderType)
        raise ValueError(f"Unknown provider: {value}. Expected one of: {known}") from None


def create_llm_backend(
    provider: str | LLMProviderType | None = None,
    *,
    model: str | None = None,
    api_key: str | None = None,
    timeout: float | None = None,
) -> LLMBackend:
    """Create an LLM backend for a provider.

    Routes to the backend class for the provider, importing it lazily so
    that only the selected SDK is loaded.

    Args:
        provider: Provider name or type. None reads AI_PROVIDER.
        model: Model name. None uses the provider's configured or default model.
        api_key: API key. Falls back to the provider's environment variable.
        timeout: Per-call timeout in seconds. Falls back to LLM_TIMEOUT.

    Returns:
        Configured LLMBackend instance.

    Raises:
        ValueError: If an explicit provider name is unknown.
        ConfigurationError: If the provider's API key is missing.

    Example:
        >>> backend = create_llm_backend()  # AI_PROVIDER, default anthropic
        >>> backend = create_llm_backend("groq", model="llama-3.1-8b-instant")
    """
    if provider is None:
        provider_type = resolve_provider(get_environment(EnvVar.AI_PROVIDER))
    else:
        provider_type = parse_provider(provider)

    if provider_type == LLMProviderType.ANTHROPIC:
        from .anthropic import AnthropicBackend

        return AnthropicBackend(api_key=api_key, model=model, timeout=timeout)

    if provider_type == LLMProviderType.OPENAI:
        from .openai import OpenAIBackend

        return OpenAIBackend(api_key=api_key, model=model, timeout=timeout)

    if provider_type == LLMProviderType.GEMINI:
        from .gemini import GeminiBackend

        return GeminiBackend(api_key=api_key, model=model, timeout=timeout)

    if provider_type == LLMProviderType.GROQ:
        from .groq import GroqBackend

        return GroqBackend(api_key=api_key, model=model, timeout=timeout)

    raise ValueError(f"Unsupported provider type: {provider_type}")


__all__ = ["resolve_provider", "parse_provider", "create_llm_backend"]
