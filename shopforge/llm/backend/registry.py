"""Thread-safe cache of constructed LLM backends.

One registry is created by the caller and handed to the orchestrator; each
provider's backend is built at most once for the registry's lifetime.
"""

import logging
import threading
from typing import Callable

from ...config import EnvVar, get_environment
from .base import LLMBackend
from .factory import create_llm_backend, parse_provider, resolve_provider
from .model_spec import LLMProviderType

logger = logging.getLogger(__name__)

BackendFactory = Callable[[LLMProviderType], LLMBackend]


def _default_factory(provider: LLMProviderType) -> LLMBackend:
    return create_llm_backend(provider)


class BackendRegistry:
    """Maps provider names to lazily constructed, shared backends.

    Example:
        >>> registry = BackendRegistry()
        >>> backend = registry.get()  # provider from AI_PROVIDER
        >>> registry.register("anthropic", StubBackend(responses=[...]))
    """

    def __init__(
        self,
        factory: BackendFactory | None = None,
        default_provider: str | LLMProviderType | None = None,
    ):
        """Initialize registry.

        Args:
            factory: Builds a backend for a provider. Defaults to create_llm_backend.
            default_provider: Provider used when get() is called without one.
                None reads AI_PROVIDER at lookup time.
        """
        self._factory = factory or _default_factory
        self._default_provider = (
            parse_provider(default_provider) if default_provider is not None else None
        )
        self._backends: dict[LLMProviderType, LLMBackend] = {}
        self._lock = threading.Lock()

    def active_provider(self) -> LLMProviderType:
        """Get the provider used when none is requested."""
        if self._default_provider is not None:
            return self._default_provider
        return resolve_provider(get_environment(EnvVar.AI_PROVIDER))

    def get(self, provider: str | LLMProviderType | None = None) -> LLMBackend:
        """Get (building on first use) the backend for a provider.

        Args:
            provider: Provider name or type. None selects the active provider.

        Returns:
            Shared backend instance.

        Raises:
            ValueError: If an explicit provider name is unknown.
            ConfigurationError: If the backend cannot be configured.
        """
        provider_type = (
            self.active_provider() if provider is None else parse_provider(provider)
        )
        with self._lock:
            backend = self._backends.get(provider_type)
            if backend is None:
                backend = self._factory(provider_type)
                self._backends[provider_type] = backend
                logger.info(f"Initialized LLM backend {backend.name}")
        return backend

    def register(self, provider: str | LLMProviderType, backend: LLMBackend) -> None:
        """Install a prebuilt backend for a provider, replacing any cached one."""
        with self._lock:
            self._backends[parse_provider(provider)] = backend

    def clear(self) -> None:
        """Drop every cached backend."""
        with self._lock:
            self._backends.clear()


__all__ = ["BackendFactory", "BackendRegistry"]
