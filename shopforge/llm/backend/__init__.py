"""LLM backend implementations.

Provides the abstract backend interface and concrete implementations for
Anthropic, OpenAI, Gemini and Groq, plus the factory and backend registry.
"""

from .base import (
    DEFAULT_MAX_OUTPUT_TOKENS,
    ChatMessage,
    LLMBackend,
    SamplingParams,
    map_provider_error,
)
from .factory import create_llm_backend, parse_provider, resolve_provider
from .model_spec import (
    DEFAULT_ANTHROPIC_MODEL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_GROQ_MODEL,
    DEFAULT_MODEL,
    DEFAULT_MODELS,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_PROVIDER,
    LLMModel,
    LLMProviderType,
    LLMSpec,
    get_llm_spec,
    resolve_spec,
)
from .registry import BackendFactory, BackendRegistry

__all__ = [
    # Base classes and types
    "LLMBackend",
    "ChatMessage",
    "SamplingParams",
    "DEFAULT_MAX_OUTPUT_TOKENS",
    "map_provider_error",
    # Model specification
    "LLMProviderType",
    "LLMSpec",
    "LLMModel",
    "get_llm_spec",
    "resolve_spec",
    # Defaults
    "DEFAULT_PROVIDER",
    "DEFAULT_MODEL",
    "DEFAULT_MODELS",
    "DEFAULT_ANTHROPIC_MODEL",
    "DEFAULT_OPENAI_MODEL",
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_GROQ_MODEL",
    # Factory and registry
    "resolve_provider",
    "parse_provider",
    "create_llm_backend",
    "BackendFactory",
    "BackendRegistry",
]
