"""LLM integration layer for page generation.

Main components:
- PageGenerator: Orchestrates prompts, provider calls, parsing, validation
  and rendering with typed retries
- LLMBackend: Abstract interface for LLM providers
- BackendRegistry: Thread-safe cache of constructed backends

Supported providers:
- Anthropic (default)
- OpenAI
- Google Gemini
- Groq (OpenAI-compatible endpoint)

Example:
    >>> from shopforge.llm import BackendRegistry, PageGenerator
    >>> generator = PageGenerator(BackendRegistry())
    >>> output = generator.generate(turns, "landing", preset="luxury")
    >>> print(output.html[:15])
"""

from .backend import (
    DEFAULT_MODEL,
    DEFAULT_MODELS,
    DEFAULT_PROVIDER,
    BackendRegistry,
    ChatMessage,
    LLMBackend,
    LLMModel,
    LLMProviderType,
    LLMSpec,
    SamplingParams,
    create_llm_backend,
    get_llm_spec,
    resolve_provider,
)
from .generator import (
    INVALID_PAGE_TYPE,
    VARIANT_PRESETS,
    GenerationOutput,
    GenerationStats,
    GeneratorConfig,
    PageGenerator,
    RetryPolicy,
    VariantOutput,
    VariantPreset,
    coerce_page_type,
)

__all__ = [
    # Main API
    "PageGenerator",
    "BackendRegistry",
    "create_llm_backend",
    "resolve_provider",
    # Generator types
    "GeneratorConfig",
    "GenerationStats",
    "GenerationOutput",
    "VariantPreset",
    "VariantOutput",
    "VARIANT_PRESETS",
    "RetryPolicy",
    "coerce_page_type",
    "INVALID_PAGE_TYPE",
    # Backend types
    "LLMBackend",
    "ChatMessage",
    "SamplingParams",
    # Model specification
    "LLMProviderType",
    "LLMSpec",
    "LLMModel",
    "get_llm_spec",
    "DEFAULT_PROVIDER",
    "DEFAULT_MODEL",
    "DEFAULT_MODELS",
]
