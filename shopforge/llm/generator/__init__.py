"""Page generation orchestrator.

Provides the PageGenerator class that drives prompt building, provider
calls, parsing, validation, merging and rendering with typed retries.
"""

from .lib import (
    INVALID_PAGE_TYPE,
    VARIANT_PRESETS,
    GenerationOutput,
    GenerationStats,
    GeneratorConfig,
    PageGenerator,
    VariantOutput,
    VariantPreset,
    coerce_page_type,
)
from .result import Fatal, Outcome, Retryable, Success, classify
from .retry import RetryPolicy

__all__ = [
    "PageGenerator",
    "GeneratorConfig",
    "GenerationStats",
    "GenerationOutput",
    "VariantPreset",
    "VariantOutput",
    "VARIANT_PRESETS",
    "INVALID_PAGE_TYPE",
    "coerce_page_type",
    "Success",
    "Retryable",
    "Fatal",
    "Outcome",
    "classify",
    "RetryPolicy",
]
