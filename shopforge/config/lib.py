"""Centralized environment configuration management for shopforge.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from shopforge.config import EnvVar, get_environment
    >>>
    >>> provider = get_environment(EnvVar.AI_PROVIDER)  # "anthropic"
    >>> retries = get_environment(EnvVar.GENERATION_MAX_RETRIES)  # int: 3
    >>> delay = get_environment(EnvVar.RETRY_DELAY, override=0.0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "AI_PROVIDER").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, float, bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by shopforge.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - llm: Provider selection, API keys, model overrides, timeouts
        - generation: Retry budgets and rendering defaults
        - mcp: Tool server bind address and port
    """

    # -------------------------------------------------------------------------
    # Provider Selection
    # -------------------------------------------------------------------------
    AI_PROVIDER = EnvConfig(
        name="AI_PROVIDER",
        default="anthropic",
        var_type=str,
        description="LLM provider (anthropic, openai, gemini, groq)",
        category="llm",
    )

    # -------------------------------------------------------------------------
    # LLM API Keys
    # -------------------------------------------------------------------------
    ANTHROPIC_API_KEY = EnvConfig(
        name="ANTHROPIC_API_KEY",
        default=None,
        var_type=str,
        description="Anthropic API key for Claude models",
        category="llm",
    )
    OPENAI_API_KEY = EnvConfig(
        name="OPENAI_API_KEY",
        default=None,
        var_type=str,
        description="OpenAI API key for GPT models",
        category="llm",
    )
    GEMINI_API_KEY = EnvConfig(
        name="GEMINI_API_KEY",
        default=None,
        var_type=str,
        description="Google Gemini API key",
        category="llm",
    )
    GROQ_API_KEY = EnvConfig(
        name="GROQ_API_KEY",
        default=None,
        var_type=str,
        description="Groq API key for hosted open models",
        category="llm",
    )

    # -------------------------------------------------------------------------
    # Model Overrides (empty uses the provider default from the model registry)
    # -------------------------------------------------------------------------
    ANTHROPIC_MODEL = EnvConfig(
        name="ANTHROPIC_MODEL",
        default=None,
        var_type=str,
        description="Anthropic model override",
        category="llm",
    )
    OPENAI_MODEL = EnvConfig(
        name="OPENAI_MODEL",
        default=None,
        var_type=str,
        description="OpenAI model override",
        category="llm",
    )
    GEMINI_MODEL = EnvConfig(
        name="GEMINI_MODEL",
        default=None,
        var_type=str,
        description="Gemini model override",
        category="llm",
    )
    GROQ_MODEL = EnvConfig(
        name="GROQ_MODEL",
        default=None,
        var_type=str,
        description="Groq model override",
        category="llm",
    )
    LLM_TIMEOUT = EnvConfig(
        name="LLM_TIMEOUT",
        default=60.0,
        var_type=float,
        description="Per-call provider timeout in seconds",
        category="llm",
    )

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------
    GENERATION_MAX_RETRIES = EnvConfig(
        name="GENERATION_MAX_RETRIES",
        default=3,
        var_type=int,
        description="Attempt budget for single-page generation",
        category="generation",
    )
    VARIANT_MAX_RETRIES = EnvConfig(
        name="VARIANT_MAX_RETRIES",
        default=2,
        var_type=int,
        description="Attempt budget for each variant in a fan-out",
        category="generation",
    )
    INSERT_MAX_RETRIES = EnvConfig(
        name="INSERT_MAX_RETRIES",
        default=2,
        var_type=int,
        description="Attempt budget for section insertion",
        category="generation",
    )
    RETRY_DELAY = EnvConfig(
        name="RETRY_DELAY",
        default=0.5,
        var_type=float,
        description="Fixed delay between attempts in seconds",
        category="generation",
    )
    DEFAULT_PRESET = EnvConfig(
        name="DEFAULT_PRESET",
        default="bold",
        var_type=str,
        description="Style preset used when a request names none",
        category="generation",
    )

    # -------------------------------------------------------------------------
    # MCP Server
    # -------------------------------------------------------------------------
    MCP_HOST = EnvConfig(
        name="MCP_HOST",
        default="0.0.0.0",
        var_type=str,
        description="MCP server bind address",
        category="mcp",
    )
    MCP_PORT = EnvConfig(
        name="MCP_PORT",
        default=18080,
        var_type=int,
        description="MCP server port (avoids 8080)",
        category="mcp",
    )


# Provider name -> API key variable
PROVIDER_KEY_VARS: dict[str, EnvVar] = {
    "anthropic": EnvVar.ANTHROPIC_API_KEY,
    "openai": EnvVar.OPENAI_API_KEY,
    "gemini": EnvVar.GEMINI_API_KEY,
    "groq": EnvVar.GROQ_API_KEY,
}

# Provider name -> model override variable
PROVIDER_MODEL_VARS: dict[str, EnvVar] = {
    "anthropic": EnvVar.ANTHROPIC_MODEL,
    "openai": EnvVar.OPENAI_MODEL,
    "gemini": EnvVar.GEMINI_MODEL,
    "groq": EnvVar.GROQ_MODEL,
}


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Empty strings count as unset, so `KEY=` in a .env file falls back to
    the default.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is unset.

    Returns:
        Converted value or default.
    """
    if value is None or value.strip() == "":
        return default

    if var_type is str:
        return value.strip()

    if var_type in (int, float):
        try:
            return var_type(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: float) -> float: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int, float, or bool).

    Example:
        >>> get_environment(EnvVar.GENERATION_MAX_RETRIES)
        3
        >>> get_environment(EnvVar.GENERATION_MAX_RETRIES, override=5)
        5
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_provider_api_key(provider: str) -> str | None:
    """Get the configured API key for a provider, or None."""
    env_var = PROVIDER_KEY_VARS.get(provider)
    return get_environment(env_var) if env_var else None


def get_provider_model(provider: str) -> str | None:
    """Get the model override for a provider, or None."""
    env_var = PROVIDER_MODEL_VARS.get(provider)
    return get_environment(env_var) if env_var else None


def get_available_llm_providers() -> list[str]:
    """Get list of providers that have an API key configured.

    Returns:
        Provider names in registry order (e.g., ["anthropic", "groq"]).
    """
    return [name for name in PROVIDER_KEY_VARS if get_provider_api_key(name)]


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (llm, generation, mcp).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    "EnvConfig",
    "EnvVar",
    "PROVIDER_KEY_VARS",
    "PROVIDER_MODEL_VARS",
    "get_environment",
    "get_environment_info",
    "get_provider_api_key",
    "get_provider_model",
    "get_available_llm_providers",
    "list_environment_variables",
]
