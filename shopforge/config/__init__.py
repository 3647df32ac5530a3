"""Centralized configuration management for shopforge.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from shopforge.config import EnvVar, get_environment
    >>>
    >>> provider = get_environment(EnvVar.AI_PROVIDER)  # "anthropic"
    >>> api_key = get_environment(EnvVar.ANTHROPIC_API_KEY)  # str | None
    >>>
    >>> for var in list_environment_variables("generation"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    llm: Provider selection, API keys, model overrides, timeout
    generation: Retry budgets, retry delay, default preset
    mcp: Tool server host and port
"""

from .lib import (
    PROVIDER_KEY_VARS,
    PROVIDER_MODEL_VARS,
    EnvConfig,
    EnvVar,
    get_available_llm_providers,
    get_environment,
    get_environment_info,
    get_provider_api_key,
    get_provider_model,
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    "PROVIDER_KEY_VARS",
    "PROVIDER_MODEL_VARS",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_provider_api_key",
    "get_provider_model",
    "get_available_llm_providers",
    # Introspection
    "list_environment_variables",
]
