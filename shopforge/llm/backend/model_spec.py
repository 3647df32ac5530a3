"""Model specification registry for LLM backends.

Lists the known models per provider with their context windows, output
limits and credentials. Each provider has one default model; any other model
name may still be requested and is resolved to an ad-hoc spec.
"""

from dataclasses import dataclass
from enum import Enum


class LLMProviderType(Enum):
    """Available LLM backend providers."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GEMINI = "gemini"
    GROQ = "groq"


_KEY_VARS = {
    LLMProviderType.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProviderType.OPENAI: "OPENAI_API_KEY",
    LLMProviderType.GEMINI: "GEMINI_API_KEY",
    LLMProviderType.GROQ: "GROQ_API_KEY",
}

GROQ_BASE_URL = "https://api.groq.com/openai/v1"


@dataclass(frozen=True)
class LLMSpec:
    """Specification for an LLM model.

    Attributes:
        name: Model identifier (e.g., 'gpt-4o', 'claude-sonnet-4-20250514').
        provider: Backend provider type.
        context_window: Maximum context size in tokens.
        max_output_tokens: Maximum generation tokens.
        description: Human-readable description.
        api_key_env_var: Environment variable name for API key.
        base_url: Optional custom API endpoint.
    """

    name: str
    provider: LLMProviderType
    context_window: int
    max_output_tokens: int
    description: str = ""
    api_key_env_var: str = ""
    base_url: str | None = None


class LLMModel(Enum):
    """Registry of known LLM models."""

    # === Anthropic Claude Models ===
    CLAUDE_SONNET_4 = LLMSpec(
        name="claude-sonnet-4-20250514",
        provider=LLMProviderType.ANTHROPIC,
        context_window=200000,
        max_output_tokens=64000,
        description="Anthropic Sonnet 4, balanced quality and speed",
        api_key_env_var="ANTHROPIC_API_KEY",
    )

    CLAUDE_OPUS_4 = LLMSpec(
        name="claude-opus-4-20250514",
        provider=LLMProviderType.ANTHROPIC,
        context_window=200000,
        max_output_tokens=32000,
        description="Anthropic Opus 4, highest quality",
        api_key_env_var="ANTHROPIC_API_KEY",
    )

    CLAUDE_HAIKU_3_5 = LLMSpec(
        name="claude-3-5-haiku-20241022",
        provider=LLMProviderType.ANTHROPIC,
        context_window=200000,
        max_output_tokens=8192,
        description="Anthropic Haiku 3.5, fastest",
        api_key_env_var="ANTHROPIC_API_KEY",
    )

    # === OpenAI Models ===
    GPT_4O = LLMSpec(
        name="gpt-4o",
        provider=LLMProviderType.OPENAI,
        context_window=128000,
        max_output_tokens=16384,
        description="OpenAI multimodal flagship",
        api_key_env_var="OPENAI_API_KEY",
    )

    GPT_4O_MINI = LLMSpec(
        name="gpt-4o-mini",
        provider=LLMProviderType.OPENAI,
        context_window=128000,
        max_output_tokens=16384,
        description="OpenAI fast and efficient small model",
        api_key_env_var="OPENAI_API_KEY",
    )

    # === Google Gemini Models ===
    GEMINI_2_0_FLASH = LLMSpec(
        name="gemini-2.0-flash",
        provider=LLMProviderType.GEMINI,
        context_window=1048576,
        max_output_tokens=8192,
        description="Google Gemini 2.0 Flash",
        api_key_env_var="GEMINI_API_KEY",
    )

    GEMINI_2_5_PRO = LLMSpec(
        name="gemini-2.5-pro",
        provider=LLMProviderType.GEMINI,
        context_window=1048576,
        max_output_tokens=65536,
        description="Google Gemini 2.5 Pro",
        api_key_env_var="GEMINI_API_KEY",
    )

    # === Groq Hosted Models ===
    LLAMA_3_3_70B = LLMSpec(
        name="llama-3.3-70b-versatile",
        provider=LLMProviderType.GROQ,
        context_window=131072,
        max_output_tokens=32768,
        description="Meta Llama 3.3 70B on Groq",
        api_key_env_var="GROQ_API_KEY",
        base_url=GROQ_BASE_URL,
    )

    LLAMA_3_1_8B = LLMSpec(
        name="llama-3.1-8b-instant",
        provider=LLMProviderType.GROQ,
        context_window=131072,
        max_output_tokens=8192,
        description="Meta Llama 3.1 8B on Groq",
        api_key_env_var="GROQ_API_KEY",
        base_url=GROQ_BASE_URL,
    )

    @property
    def spec(self) -> LLMSpec:
        """Get the LLMSpec for this model."""
        return self.value

    @classmethod
    def by_name(cls, name: str) -> "LLMModel | None":
        """Look up model by name string.

        Args:
            name: Model name to find.

        Returns:
            LLMModel if found, None otherwise.
        """
        for model in cls:
            if model.spec.name == name:
                return model
        return None

    @classmethod
    def list_by_provider(cls, provider: LLMProviderType) -> list["LLMModel"]:
        """Get all models for a specific provider."""
        return [m for m in cls if m.spec.provider == provider]


# Default models for each provider
DEFAULT_ANTHROPIC_MODEL = LLMModel.CLAUDE_SONNET_4
DEFAULT_OPENAI_MODEL = LLMModel.GPT_4O
DEFAULT_GEMINI_MODEL = LLMModel.GEMINI_2_0_FLASH
DEFAULT_GROQ_MODEL = LLMModel.LLAMA_3_3_70B

DEFAULT_MODELS: dict[LLMProviderType, LLMModel] = {
    LLMProviderType.ANTHROPIC: DEFAULT_ANTHROPIC_MODEL,
    LLMProviderType.OPENAI: DEFAULT_OPENAI_MODEL,
    LLMProviderType.GEMINI: DEFAULT_GEMINI_MODEL,
    LLMProviderType.GROQ: DEFAULT_GROQ_MODEL,
}

# Overall default
DEFAULT_PROVIDER = LLMProviderType.ANTHROPIC
DEFAULT_MODEL = DEFAULT_ANTHROPIC_MODEL


def get_llm_spec(model: str | LLMModel | LLMSpec) -> LLMSpec:
    """Resolve a model reference to its LLMSpec.

    Args:
        model: Can be a model name string, LLMModel enum, or LLMSpec.

    Returns:
        The resolved LLMSpec.

    Raises:
        ValueError: If model name is not found.
    """
    if isinstance(model, LLMSpec):
        return model
    if isinstance(model, LLMModel):
        return model.spec
    found = LLMModel.by_name(model)
    if found:
        return found.spec
    raise ValueError(f"Unknown model: {model}")


def resolve_spec(provider: LLMProviderType, model: str | None = None) -> LLMSpec:
    """Resolve the spec a provider backend should run.

    Unlisted model names are accepted so that new provider models work
    without a registry update; they inherit the provider default's limits.

    Args:
        provider: Backend provider.
        model: Model name override, or None for the provider default.

    Returns:
        Spec for the requested model.

    Raises:
        ValueError: If a listed model belongs to another provider.
    """
    default = DEFAULT_MODELS[provider].spec
    if not model:
        return default
    found = LLMModel.by_name(model)
    if found is None:
        return LLMSpec(
            name=model,
            provider=provider,
            context_window=default.context_window,
            max_output_tokens=default.max_output_tokens,
            description="Custom model",
            api_key_env_var=_KEY_VARS[provider],
            base_url=default.base_url,
        )
    if found.spec.provider != provider:
        raise ValueError(
            f"Model {model} belongs to {found.spec.provider.value}, not {provider.value}"
        )
    return found.spec


__all__ = [
    "LLMProviderType",
    "LLMSpec",
    "LLMModel",
    "GROQ_BASE_URL",
    "DEFAULT_ANTHROPIC_MODEL",
    "DEFAULT_OPENAI_MODEL",
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_GROQ_MODEL",
    "DEFAULT_MODELS",
    "DEFAULT_PROVIDER",
    "DEFAULT_MODEL",
    "get_llm_spec",
    "resolve_spec",
]
