"""Groq backend implementation (OpenAI-compatible API)."""

from ...config import EnvVar
from .model_spec import LLMProviderType
from .openai import OpenAIBackend

JSON_ONLY_SUFFIX = (
    "\n\nCRITICAL: Your response must start with { and end with }. "
    "No text before or after the JSON object. No markdown. No code fences. "
    "Raw JSON only."
)


class GroqBackend(OpenAIBackend):
    """Groq backend using the OpenAI-compatible endpoint.

    Hosted open models drift into prose more often than the others, so the
    system prompt always ends with a hard raw-JSON instruction.

    Environment:
        GROQ_API_KEY: API key (required if not passed to constructor).
        GROQ_MODEL: Optional model override.
    """

    provider_type = LLMProviderType.GROQ
    api_key_var = EnvVar.GROQ_API_KEY
    model_var = EnvVar.GROQ_MODEL

    def _system_content(self, system_prompt: str) -> str:
        return system_prompt + JSON_ONLY_SUFFIX


__all__ = ["GroqBackend", "JSON_ONLY_SUFFIX"]
