"""LLM module test fixtures."""

from __future__ import annotations

import json
import threading
from typing import Any, Callable, Sequence

import pytest

from shopforge.conftest import LANDING_DATA, PRODUCT_DATA

from .backend import BackendRegistry, ChatMessage, LLMBackend, SamplingParams

Response = str | Exception


# =============================================================================
# Stub LLM Backend
# =============================================================================


class StubBackend(LLMBackend):
    """Scripted LLM backend for testing without API keys.

    Each call consumes the next scripted response: a string is returned as
    the completion, an exception instance is raised. When the script runs
    out, the last entry repeats. A `responder` callable takes precedence and
    receives (system_prompt, messages).
    """

    def __init__(
        self,
        responses: Sequence[Response] = (),
        responder: Callable[[str, Sequence[ChatMessage]], Response] | None = None,
        provider: str = "stub",
        model: str = "stub-model",
    ):
        self._responses = list(responses)
        self._responder = responder
        self._provider = provider
        self._model = model
        self._lock = threading.Lock()
        self.calls: list[dict[str, Any]] = []

    @property
    def model_name(self) -> str:
        """Return stub model name."""
        return self._model

    @property
    def provider(self) -> str:
        """Return stub provider name."""
        return self._provider

    def complete(
        self,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        sampling: SamplingParams | None = None,
    ) -> str:
        """Return or raise the next scripted response."""
        with self._lock:
            self.calls.append(
                {
                    "system_prompt": system_prompt,
                    "messages": list(messages),
                    "sampling": sampling,
                }
            )
            if self._responder is not None:
                response = self._responder(system_prompt, messages)
            elif len(self._responses) > 1:
                response = self._responses.pop(0)
            elif self._responses:
                response = self._responses[0]
            else:
                raise AssertionError("StubBackend has no scripted responses")
        if isinstance(response, Exception):
            raise response
        return response


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def landing_json() -> str:
    """Landing page completion text, wrapped in a code fence."""
    return "```json\n" + json.dumps(LANDING_DATA, indent=2) + "\n```"


@pytest.fixture
def product_json() -> str:
    """Product page completion text."""
    return json.dumps(PRODUCT_DATA)


@pytest.fixture
def no_sleep() -> list[float]:
    """Recorded retry delays; pass `no_sleep.append` as the sleep function."""
    delays: list[float] = []
    return delays


@pytest.fixture
def stub_registry() -> Callable[[StubBackend], BackendRegistry]:
    """Build a registry whose active provider is the given stub."""

    def _build(backend: StubBackend) -> BackendRegistry:
        registry = BackendRegistry(default_provider="anthropic")
        registry.register("anthropic", backend)
        return registry

    return _build


@pytest.fixture
def provider_env(monkeypatch) -> None:
    """Clear provider settings so tests control them explicitly."""
    for name in (
        "AI_PROVIDER",
        "ANTHROPIC_API_KEY",
        "OPENAI_API_KEY",
        "GEMINI_API_KEY",
        "GROQ_API_KEY",
        "ANTHROPIC_MODEL",
        "OPENAI_MODEL",
        "GEMINI_MODEL",
        "GROQ_MODEL",
        "LLM_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
