"""Tests for LLM backend implementations."""

from types import SimpleNamespace

import pytest

from ...core.errors import (
    ConfigurationError,
    EmptyCompletionError,
    ProviderBillingError,
    ProviderError,
    ProviderRateLimitError,
)
from ...schema import Role
from ..conftest import StubBackend
from .anthropic import AnthropicBackend
from .base import ChatMessage, SamplingParams, map_provider_error
from .factory import create_llm_backend, parse_provider, resolve_provider
from .gemini import GeminiBackend
from .groq import JSON_ONLY_SUFFIX, GroqBackend
from .model_spec import (
    DEFAULT_MODELS,
    GROQ_BASE_URL,
    LLMModel,
    LLMProviderType,
    get_llm_spec,
    resolve_spec,
)
from .openai import OpenAIBackend
from .registry import BackendRegistry

MESSAGES = [
    ChatMessage(role=Role.USER, content="A coffee shop"),
    ChatMessage(role=Role.ASSISTANT, content='{"pageType":"landing"}'),
    ChatMessage(role=Role.USER, content="Make it darker"),
]


class FakeSDKError(Exception):
    """SDK-shaped exception with an HTTP status and optional headers."""

    def __init__(self, message: str, status_code: int | None = None, headers=None):
        super().__init__(message)
        self.status_code = status_code
        self.response = SimpleNamespace(headers=headers or {})


class Recorder:
    """Callable that records kwargs and returns (or raises) a canned value."""

    def __init__(self, result):
        self.result = result
        self.kwargs: dict = {}

    def __call__(self, **kwargs):
        self.kwargs = kwargs
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def _anthropic_client(result) -> tuple[SimpleNamespace, Recorder]:
    create = Recorder(result)
    return SimpleNamespace(messages=SimpleNamespace(create=create)), create


def _openai_client(result) -> tuple[SimpleNamespace, Recorder]:
    create = Recorder(result)
    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    return client, create


def _openai_response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestModelSpec:
    """Tests for the model registry."""

    @pytest.mark.unit
    def test_every_provider_has_default(self):
        """Test each provider has a default model of its own."""
        for provider in LLMProviderType:
            assert DEFAULT_MODELS[provider].spec.provider == provider

    @pytest.mark.unit
    def test_default_model_names(self):
        """Test default model identifiers."""
        assert DEFAULT_MODELS[LLMProviderType.ANTHROPIC].spec.name == "claude-sonnet-4-20250514"
        assert DEFAULT_MODELS[LLMProviderType.OPENAI].spec.name == "gpt-4o"
        assert DEFAULT_MODELS[LLMProviderType.GEMINI].spec.name == "gemini-2.0-flash"
        assert DEFAULT_MODELS[LLMProviderType.GROQ].spec.name == "llama-3.3-70b-versatile"

    @pytest.mark.unit
    def test_by_name(self):
        """Test lookup by model name."""
        assert LLMModel.by_name("gpt-4o") == LLMModel.GPT_4O
        assert LLMModel.by_name("nope") is None

    @pytest.mark.unit
    def test_get_llm_spec_unknown(self):
        """Test unknown model names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown model"):
            get_llm_spec("nope")

    @pytest.mark.unit
    def test_resolve_spec_custom_name(self):
        """Test unlisted models inherit the provider default's limits."""
        spec = resolve_spec(LLMProviderType.GROQ, "mixtral-custom")
        assert spec.name == "mixtral-custom"
        assert spec.provider == LLMProviderType.GROQ
        assert spec.base_url == GROQ_BASE_URL

    @pytest.mark.unit
    def test_resolve_spec_wrong_provider(self):
        """Test a listed model cannot be used with another provider."""
        with pytest.raises(ValueError, match="belongs to"):
            resolve_spec(LLMProviderType.OPENAI, "gemini-2.0-flash")


class TestProviderSelection:
    """Tests for provider resolution."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("openai", LLMProviderType.OPENAI),
            ("gemini", LLMProviderType.GEMINI),
            ("groq", LLMProviderType.GROQ),
            ("GROQ ", LLMProviderType.GROQ),
            ("anthropic", LLMProviderType.ANTHROPIC),
            ("", LLMProviderType.ANTHROPIC),
            (None, LLMProviderType.ANTHROPIC),
            ("mistral", LLMProviderType.ANTHROPIC),
        ],
    )
    def test_resolve_provider(self, value, expected):
        """Test unknown or unset values fall back to anthropic."""
        assert resolve_provider(value) == expected

    @pytest.mark.unit
    def test_parse_provider_strict(self):
        """Test explicit unknown provider names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown provider"):
            parse_provider("mistral")

    @pytest.mark.unit
    def test_factory_routes_by_env(self, provider_env, monkeypatch):
        """Test the factory reads AI_PROVIDER when no provider is given."""
        monkeypatch.setenv("AI_PROVIDER", "groq")
        monkeypatch.setenv("GROQ_API_KEY", "test-key")
        backend = create_llm_backend()
        assert isinstance(backend, GroqBackend)
        assert backend.provider == "groq"

    @pytest.mark.unit
    def test_factory_model_override_from_env(self, provider_env, monkeypatch):
        """Test per-provider model override from configuration."""
        monkeypatch.setenv("OPENAI_API_KEY", "test-key")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
        backend = create_llm_backend("openai")
        assert backend.model_name == "gpt-4o-mini"
        assert backend.name == "openai:gpt-4o-mini"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "provider,var",
        [
            ("anthropic", "ANTHROPIC_API_KEY"),
            ("openai", "OPENAI_API_KEY"),
            ("gemini", "GEMINI_API_KEY"),
            ("groq", "GROQ_API_KEY"),
        ],
    )
    def test_missing_key(self, provider_env, provider, var):
        """Test a missing API key raises ConfigurationError naming the variable."""
        with pytest.raises(ConfigurationError) as exc_info:
            create_llm_backend(provider)
        assert str(exc_info.value) == f"{var} is not set in environment variables."


class TestErrorMapping:
    """Tests for SDK exception mapping."""

    @pytest.mark.unit
    def test_auth(self):
        """Test 401 and 403 map to ConfigurationError."""
        assert isinstance(map_provider_error(FakeSDKError("bad", 401), "x"), ConfigurationError)
        assert isinstance(map_provider_error(FakeSDKError("no", 403), "x"), ConfigurationError)

    @pytest.mark.unit
    def test_rate_limit_with_retry_after(self):
        """Test 429 maps to ProviderRateLimitError with retry_after."""
        error = map_provider_error(
            FakeSDKError("slow down", 429, {"retry-after": "7"}), "x"
        )
        assert isinstance(error, ProviderRateLimitError)
        assert error.retry_after == 7.0

    @pytest.mark.unit
    def test_billing(self):
        """Test 402 and credit messages map to ProviderBillingError."""
        assert isinstance(map_provider_error(FakeSDKError("pay", 402), "x"), ProviderBillingError)
        error = map_provider_error(
            FakeSDKError("Your credit balance is too low", 400), "x"
        )
        assert isinstance(error, ProviderBillingError)

    @pytest.mark.unit
    def test_other(self):
        """Test anything else maps to a plain ProviderError."""
        error = map_provider_error(FakeSDKError("overloaded", 529), "x")
        assert type(error) is ProviderError
        assert type(map_provider_error(RuntimeError("boom"), "x")) is ProviderError

    @pytest.mark.unit
    def test_gemini_code_attribute(self):
        """Test the status may also come from a `code` attribute."""
        error = RuntimeError("resource exhausted")
        error.code = 429
        assert isinstance(map_provider_error(error, "gemini"), ProviderRateLimitError)


class TestAnthropicBackend:
    """Tests for AnthropicBackend with a fake SDK client."""

    @pytest.fixture
    def backend(self, provider_env) -> AnthropicBackend:
        return AnthropicBackend(api_key="test-key")

    @pytest.mark.unit
    def test_complete(self, backend):
        """Test system prompt placement and trimmed output."""
        response = SimpleNamespace(content=[SimpleNamespace(type="text", text="  {}  ")])
        backend._client, create = _anthropic_client(response)
        text = backend.complete("SYSTEM", MESSAGES, SamplingParams(temperature=0.9))
        assert text == "{}"
        assert create.kwargs["system"] == "SYSTEM"
        assert create.kwargs["model"] == "claude-sonnet-4-20250514"
        assert create.kwargs["temperature"] == 0.9
        assert create.kwargs["max_tokens"] == 8192
        assert [m["role"] for m in create.kwargs["messages"]] == ["user", "assistant", "user"]

    @pytest.mark.unit
    def test_non_text_block(self, backend):
        """Test a non-text first block raises EmptyCompletionError."""
        response = SimpleNamespace(content=[SimpleNamespace(type="tool_use", id="t")])
        backend._client, _ = _anthropic_client(response)
        with pytest.raises(EmptyCompletionError):
            backend.complete("SYSTEM", MESSAGES)

    @pytest.mark.unit
    def test_empty_text(self, backend):
        """Test whitespace-only text raises EmptyCompletionError."""
        response = SimpleNamespace(content=[SimpleNamespace(type="text", text="   ")])
        backend._client, _ = _anthropic_client(response)
        with pytest.raises(EmptyCompletionError):
            backend.complete("SYSTEM", MESSAGES)

    @pytest.mark.unit
    def test_sdk_error_mapped(self, backend):
        """Test SDK exceptions are mapped and chained."""
        backend._client, _ = _anthropic_client(FakeSDKError("limit", 429))
        with pytest.raises(ProviderRateLimitError) as exc_info:
            backend.complete("SYSTEM", MESSAGES)
        assert isinstance(exc_info.value.__cause__, FakeSDKError)

    @pytest.mark.unit
    def test_timeout_from_env(self, provider_env, monkeypatch):
        """Test LLM_TIMEOUT is read when no timeout is given."""
        monkeypatch.setenv("LLM_TIMEOUT", "12.5")
        backend = AnthropicBackend(api_key="test-key")
        assert backend._timeout == 12.5


class TestOpenAICompatibleBackends:
    """Tests for OpenAIBackend and GroqBackend with a fake SDK client."""

    @pytest.mark.unit
    def test_openai_prepends_system(self, provider_env):
        """Test the system prompt is sent as the first message."""
        backend = OpenAIBackend(api_key="test-key")
        backend._client, create = _openai_client(_openai_response('{"a": 1}'))
        assert backend.complete("SYSTEM", MESSAGES) == '{"a": 1}'
        sent = create.kwargs["messages"]
        assert sent[0] == {"role": "system", "content": "SYSTEM"}
        assert len(sent) == 4
        assert create.kwargs["model"] == "gpt-4o"

    @pytest.mark.unit
    def test_openai_none_content(self, provider_env):
        """Test a null message content raises EmptyCompletionError."""
        backend = OpenAIBackend(api_key="test-key")
        backend._client, _ = _openai_client(_openai_response(None))
        with pytest.raises(EmptyCompletionError):
            backend.complete("SYSTEM", MESSAGES)

    @pytest.mark.unit
    def test_groq_appends_json_suffix(self, provider_env):
        """Test Groq adds the raw-JSON instruction to the system prompt."""
        backend = GroqBackend(api_key="test-key")
        backend._client, create = _openai_client(_openai_response("{}"))
        backend.complete("SYSTEM", MESSAGES)
        system = create.kwargs["messages"][0]["content"]
        assert system == "SYSTEM" + JSON_ONLY_SUFFIX
        assert system.endswith("Raw JSON only.")
        assert backend._base_url == GROQ_BASE_URL
        assert backend.model_name == "llama-3.3-70b-versatile"

    @pytest.mark.unit
    def test_groq_uses_own_key(self, provider_env, monkeypatch):
        """Test Groq reads GROQ_API_KEY, not OPENAI_API_KEY."""
        monkeypatch.setenv("OPENAI_API_KEY", "openai-key")
        with pytest.raises(ConfigurationError, match="GROQ_API_KEY"):
            GroqBackend()

    @pytest.mark.unit
    def test_groq_shares_openai_init(self, provider_env, monkeypatch):
        """Test Groq gets the parent's client state and honours overrides."""
        monkeypatch.setenv("GROQ_MODEL", "my-finetune")
        backend = GroqBackend(api_key="test-key", base_url="http://proxy.local/v1", timeout=7.0)
        assert backend.provider == "groq"
        assert backend.model_name == "my-finetune"
        assert backend._base_url == "http://proxy.local/v1"
        assert backend._timeout == 7.0
        assert backend._client is None
        assert backend._client_lock is not None

    @pytest.mark.unit
    def test_groq_custom_model_keeps_endpoint(self, provider_env):
        """Test an unlisted Groq model still targets the Groq endpoint."""
        backend = GroqBackend(api_key="test-key", model="my-finetune")
        assert backend._base_url == GROQ_BASE_URL

    @pytest.mark.unit
    def test_openai_default_endpoint(self, provider_env):
        """Test OpenAI leaves the SDK default endpoint in place."""
        backend = OpenAIBackend(api_key="test-key")
        assert backend._base_url is None
        assert backend.provider == "openai"


class TestGeminiBackend:
    """Tests for GeminiBackend with a fake SDK client."""

    @pytest.mark.unit
    def test_roles_and_system_instruction(self, provider_env):
        """Test assistant turns become model turns and the system prompt is a config field."""
        backend = GeminiBackend(api_key="test-key")
        generate = Recorder(SimpleNamespace(text=" {} "))
        backend._client = SimpleNamespace(models=SimpleNamespace(generate_content=generate))
        assert backend.complete("SYSTEM", MESSAGES, SamplingParams(temperature=0.5)) == "{}"
        contents = generate.kwargs["contents"]
        assert [c.role for c in contents] == ["user", "model", "user"]
        assert contents[-1].parts[0].text == "Make it darker"
        config = generate.kwargs["config"]
        assert config.system_instruction == "SYSTEM"
        assert config.temperature == 0.5
        assert generate.kwargs["model"] == "gemini-2.0-flash"

    @pytest.mark.unit
    def test_empty_text(self, provider_env):
        """Test a response without text raises EmptyCompletionError."""
        backend = GeminiBackend(api_key="test-key")
        generate = Recorder(SimpleNamespace(text=None))
        backend._client = SimpleNamespace(models=SimpleNamespace(generate_content=generate))
        with pytest.raises(EmptyCompletionError):
            backend.complete("SYSTEM", MESSAGES)


class TestBackendRegistry:
    """Tests for BackendRegistry caching."""

    @pytest.mark.unit
    def test_builds_once(self):
        """Test a provider's backend is constructed once and shared."""
        built: list[LLMProviderType] = []

        def factory(provider):
            built.append(provider)
            return StubBackend(["{}"], provider=provider.value)

        registry = BackendRegistry(factory=factory, default_provider="openai")
        first = registry.get()
        assert registry.get("openai") is first
        assert built == [LLMProviderType.OPENAI]

    @pytest.mark.unit
    def test_register_overrides(self):
        """Test a registered backend is returned without calling the factory."""

        def factory(provider):
            raise AssertionError("factory should not be called")

        registry = BackendRegistry(factory=factory, default_provider="anthropic")
        stub = StubBackend(["{}"])
        registry.register("anthropic", stub)
        assert registry.get() is stub

    @pytest.mark.unit
    def test_active_provider_from_env(self, provider_env, monkeypatch):
        """Test the active provider follows AI_PROVIDER when no default is set."""
        monkeypatch.setenv("AI_PROVIDER", "gemini")
        assert BackendRegistry().active_provider() == LLMProviderType.GEMINI

    @pytest.mark.unit
    def test_unknown_provider(self):
        """Test explicit unknown names raise ValueError."""
        with pytest.raises(ValueError):
            BackendRegistry().get("mistral")

    @pytest.mark.unit
    def test_failed_build_not_cached(self, provider_env):
        """Test a configuration failure is raised and not cached."""
        registry = BackendRegistry()
        with pytest.raises(ConfigurationError):
            registry.get("anthropic")
        with pytest.raises(ConfigurationError):
            registry.get("anthropic")
