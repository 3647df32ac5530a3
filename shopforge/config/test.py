"""Tests for configuration management."""

import pytest

from .lib import (
    PROVIDER_KEY_VARS,
    EnvConfig,
    EnvVar,
    get_available_llm_providers,
    get_environment,
    get_environment_info,
    get_provider_model,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("AI_PROVIDER", raising=False)
        assert get_environment(EnvVar.AI_PROVIDER) == "anthropic"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("GENERATION_MAX_RETRIES", "9")
        assert get_environment(EnvVar.GENERATION_MAX_RETRIES, override=5) == 5

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("AI_PROVIDER", "groq")
        assert get_environment(EnvVar.AI_PROVIDER) == "groq"

    @pytest.mark.unit
    def test_int_type_conversion(self, monkeypatch):
        """Integer type conversion from string."""
        monkeypatch.setenv("MCP_PORT", "8081")
        result = get_environment(EnvVar.MCP_PORT)
        assert result == 8081
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_float_type_conversion(self, monkeypatch):
        """Float type conversion from string."""
        monkeypatch.setenv("RETRY_DELAY", "0.25")
        assert get_environment(EnvVar.RETRY_DELAY) == 0.25

    @pytest.mark.unit
    def test_invalid_number_falls_back(self, monkeypatch):
        """Unparseable numbers use the default."""
        monkeypatch.setenv("LLM_TIMEOUT", "soon")
        assert get_environment(EnvVar.LLM_TIMEOUT) == 60.0

    @pytest.mark.unit
    def test_empty_string_is_unset(self, monkeypatch):
        """Blank values behave like missing ones."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "  ")
        assert get_environment(EnvVar.ANTHROPIC_API_KEY) is None

    @pytest.mark.unit
    def test_string_is_stripped(self, monkeypatch):
        """Surrounding whitespace is removed from strings."""
        monkeypatch.setenv("OPENAI_API_KEY", " sk-test ")
        assert get_environment(EnvVar.OPENAI_API_KEY) == "sk-test"


class TestEnvironmentInfo:
    """Tests for metadata and introspection."""

    @pytest.mark.unit
    def test_info_returns_config(self):
        """get_environment_info exposes EnvConfig."""
        info = get_environment_info(EnvVar.RETRY_DELAY)
        assert isinstance(info, EnvConfig)
        assert info.name == "RETRY_DELAY"
        assert info.var_type is float

    @pytest.mark.unit
    def test_names_match_members(self):
        """Every member's name matches its variable name."""
        for var in EnvVar:
            assert var.name == var.value.name

    @pytest.mark.unit
    def test_list_by_category(self):
        """Category filter returns only that category."""
        generation = list_environment_variables("generation")
        assert EnvVar.GENERATION_MAX_RETRIES in generation
        assert all(v.value.category == "generation" for v in generation)

    @pytest.mark.unit
    def test_list_all(self):
        """No filter returns every variable."""
        assert len(list_environment_variables()) == len(EnvVar)


class TestProviderHelpers:
    """Tests for provider convenience functions."""

    @pytest.mark.unit
    def test_available_providers(self, monkeypatch):
        """Only providers with keys are reported."""
        for var in PROVIDER_KEY_VARS.values():
            monkeypatch.delenv(var.value.name, raising=False)
        monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")

        assert get_available_llm_providers() == ["anthropic", "groq"]

    @pytest.mark.unit
    def test_model_override(self, monkeypatch):
        """Model overrides are read per provider."""
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-flash")
        assert get_provider_model("gemini") == "gemini-2.5-flash"
        assert get_provider_model("unknown") is None
