"""Tests for LLM generator module.

Covers:
- Outcome classification and RetryPolicy
- PageGenerator: single generation, variant fan-out and section insertion
  against a scripted stub backend
"""

import copy
import json
import threading

import pytest

from shopforge.conftest import LANDING_DATA, PRODUCT_DATA
from shopforge.core.errors import (
    ConfigurationError,
    ErrorKind,
    ParseError,
    ProviderError,
    ProviderRateLimitError,
    RenderError,
    RequestError,
    ValidationError,
    VariantsFailedError,
)
from shopforge.schema import ConversationTurn, Role, StylePreset, dump_page, load_page

from ..conftest import StubBackend
from .lib import (
    VARIANT_PRESETS,
    GenerationOutput,
    GeneratorConfig,
    PageGenerator,
    coerce_page_type,
)
from .result import Fatal, Retryable, Success, classify
from .retry import RetryPolicy

COFFEE_TURN = ConversationTurn(role=Role.USER, content="Coffee shop 'Morning Ritual'")


def _landing_without(section: str) -> str:
    data = copy.deepcopy(LANDING_DATA)
    del data["landing"][section]
    return json.dumps(data)


@pytest.fixture
def generator(stub_registry, no_sleep):
    """Build a PageGenerator over a stub backend with recorded retry delays."""

    def _build(backend: StubBackend, **config) -> PageGenerator:
        return PageGenerator(
            stub_registry(backend),
            GeneratorConfig(**config),
            sleep=no_sleep.append,
        )

    return _build


# =============================================================================
# Outcome and RetryPolicy Tests
# =============================================================================


class TestClassify:
    """Tests for outcome classification."""

    @pytest.mark.unit
    def test_retryable_errors(self):
        """Test parse and validation errors are retryable."""
        assert isinstance(classify(ParseError("no JSON found")), Retryable)
        assert isinstance(classify(ValidationError("hero.headline")), Retryable)

    @pytest.mark.unit
    def test_fatal_errors(self):
        """Test provider and render errors are fatal."""
        assert isinstance(classify(ConfigurationError("x")), Fatal)
        assert isinstance(classify(ProviderRateLimitError("x")), Fatal)
        assert isinstance(classify(RenderError("x")), Fatal)

    @pytest.mark.unit
    def test_unexpected_exception_wrapped(self):
        """Test non-taxonomy exceptions become fatal ProviderErrors."""
        cause = KeyError("boom")
        outcome = classify(cause)
        assert isinstance(outcome, Fatal)
        assert type(outcome.error) is ProviderError
        assert outcome.error.__cause__ is cause


class TestRetryPolicy:
    """Tests for the fixed-delay retry loop."""

    @pytest.mark.unit
    def test_exhausts_budget(self):
        """Test always-retryable attempts run exactly max_attempts times."""
        calls: list[int] = []
        delays: list[float] = []

        def attempt(number):
            calls.append(number)
            return Retryable(ParseError(f"attempt {number}"))

        outcome = RetryPolicy(max_attempts=3, delay=0.5, sleep=delays.append).run(attempt)
        assert calls == [1, 2, 3]
        assert delays == [0.5, 0.5]
        assert isinstance(outcome, Retryable)
        assert str(outcome.error) == "attempt 3"

    @pytest.mark.unit
    def test_stops_on_success(self):
        """Test a success ends the loop."""
        results = iter([Retryable(ParseError("x")), Success("page")])
        delays: list[float] = []
        outcome = RetryPolicy(max_attempts=3, sleep=delays.append).run(lambda n: next(results))
        assert outcome == Success("page")
        assert len(delays) == 1

    @pytest.mark.unit
    def test_stops_on_fatal(self):
        """Test a fatal outcome ends the loop without waiting."""
        calls: list[int] = []
        delays: list[float] = []

        def attempt(number):
            calls.append(number)
            return Fatal(ConfigurationError("no key"))

        outcome = RetryPolicy(max_attempts=3, sleep=delays.append).run(attempt)
        assert isinstance(outcome, Fatal)
        assert calls == [1]
        assert delays == []


# =============================================================================
# PageGenerator Tests
# =============================================================================


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default budgets and sampling settings."""
        config = GeneratorConfig()
        assert (config.max_retries, config.variant_max_retries, config.insert_max_retries) == (3, 2, 2)
        assert config.retry_delay == 0.5
        assert (config.temperature, config.variant_temperature, config.insert_temperature) == (
            0.7,
            0.9,
            0.5,
        )
        assert config.max_output_tokens == 8192

    @pytest.mark.unit
    def test_from_env(self, monkeypatch):
        """Test budgets are read from the environment."""
        monkeypatch.setenv("GENERATION_MAX_RETRIES", "5")
        monkeypatch.setenv("RETRY_DELAY", "0")
        monkeypatch.setenv("DEFAULT_PRESET", "luxury")
        config = GeneratorConfig.from_env()
        assert config.max_retries == 5
        assert config.retry_delay == 0.0
        assert config.default_preset == "luxury"

    @pytest.mark.unit
    def test_coerce_page_type(self):
        """Test invalid page types raise RequestError with the fixed message."""
        with pytest.raises(RequestError, match="Invalid page type. Must be landing or product."):
            coerce_page_type("blog")


class TestGenerate:
    """Tests for single-page generation."""

    @pytest.mark.unit
    def test_end_to_end_landing(self, generator, landing_json):
        """Test a well-formed landing completion renders every required block."""
        backend = StubBackend([landing_json])
        output = generator(backend).generate([COFFEE_TURN], "landing")

        assert isinstance(output, GenerationOutput)
        html = output.html
        assert html.count("<nav") == 1
        assert html.count("<h1") == 1
        assert html.count('id="features"') == 1
        assert html.count("hover:-translate-y-2 transition-transform") == 3
        footer = html[html.index("<footer") :]
        assert footer.count("<ul") == 3
        assert output.stats.attempts == 1
        assert output.provider == "stub"

    @pytest.mark.unit
    def test_prompt_and_sampling(self, generator, landing_json):
        """Test the call carries the preset prompt, directive and temperature."""
        backend = StubBackend([landing_json])
        generator(backend).generate([COFFEE_TURN], "landing", preset="luxury")

        call = backend.calls[0]
        assert "STYLE PRESET: LUXURY" in call["system_prompt"]
        assert call["messages"][0].content.startswith("Coffee shop 'Morning Ritual'")
        assert call["sampling"].temperature == 0.7
        assert call["sampling"].max_output_tokens == 8192

    @pytest.mark.unit
    def test_preset_tagged(self, generator, landing_json):
        """Test the page carries the requested preset after generation."""
        output = generator(StubBackend([landing_json])).generate(
            [COFFEE_TURN], "landing", preset="playful"
        )
        assert output.page.preset == StylePreset.PLAYFUL
        assert output.to_dict()["structuredPage"]["preset"] == "playful"

    @pytest.mark.unit
    def test_default_preset(self, generator, landing_json):
        """Test the configured default preset applies when none is given."""
        output = generator(StubBackend([landing_json]), default_preset="minimalist").generate(
            [COFFEE_TURN], "landing"
        )
        assert output.page.preset == StylePreset.MINIMALIST

    @pytest.mark.unit
    def test_retry_budget(self, generator, no_sleep):
        """Test always-malformed output makes exactly max_retries calls then raises."""
        backend = StubBackend(["I cannot do that."])
        with pytest.raises(ParseError, match="no JSON found"):
            generator(backend).generate([COFFEE_TURN], "landing")
        assert len(backend.calls) == 3
        assert no_sleep == [0.5, 0.5]

    @pytest.mark.unit
    def test_recovers_after_invalid_output(self, generator, landing_json):
        """Test a validation failure is retried and a later success returned."""
        backend = StubBackend([_landing_without("pricing"), landing_json])
        output = generator(backend).generate([COFFEE_TURN], "landing")
        assert len(backend.calls) == 2
        assert output.stats.attempts == 2
        assert output.stats.retryable_failures == 1

    @pytest.mark.unit
    def test_last_validation_error_surfaces(self, generator):
        """Test the last retryable error is raised once the budget is spent."""
        backend = StubBackend([_landing_without("pricing")])
        with pytest.raises(ValidationError) as exc_info:
            generator(backend).generate([COFFEE_TURN], "landing")
        assert exc_info.value.path == "pricing.tiers"

    @pytest.mark.unit
    def test_fatal_not_retried(self, generator, no_sleep):
        """Test provider errors end the run on the first attempt."""
        backend = StubBackend([ProviderRateLimitError("slow down")])
        with pytest.raises(ProviderRateLimitError):
            generator(backend).generate([COFFEE_TURN], "landing")
        assert len(backend.calls) == 1
        assert no_sleep == []

    @pytest.mark.unit
    def test_wrong_page_type_retried(self, generator, product_json, landing_json):
        """Test a product page returned for a landing request is retried."""
        backend = StubBackend([product_json, landing_json])
        output = generator(backend).generate([COFFEE_TURN], "landing")
        assert output.page.page_type == "landing"
        assert len(backend.calls) == 2

    @pytest.mark.unit
    def test_product_page(self, generator, product_json):
        """Test product generation renders the product section."""
        turn = ConversationTurn(role=Role.USER, content="Noise cancelling headphones")
        output = generator(StubBackend([product_json])).generate([turn], "product")
        assert 'id="details"' in output.html
        assert output.to_dict()["title"] == "Aurora Headphones"

    @pytest.mark.unit
    def test_request_validation(self, generator, landing_json):
        """Test empty turns and bad page types raise RequestError before any call."""
        backend = StubBackend([landing_json])
        with pytest.raises(RequestError, match="No messages provided"):
            generator(backend).generate([], "landing")
        with pytest.raises(RequestError, match="Invalid page type"):
            generator(backend).generate([COFFEE_TURN], "blog")
        assert backend.calls == []


class TestGenerateVariants:
    """Tests for the concurrent variant fan-out."""

    @pytest.mark.unit
    def test_all_variants(self, generator, landing_json):
        """Test one variant per preset, in preset order."""
        backend = StubBackend([landing_json])
        variants = generator(backend).generate_variants("Coffee shop", "landing")
        assert [v.id for v in variants] == ["minimalist", "bold", "luxury"]
        assert [v.label for v in variants] == ["Minimalist", "Bold", "Luxury"]
        assert variants[0].output.page.preset == StylePreset.MINIMALIST
        assert {call["sampling"].temperature for call in backend.calls} == {0.9}
        assert variants[2].to_dict()["style"] == "Dark, premium, gold accents"

    @pytest.mark.unit
    def test_partial_success(self, generator, landing_json):
        """Test failed variants are dropped without failing the call."""

        def responder(system_prompt, messages):
            if "STYLE PRESET: BOLD" in system_prompt:
                return landing_json
            return "not json"

        backend = StubBackend(responder=responder)
        variants = generator(backend).generate_variants("Coffee shop", "landing")
        assert [v.id for v in variants] == ["bold"]
        # Two failing variants, each with a budget of 2, plus one success
        assert len(backend.calls) == 5

    @pytest.mark.unit
    def test_all_fail(self, generator):
        """Test zero successes raises VariantsFailedError with per-variant errors."""
        backend = StubBackend(["not json"])
        with pytest.raises(VariantsFailedError) as exc_info:
            generator(backend).generate_variants("Coffee shop", "landing")
        assert len(exc_info.value.errors) == len(VARIANT_PRESETS)
        assert exc_info.value.error_kind == ErrorKind.MALFORMED_OUTPUT

    @pytest.mark.unit
    def test_variants_run_concurrently(self, stub_registry, no_sleep, landing_json):
        """Test all variant calls are in flight at the same time."""
        barrier = threading.Barrier(len(VARIANT_PRESETS), timeout=5)

        def responder(system_prompt, messages):
            return landing_json

        class BarrierBackend(StubBackend):
            def complete(self, system_prompt, messages, sampling=None):
                barrier.wait()
                return super().complete(system_prompt, messages, sampling)

        backend = BarrierBackend(responder=responder)
        generator = PageGenerator(stub_registry(backend), GeneratorConfig(), sleep=no_sleep.append)
        assert len(generator.generate_variants("Coffee shop", "landing")) == 3

    @pytest.mark.unit
    def test_same_context_for_every_variant(self, generator, landing_json):
        """Test every variant receives the same single-turn messages."""
        backend = StubBackend([landing_json])
        generator(backend).generate_variants(
            "Coffee shop", "landing", reference_url="https://example.com"
        )
        contexts = {tuple(m.content for m in call["messages"]) for call in backend.calls}
        assert len(contexts) == 1
        (context,) = contexts
        assert len(context) == 1
        assert context[0].startswith("Design inspiration reference: https://example.com")


class TestInsertSection:
    """Tests for section insertion with merge."""

    @pytest.mark.unit
    def test_merge_keeps_omitted_sections(self, generator, landing_page):
        """Test sections the model dropped survive the insertion."""
        proposal = copy.deepcopy(LANDING_DATA)
        del proposal["landing"]["testimonials"]
        proposal["landing"]["faq"] = {
            "heading": "Questions",
            "items": [{"question": "Open Sundays?", "answer": "Yes."}],
        }
        backend = StubBackend([json.dumps(proposal)])

        output = generator(backend).insert_section(landing_page, "Add an FAQ", "FAQ")
        landing = output.page.landing
        assert landing.testimonials == landing_page.landing.testimonials
        assert landing.faq is not None and landing.faq.items[0].question == "Open Sundays?"
        assert 'id="faq"' in output.html

    @pytest.mark.unit
    def test_insert_prompts_and_sampling(self, generator, landing_page, landing_json):
        """Test a single user message carrying the page JSON at insertion temperature."""
        backend = StubBackend([landing_json])
        generator(backend).insert_section(landing_page, "Add pricing", "Pricing")
        call = backend.calls[0]
        assert len(call["messages"]) == 1
        assert 'TASK: Add or update a section labeled "Pricing"' in call["messages"][0].content
        assert "JSON page-structure editor" in call["system_prompt"]
        assert call["sampling"].temperature == 0.5

    @pytest.mark.unit
    def test_insert_budget(self, generator, landing_page):
        """Test insertion retries malformed output at most twice."""
        backend = StubBackend(["```json\n{ broken"])
        with pytest.raises(ParseError):
            generator(backend).insert_section(landing_page, "Add pricing", "Pricing")
        assert len(backend.calls) == 2

    @pytest.mark.unit
    def test_preset_from_page(self, generator, landing_data, landing_json):
        """Test the page's own preset is kept when none is requested."""
        landing_data["preset"] = "luxury"
        page = load_page(landing_data)
        output = generator(StubBackend([landing_json])).insert_section(page, "Tweak", "Hero")
        assert output.page.preset == StylePreset.LUXURY

    @pytest.mark.unit
    def test_product_insert(self, generator, product_page):
        """Test insertion on a product page updates only the proposed section."""
        proposal = copy.deepcopy(PRODUCT_DATA)
        proposal["product"]["productSection"]["title"] = "Aurora ANC Pro"
        proposal["product"]["reviews"]["reviews"] = []
        backend = StubBackend([json.dumps(proposal)])

        output = generator(backend).insert_section(product_page, "Rename", "Product")
        merged = dump_page(output.page)["product"]
        assert merged["productSection"]["title"] == "Aurora ANC Pro"
        assert len(merged["reviews"]["reviews"]) == 4


# =============================================================================
# Live Provider Tests
# =============================================================================


@pytest.mark.parametrize(
    "provider",
    [
        pytest.param(name, marks=pytest.mark.integration(name))
        for name in ("anthropic", "openai", "gemini", "groq")
    ],
)
class TestLiveGeneration:
    """End-to-end generation against real providers (needs API keys)."""

    def test_landing_page(self, provider):
        """Test a real provider produces a renderable landing page."""
        generator = PageGenerator(provider=provider)
        output = generator.generate([COFFEE_TURN], "landing")

        assert output.provider == provider
        assert output.artifact.component_code.startswith("function App()")
        assert output.html.count("<nav") == 1
