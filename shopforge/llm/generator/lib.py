"""PageGenerator orchestrator for LLM-powered page generation.

Drives the attempt state machine (provider call, parse, validate, render)
for three flows: single generation, multi-preset variant fan-out, and
section insertion with merge.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from shopforge.config import EnvVar, get_environment
from shopforge.core.errors import (
    RequestError,
    ShopForgeError,
    ValidationError,
    VariantsFailedError,
)
from shopforge.merge import merge_pages
from shopforge.parse import parse_page
from shopforge.prompt import build_insert_prompts, build_messages, build_system_prompt
from shopforge.render import render_html, resolve_preset
from shopforge.schema import (
    ChatMessage,
    ConversationTurn,
    LandingPage,
    PageType,
    ProductPage,
    RenderedArtifact,
    Role,
    StylePreset,
    dump_page,
)
from shopforge.validation import validate_page

from ..backend import BackendRegistry, LLMBackend, SamplingParams
from ..backend.base import DEFAULT_MAX_OUTPUT_TOKENS
from .result import Fatal, Outcome, Retryable, Success, classify
from .retry import RetryPolicy

logger = logging.getLogger(__name__)

Page = LandingPage | ProductPage

INVALID_PAGE_TYPE = "Invalid page type. Must be landing or product."


def coerce_page_type(value: PageType | str | None) -> PageType:
    """Parse a page type, raising RequestError for anything else."""
    try:
        return PageType(value)
    except ValueError:
        raise RequestError(INVALID_PAGE_TYPE) from None


# =============================================================================
# Configuration and Results
# =============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for PageGenerator.

    Attributes:
        max_retries: Attempt budget for single generation.
        variant_max_retries: Attempt budget for each variant.
        insert_max_retries: Attempt budget for section insertion.
        retry_delay: Fixed wait between attempts (seconds).
        temperature: Sampling temperature for single generation.
        variant_temperature: Sampling temperature for variants.
        insert_temperature: Sampling temperature for insertion.
        max_output_tokens: Output limit for every call.
        max_workers: Thread pool size for the variant fan-out.
        default_preset: Preset used when a request names none.
    """

    max_retries: int = 3
    variant_max_retries: int = 2
    insert_max_retries: int = 2
    retry_delay: float = 0.5
    temperature: float = 0.7
    variant_temperature: float = 0.9
    insert_temperature: float = 0.5
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    max_workers: int = 3
    default_preset: str = StylePreset.BOLD.value

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a config from environment settings, keeping code defaults elsewhere."""
        return cls(
            max_retries=get_environment(EnvVar.GENERATION_MAX_RETRIES),
            variant_max_retries=get_environment(EnvVar.VARIANT_MAX_RETRIES),
            insert_max_retries=get_environment(EnvVar.INSERT_MAX_RETRIES),
            retry_delay=get_environment(EnvVar.RETRY_DELAY),
            default_preset=get_environment(EnvVar.DEFAULT_PRESET),
        )


@dataclass
class GenerationStats:
    """Statistics from one generation run.

    Attributes:
        attempts: Provider calls made.
        retryable_failures: Attempts that failed with a retryable error.
        provider: Provider that served the run.
        model: Model identifier used.
    """

    attempts: int = 0
    retryable_failures: int = 0
    provider: str = ""
    model: str = ""


@dataclass
class GenerationOutput:
    """Complete output from a successful run.

    Attributes:
        page: Validated page, tagged with its preset.
        artifact: Rendered component and stylesheet.
        html: Standalone HTML document.
        provider: Provider that produced the page.
        stats: Run statistics.
    """

    page: Page
    artifact: RenderedArtifact
    html: str
    provider: str
    stats: GenerationStats = field(default_factory=GenerationStats)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase result shape returned to callers."""
        return {
            "html": self.html,
            "componentCode": self.artifact.component_code,
            "cssCode": self.artifact.css_code,
            "title": self.artifact.title,
            "structuredPage": dump_page(self.page),
            "providerUsed": self.provider,
        }


@dataclass(frozen=True)
class VariantPreset:
    """One entry of the variant fan-out."""

    preset: StylePreset
    label: str
    style: str

    @property
    def id(self) -> str:
        return self.preset.value


VARIANT_PRESETS: tuple[VariantPreset, ...] = (
    VariantPreset(StylePreset.MINIMALIST, "Minimalist", "Clean, airy, whitespace-focused"),
    VariantPreset(StylePreset.BOLD, "Bold", "High contrast, strong typography"),
    VariantPreset(StylePreset.LUXURY, "Luxury", "Dark, premium, gold accents"),
)


@dataclass
class VariantOutput:
    """A successful variant: its preset metadata plus the generation output."""

    id: str
    label: str
    style: str
    preset: StylePreset
    output: GenerationOutput

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "style": self.style,
            "preset": self.preset.value,
            **self.output.to_dict(),
        }


# =============================================================================
# Orchestrator
# =============================================================================


class PageGenerator:
    """Orchestrates LLM-based page generation.

    Pipeline per attempt:
        1. Call the provider with the built prompts
        2. Parse the completion into a StructuredPage
        3. (insertion only) Merge the proposal into the current page
        4. Validate required sections
        5. Tag the preset and render

    Parse and validation failures are retried up to the flow's budget with a
    fixed delay; every other failure ends the run immediately.

    Example:
        >>> registry = BackendRegistry()
        >>> generator = PageGenerator(registry)
        >>> turn = ConversationTurn(role="user", content="Coffee shop 'Morning Ritual'")
        >>> output = generator.generate([turn], "landing")
        >>> output.artifact.component_code.startswith("function App()")
        True
    """

    def __init__(
        self,
        registry: BackendRegistry | None = None,
        config: GeneratorConfig | None = None,
        *,
        provider: str | None = None,
        sleep: Callable[[float], None] | None = None,
    ):
        """Initialize PageGenerator.

        Args:
            registry: Backend registry. Creates one if None.
            config: Generator configuration. Reads the environment if None.
            provider: Provider to use instead of the registry's active one.
            sleep: Wait function between retries; time.sleep if None.
        """
        self._registry = registry or BackendRegistry()
        self._config = config or GeneratorConfig.from_env()
        self._provider = provider
        self._sleep = sleep

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def registry(self) -> BackendRegistry:
        return self._registry

    @property
    def provider(self) -> str:
        """Name of the provider this generator calls."""
        if self._provider is not None:
            return self._provider
        return self._registry.active_provider().value

    def _backend(self) -> LLMBackend:
        return self._registry.get(self._provider)

    def _policy(self, max_attempts: int) -> RetryPolicy:
        policy = RetryPolicy(max_attempts=max_attempts, delay=self._config.retry_delay)
        if self._sleep is not None:
            policy.sleep = self._sleep
        return policy

    def _sampling(self, temperature: float) -> SamplingParams:
        return SamplingParams(
            temperature=temperature,
            max_output_tokens=self._config.max_output_tokens,
        )

    def _preset(self, preset: StylePreset | str | None, page: Page | None = None) -> StylePreset:
        if preset is None and page is not None and page.preset is not None:
            return page.preset
        return resolve_preset(preset if preset is not None else self._config.default_preset)

    def _run(
        self,
        backend: LLMBackend,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        sampling: SamplingParams,
        preset: StylePreset,
        max_attempts: int,
        prepare: Callable[[Page], Page],
        label: str,
    ) -> GenerationOutput:
        """Run the attempt loop and return the output or raise the final error."""
        stats = GenerationStats(provider=backend.provider, model=backend.model_name)

        def attempt(number: int) -> Outcome[GenerationOutput]:
            stats.attempts = number
            try:
                raw = backend.complete(system_prompt, messages, sampling)
                page = prepare(parse_page(raw))
                validate_page(page)
                page = page.model_copy(update={"preset": preset})
                artifact, html = render_html(page, preset)
            except Exception as exc:
                outcome = classify(exc)
                if isinstance(outcome, Retryable):
                    stats.retryable_failures += 1
                return outcome
            return Success(
                GenerationOutput(
                    page=page,
                    artifact=artifact,
                    html=html,
                    provider=backend.provider,
                    stats=stats,
                )
            )

        outcome = self._policy(max_attempts).run(attempt, label=label)
        if isinstance(outcome, Success):
            logger.info(
                f"{label} succeeded after {stats.attempts} attempt(s) via {backend.name}"
            )
            return outcome.value
        if isinstance(outcome, Fatal):
            logger.warning(f"{label} failed: {type(outcome.error).__name__}")
        else:
            logger.warning(f"{label} exhausted {stats.attempts} attempt(s)")
        raise outcome.error

    def generate(
        self,
        turns: Sequence[ConversationTurn],
        page_type: PageType | str,
        preset: StylePreset | str | None = None,
        reference_url: str | None = None,
    ) -> GenerationOutput:
        """Generate (or refine) a page from a conversation.

        Args:
            turns: Conversation in order; the last user turn is the request.
            page_type: Page type to generate.
            preset: Style preset. Defaults to the configured default preset.
            reference_url: Optional design inspiration URL.

        Returns:
            GenerationOutput for the validated, rendered page.

        Raises:
            RequestError: If there are no turns or the page type is invalid.
            ParseError: If every attempt returned malformed output.
            ValidationError: If every attempt returned incomplete output.
            ShopForgeError: Any fatal error, immediately.
        """
        if not turns:
            raise RequestError("No messages provided")
        page_type = coerce_page_type(page_type)
        preset = self._preset(preset)

        backend = self._backend()
        system_prompt = build_system_prompt(page_type, preset)
        messages = build_messages(turns, page_type, reference_url)

        return self._run(
            backend,
            system_prompt,
            messages,
            self._sampling(self._config.temperature),
            preset,
            self._config.max_retries,
            _expect_page_type(page_type),
            label=f"{page_type.value} generation",
        )

    def generate_variants(
        self,
        first_turn: ConversationTurn | str,
        page_type: PageType | str,
        reference_url: str | None = None,
        presets: Sequence[VariantPreset] = VARIANT_PRESETS,
    ) -> list[VariantOutput]:
        """Generate one page per preset concurrently from a single request.

        Every variant runs its own attempt loop; all of them are awaited.
        Failed variants are logged and dropped.

        Args:
            first_turn: The user's request.
            page_type: Page type to generate.
            reference_url: Optional design inspiration URL.
            presets: Variants to produce, in result order.

        Returns:
            Successful variants, in preset order.

        Raises:
            RequestError: If the request is empty or the page type is invalid.
            VariantsFailedError: If no variant succeeded.
        """
        if isinstance(first_turn, str):
            if not first_turn.strip():
                raise RequestError("No messages provided")
            first_turn = ConversationTurn(role=Role.USER, content=first_turn)
        page_type = coerce_page_type(page_type)

        backend = self._backend()
        messages = build_messages([first_turn], page_type, reference_url)
        sampling = self._sampling(self._config.variant_temperature)

        def run_variant(variant: VariantPreset) -> GenerationOutput:
            return self._run(
                backend,
                build_system_prompt(page_type, variant.preset),
                messages,
                sampling,
                variant.preset,
                self._config.variant_max_retries,
                _expect_page_type(page_type),
                label=f"{variant.id} variant",
            )

        workers = max(1, min(self._config.max_workers, len(presets)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="variant") as pool:
            futures = [(variant, pool.submit(run_variant, variant)) for variant in presets]

        variants: list[VariantOutput] = []
        errors: list[ShopForgeError] = []
        for variant, future in futures:
            exc = future.exception()
            if exc is None:
                variants.append(
                    VariantOutput(
                        id=variant.id,
                        label=variant.label,
                        style=variant.style,
                        preset=variant.preset,
                        output=future.result(),
                    )
                )
                continue
            error = exc if isinstance(exc, ShopForgeError) else classify(exc).error
            logger.warning(f"Dropping {variant.id} variant: {type(error).__name__}: {error}")
            errors.append(error)

        if not variants:
            raise VariantsFailedError(errors)
        logger.info(f"Generated {len(variants)}/{len(presets)} variants")
        return variants

    def insert_section(
        self,
        page: Page,
        section_prompt: str,
        section_label: str,
        page_type: PageType | str | None = None,
        preset: StylePreset | str | None = None,
    ) -> GenerationOutput:
        """Add or update one section of an existing page.

        The model returns a full page; it is merged into `page` section by
        section so that sections the model dropped survive.

        Args:
            page: Current page.
            section_prompt: What to add or change.
            section_label: Display label of the section.
            page_type: Page type; defaults to the page's own.
            preset: Style preset; defaults to the page's preset, then the configured default.

        Returns:
            GenerationOutput for the merged page.

        Raises:
            RequestError: If the page type is invalid.
            ShopForgeError: As for generate().
        """
        page_type = coerce_page_type(page_type or page.page_type)
        preset = self._preset(preset, page)

        backend = self._backend()
        system_prompt, user_message = build_insert_prompts(
            page, section_prompt, section_label, page_type
        )

        return self._run(
            backend,
            system_prompt,
            [ChatMessage(role=Role.USER, content=user_message)],
            self._sampling(self._config.insert_temperature),
            preset,
            self._config.insert_max_retries,
            lambda proposed: merge_pages(page, proposed),
            label=f"{section_label} insertion",
        )


def _expect_page_type(page_type: PageType) -> Callable[[Page], Page]:
    def check(page: Page) -> Page:
        if page.page_type != page_type.value:
            raise ValidationError(
                "pageType",
                f"pageType is {page.page_type}, expected {page_type.value}",
            )
        return page

    return check


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
]
