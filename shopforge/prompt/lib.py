"""Prompt construction for generation, refinement and section insertion.

Every function here is pure: the same inputs always yield the same prompt
text, which keeps provider calls reproducible in tests.
"""

import json
from typing import Any, Sequence

from shopforge.schema import (
    DEFAULT_PRESET,
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

from .presets import (
    COLOR_CHANGE_RULE,
    DESIGN_RULES,
    LANDING_SHAPE,
    OUTPUT_FORMAT,
    PAGE_SECTIONS,
    PERSONA,
    PRESET_STYLES,
    PRODUCT_SHAPE,
    RESPONSIVE_RULES,
)

_PAGE_NOUN = {PageType.LANDING: "landing page", PageType.PRODUCT: "product page"}


# =============================================================================
# Generation Prompts
# =============================================================================


def build_system_prompt(
    page_type: PageType | str,
    preset: StylePreset | str = DEFAULT_PRESET,
) -> str:
    """Build the generation system prompt.

    Args:
        page_type: Page type whose section list is included.
        preset: Style preset whose style block is included.

    Returns:
        System prompt text.
    """
    page_type = PageType(page_type)
    preset = StylePreset(preset)
    return "\n\n".join(
        [
            PERSONA,
            PAGE_SECTIONS[page_type],
            PRESET_STYLES[preset],
            DESIGN_RULES + "\n" + RESPONSIVE_RULES,
            COLOR_CHANGE_RULE,
            OUTPUT_FORMAT,
            LANDING_SHAPE,
            PRODUCT_SHAPE,
        ]
    )


def _generation_directive(page_type: PageType) -> str:
    return (
        f"Generate a premium {_PAGE_NOUN[page_type]} that feels like a world-class "
        "SaaS marketing site (Stripe / Linear / Vercel quality).\n\n"
        "IMPORTANT:\n"
        "- You must NOT output any JSX, HTML, or CSS.\n"
        f'- Instead, fill the JSON shape described above for pageType = "{page_type.value}".\n'
        "- All copy must be realistic and on-brand. No lorem ipsum.\n"
        "- Every image URL must use https://loremflickr.com/WIDTH/HEIGHT/keyword1,keyword2 "
        "with highly specific, brand-appropriate keywords (e.g. /1200/1200/headphones,audio "
        "or /1200/800/coffee,espresso).\n"
        "- For avatar images always use /96/96/portrait,face or /128/128/portrait,professional, "
        "never product keywords.\n"
        "- Colors should be Tailwind color names or hex values and should respect the style preset."
    )


def _refinement(request: str) -> str:
    return (
        f"Refinement request: {request}\n\n"
        "Apply ONLY this specific change to the existing JSON page data you returned earlier.\n"
        "- Keep the overall section structure identical.\n"
        "- If the user asks to change color, update color-related fields consistently "
        "across nav/hero/sections.\n"
        "- If the user asks to change copy or button labels, update only the relevant text fields.\n"
        '- On PRODUCT pages, treat requests like "add a buy button at the end" or '
        '"change the buy button text" as updates to product.productSection.ctaLabel '
        '(e.g. set it to "Buy Now").\n'
        "Return ONLY the full updated JSON object starting with { and ending with }."
    )


def build_messages(
    turns: Sequence[ConversationTurn],
    page_type: PageType | str,
    reference_url: str | None = None,
) -> list[ChatMessage]:
    """Shape conversation turns into provider messages.

    The first turn, when it is a user turn, carries the generation directive
    (and the design reference URL, if any). Later user turns are wrapped as
    refinement requests. Assistant turns pass through unchanged.

    Args:
        turns: Conversation in order.
        page_type: Page type being generated.
        reference_url: Optional design inspiration URL.

    Returns:
        Messages in the same order as the turns.
    """
    page_type = PageType(page_type)
    messages = []
    for index, turn in enumerate(turns):
        if turn.role is Role.ASSISTANT:
            messages.append(ChatMessage(role=Role.ASSISTANT, content=turn.content))
            continue
        if index == 0:
            prefix = f"Design inspiration reference: {reference_url}\n\n" if reference_url else ""
            content = f"{prefix}{turn.content}\n\n{_generation_directive(page_type)}"
        else:
            content = _refinement(turn.content)
        messages.append(ChatMessage(role=Role.USER, content=content))
    return messages


def build_refinement_turns(
    turns: Sequence[ConversationTurn],
    new_request: str | ConversationTurn,
    page_data: LandingPage | ProductPage | None = None,
    last_code: RenderedArtifact | None = None,
) -> list[ConversationTurn]:
    """Build the compact conversation sent for a refinement.

    Instead of replaying the whole history, the frame anchors the model on
    the current page: the original request, a synthetic assistant turn with
    the page JSON (or the last rendered code), then the new request.

    Args:
        turns: Prior conversation.
        new_request: The refinement text or turn.
        page_data: Last known page, preferred as the anchor.
        last_code: Last rendered artifact, used when page_data is None.

    Returns:
        Turns to pass to build_messages().
    """
    if isinstance(new_request, str):
        new_request = ConversationTurn(role=Role.USER, content=new_request)

    anchor: dict[str, Any] | None = None
    if page_data is not None:
        anchor = dump_page(page_data)
    elif last_code is not None:
        anchor = {
            "componentCode": last_code.component_code,
            "cssCode": last_code.css_code,
            "title": last_code.title,
        }

    if anchor is None:
        return [*turns, new_request]

    first_user = next((t for t in turns if t.role is Role.USER), new_request)
    context = ConversationTurn(
        role=Role.ASSISTANT,
        content=json.dumps(anchor, ensure_ascii=False, separators=(",", ":")),
    )
    return [first_user, context, new_request]


# =============================================================================
# Section Insertion Prompts
# =============================================================================

INSERT_SYSTEM_PROMPT = """You are ShopForge, an expert JSON page-structure editor for a React + Tailwind CSS storefront.
You will receive an existing page JSON object that represents either a landing page or a product page.
Your job is to ADD or UPDATE a single section in this JSON while keeping the overall structure compatible with the page format.

CRITICAL RULES:
- You must operate ONLY on JSON data. Do NOT output JSX, HTML, or CSS.
- Preserve the fundamental section ordering for each page type:
  - landing: NAV > HERO > FEATURES > PRICING > TESTIMONIALS > CTA BANNER > FOOTER
  - product: NAV > PRODUCT SECTION > FOOTER
- Always edit the existing canonical section keys for the page type rather than adding new top-level sections:
  - For a HERO-related request on a landing page, update only landing.hero.
  - For a FEATURES-related request on a landing page, update only landing.features.
  - For a PRICING-related request on a landing page, update only landing.pricing.
  - For a TESTIMONIALS-related request on a landing page, update only landing.testimonials.
  - For a CTA banner request on a landing page, update only landing.ctaBanner.
  - For product-specific layout changes, update only product.productSection.
- Do NOT introduce new peer keys like extraTestimonials, secondaryHero, altPricing, etc. The only valid section keys are: nav, hero, features, pricing, testimonials, faq, stats, newsletter, team, logoBar, ctaBanner, footer (landing) and nav, productSection, reviews, relatedProducts, footer (product).
- By default, INSERT or REPLACE content inside the correct section while keeping all other sections unchanged, unless the user explicitly instructs you to remove or replace them.
- Match the existing tone, wording style, and brand positioning.
- Match the existing style preset (minimalist, bold, luxury, etc.) in terms of intensity, voice, and copy style.
- Reuse and respect the existing color accents and product/brand theme.

CONTENT POPULATION RULES (non-negotiable):

Every array field you include MUST be populated with real, brand-appropriate content. NEVER return an empty array [] for any section you are adding or updating.
Minimum array sizes: features.features >= 3, pricing.tiers = 3, testimonials.testimonials >= 3, faq.items >= 5, stats.items = 4, team.members >= 3, logoBar.logos >= 5, reviews.reviews >= 3, relatedProducts.items >= 4, nav.links >= 2, footer.columns >= 2.
If you cannot populate an optional section with real content, omit the entire key from the JSON rather than returning it with an empty array.
All string fields (headline, heading, quote, description, etc.) must be non-empty strings relevant to the brand context.

OUTPUT FORMAT:
- You must return ONLY a single JSON object, starting with { and ending with }.
- The JSON MUST keep the same pageType, title and section keys as the input.
- Do NOT include markdown, code fences, comments, JSX, HTML, or CSS. Raw JSON only."""


def build_insert_prompts(
    page: LandingPage | ProductPage,
    section_prompt: str,
    section_label: str,
    page_type: PageType | str | None = None,
) -> tuple[str, str]:
    """Build the (system, user) prompt pair for a section insertion.

    Args:
        page: The page being edited.
        section_prompt: What to add or change.
        section_label: Display label of the section.
        page_type: Page type; defaults to the page's own type.

    Returns:
        Tuple of (system prompt, user message).
    """
    page_type = PageType(page_type or page.page_type)
    pretty = json.dumps(dump_page(page), indent=2, ensure_ascii=False)
    user = (
        "You are editing an existing page described as a JSON object.\n\n"
        "Here is the existing page JSON:\n\n"
        f'"""\n{pretty}\n"""\n\n'
        f'TASK: Add or update a section labeled "{section_label}". Specifically: {section_prompt}\n\n'
        "- Edit only the JSON data.\n"
        "- You MUST modify the correct existing section key for this label (for example, "
        "hero -> landing.hero, features -> landing.features, pricing -> landing.pricing, "
        "testimonials -> landing.testimonials, CTA banner -> landing.ctaBanner, "
        "product hero/details -> product.productSection).\n"
        "- Do NOT create new sibling keys such as extraTestimonials, secondaryHero, altPricing, etc.\n"
        "- Keep the same keys and overall structure.\n"
        f"- Preserve the correct section ordering for a {page_type.value} page.\n"
        "- Do NOT output JSX, HTML, or CSS.\n"
        "- Return ONLY the full updated JSON object (no markdown)."
    )
    return INSERT_SYSTEM_PROMPT, user


__all__ = [
    "build_system_prompt",
    "build_messages",
    "build_refinement_turns",
    "build_insert_prompts",
    "INSERT_SYSTEM_PROMPT",
]
