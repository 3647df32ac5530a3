"""Prompt builder for page generation and section insertion.

Example:
    >>> from shopforge.prompt import build_messages, build_system_prompt
    >>> system = build_system_prompt("landing", "luxury")
    >>> messages = build_messages(turns, "landing", reference_url="https://stripe.com")
"""

from .lib import (
    INSERT_SYSTEM_PROMPT,
    build_insert_prompts,
    build_messages,
    build_refinement_turns,
    build_system_prompt,
)
from .presets import PRESET_STYLES

__all__ = [
    "build_system_prompt",
    "build_messages",
    "build_refinement_turns",
    "build_insert_prompts",
    "INSERT_SYSTEM_PROMPT",
    "PRESET_STYLES",
]
