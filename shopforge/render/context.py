from dataclasses import dataclass

from .nodes import DEFAULT_ACCENT, sanitize_style_value
from .theme import Theme


@dataclass(frozen=True)
class RenderContext:
    """Page-wide values shared by every section builder of one render.

    Attributes:
        theme: Token table of the active preset.
        accent: Sanitized nav accent color used for primary buttons.
        review_count: Review total shown beside the product title (0 hides it).
    """

    theme: Theme
    accent: str = DEFAULT_ACCENT
    review_count: int = 0

    @classmethod
    def create(
        cls, theme: Theme, accent_color: str | None, review_count: int = 0
    ) -> "RenderContext":
        return cls(
            theme=theme,
            accent=sanitize_style_value(accent_color or ""),
            review_count=review_count,
        )
