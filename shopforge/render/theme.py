"""Tailwind token tables for each style preset."""

from dataclasses import dataclass

from shopforge.schema import DEFAULT_PRESET, StylePreset


@dataclass(frozen=True)
class Theme:
    """Class-name tokens for every styled slot of a page."""

    page_bg: str
    page_text: str
    nav_bg: str
    nav_border: str
    nav_text: str
    nav_hover: str
    hero_bg: str
    hero_headline: str
    hero_sub: str
    primary_btn: str
    secondary_btn: str
    section_label: str
    section_heading: str
    card_bg: str
    card_text: str
    pricing_highlight: str
    pricing_normal: str
    testimonial_card: str
    cta_bg: str
    cta_text: str
    footer_bg: str
    footer_text: str
    star_color: str


THEMES: dict[StylePreset, Theme] = {
    StylePreset.MINIMALIST: Theme(
        page_bg="bg-white",
        page_text="text-gray-900",
        nav_bg="bg-white/90",
        nav_border="border-gray-200",
        nav_text="text-gray-700",
        nav_hover="hover:text-gray-900",
        hero_bg="bg-white",
        hero_headline="text-gray-900",
        hero_sub="text-gray-500",
        primary_btn=(
            "border border-gray-900 text-gray-900 bg-transparent "
            "hover:bg-gray-900 hover:text-white"
        ),
        secondary_btn="border border-gray-300 text-gray-600 bg-transparent",
        section_label="text-gray-400",
        section_heading="text-gray-900",
        card_bg="bg-white border border-gray-100",
        card_text="text-gray-600",
        pricing_highlight="bg-gray-900 text-white",
        pricing_normal="bg-white border border-gray-200",
        testimonial_card="bg-gray-50 border border-gray-100",
        cta_bg="bg-gray-900",
        cta_text="text-white",
        footer_bg="bg-white border-t border-gray-200",
        footer_text="text-gray-500",
        star_color="text-gray-900",
    ),
    StylePreset.BOLD: Theme(
        page_bg="bg-zinc-950",
        page_text="text-white",
        nav_bg="bg-black/60",
        nav_border="border-white/10",
        nav_text="text-zinc-300",
        nav_hover="hover:text-white",
        hero_bg="bg-zinc-950",
        hero_headline="text-white",
        hero_sub="text-zinc-400",
        primary_btn="text-black font-black",
        secondary_btn="border border-white/20 text-zinc-100",
        section_label="text-zinc-500",
        section_heading="text-white",
        card_bg="bg-white/5 border border-white/10",
        card_text="text-zinc-300",
        pricing_highlight="bg-gradient-to-b from-white/10 to-white/5 border border-white/20",
        pricing_normal="bg-white/5 border border-white/10",
        testimonial_card="bg-white/5 border border-white/10",
        cta_bg=(
            "bg-gradient-to-r from-white/5 via-white/10 to-white/5 "
            "border border-white/10"
        ),
        cta_text="text-white",
        footer_bg="border-t border-white/10",
        footer_text="text-zinc-500",
        star_color="text-amber-400",
    ),
    StylePreset.LUXURY: Theme(
        page_bg="bg-black",
        page_text="text-amber-50",
        nav_bg="bg-black/80",
        nav_border="border-amber-300/10",
        nav_text="text-amber-100/70",
        nav_hover="hover:text-amber-200",
        hero_bg="bg-black",
        hero_headline="text-amber-50",
        hero_sub="text-amber-100/60",
        primary_btn="bg-amber-300 text-black font-black tracking-wide",
        secondary_btn="border border-amber-300/30 text-amber-200",
        section_label="text-amber-400/60",
        section_heading="text-amber-50",
        card_bg="bg-zinc-950 border border-amber-300/10",
        card_text="text-amber-100/70",
        pricing_highlight=(
            "bg-gradient-to-b from-amber-300/10 to-transparent "
            "border border-amber-300/30"
        ),
        pricing_normal="bg-zinc-950 border border-amber-300/10",
        testimonial_card="bg-zinc-950 border border-amber-300/10",
        cta_bg=(
            "bg-gradient-to-r from-amber-300/5 via-amber-300/10 to-amber-300/5 "
            "border border-amber-300/20"
        ),
        cta_text="text-amber-50",
        footer_bg="border-t border-amber-300/10",
        footer_text="text-amber-100/40",
        star_color="text-amber-300",
    ),
    StylePreset.PLAYFUL: Theme(
        page_bg="bg-white",
        page_text="text-gray-900",
        nav_bg="bg-white/90",
        nav_border="border-purple-100",
        nav_text="text-gray-600",
        nav_hover="hover:text-purple-600",
        hero_bg="bg-gradient-to-br from-purple-50 to-pink-50",
        hero_headline="text-gray-900",
        hero_sub="text-gray-500",
        primary_btn="rounded-full font-black shadow-lg",
        secondary_btn="rounded-full border-2 border-purple-200 text-purple-600",
        section_label="text-purple-400",
        section_heading="text-gray-900",
        card_bg="bg-white border-2 border-purple-100 rounded-3xl",
        card_text="text-gray-600",
        pricing_highlight="bg-gradient-to-b from-purple-500 to-pink-500 text-white rounded-3xl",
        pricing_normal="bg-white border-2 border-purple-100 rounded-3xl",
        testimonial_card="bg-purple-50 border-2 border-purple-100 rounded-3xl",
        cta_bg="bg-gradient-to-r from-purple-500 to-pink-500 rounded-3xl",
        cta_text="text-white",
        footer_bg="bg-gray-50 border-t border-purple-100",
        footer_text="text-gray-400",
        star_color="text-yellow-400",
    ),
}


def resolve_preset(preset: StylePreset | str | None) -> StylePreset:
    """Coerce a preset name, falling back to the default for unknown values."""
    if preset is None:
        return DEFAULT_PRESET
    try:
        return StylePreset(preset)
    except ValueError:
        return DEFAULT_PRESET


def get_theme(preset: StylePreset | str | None = None) -> Theme:
    return THEMES[resolve_preset(preset)]


__all__ = ["Theme", "THEMES", "resolve_preset", "get_theme"]
