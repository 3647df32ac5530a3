"""shopforge: LLM page generator for e-commerce landing and product pages."""

from shopforge.llm import BackendRegistry, PageGenerator
from shopforge.render import render_html, render_page
from shopforge.schema import (
    ConversationTurn,
    LandingPage,
    PageType,
    ProductPage,
    StylePreset,
    load_page,
)

__all__ = [
    # Generation
    "PageGenerator",
    "BackendRegistry",
    # Page model
    "PageType",
    "StylePreset",
    "LandingPage",
    "ProductPage",
    "ConversationTurn",
    "load_page",
    # Rendering
    "render_page",
    "render_html",
]
