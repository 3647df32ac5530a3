"""Template renderer: StructuredPage to JSX component and HTML document.

Example:
    >>> from shopforge.render import render_html
    >>> artifact, html = render_html(page, preset="luxury")
    >>> artifact.component_code.startswith("function App()")
    True
"""

from .lib import (
    CSS_CODE,
    LANDING_SECTION_ORDER,
    PRODUCT_SECTION_ORDER,
    SectionBuilder,
    build_html_document,
    render_html,
    render_page,
)
from .nodes import Element, Node, Text, el, escape_text, sanitize_style_value, serialize
from .theme import THEMES, Theme, get_theme, resolve_preset

__all__ = [
    # Rendering
    "render_page",
    "render_html",
    "build_html_document",
    "CSS_CODE",
    "LANDING_SECTION_ORDER",
    "PRODUCT_SECTION_ORDER",
    "SectionBuilder",
    # Node tree
    "Element",
    "Text",
    "Node",
    "el",
    "serialize",
    "escape_text",
    "sanitize_style_value",
    # Themes
    "Theme",
    "THEMES",
    "get_theme",
    "resolve_preset",
]
