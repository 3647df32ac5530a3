"""Deterministic StructuredPage -> JSX renderer.

render_page() walks the canonical section order for the page type, asks each
section builder for a node (or nothing, for absent optional sections), and
serializes the resulting tree once. The same page and preset always produce
byte-identical output.
"""

import logging
from typing import Any, Callable

from shopforge.core.errors import RenderError
from shopforge.schema import (
    LandingPage,
    ProductPage,
    RenderedArtifact,
    StylePreset,
)

from . import landing, product
from .context import RenderContext
from .nodes import Element, el, escape_text, serialize
from .theme import get_theme, resolve_preset

logger = logging.getLogger(__name__)

SectionBuilder = Callable[[Any, RenderContext], Element | None]

# Canonical order: section key (JSON spelling) -> (attribute, builder)
LANDING_SECTION_ORDER: dict[str, tuple[str, SectionBuilder]] = {
    "nav": ("nav", landing.build_nav),
    "hero": ("hero", landing.build_hero),
    "team": ("team", landing.build_team),
    "logoBar": ("logo_bar", landing.build_logo_bar),
    "faq": ("faq", landing.build_faq),
    "features": ("features", landing.build_features),
    "stats": ("stats", landing.build_stats),
    "newsletter": ("newsletter", landing.build_newsletter),
    "pricing": ("pricing", landing.build_pricing),
    "testimonials": ("testimonials", landing.build_testimonials),
    "ctaBanner": ("cta_banner", landing.build_cta_banner),
    "footer": ("footer", landing.build_footer),
}

PRODUCT_SECTION_ORDER: dict[str, tuple[str, SectionBuilder]] = {
    "nav": ("nav", product.build_product_nav),
    "productSection": ("product_section", product.build_product_section),
    "reviews": ("reviews", product.build_reviews),
    "relatedProducts": ("related_products", product.build_related_products),
    "footer": ("footer", landing.build_optional_footer),
}

# Sections rendered outside <main>
_CHROME_BEFORE = frozenset({"nav"})
_CHROME_AFTER = frozenset({"footer"})

CSS_CODE = (
    "@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800;900"
    "&display=swap'); body { font-family: 'Inter', sans-serif; margin: 0; "
    "background-color: #09090b; color: #e5e7eb; }"
)

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{title}</title>
  <script src="https://cdn.tailwindcss.com"></script>
  <style>
    * {{ box-sizing: border-box; }}
    html {{ scroll-behavior: smooth; }}
    body {{ margin: 0; padding: 0; overflow-x: hidden; }}
    {css}
  </style>
</head>
<body>
  <div id="root"></div>
  <script crossorigin src="https://unpkg.com/react@18/umd/react.production.min.js"></script>
  <script crossorigin src="https://unpkg.com/react-dom@18/umd/react-dom.production.min.js"></script>
  <script src="https://unpkg.com/@babel/standalone@7.23.4/babel.min.js"></script>
  <script type="text/babel" data-presets="react">
{component}
    const container = document.getElementById('root');
    const root = ReactDOM.createRoot(container);
    root.render(React.createElement(App));
  </script>
</body>
</html>
"""


def _build_tree(
    content: Any,
    order: dict[str, tuple[str, SectionBuilder]],
    ctx: RenderContext,
    main_class: str,
) -> Element:
    before, body, after = [], [], []
    for key, (attr, builder) in order.items():
        node = builder(getattr(content, attr), ctx)
        if node is None:
            continue
        if key in _CHROME_BEFORE:
            before.append(node)
        elif key in _CHROME_AFTER:
            after.append(node)
        else:
            body.append(node)
    t = ctx.theme
    return el(
        "div",
        f"{t.page_bg} {t.page_text} min-h-screen",
        *before,
        el("main", main_class, *body),
        *after,
    )


def _component_code(root: Element) -> str:
    return "function App() {\n  return (\n" + serialize(root, indent=2) + "\n  );\n}\n"


def render_page(
    page: LandingPage | ProductPage,
    preset: StylePreset | str | None = None,
) -> RenderedArtifact:
    """Render a page into a self-contained `function App()` component.

    Args:
        page: Validated page.
        preset: Style preset. Defaults to the page's own preset, then bold.
            Unknown names fall back to bold.

    Returns:
        RenderedArtifact with the component source and stylesheet.

    Raises:
        RenderError: If the content branch or a required section is missing.
    """
    theme = get_theme(resolve_preset(preset if preset is not None else page.preset))

    try:
        if isinstance(page, LandingPage):
            content = page.landing
            if content is None:
                raise RenderError("Missing landing data")
            ctx = RenderContext.create(theme, content.nav.accent_color if content.nav else None)
            root = _build_tree(content, LANDING_SECTION_ORDER, ctx, "pt-20")
        else:
            content = page.product
            if content is None:
                raise RenderError("Missing product data")
            ctx = RenderContext.create(
                theme,
                content.nav.accent_color if content.nav else None,
                content.reviews.review_count if content.reviews else 0,
            )
            root = _build_tree(content, PRODUCT_SECTION_ORDER, ctx, "pt-24 pb-16 px-4")
    except RenderError:
        logger.error(f"Failed to render page '{page.title}'", exc_info=True)
        raise

    return RenderedArtifact(
        title=page.title,
        component_code=_component_code(root),
        css_code=CSS_CODE,
    )


def build_html_document(artifact: RenderedArtifact) -> str:
    """Wrap a rendered artifact in a standalone HTML document.

    The document loads Tailwind, React 18 and Babel from CDNs and mounts
    App into #root.
    """
    component = "\n".join(
        f"    {line}" if line else line for line in artifact.component_code.splitlines()
    )
    return HTML_TEMPLATE.format(
        title=escape_text(artifact.title),
        css=artifact.css_code,
        component=component,
    )


def render_html(
    page: LandingPage | ProductPage,
    preset: StylePreset | str | None = None,
) -> tuple[RenderedArtifact, str]:
    """Render a page and wrap it in an HTML document."""
    artifact = render_page(page, preset)
    return artifact, build_html_document(artifact)


__all__ = [
    "SectionBuilder",
    "LANDING_SECTION_ORDER",
    "PRODUCT_SECTION_ORDER",
    "CSS_CODE",
    "render_page",
    "build_html_document",
    "render_html",
]
