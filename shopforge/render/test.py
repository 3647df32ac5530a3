"""Tests for the template renderer."""

import pytest

from shopforge.core.errors import RenderError
from shopforge.schema import StylePreset, load_page

from .lib import CSS_CODE, build_html_document, render_html, render_page
from .nodes import el, escape_text, sanitize_style_value, serialize
from .product import stars
from .theme import THEMES, get_theme


class TestNodes:
    """Tests for the node tree serializer."""

    @pytest.mark.unit
    def test_inline_text(self):
        """A single text child stays on one line."""
        assert serialize(el("p", "text-sm", "Hi")) == '<p className="text-sm">Hi</p>'

    @pytest.mark.unit
    def test_void_tag(self):
        """img is self-closing with double-quoted attributes."""
        node = el("img", "w-10", attrs={"src": "a.png", "alt": ""})
        assert serialize(node) == '<img className="w-10" src="a.png" alt="" />'

    @pytest.mark.unit
    def test_nested_indent(self):
        """Nested children are indented by two spaces per level."""
        node = el("div", "", el("span", "", "a"), el("span", "", "b"))
        assert serialize(node) == "<div>\n  <span>a</span>\n  <span>b</span>\n</div>"

    @pytest.mark.unit
    def test_style_literal(self):
        """Styles emit a JSX object with quoted strings and bare numbers."""
        node = el("button", "", "Go", style={"backgroundColor": "#fff", "borderWidth": 1})
        assert serialize(node) == (
            "<button style={{ backgroundColor: '#fff', borderWidth: 1 }}>Go</button>"
        )

    @pytest.mark.unit
    def test_escape_text(self):
        """HTML specials, braces and backticks are replaced with entities."""
        assert escape_text('<a href="x">{y}</a> & `z` ${w}') == (
            "&lt;a href=&quot;x&quot;&gt;&#123;y&#125;&lt;/a&gt; &amp; "
            "&#96;z&#96; $&#123;w&#125;"
        )

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("#c2410c", "#c2410c"),
            ("rgb(10, 20, 30)", "rgb(10, 20, 30)"),
            ("transparent", "transparent"),
            ("red'; alert(1); '", "#ffffff"),
            ("#fff}} />", "#ffffff"),
            ("", "#ffffff"),
        ],
    )
    def test_sanitize_style_value(self, value, expected):
        """Unsafe style values fall back to the default accent."""
        assert sanitize_style_value(value) == expected


class TestThemes:
    """Tests for theme lookup."""

    @pytest.mark.unit
    def test_every_preset_has_theme(self):
        """All presets map to a theme."""
        assert set(THEMES) == set(StylePreset)

    @pytest.mark.unit
    @pytest.mark.parametrize("preset", [None, "neon", ""])
    def test_unknown_falls_back_to_bold(self, preset):
        """Unknown presets use the bold theme."""
        assert get_theme(preset) is THEMES[StylePreset.BOLD]


class TestLandingRender:
    """Tests for landing page rendering."""

    @pytest.mark.unit
    def test_idempotent(self, landing_page):
        """Rendering twice yields identical output."""
        first = render_page(landing_page, "luxury")
        second = render_page(landing_page, "luxury")
        assert first == second

    @pytest.mark.unit
    def test_component_frame(self, landing_page):
        """The component is a self-contained App function."""
        artifact = render_page(landing_page)
        assert artifact.component_code.startswith("function App() {\n  return (\n")
        assert artifact.component_code.endswith("\n  );\n}\n")
        assert artifact.css_code == CSS_CODE
        assert artifact.title == "Morning Ritual Coffee"

    @pytest.mark.unit
    def test_content_rendered(self, landing_page):
        """Section content appears in the component."""
        code = render_page(landing_page).component_code
        assert "Coffee worth waking up for" in code
        assert "Start your ritual today" in code
        assert code.count("MOST POPULAR") == 1
        assert "backgroundColor: '#c2410c'" in code

    @pytest.mark.unit
    def test_preset_changes_tokens(self, landing_page):
        """Presets swap the theme tokens."""
        assert "bg-zinc-950" in render_page(landing_page, "bold").component_code
        assert "bg-amber-300" in render_page(landing_page, "luxury").component_code

    @pytest.mark.unit
    def test_page_preset_used_by_default(self, landing_data):
        """The page's own preset applies when none is passed."""
        landing_data["preset"] = "playful"
        code = render_page(load_page(landing_data)).component_code
        assert "from-purple-50" in code

    @pytest.mark.unit
    def test_optional_sections_omitted(self, landing_page):
        """Absent optional sections produce no markup."""
        code = render_page(landing_page).component_code
        for section_id in ('id="faq"', 'id="team"', 'id="stats"', 'id="logos"', 'id="newsletter"'):
            assert section_id not in code

    @pytest.mark.unit
    def test_canonical_order(self, landing_data_with_extras):
        """Sections appear in canonical order."""
        code = render_page(load_page(landing_data_with_extras)).component_code
        ids = ["hero", "team", "logos", "faq", "features", "stats", "newsletter", "pricing", "testimonials", "cta"]
        positions = [code.index(f'id="{section_id}"') for section_id in ids]
        assert positions == sorted(positions)
        assert code.index("<nav") < positions[0]
        assert code.index("<footer") > positions[-1]

    @pytest.mark.unit
    def test_injection_escaped(self, landing_data):
        """Markup and interpolation in content are neutralised."""
        landing_data["landing"]["hero"]["headline"] = "<script>alert(1)</script> ${x} `y`"
        landing_data["landing"]["nav"]["accentColor"] = "red'}}><img src=x onerror=alert(1) />"
        code = render_page(load_page(landing_data)).component_code

        assert "<script>" not in code
        assert "${" not in code
        assert "`" not in code
        assert "onerror" not in code
        assert "&lt;script&gt;alert(1)&lt;/script&gt; $&#123;x&#125; &#96;y&#96;" in code

    @pytest.mark.unit
    def test_missing_branch(self):
        """A landing page without content cannot be rendered."""
        with pytest.raises(RenderError, match="landing"):
            render_page(load_page({"pageType": "landing", "title": "Empty"}))

    @pytest.mark.unit
    def test_missing_required_section(self, landing_data):
        """A missing required section raises RenderError."""
        del landing_data["landing"]["pricing"]
        with pytest.raises(RenderError, match="pricing"):
            render_page(load_page(landing_data))


class TestProductRender:
    """Tests for product page rendering."""

    @pytest.mark.unit
    def test_review_and_related_limits(self, product_page):
        """At most three reviews and four related products render."""
        code = render_page(product_page).component_code
        assert code.count("rounded-full object-cover\" src=\"https://loremflickr.com/96/96") == 3
        assert code.count("View product") == 2
        assert "Hal" not in code

    @pytest.mark.unit
    def test_stars(self, product_page):
        """Review stars show the rating out of five."""
        code = render_page(product_page).component_code
        assert "★★★★☆" in code
        assert "★★★☆☆" in code
        assert "4.8 · 128 reviews" in code
        assert "(128 reviews)" in code

    @pytest.mark.unit
    @pytest.mark.parametrize("rating,expected", [(0, "★☆☆☆☆"), (3, "★★★☆☆"), (9, "★★★★★")])
    def test_star_clamp(self, rating, expected):
        """Star ratings are clamped to 1..5."""
        assert stars(rating) == expected

    @pytest.mark.unit
    def test_product_details(self, product_page):
        """Price, thumbnails, swatches and badges are rendered."""
        code = render_page(product_page).component_code
        assert "line-through" in code and "$249" in code
        assert code.count("cursor-pointer") == 3
        assert "backgroundColor: '#000000'" in code
        assert "Add to cart" in code
        assert "✓ 2 year warranty" in code

    @pytest.mark.unit
    def test_default_cta_label(self, product_data):
        """A missing product CTA label defaults to 'Add to cart'."""
        del product_data["product"]["productSection"]["ctaLabel"]
        assert "Add to cart" in render_page(load_page(product_data)).component_code

    @pytest.mark.unit
    def test_missing_product_section(self, product_data):
        """A product page needs its product section."""
        del product_data["product"]["productSection"]
        with pytest.raises(RenderError, match="productSection"):
            render_page(load_page(product_data))


class TestHtmlDocument:
    """Tests for the standalone HTML wrapper."""

    @pytest.mark.unit
    def test_document(self, landing_page):
        """The document loads the runtime and mounts App."""
        artifact, html = render_html(landing_page)
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Morning Ritual Coffee</title>" in html
        assert "https://cdn.tailwindcss.com" in html
        assert "react@18/umd/react.production.min.js" in html
        assert "@babel/standalone@7.23.4/babel.min.js" in html
        assert 'type="text/babel"' in html
        assert "root.render(React.createElement(App));" in html
        assert "function App() {" in html

    @pytest.mark.unit
    def test_title_escaped(self, landing_page):
        """The document title is escaped."""
        artifact = render_page(landing_page).model_copy(update={"title": "</title><script>"})
        assert "<title>&lt;/title&gt;&lt;script&gt;</title>" in build_html_document(artifact)
