"""Tests for the section merge engine."""

import pytest

from shopforge.schema import StylePreset, dump_page, load_page

from .lib import LANDING_SECTION_RULES, PRODUCT_SECTION_RULES, merge_pages


class TestLandingMerge:
    """Tests for merging landing pages."""

    @pytest.mark.unit
    def test_empty_proposal_keeps_everything(self, landing_page):
        """A proposal with no sections leaves the original intact."""
        proposed = load_page({"pageType": "landing", "title": "", "landing": {}})
        merged = merge_pages(landing_page, proposed)
        assert dump_page(merged) == dump_page(landing_page)

    @pytest.mark.unit
    def test_blank_sections_do_not_override(self, landing_page):
        """Sections that fail their predicate keep the original value."""
        proposed = load_page(
            {
                "pageType": "landing",
                "title": "Morning Ritual Coffee",
                "landing": {
                    "hero": {"headline": "  "},
                    "pricing": {"heading": "Plans", "tiers": []},
                    "footer": {"columns": None},
                },
            }
        )
        merged = merge_pages(landing_page, proposed)
        assert merged.landing.hero == landing_page.landing.hero
        assert merged.landing.pricing == landing_page.landing.pricing
        assert merged.landing.footer == landing_page.landing.footer

    @pytest.mark.unit
    def test_replaces_sections_with_content(self, landing_page):
        """A non-empty proposed section replaces the original one."""
        proposed = load_page(
            {
                "pageType": "landing",
                "title": "Morning Ritual",
                "landing": {
                    "faq": {"items": [{"question": "Oat milk?", "answer": "Always."}]},
                    "hero": {"headline": "Brewed with care"},
                },
            }
        )
        merged = merge_pages(landing_page, proposed)

        assert merged.landing.faq.items[0].question == "Oat milk?"
        assert merged.landing.hero.headline == "Brewed with care"
        assert merged.landing.features == landing_page.landing.features
        assert merged.title == "Morning Ritual"

    @pytest.mark.unit
    def test_preset_and_type_from_original(self, landing_data):
        """pageType and preset always come from the original page."""
        landing_data["preset"] = "luxury"
        original = load_page(landing_data)
        proposed = load_page({"pageType": "landing", "title": "X", "preset": "playful"})
        merged = merge_pages(original, proposed)
        assert merged.preset is StylePreset.LUXURY
        assert merged.page_type == "landing"

    @pytest.mark.unit
    def test_original_without_branch(self, landing_page):
        """An original without content yields the proposal unchanged."""
        original = load_page({"pageType": "landing", "title": "Draft"})
        assert merge_pages(original, landing_page) is landing_page

    @pytest.mark.unit
    def test_mismatched_page_type(self, landing_page, product_page):
        """A proposal of another page type keeps every original section."""
        merged = merge_pages(landing_page, product_page)
        assert dump_page(merged)["landing"] == dump_page(landing_page)["landing"]
        assert merged.title == product_page.title
        assert merged.page_type == "landing"

    @pytest.mark.unit
    def test_rules_cover_every_section(self):
        """Each landing content key has a merge rule."""
        assert set(LANDING_SECTION_RULES) == {
            "nav", "hero", "features", "pricing", "testimonials", "faq",
            "stats", "newsletter", "team", "logoBar", "ctaBanner", "footer",
        }


class TestProductMerge:
    """Tests for merging product pages."""

    @pytest.mark.unit
    def test_product_section_needs_title_and_images(self, product_page):
        """A product section without images does not replace the original."""
        proposed = load_page(
            {
                "pageType": "product",
                "title": "Aurora Headphones",
                "product": {"productSection": {"title": "New name", "images": []}},
            }
        )
        merged = merge_pages(product_page, proposed)
        assert merged.product.product_section == product_page.product.product_section

    @pytest.mark.unit
    def test_adds_optional_footer(self, product_page):
        """A new optional section is added when it has content."""
        proposed = load_page(
            {
                "pageType": "product",
                "title": "Aurora Headphones",
                "product": {
                    "footer": {
                        "logo": "Aurora",
                        "columns": [{"heading": "Help", "links": [{"label": "FAQ"}]}],
                    }
                },
            }
        )
        assert product_page.product.footer is None
        merged = merge_pages(product_page, proposed)
        assert merged.product.footer.columns[0].heading == "Help"
        assert merged.product.reviews == product_page.product.reviews

    @pytest.mark.unit
    def test_rules_cover_every_section(self):
        """Each product content key has a merge rule."""
        assert set(PRODUCT_SECTION_RULES) == {
            "nav", "productSection", "reviews", "relatedProducts", "footer",
        }
