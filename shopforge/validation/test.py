"""Tests for required-field validation."""

import pytest

from shopforge.core.errors import ValidationError
from shopforge.schema import load_page

from .lib import collect_issues, is_valid, validate_page


class TestLandingValidation:
    """Tests for landing page rules."""

    @pytest.mark.unit
    def test_valid_page(self, landing_page):
        """A complete landing page has no issues."""
        assert collect_issues(landing_page) == []
        assert is_valid(landing_page)
        validate_page(landing_page)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "section,field,empty,path",
        [
            ("nav", "links", [], "nav.links"),
            ("hero", "headline", "   ", "hero.headline"),
            ("features", "features", [], "features.features"),
            ("pricing", "tiers", [], "pricing.tiers"),
            ("testimonials", "testimonials", [], "testimonials.testimonials"),
            ("ctaBanner", "headline", "", "ctaBanner.headline"),
            ("footer", "columns", [], "footer.columns"),
        ],
    )
    def test_each_required_field(self, landing_data, section, field, empty, path):
        """Each required field is reported when empty."""
        landing_data["landing"][section][field] = empty
        page = load_page(landing_data)

        issues = collect_issues(page)
        assert [i.path for i in issues] == [path]
        with pytest.raises(ValidationError, match=f"{path} is empty") as exc_info:
            validate_page(page)
        assert exc_info.value.path == path

    @pytest.mark.unit
    def test_missing_section_reported(self, landing_data):
        """A dropped section reports its required field."""
        del landing_data["landing"]["pricing"]
        assert [i.path for i in collect_issues(load_page(landing_data))] == [
            "pricing.tiers"
        ]

    @pytest.mark.unit
    def test_all_issues_enumerated(self, landing_data):
        """Every violation is listed in contract order."""
        landing_data["landing"]["nav"]["links"] = []
        landing_data["landing"]["footer"]["columns"] = []
        issues = collect_issues(load_page(landing_data))
        assert [i.path for i in issues] == ["nav.links", "footer.columns"]

    @pytest.mark.unit
    def test_missing_branch(self):
        """A page without its content branch is invalid."""
        page = load_page({"pageType": "landing", "title": "Empty"})
        assert [i.message for i in collect_issues(page)] == ["landing is missing"]

    @pytest.mark.unit
    def test_optional_sections_ignored(self, landing_data):
        """Empty optional sections do not fail validation."""
        landing_data["landing"]["faq"] = {"items": []}
        assert is_valid(load_page(landing_data))


class TestProductValidation:
    """Tests for product page rules."""

    @pytest.mark.unit
    def test_valid_page(self, product_page):
        """A complete product page has no issues."""
        assert is_valid(product_page)

    @pytest.mark.unit
    def test_untitled_product(self, product_data):
        """A blank product title is reported."""
        product_data["product"]["productSection"]["title"] = ""
        issues = collect_issues(load_page(product_data))
        assert [i.path for i in issues] == ["productSection.title"]

    @pytest.mark.unit
    def test_missing_product_section(self, product_data):
        """A missing productSection reports both of its required fields."""
        del product_data["product"]["productSection"]
        issues = collect_issues(load_page(product_data))
        assert [i.path for i in issues] == [
            "productSection.title",
            "productSection.images",
        ]

    @pytest.mark.unit
    def test_landing_rules_not_applied(self, product_data):
        """Product pages are not checked against landing rules."""
        product_data["landing"] = {"hero": {"headline": ""}}
        assert is_valid(load_page(product_data))
