"""Tests for the section catalog."""

import pytest

from shopforge.merge import LANDING_SECTION_RULES, PRODUCT_SECTION_RULES
from shopforge.schema import PageType

from .lib import get_template, list_templates


class TestCatalog:
    """Tests for catalog lookups."""

    @pytest.mark.unit
    def test_ids_are_unique(self):
        """No two templates share an id."""
        ids = [t.id for t in list_templates()]
        assert len(ids) == len(set(ids))

    @pytest.mark.unit
    def test_filter_by_page_type(self):
        """Filtering returns only templates for that page type."""
        product = list_templates("product")
        assert [t.id for t in product] == [
            "product-hero",
            "product-reviews",
            "related-products",
        ]
        assert all(t.page_type is PageType.PRODUCT for t in product)

    @pytest.mark.unit
    def test_get_template(self):
        """Templates are found by id."""
        template = get_template("faq")
        assert template.label == "FAQ"
        assert template.section_key == "faq"

    @pytest.mark.unit
    def test_unknown_template(self):
        """Unknown ids raise KeyError."""
        with pytest.raises(KeyError, match="Unknown section template"):
            get_template("carousel")

    @pytest.mark.unit
    def test_section_keys_are_mergeable(self):
        """Every template targets a section the merge engine knows."""
        for template in list_templates(PageType.LANDING):
            assert template.section_key in LANDING_SECTION_RULES
        for template in list_templates(PageType.PRODUCT):
            assert template.section_key in PRODUCT_SECTION_RULES
