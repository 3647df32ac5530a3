"""Tests for the structured page model."""

import json

import pydantic
import pytest

from .lib import (
    ConversationTurn,
    LandingPage,
    LogoBar,
    ProductPage,
    Review,
    Reviews,
    Role,
    StylePreset,
    dump_page,
    load_page,
    page_content,
    page_to_json,
)


class TestLoadPage:
    """Tests for the tagged union loader."""

    @pytest.mark.unit
    def test_landing_discriminator(self, landing_data):
        """pageType=landing loads a LandingPage."""
        page = load_page(landing_data)
        assert isinstance(page, LandingPage)
        assert page.landing is not None
        assert page.landing.cta_banner.headline == "Start your ritual today"

    @pytest.mark.unit
    def test_product_discriminator(self, product_data):
        """pageType=product loads a ProductPage."""
        page = load_page(product_data)
        assert isinstance(page, ProductPage)
        assert page.product.product_section.original_price == "$249"

    @pytest.mark.unit
    def test_unknown_page_type_rejected(self):
        """Unknown discriminator values fail validation."""
        with pytest.raises(pydantic.ValidationError):
            load_page({"pageType": "blog", "title": "X"})

    @pytest.mark.unit
    def test_snake_case_accepted(self):
        """Python attribute names are accepted as input."""
        page = load_page(
            {"page_type": "landing", "title": "X", "landing": {"cta_banner": {"headline": "Go"}}}
        )
        assert page.landing.cta_banner.headline == "Go"

    @pytest.mark.unit
    def test_unknown_keys_ignored(self):
        """Extra keys from the model are dropped."""
        page = load_page({"pageType": "landing", "title": "X", "extraHero": {}})
        assert "extraHero" not in dump_page(page)

    @pytest.mark.unit
    def test_partial_page_loads(self):
        """Missing sections load as None for the validator to report."""
        page = load_page({"pageType": "landing", "title": "X", "landing": {}})
        assert page.landing.hero is None


class TestLenientFields:
    """Tests for tolerant scalar and list coercion."""

    @pytest.mark.unit
    def test_null_text_becomes_empty(self):
        """null text becomes an empty string."""
        bar = LogoBar.model_validate({"heading": None, "logos": None})
        assert bar.heading == ""
        assert bar.logos == []

    @pytest.mark.unit
    def test_non_string_logo_is_serialized(self):
        """Object logos become compact JSON text."""
        bar = LogoBar.model_validate({"logos": [{"name": "Acme"}, 42]})
        assert bar.logos == ['{"name":"Acme"}', "42"]


class TestRatings:
    """Tests for rating clamping."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(7, 5), (0, 1), (-3, 1), (3, 3), (4.6, 5), ("2", 2), (None, 5)],
    )
    def test_rating_clamped(self, raw, expected):
        """Ratings are coerced to ints in 1..5."""
        assert Review.model_validate({"rating": raw}).rating == expected

    @pytest.mark.unit
    def test_non_numeric_rating_rejected(self):
        """Ratings that are not numbers fail validation."""
        with pytest.raises(pydantic.ValidationError):
            Review.model_validate({"rating": "great"})

    @pytest.mark.unit
    def test_average_rating_clamped(self):
        """Average rating is kept within 0..5."""
        assert Reviews.model_validate({"averageRating": 9.2}).average_rating == 5.0


class TestSerialization:
    """Tests for dump helpers."""

    @pytest.mark.unit
    def test_dump_uses_camel_case(self, landing_page):
        """Dumped keys use the JSON spelling."""
        data = dump_page(landing_page)
        assert data["pageType"] == "landing"
        assert "ctaBanner" in data["landing"]
        assert "sectionLabel" in data["landing"]["features"]

    @pytest.mark.unit
    def test_dump_round_trip(self, landing_data):
        """A dumped page loads back to an equal page."""
        page = load_page(landing_data)
        assert load_page(dump_page(page)) == page

    @pytest.mark.unit
    def test_page_to_json_is_valid_json(self, product_page):
        """page_to_json returns parseable text."""
        assert json.loads(page_to_json(product_page, indent=2))["title"]

    @pytest.mark.unit
    def test_preset_serialized_as_value(self, landing_page):
        """Presets serialize as their string value."""
        tagged = landing_page.model_copy(update={"preset": StylePreset.LUXURY})
        assert dump_page(tagged)["preset"] == "luxury"

    @pytest.mark.unit
    def test_page_content(self, landing_page, product_page):
        """page_content returns the branch for the page type."""
        assert page_content(landing_page) is landing_page.landing
        assert page_content(product_page) is product_page.product


class TestConversationTurn:
    """Tests for ConversationTurn."""

    @pytest.mark.unit
    def test_turn_is_frozen(self):
        """Turns cannot be mutated after creation."""
        turn = ConversationTurn(role=Role.USER, content="hi")
        with pytest.raises(pydantic.ValidationError):
            turn.content = "changed"

    @pytest.mark.unit
    def test_role_from_string(self):
        """Roles are parsed from plain strings."""
        turn = ConversationTurn.model_validate({"role": "assistant", "content": "{}"})
        assert turn.role is Role.ASSISTANT
        assert turn.timestamp.tzinfo is not None
