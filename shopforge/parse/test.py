"""Tests for response parsing and repair."""

import json

import pytest

from shopforge.core.errors import ParseError, ValidationError
from shopforge.schema import LandingPage, ProductPage, StylePreset
from shopforge.validation import validate_page

from .lib import (
    extract_json_object,
    parse_json_object,
    parse_page,
    repair_json_strings,
    strip_code_fences,
)


class TestStripCodeFences:
    """Tests for fence removal."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text",
        [
            '```json\n{"a": 1}\n```',
            '```JSON\n{"a": 1}\n```',
            '```\n{"a": 1}\n```',
            '  ```json   {"a": 1}  ```  ',
            '{"a": 1}',
        ],
    )
    def test_fences_removed(self, text):
        """Leading and trailing fences are stripped regardless of case."""
        assert strip_code_fences(text) == '{"a": 1}'

    @pytest.mark.unit
    def test_only_outer_fence_removed(self):
        """Fences inside the payload are left alone."""
        text = '```json\n{"code": "```x```"}\n```'
        assert strip_code_fences(text) == '{"code": "```x```"}'


class TestExtractJsonObject:
    """Tests for outer-span extraction."""

    @pytest.mark.unit
    def test_surrounding_prose(self):
        """Prose before and after the object is discarded."""
        text = 'Here is your page: {"a": {"b": 1}} Enjoy!'
        assert extract_json_object(text) == '{"a": {"b": 1}}'

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["no braces here", "only { open", "} reversed {"])
    def test_no_object(self, text):
        """Missing braces raise ParseError."""
        with pytest.raises(ParseError, match="no JSON found"):
            extract_json_object(text)


class TestRepairJsonStrings:
    """Tests for the string-literal repair pass."""

    @pytest.mark.unit
    def test_newlines_inside_strings(self):
        """Raw control characters inside strings are escaped."""
        broken = '{"text": "line one\nline two\ttabbed\r"}'
        repaired = repair_json_strings(broken)
        assert json.loads(repaired) == {"text": "line one\nline two\ttabbed\r"}

    @pytest.mark.unit
    def test_whitespace_outside_strings_kept(self):
        """Pretty-printing between tokens is untouched."""
        text = '{\n  "a": "b"\n}'
        assert repair_json_strings(text) == text

    @pytest.mark.unit
    def test_escaped_quote(self):
        """An escaped quote does not end the string."""
        broken = '{"q": "say \\"hi\\"\nnow"}'
        assert json.loads(repair_json_strings(broken)) == {"q": 'say "hi"\nnow'}


class TestParseJsonObject:
    """Tests for the decode pipeline."""

    @pytest.mark.unit
    def test_fenced_with_prose(self, landing_data):
        """Fences and chatter around the object are tolerated."""
        raw = "Sure!\n```json\n" + json.dumps(landing_data, indent=2) + "\n```\n"
        assert parse_json_object(raw) == landing_data

    @pytest.mark.unit
    def test_repair_pass(self):
        """A raw newline inside a string is repaired."""
        raw = '{"pageType": "landing", "title": "Two\nLines"}'
        assert parse_json_object(raw)["title"] == "Two\nLines"

    @pytest.mark.unit
    def test_unrepairable(self):
        """Broken JSON that the repair pass cannot fix raises ParseError."""
        with pytest.raises(ParseError, match="missing required fields") as exc_info:
            parse_json_object('{"pageType": "landing", "title": }')
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        [
            '{"title": "No type"}',
            '{"pageType": "landing"}',
            '{"pageType": "", "title": "Blank"}',
            '{"pageType": "landing", "title": ""}',
        ],
    )
    def test_missing_required_fields(self, raw):
        """pageType and title must both be present and non-empty."""
        with pytest.raises(ParseError, match="missing required fields"):
            parse_json_object(raw)


class TestParsePage:
    """Tests for typed page parsing."""

    @pytest.mark.unit
    def test_landing(self, landing_data):
        """A landing payload loads as LandingPage."""
        page = parse_page(json.dumps(landing_data))
        assert isinstance(page, LandingPage)
        assert page.landing.hero.headline == "Coffee worth waking up for"

    @pytest.mark.unit
    def test_product(self, product_data):
        """A product payload loads as ProductPage."""
        page = parse_page(json.dumps(product_data))
        assert isinstance(page, ProductPage)
        assert len(page.product.product_section.images) == 5

    @pytest.mark.unit
    def test_unsupported_page_type(self):
        """Unknown page types raise ParseError."""
        with pytest.raises(ParseError, match="unsupported pageType"):
            parse_page('{"pageType": "blog", "title": "Posts"}')

    @pytest.mark.unit
    def test_wrong_section_shape(self, landing_data):
        """A string where a list of objects belongs raises ValidationError with its path."""
        landing_data["landing"]["features"]["features"] = "fast, cheap, good"
        with pytest.raises(ValidationError) as exc_info:
            parse_page(json.dumps(landing_data))
        assert exc_info.value.path == "features.features"
        assert exc_info.value.retryable


class TestLenientScalars:
    """Tests for loose non-text scalars in model output."""

    @pytest.mark.unit
    def test_unknown_preset_dropped(self, landing_data):
        """A preset outside the known themes loads as unset."""
        landing_data["preset"] = "retro"
        page = parse_page(json.dumps(landing_data))
        validate_page(page)
        assert page.preset is None

    @pytest.mark.unit
    @pytest.mark.parametrize("preset", [42, {"name": "bold"}, ["bold"]])
    def test_non_string_preset_dropped(self, landing_data, preset):
        """Non-string presets load as unset."""
        landing_data["preset"] = preset
        assert parse_page(json.dumps(landing_data)).preset is None

    @pytest.mark.unit
    def test_known_preset_kept(self, landing_data):
        """A known preset name still loads as its enum member."""
        landing_data["preset"] = "luxury"
        assert parse_page(json.dumps(landing_data)).preset is StylePreset.LUXURY

    @pytest.mark.unit
    def test_null_highlighted(self, landing_data):
        """A null highlighted flag falls back to False."""
        landing_data["landing"]["pricing"]["tiers"][0]["highlighted"] = None
        page = parse_page(json.dumps(landing_data))
        validate_page(page)
        assert page.landing.pricing.tiers[0].highlighted is False

    @pytest.mark.unit
    def test_null_rating_summary(self, product_data):
        """Null averageRating and reviewCount fall back to zero."""
        product_data["product"]["reviews"]["averageRating"] = None
        product_data["product"]["reviews"]["reviewCount"] = None
        page = parse_page(json.dumps(product_data))
        validate_page(page)
        assert page.product.reviews.average_rating == 0.0
        assert page.product.reviews.review_count == 0

    @pytest.mark.unit
    def test_numeric_background_image(self, landing_data):
        """A numeric backgroundImage is stringified instead of rejected."""
        landing_data["landing"]["hero"]["backgroundImage"] = 0
        page = parse_page(json.dumps(landing_data))
        validate_page(page)
        assert page.landing.hero.background_image == "0"

    @pytest.mark.unit
    def test_null_background_image(self, landing_data):
        """A null backgroundImage stays unset."""
        landing_data["landing"]["hero"]["backgroundImage"] = None
        assert parse_page(json.dumps(landing_data)).landing.hero.background_image is None

    @pytest.mark.unit
    def test_non_string_product_cta(self, product_data):
        """A non-string product ctaLabel is stringified."""
        product_data["product"]["productSection"]["ctaLabel"] = 3
        page = parse_page(json.dumps(product_data))
        validate_page(page)
        assert page.product.product_section.cta_label == "3"
