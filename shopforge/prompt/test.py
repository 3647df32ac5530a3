"""Tests for prompt construction."""

import json

import pytest

from shopforge.schema import ConversationTurn, RenderedArtifact, Role, dump_page

from .lib import (
    build_insert_prompts,
    build_messages,
    build_refinement_turns,
    build_system_prompt,
)


def user(text: str) -> ConversationTurn:
    return ConversationTurn(role=Role.USER, content=text)


def assistant(text: str) -> ConversationTurn:
    return ConversationTurn(role=Role.ASSISTANT, content=text)


class TestSystemPrompt:
    """Tests for build_system_prompt."""

    @pytest.mark.unit
    def test_landing_sections(self):
        """Landing prompts list the landing sections."""
        prompt = build_system_prompt("landing")
        assert prompt.startswith("You are ShopForge")
        assert "LANDING PAGE sections" in prompt
        assert "PRODUCT PAGE sections" not in prompt
        assert "STYLE PRESET: BOLD" in prompt

    @pytest.mark.unit
    def test_product_with_preset(self):
        """Product prompts carry the product sections and chosen preset."""
        prompt = build_system_prompt("product", "luxury")
        assert "DETAILS TABS" in prompt
        assert "STYLE PRESET: LUXURY" in prompt

    @pytest.mark.unit
    def test_rules_included(self):
        """Design, color and output rules are always present."""
        prompt = build_system_prompt("landing", "minimalist")
        assert "loremflickr.com/96/96/portrait,face" in prompt
        assert "COLOR CHANGE RULE" in prompt
        assert "Must start with { and end with }" in prompt
        assert '"pageType": "landing"' in prompt
        assert '"pageType": "product"' in prompt

    @pytest.mark.unit
    def test_deterministic(self):
        """Identical inputs produce identical prompts."""
        assert build_system_prompt("product", "playful") == build_system_prompt("product", "playful")


class TestBuildMessages:
    """Tests for build_messages."""

    @pytest.mark.unit
    def test_first_turn_directive(self):
        """The first user turn carries the generation directive."""
        messages = build_messages([user("A coffee shop")], "landing")
        assert len(messages) == 1
        assert messages[0].role is Role.USER
        assert messages[0].content.startswith("A coffee shop\n\nGenerate a premium landing page")
        assert 'pageType = "landing"' in messages[0].content

    @pytest.mark.unit
    def test_reference_url_prefix(self):
        """A reference URL is prepended to the first turn."""
        messages = build_messages([user("Sneakers")], "product", "https://example.com")
        assert messages[0].content.startswith(
            "Design inspiration reference: https://example.com\n\nSneakers"
        )

    @pytest.mark.unit
    def test_refinement_and_passthrough(self):
        """Later user turns are wrapped; assistant turns are unchanged."""
        turns = [user("Coffee"), assistant('{"pageType": "landing"}'), user("Make it green")]
        messages = build_messages(turns, "landing")

        assert [m.role for m in messages] == [Role.USER, Role.ASSISTANT, Role.USER]
        assert messages[1].content == '{"pageType": "landing"}'
        assert messages[2].content.startswith("Refinement request: Make it green\n\n")
        assert messages[2].content.endswith("starting with { and ending with }.")


class TestRefinementTurns:
    """Tests for build_refinement_turns."""

    @pytest.mark.unit
    def test_anchored_on_page_data(self, landing_page):
        """The frame is original request, page JSON, new request."""
        history = [user("Coffee"), assistant("done"), user("Bigger hero")]
        frame = build_refinement_turns(history, "Make it green", page_data=landing_page)

        assert [t.role for t in frame] == [Role.USER, Role.ASSISTANT, Role.USER]
        assert frame[0].content == "Coffee"
        assert json.loads(frame[1].content) == dump_page(landing_page)
        assert frame[2].content == "Make it green"

    @pytest.mark.unit
    def test_anchored_on_code(self):
        """The last artifact is used when no page data is known."""
        code = RenderedArtifact(title="T", component_code="function App() {}", css_code="")
        frame = build_refinement_turns([user("Coffee")], "Darker", last_code=code)
        assert json.loads(frame[1].content) == {
            "componentCode": "function App() {}",
            "cssCode": "",
            "title": "T",
        }

    @pytest.mark.unit
    def test_no_anchor(self):
        """Without an anchor the history is replayed."""
        history = [user("Coffee"), assistant("Error: try again")]
        frame = build_refinement_turns(history, "Again")
        assert [t.content for t in frame] == ["Coffee", "Error: try again", "Again"]


class TestInsertPrompts:
    """Tests for build_insert_prompts."""

    @pytest.mark.unit
    def test_prompts(self, landing_page):
        """The user message embeds the page and the task."""
        system, message = build_insert_prompts(landing_page, "Add five questions", "FAQ")

        assert "JSON page-structure editor" in system
        assert "Do NOT introduce new peer keys" in system
        assert "faq.items >= 5" in system
        assert '"""\n{\n  "pageType": "landing"' in message
        assert 'TASK: Add or update a section labeled "FAQ". Specifically: Add five questions' in message
        assert "section ordering for a landing page" in message
