"""Unit tests for MCP server module.

Tests cover:
- Server configuration
- Request parsing
- Tool functions against stub backends (no MCP protocol)
- Tool registration and calls over the in-memory MCP client
"""

import copy
import json

import pytest

from shopforge.conftest import LANDING_DATA, PRODUCT_DATA
from shopforge.core.errors import (
    ERROR_MESSAGES,
    ConfigurationError,
    ErrorKind,
    ProviderBillingError,
    ProviderRateLimitError,
    RequestError,
)
from shopforge.llm import INVALID_PAGE_TYPE
from shopforge.llm.conftest import StubBackend

from .lib import ServerConfig, TransportType, get_server_version
from .server import create_server, mcp, server_status
from .tools import (
    GenerateRequest,
    InsertRequest,
    generate_page,
    generate_variants,
    insert_section,
    list_section_templates,
    parse_request,
)

PAGE_KEYS = {"html", "componentCode", "cssCode", "title", "structuredPage", "providerUsed"}

COFFEE_REQUEST = {
    "messages": [{"role": "user", "content": "Coffee shop 'Morning Ritual'"}],
    "pageType": "landing",
}


# =============================================================================
# Configuration Tests
# =============================================================================


class TestServerConfig:
    """Tests for ServerConfig dataclass."""

    @pytest.mark.unit
    def test_default_config(self):
        """Default config has expected values."""
        config = ServerConfig()

        assert config.name == "shopforge"
        assert config.transport == TransportType.STDIO
        assert config.host == "0.0.0.0"
        assert config.port == 18080
        assert config.path == "/mcp"

    @pytest.mark.unit
    def test_from_env_reads_host_and_port(self, monkeypatch):
        """from_env reads MCP_HOST and MCP_PORT."""
        monkeypatch.setenv("MCP_HOST", "127.0.0.1")
        monkeypatch.setenv("MCP_PORT", "9000")

        config = ServerConfig.from_env(transport=TransportType.HTTP)

        assert config.transport == TransportType.HTTP
        assert config.host == "127.0.0.1"
        assert config.port == 9000

    @pytest.mark.unit
    def test_url_per_transport(self):
        """Only network transports have a URL; HTTP includes the path."""
        assert ServerConfig().url is None
        assert ServerConfig(transport=TransportType.HTTP, host="h", port=1).url == "http://h:1/mcp"
        assert ServerConfig(transport=TransportType.SSE, host="h", port=1).url == "http://h:1"

    @pytest.mark.unit
    def test_get_server_version(self):
        """Server version is a valid semver string."""
        assert len(get_server_version().split(".")) >= 2


# =============================================================================
# Request Parsing Tests
# =============================================================================


class TestParseRequest:
    """Tests for tool request models."""

    @pytest.mark.unit
    def test_accepts_camel_case(self):
        """camelCase keys from web clients populate the model."""
        request = parse_request(
            GenerateRequest, {**COFFEE_REQUEST, "referenceUrl": "https://example.com"}
        )

        assert request.page_type == "landing"
        assert request.reference_url == "https://example.com"
        assert request.messages[0].content == "Coffee shop 'Morning Ritual'"

    @pytest.mark.unit
    def test_accepts_snake_case(self):
        """snake_case keys from the CLI populate the model."""
        request = parse_request(
            InsertRequest, {"current_page_data": {}, "section_id": "faq", "page_type": "landing"}
        )

        assert request.section_id == "faq"

    @pytest.mark.unit
    def test_bad_shape_is_request_error(self):
        """Shape errors become RequestError naming the field."""
        with pytest.raises(RequestError, match="messages.0.role"):
            parse_request(
                GenerateRequest,
                {"messages": [{"role": "robot", "content": "hi"}], "pageType": "landing"},
            )

    @pytest.mark.unit
    def test_model_instance_passes_through(self):
        """An already-parsed request is returned unchanged."""
        request = GenerateRequest(page_type="product")

        assert parse_request(GenerateRequest, request) is request


# =============================================================================
# Tool Function Tests (no MCP protocol)
# =============================================================================


class TestGeneratePageTool:
    """Tests for generate_page tool logic."""

    @pytest.mark.unit
    def test_success_shape(self, make_generator, landing_backend):
        """Successful generation returns the page result fields."""
        result = generate_page(COFFEE_REQUEST, make_generator(landing_backend))

        assert set(result) == PAGE_KEYS
        assert result["componentCode"].startswith("function App()")
        assert result["structuredPage"]["pageType"] == "landing"
        assert result["providerUsed"] == "stub"

    @pytest.mark.unit
    def test_refinement_sends_whole_conversation(self, make_generator, landing_backend):
        """Earlier turns reach the provider along with the new request."""
        request = {
            "messages": [
                {"role": "user", "content": "Coffee shop"},
                {"role": "assistant", "content": "Generated your landing page."},
                {"role": "user", "content": "Make the hero darker"},
            ],
            "pageType": "landing",
        }

        result = generate_page(request, make_generator(landing_backend))

        assert "errorKind" not in result
        sent = landing_backend.calls[0]["messages"]
        assert len(sent) == 3
        assert "Make the hero darker" in sent[-1].content

    @pytest.mark.unit
    def test_refinement_with_current_page_is_compacted(self, make_generator, landing_backend):
        """With currentPageData, history is replaced by request, page and change."""
        request = {
            "messages": [
                {"role": "user", "content": "Coffee shop"},
                {"role": "assistant", "content": "Generated your landing page."},
                {"role": "user", "content": "Add a team section"},
                {"role": "assistant", "content": "Added it."},
                {"role": "user", "content": "Make the hero darker"},
            ],
            "pageType": "landing",
            "currentPageData": copy.deepcopy(LANDING_DATA),
        }

        result = generate_page(request, make_generator(landing_backend))

        assert "errorKind" not in result
        sent = landing_backend.calls[0]["messages"]
        assert [m.role.value for m in sent] == ["user", "assistant", "user"]
        assert "Coffee shop" in sent[0].content
        assert "Morning Ritual Coffee" in sent[1].content
        assert "Make the hero darker" in sent[2].content

    @pytest.mark.unit
    def test_refinement_with_current_code_is_compacted(self, make_generator, landing_backend):
        """Without page data, currentCode anchors the compacted refinement."""
        request = {
            "messages": [
                {"role": "user", "content": "Coffee shop"},
                {"role": "assistant", "content": "Generated your landing page."},
                {"role": "user", "content": "Add a team section"},
                {"role": "assistant", "content": "Added it."},
                {"role": "user", "content": "Make the hero darker"},
            ],
            "pageType": "landing",
            "currentCode": {
                "componentCode": "function App() { return <main />; }",
                "cssCode": ".hero { color: red; }",
                "title": "Morning Ritual",
            },
        }

        result = generate_page(request, make_generator(landing_backend))

        assert "errorKind" not in result
        sent = landing_backend.calls[0]["messages"]
        assert [m.role.value for m in sent] == ["user", "assistant", "user"]
        assert "function App()" in sent[1].content
        assert ".hero { color: red; }" in sent[1].content
        assert "Make the hero darker" in sent[2].content

    @pytest.mark.unit
    def test_current_code_missing_fields(self, make_generator, landing_backend):
        """An incomplete currentCode is an invalid request."""
        result = generate_page(
            {**COFFEE_REQUEST, "currentCode": {"title": "Morning Ritual"}},
            make_generator(landing_backend),
        )

        assert result["errorKind"] == "invalid-request"
        assert result["message"].startswith("Invalid request")
        assert landing_backend.calls == []

    @pytest.mark.unit
    def test_no_messages(self, make_generator, landing_backend):
        """Empty conversation is an invalid request."""
        result = generate_page({"messages": [], "pageType": "landing"}, make_generator(landing_backend))

        assert result == {"errorKind": "invalid-request", "message": "No messages provided"}
        assert landing_backend.calls == []

    @pytest.mark.unit
    def test_invalid_page_type(self, make_generator, landing_backend):
        """Unknown page type is an invalid request."""
        result = generate_page(
            {**COFFEE_REQUEST, "pageType": "blog"}, make_generator(landing_backend)
        )

        assert result == {"errorKind": "invalid-request", "message": INVALID_PAGE_TYPE}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error, kind",
        [
            (ConfigurationError("ANTHROPIC_API_KEY is not set"), ErrorKind.AUTH_CONFIGURATION),
            (ProviderRateLimitError("429 Too Many Requests"), ErrorKind.RATE_LIMITED),
            (ProviderBillingError("credit balance is too low"), ErrorKind.BILLING),
            (RuntimeError("socket closed"), ErrorKind.UNKNOWN),
        ],
    )
    def test_provider_failures_map_to_stable_messages(self, make_generator, error, kind):
        """Provider failures become {errorKind, message} without raw provider text."""
        result = generate_page(COFFEE_REQUEST, make_generator(StubBackend(responses=[error])))

        assert result == {"errorKind": kind.value, "message": ERROR_MESSAGES[kind]}

    @pytest.mark.unit
    def test_malformed_output_after_retries(self, make_generator):
        """Output that never parses reports malformed-output."""
        backend = StubBackend(responses=["I cannot do that."])

        result = generate_page(COFFEE_REQUEST, make_generator(backend))

        assert result["errorKind"] == "malformed-output"
        assert len(backend.calls) == 3


class TestGenerateVariantsTool:
    """Tests for generate_variants tool logic."""

    @pytest.mark.unit
    def test_three_variants_in_preset_order(self, make_generator, landing_backend):
        """All variants succeed and keep preset order."""
        result = generate_variants(
            {"message": "Coffee shop", "pageType": "landing"},
            make_generator(landing_backend),
        )

        assert [v["id"] for v in result["variants"]] == ["minimalist", "bold", "luxury"]
        assert all(PAGE_KEYS <= set(v) for v in result["variants"])
        assert result["variants"][2]["structuredPage"]["preset"] == "luxury"

    @pytest.mark.unit
    def test_all_variants_failed(self, make_generator):
        """When every variant fails the first failure's kind is reported."""
        backend = StubBackend(responses=[ProviderRateLimitError("slow down")])

        result = generate_variants(
            {"message": "Coffee shop", "pageType": "landing"}, make_generator(backend)
        )

        assert result["errorKind"] == "rate-limited"

    @pytest.mark.unit
    def test_empty_message(self, make_generator, landing_backend):
        """Blank request text is an invalid request."""
        result = generate_variants(
            {"message": "  ", "pageType": "landing"}, make_generator(landing_backend)
        )

        assert result == {"errorKind": "invalid-request", "message": "No messages provided"}


class TestInsertSectionTool:
    """Tests for insert_section tool logic."""

    @pytest.mark.unit
    def test_template_insert_keeps_existing_sections(self, make_generator):
        """A proposal holding only the new section is merged into the page."""
        proposal = {
            "pageType": "landing",
            "title": "Morning Ritual Coffee",
            "landing": {
                "faq": {
                    "heading": "Questions",
                    "items": [{"question": "Decaf?", "answer": "Always."}],
                }
            },
        }
        backend = StubBackend(responses=[json.dumps(proposal)])

        result = insert_section(
            {
                "currentPageData": copy.deepcopy(LANDING_DATA),
                "sectionId": "faq",
                "pageType": "landing",
            },
            make_generator(backend),
        )

        landing = result["structuredPage"]["landing"]
        assert landing["faq"]["items"][0]["question"] == "Decaf?"
        assert landing["hero"] == LANDING_DATA["landing"]["hero"]
        assert 'id="faq"' in result["componentCode"]

    @pytest.mark.unit
    def test_template_fills_prompt_and_label(self, make_generator, landing_backend):
        """The catalog template supplies prompt and label when omitted."""
        insert_section(
            {
                "currentPageData": copy.deepcopy(LANDING_DATA),
                "sectionId": "pricing-3col",
                "pageType": "landing",
            },
            make_generator(landing_backend),
        )

        user_message = landing_backend.calls[0]["messages"][0].content
        assert 'labeled "Pricing - 3 Tiers"' in user_message

    @pytest.mark.unit
    def test_explicit_prompt_without_template(self, make_generator, landing_backend):
        """sectionPrompt and sectionLabel work without a catalog id."""
        result = insert_section(
            {
                "currentPageData": copy.deepcopy(LANDING_DATA),
                "sectionPrompt": "Add a loyalty card banner",
                "sectionLabel": "Loyalty",
                "pageType": "landing",
            },
            make_generator(landing_backend),
        )

        assert "errorKind" not in result
        assert "Add a loyalty card banner" in landing_backend.calls[0]["messages"][0].content

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"sectionId": "nope"}, "Unknown section template: nope"),
            ({"sectionId": None}, "No section prompt provided"),
            ({"currentPageData": {"landing": "broken"}}, "Invalid current page data"),
            ({"currentPageData": PRODUCT_DATA}, "Current page data is not a landing page"),
            ({"pageType": "blog"}, INVALID_PAGE_TYPE),
        ],
    )
    def test_invalid_requests(self, make_generator, landing_backend, overrides, message):
        """Bad insert requests are rejected before any provider call."""
        request = {
            "currentPageData": copy.deepcopy(LANDING_DATA),
            "sectionId": "faq",
            "pageType": "landing",
            **overrides,
        }

        result = insert_section(request, make_generator(landing_backend))

        assert result == {"errorKind": "invalid-request", "message": message}
        assert landing_backend.calls == []


class TestListSectionTemplatesTool:
    """Tests for list_section_templates tool logic."""

    @pytest.mark.unit
    def test_lists_all(self):
        """Without a page type every template is listed."""
        templates = list_section_templates()["templates"]

        assert {t["pageType"] for t in templates} == {"landing", "product"}
        assert {"id", "label", "description", "icon", "category", "sectionKey"} <= set(templates[0])

    @pytest.mark.unit
    def test_filters_by_page_type(self):
        """A page type narrows the list."""
        templates = list_section_templates("product")["templates"]

        assert templates
        assert all(t["pageType"] == "product" for t in templates)

    @pytest.mark.unit
    def test_invalid_page_type(self):
        """Unknown page type is an invalid request."""
        assert list_section_templates("blog")["errorKind"] == "invalid-request"


class TestServerStatus:
    """Tests for status tool logic."""

    @pytest.mark.unit
    def test_ready_when_key_configured(self, make_generator, landing_backend, monkeypatch):
        """Provider with a key reports ready."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")

        result = server_status(make_generator(landing_backend))

        assert result["status"] == "ready"
        assert result["provider"] == "anthropic"
        assert "anthropic" in result["configuredProviders"]
        assert "action_required" not in result

    @pytest.mark.unit
    def test_unconfigured_names_missing_key(self, make_generator, landing_backend, monkeypatch):
        """Missing key reports the variable to set."""
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

        result = server_status(make_generator(landing_backend))

        assert result["status"] == "unconfigured"
        assert "ANTHROPIC_API_KEY" in result["action_required"][0]


# =============================================================================
# Server Instance Tests
# =============================================================================


class TestServerInstance:
    """Tests for FastMCP server instance."""

    @pytest.mark.unit
    def test_server_has_name(self):
        """Module server has the project name."""
        assert mcp.name == "shopforge"

    @pytest.mark.unit
    def test_create_server_returns_new_instance(self, make_generator, landing_backend):
        """create_server builds an independent server."""
        assert create_server(make_generator(landing_backend)) is not mcp


class TestMCPProtocol:
    """Tests over the in-memory MCP client."""

    @pytest.mark.asyncio
    async def test_tools_registered(self, mcp_client):
        """Exactly the page tools and status are exposed."""
        tools = await mcp_client.list_tools()

        assert {t.name for t in tools} == {
            "generate_page",
            "generate_variants",
            "insert_section",
            "list_section_templates",
            "status",
        }

    @pytest.mark.asyncio
    async def test_call_generate_page(self, mcp_client):
        """generate_page returns a rendered page over the protocol."""
        result = await mcp_client.call_tool(
            "generate_page",
            {"messages": COFFEE_REQUEST["messages"], "page_type": "landing"},
        )

        assert result.data["title"] == "Morning Ritual Coffee"
        assert result.data["componentCode"].startswith("function App()")

    @pytest.mark.asyncio
    async def test_call_generate_page_error_is_data(self, mcp_client):
        """Failures come back as errorKind data, not protocol errors."""
        result = await mcp_client.call_tool(
            "generate_page", {"messages": [], "page_type": "landing"}
        )

        assert result.data["errorKind"] == "invalid-request"

    @pytest.mark.asyncio
    async def test_call_status(self, mcp_client):
        """status reports the selected provider."""
        result = await mcp_client.call_tool("status", {})

        assert result.data["provider"] == "anthropic"
