"""FastMCP server instance for shopforge.

Exposes the page generation workflow to MCP clients:

    1. generate_page: conversation → rendered page + structured page JSON
    2. generate_variants: one request → three styled pages to compare
    3. insert_section: add or update one section of an existing page

Usage:
    # STDIO mode (for desktop MCP clients)
    python -m shopforge.mcp.server

    # HTTP mode
    python -m shopforge.mcp.server --transport http --port 18080

    # Via CLI
    python . mcp run
    python . mcp serve --port 18080
"""

import argparse
import logging
import sys
from typing import Any

from fastmcp import FastMCP

from shopforge.config import PROVIDER_KEY_VARS, get_available_llm_providers
from shopforge.core.log import setup_logging
from shopforge.llm import PageGenerator
from shopforge.schema import StylePreset

from .lib import SERVER_NAME, TransportType, get_server_version
from .tools import generate_page as _generate_page
from .tools import generate_variants as _generate_variants
from .tools import insert_section as _insert_section
from .tools import list_section_templates as _list_section_templates

logger = logging.getLogger(__name__)


# =============================================================================
# Server Instructions (LLM Guidance)
# =============================================================================

SERVER_INSTRUCTIONS = """\
## ShopForge MCP Server

Generates e-commerce landing and product pages from natural language. Each
page comes back as a React component (componentCode + cssCode), a standalone
HTML preview and the structured page JSON it was rendered from.

### Quick Start
1. `status()` → check that an LLM provider is configured
2. `generate_page(messages, page_type)` → get a page
3. Refine by calling `generate_page` again with the whole conversation

### Tools
- `generate_page(messages, page_type, reference_url?, preset?)`
- `generate_variants(message, page_type)` - three styles to compare
- `list_section_templates(page_type?)` - sections insert_section can add
- `insert_section(current_page_data, page_type, section_id | section_prompt)`
  Pass the structuredPage from a previous result as current_page_data.

### Errors
Failures return `{errorKind, message}` instead of a page. errorKind is one
of auth-configuration, rate-limited, billing, malformed-output,
invalid-request or unknown.
"""


# =============================================================================
# Server Factory
# =============================================================================


def create_server(generator: PageGenerator | None = None) -> FastMCP:
    """Create and configure an MCP server instance.

    Args:
        generator: Page generator behind every tool. Creates one from the
            environment if None.

    Returns:
        Configured FastMCP server instance.
    """
    generator = generator or PageGenerator()
    server = FastMCP(
        name=SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
    )

    @server.tool
    def generate_page(
        messages: list[dict[str, str]],
        page_type: str = "landing",
        reference_url: str | None = None,
        preset: str | None = None,
        current_page_data: dict[str, Any] | None = None,
        current_code: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Generate an e-commerce page from a conversation.

        This is the primary tool. Send the whole conversation to refine a
        page: earlier turns are kept as context and the last user turn is
        the requested change.

        Args:
            messages: Conversation turns, each {"role": "user"|"assistant", "content": ...}.
                Examples of a first turn:
                - "Landing page for a specialty coffee shop called Morning Ritual"
                - "Product page for wireless noise-cancelling headphones"
            page_type: "landing" or "product". Default: "landing"
            reference_url: Website to take design inspiration from (optional).
            preset: minimalist, bold, luxury or playful (optional).
            current_page_data: structuredPage of the page being refined (optional).
                Keeps refinement context compact on long conversations.
            current_code: {componentCode, cssCode, title} of the page being
                refined, used when current_page_data is not available (optional).

        Returns:
            Dictionary with html, componentCode, cssCode, title,
            structuredPage and providerUsed, or errorKind and message.
        """
        return _generate_page(
            {
                "messages": messages,
                "page_type": page_type,
                "reference_url": reference_url,
                "preset": preset,
                "current_page_data": current_page_data,
                "current_code": current_code,
            },
            generator,
        )

    @server.tool
    def generate_variants(
        message: str,
        page_type: str = "landing",
        reference_url: str | None = None,
    ) -> dict[str, Any]:
        """Generate three differently styled pages for one request.

        Use this when the user wants OPTIONS to choose from. Variants are
        generated concurrently in the minimalist, bold and luxury styles;
        any variant that fails is left out.

        Args:
            message: The page request.
            page_type: "landing" or "product". Default: "landing"
            reference_url: Website to take design inspiration from (optional).

        Returns:
            Dictionary with variants (each with id, label, style, preset and
            the generate_page fields), or errorKind and message.
        """
        return _generate_variants(
            {
                "message": message,
                "page_type": page_type,
                "reference_url": reference_url,
            },
            generator,
        )

    @server.tool
    def insert_section(
        current_page_data: dict[str, Any],
        page_type: str = "landing",
        section_id: str | None = None,
        section_prompt: str | None = None,
        section_label: str | None = None,
        preset: str | None = None,
    ) -> dict[str, Any]:
        """Add or update one section of an existing page.

        Sections the model leaves out are preserved, so the rest of the page
        never disappears.

        Args:
            current_page_data: structuredPage from a previous result.
            page_type: "landing" or "product". Default: "landing"
            section_id: Template id from list_section_templates (optional).
            section_prompt: Instruction for the section; overrides the template's.
            section_label: Display label; overrides the template's.
            preset: Style preset; defaults to the page's own.

        Returns:
            Same fields as generate_page for the updated page, or errorKind
            and message.
        """
        return _insert_section(
            {
                "current_page_data": current_page_data,
                "page_type": page_type,
                "section_id": section_id,
                "section_prompt": section_prompt,
                "section_label": section_label,
                "preset": preset,
            },
            generator,
        )

    @server.tool
    def list_section_templates(page_type: str | None = None) -> dict[str, Any]:
        """List the section templates insert_section accepts as section_id.

        Args:
            page_type: "landing" or "product" (optional, lists all if omitted).

        Returns:
            Dictionary with templates: id, label, description, icon,
            category, pageType, sectionKey.
        """
        return _list_section_templates(page_type)

    @server.tool
    def status() -> dict[str, Any]:
        """Check which LLM provider is selected and whether it is configured.

        Use this FIRST to verify the server can generate pages.

        Returns:
            Dictionary with:
            - status: "ready" or "unconfigured"
            - version: Server version
            - provider: Provider used for generation (AI_PROVIDER)
            - configuredProviders: Providers with an API key set
            - presets: Available style presets
            - action_required: What to fix if unconfigured
        """
        return server_status(generator)

    return server


def server_status(generator: PageGenerator) -> dict[str, Any]:
    """Describe provider readiness for the status tool."""
    provider = generator.provider
    configured = get_available_llm_providers()
    ready = provider in configured
    result: dict[str, Any] = {
        "status": "ready" if ready else "unconfigured",
        "version": get_server_version(),
        "provider": provider,
        "configuredProviders": configured,
        "presets": [preset.value for preset in StylePreset],
    }
    if not ready:
        key_var = PROVIDER_KEY_VARS.get(provider)
        key_name = key_var.value.name if key_var else f"an API key for {provider}"
        result["action_required"] = [f"Configure LLM: Set {key_name} in .env"]
    return result


# =============================================================================
# Server Instance
# =============================================================================

mcp = create_server()


# =============================================================================
# Server Runner
# =============================================================================


def run_server(
    transport: TransportType = TransportType.STDIO,
    host: str = "0.0.0.0",
    port: int = 18080,
    server: FastMCP | None = None,
) -> None:
    """Run the MCP server with specified transport.

    Args:
        transport: Transport type (stdio, http, sse).
        host: Bind address for HTTP/SSE.
        port: Port for HTTP/SSE.
        server: Server to run. Uses the module instance if None.
    """
    server = server or mcp

    logger.info(f"Starting {SERVER_NAME} server v{get_server_version()}")
    logger.info(f"Transport: {transport.value}")

    configured = get_available_llm_providers()
    if configured:
        logger.info(f"Configured LLM providers: {', '.join(configured)}")
    else:
        logger.warning("No LLM provider API key configured; generation will fail")

    if transport == TransportType.STDIO:
        logger.info("Running in STDIO mode")
        server.run()
    elif transport == TransportType.HTTP:
        logger.info(f"Running in HTTP mode at http://{host}:{port}/mcp")
        server.run(
            transport="http",
            host=host,
            port=port,
            path="/mcp",
        )
    elif transport == TransportType.SSE:
        logger.info(f"Running in SSE mode at http://{host}:{port}")
        server.run(
            transport="sse",
            host=host,
            port=port,
        )
    else:
        raise ValueError(f"Unknown transport: {transport}")


# =============================================================================
# CLI Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for MCP server.

    Args:
        argv: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server for AI-generated e-commerce pages",
    )
    parser.add_argument(
        "--transport",
        "-t",
        type=str,
        choices=[t.value for t in TransportType],
        default="stdio",
        help="Transport type (default: stdio)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Bind address for HTTP/SSE (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=18080,
        help="Port for HTTP/SSE (default: 18080)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        run_server(
            transport=TransportType(args.transport),
            host=args.host,
            port=args.port,
        )
        return 0
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return 0
    except Exception as e:
        logger.error(f"Server error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
