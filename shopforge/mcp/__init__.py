"""MCP (Model Context Protocol) server for shopforge.

Exposes page generation, variant fan-out and section insertion to MCP
clients.

Example:
    # Start server in STDIO mode
    >>> from shopforge.mcp import run_server
    >>> run_server()

    # Start server in HTTP mode
    >>> from shopforge.mcp import run_server, TransportType
    >>> run_server(transport=TransportType.HTTP, port=18080)

    # Create a server over a custom generator for testing
    >>> from shopforge.mcp import create_server
    >>> server = create_server(PageGenerator(registry))

Available Tools:
    - generate_page: Generate or refine a page from a conversation
    - generate_variants: Three styled pages for one request
    - insert_section: Add or update one section of a page
    - list_section_templates: Catalog of insertable sections
    - status: Provider readiness
"""

from .lib import (
    SERVER_NAME,
    ServerConfig,
    TransportType,
    get_server_version,
)
from .server import create_server, mcp, run_server, server_status

__all__ = [
    # Server instance
    "mcp",
    "create_server",
    "run_server",
    "server_status",
    # Configuration
    "SERVER_NAME",
    "ServerConfig",
    "TransportType",
    # Utilities
    "get_server_version",
]
