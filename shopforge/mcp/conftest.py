"""Pytest fixtures for MCP server tests.

This module provides:
- Page generators over scripted stub backends
- Server and client fixtures for protocol testing
"""

from __future__ import annotations

import json
from typing import AsyncGenerator, Callable

import pytest
from fastmcp import Client, FastMCP

from shopforge.conftest import LANDING_DATA
from shopforge.llm import BackendRegistry, GeneratorConfig, PageGenerator
from shopforge.llm.conftest import StubBackend

from .server import create_server

# =============================================================================
# Generator Fixtures
# =============================================================================


@pytest.fixture
def make_generator() -> Callable[..., PageGenerator]:
    """Build a PageGenerator over the given stub backend without retry delays."""

    def _build(backend: StubBackend) -> PageGenerator:
        registry = BackendRegistry(default_provider="anthropic")
        registry.register("anthropic", backend)
        return PageGenerator(registry, GeneratorConfig(retry_delay=0.0))

    return _build


@pytest.fixture
def landing_backend() -> StubBackend:
    """Stub backend that always answers with the sample landing page."""
    return StubBackend(responses=[json.dumps(LANDING_DATA)])


# =============================================================================
# Server Fixtures
# =============================================================================


@pytest.fixture
def mcp_server(make_generator, landing_backend) -> FastMCP:
    """Create MCP server instance over the landing stub."""
    return create_server(make_generator(landing_backend))


@pytest.fixture
async def mcp_client(mcp_server: FastMCP) -> AsyncGenerator[Client, None]:
    """Create connected in-memory MCP client for testing.

    Yields:
        Connected Client instance.
    """
    async with Client(mcp_server) as client:
        yield client
