"""Root pytest configuration.

This module provides:
- Environment setup (loads .env)
- Automatic skipping of live-provider tests when no API key is configured
"""

from __future__ import annotations

import pytest
from dotenv import load_dotenv

from shopforge.config import get_available_llm_providers

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Skip integration tests whose provider has no API key.

    A test marked `@pytest.mark.integration("groq")` needs GROQ_API_KEY; a
    bare `@pytest.mark.integration` needs any configured provider.
    """
    configured = set(get_available_llm_providers())

    for item in items:
        marker = item.get_closest_marker("integration")
        if marker is None:
            continue
        wanted = set(marker.args)
        if wanted and not wanted & configured:
            item.add_marker(
                pytest.mark.skip(reason=f"No API key for {', '.join(sorted(wanted))}")
            )
        elif not configured:
            item.add_marker(pytest.mark.skip(reason="No LLM provider API key configured"))
