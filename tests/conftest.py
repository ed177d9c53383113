"""Root-level pytest fixtures for all tests.

Provides:
- transport: FakeTransport recording envelopes and replaying queued bodies
- client: a Client with every service registered on that transport
- mock_context: a FastMCP context whose lifespan holds the client
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from novaposhta.client import ClientContext, build_client
from tests.helpers import FakeTransport

TEST_API_KEY = "test-api-key-1234"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring a live Nova Poshta API key"
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport):
    """Client with every service attached, authenticated with a test key."""
    return build_client(ClientContext(transport=transport, api_key=TEST_API_KEY))


@pytest.fixture
def mock_context(client):
    """Create mock FastMCP context."""
    ctx = MagicMock()
    ctx.info = AsyncMock()
    ctx.request_context.lifespan_context = {"client": client}
    return ctx
