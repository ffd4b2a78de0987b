"""Pytest configuration and fixtures.

This module provides common fixtures used across all tests.
"""

import os

# Config validation requires an API key before anything builds it
os.environ.setdefault("YOUTUBE_API_KEY", "test-api-key")

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402

from ytlookup.core.logging import setup_logging  # noqa: E402

# Setup logging for tests
setup_logging()


@pytest.fixture
def mock_http_client() -> MagicMock:
    """Create a mock of the shared HTTP client."""
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def anyio_backend() -> str:
    """Specify backend for anyio.

    Returns:
        Backend name
    """
    return "asyncio"
