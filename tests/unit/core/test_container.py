"""Unit tests for the Dependency Injection Container."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ytlookup.core.container import (
    close_http_client,
    container,
    create_container,
    get_list_service,
    get_resolver,
)
from ytlookup.infrastructure.http_client import HTTPClient
from ytlookup.infrastructure.innertube import InnertubeClient
from ytlookup.infrastructure.youtube_data_api import YouTubeDataAPIClient
from ytlookup.services import ChannelResolver, ListService


class TestContainerCreation:
    """Tests for container creation and configuration."""

    def test_create_container_has_sub_containers(self) -> None:
        """Test that create_container returns a container with expected providers."""
        new_container = create_container()

        assert hasattr(new_container, "config")
        assert hasattr(new_container, "infrastructure")
        assert hasattr(new_container, "services")

    def test_container_has_config(self) -> None:
        """Test that the API key reaches the config provider."""
        new_container = create_container()

        assert new_container.config().youtube_api_key


class TestInfrastructureContainer:
    """Tests for infrastructure providers."""

    def test_http_client_is_singleton(self) -> None:
        """Test the HTTP client is shared."""
        new_container = create_container()

        first = new_container.infrastructure.http_client()
        second = new_container.infrastructure.http_client()

        assert isinstance(first, HTTPClient)
        assert first is second

    def test_clients_share_http_client(self) -> None:
        """Test both upstream clients use the same pool."""
        new_container = create_container()

        data_api = new_container.infrastructure.data_api_client()
        innertube = new_container.infrastructure.innertube_client()

        assert isinstance(data_api, YouTubeDataAPIClient)
        assert isinstance(innertube, InnertubeClient)
        assert data_api.http_client is innertube.http_client
        assert data_api.api_key == new_container.config().youtube_api_key


class TestServiceContainer:
    """Tests for service providers."""

    def test_resolver_is_wired(self) -> None:
        """Test the resolver receives clients and enricher."""
        new_container = create_container()

        resolver = new_container.services.channel_resolver()

        assert isinstance(resolver, ChannelResolver)
        assert resolver.enricher.innertube is resolver.innertube

    def test_fastapi_dependencies(self) -> None:
        """Test the FastAPI dependency helpers build services."""
        assert isinstance(get_resolver(), ChannelResolver)
        assert isinstance(get_list_service(), ListService)

    def test_override_resolver(self) -> None:
        """Test providers can be overridden for testing."""
        mock_resolver = MagicMock()

        with container.services.channel_resolver.override(mock_resolver):
            assert get_resolver() is mock_resolver


@pytest.mark.asyncio
async def test_close_http_client_resets_singletons() -> None:
    """Test closing the HTTP client drops it from the container."""
    mock_client = MagicMock()
    mock_client.close = AsyncMock()

    with container.infrastructure.http_client.override(mock_client):
        await close_http_client()

    mock_client.close.assert_awaited_once()
