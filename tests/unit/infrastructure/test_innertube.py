"""Unit tests for the innertube client."""

import httpx
import pytest

from ytlookup.config.youtube import YouTubeAPIConfig
from ytlookup.core.exceptions import YouTubeError, YouTubeErrorKind
from ytlookup.infrastructure.innertube import InnertubeClient, parse_resolve_url_response
from ytlookup.models import BrowseTarget, RedirectTarget


@pytest.fixture
def client(mock_http_client):
    return InnertubeClient(mock_http_client, YouTubeAPIConfig())


@pytest.mark.unit
class TestParseResolveUrlResponse:
    """Tests for resolve_url body parsing."""

    def test_browse_endpoint(self):
        data = {"endpoint": {"browseEndpoint": {"browseId": "UC1"}}}
        assert parse_resolve_url_response(data) == BrowseTarget(browse_id="UC1")

    def test_url_endpoint(self):
        data = {"endpoint": {"urlEndpoint": {"url": "https://www.youtube.com/@name"}}}
        assert parse_resolve_url_response(data) == RedirectTarget(url="https://www.youtube.com/@name")

    def test_browse_takes_precedence(self):
        data = {
            "endpoint": {
                "browseEndpoint": {"browseId": "UC1"},
                "urlEndpoint": {"url": "https://www.youtube.com/@name"},
            }
        }
        assert parse_resolve_url_response(data) == BrowseTarget(browse_id="UC1")

    def test_no_endpoint(self):
        assert parse_resolve_url_response({}) is None


@pytest.mark.unit
class TestResolveUrl:
    """Tests for navigation/resolve_url."""

    @pytest.mark.asyncio
    async def test_request_shape(self, client, mock_http_client):
        mock_http_client.post.return_value = httpx.Response(
            200, json={"endpoint": {"browseEndpoint": {"browseId": "UC1"}}}
        )

        result = await client.resolve_url("youtube.com/+name")

        assert result == BrowseTarget(browse_id="UC1")
        url = mock_http_client.post.call_args[0][0]
        body = mock_http_client.post.call_args[1]["json"]
        assert url == "https://www.youtube.com/youtubei/v1/navigation/resolve_url"
        assert body["url"] == "youtube.com/+name"
        assert body["context"]["client"] == {"clientName": "WEB", "clientVersion": "2.20240101"}

    @pytest.mark.asyncio
    async def test_unknown_url_is_not_found(self, client, mock_http_client):
        mock_http_client.post.return_value = httpx.Response(404, json={"error": {}})

        with pytest.raises(YouTubeError) as exc_info:
            await client.resolve_url("youtube.com/+nobody")

        assert exc_info.value.kind is YouTubeErrorKind.NOT_FOUND


@pytest.mark.unit
class TestBrowse:
    """Tests for browse."""

    @pytest.mark.asyncio
    async def test_request_shape(self, client, mock_http_client):
        mock_http_client.post.return_value = httpx.Response(200, json={"metadata": {}})

        data = await client.browse("UC1")

        assert data == {"metadata": {}}
        kwargs = mock_http_client.post.call_args[1]
        assert kwargs["params"] == {"prettyPrint": "false"}
        assert kwargs["json"]["browseId"] == "UC1"
        assert kwargs["json"]["context"]["client"]["clientVersion"] == "2.20250108.06.00"

    @pytest.mark.asyncio
    async def test_non_object_body(self, client, mock_http_client):
        mock_http_client.post.return_value = httpx.Response(200, json=[1, 2])

        with pytest.raises(YouTubeError) as exc_info:
            await client.browse("UC1")

        assert exc_info.value.kind is YouTubeErrorKind.PARSE_ERROR
