"""Shared request handling for YouTube upstream clients."""

from typing import Any

import httpx

from ytlookup.config.youtube import YouTubeAPIConfig
from ytlookup.core.exceptions import YouTubeError, YouTubeErrorKind
from ytlookup.core.logging import get_logger
from ytlookup.infrastructure.http_client import HTTPClient
from ytlookup.infrastructure.youtube_status import Endpoint, raise_for_upstream_status

logger = get_logger(__name__)


class YouTubeBaseClient:
    """Base class for clients talking to YouTube.

    Sends one request per call through the shared HTTP client and turns
    every failure into a YouTubeError: transport errors become TRANSPORT,
    non-200 statuses are classified, undecodable bodies become PARSE_ERROR.
    Nothing is retried.

    Attributes:
        http_client: Shared HTTP client from DI
        config: Upstream configuration
    """

    def __init__(
        self,
        http_client: HTTPClient,
        config: YouTubeAPIConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Shared HTTP client from DI
            config: Optional upstream configuration
        """
        self.http_client = http_client
        self.config = config or YouTubeAPIConfig()

    async def _request_json(
        self,
        method: str,
        url: str,
        endpoint: Endpoint,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON object.

        Args:
            method: "GET" or "POST"
            url: Request URL
            endpoint: Endpoint used for status classification
            **kwargs: Passed through to the HTTP client

        Returns:
            Decoded JSON object

        Raises:
            YouTubeError: On transport failure, non-200 status or bad body
        """
        send = self.http_client.get if method == "GET" else self.http_client.post
        try:
            response = await send(url, **kwargs)
        except httpx.RequestError as e:
            logger.warning("Upstream request failed", endpoint=endpoint.value, error=str(e))
            raise YouTubeError(
                YouTubeErrorKind.TRANSPORT,
                detail=str(e),
                context={"endpoint": endpoint.value},
            ) from e

        raise_for_upstream_status(response, endpoint)

        try:
            data = response.json()
        except ValueError as e:
            raise YouTubeError(
                YouTubeErrorKind.PARSE_ERROR,
                detail=str(e),
                context={"endpoint": endpoint.value},
            ) from e

        if not isinstance(data, dict):
            raise YouTubeError(
                YouTubeErrorKind.PARSE_ERROR,
                detail="Expected a JSON object",
                context={"endpoint": endpoint.value},
            )
        return data
