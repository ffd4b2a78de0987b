"""Shared HTTP client for all upstream YouTube calls.

One httpx.AsyncClient (and therefore one connection pool) serves both the
Data API and innertube for the lifetime of the process.
"""

import httpx

from ytlookup import __version__
from ytlookup.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": f"ytlookup/{__version__}",
    # Forbidden-message classification matches English wording
    "Accept-Language": "en-US,en;q=0.9",
}


class HTTPClient:
    """Pooled async HTTP client.

    Built once by the DI container, shared by the upstream clients and
    closed from the application lifespan.

    Example:
        >>> http_client = HTTPClient(timeout=10.0)
        >>> response = await http_client.post(url, json=payload)
        >>> await http_client.close()
    """

    def __init__(
        self,
        timeout: float = 30.0,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
    ) -> None:
        """Initialize HTTP client.

        Args:
            timeout: Transport timeout in seconds for connect, read and write
            max_connections: Maximum number of pooled connections
            max_keepalive_connections: Maximum idle connections kept open
        """
        self._client = httpx.AsyncClient(
            headers=DEFAULT_HEADERS,
            timeout=httpx.Timeout(timeout),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_keepalive_connections,
            ),
            follow_redirects=True,
        )
        logger.info(
            "HTTP client initialized",
            timeout=timeout,
            max_connections=max_connections,
        )

    async def get(self, url: str, **kwargs) -> httpx.Response:
        """Send a GET request."""
        return await self._client.get(url, **kwargs)

    async def post(self, url: str, **kwargs) -> httpx.Response:
        """Send a POST request."""
        return await self._client.post(url, **kwargs)

    async def close(self) -> None:
        """Close the underlying client and its connections."""
        await self._client.aclose()
        logger.info("HTTP client closed")


__all__ = ["HTTPClient"]
