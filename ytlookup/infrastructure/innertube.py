"""Innertube (youtubei/v1) client.

The internal API behind youtube.com. Used for what the Data API does not
expose: resolving arbitrary youtube.com URLs and reading the channel
page header (badges, redirects, country availability).
"""

from typing import Any

from ytlookup.core.logging import get_logger
from ytlookup.infrastructure.youtube_base import YouTubeBaseClient
from ytlookup.infrastructure.youtube_parsing import dig
from ytlookup.infrastructure.youtube_status import Endpoint
from ytlookup.models import BrowseTarget, RedirectTarget, ResolveUrlResult

logger = get_logger(__name__)

RESOLVE_URL_FIELDMASK = "endpoint(urlEndpoint.url,browseEndpoint.browseId)"
BROWSE_FIELDMASK = (
    "onResponseReceivedActions.navigateAction.endpoint.browseEndpoint.browseId,"
    "header.pageHeaderRenderer.content.pageHeaderViewModel.title.dynamicTextViewModel.text"
    ".attachmentRuns.element.type.imageType.image.sources.clientResource.imageName,"
    "metadata.channelMetadataRenderer.ownerUrls,"
    "microformat.microformatDataRenderer(noindex,availableCountries)"
)


def parse_resolve_url_response(data: dict[str, Any]) -> ResolveUrlResult | None:
    """Turn a navigation/resolve_url body into a target.

    Returns None when the response carries no usable endpoint.
    """
    browse_id = dig(data, "endpoint", "browseEndpoint", "browseId")
    if isinstance(browse_id, str):
        return BrowseTarget(browse_id=browse_id)
    url = dig(data, "endpoint", "urlEndpoint", "url")
    if isinstance(url, str):
        return RedirectTarget(url=url)
    return None


class InnertubeClient(YouTubeBaseClient):
    """Client for the innertube endpoints the gateway relies on.

    Example:
        >>> client = InnertubeClient(http_client)
        >>> await client.resolve_url("youtube.com/@YouTube")
        BrowseTarget(browse_id='UCBR8-60-B28hp2BmDPdntcQ')
    """

    async def resolve_url(self, url: str) -> ResolveUrlResult | None:
        """Resolve a youtube.com URL to where it lands.

        Args:
            url: YouTube-shaped URL, scheme optional (e.g. "youtube.com/+name")

        Returns:
            BrowseTarget, RedirectTarget, or None when there is no endpoint

        Raises:
            YouTubeError: NOT_FOUND when YouTube does not know the URL, or
                any other classified failure
        """
        data = await self._request_json(
            "POST",
            f"{self.config.innertube_base_url}/navigation/resolve_url",
            Endpoint.RESOLVE_URL,
            json={"context": self.config.resolve_url_client.context(), "url": url},
            headers={"X-Goog-Fieldmask": RESOLVE_URL_FIELDMASK},
        )
        result = parse_resolve_url_response(data)
        logger.debug("Resolved URL", url=url, result=repr(result))
        return result

    async def browse(self, browse_id: str) -> dict[str, Any]:
        """Fetch the browse payload for a channel page.

        Args:
            browse_id: Channel ID

        Returns:
            Raw browse response restricted by the field mask
        """
        return await self._request_json(
            "POST",
            f"{self.config.innertube_base_url}/browse",
            Endpoint.BROWSE,
            params={"prettyPrint": "false"},
            json={"context": self.config.browse_client.context(), "browseId": browse_id},
            headers={"X-Goog-Fieldmask": BROWSE_FIELDMASK},
        )


__all__ = ["InnertubeClient", "parse_resolve_url_response"]
