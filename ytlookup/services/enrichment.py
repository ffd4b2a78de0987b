"""Channel enrichment from the innertube browse endpoint.

Adds what the Data API does not expose: conditional redirects, the
verification badge, search indexability, country blocking and the
canonical handle.
"""

import re
from typing import Any

import pycountry

from ytlookup.core.logging import get_logger
from ytlookup.infrastructure.innertube import InnertubeClient
from ytlookup.infrastructure.youtube_parsing import as_dict, as_list, dig
from ytlookup.models import Channel, VerificationStatus

logger = get_logger(__name__)

ALL_COUNTRIES: frozenset[str] = frozenset(country.alpha_2 for country in pycountry.countries)

BADGE_VERIFICATION: dict[str, VerificationStatus] = {
    "AUDIO_BADGE": VerificationStatus.OAC,
    "CHECK_CIRCLE_FILLED": VerificationStatus.VERIFIED,
}

OWNER_HANDLE_PATTERN = re.compile(r"^https?://(?:www\.)?youtube\.com/@([^/?#]+)$")


def verification_from_badge(image_name: str | None) -> VerificationStatus:
    """Map a badge image name to a verification status.

    Unknown or missing badges map to NONE.
    """
    if image_name is None:
        return VerificationStatus.NONE
    return BADGE_VERIFICATION.get(image_name, VerificationStatus.NONE)


def blocked_countries(available: list[Any]) -> list[str] | None:
    """Compute countries missing from an availability list.

    Entries that are not strings are ignored.

    Returns:
        Sorted ISO 3166-1 alpha-2 codes, or None when nothing is blocked
    """
    blocked = sorted(ALL_COUNTRIES - {code for code in available if isinstance(code, str)})
    return blocked or None


def handle_from_owner_urls(owner_urls: list[Any]) -> str | None:
    """Return the handle of the first owner URL shaped like youtube.com/@handle."""
    for url in owner_urls:
        if not isinstance(url, str):
            continue
        match = OWNER_HANDLE_PATTERN.match(url)
        if match:
            return match.group(1).lower()
    return None


def apply_browse_response(channel: Channel, data: dict[str, Any]) -> Channel:
    """Merge a browse response into a channel.

    A navigate action pointing at a different channel short-circuits: only
    conditional_redirect is set. Otherwise verification, no_index and
    blocked_countries are all set and the handle is overwritten when the
    owner URLs carry one.

    Args:
        channel: Channel with user_id populated
        data: Browse response body

    Returns:
        Updated copy of the channel
    """
    redirect_id = dig(
        data, "onResponseReceivedActions", 0, "navigateAction", "endpoint", "browseEndpoint", "browseId"
    )
    if isinstance(redirect_id, str) and redirect_id != channel.user_id:
        return channel.model_copy(update={"conditional_redirect": redirect_id})

    badge = dig(
        data,
        "header",
        "pageHeaderRenderer",
        "content",
        "pageHeaderViewModel",
        "title",
        "dynamicTextViewModel",
        "text",
        "attachmentRuns",
        0,
        "element",
        "type",
        "imageType",
        "image",
        "sources",
        0,
        "clientResource",
        "imageName",
    )

    microformat = as_dict(dig(data, "microformat", "microformatDataRenderer"))
    available = microformat.get("availableCountries")

    update: dict[str, Any] = {
        "verification": verification_from_badge(badge if isinstance(badge, str) else None),
        "no_index": microformat.get("noindex") is True,
        "blocked_countries": blocked_countries(available) if isinstance(available, list) else None,
    }

    handle = handle_from_owner_urls(
        as_list(dig(data, "metadata", "channelMetadataRenderer", "ownerUrls"))
    )
    if handle is not None:
        update["handle"] = handle

    return channel.model_copy(update=update)


class ChannelEnricher:
    """Enriches channels with innertube browse data.

    Failures propagate as YouTubeError; callers decide whether to ignore them.
    """

    def __init__(self, innertube: InnertubeClient) -> None:
        """Initialize the enricher.

        Args:
            innertube: Innertube client
        """
        self.innertube = innertube

    async def enrich(self, channel: Channel) -> Channel:
        """Return the channel with enrichment fields filled in.

        Args:
            channel: Channel with user_id populated

        Returns:
            Enriched copy of the channel

        Raises:
            YouTubeError: If the browse call fails or its body is unusable
        """
        data = await self.innertube.browse(channel.user_id)
        enriched = apply_browse_response(channel, data)
        logger.debug(
            "Channel enriched",
            channel_id=channel.user_id,
            conditional_redirect=enriched.conditional_redirect,
            verification=enriched.verification,
        )
        return enriched


__all__ = [
    "ALL_COUNTRIES",
    "ChannelEnricher",
    "apply_browse_response",
    "blocked_countries",
    "handle_from_owner_urls",
    "verification_from_badge",
]
