"""YouTube Data API v3 client.

Read-only access to channels, playlist items, subscriptions and video
statistics using a single static API key. List results drop records that
lack required fields instead of failing the whole page.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ytlookup.config.youtube import YouTubeAPIConfig
from ytlookup.core.exceptions import YouTubeError, YouTubeErrorKind
from ytlookup.core.logging import get_logger
from ytlookup.infrastructure.http_client import HTTPClient
from ytlookup.infrastructure.youtube_base import YouTubeBaseClient
from ytlookup.infrastructure.youtube_parsing import (
    AVATAR_PREFIXES,
    BANNER_PREFIXES,
    as_dict,
    as_str,
    dig,
    parse_count,
    parse_keywords,
    parse_timestamp,
    strip_asset_url,
)
from ytlookup.infrastructure.youtube_status import Endpoint
from ytlookup.models import Channel, Subscription, Video

logger = get_logger(__name__)

CHANNEL_PARTS = "brandingSettings,id,snippet,statistics,status,localizations,topicDetails"
CHANNEL_FIELDMASK = (
    "items(id,snippet(title,description,customUrl,publishedAt,country,thumbnails.default.url),"
    "statistics(subscriberCount,viewCount,videoCount),topicDetails.topicIds,"
    "brandingSettings(channel(keywords,unsubscribedTrailer,trackingAnalyticsAccountId),"
    "image.bannerExternalUrl),status.madeForKids)"
)
PLAYLIST_ITEMS_FIELDMASK = (
    "nextPageToken,items(snippet(publishedAt,title,description,resourceId.videoId))"
)
SUBSCRIPTIONS_FIELDMASK = (
    "nextPageToken,items(snippet(publishedAt,title,resourceId.channelId,thumbnails.default.url))"
)
VIDEOS_FIELDMASK = (
    "items(id,statistics(viewCount,likeCount,commentCount),"
    "liveStreamingDetails(actualStartTime,concurrentViewers))"
)


class ChannelLookupBy(str, Enum):
    """Data API query parameter used to select a channel."""

    USERNAME = "forUsername"
    HANDLE = "forHandle"
    CHANNEL_ID = "id"


@dataclass(frozen=True)
class ChannelLookup:
    """Selector for a single channels.list call.

    Attributes:
        by: Which identifier space the value belongs to
        value: Username, handle or channel ID
    """

    by: ChannelLookupBy
    value: str

    @classmethod
    def username(cls, value: str) -> "ChannelLookup":
        return cls(ChannelLookupBy.USERNAME, value)

    @classmethod
    def handle(cls, value: str) -> "ChannelLookup":
        return cls(ChannelLookupBy.HANDLE, value)

    @classmethod
    def channel_id(cls, value: str) -> "ChannelLookup":
        return cls(ChannelLookupBy.CHANNEL_ID, value)


def channel_from_api_item(item: Any) -> Channel:
    """Build a Channel from one channels.list item.

    Missing counts default to 0 and a missing or malformed publish date
    to 0. Fields of the wrong JSON type are treated as missing.
    Enrichment-only fields are left unset.

    Raises:
        YouTubeError: PARSE_ERROR if the item is not an object or has no channel ID
    """
    if not isinstance(item, dict) or not isinstance(item.get("id"), str):
        raise YouTubeError(YouTubeErrorKind.PARSE_ERROR, detail="Channel item without id")

    snippet = as_dict(item.get("snippet"))
    statistics = as_dict(item.get("statistics"))
    branding = as_dict(dig(item, "brandingSettings", "channel"))

    avatar_url = as_str(dig(snippet, "thumbnails", "default", "url"))
    banner_url = as_str(dig(item, "brandingSettings", "image", "bannerExternalUrl"))

    handle = None
    custom_url = as_str(snippet.get("customUrl"))
    if custom_url and custom_url.startswith("@"):
        handle = custom_url.lstrip("@").lower()

    raw_keywords = as_str(branding.get("keywords"))

    return Channel(
        user_id=item["id"],
        display_name=as_str(snippet.get("title")),
        description=as_str(snippet.get("description")),
        handle=handle,
        profile_picture=strip_asset_url(avatar_url, AVATAR_PREFIXES) if avatar_url else None,
        banner=strip_asset_url(banner_url, BANNER_PREFIXES) if banner_url else None,
        created_at=parse_timestamp(snippet.get("publishedAt")) or 0,
        country=as_str(snippet.get("country")),
        view_count=parse_count(statistics.get("viewCount")) or 0,
        subscriber_count=parse_count(statistics.get("subscriberCount")) or 0,
        video_count=parse_count(statistics.get("videoCount")) or 0,
        made_for_kids=dig(item, "status", "madeForKids") is True,
        keywords=parse_keywords(raw_keywords) if raw_keywords is not None else None,
        trailer=as_str(branding.get("unsubscribedTrailer")),
        analytics_account_id=as_str(branding.get("trackingAnalyticsAccountId")),
    )


def video_from_api_item(item: Any) -> Video | None:
    """Build a Video from a playlistItems.list item, or None if incomplete."""
    snippet = as_dict(dig(item, "snippet"))
    video_id = as_str(dig(snippet, "resourceId", "videoId"))
    title = as_str(snippet.get("title"))
    created_at = parse_timestamp(snippet.get("publishedAt"))
    if video_id is None or title is None or created_at is None:
        return None
    return Video(
        video_id=video_id,
        title=title,
        description=as_str(snippet.get("description")) or "",
        created_at=created_at,
    )


def subscription_from_api_item(item: Any) -> Subscription | None:
    """Build a Subscription from a subscriptions.list item, or None if incomplete."""
    snippet = as_dict(dig(item, "snippet"))
    channel_id = as_str(dig(snippet, "resourceId", "channelId"))
    title = as_str(snippet.get("title"))
    created_at = parse_timestamp(snippet.get("publishedAt"))
    if channel_id is None or title is None or created_at is None:
        return None
    avatar_url = as_str(dig(snippet, "thumbnails", "default", "url"))
    return Subscription(
        channel_id=channel_id,
        title=title,
        created_at=created_at,
        profile_picture=strip_asset_url(avatar_url, AVATAR_PREFIXES) if avatar_url else None,
    )


def page_items(data: dict[str, Any]) -> list[Any]:
    """Return the ``items`` array of a list response.

    Raises:
        YouTubeError: PARSE_ERROR if ``items`` is present but not an array
    """
    items = data.get("items")
    if items is None:
        return []
    if not isinstance(items, list):
        raise YouTubeError(YouTubeErrorKind.PARSE_ERROR, detail="items is not an array")
    return items


class YouTubeDataAPIClient(YouTubeBaseClient):
    """YouTube Data API v3 client.

    Example:
        >>> client = YouTubeDataAPIClient(api_key, http_client)
        >>> channel = await client.get_channel(ChannelLookup.handle("youtube"))
        >>> videos, token = await client.get_playlist_items("UU...", None)
    """

    def __init__(
        self,
        api_key: str,
        http_client: HTTPClient,
        config: YouTubeAPIConfig | None = None,
    ) -> None:
        """Initialize Data API client.

        Args:
            api_key: Static Data API key
            http_client: Shared HTTP client from DI
            config: Optional upstream configuration
        """
        super().__init__(http_client, config)
        self.api_key = api_key

    def _headers(self, fieldmask: str) -> dict[str, str]:
        return {
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-Fieldmask": fieldmask,
        }

    async def _list(
        self,
        resource: str,
        endpoint: Endpoint,
        params: dict[str, Any],
        fieldmask: str,
    ) -> dict[str, Any]:
        return await self._request_json(
            "GET",
            f"{self.config.data_api_base_url}/{resource}",
            endpoint,
            params=params,
            headers=self._headers(fieldmask),
        )

    async def get_channel(self, lookup: ChannelLookup) -> Channel:
        """Fetch a single channel.

        Args:
            lookup: Username, handle or channel ID selector

        Returns:
            Channel without enrichment fields

        Raises:
            YouTubeError: NOT_FOUND when no channel matches, or any
                classified upstream failure
        """
        data = await self._list(
            "channels",
            Endpoint.CHANNELS,
            {"part": CHANNEL_PARTS, lookup.by.value: lookup.value},
            CHANNEL_FIELDMASK,
        )
        items = page_items(data)
        if not items:
            raise YouTubeError(
                YouTubeErrorKind.NOT_FOUND,
                context={"lookup": lookup.by.value, "value": lookup.value},
            )
        return channel_from_api_item(items[-1])

    async def get_playlist_items(
        self,
        playlist_id: str,
        page_token: str | None,
        max_results: int | None = None,
    ) -> tuple[list[Video], str | None]:
        """Fetch one page of a playlist.

        Args:
            playlist_id: Playlist ID (an uploads playlist is UU...)
            page_token: Token from a previous page
            max_results: Page size, defaults to the configured page size

        Returns:
            Tuple of (videos, next page token)
        """
        params: dict[str, Any] = {
            "playlistId": playlist_id,
            "part": "snippet",
            "maxResults": max_results or self.config.page_size,
        }
        if page_token:
            params["pageToken"] = page_token

        data = await self._list(
            "playlistItems", Endpoint.PLAYLIST_ITEMS, params, PLAYLIST_ITEMS_FIELDMASK
        )
        videos = [
            video
            for video in (video_from_api_item(item) for item in page_items(data))
            if video is not None
        ]
        return videos, as_str(data.get("nextPageToken"))

    async def get_subscriptions(
        self,
        channel_id: str,
        page_token: str | None,
        max_results: int | None = None,
    ) -> tuple[list[Subscription], str | None]:
        """Fetch one page of a channel's public subscriptions.

        Args:
            channel_id: Channel whose subscriptions are listed
            page_token: Token from a previous page
            max_results: Page size, defaults to the configured page size

        Returns:
            Tuple of (subscriptions, next page token)

        Raises:
            YouTubeError: ACCOUNT_CLOSED, ACCOUNT_TERMINATED and
                SUBSCRIPTIONS_PRIVATE are only produced here
        """
        params: dict[str, Any] = {
            "channelId": channel_id,
            "part": "snippet",
            "order": "alphabetical",
            "maxResults": max_results or self.config.page_size,
        }
        if page_token:
            params["pageToken"] = page_token

        data = await self._list(
            "subscriptions", Endpoint.SUBSCRIPTIONS, params, SUBSCRIPTIONS_FIELDMASK
        )
        subscriptions = [
            sub
            for sub in (subscription_from_api_item(item) for item in page_items(data))
            if sub is not None
        ]
        return subscriptions, as_str(data.get("nextPageToken"))

    async def populate_video_stats(self, videos: list[Video]) -> list[Video]:
        """Fill livestream flag and counts for a list of videos.

        Videos are queried in batches of at most 50 IDs. Videos the API
        does not return are passed through unchanged.

        Args:
            videos: Videos to enrich

        Returns:
            New list with statistics filled in, same order as the input
        """
        if not videos:
            return []

        stats: dict[str, dict[str, Any]] = {}
        batch_size = self.config.video_batch_size
        for start in range(0, len(videos), batch_size):
            ids = ",".join(video.video_id for video in videos[start : start + batch_size])
            data = await self._list(
                "videos",
                Endpoint.VIDEOS,
                {"id": ids, "part": "liveStreamingDetails,statistics"},
                VIDEOS_FIELDMASK,
            )
            for item in page_items(data):
                video_id = as_str(dig(item, "id"))
                if not video_id:
                    continue
                statistics = as_dict(item.get("statistics"))
                stats[video_id] = {
                    "livestream": item.get("liveStreamingDetails") is not None,
                    "views": parse_count(statistics.get("viewCount")),
                    "likes": parse_count(statistics.get("likeCount")),
                    "comments": parse_count(statistics.get("commentCount")),
                }

        logger.debug("Populated video stats", requested=len(videos), found=len(stats))
        return [
            video.model_copy(update=stats[video.video_id]) if video.video_id in stats else video
            for video in videos
        ]


__all__ = [
    "ChannelLookup",
    "ChannelLookupBy",
    "YouTubeDataAPIClient",
    "channel_from_api_item",
    "page_items",
    "subscription_from_api_item",
    "video_from_api_item",
]
