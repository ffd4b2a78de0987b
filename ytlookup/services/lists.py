"""Paginated list fetching for playlist items and subscriptions."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ytlookup.config.youtube import YouTubeAPIConfig
from ytlookup.infrastructure.youtube_data_api import YouTubeDataAPIClient
from ytlookup.models import Subscription, Video

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a list.

    Attributes:
        items: Complete records on this page
        page_token: Token for the next page, None on the last page
    """

    items: list[T] = field(default_factory=list)
    page_token: str | None = None


class ListService:
    """Fetches list pages with the fixed page size."""

    def __init__(
        self,
        data_api: YouTubeDataAPIClient,
        config: YouTubeAPIConfig | None = None,
    ) -> None:
        """Initialize the list service.

        Args:
            data_api: Data API v3 client
            config: Optional upstream configuration
        """
        self.data_api = data_api
        self.config = config or YouTubeAPIConfig()

    async def playlist_items(
        self,
        playlist_id: str,
        page_token: str | None = None,
        include_stats: bool = False,
    ) -> Page[Video]:
        """Fetch one page of a playlist.

        Args:
            playlist_id: Playlist ID
            page_token: Token from a previous page
            include_stats: Also fetch view/like/comment counts for the page

        Returns:
            Page of videos
        """
        videos, next_token = await self.data_api.get_playlist_items(
            playlist_id, page_token, self.config.page_size
        )
        if include_stats:
            videos = await self.data_api.populate_video_stats(videos)
        return Page(items=videos, page_token=next_token)

    async def subscriptions(
        self,
        channel_id: str,
        page_token: str | None = None,
    ) -> Page[Subscription]:
        """Fetch one page of a channel's subscriptions.

        Args:
            channel_id: Channel ID
            page_token: Token from a previous page

        Returns:
            Page of subscriptions
        """
        subscriptions, next_token = await self.data_api.get_subscriptions(
            channel_id, page_token, self.config.page_size
        )
        return Page(items=subscriptions, page_token=next_token)
