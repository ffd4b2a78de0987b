"""Request and response schemas for the HTTP API."""

from pydantic import BaseModel, Field

from ytlookup.models import Channel, Subscription, Video
from ytlookup.services.resolver import LookupType


class ChannelLookupRequest(BaseModel):
    """Body of POST /api/channel."""

    type: LookupType
    id: str = Field(min_length=1)


class ChannelLookupResponse(BaseModel):
    """Resolved channel plus the canonical URL it redirects to, if any."""

    channel: Channel
    redirect_url: str | None = None


class PaginatedRequest(BaseModel):
    """Body of the paginated list endpoints."""

    id: str = Field(min_length=1)
    page_token: str | None = None


class PlaylistItemsRequest(PaginatedRequest):
    """Body of POST /api/playlist_items."""

    include_stats: bool = False


class PlaylistItemsResponse(BaseModel):
    items: list[Video]
    page_token: str | None = None


class SubscriptionsResponse(BaseModel):
    items: list[Subscription]
    page_token: str | None = None


class ErrorResponse(BaseModel):
    """Error body returned for every failed request.

    Attributes:
        error: Stable machine-readable code
        message: Human readable message
        reason: Refined cause for not-found lookups (account_closed, account_terminated)
    """

    error: str
    message: str
    reason: str | None = None
