"""HTTP routes of the lookup gateway."""

from fastapi import APIRouter, Depends

from ytlookup.api.schemas import (
    ChannelLookupRequest,
    ChannelLookupResponse,
    PaginatedRequest,
    PlaylistItemsRequest,
    PlaylistItemsResponse,
    SubscriptionsResponse,
)
from ytlookup.core.container import get_list_service, get_resolver
from ytlookup.core.exceptions import InvalidRequestError
from ytlookup.services import ChannelResolver, ListService

router = APIRouter(prefix="/api", tags=["lookup"])


def _require_id(value: str) -> str:
    if not value.strip():
        raise InvalidRequestError("id must not be blank")
    return value


@router.post("/channel", response_model=ChannelLookupResponse)
async def lookup_channel(
    body: ChannelLookupRequest,
    resolver: ChannelResolver = Depends(get_resolver),
) -> ChannelLookupResponse:
    """Resolve an identifier of a declared type into a channel."""
    resolution = await resolver.resolve(body.type, _require_id(body.id))
    return ChannelLookupResponse(
        channel=resolution.channel,
        redirect_url=resolution.redirect_url,
    )


@router.post("/playlist_items", response_model=PlaylistItemsResponse)
async def playlist_items(
    body: PlaylistItemsRequest,
    lists: ListService = Depends(get_list_service),
) -> PlaylistItemsResponse:
    """Fetch one page of a playlist."""
    page = await lists.playlist_items(
        _require_id(body.id),
        page_token=body.page_token,
        include_stats=body.include_stats,
    )
    return PlaylistItemsResponse(items=page.items, page_token=page.page_token)


@router.post("/subscriptions", response_model=SubscriptionsResponse)
async def subscriptions(
    body: PaginatedRequest,
    lists: ListService = Depends(get_list_service),
) -> SubscriptionsResponse:
    """Fetch one page of a channel's public subscriptions."""
    page = await lists.subscriptions(_require_id(body.id), page_token=body.page_token)
    return SubscriptionsResponse(items=page.items, page_token=page.page_token)
