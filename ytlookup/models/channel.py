"""Channel record and verification status.

A Channel is built once per lookup from Data API v3 data, optionally
enriched from innertube, serialized into the response and discarded.
"""

import enum

from pydantic import BaseModel, Field


class VerificationStatus(str, enum.Enum):
    """Channel verification badge."""

    NONE = "none"
    VERIFIED = "verified"
    OAC = "oac"  # Official Artist Channel / owner-approved creator


class Channel(BaseModel):
    """Canonical record for one creator account.

    The enrichment-only fields (conditional_redirect, no_index,
    verification, blocked_countries) stay None until enrichment succeeds.
    When enrichment finds a conditional redirect, only conditional_redirect
    is set and the record points at another channel.

    Attributes:
        user_id: Stable channel ID (UC...)
        display_name: Channel title
        description: Channel description
        handle: Lowercase handle without the leading @
        profile_picture: Avatar asset path, sizing parameters stripped
        banner: Banner asset path, sizing parameters stripped
        created_at: Creation time in seconds since epoch (0 if unknown)
        country: Country declared by the channel
        view_count: Total views
        subscriber_count: Total subscribers
        video_count: Total public videos
        made_for_kids: Kids content flag
        keywords: Channel keywords
        trailer: Video ID of the unsubscribed trailer
        analytics_account_id: Tracking analytics account ID
        conditional_redirect: Channel ID this channel redirects to
        no_index: Whether the channel page is excluded from search indexing
        verification: Verification badge
        blocked_countries: ISO 3166-1 alpha-2 codes where the channel is unavailable
    """

    user_id: str
    display_name: str | None = None
    description: str | None = None
    handle: str | None = None
    profile_picture: str | None = None
    banner: str | None = None
    created_at: int = 0
    country: str | None = None
    view_count: int = 0
    subscriber_count: int = 0
    video_count: int = 0
    made_for_kids: bool = False
    keywords: list[str] | None = None
    trailer: str | None = None
    analytics_account_id: str | None = None

    # Filled by innertube enrichment only
    conditional_redirect: str | None = None
    no_index: bool | None = None
    verification: VerificationStatus | None = None
    blocked_countries: list[str] | None = Field(default=None)

