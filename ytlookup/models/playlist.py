"""Flat list records returned by the paginated list endpoints."""

from pydantic import BaseModel


class Video(BaseModel):
    """A playlist item.

    Statistics stay None unless populated by a videos.list call.
    """

    video_id: str
    title: str
    description: str = ""
    created_at: int
    livestream: bool = False
    views: int | None = None
    likes: int | None = None
    comments: int | None = None


class Subscription(BaseModel):
    """A channel the owner of a subscription list is subscribed to."""

    channel_id: str
    title: str
    created_at: int
    profile_picture: str | None = None
