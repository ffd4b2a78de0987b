"""Domain models for the lookup gateway.

Plain pydantic records built from upstream responses; nothing is persisted.
"""

from ytlookup.models.channel import Channel, VerificationStatus
from ytlookup.models.playlist import Subscription, Video
from ytlookup.models.resolve import BrowseTarget, RedirectTarget, ResolveUrlResult

__all__ = [
    "BrowseTarget",
    "Channel",
    "RedirectTarget",
    "ResolveUrlResult",
    "Subscription",
    "VerificationStatus",
    "Video",
]
