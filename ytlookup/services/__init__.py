"""Lookup services.

Channel identity resolution, best-effort enrichment and list paging on
top of the upstream clients.
"""

from ytlookup.services.enrichment import ChannelEnricher
from ytlookup.services.lists import ListService, Page
from ytlookup.services.resolver import ChannelResolution, ChannelResolver, LookupType

__all__ = [
    "ChannelEnricher",
    "ChannelResolution",
    "ChannelResolver",
    "ListService",
    "LookupType",
    "Page",
]
