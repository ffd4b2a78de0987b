"""Infrastructure layer components.

This module provides the shared HTTP client and the upstream YouTube
API clients.
"""

from ytlookup.infrastructure.http_client import HTTPClient
from ytlookup.infrastructure.innertube import InnertubeClient
from ytlookup.infrastructure.youtube_data_api import ChannelLookup, YouTubeDataAPIClient

__all__ = ["ChannelLookup", "HTTPClient", "InnertubeClient", "YouTubeDataAPIClient"]
