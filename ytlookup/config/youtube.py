"""Upstream YouTube API configuration models.

Defines endpoints, innertube client identities and paging for the
Data API v3 and innertube clients.
"""

from pydantic import BaseModel, Field


class InnertubeClientConfig(BaseModel):
    """Innertube client identity sent in the request context.

    Attributes:
        client_name: Innertube client name
        client_version: Innertube client version
    """

    client_name: str = Field(default="WEB")
    client_version: str

    def context(self) -> dict[str, dict[str, str]]:
        """Build the ``context`` object expected by innertube endpoints."""
        return {
            "client": {
                "clientName": self.client_name,
                "clientVersion": self.client_version,
            }
        }


class YouTubeAPIConfig(BaseModel):
    """YouTube upstream configuration.

    Attributes:
        data_api_base_url: Base URL of the Data API v3
        innertube_base_url: Base URL of the innertube API
        resolve_url_client: Client identity for navigation/resolve_url
        browse_client: Client identity for browse
        page_size: Page size for list endpoints (YouTube caps it at 50)
        video_batch_size: Maximum video IDs per videos.list call
    """

    data_api_base_url: str = Field(default="https://youtube.googleapis.com/youtube/v3")
    innertube_base_url: str = Field(default="https://www.youtube.com/youtubei/v1")
    resolve_url_client: InnertubeClientConfig = Field(
        default_factory=lambda: InnertubeClientConfig(client_version="2.20240101")
    )
    browse_client: InnertubeClientConfig = Field(
        default_factory=lambda: InnertubeClientConfig(client_version="2.20250108.06.00")
    )
    page_size: int = Field(default=50, ge=1, le=50)
    video_batch_size: int = Field(default=50, ge=1, le=50)
