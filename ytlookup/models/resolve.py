"""Result of resolving a YouTube URL through innertube."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BrowseTarget:
    """The URL lands on a browsable page, usually a channel.

    Attributes:
        browse_id: Opaque browse ID usable for direct channel fetches
    """

    browse_id: str


@dataclass(frozen=True)
class RedirectTarget:
    """The URL redirects to another absolute URL.

    Attributes:
        url: Fully qualified redirect target
    """

    url: str


ResolveUrlResult = BrowseTarget | RedirectTarget
