"""Classification of upstream YouTube responses.

Every upstream call funnels its non-200 responses through this module.
The free-text 403 messages YouTube uses to signal quota exhaustion and
account state live in one table, FORBIDDEN_MESSAGE_RULES, so a wording
change upstream is a one-line edit here.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Literal

import httpx

from ytlookup.core.exceptions import YouTubeError, YouTubeErrorKind
from ytlookup.core.logging import get_logger

logger = get_logger(__name__)


class Endpoint(str, Enum):
    """Upstream call sites, used to scope message rules."""

    CHANNELS = "channels"
    PLAYLIST_ITEMS = "playlist_items"
    SUBSCRIPTIONS = "subscriptions"
    VIDEOS = "videos"
    RESOLVE_URL = "resolve_url"
    BROWSE = "browse"


@dataclass(frozen=True)
class ForbiddenMessageRule:
    """Maps a 403 error message to a failure kind.

    Attributes:
        match: "prefix" or "exact"
        text: Message text to compare against
        kind: Resulting failure kind
        endpoints: Endpoints the rule applies to (None means all)
    """

    match: Literal["prefix", "exact"]
    text: str
    kind: YouTubeErrorKind
    endpoints: frozenset[Endpoint] | None = None

    def matches(self, message: str, endpoint: Endpoint) -> bool:
        """Check whether this rule applies to a message from an endpoint."""
        if self.endpoints is not None and endpoint not in self.endpoints:
            return False
        if self.match == "prefix":
            return message.startswith(self.text)
        return message == self.text


# Observed YouTube Data API v3 wording, first match wins.
FORBIDDEN_MESSAGE_RULES_VERSION = "2025-01"
FORBIDDEN_MESSAGE_RULES: tuple[ForbiddenMessageRule, ...] = (
    ForbiddenMessageRule(
        match="exact",
        text="Subscriptions could not be retrieved because the subscriber's account is closed.",
        kind=YouTubeErrorKind.ACCOUNT_CLOSED,
        endpoints=frozenset({Endpoint.SUBSCRIPTIONS}),
    ),
    ForbiddenMessageRule(
        match="exact",
        text="Subscriptions could not be retrieved because the subscriber's account is suspended.",
        kind=YouTubeErrorKind.ACCOUNT_TERMINATED,
        endpoints=frozenset({Endpoint.SUBSCRIPTIONS}),
    ),
    ForbiddenMessageRule(
        match="exact",
        text="The requester is not allowed to access the requested subscriptions.",
        kind=YouTubeErrorKind.SUBSCRIPTIONS_PRIVATE,
        endpoints=frozenset({Endpoint.SUBSCRIPTIONS}),
    ),
    ForbiddenMessageRule(
        match="prefix",
        text="The request cannot be completed because you have exceeded your",
        kind=YouTubeErrorKind.RATELIMITED,
    ),
)

_STATUS_KINDS: dict[int, YouTubeErrorKind] = {
    401: YouTubeErrorKind.UNAUTHORIZED,
    404: YouTubeErrorKind.NOT_FOUND,
    429: YouTubeErrorKind.RATELIMITED,
    500: YouTubeErrorKind.INTERNAL_SERVER_ERROR,
    503: YouTubeErrorKind.INTERNAL_SERVER_ERROR,
}


def classify_forbidden_message(message: str | None, endpoint: Endpoint) -> YouTubeErrorKind:
    """Classify the message of a 403 response.

    Args:
        message: ``error.message`` from the response body, if any
        endpoint: Endpoint that produced the response

    Returns:
        The refined kind, or FORBIDDEN when no rule matches
    """
    if message is not None:
        for rule in FORBIDDEN_MESSAGE_RULES:
            if rule.matches(message, endpoint):
                return rule.kind
    return YouTubeErrorKind.FORBIDDEN


def classify_status(
    status_code: int,
    message: str | None,
    endpoint: Endpoint,
) -> YouTubeErrorKind | None:
    """Classify an upstream HTTP status.

    Args:
        status_code: HTTP status code
        message: ``error.message`` from the body, consulted for 403 only
        endpoint: Endpoint that produced the response

    Returns:
        None for 200, otherwise the failure kind (UNKNOWN_STATUS for
        anything not recognised)
    """
    if status_code == 200:
        return None
    if status_code == 403:
        return classify_forbidden_message(message, endpoint)
    return _STATUS_KINDS.get(status_code, YouTubeErrorKind.UNKNOWN_STATUS)


def extract_error_message(body: str) -> str | None:
    """Pull ``error.message`` out of a Google API error body.

    Returns None when the body is empty, not JSON, or lacks the field.
    """
    if not body:
        return None
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    return message if isinstance(message, str) else None


def raise_for_upstream_status(response: httpx.Response, endpoint: Endpoint) -> None:
    """Raise a classified YouTubeError for any non-200 response.

    Args:
        response: Upstream response (body already read)
        endpoint: Endpoint that produced the response

    Raises:
        YouTubeError: If the response is not a 200
    """
    body = response.text
    message = extract_error_message(body) if response.status_code == 403 else None
    kind = classify_status(response.status_code, message, endpoint)
    if kind is None:
        return

    if kind is YouTubeErrorKind.UNKNOWN_STATUS:
        logger.error(
            "Unknown upstream status code",
            endpoint=endpoint.value,
            status_code=response.status_code,
            body=body,
        )
    elif kind is YouTubeErrorKind.FORBIDDEN:
        logger.warning(
            "Unrecognized forbidden error message",
            endpoint=endpoint.value,
            message=message,
            rules_version=FORBIDDEN_MESSAGE_RULES_VERSION,
        )

    raise YouTubeError(
        kind,
        detail=message,
        status_code=response.status_code,
        response_body=body,
        context={"endpoint": endpoint.value},
    )


__all__ = [
    "FORBIDDEN_MESSAGE_RULES",
    "FORBIDDEN_MESSAGE_RULES_VERSION",
    "Endpoint",
    "ForbiddenMessageRule",
    "classify_forbidden_message",
    "classify_status",
    "extract_error_message",
    "raise_for_upstream_status",
]
