"""Custom exceptions for the YouTube lookup gateway.

This module defines all custom exceptions used throughout the application.
All exceptions inherit from YTLookupError for easy catching.

Upstream failures are a single exception type, YouTubeError, tagged with a
closed YouTubeErrorKind. Code that needs to react to a particular failure
matches on ``error.kind`` instead of catching subclasses, so adding a kind
means updating every ``match`` that handles them.

Exception classes include context dictionaries for structured logging
and debugging. Use the `context` property to access additional details.
"""

from enum import Enum
from typing import Any

# Upstream bodies are kept for diagnostics but never in full
RESPONSE_BODY_EXCERPT = 500


class YTLookupError(Exception):
    """Base exception for all gateway errors.

    Provides a context dictionary for structured error information.

    Attributes:
        context: Dictionary with additional error context

    Example:
        >>> try:
        ...     raise YTLookupError("Something went wrong", context={"channel_id": "UC1"})
        ... except YTLookupError as e:
        ...     print(f"Error: {e}, Context: {e.context}")
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize YTLookupError.

        Args:
            message: Error message
            context: Optional dictionary with additional context
        """
        self.context = context or {}
        super().__init__(message)

    def with_context(self, **kwargs: Any) -> "YTLookupError":
        """Add additional context to the exception.

        Args:
            **kwargs: Key-value pairs to add to context

        Returns:
            Self for method chaining
        """
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization.

        Returns:
            Dictionary with error type, message, and context
        """
        return {
            "error_type": self.__class__.__name__,
            "message": str(self),
            "context": self.context,
        }


# ============================================
# Upstream (YouTube) Errors
# ============================================


class YouTubeErrorKind(str, Enum):
    """Closed set of upstream failure kinds."""

    NOT_FOUND = "not_found"
    RATELIMITED = "rate_limited"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    ACCOUNT_CLOSED = "account_closed"
    ACCOUNT_TERMINATED = "account_terminated"
    SUBSCRIPTIONS_PRIVATE = "subscriptions_private"
    PARSE_ERROR = "parse_error"
    UNKNOWN_STATUS = "unknown_upstream_status"
    TRANSPORT = "upstream_unreachable"


_DEFAULT_MESSAGES: dict[YouTubeErrorKind, str] = {
    YouTubeErrorKind.NOT_FOUND: "Not found",
    YouTubeErrorKind.RATELIMITED: "Rate limited",
    YouTubeErrorKind.UNAUTHORIZED: "Unauthorized",
    YouTubeErrorKind.FORBIDDEN: "Forbidden",
    YouTubeErrorKind.INTERNAL_SERVER_ERROR: "Internal server error",
    YouTubeErrorKind.ACCOUNT_CLOSED: "Account is closed",
    YouTubeErrorKind.ACCOUNT_TERMINATED: "Account is terminated",
    YouTubeErrorKind.SUBSCRIPTIONS_PRIVATE: "Subscriptions are private",
    YouTubeErrorKind.PARSE_ERROR: "Parse error",
    YouTubeErrorKind.UNKNOWN_STATUS: "Unknown upstream status code",
    YouTubeErrorKind.TRANSPORT: "Upstream request failed",
}


class YouTubeError(YTLookupError):
    """Raised when an upstream YouTube call fails.

    Attributes:
        kind: Classified failure kind
        status_code: Upstream HTTP status (UNKNOWN_STATUS and classified statuses)
        detail: Free-form detail (PARSE_ERROR, TRANSPORT, forbidden message)
    """

    def __init__(
        self,
        kind: YouTubeErrorKind,
        detail: str | None = None,
        status_code: int | None = None,
        response_body: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize YouTubeError.

        Args:
            kind: Classified failure kind
            detail: Optional detail message
            status_code: Upstream HTTP status code
            response_body: Upstream body, truncated for the context
            context: Additional context
        """
        ctx = context or {}
        ctx["kind"] = kind.value
        if status_code is not None:
            ctx["status_code"] = status_code
        if detail:
            ctx["detail"] = detail
        if response_body:
            ctx["response_body"] = response_body[:RESPONSE_BODY_EXCERPT]

        self.kind = kind
        self.detail = detail
        self.status_code = status_code

        message = _DEFAULT_MESSAGES[kind]
        if kind is YouTubeErrorKind.UNKNOWN_STATUS and status_code is not None:
            message = f"{message}: {status_code}"
        elif detail and kind in (YouTubeErrorKind.PARSE_ERROR, YouTubeErrorKind.TRANSPORT):
            message = f"{message}: {detail}"

        super().__init__(message, context=ctx)


# ============================================
# Request-level Errors
# ============================================


class InvalidRequestError(YTLookupError):
    """Raised when the caller's request is malformed.

    Always raised before any upstream call is attempted.
    """


class LookupNotFoundError(YTLookupError):
    """Raised by the resolver when a lookup ends without a channel.

    Attributes:
        reason: Refined upstream kind behind the miss, if one is known
    """

    def __init__(
        self,
        message: str,
        reason: YouTubeErrorKind | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize LookupNotFoundError.

        Args:
            message: Human readable message returned to the caller
            reason: ACCOUNT_CLOSED or ACCOUNT_TERMINATED when the probe found one
            context: Additional context
        """
        ctx = context or {}
        if reason is not None:
            ctx["reason"] = reason.value
        self.reason = reason
        super().__init__(message, context=ctx)


__all__ = [
    "InvalidRequestError",
    "LookupNotFoundError",
    "YTLookupError",
    "YouTubeError",
    "YouTubeErrorKind",
]
