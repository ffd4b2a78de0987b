"""Unit tests for upstream status classification."""

import httpx
import pytest

from ytlookup.core.exceptions import YouTubeError, YouTubeErrorKind
from ytlookup.infrastructure.youtube_status import (
    FORBIDDEN_MESSAGE_RULES,
    Endpoint,
    classify_forbidden_message,
    classify_status,
    extract_error_message,
    raise_for_upstream_status,
)

CLOSED = "Subscriptions could not be retrieved because the subscriber's account is closed."
SUSPENDED = "Subscriptions could not be retrieved because the subscriber's account is suspended."
PRIVATE = "The requester is not allowed to access the requested subscriptions."
QUOTA = (
    "The request cannot be completed because you have exceeded your "
    '<a href="/youtube/v3/getting-started#quota">quota</a>.'
)


def _error_response(status_code: int, message: str | None = None) -> httpx.Response:
    if message is None:
        return httpx.Response(status_code, text="")
    return httpx.Response(status_code, json={"error": {"code": status_code, "message": message}})


@pytest.mark.unit
class TestClassifyStatus:
    """Tests for status code classification."""

    def test_ok_is_not_an_error(self):
        assert classify_status(200, None, Endpoint.CHANNELS) is None

    @pytest.mark.parametrize(
        ("status_code", "kind"),
        [
            (401, YouTubeErrorKind.UNAUTHORIZED),
            (404, YouTubeErrorKind.NOT_FOUND),
            (429, YouTubeErrorKind.RATELIMITED),
            (500, YouTubeErrorKind.INTERNAL_SERVER_ERROR),
            (503, YouTubeErrorKind.INTERNAL_SERVER_ERROR),
            (418, YouTubeErrorKind.UNKNOWN_STATUS),
            (502, YouTubeErrorKind.UNKNOWN_STATUS),
        ],
    )
    def test_status_table(self, status_code, kind):
        assert classify_status(status_code, None, Endpoint.CHANNELS) is kind

    def test_forbidden_uses_message(self):
        assert classify_status(403, QUOTA, Endpoint.VIDEOS) is YouTubeErrorKind.RATELIMITED


@pytest.mark.unit
class TestClassifyForbiddenMessage:
    """Tests for the 403 message rules."""

    def test_quota_prefix_applies_everywhere(self):
        for endpoint in Endpoint:
            assert classify_forbidden_message(QUOTA, endpoint) is YouTubeErrorKind.RATELIMITED

    def test_subscription_messages(self):
        assert (
            classify_forbidden_message(CLOSED, Endpoint.SUBSCRIPTIONS)
            is YouTubeErrorKind.ACCOUNT_CLOSED
        )
        assert (
            classify_forbidden_message(SUSPENDED, Endpoint.SUBSCRIPTIONS)
            is YouTubeErrorKind.ACCOUNT_TERMINATED
        )
        assert (
            classify_forbidden_message(PRIVATE, Endpoint.SUBSCRIPTIONS)
            is YouTubeErrorKind.SUBSCRIPTIONS_PRIVATE
        )

    def test_subscription_messages_outside_subscriptions(self):
        """Subscription wording from another endpoint stays a plain FORBIDDEN."""
        for message in (CLOSED, SUSPENDED, PRIVATE):
            assert (
                classify_forbidden_message(message, Endpoint.CHANNELS)
                is YouTubeErrorKind.FORBIDDEN
            )
            assert (
                classify_forbidden_message(message, Endpoint.PLAYLIST_ITEMS)
                is YouTubeErrorKind.FORBIDDEN
            )

    def test_exact_rules_need_exact_text(self):
        assert (
            classify_forbidden_message(PRIVATE + " ", Endpoint.SUBSCRIPTIONS)
            is YouTubeErrorKind.FORBIDDEN
        )

    def test_missing_or_unknown_message(self):
        assert classify_forbidden_message(None, Endpoint.CHANNELS) is YouTubeErrorKind.FORBIDDEN
        assert (
            classify_forbidden_message("Something else", Endpoint.SUBSCRIPTIONS)
            is YouTubeErrorKind.FORBIDDEN
        )

    def test_every_rule_targets_a_refined_kind(self):
        assert all(rule.kind is not YouTubeErrorKind.FORBIDDEN for rule in FORBIDDEN_MESSAGE_RULES)


@pytest.mark.unit
class TestExtractErrorMessage:
    """Tests for reading error.message from a body."""

    def test_google_error_body(self):
        assert extract_error_message('{"error": {"message": "nope"}}') == "nope"

    @pytest.mark.parametrize(
        "body",
        ["", "not json", "[]", '{"error": "flat"}', '{"error": {"message": 5}}'],
    )
    def test_unusable_bodies(self, body):
        assert extract_error_message(body) is None


@pytest.mark.unit
class TestRaiseForUpstreamStatus:
    """Tests for raising classified errors."""

    def test_ok_does_not_raise(self):
        raise_for_upstream_status(httpx.Response(200, json={}), Endpoint.CHANNELS)

    def test_forbidden_with_subscription_message(self):
        with pytest.raises(YouTubeError) as exc_info:
            raise_for_upstream_status(_error_response(403, PRIVATE), Endpoint.SUBSCRIPTIONS)

        error = exc_info.value
        assert error.kind is YouTubeErrorKind.SUBSCRIPTIONS_PRIVATE
        assert error.status_code == 403
        assert error.context["endpoint"] == "subscriptions"
        assert error.context["detail"] == PRIVATE

    def test_forbidden_without_body(self):
        with pytest.raises(YouTubeError) as exc_info:
            raise_for_upstream_status(_error_response(403), Endpoint.CHANNELS)

        assert exc_info.value.kind is YouTubeErrorKind.FORBIDDEN

    def test_unknown_status_keeps_body(self):
        with pytest.raises(YouTubeError) as exc_info:
            raise_for_upstream_status(httpx.Response(418, text="teapot"), Endpoint.BROWSE)

        error = exc_info.value
        assert error.kind is YouTubeErrorKind.UNKNOWN_STATUS
        assert error.status_code == 418
        assert error.context["response_body"] == "teapot"
