"""Unit tests for YouTube payload field parsers."""

import pytest

from ytlookup.infrastructure.youtube_parsing import (
    AVATAR_PREFIXES,
    BANNER_PREFIXES,
    as_dict,
    as_list,
    as_str,
    dig,
    parse_count,
    parse_keywords,
    parse_timestamp,
    strip_asset_url,
)


@pytest.mark.unit
class TestParseKeywords:
    """Tests for the keyword tokenizer."""

    def test_quoted_and_bare_tags(self):
        assert parse_keywords('"tag one" two "tag three"') == ["tag one", "two", "tag three"]

    def test_unterminated_quote_keeps_rest(self):
        assert parse_keywords('a "b c') == ["a", "b c"]

    def test_lone_backslash(self):
        assert parse_keywords("\\") == []

    def test_backslashes_are_dropped(self):
        assert parse_keywords('music\\ "lo\\fi"') == ["music", "lofi"]

    def test_empty_and_whitespace(self):
        assert parse_keywords("") == []
        assert parse_keywords("   ") == []
        assert parse_keywords('"" a  b') == ["a", "b"]

    def test_quoted_token_is_trimmed(self):
        assert parse_keywords('" padded "') == ["padded"]


@pytest.mark.unit
class TestStripAssetUrl:
    """Tests for image URL reduction."""

    def test_avatar(self):
        url = "https://yt3.ggpht.com/abc123=s88-c-k-c0x00ffffff-no-rj"
        assert strip_asset_url(url, AVATAR_PREFIXES) == "abc123"

    def test_banner_hosts(self):
        assert strip_asset_url("https://yt3.googleusercontent.com/xyz=w1060", BANNER_PREFIXES) == "xyz"
        assert strip_asset_url("https://lh3.googleusercontent.com/xyz", BANNER_PREFIXES) == "xyz"

    def test_unknown_host_only_cuts_parameters(self):
        assert (
            strip_asset_url("https://example.com/img=s88", AVATAR_PREFIXES)
            == "https://example.com/img"
        )


@pytest.mark.unit
class TestParseTimestamp:
    """Tests for ISO-8601 parsing."""

    def test_utc_suffix(self):
        assert parse_timestamp("2005-04-24T03:31:52Z") == 1114313512

    def test_fractional_seconds(self):
        assert parse_timestamp("2005-04-24T03:31:52.123Z") == 1114313512

    @pytest.mark.parametrize("value", [None, "", "yesterday", "2005-04-24T03:31:52", 1114313512])
    def test_invalid(self, value):
        assert parse_timestamp(value) is None


@pytest.mark.unit
def test_parse_count():
    assert parse_count("1234") == 1234
    assert parse_count(None) is None
    assert parse_count("many") is None


@pytest.mark.unit
def test_dig():
    data = {"a": [{"b": {"c": 1}}], "d": None}

    assert dig(data, "a", 0, "b", "c") == 1
    assert dig(data, "a", 1, "b") is None
    assert dig(data, "a", "b") is None
    assert dig(data, "d", "e") is None
    assert dig(data, "missing") is None


@pytest.mark.unit
def test_type_guards():
    assert as_dict({"a": 1}) == {"a": 1}
    assert as_dict("oops") == {}
    assert as_list([1]) == [1]
    assert as_list({"a": 1}) == []
    assert as_str("x") == "x"
    assert as_str(5) is None
    assert parse_count(True) is None
