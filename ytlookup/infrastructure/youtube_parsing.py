"""Field parsers for YouTube Data API payloads."""

from datetime import datetime
from typing import Any

AVATAR_PREFIXES = ("https://yt3.ggpht.com/",)
BANNER_PREFIXES = (
    "https://yt3.googleusercontent.com/",
    "https://lh3.googleusercontent.com/",
)


def parse_keywords(raw: str) -> list[str]:
    """Split the channel keyword string into tags.

    Double quotes toggle a quoted section in which spaces do not split.
    Backslashes are dropped. Tokens are trimmed and empty ones discarded.

    Example:
        >>> parse_keywords('"tag one" two "tag three"')
        ['tag one', 'two', 'tag three']
    """
    tags: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in raw:
        if char == '"':
            in_quotes = not in_quotes
        elif char == " " and not in_quotes:
            if current:
                tags.append("".join(current).strip())
                current = []
        elif char == "\\":
            continue
        else:
            current.append(char)

    if current:
        tags.append("".join(current).strip())

    return [tag for tag in tags if tag]


def strip_asset_url(url: str, prefixes: tuple[str, ...]) -> str:
    """Reduce an image URL to its opaque base path.

    Removes the first matching host prefix and everything from the first
    ``=`` (sizing and format parameters).
    """
    for prefix in prefixes:
        if url.startswith(prefix):
            url = url[len(prefix) :]
            break
    return url.split("=", 1)[0]


def parse_timestamp(value: Any) -> int | None:
    """Parse an ISO-8601 timestamp into seconds since epoch.

    Returns None for missing or malformed values.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return int(parsed.timestamp())


def parse_count(value: Any) -> int | None:
    """Parse a count the Data API sends as a decimal string."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def as_dict(value: Any) -> dict[str, Any]:
    """Return the value if it is a JSON object, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def as_str(value: Any) -> str | None:
    """Return the value if it is a string, otherwise None."""
    return value if isinstance(value, str) else None


def as_list(value: Any) -> list[Any]:
    """Return the value if it is a JSON array, otherwise an empty list."""
    return value if isinstance(value, list) else []


def dig(data: Any, *path: str | int) -> Any:
    """Walk nested dicts/lists, returning None at the first missing step.

    Example:
        >>> dig({"a": [{"b": 1}]}, "a", 0, "b")
        1
    """
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
        elif not isinstance(current, dict):
            return None
        current = current[key] if isinstance(key, int) else current.get(key)
        if current is None:
            return None
    return current


__all__ = [
    "AVATAR_PREFIXES",
    "BANNER_PREFIXES",
    "as_dict",
    "as_list",
    "as_str",
    "dig",
    "parse_count",
    "parse_keywords",
    "parse_timestamp",
    "strip_asset_url",
]
