"""Shared helpers for the Furtrack client."""

from __future__ import annotations

from urllib.parse import quote

# Characters encodeURIComponent leaves alone on top of quote()'s own set.
_SEGMENT_SAFE = "!~*'()"


def encode_segment(value: object) -> str:
    """Percent-encode a single path segment, slashes included."""
    return quote(str(value), safe=_SEGMENT_SAFE)


def page_suffix(page: int) -> str:
    """Return the ``/<page>`` suffix, or an empty string for the first page."""
    return f"/{page}" if page > 0 else ""


def build_path(*segments: object, page: int = 0) -> str:
    """Join already-literal and user-supplied segments into an API path.

    Every segment is encoded, so callers pass raw tag names, usernames and
    IDs straight through.
    """
    return "/" + "/".join(encode_segment(segment) for segment in segments) + page_suffix(page)
