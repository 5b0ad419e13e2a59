"""Shared types for resources.

This module contains:
- Validation mode type (shared across all resources)
- Loose response shapes shared by several endpoints
"""

from __future__ import annotations

from typing import Any, Literal, TypedDict

from typing_extensions import ReadOnly

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]


class TagRecord(TypedDict, total=False):
    """Readonly tag entry as embedded in post and tag payloads."""
    tagName: ReadOnly[str]


class PostListResponse(TypedDict, total=False):
    """Envelope returned by the paginated post listing endpoints."""
    success: ReadOnly[bool]
    posts: ReadOnly[list[dict[str, Any]]]


def _extract_posts(response: object) -> list[dict[str, Any]]:
    """Unwrap the ``posts`` list from a listing response, defaulting to ``[]``."""
    if not isinstance(response, dict):
        return []
    posts = response.get("posts")
    if isinstance(posts, list):
        return posts
    return []
