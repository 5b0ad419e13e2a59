"""Types and the thumbnail URL builder for the posts resource."""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypedDict

from typing_extensions import ReadOnly

from ._common_types import TagRecord, ValidationMode

_logger = logging.getLogger(__name__)

THUMBNAIL_BASE_URL = "https://orca2.furtrack.com/gallery"
THUMBNAIL_FIELDS: tuple[str, ...] = ("submitUserId", "id", "metaFingerprint", "metaFiletype")


class PostData(TypedDict, total=False):
    """Readonly post dict as found in post payloads and listings."""
    id: ReadOnly[int | str]
    submitUserId: ReadOnly[int | str]
    metaFingerprint: ReadOnly[str]
    metaFiletype: ReadOnly[str]
    metaWidth: ReadOnly[int]
    metaHeight: ReadOnly[int]


class PostResponse(TypedDict, total=False):
    """Readonly dict returned by ``/view/post/{postId}``."""
    success: ReadOnly[bool]
    post: ReadOnly[PostData]
    tags: ReadOnly[list[TagRecord]]


def _thumbnail_source(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the mapping that carries the thumbnail fields.

    ``/view/post`` nests the post under ``post``; listing entries are flat.
    """
    post = payload.get("post")
    if isinstance(post, Mapping) and not any(field in payload for field in THUMBNAIL_FIELDS):
        return post
    return payload


def _render_field(source: Mapping[str, Any], field: str) -> object:
    if field not in source:
        return "undefined"
    value = source[field]
    return "null" if value is None else value


def build_thumbnail_url(post: Mapping[str, Any], *, validation: ValidationMode = "off") -> str | None:
    """Format the gallery thumbnail URL for a post.

    Parameters
    ----------
    post
        Post payload. Either a flat post dict or a ``/view/post`` response
        with the post nested under ``post``.
    validation
        Handling of missing fields. ``"off"`` (the default) keeps the
        historical URL: an absent field renders as ``undefined`` and a
        ``null`` one as ``null``. ``"strict"`` raises. ``"warn"`` is opt-in;
        it logs and returns ``None``.

    Returns
    -------
    str or None
        Thumbnail URL, or ``None`` when fields are missing in ``"warn"`` mode.

    Raises
    ------
    ValueError
        If fields are missing and ``validation`` is ``"strict"``.
    """
    source = _thumbnail_source(post)
    missing = [field for field in THUMBNAIL_FIELDS if source.get(field) is None]
    if missing:
        if validation == "strict":
            raise ValueError(f"Post is missing thumbnail fields: {', '.join(missing)}")
        if validation == "warn":
            _logger.warning("Post is missing thumbnail fields: %s", ", ".join(missing))
            return None

    user_id, post_id, fingerprint, filetype = (_render_field(source, field) for field in THUMBNAIL_FIELDS)
    return f"{THUMBNAIL_BASE_URL}/{user_id}/{post_id}-{fingerprint}.{filetype}"


__all__ = [
    "THUMBNAIL_BASE_URL",
    "THUMBNAIL_FIELDS",
    "PostData",
    "PostResponse",
    "build_thumbnail_url",
]
