"""Post resource wrapper."""

from __future__ import annotations

from typing import Any, Optional

from .albums import ALBUM_LIKES, ALBUM_UPLOADS
from .base import Resource
from .posts_types import PostResponse, build_thumbnail_url
from ._common_types import ValidationMode, _extract_posts


class Posts(Resource):
    """Post lookups, listings and thumbnail URLs."""

    def get(self, post_id: int | str, *, timeout: Optional[float] = None) -> PostResponse:
        """Fetch a single post by ID.

        Parameters
        ----------
        post_id
            Post ID to fetch.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        PostResponse
            Post payload, returned verbatim.
        """
        return self._get("view", "post", post_id, timeout=timeout)

    def by_tag(self, tag: str, page: int = 0, *, timeout: Optional[float] = None) -> list[dict[str, Any]]:
        """Fetch one page of posts carrying ``tag``.

        Returns
        -------
        list[dict]
            The ``posts`` list of the response, or ``[]`` when absent.
        """
        response = self._get("get", "tag", tag, page=page, timeout=timeout)
        return _extract_posts(response)

    def by_user(self, username: str, page: int = 0, *, timeout: Optional[float] = None) -> list[dict[str, Any]]:
        """Fetch one page of posts uploaded by ``username``."""
        response = self._get("view", "album", username, ALBUM_UPLOADS, page=page, timeout=timeout)
        return _extract_posts(response)

    def likes(self, username: str, page: int = 0, *, timeout: Optional[float] = None) -> list[dict[str, Any]]:
        """Fetch one page of posts liked by ``username``."""
        response = self._get("view", "album", username, ALBUM_LIKES, page=page, timeout=timeout)
        return _extract_posts(response)

    def thumbnail(
        self,
        post_id: int | str,
        *,
        validation: ValidationMode = "off",
        timeout: Optional[float] = None,
    ) -> str | None:
        """Fetch a post and build its gallery thumbnail URL.

        Parameters
        ----------
        post_id
            Post ID to resolve.
        validation
            Handling of a payload missing thumbnail fields: ``"off"`` (the
            default) keeps ``undefined`` placeholders in the URL, ``"strict"``
            raises ``ValueError``, and the opt-in ``"warn"`` logs and returns
            ``None``.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        str or None
            Thumbnail URL, or ``None`` in ``"warn"`` mode when fields are missing.
        """
        post = self.get(post_id, timeout=timeout)
        if not isinstance(post, dict):
            post = {}
        return build_thumbnail_url(post, validation=validation)
