"""Album resource wrapper."""

from __future__ import annotations

from typing import Any, Optional, TypedDict

from typing_extensions import ReadOnly

from .base import Resource

# Reserved album IDs addressing a user's pseudo-albums.
ALBUM_UPLOADS = "3"
ALBUM_LIKES = "o"


class AlbumResponse(TypedDict, total=False):
    """Readonly album dict returned by ``/view/album/{username}/{albumId}``."""
    success: ReadOnly[bool]
    album: ReadOnly[dict[str, Any]]
    posts: ReadOnly[list[dict[str, Any]]]


class Albums(Resource):
    """User album lookups."""

    def get(
        self,
        username: str,
        album_id: str | int,
        page: int = 0,
        *,
        timeout: Optional[float] = None,
    ) -> AlbumResponse:
        """Fetch one page of a user's album.

        Parameters
        ----------
        username
            Album owner.
        album_id
            Album identifier. ``"3"`` and ``"o"`` address the uploads and
            likes pseudo-albums.
        page
            Page number; ``0`` requests the first page.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        AlbumResponse
            Album payload, returned verbatim.
        """
        return self._get("view", "album", username, album_id, page=page, timeout=timeout)
