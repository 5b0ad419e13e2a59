"""Core Furtrack client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
import threading
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from .exceptions import FurtrackDecodeError, FurtrackHTTPError, FurtrackTransportError
from .resources.albums import AlbumResponse, Albums
from .resources.posts import Posts
from .resources.posts_types import PostResponse
from .resources.tags import Tags
from .resources.tags_types import ParsedTag, TagResponse, TagType, get_tags_by_type, parse_tag
from .resources.users import UserResponse, Users
from .resources._common_types import ValidationMode

DEFAULT_BASE_URL = os.environ.get("FURTRACK_BASE_URL", "https://solar.furtrack.com")
DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType({
    "User-Agent": "furtrack-api/1.0 (https://github.com/blumlaut/furtrack-api)",
    "Accept": "application/json, text/plain, */*",
    "Referer": "https://www.furtrack.com/",
    "Origin": "https://www.furtrack.com",
    "Accept-Language": "en-US,en;q=0.5",
})


class Furtrack:
    """Resource-grouped client for the Furtrack API."""

    tags: Tags
    users: Users
    posts: Posts
    albums: Albums

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        base_url: Optional[str] = None,
        default_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Create a Furtrack client.

        Parameters
        ----------
        api_key
            Optional API key; when set every request carries a bearer token.
        headers
            Headers merged over the built-in defaults.
        base_url
            API root, without a trailing slash.
        default_timeout
            Default request timeout in seconds. ``None`` leaves requests
            without a timeout.
        session
            Optional requests session to reuse connections. A new session
            is created when omitted.
        """
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.default_timeout = default_timeout
        self._logger = logging.getLogger(__name__)
        self._session = session if session is not None else requests.Session()
        self._lock = threading.Lock()

        merged: CaseInsensitiveDict[str] = CaseInsensitiveDict(DEFAULT_HEADERS)
        merged.update(headers or {})
        self._api_key = api_key
        if api_key:
            merged["Authorization"] = f"Bearer {api_key}"
        self._headers = merged

        self.tags: Tags = Tags(self)
        self.users: Users = Users(self)
        self.posts: Posts = Posts(self)
        self.albums: Albums = Albums(self)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def headers(self) -> CaseInsensitiveDict[str]:
        """A copy of the headers sent with every request."""
        with self._lock:
            return self._headers.copy()

    def set_api_key(self, api_key: str) -> None:
        """Replace the API key and its ``Authorization`` header."""
        with self._lock:
            headers = self._headers.copy()
            headers["Authorization"] = f"Bearer {api_key}"
            self._api_key = api_key
            self._headers = headers

    def set_headers(self, headers: Mapping[str, str]) -> None:
        """Shallow-merge ``headers`` into the current headers.

        New keys are added, existing keys (matched case-insensitively) are
        overwritten and everything else is kept.
        """
        with self._lock:
            merged = self._headers.copy()
            merged.update(headers)
            self._headers = merged

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    def request(self, path: str, *, timeout: Optional[float] = None) -> Any:
        """Send a raw GET request to the Furtrack API.

        Parameters
        ----------
        path
            Endpoint path, already encoded, with or without a leading ``/``.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        Any
            Parsed JSON payload.

        Raises
        ------
        FurtrackHTTPError
            If the service answers with a non-success status.
        FurtrackTransportError
            If no response was received.
        FurtrackDecodeError
            If the body is not JSON.
        """
        if not path.startswith("/"):
            path = "/" + path
        url = f"{self.base_url}{path}"

        with self._lock:
            headers = dict(self._headers)

        try:
            response = self._session.request(
                "GET",
                url,
                headers=headers,
                timeout=timeout if timeout is not None else self.default_timeout,
            )
        except requests.RequestException as exc:
            self._logger.warning("Request failed for GET %s: %s", url, exc)
            raise FurtrackTransportError(f"Request failed for GET {url}: {exc}") from exc

        if not 200 <= response.status_code < 300:
            self._logger.warning("Request failed for GET %s: HTTP %s", url, response.status_code)
            raise FurtrackHTTPError(response.status_code, url)

        try:
            payload = response.json()
        except ValueError as exc:
            self._logger.warning("Response from GET %s was not JSON", url)
            raise FurtrackDecodeError(f"Response from GET {url} was not JSON") from exc

        self._logger.debug("GET %s -> %s", url, response.status_code)
        return payload

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> Furtrack:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Flat aliases for the resource operations
    # ------------------------------------------------------------------
    def get_tag(self, tag: str, *, timeout: Optional[float] = None) -> TagResponse:
        return self.tags.get(tag, timeout=timeout)

    def get_user(self, username: str, *, timeout: Optional[float] = None) -> UserResponse:
        return self.users.get(username, timeout=timeout)

    def get_post(self, post_id: int | str, *, timeout: Optional[float] = None) -> PostResponse:
        return self.posts.get(post_id, timeout=timeout)

    def get_posts_by_tag(self, tag: str, page: int = 0, *, timeout: Optional[float] = None) -> list[dict[str, Any]]:
        return self.posts.by_tag(tag, page, timeout=timeout)

    def get_posts_by_user(self, username: str, page: int = 0, *, timeout: Optional[float] = None) -> list[dict[str, Any]]:
        return self.posts.by_user(username, page, timeout=timeout)

    def get_likes(self, username: str, page: int = 0, *, timeout: Optional[float] = None) -> list[dict[str, Any]]:
        return self.posts.likes(username, page, timeout=timeout)

    def get_album(
        self,
        username: str,
        album_id: str | int,
        page: int = 0,
        *,
        timeout: Optional[float] = None,
    ) -> AlbumResponse:
        return self.albums.get(username, album_id, page, timeout=timeout)

    def get_thumbnail(
        self,
        post_id: int | str,
        *,
        validation: ValidationMode = "off",
        timeout: Optional[float] = None,
    ) -> str | None:
        return self.posts.thumbnail(post_id, validation=validation, timeout=timeout)

    # Tag classification needs no instance; both helpers work on the class too.
    @staticmethod
    def parse_tag(tag_string: str) -> ParsedTag:
        return parse_tag(tag_string)

    @staticmethod
    def get_tags_by_type(tags: Iterable[Mapping[str, object]], tag_type: TagType) -> list[str]:
        return get_tags_by_type(tags, tag_type)


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_HEADERS", "Furtrack"]
