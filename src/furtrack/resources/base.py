"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

from ..utils import build_path

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Furtrack


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "Furtrack") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    def _get(
        self,
        *segments: object,
        page: int = 0,
        timeout: Optional[float] = None,
    ) -> Any:
        path = build_path(*segments, page=page)
        return self._client.request(path, timeout=timeout)
