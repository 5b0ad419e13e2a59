"""User resource wrapper."""

from __future__ import annotations

from typing import Any, Optional, TypedDict

from typing_extensions import ReadOnly

from .base import Resource


class UserResponse(TypedDict, total=False):
    """Readonly user dict returned by ``/get/u/{username}``."""
    success: ReadOnly[bool]
    user: ReadOnly[dict[str, Any]]


class Users(Resource):
    """User profile lookups."""

    def get(self, username: str, *, timeout: Optional[float] = None) -> UserResponse:
        """Fetch a user profile by username. The payload is returned verbatim."""
        return self._get("get", "u", username, timeout=timeout)
