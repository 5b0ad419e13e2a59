"""Errors raised by the Furtrack client."""

from __future__ import annotations


class FurtrackError(Exception):
    """Base class for every error raised by the client."""


class FurtrackHTTPError(FurtrackError):
    """The service answered with a non-success status code."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP error {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class FurtrackTransportError(FurtrackError):
    """The request never produced a response (DNS, TLS, connection, timeout)."""


class FurtrackDecodeError(FurtrackError, ValueError):
    """The response body could not be decoded as JSON."""


__all__ = [
    "FurtrackDecodeError",
    "FurtrackError",
    "FurtrackHTTPError",
    "FurtrackTransportError",
]
