"""
core/errors.py
--------------

Exception types raised by the HTTP transport. The user façade never
raises or catches these itself; they reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx


class UserClientError(Exception):
    """Base class for every error raised by this package."""


class TransportError(UserClientError):
    """The request never produced a response (connection, timeout, ...).

    The originating :class:`httpx.HTTPError` is available as
    ``__cause__``.
    """

    def __init__(self, method: str, url: str, detail: str) -> None:
        super().__init__(f"{method} {url} failed: {detail}")
        self.method = method
        self.url = url
        self.detail = detail


class APIError(UserClientError):
    """The remote API answered with a 4xx or 5xx status code."""

    def __init__(self, status_code: int, detail: Any = None, response: Optional[httpx.Response] = None) -> None:
        super().__init__(f"HTTP {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail
        self.response = response

    @classmethod
    def from_response(cls, response: httpx.Response) -> "APIError":
        """Build an error from a failed response, preferring its JSON body."""
        try:
            detail: Any = response.json()
        except ValueError:
            detail = response.text
        return cls(response.status_code, detail, response)


class NotAuthenticatedError(APIError):
    """An authenticated call was attempted with no token stored.

    Raised before any request is sent.
    """

    def __init__(self, detail: str = "Not authenticated: no token stored") -> None:
        super().__init__(401, detail)
