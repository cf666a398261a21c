"""
core/context.py
----------------

In‑memory token store for the authenticated transport. The store
holds the bearer token the caller obtained from ``login`` or
``refresh``; the authenticated client reads it on every request.
Acquiring, refreshing and clearing the token is left to the caller.
Note that this store resides in process memory and is not shared
between processes.
"""

from __future__ import annotations

from typing import Optional

import httpx

from userclient.core.config import get_settings


class TokenStore:
    """Holds the current bearer token, if any."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token or None

    def set(self, token: Optional[str]) -> None:
        """Persist the token used for authenticated calls."""
        self._token = token or None

    def get(self) -> Optional[str]:
        """Return the stored token if it exists."""
        return self._token

    def clear(self) -> None:
        """Forget the stored token."""
        self._token = None

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None


def extract_token(response: httpx.Response, key: Optional[str] = None) -> Optional[str]:
    """Read the bearer token from a login or refresh response.

    :param response: response returned by ``login`` or ``refresh``
    :param key: JSON key holding the token; defaults to
        ``Settings.token_response_key``
    :return: the token, or ``None`` if the body carries no string token
    """
    key = key or get_settings().token_response_key
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    token = body.get(key)
    if not isinstance(token, str) or not token:
        return None
    return token


def redirect_location(response: httpx.Response) -> Optional[str]:
    """Return the redirect target of an OAuth trigger response."""
    if not response.is_redirect:
        return None
    return response.headers.get("location")
