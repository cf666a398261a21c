"""
core/auth.py
-------------

Utility functions for building requests to the users API.

These helpers centralise construction of the base URL and HTTP
headers required to call the API. They ensure that the bearer token
is only added where needed and is not inadvertently logged elsewhere
in the package. The transport uses them when it builds its clients.
"""

from __future__ import annotations

from typing import Dict, Optional

from userclient.core.config import Settings, get_settings


def get_base_url(settings: Optional[Settings] = None) -> str:
    """Return the API base URL without a trailing slash.

    :param settings: settings to read from; defaults to the cached ones
    :return: the base API URL
    """
    settings = settings or get_settings()
    return settings.api_base_url.strip().rstrip("/")


def build_base_headers(settings: Optional[Settings] = None) -> Dict[str, str]:
    """Create the headers sent with every request, authenticated or not."""
    settings = settings or get_settings()
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": settings.user_agent,
    }


def build_auth_headers(token: str, settings: Optional[Settings] = None) -> Dict[str, str]:
    """Create a dictionary of HTTP headers required for an authenticated call.

    The token is included as a Bearer token on top of the base headers.

    :param token: the JWT or session token for the authenticated user
    :param settings: settings to read from; defaults to the cached ones
    :return: a dictionary of headers suitable for use with httpx
    """
    headers = build_base_headers(settings)
    headers["Authorization"] = f"Bearer {token}"
    return headers
