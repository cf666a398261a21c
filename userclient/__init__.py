"""
userclient package
------------------

Async client for the remote users API. The public entry points are
:class:`~userclient.clients.http_client.APIService`, which owns the
HTTP transport, and :class:`~userclient.services.user_service.UserService`,
the façade exposing one method per user operation.

Typical usage::

    async with APIService() as api:
        users = UserService(api)
        resp = await users.login({"email": "a@b.com", "password": "p"})
        api.tokens.set(extract_token(resp))
        me = await users.get_me()
"""

__version__ = "0.1.0"

from .clients.http_client import APIService, HTTPClient  # noqa: E402
from .core.context import TokenStore, extract_token, redirect_location  # noqa: E402
from .core.errors import APIError, NotAuthenticatedError, TransportError, UserClientError  # noqa: E402
from .services.user_service import UserService  # noqa: E402

__all__ = [
    "APIError",
    "APIService",
    "HTTPClient",
    "NotAuthenticatedError",
    "TokenStore",
    "TransportError",
    "UserClientError",
    "UserService",
    "extract_token",
    "redirect_location",
]
