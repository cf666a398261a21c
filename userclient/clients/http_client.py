"""
clients/http_client.py
----------------------

Async HTTP transport for the users API, with connection pooling,
timeouts, header management and error translation. An
:class:`APIService` should be instantiated once per process (or per
application lifespan) and shared; it owns a single pooled
``httpx.AsyncClient`` and exposes two views over it:

* ``http`` sends requests without credentials;
* ``http_auth`` attaches the bearer token held by the service's
  :class:`~userclient.core.context.TokenStore`.

No retries are attempted: each call sends exactly one request and any
failure is raised to the caller. Redirects are not followed, so the
OAuth trigger endpoints hand their redirect response back unchanged.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

import httpx

from userclient.core.auth import build_auth_headers, build_base_headers, get_base_url
from userclient.core.config import Settings, get_settings
from userclient.core.context import TokenStore
from userclient.core.errors import APIError, NotAuthenticatedError, TransportError
from userclient.logging_config import log_http_request, logger


def build_async_client(settings: Optional[Settings] = None, **kwargs: Any) -> httpx.AsyncClient:
    """Create the pooled ``httpx.AsyncClient`` shared by both transports.

    Extra keyword arguments (e.g. ``transport=httpx.MockTransport(...)``)
    are passed to ``httpx.AsyncClient`` and override the defaults built
    from settings (``base_url``, ``timeout``, ``follow_redirects``).
    """
    settings = settings or get_settings()
    options: Dict[str, Any] = {
        "base_url": get_base_url(settings),
        "timeout": httpx.Timeout(settings.http_timeout, connect=settings.http_connect_timeout),
        "follow_redirects": False,
    }
    options.update(kwargs)
    return httpx.AsyncClient(**options)


class HTTPClient:
    """Async HTTP client bound to the API base URL.

    Paths passed to :meth:`request` are relative to the base URL
    (``"/users/me"``). Responses with a 2xx or 3xx status are returned
    as ``httpx.Response``; 4xx/5xx responses raise :class:`APIError`
    and network failures raise :class:`TransportError`.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        settings: Optional[Settings] = None,
        tokens: Optional[TokenStore] = None,
    ) -> None:
        self._client = client
        self._settings = settings or get_settings()
        # only the authenticated variant carries a token store
        self.tokens = tokens

    @property
    def authenticated(self) -> bool:
        return self.tokens is not None

    def _headers(self) -> Dict[str, str]:
        if self.tokens is None:
            return build_base_headers(self._settings)
        token = self.tokens.get()
        if not token:
            raise NotAuthenticatedError()
        return build_auth_headers(token, self._settings)

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a single request and translate failures.

        :param method: HTTP method
        :param path: path relative to the API base URL
        :param kwargs: forwarded to ``httpx.AsyncClient.request``
            (``json``, ``params``, ``headers``...)
        :raises NotAuthenticatedError: authenticated call with no token
        :raises TransportError: the request did not complete
        :raises APIError: the server answered 4xx or 5xx
        """
        method = method.upper()
        headers = self._headers()
        headers.update(kwargs.pop("headers", None) or {})
        url = str(self._client.base_url).rstrip("/") + "/" + path.lstrip("/")
        start_time = time.time()
        log_http_request(method, url, headers=headers, json_body=kwargs.get("json"))
        try:
            response = await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.RequestError as exc:
            logger.error(json.dumps({
                "event": "http_error",
                "method": method,
                "url": url,
                "detail": str(exc),
            }))
            raise TransportError(method, url, str(exc)) from exc
        duration_ms = (time.time() - start_time) * 1000
        log_http_request(method, url, status=response.status_code, duration_ms=duration_ms)
        if response.is_error:
            logger.warning(json.dumps({
                "event": "http_error_status",
                "method": method,
                "url": url,
                "status": response.status_code,
            }))
            raise APIError.from_response(response)
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, json: Any = None, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, json=json, **kwargs)

    async def put(self, path: str, json: Any = None, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", path, json=json, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", path, **kwargs)


class APIService:
    """Owner of the pooled client and of both transport variants.

    Use as an async context manager, or call :meth:`aclose` when done::

        async with APIService() as api:
            await api.http_auth.get("/users/me")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
        tokens: Optional[TokenStore] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = client or build_async_client(self.settings)
        self.tokens = tokens or TokenStore()
        self.http = HTTPClient(self._client, settings=self.settings)
        self.http_auth = HTTPClient(self._client, settings=self.settings, tokens=self.tokens)

    async def aclose(self) -> None:
        """Close the underlying HTTPX client and release pooled connections."""
        await self._client.aclose()

    async def __aenter__(self) -> "APIService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
