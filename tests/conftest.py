"""
Shared pytest fixtures for the users API client tests.

This module provides:
- settings pinned to a fake base URL (environment-independent)
- a recording ``httpx.MockTransport`` to inspect outgoing requests
- an ``APIService`` wired to that transport
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import httpx
import pytest
import pytest_asyncio

from userclient.clients.http_client import APIService, build_async_client
from userclient.core.config import Settings, get_settings

BASE_URL = "https://api.test/api"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url=BASE_URL, user_agent="userclient-tests")


@dataclass
class RecordingTransport:
    """Collects requests and answers them with a configurable handler."""

    handler: Optional[Callable[[httpx.Request], httpx.Response]] = None
    requests: List[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        return httpx.Response(200, json={"ok": True})

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest_asyncio.fixture
async def api(settings, recorder):
    client = build_async_client(settings, transport=httpx.MockTransport(recorder))
    service = APIService(settings, client=client)
    yield service
    await service.aclose()
