"""
integrations/fastapi.py
-----------------------

FastAPI wiring for applications that call the users API. The
:class:`~userclient.clients.http_client.APIService` is created in the
lifespan event, stored on ``app.state`` and handed to endpoints via
dependency injection, so every request shares one connection pool.

Example::

    app = FastAPI(lifespan=lifespan)

    @app.get("/profile")
    async def profile(users: UserService = Depends(get_user_service)):
        resp = await users.get_me()
        return resp.json()
"""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request

from userclient.clients.http_client import APIService
from userclient.logging_config import logger
from userclient.services.user_service import UserService


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # one pooled client for the whole app
    app.state.api_service = APIService()
    logger.info(json.dumps({
        "event": "api_service_started",
        "base_url": app.state.api_service.settings.api_base_url,
    }))
    try:
        yield
    finally:
        await app.state.api_service.aclose()


def get_api_service(request: Request) -> APIService:
    """Dependency to retrieve the shared API service from the application state."""
    return request.app.state.api_service


def get_user_service(request: Request) -> UserService:
    """Dependency returning a :class:`UserService` over the shared API service."""
    return UserService(get_api_service(request))
