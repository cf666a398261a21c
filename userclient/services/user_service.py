"""
services/user_service.py
------------------------

Façade over the users API. Each method maps one user operation onto
exactly one call of the shared transport, schedules it on the running
event loop and returns the resulting :class:`asyncio.Task` straight
away. The request goes out whether or not the caller awaits the task;
awaiting it yields the ``httpx.Response`` or raises whatever the
transport raised. Payloads and path segments are forwarded untouched.

Methods must be called while an event loop is running.

Operations marked as public (sign‑up, login and the OAuth triggers) go
through ``api.http``; everything else goes through ``api.http_auth``.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable

import httpx

from userclient.clients.http_client import APIService


class UserService:
    def __init__(self, api: APIService) -> None:
        self.api = api

    @staticmethod
    def _send(call: Awaitable[httpx.Response]) -> asyncio.Future[httpx.Response]:
        return asyncio.ensure_future(call)

    # CRUD
    def create(self, data: Any) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http.post("/users", data))

    def get_all(self) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.get("/users"))

    def get(self, user_id: Any) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.get(f"/users/{user_id}"))

    def update(self, user_id: Any, data: Any) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.put(f"/users/{user_id}", data))

    def remove(self, user_id: Any) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.delete(f"/users/{user_id}"))

    # Profile
    def get_me(self) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.get("/users/me"))

    def update_me(self, data: Any) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.put("/users/me", data))

    def delete_me(self) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.delete("/users/me"))

    # Authentication
    def login(self, data: Any) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http.post("/users/login", data))

    def logout(self) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.post("/users/logout"))

    def refresh(self) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.post("/users/refresh"))

    # Social account binding
    def bind_social(self, provider: Any, data: Any) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http_auth.post(f"/users/bind/{provider}", data))

    # OAuth triggers: the awaited response is the provider redirect
    def google_auth(self) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http.get("/users/auth/google"))

    def facebook_auth(self) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http.get("/users/auth/facebook"))

    def discord_auth(self) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http.get("/users/auth/discord"))

    def twitter_auth(self) -> asyncio.Future[httpx.Response]:
        return self._send(self.api.http.get("/users/auth/twitter"))
