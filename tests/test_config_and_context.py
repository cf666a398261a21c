import httpx
import pytest
from pydantic import ValidationError

from userclient.core.auth import build_auth_headers, build_base_headers, get_base_url
from userclient.core.config import Settings, get_settings
from userclient.core.context import TokenStore, extract_token, redirect_location
from userclient.logging_config import _sanitize


def test_settings_defaults(monkeypatch):
    for var in ("USERCLIENT_API_BASE_URL", "USERCLIENT_HTTP_TIMEOUT", "USERCLIENT_TOKEN_RESPONSE_KEY"):
        monkeypatch.delenv(var, raising=False)

    settings = get_settings()

    assert settings.api_base_url == "http://localhost:3000/api"
    assert settings.http_timeout == 10.0
    assert settings.token_response_key == "token"
    assert settings.user_agent.startswith("userclient/")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("USERCLIENT_API_BASE_URL", "https://example.com/v1/")
    monkeypatch.setenv("userclient_http_timeout", "2.5")

    settings = get_settings()

    assert settings.api_base_url == "https://example.com/v1/"
    assert settings.http_timeout == 2.5
    assert get_settings() is settings


def test_settings_reject_non_positive_timeout():
    with pytest.raises(ValidationError):
        Settings(http_timeout=0)


def test_base_url_has_no_trailing_slash():
    assert get_base_url(Settings(api_base_url=" https://example.com/v1/ ")) == "https://example.com/v1"


def test_auth_headers_extend_base_headers(settings):
    base = build_base_headers(settings)
    auth = build_auth_headers("abc", settings)

    assert "Authorization" not in base
    assert auth["Authorization"] == "Bearer abc"
    assert {k: v for k, v in auth.items() if k != "Authorization"} == base


def test_token_store_lifecycle():
    store = TokenStore()
    assert not store.is_authenticated
    assert store.get() is None

    store.set("t1")
    assert store.is_authenticated
    assert store.get() == "t1"

    store.set("")
    assert store.get() is None

    store.set("t2")
    store.clear()
    assert not store.is_authenticated


def test_extract_token_uses_configured_key(monkeypatch):
    resp = httpx.Response(200, json={"token": "abc", "accessToken": "xyz"})
    assert extract_token(resp) == "abc"
    assert extract_token(resp, key="accessToken") == "xyz"

    monkeypatch.setenv("USERCLIENT_TOKEN_RESPONSE_KEY", "accessToken")
    get_settings.cache_clear()
    assert extract_token(resp) == "xyz"


@pytest.mark.parametrize("resp", [
    httpx.Response(200, text="not json"),
    httpx.Response(200, json=["token"]),
    httpx.Response(200, json={"user": {}}),
    httpx.Response(204),
    httpx.Response(200, json={"token": {"value": "abc"}}),
    httpx.Response(200, json={"token": 12345}),
])
def test_extract_token_without_token(resp):
    assert extract_token(resp) is None


def test_redirect_location():
    request = httpx.Request("GET", "https://api.test/api/users/auth/google")
    redirect = httpx.Response(302, headers={"Location": "https://accounts.google.com/"}, request=request)
    ok = httpx.Response(200, request=request)

    assert redirect_location(redirect) == "https://accounts.google.com/"
    assert redirect_location(ok) is None


def test_sanitize_strips_secrets():
    payload = {
        "email": "a@b.com",
        "password": "p",
        "refreshToken": "r",
        "profile": {"client_secret": "s", "name": "Ada"},
        "avatars": [{"accessToken": "x", "url": "u"}],
        "blob": b"\x00\x01",
    }

    assert _sanitize(payload) == {
        "email": "a@b.com",
        "profile": {"name": "Ada"},
        "avatars": [{"url": "u"}],
        "blob": "<binary 2 bytes>",
    }


def test_sanitize_falls_back_to_str():
    class Opaque:
        def __str__(self):
            return "opaque"

    assert _sanitize({"value": Opaque()}) == {"value": "opaque"}
