"""
core/config.py
----------------

Client configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``. These settings control the API base URL,
timeouts and default headers used by the HTTP transport. The values
provided here are sensible defaults for local development but can be
overridden via environment variables at deployment time.
"""

from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from userclient import __version__


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``USERCLIENT_``.  For example, to point the client at
    another server you can set
    ``USERCLIENT_API_BASE_URL=https://api.example.com``.

    See :class:`pydantic_settings.BaseSettings` for details on how
    environment variables are mapped onto fields.
    """

    # Remote API
    api_base_url: str = Field("http://localhost:3000/api", description="Base URL every request path is joined to.")

    # HTTP client settings
    http_timeout: float = Field(10.0, gt=0, description="Hard timeout for HTTP requests in seconds.")
    http_connect_timeout: float = Field(5.0, gt=0, description="Timeout for establishing a connection in seconds.")
    user_agent: str = Field(f"userclient/{__version__}", description="User-Agent header sent with every request.")

    # Token handling
    token_response_key: str = Field("token", description="JSON key holding the bearer token in login/refresh responses.")

    model_config = SettingsConfigDict(env_prefix="USERCLIENT_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the client settings.

    Using a cache prevents expensive environment parsing on every call.
    Call ``get_settings.cache_clear()`` after changing the environment
    in tests.
    """
    return Settings()
