"""
logging_config.py
------------------

This module defines a shared logging configuration and utilities for
structured logging throughout the users API client.  It uses Python's
built‑in ``logging`` module so that log output can be captured by the
host application's handlers.  Messages are serialised as JSON to make
them easier to parse downstream.

To use this module, import ``logger`` and call its methods.  Being a
library, the package does not configure the root logger on import;
applications that want the default JSON‑to‑stdout setup call
:func:`configure_logging` once at start‑up.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

# Package logger; the host application decides where it goes.
logger = logging.getLogger("userclient")

SENSITIVE_KEYS = ("token", "password", "secret")
SENSITIVE_HEADERS = {"authorization", "cookie", "set-cookie"}


def configure_logging(level: int | str = logging.INFO) -> None:
    """Direct log output to stdout with a timestamp and level prefix.

    The message itself is a JSON string so downstream consumers can
    parse it easily.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logger.setLevel(level)


def _sanitize(obj: Any) -> Any:
    """Return a JSON-safe copy of a request body with credentials dropped.

    Any mapping key mentioning a token, password or secret is left out,
    at any depth, so login and refresh payloads never reach the logs.
    Raw bytes collapse to a size marker; values ``json`` cannot encode
    are logged through ``str``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        return {
            k: _sanitize(v) for k, v in obj.items()
            if not any(word in str(k).lower() for word in SENSITIVE_KEYS)
        }
    if isinstance(obj, (list, tuple)):
        return [_sanitize(item) for item in obj]
    if hasattr(obj, "model_dump"):
        return _sanitize(obj.model_dump())
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     json_body: Any = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Emit one DEBUG ``http_request`` event for the transport.

    Called with the outgoing headers and body just before a request is
    sent, then again with ``status`` and ``duration_ms`` once the
    response is back. Credential headers (``Authorization``, cookies)
    and secret body keys are stripped before serialising. Nothing is
    built when DEBUG is disabled for the ``userclient`` logger.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in SENSITIVE_HEADERS}
    if json_body is not None:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
