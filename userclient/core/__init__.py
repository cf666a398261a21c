"""
Core helpers package for the users API client.

This package contains low-level infrastructure helpers: settings,
header construction, the token store and the error types raised by
the transport.  Keeping these helpers in a dedicated package makes it
easy to customise behaviour for testing.
"""

__all__ = ["auth", "config", "context", "errors"]
