"""Exceptions raised by the labbook client."""

from __future__ import annotations

from typing import Any


class LabbookError(Exception):
    """Base class for exceptions raised by this package."""

    pass


class StorageError(LabbookError):
    """Raised when the secure store cannot be written."""

    pass


class InvalidTokenError(LabbookError, ValueError):
    """Raised when a bearer token is not a non-empty string."""

    pass


class ConnectionFailedError(LabbookError):
    """Raised when a request never reached the backend."""

    def __init__(self, url: str, message: str = ""):
        self.url = url
        super().__init__(f"Could not reach {url}" + (f": {message}" if message else ""))


class ApiError(LabbookError):
    """Raised when the backend answers with an HTTP error status."""

    def __init__(self, status_code: int, payload: Any = None, reason: str = ""):
        self.status_code = status_code
        self.payload = payload
        self.message = _message_from(payload) or reason or f"HTTP {status_code}"
        super().__init__(f"{status_code}: {self.message}")


class AuthenticationError(ApiError):
    """Raised on 401; the stored token has already been cleared."""

    pass


def _message_from(payload: Any) -> str:
    if isinstance(payload, dict):
        msg = payload.get("message") or payload.get("error")
        if isinstance(msg, str):
            return msg
    return ""
