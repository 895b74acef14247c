"""
session.py — Signed-in user state on top of AuthAPI and the token store.

The backend answers login and register with ``{"success": true, "token": ..., "user": {...}}``
and verify with ``{"user": {...}}``.
"""

from __future__ import annotations

from typing import Any

from labbook.api.auth import AuthAPI
from labbook.exceptions import ApiError, InvalidTokenError, LabbookError
from labbook.logger import LOGGER
from labbook.tokens import TokenStore


class AuthSession:
    def __init__(self, auth: AuthAPI, tokens: TokenStore) -> None:
        self._auth = auth
        self._tokens = tokens
        self.user: dict | None = None
        self.token: str | None = None
        self.error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and self.token is not None

    @property
    def is_admin(self) -> bool:
        return bool(self.user) and self.user.get("role") == "admin"

    async def login(self, email: str, password: str) -> dict:
        LOGGER.info("Attempting login for %s", email)
        return await self._sign_in(self._auth.login(email, password), "Login failed")

    async def register(self, name: str, email: str, password: str, **extra: Any) -> dict:
        LOGGER.info("Attempting registration for %s", email)
        return await self._sign_in(self._auth.register(name, email, password, **extra), "Registration failed")

    async def _sign_in(self, call, default_error: str) -> dict:
        self.error = None
        try:
            data = await call
            token = data.get("token") if isinstance(data, dict) else None
            if not isinstance(token, str) or not token:
                raise InvalidTokenError("Invalid token received from server")
            self._tokens.set(token)
        except LabbookError as e:
            self.error = (e.message if isinstance(e, ApiError) else str(e)) or default_error
            LOGGER.error("%s: %s", default_error, self.error)
            raise
        self.token = token
        self.user = data.get("user") or {}
        return self.user

    async def logout(self) -> None:
        """Sign out server-side if possible; local state is always cleared."""
        try:
            await self._auth.logout()
        except LabbookError as e:
            LOGGER.warning("Logout API call failed: %s", e)
        finally:
            self._reset()
        LOGGER.info("Logged out")

    async def check_auth(self) -> bool:
        """Restore the session from a stored token; any failure signs out locally."""
        token = self._tokens.get()
        if not token:
            LOGGER.debug("No token found")
            self._reset()
            return False
        try:
            data = await self._auth.verify_token()
        except LabbookError as e:
            LOGGER.info("Authentication check failed: %s", e)
            self._reset()
            return False
        user = data.get("user") if isinstance(data, dict) else None
        if not user:
            self._reset()
            return False
        self.token = token
        self.user = user
        return True

    def clear_error(self) -> None:
        self.error = None

    def _reset(self) -> None:
        self._tokens.clear()
        self.user = None
        self.token = None
