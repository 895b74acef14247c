"""
client.py — The single HTTP entry point used by every API wrapper.

Per request:
  - the target is built from the resolver's current base URL, so a refreshed
    endpoint is picked up without rebuilding the client
  - the stored bearer token, if any, is attached
  - a connection-level failure in development triggers one endpoint refresh
    and one retry (see RequestAttempt)
  - a 401 clears the stored token and raises AuthenticationError
  - any other HTTP error raises ApiError
"""

from __future__ import annotations

import enum
from typing import Any

import httpx

from labbook.core.config import Settings
from labbook.core.storage import KeyValueStore, SecureStore
from labbook.exceptions import ApiError, AuthenticationError, ConnectionFailedError
from labbook.logger import LOGGER
from labbook.resolver import EndpointResolver, health_url
from labbook.tokens import TokenStore

# Never reached a server: refused, unreachable, DNS, timed out.
CONNECTION_ERRORS = (httpx.NetworkError, httpx.TimeoutException)


class AttemptState(enum.Enum):
    INITIAL = "initial"
    RETRIED_ONCE = "retried_once"
    FAILED = "failed"


class RequestAttempt:
    """Retry bookkeeping for one logical request.

    INITIAL ──connection error (dev)──▶ RETRIED_ONCE ──any error──▶ FAILED
    """

    def __init__(self, production: bool) -> None:
        self.production = production
        self.state = AttemptState.INITIAL

    @property
    def retried(self) -> bool:
        return self.state is not AttemptState.INITIAL

    def should_retry(self, error: Exception) -> bool:
        """Advance on a transport error; True means re-issue the request."""
        if self.state is AttemptState.INITIAL and not self.production and isinstance(error, CONNECTION_ERRORS):
            self.state = AttemptState.RETRIED_ONCE
            return True
        self.state = AttemptState.FAILED
        return False

    def fail(self) -> None:
        self.state = AttemptState.FAILED


class ApiClient:
    """Async client for the booking backend.

    Build with ``await ApiClient.create(...)`` so the base URL is resolved
    before the first request. Use as an async context manager or call
    ``aclose()``.
    """

    def __init__(
        self,
        settings: Settings,
        resolver: EndpointResolver,
        tokens: TokenStore,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings
        self.resolver = resolver
        self.tokens = tokens
        self._http = http or httpx.AsyncClient(
            timeout=settings.request_timeout,
            headers={"Accept": "application/json"},
        )

    @classmethod
    async def create(
        cls,
        settings: Settings | None = None,
        store: KeyValueStore | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> ApiClient:
        settings = settings or Settings.from_env()
        store = store if store is not None else SecureStore(settings.store_path)
        resolver = EndpointResolver(settings, store, http=http)
        client = cls(settings, resolver, TokenStore(store, settings.token_key), http=http)
        url = await resolver.resolve()
        LOGGER.info("API base URL initialized: %s (%s)", url, settings.mode)
        return client

    # ── Endpoint ──────────────────────────────────────────────────────────────

    @property
    def current_url(self) -> str:
        return self.resolver.current_url

    async def refresh_base_url(self) -> str:
        """Manual recovery: forget the cached URL and rediscover."""
        return await self.resolver.force_refresh()

    async def check_connection(self) -> dict | None:
        """Health body of the current backend, or None when it is not healthy."""
        url = health_url(self.current_url)
        try:
            r = await self._http.get(url, timeout=self.settings.probe_timeout)
            body = r.json() if r.status_code == 200 else None
        except (httpx.HTTPError, ValueError) as e:
            LOGGER.warning("Connection test to %s failed: %s", url, e)
            return None
        if isinstance(body, dict) and body.get("status") == "healthy":
            return body
        LOGGER.warning("Unexpected health response from %s: %r", url, body)
        return None

    def image_url(self, image_path: str | None) -> str | None:
        """``uploads/equipment/x.jpg`` → absolute URL on the current backend."""
        if not image_path:
            return None
        base = self.current_url.rstrip("/")
        if base.endswith("/api"):
            base = base[: -len("/api")]
        return f"{base}/{image_path.lstrip('/')}"

    # ── Requests ──────────────────────────────────────────────────────────────

    def _url(self, path: str) -> str:
        return f"{self.current_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self, extra: dict | None) -> dict:
        headers = dict(extra or {})
        token = self.tokens.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(self, method: str, path: str, *, headers: dict | None = None, **kwargs: Any) -> httpx.Response:
        """Issue one logical request; see module docstring for the failure policy."""
        attempt = RequestAttempt(self.settings.production)
        while True:
            url = self._url(path)
            try:
                r = await self._http.request(method, url, headers=self._headers(headers), **kwargs)
            except httpx.TransportError as e:
                if attempt.should_retry(e):
                    LOGGER.warning("Connection to %s failed (%s), refreshing backend URL", url, e)
                    new_url = await self.resolver.force_refresh()
                    LOGGER.info("Retrying %s %s with %s", method, path, new_url)
                    continue
                raise ConnectionFailedError(url, str(e)) from e

            if r.is_success or r.is_redirect:
                return r
            payload = _payload(r)
            if r.status_code == 401:
                if not attempt.retried:
                    LOGGER.info("401 from %s %s, clearing stored token", method, path)
                    self.tokens.clear()
                attempt.fail()
                raise AuthenticationError(401, payload, r.reason_phrase)
            attempt.fail()
            raise ApiError(r.status_code, payload, r.reason_phrase)

    async def get(self, path: str, **kwargs: Any) -> Any:
        return _decode(await self.request("GET", path, **kwargs))

    async def post(self, path: str, **kwargs: Any) -> Any:
        return _decode(await self.request("POST", path, **kwargs))

    async def put(self, path: str, **kwargs: Any) -> Any:
        return _decode(await self.request("PUT", path, **kwargs))

    async def patch(self, path: str, **kwargs: Any) -> Any:
        return _decode(await self.request("PATCH", path, **kwargs))

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return _decode(await self.request("DELETE", path, **kwargs))

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.aclose()


def _payload(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError:
        return r.text[:200] or None


def _decode(r: httpx.Response) -> Any:
    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        return r.text
