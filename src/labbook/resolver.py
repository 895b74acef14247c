"""
resolver.py — Finds a reachable backend base URL.

Production builds always talk to the fixed remote URL. Development builds
look for a backend on the local network:

  1. trust the cached URL if its /health still answers "healthy"
  2. otherwise ask http://<local-ip>:<port>/health for the backend's own
     network interfaces and take the first one whose /health answers
  3. otherwise fall back to http://<local-ip>:<port>/api untested

Every probe is bounded by ``Settings.probe_timeout``. Nothing here raises to
the caller; failures degrade to the next step.
"""

from __future__ import annotations

from typing import Any

import httpx

from labbook.core.config import Settings
from labbook.core.storage import KeyValueStore
from labbook.exceptions import StorageError
from labbook.logger import LOGGER

# Anything that means "did not get an answer", including URLs httpx cannot build
# (an IPv6 interface address pasted into host:port, a corrupted cache entry).
UNREACHABLE = (httpx.HTTPError, httpx.InvalidURL)


def health_url(base_url: str) -> str:
    """``http://h:5000/api`` → ``http://h:5000/health``."""
    base = base_url.rstrip("/")
    if base.endswith("/api"):
        base = base[: -len("/api")]
    return f"{base}/health"


def host_from_uri(host_uri: str) -> str:
    """Host part of a ``host:port`` dev-server address, or ``localhost``."""
    host = (host_uri or "").strip()
    if "://" in host:
        host = host.split("://", 1)[1]
    host = host.split("/", 1)[0].split(":", 1)[0]
    return host or "localhost"


class EndpointResolver:
    """Resolves, caches and re-discovers the backend base URL.

    Concurrent calls are not coordinated; each converges on the same class of
    result and the cache write is a plain overwrite.
    """

    def __init__(self, settings: Settings, store: KeyValueStore, http: httpx.AsyncClient | None = None) -> None:
        self.settings = settings
        self._store = store
        self._http = http
        self.current_url: str = settings.production_url

    # ── Public ────────────────────────────────────────────────────────────────

    async def resolve(self) -> str:
        """Return a usable base URL; never raises."""
        if self.settings.production:
            LOGGER.info("Production mode - using %s", self.settings.production_url)
            self.current_url = self.settings.production_url
            return self.current_url

        try:
            cached = self._read_cache()
            if cached:
                LOGGER.info("Found cached URL: %s", cached)
                if await self.probe(cached):
                    self.current_url = cached
                    return cached
                LOGGER.info("Cached URL is no longer valid, re-detecting")
                self._clear_cache()
            self.current_url = await self.discover()
        except Exception:
            LOGGER.exception("Backend URL resolution failed")
            self.current_url = self.fallback_url()
        return self.current_url

    async def force_refresh(self) -> str:
        """Drop the cached URL and rediscover, even if the cache was healthy."""
        LOGGER.info("Refreshing backend URL")
        self._clear_cache()
        if self.settings.production:
            self.current_url = self.settings.production_url
            return self.current_url
        try:
            self.current_url = await self.discover()
        except Exception:
            LOGGER.exception("Backend URL refresh failed")
            self.current_url = self.fallback_url()
        LOGGER.info("Backend URL refreshed: %s", self.current_url)
        return self.current_url

    async def discover(self) -> str:
        """Probe the local network; cache and return what was found."""
        local_ip = self.local_ip()
        LOGGER.info("Device local IP: %s", local_ip)
        detected = await self._detect(local_ip)
        if detected:
            self._write_cache(detected)
            return detected
        fallback = self.fallback_url(local_ip)
        LOGGER.info("Using final fallback: %s", fallback)
        return fallback

    async def probe(self, base_url: str) -> bool:
        """True iff ``<base>/health`` answers 200 with status "healthy"."""
        body = await self._get_json(health_url(base_url))
        return isinstance(body, dict) and body.get("status") == "healthy"

    def local_ip(self) -> str:
        if not self.settings.dev_host_uri:
            LOGGER.debug("Dev host address not set, using localhost")
        return host_from_uri(self.settings.dev_host_uri)

    def fallback_url(self, local_ip: str | None = None) -> str:
        return f"http://{local_ip or self.local_ip()}:{self.settings.default_port}/api"

    # ── Discovery ─────────────────────────────────────────────────────────────

    async def _detect(self, local_ip: str) -> str | None:
        """Ask the backend at ``local_ip`` which of its interfaces is reachable.

        Returns None only when the backend did not answer at all.
        """
        port = self.settings.default_port
        info_url = f"http://{local_ip}:{port}/health"
        LOGGER.info("Fetching backend network info from: %s", info_url)
        try:
            r = await self._get(info_url)
            r.raise_for_status()
        except UNREACHABLE as e:
            LOGGER.error("Failed to fetch backend network info: %s", e)
            return None

        for address in _interface_addresses(_json_or_none(r)):
            candidate = f"http://{address}:{port}/api"
            LOGGER.debug("Testing connection to: %s", candidate)
            if await self.probe(candidate):
                LOGGER.info("Successfully connected to: %s", candidate)
                return candidate

        fallback = self.fallback_url(local_ip)
        LOGGER.info("Using fallback URL: %s", fallback)
        return fallback

    async def _get(self, url: str) -> httpx.Response:
        timeout = self.settings.probe_timeout
        if self._http is not None:
            return await self._http.get(url, timeout=timeout)
        async with httpx.AsyncClient(timeout=timeout) as client:
            return await client.get(url)

    async def _get_json(self, url: str) -> Any:
        try:
            r = await self._get(url)
        except UNREACHABLE as e:
            LOGGER.debug("Probe %s failed: %s", url, e)
            return None
        if r.status_code != 200:
            LOGGER.debug("Probe %s returned %s", url, r.status_code)
            return None
        return _json_or_none(r)

    # ── Cache ─────────────────────────────────────────────────────────────────

    def _read_cache(self) -> str | None:
        try:
            return self._store.get(self.settings.cache_key)
        except StorageError as e:
            LOGGER.error("Error reading cached URL: %s", e)
            return None

    def _write_cache(self, url: str) -> None:
        try:
            self._store.set(self.settings.cache_key, url)
            LOGGER.info("Cached backend URL: %s", url)
        except StorageError as e:
            LOGGER.error("Failed to cache URL: %s", e)

    def _clear_cache(self) -> None:
        try:
            self._store.delete(self.settings.cache_key)
        except StorageError as e:
            LOGGER.error("Error clearing cached URL: %s", e)


def _json_or_none(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError:
        return None


def _interface_addresses(body: Any) -> list[str]:
    """Addresses from ``{"server": {"networkInterfaces": [{name, address}]}}``."""
    if not isinstance(body, dict):
        return []
    server = body.get("server")
    if not isinstance(server, dict):
        return []
    interfaces = server.get("networkInterfaces")
    if not isinstance(interfaces, list):
        return []
    return [
        iface["address"]
        for iface in interfaces
        if isinstance(iface, dict) and isinstance(iface.get("address"), str) and iface["address"]
    ]
