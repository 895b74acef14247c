"""
core/config.py — Build-mode flag, backend constants and storage locations.

Every other module takes a ``Settings`` instance rather than reading the
environment itself, so tests can build one directly.

Usage::

    from labbook.core.config import Settings

    settings = Settings.from_env()
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# ── Backend ────────────────────────────────────────────────────────────────────

PRODUCTION_URL: str = "https://backend-production-cbbc.up.railway.app/api"
DEFAULT_PORT: int = 5000
PROBE_TIMEOUT: float = 5.0       # health probes during discovery
REQUEST_TIMEOUT: float = 30.0    # regular API calls

# ── Secure storage ─────────────────────────────────────────────────────────────

DATA_DIR: Path = Path.home() / ".labbook"
STORE_FILE: Path = DATA_DIR / "secure.json"
BACKEND_URL_CACHE_KEY: str = "cached_backend_url"
TOKEN_KEY: str = "authToken"

# ── Environment overrides ──────────────────────────────────────────────────────

ENV_MODE = "LABBOOK_ENV"
ENV_API_URL = "LABBOOK_API_URL"
ENV_PORT = "LABBOOK_PORT"
ENV_DEV_HOST = "LABBOOK_DEV_HOST"
ENV_STORE = "LABBOOK_STORE"


def coerce_int(v, default=None):
    if v is None or v == "":
        return default
    try:
        return int(float(v))
    except (TypeError, ValueError):
        return default


@dataclass
class Settings:
    """Runtime configuration for the resolver and the HTTP client.

    ``dev_host_uri`` is the address the development server was reached on
    (``"192.168.1.5:19000"``); its host part is taken as the device's local IP.
    """

    production: bool = False
    production_url: str = PRODUCTION_URL
    default_port: int = DEFAULT_PORT
    probe_timeout: float = PROBE_TIMEOUT
    request_timeout: float = REQUEST_TIMEOUT
    dev_host_uri: str = ""
    store_path: Path = field(default_factory=lambda: STORE_FILE)
    cache_key: str = BACKEND_URL_CACHE_KEY
    token_key: str = TOKEN_KEY

    @classmethod
    def from_env(cls, environ: dict | None = None) -> Settings:
        env = os.environ if environ is None else environ
        mode = env.get(ENV_MODE, "development").strip().lower()
        store = env.get(ENV_STORE, "")
        return cls(
            production=mode in ("production", "prod"),
            production_url=env.get(ENV_API_URL) or PRODUCTION_URL,
            default_port=coerce_int(env.get(ENV_PORT), DEFAULT_PORT),
            dev_host_uri=env.get(ENV_DEV_HOST, ""),
            store_path=Path(store).expanduser() if store else STORE_FILE,
        )

    @property
    def mode(self) -> str:
        return "production" if self.production else "development"
