"""
core/storage.py — On-device key/value store for the cached backend URL and the auth token.

The store is a single JSON object ``{key: value}`` kept in a file readable only
by its owner. Values are always strings. Two implementations share one
interface:

  - SecureStore  — file-backed (default: ~/.labbook/secure.json)
  - MemoryStore  — process-local dict, for tests and embedding

A missing file reads as empty. A file that cannot be read or parsed raises
StorageError; callers decide whether that is fatal.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path

from labbook.exceptions import StorageError

__all__ = ["KeyValueStore", "SecureStore", "MemoryStore"]


class KeyValueStore(ABC):
    """String key/value store interface."""

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> None: ...


class SecureStore(KeyValueStore):
    """JSON-file store written with 0600 permissions."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Cannot read {self.path}: expected a JSON object")
        return data

    def _save(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except StorageError:
            # unreadable file gets replaced wholesale
            data = {}
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


class MemoryStore(KeyValueStore):
    def __init__(self, initial: dict | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)
