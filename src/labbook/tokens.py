"""Bearer token persistence on top of the secure store."""

from __future__ import annotations

from labbook.core.config import TOKEN_KEY
from labbook.core.storage import KeyValueStore
from labbook.exceptions import InvalidTokenError, StorageError
from labbook.logger import LOGGER


class TokenStore:
    """Owns the single auth token.

    ``get`` and ``clear`` never raise; ``set`` rejects anything that is not a
    non-empty string before touching storage.
    """

    def __init__(self, store: KeyValueStore, key: str = TOKEN_KEY) -> None:
        self._store = store
        self._key = key

    def get(self) -> str | None:
        try:
            return self._store.get(self._key)
        except StorageError as e:
            LOGGER.error("Error reading token: %s", e)
            return None

    def set(self, token: str) -> None:
        if not isinstance(token, str) or not token:
            LOGGER.error("Invalid token type: %s", type(token).__name__)
            raise InvalidTokenError("Token must be a non-empty string")
        try:
            self._store.set(self._key, token)
        except StorageError as e:
            LOGGER.error("Error saving token: %s", e)
            raise
        LOGGER.debug("Token saved")

    def clear(self) -> None:
        try:
            self._store.delete(self._key)
        except StorageError as e:
            LOGGER.error("Error removing token: %s", e)
