"""
test_tokens.py — Unit tests for labbook/tokens.py
"""

import pytest

from labbook.core.storage import MemoryStore, SecureStore
from labbook.exceptions import InvalidTokenError, StorageError
from labbook.tokens import TokenStore


class TestTokenStore:
    def test_set_get_clear(self, store):
        tokens = TokenStore(store)
        assert tokens.get() is None

        tokens.set("abc")
        assert tokens.get() == "abc"

        tokens.set("def")
        assert tokens.get() == "def"

        tokens.clear()
        assert tokens.get() is None

    @pytest.mark.parametrize("bad", ["", None, 123, b"bytes", {"token": "x"}])
    def test_rejects_invalid_token_without_mutation(self, bad):
        """A non-string or empty token is refused and the stored one survives."""
        store = MemoryStore({"authToken": "keep-me"})
        tokens = TokenStore(store)

        with pytest.raises(InvalidTokenError):
            tokens.set(bad)

        assert tokens.get() == "keep-me"

    def test_invalid_token_is_a_value_error(self, store):
        with pytest.raises(ValueError):
            TokenStore(store).set("")

    def test_clear_when_absent(self, store):
        TokenStore(store).clear()
        assert store.get("authToken") is None

    def test_get_and_clear_tolerate_storage_errors(self, broken_store):
        tokens = TokenStore(broken_store)
        assert tokens.get() is None
        tokens.clear()

    def test_set_propagates_storage_errors(self, broken_store):
        with pytest.raises(StorageError):
            TokenStore(broken_store).set("abc")

    def test_corrupt_store_file_reads_as_absent(self, tmp_path):
        path = tmp_path / "secure.json"
        path.write_text("not valid json}")
        assert TokenStore(SecureStore(path)).get() is None
