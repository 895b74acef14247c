"""
test_config.py — Unit tests for labbook/core/config.py
"""

from pathlib import Path

from labbook.core.config import DEFAULT_PORT, PRODUCTION_URL, Settings, coerce_int


class TestSettingsFromEnv:
    def test_defaults_to_development(self):
        s = Settings.from_env({})
        assert s.production is False
        assert s.mode == "development"
        assert s.production_url == PRODUCTION_URL
        assert s.default_port == DEFAULT_PORT
        assert s.cache_key == "cached_backend_url"
        assert s.token_key == "authToken"

    def test_production_overrides(self, tmp_path):
        s = Settings.from_env({
            "LABBOOK_ENV": "Production",
            "LABBOOK_API_URL": "https://labbook.example.com/api",
            "LABBOOK_PORT": "5050",
            "LABBOOK_DEV_HOST": "192.168.1.5:19000",
            "LABBOOK_STORE": str(tmp_path / "s.json"),
        })
        assert s.production is True
        assert s.production_url == "https://labbook.example.com/api"
        assert s.default_port == 5050
        assert s.dev_host_uri == "192.168.1.5:19000"
        assert s.store_path == Path(tmp_path / "s.json")

    def test_bad_port_falls_back(self):
        assert Settings.from_env({"LABBOOK_PORT": "five"}).default_port == DEFAULT_PORT


class TestCoerceInt:
    def test_values(self):
        assert coerce_int("7") == 7
        assert coerce_int("7.9") == 7
        assert coerce_int("", 3) == 3
        assert coerce_int(None, 3) == 3
        assert coerce_int("x", 3) == 3
