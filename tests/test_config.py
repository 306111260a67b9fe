"""Tests for Settings.from_env()."""

import pytest

from core.config import DEFAULT_CACHE_PATH, DEFAULT_REDIRECT_URI, DEFAULT_SCOPES, ConfigError, Settings


class TestFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({"SPOTIFY_CLIENT_ID": "abc"})
        assert settings.client_id == "abc"
        assert settings.client_secret is None
        assert settings.redirect_uri == DEFAULT_REDIRECT_URI
        assert settings.cache_path == DEFAULT_CACHE_PATH
        assert settings.scopes == DEFAULT_SCOPES
        assert settings.open_browser is False
        assert settings.log_level == "INFO"

    def test_missing_client_id(self):
        with pytest.raises(ConfigError, match="SPOTIFY_CLIENT_ID is not set"):
            Settings.from_env({})

    def test_blank_values_count_as_missing(self):
        with pytest.raises(ConfigError):
            Settings.from_env({"SPOTIFY_CLIENT_ID": "   "})

    def test_access_token_alone_is_enough(self):
        settings = Settings.from_env({"SPOTIFY_ACCESS_TOKEN": "token"})
        assert settings.client_id is None
        assert settings.access_token == "token"

    def test_scopes_split_on_commas_and_spaces(self):
        settings = Settings.from_env(
            {"SPOTIFY_CLIENT_ID": "abc", "SPOTIFY_SCOPES": "user-library-read, streaming  user-top-read"}
        )
        assert settings.scopes == ("user-library-read", "streaming", "user-top-read")
        assert settings.scope_string == "user-library-read streaming user-top-read"

    @pytest.mark.parametrize("raw, expected", [("true", True), ("YES", True), ("1", True), ("no", False)])
    def test_open_browser(self, raw, expected):
        settings = Settings.from_env({"SPOTIFY_CLIENT_ID": "abc", "SPOTIFY_OPEN_BROWSER": raw})
        assert settings.open_browser is expected

    def test_log_level_is_upper_cased(self):
        assert Settings.from_env({"SPOTIFY_CLIENT_ID": "abc", "LOG_LEVEL": "debug"}).log_level == "DEBUG"

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("SPOTIFY_CLIENT_ID", "from-os")
        monkeypatch.delenv("SPOTIFY_ACCESS_TOKEN", raising=False)
        assert Settings.from_env().client_id == "from-os"

    def test_settings_are_frozen(self):
        settings = Settings.from_env({"SPOTIFY_CLIENT_ID": "abc"})
        with pytest.raises(Exception):
            settings.client_id = "other"
