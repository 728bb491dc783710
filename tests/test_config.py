"""
Tests for search configuration.
"""

import pytest

from librarium.config import Config


@pytest.fixture(autouse=True)
def restore_config():
    """Restore mutated class attributes after each test."""
    saved = {
        name: getattr(Config, name)
        for name in (
            "SEARCH_DEBOUNCE_SECONDS",
            "SEARCH_RESULT_LIMIT",
            "SEARCH_MAX_SESSIONS",
            "SEARCH_REMOTE_PROVIDER",
        )
    }
    yield
    for name, value in saved.items():
        setattr(Config, name, value)


class TestValidate:
    """Tests for configuration validation."""

    def test_defaults_are_valid(self):
        Config.SEARCH_DEBOUNCE_SECONDS = 0.3
        Config.SEARCH_RESULT_LIMIT = 8
        Config.SEARCH_MAX_SESSIONS = 100
        Config.SEARCH_REMOTE_PROVIDER = "offline"

        Config.validate()

    def test_zero_debounce_allowed(self):
        Config.SEARCH_DEBOUNCE_SECONDS = 0
        Config.SEARCH_REMOTE_PROVIDER = "offline"

        Config.validate()

    def test_negative_debounce(self):
        Config.SEARCH_DEBOUNCE_SECONDS = -1

        with pytest.raises(ValueError, match="SEARCH_DEBOUNCE_SECONDS"):
            Config.validate()

    def test_zero_limit(self):
        Config.SEARCH_RESULT_LIMIT = 0

        with pytest.raises(ValueError, match="SEARCH_RESULT_LIMIT"):
            Config.validate()

    def test_zero_sessions(self):
        Config.SEARCH_MAX_SESSIONS = 0

        with pytest.raises(ValueError, match="SEARCH_MAX_SESSIONS"):
            Config.validate()

    def test_unknown_provider(self):
        Config.SEARCH_REMOTE_PROVIDER = "carrier_pigeon"

        with pytest.raises(ValueError, match="SEARCH_REMOTE_PROVIDER must be one of"):
            Config.validate()


class TestGetRemoteConfig:
    """Tests for provider-specific settings."""

    def test_google_books(self):
        Config.SEARCH_REMOTE_PROVIDER = "google_books"
        Config.SEARCH_RESULT_LIMIT = 8

        result = Config.get_remote_config()

        assert result["provider"] == "google_books"
        assert result["limit"] == 8
        assert "base_url" in result
        assert "api_key" in result

    def test_offline(self):
        Config.SEARCH_REMOTE_PROVIDER = "offline"

        result = Config.get_remote_config()

        assert result["provider"] == "offline"
        assert "base_url" not in result

    def test_unknown(self):
        Config.SEARCH_REMOTE_PROVIDER = "nope"

        with pytest.raises(ValueError, match="Unknown remote search provider"):
            Config.get_remote_config()
