"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from twitter_ads.config.settings import Settings


class TestSettings:
    def test_defaults_from_environment(self):
        config = Settings()
        assert config.access_token == "test-token"
        assert config.api_root == "https://ads-api.twitter.com/0/"
        assert config.page_size is None

    def test_bearer_token_fallback(self, monkeypatch):
        monkeypatch.delenv("TWITTER_ADS_ACCESS_TOKEN")
        monkeypatch.setenv("TWITTER_BEARER_TOKEN", "other-token")
        assert Settings().access_token == "other-token"

    def test_trailing_slash_is_stripped(self, monkeypatch):
        monkeypatch.setenv("TWITTER_ADS_API_BASE_URL", "https://ads-api-sandbox.twitter.com/")
        monkeypatch.setenv("TWITTER_ADS_API_VERSION", "1")
        assert Settings().api_root == "https://ads-api-sandbox.twitter.com/1/"

    def test_page_size_from_environment(self, monkeypatch):
        monkeypatch.setenv("TWITTER_ADS_PAGE_SIZE", "200")
        assert Settings().page_size == 200

    def test_explicit_values_win(self):
        config = Settings(api_version="2", timeout=5)
        assert config.api_root.endswith("/2/")
        assert config.timeout == 5.0

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_page_size_must_be_positive(self, page_size):
        with pytest.raises(ValidationError):
            Settings(page_size=page_size)
