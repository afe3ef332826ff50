"""Unit tests for modular Pydantic Settings v2."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from forum_service.core.settings import get_listing_settings, get_settings
from forum_service.core.settings.app import AppSettings
from forum_service.core.settings.database import DatabaseSettings
from forum_service.core.settings.listing import ListingSettings


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings()

        assert settings.environment == "test"  # From env var in conftest
        assert settings.api_prefix == "/api/v1"

    def test_frozen(self):
        settings = AppSettings()

        with pytest.raises(ValidationError):
            settings.debug = True

    def test_api_prefix_must_be_absolute(self):
        with pytest.raises(ValidationError):
            AppSettings(api_prefix="api")


class TestDatabaseSettings:
    def test_sqlite_detection(self):
        assert DatabaseSettings(database_url="sqlite+aiosqlite:///:memory:").is_sqlite is True
        assert DatabaseSettings(database_url="postgresql+psycopg://u:p@db/forum").is_sqlite is False


class TestListingSettings:
    def test_defaults(self):
        settings = ListingSettings()

        assert settings.default_limit == 25
        assert settings.min_limit == 1
        assert settings.max_limit == 100

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LISTING_MAX_LIMIT", "50")

        assert ListingSettings().max_limit == 50

    def test_default_must_lie_within_bounds(self):
        with pytest.raises(ValidationError, match="default_limit"):
            ListingSettings(default_limit=200, max_limit=100)

    def test_loader_is_cached(self):
        assert get_listing_settings() is get_listing_settings()


def test_unified_settings_bundle_every_domain():
    settings = get_settings()

    assert settings.listing.default_limit == 25
    assert settings.app.api_prefix == "/api/v1"
