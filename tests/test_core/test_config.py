"""Tests for application configuration settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from app.core.config import Settings


class TestJurisdictionSettings:
    """Test the default jurisdiction and search settings."""

    def test_should_default_to_georgia(self):
        """DEFAULT_STATE falls back to GA."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("DEFAULT_STATE", None)
            settings = Settings()

        assert settings.DEFAULT_STATE == "GA"
        assert settings.OFFICE_SEARCH_LIMIT == 10

    def test_should_uppercase_default_state(self):
        """A lowercase state code is normalized."""
        with patch.dict(os.environ, {"DEFAULT_STATE": " fl "}):
            settings = Settings()

        assert settings.DEFAULT_STATE == "FL"

    @pytest.mark.parametrize("value", ["Georgia", "G", "1A"])
    def test_should_reject_invalid_default_state(self, value):
        """Anything but a two-letter code is rejected."""
        with patch.dict(os.environ, {"DEFAULT_STATE": value}):
            with pytest.raises(ValidationError):
                Settings()

    @pytest.mark.parametrize("value", ["0", "101", "invalid_value"])
    def test_should_reject_out_of_range_search_limit(self, value):
        """OFFICE_SEARCH_LIMIT must be between 1 and 100."""
        with patch.dict(os.environ, {"OFFICE_SEARCH_LIMIT": value}):
            with pytest.raises(ValidationError):
                Settings()


class TestGeocodingSettings:
    """Test geocoding provider settings."""

    def test_should_leave_providers_unconfigured_by_default(self):
        """Provider credentials are optional."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("LOCATIONIQ_ACCESS_TOKEN", None)
            os.environ.pop("GOOGLE_MAPS_API_KEY", None)
            settings = Settings()

        assert settings.LOCATIONIQ_ACCESS_TOKEN is None
        assert settings.GOOGLE_MAPS_API_KEY is None
        assert settings.LOCATIONIQ_DOMAIN == "us1.locationiq.com"

    def test_should_read_provider_credentials_from_environment(self):
        """Credentials and timeout come from the environment."""
        env = {
            "LOCATIONIQ_ACCESS_TOKEN": "liq-token",
            "GOOGLE_MAPS_API_KEY": "google-key",
            "GEOCODING_TIMEOUT": "3",
        }
        with patch.dict(os.environ, env):
            settings = Settings()

        assert settings.LOCATIONIQ_ACCESS_TOKEN == "liq-token"
        assert settings.GOOGLE_MAPS_API_KEY == "google-key"
        assert settings.GEOCODING_TIMEOUT == 3

    def test_should_reject_zero_timeout(self):
        """GEOCODING_TIMEOUT must be positive."""
        with patch.dict(os.environ, {"GEOCODING_TIMEOUT": "0"}):
            with pytest.raises(ValidationError):
                Settings()


class TestEnvironmentSafety:
    """Test CORS and test database settings."""

    def test_should_replace_wildcard_cors_origins(self):
        """A wildcard origin list becomes the local development origins."""
        settings = Settings(cors_origins=["*"])

        assert "*" not in settings.cors_origins
        assert "http://localhost:8000" in settings.cors_origins

    def test_should_prefix_database_name_when_testing(self):
        """Tests never point at the production database name."""
        with patch.dict(os.environ, {"TESTING": "true"}):
            os.environ.pop("TEST_DATABASE_URL", None)
            settings = Settings(DATABASE_URL="postgresql://user:pw@db:5432/permits")

        assert settings.DATABASE_URL == "postgresql://user:pw@db:5432/test_permits"

    def test_should_prefer_explicit_test_database_url(self):
        """TEST_DATABASE_URL wins over the prefixed name."""
        env = {
            "TESTING": "true",
            "TEST_DATABASE_URL": "postgresql://user:pw@db:5432/permit_ci",
        }
        with patch.dict(os.environ, env):
            settings = Settings()

        assert settings.DATABASE_URL == "postgresql://user:pw@db:5432/permit_ci"
