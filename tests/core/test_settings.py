"""
Tests for environment settings and the config built from them.
"""

import pytest
from pydantic import ValidationError

from wacloud.core.config.settings import DEFAULT_API_VERSION, DEFAULT_BASE_URL, Settings
from wacloud.messaging.whatsapp.client.config import WhatsAppConfig


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "WP_ACCESS_TOKEN",
        "WP_PHONE_ID",
        "WP_BID",
        "API_VERSION",
        "BASE_URL",
        "LOG_LEVEL",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Test environment-based settings."""

    def test_defaults(self, clean_env):
        """Test defaults when nothing is configured."""
        settings = Settings()

        assert settings.api_version == DEFAULT_API_VERSION
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.log_level == "INFO"
        assert settings.environment == "DEV"
        assert settings.has_credentials is False

    def test_reads_credentials(self, clean_env):
        """Test credentials are read from WP_* variables."""
        clean_env.setenv("WP_ACCESS_TOKEN", "token")
        clean_env.setenv("WP_PHONE_ID", "111")
        clean_env.setenv("WP_BID", "222")

        settings = Settings()

        assert settings.wp_access_token == "token"
        assert settings.wp_phone_id == "111"
        assert settings.wp_bid == "222"
        assert settings.has_credentials is True

    def test_critical_log_level(self, clean_env):
        """Test CRITICAL is accepted like any standard level."""
        clean_env.setenv("LOG_LEVEL", "critical")

        settings = Settings()

        assert settings.log_level == "CRITICAL"

    def test_unknown_log_level_falls_back_to_info(self, clean_env):
        """Test an unknown LOG_LEVEL never breaks construction."""
        clean_env.setenv("LOG_LEVEL", "VERBOSE")

        settings = Settings()

        assert settings.log_level == "INFO"

    def test_unknown_environment_falls_back_to_dev(self, clean_env):
        """Test an unknown ENVIRONMENT becomes DEV."""
        clean_env.setenv("ENVIRONMENT", "staging")

        settings = Settings()

        assert settings.is_development is True


class TestConfigFromSettings:
    """Test WhatsAppConfig.from_settings."""

    def test_builds_from_environment(self, clean_env):
        """Test a config is built from the environment."""
        clean_env.setenv("WP_ACCESS_TOKEN", "token")
        clean_env.setenv("WP_PHONE_ID", "111")
        clean_env.setenv("WP_BID", "222")
        clean_env.setenv("API_VERSION", "v20.0")

        config = WhatsAppConfig.from_settings(Settings())

        assert config.access_token == "token"
        assert config.phone_number_id == "111"
        assert config.waba_id == "222"
        assert config.version == "v20.0"
        assert config.base_url == DEFAULT_BASE_URL

    def test_overrides_take_precedence(self, clean_env):
        """Test explicit overrides win over the environment."""
        clean_env.setenv("WP_ACCESS_TOKEN", "token")
        clean_env.setenv("WP_PHONE_ID", "111")

        config = WhatsAppConfig.from_settings(Settings(), phone_number_id="333")

        assert config.phone_number_id == "333"
        assert config.waba_id is None

    def test_missing_token_is_rejected(self, clean_env):
        """Test a missing access token fails validation."""
        clean_env.setenv("WP_PHONE_ID", "111")

        with pytest.raises(ValidationError):
            WhatsAppConfig.from_settings(Settings())
