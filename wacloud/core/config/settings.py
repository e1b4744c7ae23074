"""
Environment settings for wacloud.

Every value is optional. Settings only supply defaults for WhatsAppConfig and
the webhook router; credentials are validated when a config is built.

Variables:
    WP_ACCESS_TOKEN, WP_PHONE_ID, WP_BID   Graph API credentials
    API_VERSION, BASE_URL                  Graph API endpoint
    WHATSAPP_WEBHOOK_VERIFY_TOKEN          GET challenge token
    WHATSAPP_APP_SECRET                    POST signature key
    LOG_LEVEL, LOG_DIR, ENVIRONMENT        logging setup
"""

import os
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from dotenv import load_dotenv

load_dotenv(".env")

DEFAULT_API_VERSION = "v21.0"
DEFAULT_BASE_URL = "https://graph.facebook.com"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
ENVIRONMENTS = ("DEV", "PROD")


def _installed_version() -> str:
    try:
        return package_version("wacloud")
    except PackageNotFoundError:
        return "0.0.0"


def _env(name: str) -> str | None:
    """Read a variable, treating blank values as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


class Settings:
    """Snapshot of the wacloud environment variables at construction time."""

    def __init__(self):
        self.version: str = _installed_version()

        # Graph API
        self.api_version: str = _env("API_VERSION") or DEFAULT_API_VERSION
        self.base_url: str = _env("BASE_URL") or DEFAULT_BASE_URL
        self.wp_access_token: str | None = _env("WP_ACCESS_TOKEN")
        self.wp_phone_id: str | None = _env("WP_PHONE_ID")
        self.wp_bid: str | None = _env("WP_BID")

        # Webhooks
        self.whatsapp_webhook_verify_token: str | None = _env(
            "WHATSAPP_WEBHOOK_VERIFY_TOKEN"
        )
        self.whatsapp_app_secret: str | None = _env("WHATSAPP_APP_SECRET")

        # Logging
        # LOG_LEVEL may belong to the host application; unknown names mean INFO
        level = (_env("LOG_LEVEL") or "INFO").upper()
        self.log_level: str = level if level in LOG_LEVELS else "INFO"
        self.log_dir: str = _env("LOG_DIR") or "./logs"

        environment = (_env("ENVIRONMENT") or "DEV").upper()
        self.environment: str = environment if environment in ENVIRONMENTS else "DEV"

    @property
    def has_credentials(self) -> bool:
        """Check if both the access token and phone number ID are configured."""
        return bool(self.wp_access_token and self.wp_phone_id)

    @property
    def is_development(self) -> bool:
        return self.environment == "DEV"


settings = Settings()
