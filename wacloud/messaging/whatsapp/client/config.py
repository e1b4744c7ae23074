"""
Client configuration for the WhatsApp Cloud API.

A WhatsAppConfig is built once per client and shared by reference with every
resource handler. It is frozen: credentials are validated at construction and
never re-checked.
"""

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from wacloud.core.config.settings import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    Settings,
    settings,
)
from wacloud.messaging.whatsapp.utils.errors import MissingWabaIdError

_http_url = TypeAdapter(AnyHttpUrl)


class WhatsAppConfig(BaseModel):
    """Credentials and endpoint settings for one phone number."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    access_token: str = Field(
        ..., min_length=1, description="WhatsApp Business access token"
    )
    phone_number_id: str = Field(
        ..., min_length=1, description="Phone number ID used as the path root"
    )
    waba_id: str | None = Field(
        None, description="WhatsApp Business Account ID (needed by some endpoints)"
    )
    version: str = Field(
        DEFAULT_API_VERSION, min_length=1, description="Graph API version"
    )
    base_url: str = Field(DEFAULT_BASE_URL, description="Graph API origin")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL is absolute; keep the string as given."""
        _http_url.validate_python(v)
        return v

    @field_validator("waba_id")
    @classmethod
    def validate_waba_id(cls, v: str | None) -> str | None:
        """Treat an empty WABA ID as missing."""
        return v or None

    def require_waba_id(self, operation: str) -> str:
        """Return the WABA ID or fail fast for an operation that needs it."""
        if not self.waba_id:
            raise MissingWabaIdError(operation)
        return self.waba_id

    @classmethod
    def from_settings(
        cls, source: Settings | None = None, **overrides
    ) -> "WhatsAppConfig":
        """Build a config from environment settings.

        Args:
            source: Settings instance (defaults to the global ``settings``)
            **overrides: Field values taking precedence over the environment

        Raises:
            pydantic.ValidationError: If the token or phone number ID is missing
        """
        source = source or settings
        values = {
            "access_token": source.wp_access_token,
            "phone_number_id": source.wp_phone_id,
            "waba_id": source.wp_bid,
            "version": source.api_version,
            "base_url": source.base_url,
        }
        values.update(overrides)
        return cls(**{k: v for k, v in values.items() if v is not None})
