"""
WhatsApp Cloud API facade.

One entry point exposing every resource handler:
- messages: text, media, location, contacts, templates, interactive, reactions
- media: upload, URL lookup, download, delete
- templates, business, phone_numbers, registration, qr_codes, waba
- webhooks: subscription management
- two_step_verification
"""

import aiohttp

from wacloud.core.logging.logger import get_logger
from wacloud.core.config.settings import Settings
from wacloud.messaging.whatsapp.client.config import WhatsAppConfig
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.handlers.whatsapp_business_handler import (
    WhatsAppBusinessHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_media_handler import (
    WhatsAppMediaHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_message_handler import (
    WhatsAppMessageHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_phone_number_handler import (
    WhatsAppPhoneNumberHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_qr_code_handler import (
    WhatsAppQRCodeHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_registration_handler import (
    WhatsAppRegistrationHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_subscription_handler import (
    WhatsAppSubscriptionHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_template_handler import (
    WhatsAppTemplateHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_two_step_handler import (
    WhatsAppTwoStepHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_waba_handler import (
    WhatsAppWABAHandler,
)


class WhatsAppCloudAPI:
    """
    Typed client for the WhatsApp Cloud API.

    Uses composition: one WhatsAppClient is created per facade and shared
    by reference with every handler, together with the immutable config.

    Example:
        async with WhatsAppCloudAPI(
            access_token="EAAG...", phone_number_id="1234567890"
        ) as api:
            await api.messages.send_text("15551234567", "Hello!")
    """

    def __init__(
        self,
        config: WhatsAppConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        **config_fields,
    ):
        """Initialize the facade.

        Args:
            config: Ready-made configuration
            session: Optional aiohttp session shared with the application
            **config_fields: WhatsAppConfig fields, used when ``config`` is None

        Raises:
            pydantic.ValidationError: If the configuration is invalid
            TypeError: If both ``config`` and config fields are given
        """
        if config is not None and config_fields:
            raise TypeError("Pass either a WhatsAppConfig or config fields, not both")

        self.config = config or WhatsAppConfig(**config_fields)
        self.client = WhatsAppClient(self.config, session=session)
        self.logger = get_logger(__name__)

        self.messages = WhatsAppMessageHandler(self.client)
        self.media = WhatsAppMediaHandler(self.client)
        self.templates = WhatsAppTemplateHandler(self.client)
        self.business = WhatsAppBusinessHandler(self.client)
        self.phone_numbers = WhatsAppPhoneNumberHandler(self.client)
        self.registration = WhatsAppRegistrationHandler(self.client)
        self.qr_codes = WhatsAppQRCodeHandler(self.client)
        self.waba = WhatsAppWABAHandler(self.client)
        self.webhooks = WhatsAppSubscriptionHandler(self.client)
        self.two_step_verification = WhatsAppTwoStepHandler(self.client)

        self.logger.debug(
            f"WhatsApp Cloud API ready for phone_id: {self.config.phone_number_id}"
        )

    @classmethod
    def from_env(
        cls,
        source: Settings | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        **overrides,
    ) -> "WhatsAppCloudAPI":
        """Build the facade from WP_ACCESS_TOKEN, WP_PHONE_ID and WP_BID."""
        return cls(WhatsAppConfig.from_settings(source, **overrides), session=session)

    @property
    def tenant_id(self) -> str:
        """Get tenant ID (which is the phone_number_id)."""
        return self.client.tenant_id

    async def close(self) -> None:
        """Close the HTTP session if the facade created it."""
        await self.client.close()

    async def __aenter__(self) -> "WhatsAppCloudAPI":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
