"""
WhatsApp business profile handler.

Covers the business profile of the configured phone number, commerce
settings (WABA scoped) and the shortcut registration calls.
"""

from collections.abc import Sequence
from typing import Any

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.basic_models import SuccessResponse
from wacloud.messaging.whatsapp.models.business_models import (
    DEFAULT_PROFILE_FIELDS,
    BusinessProfileResponse,
    CommerceSettings,
    CommerceSettingsResponse,
    PhoneNumberSummary,
    UpdateBusinessProfileRequest,
    UpdateBusinessProfileResponse,
)
from wacloud.messaging.whatsapp.models.registration_models import RegisterRequest
from wacloud.messaging.whatsapp.utils.validation import dump_payload, validate_response


class WhatsAppBusinessHandler:
    """Reads and updates the business profile and commerce settings."""

    def __init__(self, client: WhatsAppClient):
        """Initialize business handler.

        Args:
            client: Shared WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    @property
    def _profile_path(self) -> str:
        return f"{self.client.config.phone_number_id}/whatsapp_business_profile"

    async def get_profile(
        self, fields: Sequence[str] | None = None
    ) -> BusinessProfileResponse:
        """Get the business profile.

        Args:
            fields: Profile fields to return (all standard fields by default)
        """
        path = self.client.url_builder.with_query(
            self._profile_path,
            {"fields": ",".join(fields or DEFAULT_PROFILE_FIELDS)},
        )
        response = await self.client.request(path)
        return validate_response(BusinessProfileResponse, response)

    async def update_profile(
        self, profile: UpdateBusinessProfileRequest | dict[str, Any]
    ) -> UpdateBusinessProfileResponse:
        """Update business profile fields (about, address, websites...)."""
        request = UpdateBusinessProfileRequest.model_validate(profile)
        response = await self.client.request(
            self._profile_path, method="POST", body=dump_payload(request)
        )
        result = validate_response(UpdateBusinessProfileResponse, response)

        self.logger.info("Business profile updated")
        return result

    async def get_commerce_settings(self) -> CommerceSettingsResponse:
        """Get catalog and cart visibility settings."""
        waba_id = self.client.config.require_waba_id("get commerce settings")
        path = self.client.url_builder.with_query(
            f"{waba_id}/whatsapp_commerce_settings",
            {"fields": "is_catalog_visible,is_cart_enabled"},
        )
        response = await self.client.request(path)
        return validate_response(CommerceSettingsResponse, response)

    async def update_commerce_settings(
        self, settings: CommerceSettings | dict[str, Any]
    ) -> UpdateBusinessProfileResponse:
        """Update catalog and cart visibility settings."""
        request = CommerceSettings.model_validate(settings)
        waba_id = self.client.config.require_waba_id("update commerce settings")
        response = await self.client.request(
            f"{waba_id}/whatsapp_commerce_settings",
            method="POST",
            body=dump_payload(request),
        )
        result = validate_response(UpdateBusinessProfileResponse, response)

        self.logger.info("Commerce settings updated")
        return result

    async def get_phone_number_info(self) -> PhoneNumberSummary:
        """Get verified name, display number and quality rating."""
        path = self.client.url_builder.with_query(
            self.client.config.phone_number_id,
            {"fields": "verified_name,display_phone_number,quality_rating"},
        )
        response = await self.client.request(path)
        return validate_response(PhoneNumberSummary, response)

    async def register_phone_number(self, pin: str) -> SuccessResponse:
        """Register the phone number for Cloud API use with a 6-digit PIN."""
        request = RegisterRequest(pin=pin)
        response = await self.client.request(
            f"{self.client.config.phone_number_id}/register",
            method="POST",
            body=dump_payload(request),
        )
        result = validate_response(SuccessResponse, response)

        self.logger.info("Phone number registered")
        return result

    async def deregister_phone_number(self) -> SuccessResponse:
        """Deregister the phone number from the Cloud API."""
        response = await self.client.request(
            f"{self.client.config.phone_number_id}/deregister", method="POST"
        )
        result = validate_response(SuccessResponse, response)

        self.logger.info("Phone number deregistered")
        return result
