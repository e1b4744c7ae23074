"""
WhatsApp phone number handler.

Lists the phone numbers of a WABA and reads status details of a single
number. ``is_verified`` is a best-effort check: any failure is logged and
reported as ``False``. ``is_display_name_approved`` propagates errors.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.business_models import QualityRating
from wacloud.messaging.whatsapp.models.phone_number_models import (
    REQUIRED_PHONE_NUMBER_FIELDS,
    CodeVerificationStatus,
    DisplayNameStatus,
    ListPhoneNumbersOptions,
    NameStatus,
    PhoneNumber,
    PhoneNumberField,
    PhoneNumberListResponse,
    ThroughputLevel,
)
from wacloud.messaging.whatsapp.utils.validation import validate_response

_phone_number_fields = TypeAdapter(list[PhoneNumberField])


class WhatsAppPhoneNumberHandler:
    """Reads phone numbers and their verification, quality and throughput."""

    def __init__(self, client: WhatsAppClient):
        """Initialize phone number handler.

        Args:
            client: Shared WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    async def get(
        self,
        phone_number_id: str | None = None,
        fields: Sequence[PhoneNumberField | str] | None = None,
    ) -> PhoneNumber:
        """Get a phone number (the configured one by default).

        Args:
            phone_number_id: Phone number to read
            fields: Fields to return; ``id``, ``display_phone_number`` and
                ``verified_name`` are always requested alongside them
        """
        params = {}
        if fields:
            selected = _phone_number_fields.validate_python(list(fields))
            for required in reversed(REQUIRED_PHONE_NUMBER_FIELDS):
                if required not in selected:
                    selected.insert(0, required)
            params["fields"] = ",".join(f.value for f in selected)

        path = self.client.url_builder.with_query(
            phone_number_id or self.client.config.phone_number_id, params
        )
        response = await self.client.request(path)
        return validate_response(PhoneNumber, response)

    async def get_display_name_status(
        self, phone_number_id: str | None = None
    ) -> DisplayNameStatus:
        """Get the review status of the display name."""
        phone_number_id = phone_number_id or self.client.config.phone_number_id
        response = await self.client.request(
            f"{phone_number_id}/whatsapp_business_display_name"
        )
        return validate_response(DisplayNameStatus, response)

    async def is_verified(self, phone_number_id: str | None = None) -> bool:
        """Whether the number passed code verification. ``False`` on any failure."""
        try:
            phone_number = await self.get(
                phone_number_id, [PhoneNumberField.CODE_VERIFICATION_STATUS]
            )
        except Exception as e:
            self.logger.warning(f"Could not determine verification status: {e}")
            return False
        return phone_number.code_verification_status == CodeVerificationStatus.VERIFIED

    async def get_quality_rating(
        self, phone_number_id: str | None = None
    ) -> QualityRating | None:
        """Get the quality rating (GREEN, YELLOW, RED or UNKNOWN)."""
        phone_number = await self.get(
            phone_number_id, [PhoneNumberField.QUALITY_RATING]
        )
        return phone_number.quality_rating

    async def is_display_name_approved(
        self, phone_number_id: str | None = None
    ) -> bool:
        """Whether the display name is approved."""
        status = await self.get_display_name_status(phone_number_id)
        return status.name_status == NameStatus.APPROVED

    async def get_throughput_level(
        self, phone_number_id: str | None = None
    ) -> ThroughputLevel | None:
        """Get the messaging throughput level."""
        phone_number = await self.get(phone_number_id, [PhoneNumberField.THROUGHPUT])
        return phone_number.throughput.level if phone_number.throughput else None

    async def list(
        self,
        waba_id: str | None = None,
        options: ListPhoneNumbersOptions | dict[str, Any] | None = None,
    ) -> PhoneNumberListResponse:
        """List the phone numbers of a WABA (the configured one by default).

        Example:
            await handler.list(options={
                "fields": ["id", "display_phone_number", "verified_name"],
                "limit": 10,
                "filtering": [
                    {"field": "account_mode", "operator": "EQUAL", "value": "LIVE"}
                ],
            })
        """
        request = ListPhoneNumbersOptions.model_validate(options or {})
        waba_id = waba_id or self.client.config.require_waba_id("list phone numbers")

        path = self.client.url_builder.with_query(
            f"{waba_id}/phone_numbers", request.to_query_params()
        )
        response = await self.client.request(path)
        return validate_response(PhoneNumberListResponse, response)
