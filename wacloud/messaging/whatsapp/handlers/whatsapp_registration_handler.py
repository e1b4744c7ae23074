"""
WhatsApp phone number registration handler.

Registration flow: request_code -> verify_code -> register (with the
two-step verification PIN).
"""

from collections.abc import Sequence
from typing import Any

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.basic_models import SuccessResponse
from wacloud.messaging.whatsapp.models.registration_models import (
    DEFAULT_INFO_FIELDS,
    CodeMethod,
    PhoneNumberInfo,
    PhoneNumberSettingsRequest,
    RegisterRequest,
    RequestCodeRequest,
    VerifyCodeRequest,
)
from wacloud.messaging.whatsapp.utils.validation import dump_payload, validate_response


class WhatsAppRegistrationHandler:
    """Registers, verifies and configures the configured phone number."""

    def __init__(self, client: WhatsAppClient):
        """Initialize registration handler.

        Args:
            client: Shared WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    def _path(self, action: str | None = None) -> str:
        phone_number_id = self.client.config.phone_number_id
        return f"{phone_number_id}/{action}" if action else phone_number_id

    async def _post(self, path: str, body: dict[str, Any] | None = None) -> SuccessResponse:
        response = await self.client.request(path, method="POST", body=body)
        return validate_response(SuccessResponse, response)

    async def register(self, pin: str) -> SuccessResponse:
        """Register the phone number with a 6-digit two-step verification PIN."""
        request = RegisterRequest(pin=pin)
        result = await self._post(self._path("register"), dump_payload(request))
        self.logger.info(f"Phone number {self.tenant_id} registered")
        return result

    async def deregister(self) -> SuccessResponse:
        """Deregister the phone number."""
        result = await self._post(self._path("deregister"))
        self.logger.info(f"Phone number {self.tenant_id} deregistered")
        return result

    async def get_info(self, fields: Sequence[str] | None = None) -> PhoneNumberInfo:
        """Get the full registration view of the phone number."""
        path = self.client.url_builder.with_query(
            self._path(), {"fields": ",".join(fields or DEFAULT_INFO_FIELDS)}
        )
        response = await self.client.request(path)
        return validate_response(PhoneNumberInfo, response)

    async def request_code(
        self, code_method: CodeMethod | str, language: str = "en_US"
    ) -> SuccessResponse:
        """Request a verification code by SMS or voice call."""
        request = RequestCodeRequest(code_method=code_method, language=language)
        result = await self._post(self._path("request_code"), dump_payload(request))
        self.logger.info(f"Verification code requested via {request.code_method.value}")
        return result

    async def verify_code(self, code: str) -> SuccessResponse:
        """Verify the code received by SMS or voice call."""
        request = VerifyCodeRequest(code=code)
        result = await self._post(self._path("verify_code"), dump_payload(request))
        self.logger.info(f"Phone number {self.tenant_id} verified")
        return result

    async def update_settings(
        self, settings: PhoneNumberSettingsRequest | dict[str, Any] | None = None
    ) -> SuccessResponse:
        """Update phone number settings such as the two-step PIN."""
        request = PhoneNumberSettingsRequest.model_validate(settings or {})
        return await self._post(self._path(), dump_payload(request))
