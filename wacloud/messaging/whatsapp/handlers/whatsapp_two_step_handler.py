"""
WhatsApp two-step verification handler.
"""

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.two_step_models import (
    TwoStepVerificationPin,
    TwoStepVerificationResponse,
)
from wacloud.messaging.whatsapp.utils.validation import dump_payload, validate_response


class WhatsAppTwoStepHandler:
    """Sets or removes the two-step verification PIN of the phone number."""

    def __init__(self, client: WhatsAppClient):
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    async def set_pin(self, pin: str) -> TwoStepVerificationResponse:
        """Set a 6-digit PIN. Invalid PINs are rejected before any request."""
        request = TwoStepVerificationPin(pin=pin)
        response = await self.client.request(
            self.client.config.phone_number_id,
            method="POST",
            body=dump_payload(request),
        )
        result = validate_response(TwoStepVerificationResponse, response)

        self.logger.info("Two-step verification PIN set")
        return result

    async def remove_pin(self) -> TwoStepVerificationResponse:
        """Remove the PIN by setting it to an empty string."""
        response = await self.client.request(
            self.client.config.phone_number_id, method="POST", body={"pin": ""}
        )
        result = validate_response(TwoStepVerificationResponse, response)

        self.logger.info("Two-step verification PIN removed")
        return result
