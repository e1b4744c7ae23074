"""
WhatsApp QR code handler.

QR codes open a chat with the business, optionally with a prefilled
message. Endpoint: /{phone_number_id}/message_qrdls
"""

from typing import Any

from pydantic import TypeAdapter

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.qr_code_models import (
    CreateQRCodeRequest,
    QRCodeDeleteResponse,
    QRCodeListResponse,
    QRCodeResponse,
    QRCodeUpdateResponse,
    QRImageFormat,
    UpdateQRCodeRequest,
)
from wacloud.messaging.whatsapp.utils.validation import dump_payload, validate_response

_image_format = TypeAdapter(QRImageFormat)


class WhatsAppQRCodeHandler:
    """Creates and manages QR codes for the configured phone number."""

    def __init__(self, client: WhatsAppClient):
        """Initialize QR code handler.

        Args:
            client: Shared WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    def _path(self, qr_code_id: str | None = None) -> str:
        path = f"{self.client.config.phone_number_id}/message_qrdls"
        return f"{path}/{qr_code_id}" if qr_code_id else path

    async def create(
        self, options: CreateQRCodeRequest | dict[str, Any] | None = None
    ) -> QRCodeResponse:
        """Create a QR code, optionally with a prefilled message and image."""
        body = None
        if options is not None:
            body = dump_payload(CreateQRCodeRequest.model_validate(options))

        response = await self.client.request(self._path(), method="POST", body=body)
        result = validate_response(QRCodeResponse, response)

        self.logger.info(f"QR code created: {result.code}")
        return result

    async def list(self) -> QRCodeListResponse:
        """List QR codes."""
        response = await self.client.request(self._path())
        return validate_response(QRCodeListResponse, response)

    async def get(self, qr_code_id: str) -> QRCodeResponse:
        """Get a QR code."""
        response = await self.client.request(self._path(qr_code_id))
        return validate_response(QRCodeResponse, response)

    async def update(
        self, qr_code_id: str, updates: UpdateQRCodeRequest | dict[str, Any]
    ) -> QRCodeUpdateResponse:
        """Change the prefilled message of a QR code."""
        request = UpdateQRCodeRequest.model_validate(updates)
        response = await self.client.request(
            self._path(qr_code_id), method="POST", body=dump_payload(request)
        )
        result = validate_response(QRCodeUpdateResponse, response)

        self.logger.info(f"QR code {qr_code_id} updated")
        return result

    async def delete(self, qr_code_id: str) -> QRCodeDeleteResponse:
        """Delete a QR code."""
        response = await self.client.request(self._path(qr_code_id), method="DELETE")
        result = validate_response(QRCodeDeleteResponse, response)

        self.logger.info(f"QR code {qr_code_id} deleted")
        return result

    async def get_image(
        self, qr_code_id: str, format: QRImageFormat | str = QRImageFormat.PNG
    ) -> QRCodeResponse:
        """Get a QR code together with a generated image URL (PNG or SVG)."""
        image_format = _image_format.validate_python(format)
        path = self.client.url_builder.with_query(
            self._path(qr_code_id), {"generate_qr_image": image_format.value}
        )
        response = await self.client.request(path)
        return validate_response(QRCodeResponse, response)
