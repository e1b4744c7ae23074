"""
WhatsApp message sending handler.

Every send goes through POST /{phone_number_id}/messages. The full message
body is validated as an OutgoingMessage before any network I/O, so a bad
payload surfaces as ``pydantic.ValidationError`` with the field path.
"""

from typing import Any

from pydantic import BaseModel

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.basic_models import (
    SendMessageResponse,
    SuccessResponse,
)
from wacloud.messaging.whatsapp.models.message_models import (
    ButtonInteractive,
    ContactCard,
    ListInteractive,
    LocationContent,
    MarkAsReadRequest,
    MediaReference,
    MessageType,
    OutgoingMessage,
)
from wacloud.messaging.whatsapp.models.template_models import Template
from wacloud.messaging.whatsapp.utils.validation import dump_payload, validate_response

MediaInput = MediaReference | dict[str, Any]


def _as_dict(value: BaseModel | dict[str, Any]) -> dict[str, Any]:
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True)
    return dict(value)


class WhatsAppMessageHandler:
    """
    Sends every message type supported by the Cloud API.

    Endpoint: POST /{phone_number_id}/messages
    """

    def __init__(self, client: WhatsAppClient):
        """Initialize message handler.

        Args:
            client: Shared WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    async def _send(
        self,
        to: str,
        message_type: MessageType,
        content: Any,
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Validate, send and validate the response of one message."""
        data: dict[str, Any] = {
            "to": to,
            "type": message_type,
            message_type.value: content,
        }
        if reply_to:
            data["context"] = {"message_id": reply_to}

        message = OutgoingMessage.model_validate(data)
        response = await self.client.request(
            self.client.url_builder.messages_path(),
            method="POST",
            body=dump_payload(message),
        )
        result = validate_response(SendMessageResponse, response)

        self.logger.info(
            f"{message_type.value.capitalize()} message sent to {to}: {result.message_id}"
        )
        return result

    async def send_text(
        self,
        to: str,
        body: str,
        preview_url: bool = False,
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Send a text message.

        Args:
            to: Recipient phone number or WhatsApp ID
            body: Message text (max 4096 characters)
            preview_url: Render a link preview for the first URL in ``body``
            reply_to: Optional message ID to reply to
        """
        return await self._send(
            to,
            MessageType.TEXT,
            {"body": body, "preview_url": preview_url},
            reply_to,
        )

    async def send_image(
        self,
        to: str,
        media: MediaInput,
        caption: str | None = None,
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Send an image by media ID or link, e.g. ``{"link": "https://..."}``."""
        return await self._send(
            to, MessageType.IMAGE, {**_as_dict(media), "caption": caption}, reply_to
        )

    async def send_video(
        self,
        to: str,
        media: MediaInput,
        caption: str | None = None,
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Send a video by media ID or link."""
        return await self._send(
            to, MessageType.VIDEO, {**_as_dict(media), "caption": caption}, reply_to
        )

    async def send_audio(
        self, to: str, media: MediaInput, reply_to: str | None = None
    ) -> SendMessageResponse:
        """Send an audio file by media ID or link. Audio takes no caption."""
        return await self._send(to, MessageType.AUDIO, _as_dict(media), reply_to)

    async def send_document(
        self,
        to: str,
        media: MediaInput,
        caption: str | None = None,
        filename: str | None = None,
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Send a document by media ID or link.

        Args:
            to: Recipient phone number or WhatsApp ID
            media: ``{"id": ...}`` or ``{"link": ...}``
            caption: Optional caption (max 1024 characters)
            filename: Filename shown to the recipient
            reply_to: Optional message ID to reply to
        """
        return await self._send(
            to,
            MessageType.DOCUMENT,
            {**_as_dict(media), "caption": caption, "filename": filename},
            reply_to,
        )

    async def send_sticker(
        self, to: str, media: MediaInput, reply_to: str | None = None
    ) -> SendMessageResponse:
        """Send a sticker by media ID or link."""
        return await self._send(to, MessageType.STICKER, _as_dict(media), reply_to)

    async def send_location(
        self,
        to: str,
        location: LocationContent | dict[str, Any],
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Send a location pin (latitude, longitude, optional name and address)."""
        return await self._send(to, MessageType.LOCATION, location, reply_to)

    async def send_contacts(
        self,
        to: str,
        contacts: list[ContactCard | dict[str, Any]],
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Send one or more contact cards."""
        return await self._send(to, MessageType.CONTACTS, contacts, reply_to)

    async def send_template(
        self,
        to: str,
        template: Template | dict[str, Any],
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Send an approved template.

        Example:
            await handler.send_template(
                "1234567890",
                {"name": "hello_world", "language": {"code": "en_US"}},
            )
        """
        return await self._send(to, MessageType.TEMPLATE, template, reply_to)

    async def send_interactive_buttons(
        self,
        to: str,
        interactive: ButtonInteractive | dict[str, Any],
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Send an interactive message with up to 3 reply buttons."""
        content = _as_dict(ButtonInteractive.model_validate(interactive))
        return await self._send(to, MessageType.INTERACTIVE, content, reply_to)

    async def send_interactive_list(
        self,
        to: str,
        interactive: ListInteractive | dict[str, Any],
        reply_to: str | None = None,
    ) -> SendMessageResponse:
        """Send an interactive list (up to 10 sections, 10 rows in total)."""
        content = _as_dict(ListInteractive.model_validate(interactive))
        return await self._send(to, MessageType.INTERACTIVE, content, reply_to)

    async def send_reaction(
        self, to: str, message_id: str, emoji: str
    ) -> SendMessageResponse:
        """React to a message with an emoji."""
        return await self._send(
            to, MessageType.REACTION, {"message_id": message_id, "emoji": emoji}
        )

    async def remove_reaction(self, to: str, message_id: str) -> SendMessageResponse:
        """Remove a previously sent reaction."""
        return await self.send_reaction(to, message_id, "")

    async def mark_as_read(
        self, message_id: str, typing_indicator: bool = False
    ) -> SuccessResponse:
        """Mark an inbound message as read.

        Args:
            message_id: ID of the message to mark as read
            typing_indicator: Also show a typing indicator to the sender
        """
        request = MarkAsReadRequest(
            message_id=message_id,
            typing_indicator={"type": "text"} if typing_indicator else None,
        )
        response = await self.client.request(
            self.client.url_builder.messages_path(),
            method="POST",
            body=dump_payload(request),
        )
        result = validate_response(SuccessResponse, response)

        self.logger.debug(f"Marked message {message_id} as read")
        return result
