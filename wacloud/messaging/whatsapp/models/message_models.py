"""
Outgoing message models for WhatsApp messaging.

These models mirror the wire shape of POST /{phone_number_id}/messages. The
handler builds an OutgoingMessage, which validates on construction, and
serializes it with ``dump_payload``.

Supported message types:
- text, image, video, audio, document, sticker
- location, contacts, template, reaction
- interactive (reply buttons, lists)
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field, field_validator, model_validator

from wacloud.messaging.whatsapp.models.basic_models import HttpUrlStr, RequestModel
from wacloud.messaging.whatsapp.models.template_models import Template


class MessageType(str, Enum):
    """Message types supported by the messages endpoint."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACTS = "contacts"
    TEMPLATE = "template"
    INTERACTIVE = "interactive"
    REACTION = "reaction"


class MediaReference(RequestModel):
    """Media addressed either by uploaded media ID or by public link."""

    id: str | None = Field(None, min_length=1, description="Uploaded media ID")
    link: HttpUrlStr | None = Field(None, description="Public media URL")

    @model_validator(mode="after")
    def validate_exactly_one_source(self):
        """Validate that exactly one of id or link is provided."""
        if (self.id is None) == (self.link is None):
            raise ValueError("Media must include exactly one of 'id' or 'link'")
        return self


class TextContent(RequestModel):
    body: str = Field(..., min_length=1, max_length=4096, description="Message text")
    preview_url: bool = Field(False, description="Render a preview for the first URL")


class MediaContent(MediaReference):
    """Media object of image, video, audio, document and sticker messages."""

    caption: str | None = Field(None, max_length=1024, description="Media caption")
    filename: str | None = Field(None, description="Filename (documents only)")


class LocationContent(RequestModel):
    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")
    name: str | None = Field(None, max_length=1000, description="Location name")
    address: str | None = Field(None, max_length=1000, description="Location address")


# Contact card models


class ContactAddress(RequestModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = Field(
        None, pattern=r"^[A-Za-z]{2}$", description="ISO country code"
    )
    type: str | None = Field(None, description="Address type (e.g., HOME, WORK)")


class ContactEmail(RequestModel):
    email: str = Field(..., pattern=r"^[^@]+@[^@]+\.[^@]+$", description="Email address")
    type: str | None = Field(None, description="Email type (e.g., HOME, WORK)")


class ContactName(RequestModel):
    formatted_name: str = Field(
        ..., min_length=1, description="Full formatted name"
    )
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None

    @field_validator("formatted_name")
    @classmethod
    def validate_formatted_name(cls, v):
        """Validate that formatted_name is not blank."""
        if not v.strip():
            raise ValueError("formatted_name cannot be blank")
        return v


class ContactOrganization(RequestModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactPhone(RequestModel):
    phone: str | None = Field(None, description="Phone number")
    type: str | None = Field(
        None, description="Phone type (e.g., CELL, MAIN, IPHONE, HOME, WORK)"
    )
    wa_id: str | None = Field(None, description="WhatsApp ID")


class ContactUrl(RequestModel):
    url: HttpUrlStr = Field(..., description="Website URL")
    type: str | None = Field(None, description="URL type (e.g., HOME, WORK)")


class ContactCard(RequestModel):
    """Contact card shared in a contacts message."""

    name: ContactName = Field(..., description="Contact name")
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None
    urls: list[ContactUrl] | None = None
    addresses: list[ContactAddress] | None = None
    org: ContactOrganization | None = None
    birthday: str | None = Field(
        None, pattern=r"^\d{4}-\d{2}-\d{2}$", description="Birthday (YYYY-MM-DD)"
    )


class ReactionContent(RequestModel):
    """Reaction to an earlier message. An empty emoji removes the reaction."""

    message_id: str = Field(..., min_length=1, description="Message being reacted to")
    emoji: str = Field(..., description="Emoji, or empty string to remove")


# Interactive models


class InteractiveHeader(RequestModel):
    """Header for interactive messages with media support."""

    type: Literal["text", "image", "video", "document"] = Field(
        ..., description="Header type"
    )
    text: str | None = Field(None, max_length=60, description="Header text")
    image: MediaReference | None = None
    video: MediaReference | None = None
    document: MediaReference | None = None

    @model_validator(mode="after")
    def validate_header_content(self):
        """Validate that the content matching ``type`` is provided."""
        if getattr(self, self.type) is None:
            raise ValueError(f"{self.type} header must include '{self.type}'")
        return self


class InteractiveBody(RequestModel):
    text: str = Field(..., min_length=1, max_length=1024, description="Body text")


class InteractiveFooter(RequestModel):
    text: str = Field(..., min_length=1, max_length=60, description="Footer text")


class ReplyButton(RequestModel):
    id: str = Field(..., min_length=1, max_length=256, description="Button identifier")
    title: str = Field(..., min_length=1, max_length=20, description="Button label")


class InteractiveButton(RequestModel):
    type: Literal["reply"] = "reply"
    reply: ReplyButton


class ButtonAction(RequestModel):
    buttons: list[InteractiveButton] = Field(
        ..., min_length=1, max_length=3, description="Reply buttons (max 3)"
    )

    @field_validator("buttons")
    @classmethod
    def validate_button_uniqueness(cls, v):
        """Validate button IDs are unique."""
        button_ids = [button.reply.id for button in v]
        if len(button_ids) != len(set(button_ids)):
            raise ValueError("Button IDs must be unique")
        return v


class ListRow(RequestModel):
    id: str = Field(..., min_length=1, max_length=200, description="Row identifier")
    title: str = Field(..., min_length=1, max_length=24, description="Row title")
    description: str | None = Field(None, max_length=72, description="Row description")


class ListSection(RequestModel):
    title: str | None = Field(None, max_length=24, description="Section title")
    rows: list[ListRow] = Field(..., min_length=1, max_length=10)


class ListAction(RequestModel):
    button: str = Field(
        ..., min_length=1, max_length=20, description="Label of the button opening the list"
    )
    sections: list[ListSection] = Field(..., min_length=1, max_length=10)

    @field_validator("sections")
    @classmethod
    def validate_rows(cls, v):
        """Validate at most 10 rows in total, with IDs unique across sections."""
        row_ids = [row.id for section in v for row in section.rows]
        if len(row_ids) > 10:
            raise ValueError("A list message can contain at most 10 rows in total")
        if len(row_ids) != len(set(row_ids)):
            raise ValueError("Row IDs must be unique across all sections")
        if len(v) > 1 and any(not section.title for section in v):
            raise ValueError("Every section needs a title when there are several")
        return v


class ButtonInteractive(RequestModel):
    type: Literal["button"] = "button"
    header: InteractiveHeader | None = None
    body: InteractiveBody
    footer: InteractiveFooter | None = None
    action: ButtonAction


class ListInteractive(RequestModel):
    type: Literal["list"] = "list"
    header: InteractiveHeader | None = None
    body: InteractiveBody
    footer: InteractiveFooter | None = None
    action: ListAction

    @field_validator("header")
    @classmethod
    def validate_text_header(cls, v):
        """List messages only support text headers."""
        if v is not None and v.type != "text":
            raise ValueError("List messages only support text headers")
        return v


InteractiveContent = Annotated[
    ButtonInteractive | ListInteractive, Field(discriminator="type")
]


class MessageContext(RequestModel):
    message_id: str = Field(..., min_length=1, description="Message being replied to")


class OutgoingMessage(RequestModel):
    """Body of POST /{phone_number_id}/messages."""

    messaging_product: Literal["whatsapp"] = "whatsapp"
    recipient_type: Literal["individual"] = "individual"
    to: str = Field(..., min_length=1, description="Recipient phone number or WhatsApp ID")
    type: MessageType = Field(..., description="Message type")
    context: MessageContext | None = Field(None, description="Reply context")

    text: TextContent | None = None
    image: MediaContent | None = None
    video: MediaContent | None = None
    audio: MediaContent | None = None
    document: MediaContent | None = None
    sticker: MediaContent | None = None
    location: LocationContent | None = None
    contacts: list[ContactCard] | None = Field(None, min_length=1)
    template: Template | None = None
    interactive: InteractiveContent | None = None
    reaction: ReactionContent | None = None

    @model_validator(mode="after")
    def validate_content_for_type(self):
        """Validate that exactly the content object named by ``type`` is set."""
        content_fields = {message_type.value for message_type in MessageType}
        present = {name for name in content_fields if getattr(self, name) is not None}
        if present != {self.type.value}:
            raise ValueError(
                f"'{self.type.value}' messages must carry exactly the "
                f"'{self.type.value}' object, got {sorted(present)}"
            )
        return self

    @model_validator(mode="after")
    def validate_media_options(self):
        """Captions are not supported on audio and stickers; filename only on documents."""
        for name in ("audio", "sticker"):
            media = getattr(self, name)
            if media is not None and media.caption is not None:
                raise ValueError(f"{name} messages do not support captions")
        for name in ("image", "video", "audio", "sticker"):
            media = getattr(self, name)
            if media is not None and media.filename is not None:
                raise ValueError("filename is only supported for documents")
        return self


class TypingIndicator(RequestModel):
    type: Literal["text"] = "text"


class MarkAsReadRequest(RequestModel):
    """Body that marks an inbound message as read."""

    messaging_product: Literal["whatsapp"] = "whatsapp"
    status: Literal["read"] = "read"
    message_id: str = Field(..., min_length=1, description="Inbound message ID")
    typing_indicator: TypingIndicator | None = Field(
        None, description="Show a typing indicator while preparing a reply"
    )
