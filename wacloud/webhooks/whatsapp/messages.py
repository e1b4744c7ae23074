"""
WhatsApp ``messages`` webhook value schema.

Pydantic models for the ``value`` of a change with ``field == "messages"``:
inbound customer messages, outbound message statuses and errors. Unknown
keys are kept so new platform fields never break parsing.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class WebhookModel(BaseModel):
    """Base for inbound webhook models."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ContactProfile(WebhookModel):
    name: str = Field(..., description="Customer profile name")


class Contact(WebhookModel):
    profile: ContactProfile
    wa_id: str = Field(..., description="WhatsApp ID of the customer")


class Metadata(WebhookModel):
    display_phone_number: str = Field(
        ..., description="Phone number of the business receiving the webhook"
    )
    phone_number_id: str = Field(
        ..., description="ID of the phone number receiving the webhook"
    )


class TextObject(WebhookModel):
    body: str


class MediaObject(WebhookModel):
    """Image, video, audio, document or sticker attachment."""

    id: str = Field(..., description="Media ID, usable with the media handler")
    mime_type: str | None = None
    sha256: str | None = None
    caption: str | None = None
    filename: str | None = None
    voice: bool | None = Field(None, description="Voice note (audio only)")
    url: str | None = None
    animated: bool | None = Field(None, description="Animated sticker")


class Reaction(WebhookModel):
    message_id: str = Field(..., description="Message that was reacted to")
    emoji: str | None = Field(None, description="Emoji, absent when removed")


class Location(WebhookModel):
    latitude: str | float
    longitude: str | float
    name: str | None = None
    address: str | None = None
    url: str | None = None


class ReferredProduct(WebhookModel):
    catalog_id: str
    product_retailer_id: str


class Context(WebhookModel):
    """Reply or forward context of an inbound message."""

    forwarded: bool | None = None
    frequently_forwarded: bool | None = None
    from_: str | None = Field(None, alias="from", description="Sender of the original")
    id: str | None = Field(None, description="ID of the message replied to")
    referred_product: ReferredProduct | None = None


class ButtonReply(WebhookModel):
    id: str
    title: str


class ListReply(WebhookModel):
    id: str
    title: str
    description: str | None = None


class Interactive(WebhookModel):
    type: Literal["button_reply", "list_reply"]
    button_reply: ButtonReply | None = None
    list_reply: ListReply | None = None


class Button(WebhookModel):
    """Quick reply button of a template."""

    text: str
    payload: str | None = None


class ErrorData(WebhookModel):
    details: str


class ErrorObject(WebhookModel):
    code: int
    title: str | None = None
    message: str | None = None
    error_data: ErrorData | None = None
    href: str | None = None


class ContactName(WebhookModel):
    formatted_name: str
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactPhone(WebhookModel):
    phone: str | None = None
    type: str | None = None
    wa_id: str | None = None


class ContactOrg(WebhookModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactAddress(WebhookModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: str | None = None


class ContactEmail(WebhookModel):
    email: str | None = None
    type: str | None = None


class ContactUrl(WebhookModel):
    url: str | None = None
    type: str | None = None


class ContactItem(WebhookModel):
    """Contact card shared by a customer."""

    name: ContactName
    org: ContactOrg | None = None
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None
    urls: list[ContactUrl] | None = None
    addresses: list[ContactAddress] | None = None
    birthday: str | None = None


class ProductItem(WebhookModel):
    product_retailer_id: str
    quantity: str | int | float
    item_price: str | int | float
    currency: str


class Order(WebhookModel):
    catalog_id: str
    product_items: list[ProductItem]
    text: str | None = None


class SystemMessage(WebhookModel):
    """System notice, e.g. the customer changed their number."""

    body: str | None = None
    type: str | None = None
    wa_id: str | None = None
    customer: str | None = None
    identity: str | None = None
    user: str | None = None
    new_wa_id: str | None = None


class WelcomeMessage(WebhookModel):
    text: str


class Referral(WebhookModel):
    """Click-to-WhatsApp ad referral."""

    source_url: str | None = None
    source_id: str | None = None
    source_type: str | None = None
    headline: str | None = None
    body: str | None = None
    media_type: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    thumbnail_url: str | None = None
    ctwa_clid: str | None = None
    welcome_message: WelcomeMessage | None = None


class Message(WebhookModel):
    """Inbound message. The object named by ``type`` carries the content."""

    from_: str = Field(..., alias="from", description="Sender WhatsApp ID")
    id: str = Field(..., description="WhatsApp message ID")
    timestamp: str = Field(..., description="Unix timestamp")
    type: str = Field(..., description="Message type, e.g. text or image")
    group_id: str | None = None
    context: Context | None = None
    referral: Referral | None = None
    text: TextObject | None = None
    image: MediaObject | None = None
    video: MediaObject | None = None
    audio: MediaObject | None = None
    document: MediaObject | None = None
    sticker: MediaObject | None = None
    location: Location | None = None
    contacts: list[ContactItem] | None = None
    interactive: Interactive | None = None
    button: Button | None = None
    reaction: Reaction | None = None
    order: Order | None = None
    system: SystemMessage | None = None
    errors: list[ErrorObject] | None = None


class ConversationOrigin(WebhookModel):
    type: str


class Conversation(WebhookModel):
    id: str
    origin: ConversationOrigin | None = None
    expiration_timestamp: str | None = None


class Pricing(WebhookModel):
    pricing_model: str
    billable: bool | None = None
    category: str


class Status(WebhookModel):
    """Status of a message sent by the business."""

    id: str = Field(..., description="ID of the message this status refers to")
    recipient_id: str
    status: Literal["read", "delivered", "sent", "failed", "deleted"]
    timestamp: str
    conversation: Conversation | None = None
    pricing: Pricing | None = None
    errors: list[ErrorObject] | None = None


class MessagesValue(WebhookModel):
    """Value of a ``messages`` change."""

    messaging_product: Literal["whatsapp"]
    metadata: Metadata
    contacts: list[Contact] | None = None
    messages: list[Message] | None = None
    statuses: list[Status] | None = None
    errors: list[ErrorObject] | None = None
