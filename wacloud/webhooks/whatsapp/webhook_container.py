"""
WhatsApp webhook envelope.

Top-level structure of every WhatsApp Business Account webhook:

    {"object": "whatsapp_business_account",
     "entry": [{"id": ..., "time": ..., "changes": [{"field": ..., "value": ...}]}]}

``changes[].field`` selects the shape of ``value``. Fields without a
dedicated schema parse to UnknownChange instead of failing, since the
platform adds new webhook fields over time.
"""

from collections.abc import Iterator
from typing import Annotated, Any, Literal

from pydantic import Discriminator, Field, Tag

from wacloud.webhooks.whatsapp.messages import Message, MessagesValue, Status, WebhookModel
from wacloud.webhooks.whatsapp.templates import (
    TemplateCategoryUpdateValue,
    TemplateComponentsUpdateValue,
    TemplateQualityUpdateValue,
    TemplateStatusUpdateValue,
)

UNKNOWN_CHANGE_TAG = "unknown"


class MessagesChange(WebhookModel):
    field: Literal["messages"]
    value: MessagesValue


class TemplateStatusUpdateChange(WebhookModel):
    field: Literal["message_template_status_update"]
    value: TemplateStatusUpdateValue


class TemplateQualityUpdateChange(WebhookModel):
    field: Literal["message_template_quality_update"]
    value: TemplateQualityUpdateValue


class TemplateComponentsUpdateChange(WebhookModel):
    field: Literal["message_template_components_update"]
    value: TemplateComponentsUpdateValue


class TemplateCategoryUpdateChange(WebhookModel):
    field: Literal["template_category_update"]
    value: TemplateCategoryUpdateValue


class UnknownChange(WebhookModel):
    """Change whose ``field`` has no dedicated schema; ``value`` is kept raw."""

    field: str
    value: Any = None


KNOWN_CHANGE_FIELDS = frozenset(
    {
        "messages",
        "message_template_status_update",
        "message_template_quality_update",
        "message_template_components_update",
        "template_category_update",
    }
)


def _change_tag(change: Any) -> str:
    if isinstance(change, dict):
        field = change.get("field")
    else:
        field = getattr(change, "field", None)
    return field if field in KNOWN_CHANGE_FIELDS else UNKNOWN_CHANGE_TAG


WebhookChange = Annotated[
    Annotated[MessagesChange, Tag("messages")]
    | Annotated[TemplateStatusUpdateChange, Tag("message_template_status_update")]
    | Annotated[TemplateQualityUpdateChange, Tag("message_template_quality_update")]
    | Annotated[
        TemplateComponentsUpdateChange, Tag("message_template_components_update")
    ]
    | Annotated[TemplateCategoryUpdateChange, Tag("template_category_update")]
    | Annotated[UnknownChange, Tag(UNKNOWN_CHANGE_TAG)],
    Discriminator(_change_tag),
]


class WebhookEntry(WebhookModel):
    id: str = Field(..., description="WhatsApp Business Account ID")
    time: int | None = Field(None, description="Unix timestamp of the event")
    changes: list[WebhookChange]


class WhatsAppWebhook(WebhookModel):
    """Complete webhook payload posted by WhatsApp."""

    object: Literal["whatsapp_business_account"]
    entry: list[WebhookEntry]


def parse_webhook(payload: dict[str, Any] | str | bytes) -> WhatsAppWebhook:
    """Parse a webhook body (decoded JSON, or the raw JSON text).

    Raises:
        pydantic.ValidationError: If the payload is not a valid webhook
    """
    if isinstance(payload, (str, bytes)):
        return WhatsAppWebhook.model_validate_json(payload)
    return WhatsAppWebhook.model_validate(payload)


def iter_changes(
    webhook: WhatsAppWebhook, field: str | None = None
) -> Iterator[WebhookChange]:
    """Yield every change, optionally only those with the given ``field``."""
    for entry in webhook.entry:
        for change in entry.changes:
            if field is None or change.field == field:
                yield change


def iter_messages(webhook: WhatsAppWebhook) -> Iterator[Message]:
    """Yield every inbound message across entries and changes."""
    for change in iter_changes(webhook, "messages"):
        yield from change.value.messages or []


def iter_statuses(webhook: WhatsAppWebhook) -> Iterator[Status]:
    """Yield every outbound message status across entries and changes."""
    for change in iter_changes(webhook, "messages"):
        yield from change.value.statuses or []
