"""
WhatsApp webhook schemas.

Usage:
    from wacloud.webhooks.whatsapp import parse_webhook, iter_messages

    webhook = parse_webhook(body)
    for message in iter_messages(webhook):
        print(message.from_, message.type)
"""

from .messages import (
    Contact,
    Context,
    ErrorObject,
    Interactive,
    MediaObject,
    Message,
    MessagesValue,
    Metadata,
    Status,
)
from .signature import SIGNATURE_HEADER, compute_signature, verify_signature
from .templates import (
    TemplateButtonType,
    TemplateCategoryUpdateValue,
    TemplateComponentsUpdateValue,
    TemplateQualityScore,
    TemplateQualityUpdateValue,
    TemplateStatusUpdateValue,
)
from .webhook_container import (
    MessagesChange,
    TemplateCategoryUpdateChange,
    TemplateComponentsUpdateChange,
    TemplateQualityUpdateChange,
    TemplateStatusUpdateChange,
    UnknownChange,
    WebhookChange,
    WebhookEntry,
    WhatsAppWebhook,
    iter_changes,
    iter_messages,
    iter_statuses,
    parse_webhook,
)

__all__ = [
    # Envelope
    "WhatsAppWebhook",
    "WebhookEntry",
    "WebhookChange",
    "MessagesChange",
    "TemplateStatusUpdateChange",
    "TemplateQualityUpdateChange",
    "TemplateComponentsUpdateChange",
    "TemplateCategoryUpdateChange",
    "UnknownChange",
    "parse_webhook",
    "iter_changes",
    "iter_messages",
    "iter_statuses",
    # Messages
    "MessagesValue",
    "Message",
    "Status",
    "Contact",
    "Context",
    "Metadata",
    "MediaObject",
    "Interactive",
    "ErrorObject",
    # Templates
    "TemplateStatusUpdateValue",
    "TemplateQualityUpdateValue",
    "TemplateQualityScore",
    "TemplateComponentsUpdateValue",
    "TemplateButtonType",
    "TemplateCategoryUpdateValue",
    # Signature
    "SIGNATURE_HEADER",
    "compute_signature",
    "verify_signature",
]
