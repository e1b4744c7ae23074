"""
wacloud - Typed async client for the WhatsApp Cloud API

Send messages, manage media, templates and account resources, and parse
inbound webhooks, with every payload and response checked by pydantic.

Clean Import Interface:
- Client essentials exposed at top level
- Models available via wacloud.messaging.whatsapp.models
- FastAPI webhook router available via wacloud.api
"""

from .core.config.settings import settings
from .messaging.whatsapp.client.config import WhatsAppConfig
from .messaging.whatsapp.messenger.whatsapp_cloud_api import WhatsAppCloudAPI
from .messaging.whatsapp.utils.errors import (
    MissingWabaIdError,
    WhatsAppApiError,
    WhatsAppError,
    WhatsAppResponseValidationError,
    WhatsAppTransportError,
)
from .webhooks.whatsapp.signature import verify_signature
from .webhooks.whatsapp.webhook_container import WhatsAppWebhook, parse_webhook

# Dynamic version from pyproject.toml
__version__ = settings.version

__all__ = [
    # Client
    "WhatsAppCloudAPI",
    "WhatsAppConfig",
    # Errors
    "WhatsAppError",
    "WhatsAppApiError",
    "WhatsAppTransportError",
    "WhatsAppResponseValidationError",
    "MissingWabaIdError",
    # Webhooks
    "WhatsAppWebhook",
    "parse_webhook",
    "verify_signature",
]
