"""WhatsApp client package."""

from .config import WhatsAppConfig
from .whatsapp_client import WhatsAppClient, WhatsAppFormDataBuilder, WhatsAppUrlBuilder

__all__ = [
    "WhatsAppConfig",
    "WhatsAppClient",
    "WhatsAppUrlBuilder",
    "WhatsAppFormDataBuilder",
]
