"""WhatsApp Cloud API facade."""

from .whatsapp_cloud_api import WhatsAppCloudAPI

__all__ = ["WhatsAppCloudAPI"]
