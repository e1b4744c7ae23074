from .client import WhatsAppClient, WhatsAppConfig
from .messenger import WhatsAppCloudAPI

__all__ = ["WhatsAppClient", "WhatsAppConfig", "WhatsAppCloudAPI"]
