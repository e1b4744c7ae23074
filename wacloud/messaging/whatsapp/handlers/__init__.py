"""WhatsApp resource handlers."""

from .whatsapp_business_handler import WhatsAppBusinessHandler
from .whatsapp_media_handler import WhatsAppMediaHandler
from .whatsapp_message_handler import WhatsAppMessageHandler
from .whatsapp_phone_number_handler import WhatsAppPhoneNumberHandler
from .whatsapp_qr_code_handler import WhatsAppQRCodeHandler
from .whatsapp_registration_handler import WhatsAppRegistrationHandler
from .whatsapp_subscription_handler import WhatsAppSubscriptionHandler
from .whatsapp_template_handler import WhatsAppTemplateHandler
from .whatsapp_two_step_handler import WhatsAppTwoStepHandler
from .whatsapp_waba_handler import WhatsAppWABAHandler

__all__ = [
    "WhatsAppBusinessHandler",
    "WhatsAppMediaHandler",
    "WhatsAppMessageHandler",
    "WhatsAppPhoneNumberHandler",
    "WhatsAppQRCodeHandler",
    "WhatsAppRegistrationHandler",
    "WhatsAppSubscriptionHandler",
    "WhatsAppTemplateHandler",
    "WhatsAppTwoStepHandler",
    "WhatsAppWABAHandler",
]
