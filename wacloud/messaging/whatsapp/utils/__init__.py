"""WhatsApp utility functions and helpers."""

from wacloud.messaging.whatsapp.utils.error_helpers import (
    is_authentication_error,
    is_bsuid_auth_error,
    is_rate_limit_error,
    log_whatsapp_error,
)
from wacloud.messaging.whatsapp.utils.errors import (
    MissingWabaIdError,
    WhatsAppApiError,
    WhatsAppError,
    WhatsAppResponseValidationError,
    WhatsAppTransportError,
)
from wacloud.messaging.whatsapp.utils.validation import dump_payload, validate_response

__all__ = [
    "WhatsAppError",
    "WhatsAppApiError",
    "WhatsAppTransportError",
    "WhatsAppResponseValidationError",
    "MissingWabaIdError",
    "is_authentication_error",
    "is_bsuid_auth_error",
    "is_rate_limit_error",
    "log_whatsapp_error",
    "dump_payload",
    "validate_response",
]
