"""
Phone number registration and verification models.
"""

from enum import Enum
from typing import Literal

from pydantic import Field

from wacloud.messaging.whatsapp.models.basic_models import (
    RequestModel,
    ResponseModel,
)
from wacloud.messaging.whatsapp.models.business_models import QualityRating
from wacloud.messaging.whatsapp.models.phone_number_models import (
    AccountMode,
    CodeVerificationStatus,
    NameStatus,
    PlatformType,
    ThroughputLevel,
)

DEFAULT_INFO_FIELDS = [
    "id",
    "verified_name",
    "display_phone_number",
    "quality_rating",
    "platform_type",
    "throughput",
    "webhook_configuration",
    "last_onboarded_time",
    "code_verification_status",
    "account_mode",
    "certificate",
    "name_status",
    "new_name_status",
    "status",
    "is_official_business_account",
]


class CodeMethod(str, Enum):
    SMS = "SMS"
    VOICE = "VOICE"


class PhoneNumberStatus(str, Enum):
    """Connection status of a phone number."""

    CONNECTED = "CONNECTED"
    DISCONNECTED = "DISCONNECTED"
    DELETED = "DELETED"
    MIGRATED = "MIGRATED"
    BANNED = "BANNED"
    RESTRICTED = "RESTRICTED"
    RATE_LIMITED = "RATE_LIMITED"
    FLAGGED = "FLAGGED"
    PENDING = "PENDING"


class RegisterRequest(RequestModel):
    """Body of POST /{phone_number_id}/register."""

    messaging_product: Literal["whatsapp"] = "whatsapp"
    pin: str = Field(
        ..., min_length=6, max_length=6, description="Two-step verification PIN"
    )


class RegistrationThroughput(ResponseModel):
    level: ThroughputLevel


class RegistrationWebhookConfiguration(ResponseModel):
    application: str | None = None
    whatsapp_business_account: str | None = None


class PhoneNumberInfo(ResponseModel):
    """Full registration view of the configured phone number."""

    id: str
    verified_name: str
    display_phone_number: str
    quality_rating: QualityRating
    platform_type: PlatformType
    throughput: RegistrationThroughput
    webhook_configuration: RegistrationWebhookConfiguration | None = None
    last_onboarded_time: str | None = None
    code_verification_status: CodeVerificationStatus | None = None
    account_mode: AccountMode | None = None
    certificate: str | None = None
    name_status: NameStatus | None = None
    new_name_status: NameStatus | None = None
    status: PhoneNumberStatus | None = None
    is_official_business_account: bool | None = None


class RequestCodeRequest(RequestModel):
    """Body of POST /{phone_number_id}/request_code."""

    code_method: CodeMethod = Field(..., description="Delivery method for the code")
    language: str = Field("en_US", min_length=1, description="Language of the message")


class VerifyCodeRequest(RequestModel):
    """Body of POST /{phone_number_id}/verify_code."""

    code: str = Field(..., min_length=1, description="Code received by SMS or voice")


class PhoneNumberSettingsRequest(RequestModel):
    """Body of POST /{phone_number_id} for settings updates."""

    messaging_product: Literal["whatsapp"] = "whatsapp"
    pin: str | None = Field(None, min_length=6, max_length=6)
