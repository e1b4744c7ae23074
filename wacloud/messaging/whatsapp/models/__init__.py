"""WhatsApp models package."""

from .basic_models import (
    ApiErrorEnvelope,
    ContactInfo,
    MessageId,
    Paging,
    SendMessageResponse,
    SuccessResponse,
)
from .business_models import (
    BusinessProfile,
    BusinessProfileResponse,
    BusinessVertical,
    CommerceSettings,
    CommerceSettingsResponse,
    PhoneNumberSummary,
    QualityRating,
    UpdateBusinessProfileRequest,
)
from .media_models import (
    MediaDeleteResponse,
    MediaFile,
    MediaUploadResponse,
    MediaUrlResponse,
)
from .message_models import (
    ContactCard,
    ContactName,
    ContactPhone,
    InteractiveHeader,
    ListRow,
    ListSection,
    LocationContent,
    MarkAsReadRequest,
    MediaReference,
    MessageType,
    OutgoingMessage,
    ReplyButton,
)
from .phone_number_models import (
    DisplayNameStatus,
    ListPhoneNumbersOptions,
    PhoneNumber,
    PhoneNumberField,
    PhoneNumberFilter,
    PhoneNumberListResponse,
)
from .qr_code_models import (
    CreateQRCodeRequest,
    QRCodeListResponse,
    QRCodeResponse,
    QRImageFormat,
    UpdateQRCodeRequest,
)
from .registration_models import (
    CodeMethod,
    PhoneNumberInfo,
    PhoneNumberSettingsRequest,
    RegisterRequest,
    RequestCodeRequest,
    VerifyCodeRequest,
)
from .subscription_models import (
    SubscribeOptions,
    SubscriptionResponse,
    SubscriptionsList,
    WebhookField,
)
from .template_models import (
    CreateTemplateRequest,
    Template,
    TemplateCategory,
    TemplateComponent,
    TemplateLanguage,
    TemplateListResponse,
    TemplateParameter,
    TemplateResponse,
    TemplateStatus,
    UpdateTemplateRequest,
)
from .two_step_models import TwoStepVerificationPin, TwoStepVerificationResponse
from .waba_models import WABA, ListWABAOptions, WABAField, WABAListResponse

__all__ = [
    # Shared
    "ApiErrorEnvelope",
    "ContactInfo",
    "MessageId",
    "Paging",
    "SendMessageResponse",
    "SuccessResponse",
    # Messages
    "MessageType",
    "OutgoingMessage",
    "MediaReference",
    "LocationContent",
    "ContactCard",
    "ContactName",
    "ContactPhone",
    "InteractiveHeader",
    "ReplyButton",
    "ListRow",
    "ListSection",
    "MarkAsReadRequest",
    # Templates
    "Template",
    "TemplateLanguage",
    "TemplateComponent",
    "TemplateParameter",
    "TemplateCategory",
    "TemplateStatus",
    "CreateTemplateRequest",
    "UpdateTemplateRequest",
    "TemplateResponse",
    "TemplateListResponse",
    # Media
    "MediaUploadResponse",
    "MediaUrlResponse",
    "MediaDeleteResponse",
    "MediaFile",
    # Business
    "BusinessProfile",
    "BusinessProfileResponse",
    "BusinessVertical",
    "UpdateBusinessProfileRequest",
    "CommerceSettings",
    "CommerceSettingsResponse",
    "PhoneNumberSummary",
    "QualityRating",
    # Phone numbers
    "PhoneNumber",
    "PhoneNumberListResponse",
    "PhoneNumberField",
    "PhoneNumberFilter",
    "ListPhoneNumbersOptions",
    "DisplayNameStatus",
    # Registration
    "RegisterRequest",
    "PhoneNumberInfo",
    "RequestCodeRequest",
    "VerifyCodeRequest",
    "PhoneNumberSettingsRequest",
    "CodeMethod",
    # QR codes
    "CreateQRCodeRequest",
    "UpdateQRCodeRequest",
    "QRCodeResponse",
    "QRCodeListResponse",
    "QRImageFormat",
    # WABA
    "WABA",
    "WABAField",
    "WABAListResponse",
    "ListWABAOptions",
    # Subscriptions
    "WebhookField",
    "SubscribeOptions",
    "SubscriptionsList",
    "SubscriptionResponse",
    # Two-step verification
    "TwoStepVerificationPin",
    "TwoStepVerificationResponse",
]
