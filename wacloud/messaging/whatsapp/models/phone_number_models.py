"""
Phone number models for the /{waba_id}/phone_numbers and /{phone_number_id}
lookup endpoints.
"""

import json
from enum import Enum

from pydantic import Field

from wacloud.messaging.whatsapp.models.basic_models import (
    Paging,
    RequestModel,
    ResponseModel,
)
from wacloud.messaging.whatsapp.models.business_models import QualityRating


class NameStatus(str, Enum):
    """Review status of a display name."""

    APPROVED = "APPROVED"
    AVAILABLE_WITHOUT_REVIEW = "AVAILABLE_WITHOUT_REVIEW"
    DECLINED = "DECLINED"
    EXPIRED = "EXPIRED"
    PENDING_REVIEW = "PENDING_REVIEW"
    NONE = "NONE"


class CodeVerificationStatus(str, Enum):
    VERIFIED = "VERIFIED"
    NOT_VERIFIED = "NOT_VERIFIED"
    EXPIRED = "EXPIRED"


class PlatformType(str, Enum):
    CLOUD_API = "CLOUD_API"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class AccountMode(str, Enum):
    SANDBOX = "SANDBOX"
    LIVE = "LIVE"


class ThroughputLevel(str, Enum):
    STANDARD = "STANDARD"
    HIGH = "HIGH"
    VERY_HIGH = "VERY_HIGH"
    UNLIMITED = "UNLIMITED"


class PhoneNumberField(str, Enum):
    """Fields selectable with the ``fields`` query parameter."""

    ID = "id"
    DISPLAY_PHONE_NUMBER = "display_phone_number"
    VERIFIED_NAME = "verified_name"
    QUALITY_RATING = "quality_rating"
    CODE_VERIFICATION_STATUS = "code_verification_status"
    PLATFORM_TYPE = "platform_type"
    THROUGHPUT = "throughput"
    WEBHOOK_CONFIGURATION = "webhook_configuration"
    LAST_ONBOARDED_TIME = "last_onboarded_time"
    ACCOUNT_MODE = "account_mode"
    CERTIFICATE = "certificate"
    NAME_STATUS = "name_status"
    NEW_NAME_STATUS = "new_name_status"
    DECISION = "decision"
    REQUESTED_VERIFIED_NAME = "requested_verified_name"
    REJECTION_REASON = "rejection_reason"


# Fields every PhoneNumber response must carry
REQUIRED_PHONE_NUMBER_FIELDS = [
    PhoneNumberField.ID,
    PhoneNumberField.DISPLAY_PHONE_NUMBER,
    PhoneNumberField.VERIFIED_NAME,
]


class Throughput(ResponseModel):
    level: ThroughputLevel | None = None


class WebhookConfiguration(ResponseModel):
    application: str | None = None
    whatsapp_business_account: str | None = None
    whitelisted_domains: list[str] | None = None


class PhoneNumber(ResponseModel):
    """Phone number registered on a WhatsApp Business Account."""

    id: str
    display_phone_number: str
    verified_name: str
    quality_rating: QualityRating | None = None
    code_verification_status: CodeVerificationStatus | None = None
    platform_type: PlatformType | None = None
    throughput: Throughput | None = None
    webhook_configuration: WebhookConfiguration | None = None
    last_onboarded_time: str | None = None
    account_mode: AccountMode | None = None
    certificate: str | None = None
    name_status: NameStatus | None = None
    new_name_status: NameStatus | None = None
    decision: str | None = None
    requested_verified_name: str | None = None
    rejection_reason: str | None = None


class PhoneNumberListResponse(ResponseModel):
    data: list[PhoneNumber]
    paging: Paging | None = None


class DisplayNameStatus(ResponseModel):
    """Response of GET /{phone_number_id}/whatsapp_business_display_name."""

    name_status: NameStatus
    new_name_status: NameStatus | None = None
    decision: str | None = None
    requested_verified_name: str | None = None
    rejection_reason: str | None = None


class FilterOperator(str, Enum):
    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    IN = "IN"
    NOT_IN = "NOT_IN"


class PhoneNumberFilter(RequestModel):
    """Filter predicate serialized as JSON in the ``filtering`` parameter."""

    field: str = Field(..., min_length=1, description="Field to filter on")
    operator: FilterOperator = Field(..., description="Comparison operator")
    value: str | list[str] = Field(..., description="Value or values to compare")


class ListPhoneNumbersOptions(RequestModel):
    """Query options for listing phone numbers."""

    fields: list[PhoneNumberField] | None = None
    limit: int | None = Field(None, ge=1, le=100, description="Page size")
    after: str | None = Field(None, description="Cursor for the next page")
    before: str | None = Field(None, description="Cursor for the previous page")
    filtering: list[PhoneNumberFilter] | None = None

    def to_query_params(self) -> dict[str, str | int | None]:
        """Query parameters: comma-joined fields, JSON-encoded filters."""
        return {
            "fields": ",".join(f.value for f in self.fields) if self.fields else None,
            "limit": self.limit,
            "after": self.after,
            "before": self.before,
            "filtering": (
                json.dumps(
                    [f.model_dump(mode="json") for f in self.filtering],
                    separators=(",", ":"),
                )
                if self.filtering
                else None
            ),
        }
