"""
WhatsApp Business Account (WABA) models.
"""

from enum import Enum

from pydantic import Field

from wacloud.messaging.whatsapp.models.basic_models import (
    Paging,
    RequestModel,
    ResponseModel,
)


class AccountReviewStatus(str, Enum):
    APPROVED = "APPROVED"
    PENDING = "PENDING"
    REJECTED = "REJECTED"


class BusinessVerificationStatus(str, Enum):
    VERIFIED = "VERIFIED"
    UNVERIFIED = "UNVERIFIED"
    PENDING = "PENDING"


class WABAField(str, Enum):
    """Fields selectable with the ``fields`` query parameter."""

    ID = "id"
    NAME = "name"
    TIMEZONE_ID = "timezone_id"
    MESSAGE_TEMPLATE_NAMESPACE = "message_template_namespace"
    ACCOUNT_REVIEW_STATUS = "account_review_status"
    BUSINESS_VERIFICATION_STATUS = "business_verification_status"
    CURRENCY = "currency"
    OWNER_BUSINESS_INFO = "owner_business_info"


class OwnerBusinessInfo(ResponseModel):
    id: str
    name: str | None = None
    verification_status: str | None = None


class WABA(ResponseModel):
    """WhatsApp Business Account."""

    id: str
    name: str | None = None
    timezone_id: str | None = None
    message_template_namespace: str | None = None
    account_review_status: AccountReviewStatus | None = None
    business_verification_status: BusinessVerificationStatus | None = None
    currency: str | None = None
    owner_business_info: OwnerBusinessInfo | None = None


class WABAListResponse(ResponseModel):
    data: list[WABA]
    paging: Paging | None = None


class ListWABAOptions(RequestModel):
    """Query options for listing business accounts."""

    fields: list[WABAField] | None = None
    limit: int | None = Field(None, ge=1, le=100, description="Page size")
    after: str | None = Field(None, description="Cursor for the next page")
    before: str | None = Field(None, description="Cursor for the previous page")

    def to_query_params(self) -> dict[str, str | int | None]:
        return {
            "fields": ",".join(f.value for f in self.fields) if self.fields else None,
            "limit": self.limit,
            "after": self.after,
            "before": self.before,
        }
