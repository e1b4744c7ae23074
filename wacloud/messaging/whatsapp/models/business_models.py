"""
Business profile and commerce settings models.
"""

from enum import Enum
from typing import Literal

from pydantic import Field

from wacloud.messaging.whatsapp.models.basic_models import (
    HttpUrlStr,
    RequestModel,
    ResponseModel,
    SuccessResponse,
)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

DEFAULT_PROFILE_FIELDS = [
    "about",
    "address",
    "description",
    "email",
    "profile_picture_url",
    "websites",
    "vertical",
]


class BusinessVertical(str, Enum):
    """Industry of the business shown on the profile."""

    AUTOMOTIVE = "AUTOMOTIVE"
    BEAUTY = "BEAUTY"
    APPAREL = "APPAREL"
    EDU = "EDU"
    ENTERTAIN = "ENTERTAIN"
    EVENT_PLAN = "EVENT_PLAN"
    FINANCE = "FINANCE"
    GROCERY = "GROCERY"
    GOVT = "GOVT"
    HOTEL = "HOTEL"
    HEALTH = "HEALTH"
    NONPROFIT = "NONPROFIT"
    PROF_SERVICES = "PROF_SERVICES"
    RETAIL = "RETAIL"
    TRAVEL = "TRAVEL"
    RESTAURANT = "RESTAURANT"
    NOT_A_BIZ = "NOT_A_BIZ"


class QualityRating(str, Enum):
    """Phone number quality rating."""

    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"
    UNKNOWN = "UNKNOWN"


class BusinessProfile(ResponseModel):
    """Business profile as returned by GET /{phone_number_id}/whatsapp_business_profile."""

    messaging_product: Literal["whatsapp"]
    about: str | None = Field(None, max_length=256)
    address: str | None = Field(None, max_length=256)
    description: str | None = Field(None, max_length=512)
    email: str | None = Field(None, pattern=EMAIL_PATTERN)
    profile_picture_url: HttpUrlStr | None = None
    websites: list[HttpUrlStr] | None = Field(None, max_length=2)
    vertical: BusinessVertical | None = None


class UpdateBusinessProfileRequest(RequestModel):
    """Body of POST /{phone_number_id}/whatsapp_business_profile."""

    messaging_product: Literal["whatsapp"] = "whatsapp"
    about: str | None = Field(None, max_length=256, description="Profile 'About' text")
    address: str | None = Field(None, max_length=256, description="Business address")
    description: str | None = Field(
        None, max_length=512, description="Business description"
    )
    email: str | None = Field(None, pattern=EMAIL_PATTERN, description="Contact email")
    profile_picture_url: HttpUrlStr | None = None
    profile_picture_handle: str | None = Field(
        None, description="Upload handle from the resumable upload API"
    )
    websites: list[HttpUrlStr] | None = Field(
        None, max_length=2, description="Up to two websites"
    )
    vertical: BusinessVertical | None = None


class BusinessProfileResponse(ResponseModel):
    data: list[BusinessProfile]


class UpdateBusinessProfileResponse(SuccessResponse):
    pass


class CommerceSettings(RequestModel):
    """Body of POST /{waba_id}/whatsapp_commerce_settings."""

    is_catalog_visible: bool | None = None
    is_cart_enabled: bool | None = None


class CommerceSettingsEntry(ResponseModel):
    id: str
    is_catalog_visible: bool
    is_cart_enabled: bool


class CommerceSettingsResponse(ResponseModel):
    data: list[CommerceSettingsEntry]


class PhoneNumberSummary(ResponseModel):
    """Name, number and quality of the configured phone number."""

    verified_name: str
    display_phone_number: str
    quality_rating: QualityRating
    id: str
