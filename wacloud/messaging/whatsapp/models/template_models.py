"""
WhatsApp template models.

Two families live here:
- Send-side models (Template, TemplateComponent, TemplateParameter) embedded
  in a ``type: "template"`` message
- Management models for the ``/{waba_id}/message_templates`` endpoints
  (create, list, update, delete)
"""

from enum import Enum
from typing import Any

from pydantic import Field, model_validator

from wacloud.messaging.whatsapp.models.basic_models import (
    HttpUrlStr,
    Paging,
    RequestModel,
    ResponseModel,
    SuccessResponse,
)


class TemplateParameterType(str, Enum):
    """Template parameter types."""

    TEXT = "text"
    CURRENCY = "currency"
    DATE_TIME = "date_time"
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"


class TemplateComponentKind(str, Enum):
    """Component types when sending a template."""

    HEADER = "header"
    BODY = "body"
    BUTTON = "button"


class TemplateButtonSubType(str, Enum):
    QUICK_REPLY = "quick_reply"
    URL = "url"


class TemplateLanguagePolicy(str, Enum):
    DETERMINISTIC = "deterministic"
    FALLBACK = "fallback"


class TemplateCategory(str, Enum):
    """Template categories accepted by WhatsApp."""

    AUTHENTICATION = "AUTHENTICATION"
    MARKETING = "MARKETING"
    UTILITY = "UTILITY"


class TemplateStatus(str, Enum):
    """Review status of a template."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    PAUSED = "PAUSED"
    DISABLED = "DISABLED"


class TemplateComponentType(str, Enum):
    """Component types when defining a template."""

    HEADER = "HEADER"
    BODY = "BODY"
    FOOTER = "FOOTER"
    BUTTONS = "BUTTONS"
    CAROUSEL = "CAROUSEL"


class TemplateHeaderFormat(str, Enum):
    TEXT = "TEXT"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    DOCUMENT = "DOCUMENT"
    LOCATION = "LOCATION"


class TemplateButtonType(str, Enum):
    PHONE_NUMBER = "PHONE_NUMBER"
    URL = "URL"
    QUICK_REPLY = "QUICK_REPLY"
    COPY_CODE = "COPY_CODE"


# Send-side models


class CurrencyParameter(RequestModel):
    fallback_value: str = Field(..., description="Text shown if localization fails")
    code: str = Field(..., description="ISO 4217 currency code")
    amount_1000: int = Field(..., description="Amount multiplied by 1000")


class DateTimeParameter(RequestModel):
    fallback_value: str = Field(..., description="Date/time text to display")


class LinkMedia(RequestModel):
    link: HttpUrlStr = Field(..., description="Public URL of the media")


class LinkDocument(LinkMedia):
    filename: str | None = Field(None, description="Document filename")


class TemplateParameter(RequestModel):
    """Parameter for dynamic content replacement."""

    type: TemplateParameterType = Field(..., description="Parameter type")
    text: str | None = Field(None, description="Text content for text parameters")
    currency: CurrencyParameter | None = None
    date_time: DateTimeParameter | None = None
    image: LinkMedia | None = None
    document: LinkDocument | None = None
    video: LinkMedia | None = None

    @model_validator(mode="after")
    def validate_value_for_type(self):
        """Validate that the value matching ``type`` is provided."""
        if getattr(self, self.type.value) is None:
            raise ValueError(
                f"'{self.type.value}' is required for {self.type.value} parameters"
            )
        return self


class TemplateComponent(RequestModel):
    """Component filled in when sending (header, body, button)."""

    type: TemplateComponentKind = Field(..., description="Component type")
    parameters: list[TemplateParameter] | None = Field(
        None, description="Component parameters"
    )
    sub_type: TemplateButtonSubType | None = Field(
        None, description="Button sub type (button components only)"
    )
    index: int | None = Field(None, ge=0, description="Button position (0-based)")


class TemplateLanguage(RequestModel):
    """Template language configuration."""

    code: str = Field(..., min_length=1, description="Language code, e.g. en_US")
    policy: TemplateLanguagePolicy = Field(
        default=TemplateLanguagePolicy.DETERMINISTIC, description="Language policy"
    )


class Template(RequestModel):
    """Template reference sent inside a template message."""

    name: str = Field(..., min_length=1, max_length=512, description="Template name")
    language: TemplateLanguage = Field(..., description="Template language")
    components: list[TemplateComponent] | None = Field(
        None, description="Components with parameters"
    )


# Management models


class TemplateButton(RequestModel):
    type: TemplateButtonType = Field(..., description="Button type")
    text: str = Field(..., description="Button label")
    url: str | None = Field(None, description="URL for URL buttons")
    phone_number: str | None = Field(None, description="Phone for PHONE_NUMBER buttons")
    example: list[str] | None = Field(None, description="Sample values")


class TemplateExample(RequestModel):
    header_text: list[str] | None = None
    header_handle: list[str] | None = None
    body_text: list[list[str]] | None = None


class CarouselCard(RequestModel):
    components: list[Any] = Field(..., description="Card components")


class TemplateDefinitionComponent(RequestModel):
    """Component of a template definition."""

    type: TemplateComponentType = Field(..., description="Component type")
    format: TemplateHeaderFormat | None = Field(
        None, description="Header format (HEADER components only)"
    )
    text: str | None = Field(None, description="Component text with {{n}} placeholders")
    buttons: list[TemplateButton] | None = None
    example: TemplateExample | None = None
    cards: list[CarouselCard] | None = None


class CreateTemplateRequest(RequestModel):
    """Body of POST /{waba_id}/message_templates."""

    name: str = Field(..., min_length=1, max_length=512, description="Template name")
    language: str = Field(..., min_length=1, description="Language code")
    category: TemplateCategory = Field(..., description="Template category")
    components: list[TemplateDefinitionComponent] = Field(
        ..., description="Template components"
    )
    allow_category_change: bool | None = Field(
        None, description="Let WhatsApp re-categorize the template"
    )


class UpdateTemplateRequest(RequestModel):
    """Body of POST /{template_id}. Most properties are immutable after creation."""

    category: TemplateCategory | None = None


class TemplateResponse(ResponseModel):
    """Template returned by create, get and update."""

    id: str
    status: TemplateStatus
    category: TemplateCategory
    name: str | None = None
    language: str | None = None
    rejected_reason: str | None = None


class TemplateSummary(ResponseModel):
    """Template entry of a list response."""

    id: str
    name: str
    status: TemplateStatus
    category: TemplateCategory
    language: str
    components: list[Any] | None = None
    rejected_reason: str | None = None


class TemplateListResponse(ResponseModel):
    data: list[TemplateSummary]
    paging: Paging | None = None


class TemplateDeleteResponse(SuccessResponse):
    pass
