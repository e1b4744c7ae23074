"""
WhatsApp template lifecycle webhook value schemas.

Values for the changes:
- message_template_status_update
- message_template_quality_update
- message_template_components_update
- template_category_update
"""

from enum import Enum

from pydantic import Field

from wacloud.webhooks.whatsapp.messages import WebhookModel


class TemplateQualityScore(str, Enum):
    GREEN = "GREEN"
    RED = "RED"
    YELLOW = "YELLOW"
    UNKNOWN = "UNKNOWN"


class TemplateButtonType(str, Enum):
    """Button types reported in component updates."""

    CATALOG = "CATALOG"
    COPY_CODE = "COPY_CODE"
    EXTENSION = "EXTENSION"
    FLOW = "FLOW"
    MPM = "MPM"
    ORDER_DETAILS = "ORDER_DETAILS"
    OTP = "OTP"
    PHONE_NUMBER = "PHONE_NUMBER"
    POSTBACK = "POSTBACK"
    REMINDER = "REMINDER"
    SEND_LOCATION = "SEND_LOCATION"
    SPM = "SPM"
    QUICK_REPLY = "QUICK_REPLY"
    URL = "URL"
    VOICE_CALL = "VOICE_CALL"


class TemplateStatusUpdateValue(WebhookModel):
    """Review outcome of a template (APPROVED, REJECTED, PAUSED...)."""

    event: str = Field(..., description="New status of the template")
    message_template_id: int
    message_template_name: str
    message_template_language: str
    reason: str | None = Field(None, description="Rejection or pause reason")
    other_info: dict | None = None


class TemplateQualityUpdateValue(WebhookModel):
    previous_quality_score: TemplateQualityScore
    new_quality_score: TemplateQualityScore
    message_template_id: int
    message_template_name: str
    message_template_language: str


class TemplateComponentButton(WebhookModel):
    message_template_button_type: TemplateButtonType
    message_template_button_text: str
    message_template_button_url: str | None = None
    message_template_button_phone_number: str | None = None


class TemplateComponentsUpdateValue(WebhookModel):
    message_template_id: int
    message_template_name: str
    message_template_language: str
    message_template_element: str = Field(..., description="Body text")
    message_template_title: str | None = None
    message_template_footer: str | None = None
    message_template_buttons: list[TemplateComponentButton] | None = None


class TemplateCategoryUpdateValue(WebhookModel):
    """Category change applied to a template."""

    message_template_id: int
    message_template_name: str
    message_template_language: str
    previous_category: str
    new_category: str
    correct_category: str | None = None
