"""
Webhook subscription models for the /{waba_id}/subscribed_apps endpoints.
"""

from enum import Enum

from pydantic import Field

from wacloud.messaging.whatsapp.models.basic_models import (
    HttpUrlStr,
    RequestModel,
    ResponseModel,
    SuccessResponse,
)


class WebhookField(str, Enum):
    """Webhook fields an app can subscribe to."""

    MESSAGES = "messages"
    MESSAGE_TEMPLATE_STATUS_UPDATE = "message_template_status_update"
    MESSAGE_TEMPLATE_QUALITY_UPDATE = "message_template_quality_update"
    MESSAGE_TEMPLATE_COMPONENTS_UPDATE = "message_template_components_update"
    TEMPLATE_CATEGORY_UPDATE = "template_category_update"
    PHONE_NUMBER_NAME_UPDATE = "phone_number_name_update"
    PHONE_NUMBER_QUALITY_UPDATE = "phone_number_quality_update"
    ACCOUNT_ALERTS = "account_alerts"
    ACCOUNT_UPDATE = "account_update"
    BUSINESS_CAPABILITY_UPDATE = "business_capability_update"
    MESSAGE_ECHOES = "message_echoes"
    SECURITY = "security"


class SubscribeOptions(RequestModel):
    """Optional callback override for this WABA's subscription."""

    override_callback_uri: HttpUrlStr | None = Field(
        None, description="Callback URL replacing the app-level one"
    )
    verify_token: str | None = Field(
        None, description="Verify token checked by the callback endpoint"
    )


class SubscribeFieldsRequest(SubscribeOptions):
    subscribed_fields: list[WebhookField] = Field(..., min_length=1)


class WhatsAppBusinessApiData(ResponseModel):
    id: str
    name: str | None = None
    link: str | None = None


class SubscribedApp(ResponseModel):
    whatsapp_business_api_data: WhatsAppBusinessApiData | None = None
    override_callback_uri: str | None = None


class SubscriptionsList(ResponseModel):
    data: list[SubscribedApp]


class SubscriptionResponse(SuccessResponse):
    pass
