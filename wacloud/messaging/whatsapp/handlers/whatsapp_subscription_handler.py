"""
WhatsApp webhook subscription handler.

Subscriptions hang off the business account rather than the phone number,
so this handler builds its own account-level URL and sends it through
``WhatsAppClient.request_url``.
"""

from collections.abc import Sequence
from typing import Any

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.subscription_models import (
    SubscribeFieldsRequest,
    SubscribeOptions,
    SubscriptionResponse,
    SubscriptionsList,
    WebhookField,
)
from wacloud.messaging.whatsapp.utils.validation import dump_payload, validate_response


class WhatsAppSubscriptionHandler:
    """Subscribes the app to a WABA's webhooks."""

    def __init__(self, client: WhatsAppClient):
        """Initialize subscription handler.

        Args:
            client: Shared WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    def _subscribed_apps_url(self, waba_id: str | None, operation: str) -> str:
        waba_id = waba_id or self.client.config.require_waba_id(operation)
        config = self.client.config
        return f"{config.base_url}/{config.version}/{waba_id}/subscribed_apps"

    async def subscribe(
        self,
        waba_id: str | None = None,
        options: SubscribeOptions | dict[str, Any] | None = None,
    ) -> SubscriptionResponse:
        """Subscribe the app to webhooks of a WABA (the configured one by default).

        Args:
            waba_id: Business account to subscribe to
            options: Optional ``override_callback_uri`` and ``verify_token``
        """
        request = SubscribeOptions.model_validate(options or {})
        url = self._subscribed_apps_url(waba_id, "subscribe to webhooks")

        body = dump_payload(request) or None
        response = await self.client.request_url(url, method="POST", body=body)
        result = validate_response(SubscriptionResponse, response)

        self.logger.info(f"Subscribed to webhooks: {url}")
        return result

    async def get_subscriptions(self, waba_id: str | None = None) -> SubscriptionsList:
        """List apps subscribed to a WABA."""
        url = self._subscribed_apps_url(waba_id, "get webhook subscriptions")
        response = await self.client.request_url(url)
        return validate_response(SubscriptionsList, response)

    async def unsubscribe(self, waba_id: str | None = None) -> SubscriptionResponse:
        """Unsubscribe the app from a WABA."""
        url = self._subscribed_apps_url(waba_id, "unsubscribe from webhooks")
        response = await self.client.request_url(url, method="DELETE")
        result = validate_response(SubscriptionResponse, response)

        self.logger.info(f"Unsubscribed from webhooks: {url}")
        return result

    async def update_callback_url(
        self,
        callback_url: str,
        verify_token: str | None = None,
        waba_id: str | None = None,
    ) -> SubscriptionResponse:
        """Point this WABA's webhooks at a different callback URL."""
        return await self.subscribe(
            waba_id,
            {"override_callback_uri": callback_url, "verify_token": verify_token},
        )

    async def is_subscribed(self, waba_id: str | None = None) -> bool:
        """Whether any app is subscribed. ``False`` on any failure."""
        try:
            subscriptions = await self.get_subscriptions(waba_id)
        except Exception as e:
            self.logger.warning(f"Could not determine webhook subscriptions: {e}")
            return False
        return len(subscriptions.data) > 0

    async def subscribe_to_fields(
        self,
        fields: Sequence[WebhookField | str],
        options: SubscribeOptions | dict[str, Any] | None = None,
        waba_id: str | None = None,
    ) -> SubscriptionResponse:
        """Subscribe to specific webhook fields, e.g. ``["messages"]``."""
        base = SubscribeOptions.model_validate(options or {})
        request = SubscribeFieldsRequest(
            subscribed_fields=list(fields),
            override_callback_uri=base.override_callback_uri,
            verify_token=base.verify_token,
        )
        url = self._subscribed_apps_url(waba_id, "subscribe to webhook fields")

        response = await self.client.request_url(
            url, method="POST", body=dump_payload(request)
        )
        result = validate_response(SubscriptionResponse, response)

        self.logger.info(
            f"Subscribed to webhook fields: {', '.join(f.value for f in request.subscribed_fields)}"
        )
        return result
