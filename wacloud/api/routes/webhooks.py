"""
Webhook routes for receiving WhatsApp notifications.

The router handles only HTTP concerns: the verification challenge, the
payload signature and schema validation. Parsed webhooks are handed to a
user-supplied async callable.
"""

import json
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from wacloud.core.config.settings import settings
from wacloud.core.logging.logger import get_logger
from wacloud.webhooks.whatsapp.signature import SIGNATURE_HEADER, verify_signature
from wacloud.webhooks.whatsapp.webhook_container import WhatsAppWebhook, parse_webhook

WebhookHandler = Callable[[WhatsAppWebhook], Awaitable[None]]


def create_webhook_router(
    handler: WebhookHandler,
    verify_token: str | None = None,
    app_secret: str | None = None,
    path: str = "/webhook",
) -> APIRouter:
    """
    Create the webhook router.

    Args:
        handler: Awaited with every valid WhatsAppWebhook
        verify_token: Token expected in ``hub.verify_token``
            (default: WHATSAPP_WEBHOOK_VERIFY_TOKEN)
        app_secret: App secret used to check X-Hub-Signature-256; no check
            when unset (default: WHATSAPP_APP_SECRET)
        path: Route path for both endpoints

    Returns:
        APIRouter with GET (verification) and POST (notifications) endpoints
    """
    logger = get_logger(__name__)
    expected_token = verify_token or settings.whatsapp_webhook_verify_token
    secret = app_secret or settings.whatsapp_app_secret

    router = APIRouter(
        tags=["Webhooks"],
        responses={
            400: {"description": "Bad Request - Invalid webhook request"},
            403: {"description": "Forbidden - Verification or signature failed"},
            422: {"description": "Unprocessable Entity - Unknown payload shape"},
        },
    )

    @router.get(path, response_class=PlainTextResponse)
    async def verify_webhook(
        hub_mode: str | None = Query(None, alias="hub.mode"),
        hub_verify_token: str | None = Query(None, alias="hub.verify_token"),
        hub_challenge: str | None = Query(None, alias="hub.challenge"),
    ):
        """Answer the subscription challenge sent by WhatsApp."""
        if hub_mode != "subscribe" or not hub_challenge:
            logger.error(f"Invalid webhook verification request (mode: {hub_mode})")
            raise HTTPException(status_code=400, detail="Invalid verification request")

        if not hub_verify_token or not expected_token:
            logger.error("Missing webhook verification token")
            raise HTTPException(status_code=403, detail="Missing verification token")

        if hub_verify_token != expected_token:
            logger.error("Invalid webhook verification token received")
            raise HTTPException(status_code=403, detail="Invalid verification token")

        logger.info("Webhook verification successful")
        return PlainTextResponse(content=hub_challenge)

    @router.post(path)
    async def receive_webhook(request: Request) -> dict[str, str]:
        """Validate a notification and pass it to the handler."""
        body = await request.body()

        if secret and not verify_signature(
            body, request.headers.get(SIGNATURE_HEADER), secret
        ):
            logger.error("Webhook signature verification failed")
            raise HTTPException(status_code=403, detail="Invalid signature")

        try:
            payload = json.loads(body)
        except ValueError as e:
            logger.error(f"Webhook body is not valid JSON: {e}")
            raise HTTPException(status_code=400, detail="Invalid JSON payload") from e

        try:
            webhook = parse_webhook(payload)
        except ValidationError as e:
            logger.error(f"Webhook payload failed validation: {e.error_count()} errors")
            raise HTTPException(
                status_code=422, detail=e.errors(include_url=False, include_input=False)
            ) from e

        logger.debug(f"Webhook received with {len(webhook.entry)} entries")
        await handler(webhook)
        return {"status": "ok"}

    return router
