"""
WhatsApp Business Account (WABA) handler.

``is_verified`` and ``is_approved`` are best-effort checks: any failure is
logged and reported as ``False``.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.waba_models import (
    WABA,
    AccountReviewStatus,
    BusinessVerificationStatus,
    ListWABAOptions,
    WABAField,
    WABAListResponse,
)
from wacloud.messaging.whatsapp.utils.validation import validate_response

_waba_fields = TypeAdapter(list[WABAField])


class WhatsAppWABAHandler:
    """Looks up business accounts and their review and verification status."""

    def __init__(self, client: WhatsAppClient):
        """Initialize WABA handler.

        Args:
            client: Shared WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    async def get(
        self,
        waba_id: str | None = None,
        fields: Sequence[WABAField | str] | None = None,
    ) -> WABA:
        """Get a WABA (the configured one by default)."""
        params = {}
        if fields:
            selected = _waba_fields.validate_python(list(fields))
            params["fields"] = ",".join(f.value for f in selected)

        waba_id = waba_id or self.client.config.require_waba_id("get WABA")
        path = self.client.url_builder.with_query(waba_id, params)
        response = await self.client.request(path)
        return validate_response(WABA, response)

    async def _list(
        self, owner: str, options: ListWABAOptions | dict[str, Any] | None
    ) -> WABAListResponse:
        request = ListWABAOptions.model_validate(options or {})
        path = self.client.url_builder.with_query(
            f"{owner}/businesses", request.to_query_params()
        )
        response = await self.client.request(path)
        return validate_response(WABAListResponse, response)

    async def get_owned(
        self, options: ListWABAOptions | dict[str, Any] | None = None
    ) -> WABAListResponse:
        """List business accounts owned by the token's user."""
        return await self._list("me", options)

    async def get_shared(
        self, user_id: str, options: ListWABAOptions | dict[str, Any] | None = None
    ) -> WABAListResponse:
        """List business accounts shared with a user."""
        return await self._list(user_id, options)

    async def get_first(self) -> WABA | None:
        """First owned business account, or ``None`` when there is none."""
        response = await self.get_owned({"limit": 1})
        return response.data[0] if response.data else None

    async def is_verified(self, waba_id: str | None = None) -> bool:
        """Whether the business is verified. ``False`` on any failure."""
        try:
            waba = await self.get(waba_id, [WABAField.BUSINESS_VERIFICATION_STATUS])
        except Exception as e:
            self.logger.warning(f"Could not determine business verification: {e}")
            return False
        return waba.business_verification_status == BusinessVerificationStatus.VERIFIED

    async def is_approved(self, waba_id: str | None = None) -> bool:
        """Whether the account review is approved. ``False`` on any failure."""
        try:
            waba = await self.get(waba_id, [WABAField.ACCOUNT_REVIEW_STATUS])
        except Exception as e:
            self.logger.warning(f"Could not determine account review status: {e}")
            return False
        return waba.account_review_status == AccountReviewStatus.APPROVED
