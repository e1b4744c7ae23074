"""
WhatsApp message template management handler.

Templates live on the WhatsApp Business Account, so every operation on
/{waba_id}/message_templates requires ``waba_id`` in the configuration.
Lookups and updates by template ID do not.
"""

from typing import Any

from pydantic import TypeAdapter

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.template_models import (
    CreateTemplateRequest,
    TemplateDeleteResponse,
    TemplateListResponse,
    TemplateResponse,
    TemplateStatus,
    UpdateTemplateRequest,
)
from wacloud.messaging.whatsapp.utils.validation import dump_payload, validate_response

_template_status = TypeAdapter(TemplateStatus)


class WhatsAppTemplateHandler:
    """Creates, lists, updates and deletes message templates."""

    def __init__(self, client: WhatsAppClient):
        """Initialize template handler.

        Args:
            client: Shared WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    def _templates_path(self, operation: str, **params: Any) -> str:
        waba_id = self.client.config.require_waba_id(operation)
        return self.client.url_builder.with_query(
            f"{waba_id}/message_templates", params
        )

    async def create(
        self, template: CreateTemplateRequest | dict[str, Any]
    ) -> TemplateResponse:
        """
        Submit a new template for review.

        Example:
            await handler.create({
                "name": "order_confirmation",
                "language": "en_US",
                "category": "UTILITY",
                "components": [{"type": "BODY", "text": "Order {{1}} confirmed"}],
            })
        """
        request = CreateTemplateRequest.model_validate(template)
        path = self._templates_path("create template")

        response = await self.client.request(
            path, method="POST", body=dump_payload(request)
        )
        result = validate_response(TemplateResponse, response)

        self.logger.info(
            f"Template '{request.name}' created: {result.id} ({result.status.value})"
        )
        return result

    async def list(
        self, limit: int | None = None, after: str | None = None
    ) -> TemplateListResponse:
        """List templates, one page at a time."""
        path = self._templates_path("list templates", limit=limit, after=after)
        response = await self.client.request(path)
        return validate_response(TemplateListResponse, response)

    async def get(self, template_id: str) -> TemplateResponse:
        """Get a template by ID."""
        response = await self.client.request(template_id)
        return validate_response(TemplateResponse, response)

    async def update(
        self, template_id: str, updates: UpdateTemplateRequest | dict[str, Any]
    ) -> TemplateResponse:
        """Update a template. Most properties are immutable once created."""
        request = UpdateTemplateRequest.model_validate(updates)
        response = await self.client.request(
            template_id, method="POST", body=dump_payload(request)
        )
        result = validate_response(TemplateResponse, response)

        self.logger.info(f"Template {template_id} updated")
        return result

    async def delete(
        self, name: str, hsm_id: str | None = None
    ) -> TemplateDeleteResponse:
        """Delete a template by name, or one language version with ``hsm_id``."""
        path = self._templates_path("delete template", name=name, hsm_id=hsm_id)
        response = await self.client.request(path, method="DELETE")
        result = validate_response(TemplateDeleteResponse, response)

        self.logger.info(f"Template '{name}' deleted")
        return result

    async def get_by_name(self, name: str) -> TemplateListResponse:
        """Get every language version of a template."""
        path = self._templates_path("get templates by name", name=name)
        response = await self.client.request(path)
        return validate_response(TemplateListResponse, response)

    async def get_by_status(
        self,
        status: TemplateStatus | str,
        limit: int | None = None,
        after: str | None = None,
    ) -> TemplateListResponse:
        """List templates in a review status such as ``APPROVED``."""
        status = _template_status.validate_python(status)
        path = self._templates_path(
            "get templates by status", status=status.value, limit=limit, after=after
        )
        response = await self.client.request(path)
        return validate_response(TemplateListResponse, response)
