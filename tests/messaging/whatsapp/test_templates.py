"""
Tests for template management.
"""

import pytest
from pydantic import ValidationError

from wacloud.messaging.whatsapp.models.template_models import TemplateStatus
from wacloud.messaging.whatsapp.utils.errors import MissingWabaIdError

BASE = "https://graph.facebook.com/v21.0"
TEMPLATES_URL = f"{BASE}/9876543210/message_templates"

NEW_TEMPLATE = {
    "name": "order_confirmation",
    "language": "en_US",
    "category": "UTILITY",
    "components": [
        {"type": "BODY", "text": "Order {{1}} confirmed", "example": {"body_text": [["A-1"]]}}
    ],
}

TEMPLATE_LIST = {
    "data": [
        {
            "id": "111",
            "name": "order_confirmation",
            "status": "APPROVED",
            "category": "UTILITY",
            "language": "en_US",
        }
    ],
    "paging": {"cursors": {"before": "b", "after": "a"}},
}


@pytest.mark.asyncio
class TestTemplateHandler:
    """Test template CRUD operations."""

    async def test_create(self, api, fake_session):
        """Test creating a template."""
        fake_session.queue({"id": "111", "status": "PENDING", "category": "UTILITY"})

        result = await api.templates.create(NEW_TEMPLATE)

        call = fake_session.last
        assert call.method == "POST"
        assert call.url == TEMPLATES_URL
        assert call.json == NEW_TEMPLATE
        assert result.id == "111"
        assert result.status == TemplateStatus.PENDING

    async def test_create_invalid_category(self, api, fake_session):
        """Test unknown categories are rejected locally."""
        with pytest.raises(ValidationError):
            await api.templates.create({**NEW_TEMPLATE, "category": "PROMO"})

        assert fake_session.calls == []

    async def test_list_with_paging(self, api, fake_session):
        """Test listing with limit and cursor."""
        fake_session.queue(TEMPLATE_LIST)

        result = await api.templates.list(limit=5, after="a")

        assert fake_session.last.url == f"{TEMPLATES_URL}?limit=5&after=a"
        assert result.data[0].name == "order_confirmation"
        assert result.paging.cursors.after == "a"

    async def test_get_and_update(self, api, fake_session):
        """Test lookup and update by template ID."""
        fake_session.queue({"id": "111", "status": "APPROVED", "category": "UTILITY"})
        fake_session.queue({"id": "111", "status": "APPROVED", "category": "MARKETING"})

        await api.templates.get("111")
        updated = await api.templates.update("111", {"category": "MARKETING"})

        get_call, update_call = fake_session.calls
        assert get_call.url == f"{BASE}/111"
        assert update_call.method == "POST"
        assert update_call.json == {"category": "MARKETING"}
        assert updated.category.value == "MARKETING"

    async def test_delete_by_name(self, api, fake_session):
        """Test deleting by name and optional hsm_id."""
        fake_session.queue({"success": True})

        await api.templates.delete("order_confirmation", hsm_id="111")

        assert fake_session.last.method == "DELETE"
        assert (
            fake_session.last.url
            == f"{TEMPLATES_URL}?name=order_confirmation&hsm_id=111"
        )

    async def test_get_by_status(self, api, fake_session):
        """Test filtering by review status."""
        fake_session.queue(TEMPLATE_LIST)

        await api.templates.get_by_status("APPROVED")

        assert fake_session.last.url == f"{TEMPLATES_URL}?status=APPROVED"

    async def test_get_by_unknown_status(self, api, fake_session):
        """Test unknown statuses are rejected locally."""
        with pytest.raises(ValidationError):
            await api.templates.get_by_status("LIVE")

        assert fake_session.calls == []

    async def test_get_by_name(self, api, fake_session):
        """Test lookup by name."""
        fake_session.queue(TEMPLATE_LIST)

        await api.templates.get_by_name("order_confirmation")

        assert fake_session.last.url == f"{TEMPLATES_URL}?name=order_confirmation"

    async def test_requires_waba_id(self, api_without_waba, fake_session):
        """Test WABA-scoped operations fail fast without a WABA ID."""
        with pytest.raises(MissingWabaIdError):
            await api_without_waba.templates.list()
        with pytest.raises(MissingWabaIdError):
            await api_without_waba.templates.create(NEW_TEMPLATE)

        assert fake_session.calls == []
