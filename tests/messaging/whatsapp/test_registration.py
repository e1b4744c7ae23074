"""
Tests for phone number registration and QR codes.
"""

import pytest
from pydantic import ValidationError

from wacloud.messaging.whatsapp.models.registration_models import PhoneNumberStatus

BASE = "https://graph.facebook.com/v21.0"
PHONE_URL = f"{BASE}/1234567890"
QR_URL = f"{PHONE_URL}/message_qrdls"

QR_CODE = {
    "code": "4O4YGZEG3RIVE1",
    "prefilled_message": "Hi!",
    "deep_link_url": "https://wa.me/message/4O4YGZEG3RIVE1",
}


@pytest.mark.asyncio
class TestRegistration:
    """Test the registration flow."""

    async def test_request_and_verify_code(self, api, fake_session):
        """Test requesting and verifying a code."""
        fake_session.queue({"success": True})
        fake_session.queue({"success": True})

        await api.registration.request_code("SMS")
        await api.registration.verify_code("654321")

        request_call, verify_call = fake_session.calls
        assert request_call.url == f"{PHONE_URL}/request_code"
        assert request_call.json == {"code_method": "SMS", "language": "en_US"}
        assert verify_call.url == f"{PHONE_URL}/verify_code"
        assert verify_call.json == {"code": "654321"}

    async def test_invalid_code_method(self, api, fake_session):
        """Test unknown delivery methods are rejected."""
        with pytest.raises(ValidationError):
            await api.registration.request_code("EMAIL")

        assert fake_session.calls == []

    async def test_register_and_deregister(self, api, fake_session):
        """Test register sends the PIN and deregister sends no body."""
        fake_session.queue({"success": True})
        fake_session.queue({"success": True})

        await api.registration.register("123456")
        await api.registration.deregister()

        register_call, deregister_call = fake_session.calls
        assert register_call.url == f"{PHONE_URL}/register"
        assert register_call.json == {"messaging_product": "whatsapp", "pin": "123456"}
        assert deregister_call.url == f"{PHONE_URL}/deregister"
        assert deregister_call.data is None

    async def test_register_rejects_bad_pin(self, api, fake_session):
        """Test a 7-character PIN is rejected before any call."""
        with pytest.raises(ValidationError):
            await api.registration.register("1234567")

        assert fake_session.calls == []

    async def test_get_info(self, api, fake_session):
        """Test the full registration view."""
        fake_session.queue(
            {
                "id": "1234567890",
                "verified_name": "Bikes",
                "display_phone_number": "+1 555-0100",
                "quality_rating": "GREEN",
                "platform_type": "CLOUD_API",
                "throughput": {"level": "STANDARD"},
                "status": "CONNECTED",
            }
        )

        info = await api.registration.get_info(["id", "status"])

        assert fake_session.last.url == f"{PHONE_URL}?fields=id,status"
        assert info.status == PhoneNumberStatus.CONNECTED

    async def test_update_settings(self, api, fake_session):
        """Test settings updates post to the phone number."""
        fake_session.queue({"success": True})

        await api.registration.update_settings({"pin": "112233"})

        assert fake_session.last.url == PHONE_URL
        assert fake_session.last.json == {"messaging_product": "whatsapp", "pin": "112233"}


@pytest.mark.asyncio
class TestQRCodes:
    """Test QR code management."""

    async def test_create_without_options(self, api, fake_session):
        """Test creating a QR code with no body."""
        fake_session.queue(QR_CODE)

        result = await api.qr_codes.create()

        assert fake_session.last.url == QR_URL
        assert fake_session.last.data is None
        assert result.code == "4O4YGZEG3RIVE1"

    async def test_create_with_options(self, api, fake_session):
        """Test creating a QR code with a prefilled message and image."""
        fake_session.queue(
            {**QR_CODE, "qr_image_url": "https://scontent.example.com/qr.png"}
        )

        result = await api.qr_codes.create(
            {"prefilled_message": "Hi!", "generate_qr_image": "PNG"}
        )

        assert fake_session.last.json == {
            "prefilled_message": "Hi!",
            "generate_qr_image": "PNG",
        }
        assert result.qr_image_url == "https://scontent.example.com/qr.png"

    async def test_prefilled_message_too_long(self, api, fake_session):
        """Test prefilled messages over 1000 characters are rejected."""
        with pytest.raises(ValidationError):
            await api.qr_codes.update("4O4YGZEG3RIVE1", {"prefilled_message": "x" * 1001})

        assert fake_session.calls == []

    async def test_list_get_delete(self, api, fake_session):
        """Test list, get and delete paths."""
        fake_session.queue({"data": [QR_CODE]})
        fake_session.queue(QR_CODE)
        fake_session.queue({"success": True})

        codes = await api.qr_codes.list()
        await api.qr_codes.get("4O4YGZEG3RIVE1")
        await api.qr_codes.delete("4O4YGZEG3RIVE1")

        list_call, get_call, delete_call = fake_session.calls
        assert len(codes.data) == 1
        assert list_call.url == QR_URL
        assert get_call.url == f"{QR_URL}/4O4YGZEG3RIVE1"
        assert delete_call.method == "DELETE"

    async def test_get_image(self, api, fake_session):
        """Test requesting a generated image."""
        fake_session.queue(
            {**QR_CODE, "qr_image_url": "https://scontent.example.com/qr.svg"}
        )

        await api.qr_codes.get_image("4O4YGZEG3RIVE1", "SVG")

        assert fake_session.last.url == f"{QR_URL}/4O4YGZEG3RIVE1?generate_qr_image=SVG"
