"""
Tests for webhook parsing, change dispatch and signature verification.
"""

import json

import pytest
from pydantic import ValidationError

from wacloud.webhooks.whatsapp import (
    MessagesChange,
    TemplateButtonType,
    TemplateCategoryUpdateChange,
    TemplateComponentsUpdateChange,
    TemplateComponentsUpdateValue,
    TemplateQualityScore,
    TemplateQualityUpdateChange,
    TemplateStatusUpdateChange,
    UnknownChange,
    compute_signature,
    iter_changes,
    iter_messages,
    iter_statuses,
    parse_webhook,
    verify_signature,
)

METADATA = {"display_phone_number": "15550100", "phone_number_id": "1234567890"}


def webhook(*changes: dict) -> dict:
    return {
        "object": "whatsapp_business_account",
        "entry": [{"id": "9876543210", "time": 1700000000, "changes": list(changes)}],
    }


def messages_change(**value) -> dict:
    return {
        "field": "messages",
        "value": {"messaging_product": "whatsapp", "metadata": METADATA, **value},
    }


TEXT_MESSAGE = {
    "from": "15551234567",
    "id": "wamid.IN1",
    "timestamp": "1700000000",
    "type": "text",
    "text": {"body": "Hola"},
}


class TestMessagesWebhook:
    """Test the messages field."""

    def test_inbound_text(self):
        """Test an inbound text message with its contact."""
        payload = webhook(
            messages_change(
                contacts=[{"profile": {"name": "Ada"}, "wa_id": "15551234567"}],
                messages=[TEXT_MESSAGE],
            )
        )

        parsed = parse_webhook(payload)

        change = parsed.entry[0].changes[0]
        assert isinstance(change, MessagesChange)
        assert change.value.contacts[0].profile.name == "Ada"
        message = change.value.messages[0]
        assert message.from_ == "15551234567"
        assert message.text.body == "Hola"

    def test_interactive_reply_with_context(self):
        """Test button replies keep the reply context."""
        message = {
            "from": "15551234567",
            "id": "wamid.IN2",
            "timestamp": "1700000001",
            "type": "interactive",
            "context": {"from": "15550100", "id": "wamid.OUT1"},
            "interactive": {
                "type": "button_reply",
                "button_reply": {"id": "yes", "title": "Yes"},
            },
        }

        parsed = parse_webhook(webhook(messages_change(messages=[message])))

        inbound = next(iter_messages(parsed))
        assert inbound.context.id == "wamid.OUT1"
        assert inbound.context.from_ == "15550100"
        assert inbound.interactive.button_reply.id == "yes"

    def test_media_message(self):
        """Test media attachments expose the media ID."""
        message = {
            **TEXT_MESSAGE,
            "type": "image",
            "image": {"id": "media-9", "mime_type": "image/jpeg", "sha256": "abc"},
        }
        del message["text"]

        parsed = parse_webhook(webhook(messages_change(messages=[message])))

        assert next(iter_messages(parsed)).image.id == "media-9"

    def test_statuses(self):
        """Test outbound statuses with pricing and errors."""
        statuses = [
            {
                "id": "wamid.OUT1",
                "recipient_id": "15551234567",
                "status": "delivered",
                "timestamp": "1700000002",
                "conversation": {"id": "conv-1", "origin": {"type": "service"}},
                "pricing": {"pricing_model": "CBP", "billable": True, "category": "service"},
            },
            {
                "id": "wamid.OUT2",
                "recipient_id": "15551234567",
                "status": "failed",
                "timestamp": "1700000003",
                "errors": [{"code": 131047, "title": "Re-engagement message"}],
            },
        ]

        parsed = parse_webhook(webhook(messages_change(statuses=statuses)))

        result = list(iter_statuses(parsed))
        assert [s.status for s in result] == ["delivered", "failed"]
        assert result[0].pricing.billable is True
        assert result[1].errors[0].code == 131047

    def test_unknown_status_rejected(self):
        """Test status values outside the known set fail validation."""
        statuses = [
            {
                "id": "wamid.OUT1",
                "recipient_id": "1",
                "status": "bounced",
                "timestamp": "1",
            }
        ]

        with pytest.raises(ValidationError):
            parse_webhook(webhook(messages_change(statuses=statuses)))

    def test_extra_keys_preserved(self):
        """Test unknown keys survive parsing."""
        message = {**TEXT_MESSAGE, "brand_new_field": {"x": 1}}

        parsed = parse_webhook(webhook(messages_change(messages=[message])))

        assert next(iter_messages(parsed)).model_extra == {"brand_new_field": {"x": 1}}


class TestTemplateWebhooks:
    """Test template lifecycle fields."""

    def test_status_update(self):
        """Test a template status update."""
        change = {
            "field": "message_template_status_update",
            "value": {
                "event": "REJECTED",
                "message_template_id": 111,
                "message_template_name": "promo",
                "message_template_language": "en_US",
                "reason": "INVALID_FORMAT",
            },
        }

        parsed = parse_webhook(webhook(change))

        result = parsed.entry[0].changes[0]
        assert isinstance(result, TemplateStatusUpdateChange)
        assert result.value.reason == "INVALID_FORMAT"

    def test_quality_update(self):
        """Test a template quality update."""
        change = {
            "field": "message_template_quality_update",
            "value": {
                "previous_quality_score": "GREEN",
                "new_quality_score": "YELLOW",
                "message_template_id": 111,
                "message_template_name": "promo",
                "message_template_language": "en_US",
            },
        }

        result = parse_webhook(webhook(change)).entry[0].changes[0]

        assert isinstance(result, TemplateQualityUpdateChange)
        assert result.value.new_quality_score == TemplateQualityScore.YELLOW

    def test_components_update(self):
        """Test a template components update with its buttons."""
        change = {
            "field": "message_template_components_update",
            "value": {
                "message_template_id": 111,
                "message_template_name": "promo",
                "message_template_language": "en_US",
                "message_template_title": "Spring sale",
                "message_template_element": "Hi {{1}}, bikes are 20% off this week.",
                "message_template_footer": "Reply STOP to opt out",
                "message_template_buttons": [
                    {
                        "message_template_button_type": "URL",
                        "message_template_button_text": "Shop now",
                        "message_template_button_url": "https://shop.example.com/sale",
                    },
                    {
                        "message_template_button_type": "QUICK_REPLY",
                        "message_template_button_text": "Not interested",
                    },
                ],
            },
        }

        result = parse_webhook(webhook(change)).entry[0].changes[0]

        assert isinstance(result, TemplateComponentsUpdateChange)
        assert isinstance(result.value, TemplateComponentsUpdateValue)
        buttons = result.value.message_template_buttons
        assert buttons[0].message_template_button_type == TemplateButtonType.URL
        assert buttons[0].message_template_button_url == "https://shop.example.com/sale"
        assert buttons[1].message_template_button_type == TemplateButtonType.QUICK_REPLY
        assert result.value.message_template_footer == "Reply STOP to opt out"
        assert result.value.model_extra == {}
        assert not hasattr(result.value, "event")

    def test_components_update_unknown_button_type(self):
        """Test button types outside the known set fail validation."""
        change = {
            "field": "message_template_components_update",
            "value": {
                "message_template_id": 111,
                "message_template_name": "promo",
                "message_template_language": "en_US",
                "message_template_element": "Hi",
                "message_template_buttons": [
                    {
                        "message_template_button_type": "HOLOGRAM",
                        "message_template_button_text": "Beam me",
                    }
                ],
            },
        }

        with pytest.raises(ValidationError):
            parse_webhook(webhook(change))

    def test_components_update_is_not_a_status_update(self):
        """Test a status update body sent under the components field is rejected."""
        change = {
            "field": "message_template_components_update",
            "value": {
                "event": "APPROVED",
                "message_template_id": 111,
                "message_template_name": "promo",
                "message_template_language": "en_US",
            },
        }

        with pytest.raises(ValidationError):
            parse_webhook(webhook(change))

    def test_category_update(self):
        """Test a template category update."""
        change = {
            "field": "template_category_update",
            "value": {
                "message_template_id": 111,
                "message_template_name": "promo",
                "message_template_language": "en_US",
                "previous_category": "UTILITY",
                "new_category": "MARKETING",
            },
        }

        result = parse_webhook(webhook(change)).entry[0].changes[0]

        assert isinstance(result, TemplateCategoryUpdateChange)
        assert result.value.new_category == "MARKETING"


class TestEnvelope:
    """Test the envelope and change dispatch."""

    def test_unknown_field_kept_raw(self):
        """Test fields without a schema parse to UnknownChange."""
        change = {"field": "account_alerts", "value": {"alert": "x"}}

        result = parse_webhook(webhook(change)).entry[0].changes[0]

        assert isinstance(result, UnknownChange)
        assert result.field == "account_alerts"
        assert result.value == {"alert": "x"}

    def test_known_field_with_bad_value_rejected(self):
        """Test a known field does not fall back to UnknownChange."""
        change = {"field": "messages", "value": {"messaging_product": "whatsapp"}}

        with pytest.raises(ValidationError):
            parse_webhook(webhook(change))

    def test_wrong_object_rejected(self):
        """Test non-WhatsApp webhooks are rejected."""
        payload = {**webhook(), "object": "page"}

        with pytest.raises(ValidationError):
            parse_webhook(payload)

    def test_parse_raw_json(self):
        """Test parsing bytes and str bodies."""
        payload = webhook(messages_change(messages=[TEXT_MESSAGE]))
        raw = json.dumps(payload)

        from_bytes = parse_webhook(raw.encode())
        from_str = parse_webhook(raw)

        assert from_bytes == from_str
        assert next(iter_messages(from_bytes)).id == "wamid.IN1"

    def test_iter_changes_filters_by_field(self):
        """Test iterating changes across entries."""
        payload = webhook(
            messages_change(messages=[TEXT_MESSAGE]),
            {"field": "security", "value": {}},
        )
        payload["entry"].append(
            {"id": "9876543210", "changes": [messages_change(messages=[TEXT_MESSAGE])]}
        )

        parsed = parse_webhook(payload)

        assert len(list(iter_changes(parsed))) == 3
        assert len(list(iter_changes(parsed, "messages"))) == 2
        assert len(list(iter_messages(parsed))) == 2
        assert parsed.entry[1].time is None


class TestSignature:
    """Test X-Hub-Signature-256 verification."""

    def test_valid_signature(self):
        """Test a signature computed with the app secret verifies."""
        body = b'{"object":"whatsapp_business_account","entry":[]}'
        header = compute_signature(body, "app-secret")

        assert header.startswith("sha256=")
        assert verify_signature(body, header, "app-secret") is True

    @pytest.mark.parametrize(
        "header",
        [None, "", "md5=abc", "sha256=deadbeef"],
    )
    def test_invalid_signatures(self, header):
        """Test missing, malformed and wrong signatures fail."""
        assert verify_signature(b"{}", header, "app-secret") is False

    def test_wrong_secret(self):
        """Test a signature made with another secret fails."""
        body = b"{}"

        assert verify_signature(body, compute_signature(body, "other"), "app-secret") is False

    def test_tampered_body(self):
        """Test any change to the body invalidates the signature."""
        header = compute_signature(b'{"a":1}', "app-secret")

        assert verify_signature(b'{"a":2}', header, "app-secret") is False
