"""
Tests for the FastAPI webhook router.
"""

import json
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from wacloud.api import create_webhook_router
from wacloud.webhooks.whatsapp import WhatsAppWebhook, compute_signature

VERIFY_TOKEN = "test_webhook_token"
APP_SECRET = "app-secret"

PAYLOAD = {
    "object": "whatsapp_business_account",
    "entry": [
        {
            "id": "9876543210",
            "changes": [
                {
                    "field": "messages",
                    "value": {
                        "messaging_product": "whatsapp",
                        "metadata": {
                            "display_phone_number": "15550100",
                            "phone_number_id": "1234567890",
                        },
                        "messages": [
                            {
                                "from": "15551234567",
                                "id": "wamid.IN1",
                                "timestamp": "1700000000",
                                "type": "text",
                                "text": {"body": "Hola"},
                            }
                        ],
                    },
                }
            ],
        }
    ],
}


@pytest.fixture
def handler() -> AsyncMock:
    return AsyncMock()


def build_client(handler: AsyncMock, app_secret: str | None = None) -> TestClient:
    app = FastAPI(title="Test App")
    app.include_router(
        create_webhook_router(handler, verify_token=VERIFY_TOKEN, app_secret=app_secret)
    )
    return TestClient(app)


@pytest.fixture
def test_client(handler: AsyncMock) -> TestClient:
    return build_client(handler)


@pytest.fixture
def signed_client(handler: AsyncMock) -> TestClient:
    return build_client(handler, app_secret=APP_SECRET)


class TestVerification:
    """Test the GET challenge endpoint."""

    def test_challenge_echoed(self, test_client: TestClient):
        """Test a valid challenge is echoed as plain text."""
        response = test_client.get(
            "/webhook",
            params={
                "hub.mode": "subscribe",
                "hub.verify_token": VERIFY_TOKEN,
                "hub.challenge": "1158201444",
            },
        )

        assert response.status_code == 200
        assert response.text == "1158201444"
        assert response.headers["content-type"].startswith("text/plain")

    def test_wrong_token(self, test_client: TestClient):
        """Test a wrong verify token is forbidden."""
        response = test_client.get(
            "/webhook",
            params={
                "hub.mode": "subscribe",
                "hub.verify_token": "nope",
                "hub.challenge": "1",
            },
        )

        assert response.status_code == 403

    def test_missing_token(self, test_client: TestClient):
        """Test a missing verify token is forbidden."""
        response = test_client.get(
            "/webhook", params={"hub.mode": "subscribe", "hub.challenge": "1"}
        )

        assert response.status_code == 403

    @pytest.mark.parametrize(
        "params",
        [
            {},
            {"hub.verify_token": VERIFY_TOKEN, "hub.challenge": "1"},
            {"hub.mode": "subscribe", "hub.verify_token": VERIFY_TOKEN},
            {"hub.mode": "unsubscribe", "hub.verify_token": VERIFY_TOKEN, "hub.challenge": "1"},
        ],
    )
    def test_malformed_request(self, test_client: TestClient, params):
        """Test missing mode or challenge is a bad request."""
        response = test_client.get("/webhook", params=params)

        assert response.status_code == 400


class TestNotifications:
    """Test the POST notification endpoint."""

    def test_valid_webhook_dispatched(self, test_client: TestClient, handler: AsyncMock):
        """Test a valid payload reaches the handler parsed."""
        response = test_client.post("/webhook", json=PAYLOAD)

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        handler.assert_awaited_once()
        webhook = handler.await_args.args[0]
        assert isinstance(webhook, WhatsAppWebhook)
        assert webhook.entry[0].changes[0].value.messages[0].text.body == "Hola"

    def test_invalid_json(self, test_client: TestClient, handler: AsyncMock):
        """Test a non-JSON body is a bad request."""
        response = test_client.post(
            "/webhook", content=b"not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        handler.assert_not_awaited()

    def test_invalid_payload(self, test_client: TestClient, handler: AsyncMock):
        """Test a payload with the wrong shape is unprocessable."""
        response = test_client.post("/webhook", json={"object": "page", "entry": []})

        assert response.status_code == 422
        handler.assert_not_awaited()

    def test_signed_webhook_accepted(self, signed_client: TestClient, handler: AsyncMock):
        """Test a correctly signed body is accepted."""
        body = json.dumps(PAYLOAD).encode()

        response = signed_client.post(
            "/webhook",
            content=body,
            headers={
                "Content-Type": "application/json",
                "X-Hub-Signature-256": compute_signature(body, APP_SECRET),
            },
        )

        assert response.status_code == 200
        handler.assert_awaited_once()

    @pytest.mark.parametrize("signature", [None, "sha256=0000", "garbage"])
    def test_bad_signature_forbidden(
        self, signed_client: TestClient, handler: AsyncMock, signature
    ):
        """Test unsigned or wrongly signed bodies are forbidden."""
        headers = {"Content-Type": "application/json"}
        if signature is not None:
            headers["X-Hub-Signature-256"] = signature

        response = signed_client.post(
            "/webhook", content=json.dumps(PAYLOAD).encode(), headers=headers
        )

        assert response.status_code == 403
        handler.assert_not_awaited()
