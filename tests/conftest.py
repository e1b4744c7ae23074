"""
Pytest configuration and common fixtures for wacloud tests.

Provides a fake aiohttp session that records every request and answers with
canned responses, plus ready-made config, client and facade fixtures.
"""

import json
from collections import deque
from dataclasses import dataclass
from typing import Any

import pytest

from wacloud.core.logging.context import clear_request_context
from wacloud.messaging.whatsapp.client.config import WhatsAppConfig
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.messenger.whatsapp_cloud_api import WhatsAppCloudAPI

TEST_TOKEN = "test_token"
TEST_PHONE_ID = "1234567890"
TEST_WABA_ID = "9876543210"
BASE = "https://graph.facebook.com/v21.0"


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        raw: str | bytes | None = None,
        reason: str = "OK",
    ):
        if raw is None:
            raw = json.dumps(body if body is not None else {"success": True})
        self.status = status
        self.reason = reason
        self._raw = raw.encode("utf-8") if isinstance(raw, str) else raw

    async def text(self) -> str:
        return self._raw.decode("utf-8")

    async def read(self) -> bytes:
        return self._raw

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: dict[str, str] | None
    data: Any

    @property
    def json(self) -> Any:
        """Request body decoded from JSON."""
        return json.loads(self.data)


class FakeSession:
    """Records requests; answers with queued responses, ``{"success": true}`` otherwise."""

    def __init__(self):
        self.calls: list[RecordedCall] = []
        self.responses: deque[FakeResponse] = deque()
        self.error: Exception | None = None
        self.closed = False

    def queue(
        self,
        body: Any = None,
        status: int = 200,
        raw: str | bytes | None = None,
        reason: str = "OK",
    ) -> None:
        self.responses.append(FakeResponse(status, body, raw, reason))

    def request(self, method, url, headers=None, data=None) -> FakeResponse:
        self.calls.append(RecordedCall(method, url, headers, data))
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.popleft()
        return FakeResponse()

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def config() -> WhatsAppConfig:
    return WhatsAppConfig(
        access_token=TEST_TOKEN, phone_number_id=TEST_PHONE_ID, waba_id=TEST_WABA_ID
    )


@pytest.fixture
def config_without_waba() -> WhatsAppConfig:
    return WhatsAppConfig(access_token=TEST_TOKEN, phone_number_id=TEST_PHONE_ID)


@pytest.fixture
def client(config: WhatsAppConfig, fake_session: FakeSession) -> WhatsAppClient:
    return WhatsAppClient(config, session=fake_session)


@pytest.fixture
def api(config: WhatsAppConfig, fake_session: FakeSession) -> WhatsAppCloudAPI:
    return WhatsAppCloudAPI(config, session=fake_session)


@pytest.fixture
def api_without_waba(
    config_without_waba: WhatsAppConfig, fake_session: FakeSession
) -> WhatsAppCloudAPI:
    return WhatsAppCloudAPI(config_without_waba, session=fake_session)


@pytest.fixture(autouse=True)
def reset_logging_context():
    """Keep request context from leaking between tests."""
    yield
    clear_request_context()
