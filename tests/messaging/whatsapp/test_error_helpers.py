"""
Tests for Graph API error classification and logging.
"""

from unittest.mock import MagicMock

import pytest

from wacloud.messaging.whatsapp.utils.error_helpers import (
    is_authentication_error,
    is_bsuid_auth_error,
    is_rate_limit_error,
    log_whatsapp_error,
    mask_token,
)
from wacloud.messaging.whatsapp.utils.errors import (
    WhatsAppApiError,
    WhatsAppTransportError,
)


def api_error(code: int, status: int = 400) -> WhatsAppApiError:
    return WhatsAppApiError(
        code=code, message="boom", type="OAuthException", fbtrace_id="tr", status=status
    )


class TestClassification:
    """Test error classification helpers."""

    def test_authentication(self):
        """Test token and 401 failures are authentication errors."""
        assert is_authentication_error(api_error(190))
        assert is_authentication_error(WhatsAppTransportError("denied", status=401))
        assert not is_authentication_error(api_error(100))

    @pytest.mark.parametrize("code", [4, 80007, 130429, 131048, 131056])
    def test_rate_limit_codes(self, code):
        """Test every throttling code is recognized."""
        assert is_rate_limit_error(api_error(code))

    def test_bsuid(self):
        """Test the BSUID authentication restriction code."""
        assert is_bsuid_auth_error(api_error(131062))
        assert not is_bsuid_auth_error(WhatsAppTransportError("x"))

    @pytest.mark.parametrize(
        "token,expected",
        [("short", "***"), ("EAAGabcdefgh12", "EAAGab...12")],
    )
    def test_mask_token(self, token, expected):
        """Test tokens are never logged in full."""
        assert mask_token(token) == expected


class TestLogging:
    """Test the log lines emitted for failed calls."""

    def test_auth_error_is_critical(self):
        """Test authentication failures log a masked token."""
        logger = MagicMock()

        log_whatsapp_error(api_error(190, 401), "POST 1/messages", logger, "EAAGabcdefgh12")

        messages = [call.args[0] for call in logger.error.call_args_list]
        assert any("CRITICAL" in message for message in messages)
        assert any("EAAGab...12" in message for message in messages)
        assert all("EAAGabcdefgh12" not in message for message in messages)

    def test_rate_limit_warns(self):
        """Test throttling adds a warning."""
        logger = MagicMock()

        log_whatsapp_error(api_error(130429, 429), "POST 1/messages", logger)

        logger.warning.assert_called_once()
        assert "fbtrace_id=tr" in logger.error.call_args.args[0]

    def test_transport_error(self):
        """Test errors without an envelope log their message."""
        logger = MagicMock()

        log_whatsapp_error(WhatsAppTransportError("timeout"), "GET media", logger)

        logger.error.assert_called_once_with("GET media failed: timeout")
        logger.warning.assert_not_called()
