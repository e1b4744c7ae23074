"""
WhatsApp error handling utilities.

Classification and logging helpers used by the transport when a Graph API
call fails.

BSUID Support (v24.0+):
- Error code 131062: Authentication messages cannot be sent to BSUIDs
"""

from wacloud.core.logging.logger import ContextLogger
from wacloud.messaging.whatsapp.utils.errors import WhatsAppApiError

# Graph API error codes
ERROR_CODE_INVALID_TOKEN = 190
ERROR_CODE_BSUID_AUTH_NOT_ALLOWED = 131062
RATE_LIMIT_ERROR_CODES = frozenset({4, 80007, 130429, 131048, 131056})


def is_authentication_error(error: Exception) -> bool:
    """Check if an exception indicates an authentication failure.

    Args:
        error: The exception to check

    Returns:
        True for Graph API code 190 or any HTTP 401
    """
    if isinstance(error, WhatsAppApiError):
        return error.code == ERROR_CODE_INVALID_TOKEN or error.status == 401
    return getattr(error, "status", None) == 401


def is_rate_limit_error(error: Exception) -> bool:
    """Check if an API error is one of the throttling codes."""
    return isinstance(error, WhatsAppApiError) and error.code in RATE_LIMIT_ERROR_CODES


def is_bsuid_auth_error(error: Exception) -> bool:
    """Check if an error indicates BSUID auth message restriction (code 131062).

    Authentication messages (OTPs, verification codes) must be sent to phone
    numbers, not to a user's BSUID.
    """
    return (
        isinstance(error, WhatsAppApiError)
        and error.code == ERROR_CODE_BSUID_AUTH_NOT_ALLOWED
    )


def mask_token(token: str) -> str:
    """Return a log-safe prefix of an access token."""
    if len(token) <= 8:
        return "***"
    return f"{token[:6]}...{token[-2:]}"


def log_whatsapp_error(
    error: Exception,
    operation: str,
    logger: ContextLogger,
    access_token: str | None = None,
) -> None:
    """Log a failed Graph API call with consistent wording.

    Args:
        error: The exception about to be raised to the caller
        operation: Description of the call that failed (e.g. "POST 1234/messages")
        logger: Logger instance for error logging
        access_token: Token used for the call, logged masked on auth failures
    """
    if is_authentication_error(error):
        logger.error(f"CRITICAL: WhatsApp authentication failed during {operation}!")
        if access_token:
            logger.error(f"Access token in use: {mask_token(access_token)}")
        logger.error("Check that the access token is valid and not expired")

    if is_bsuid_auth_error(error):
        logger.warning(
            "BSUID Auth Error: authentication messages cannot be sent to a BSUID, "
            "use the phone number instead"
        )

    if is_rate_limit_error(error):
        logger.warning(f"Rate limited by Graph API during {operation}")

    if isinstance(error, WhatsAppApiError):
        logger.error(
            f"{operation} failed: {error.type} code={error.code} "
            f"subcode={error.subcode} fbtrace_id={error.fbtrace_id} - {error.message}"
        )
    else:
        logger.error(f"{operation} failed: {error}")
