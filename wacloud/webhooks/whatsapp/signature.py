"""
Webhook signature verification.

WhatsApp signs every webhook POST with HMAC-SHA256 of the raw body, keyed
by the app secret, and sends it as ``X-Hub-Signature-256: sha256=<hex>``.
"""

import hashlib
import hmac

SIGNATURE_HEADER = "X-Hub-Signature-256"
SIGNATURE_PREFIX = "sha256="


def compute_signature(payload: bytes, app_secret: str) -> str:
    """Compute the ``sha256=<hex>`` header value for a payload."""
    digest = hmac.new(app_secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_signature(
    payload: bytes, signature_header: str | None, app_secret: str
) -> bool:
    """Check a webhook signature in constant time.

    Args:
        payload: Raw request body, exactly as received
        signature_header: Value of the X-Hub-Signature-256 header
        app_secret: Meta app secret

    Returns:
        True if the signature matches, False otherwise
    """
    if not signature_header or not signature_header.startswith(SIGNATURE_PREFIX):
        return False

    expected = compute_signature(payload, app_secret)
    return hmac.compare_digest(expected, signature_header)
