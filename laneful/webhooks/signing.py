"""
HMAC-SHA256 signatures for webhook payloads.

Laneful signs each webhook body with a shared secret. The receiver
recomputes the signature over the raw body and compares it in constant
time:

    if not verify_webhook_signature(secret, raw_body, request.headers[...]):
        return 401

No replay-window or timestamp checks are done here.
"""

import hashlib
import hmac
import secrets


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def compute_webhook_signature(secret: str | bytes, payload: str | bytes) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``payload`` keyed by ``secret``."""
    mac = hmac.new(_to_bytes(secret), _to_bytes(payload), hashlib.sha256)
    return mac.hexdigest()


def verify_webhook_signature(
    secret: str | bytes, payload: str | bytes, signature: str | bytes | None
) -> bool:
    """
    Check a webhook signature.

    Args:
        secret: Shared webhook secret
        payload: Raw request body, exactly as received
        signature: Signature supplied with the webhook

    Returns:
        True only if ``signature`` is exactly the lowercase hex digest.
        Mismatched length or content, or a missing signature, returns False.
    """
    if not isinstance(signature, (str, bytes)):
        return False
    expected = compute_webhook_signature(secret, payload)
    return hmac.compare_digest(_to_bytes(signature), expected.encode("ascii"))


def generate_webhook_secret(nbytes: int = 32) -> str:
    """Generate a random URL-safe webhook secret."""
    return secrets.token_urlsafe(nbytes)


class WebhookSigner:
    """Signs and verifies payloads with one shared secret."""

    def __init__(self, secret: str | bytes):
        if not secret:
            raise ValueError("Webhook secret must not be empty")
        self._secret = _to_bytes(secret)

    def sign(self, payload: str | bytes) -> str:
        return compute_webhook_signature(self._secret, payload)

    def verify(self, payload: str | bytes, signature: str) -> bool:
        return verify_webhook_signature(self._secret, payload, signature)
