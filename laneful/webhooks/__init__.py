"""
Webhook signature verification for inbound Laneful events.

Components:
- signing.py: HMAC-SHA256 signature generation and verification
"""

from laneful.webhooks.signing import (
    WebhookSigner,
    compute_webhook_signature,
    generate_webhook_secret,
    verify_webhook_signature,
)

__all__ = [
    "WebhookSigner",
    "compute_webhook_signature",
    "generate_webhook_secret",
    "verify_webhook_signature",
]
