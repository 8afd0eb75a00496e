"""
Laneful: Python client for the Laneful transactional email API.

Example:
    >>> from laneful import Address, Email, LanefulClient
    >>> async with LanefulClient("https://api.example.com", "token") as client:
    ...     await client.send_email(
    ...         Email(from_=Address(email="noreply@example.com"), subject="Hi")
    ...     )
"""

from laneful.config import LanefulSettings, get_settings
from laneful.dispatch import LanefulClient
from laneful.exceptions import (
    ApiError,
    ErrorResponseDecodeError,
    LanefulError,
    ResponseDecodeError,
    SerializationError,
    TransportError,
)
from laneful.models import (
    Address,
    ApiErrorResponse,
    ApiResponse,
    Attachment,
    Email,
    EmailRequest,
    TrackingSettings,
)
from laneful.webhooks import (
    WebhookSigner,
    compute_webhook_signature,
    generate_webhook_secret,
    verify_webhook_signature,
)

__all__ = [
    # Client
    "LanefulClient",
    "LanefulSettings",
    "get_settings",
    # Models
    "Address",
    "ApiErrorResponse",
    "ApiResponse",
    "Attachment",
    "Email",
    "EmailRequest",
    "TrackingSettings",
    # Errors
    "ApiError",
    "ErrorResponseDecodeError",
    "LanefulError",
    "ResponseDecodeError",
    "SerializationError",
    "TransportError",
    # Webhooks
    "WebhookSigner",
    "compute_webhook_signature",
    "generate_webhook_secret",
    "verify_webhook_signature",
]
