"""
Data models for the Laneful email API.

This package contains Pydantic models for:
    - Requests: Email, its addresses, attachments and tracking settings,
      wrapped in an EmailRequest envelope
    - Responses: ApiResponse and ApiErrorResponse

All models are frozen value objects. Request models omit empty optional
fields from the wire body.

Example:
    >>> from laneful.models import Address, Email
    >>> email = Email(from_=Address(email="noreply@example.com"), subject="Hi")
"""

# Request models
from laneful.models.email import (
    Address,
    Attachment,
    Email,
    EmailRequest,
    TrackingSettings,
)

# Response models
from laneful.models.responses import ApiErrorResponse, ApiResponse

__all__ = [
    # Request models
    "Address",
    "Attachment",
    "Email",
    "EmailRequest",
    "TrackingSettings",
    # Response models
    "ApiErrorResponse",
    "ApiResponse",
]
