"""
Email request models.

Field names match the wire keys of ``POST /v1/email/send``; the only
exception is ``Email.from_``, serialized as ``from``.
"""

import base64
import json
import mimetypes
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, ClassVar, Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticSerializationError

from laneful.exceptions import SerializationError
from laneful.models.base import WireModel

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class Address(WireModel):
    """An email address with an optional display name."""

    always_serialized: ClassVar[frozenset[str]] = frozenset({"email"})

    email: str
    name: Optional[str] = None


class Attachment(WireModel):
    """
    A file attached to an email.

    ``content`` holds base64 or raw text. Set ``inline_id`` to reference the
    attachment from HTML content through ``cid:<inline_id>``.
    """

    always_serialized: ClassVar[frozenset[str]] = frozenset({"content_type"})

    file_name: Optional[str] = None
    content: Optional[str] = None
    content_type: str
    inline_id: Optional[str] = None

    @classmethod
    def from_bytes(
        cls,
        file_name: str,
        data: bytes,
        content_type: Optional[str] = None,
        inline_id: Optional[str] = None,
    ) -> "Attachment":
        """Build an attachment from raw bytes, base64-encoding the content."""
        if content_type is None:
            content_type = mimetypes.guess_type(file_name)[0] or DEFAULT_CONTENT_TYPE
        return cls(
            file_name=file_name,
            content=base64.b64encode(data).decode("ascii"),
            content_type=content_type,
            inline_id=inline_id,
        )

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        content_type: Optional[str] = None,
        inline_id: Optional[str] = None,
    ) -> "Attachment":
        path = Path(path)
        return cls.from_bytes(path.name, path.read_bytes(), content_type, inline_id)


class TrackingSettings(WireModel):
    """Open, click and unsubscribe tracking. Everything is off by default."""

    omit_when_none: ClassVar[frozenset[str]] = frozenset({"unsubscribe_group_id"})

    opens: bool = False
    clicks: bool = False
    unsubscribes: bool = False
    unsubscribe_group_id: Optional[int] = None


class Email(WireModel):
    """
    A single email.

    Only the sender is required. Template and inline content may be combined;
    the API decides which takes precedence.

    Example:
        >>> Email(
        ...     from_=Address(email="noreply@example.com"),
        ...     to=[Address(email="user@example.com", name="User")],
        ...     subject="Welcome",
        ...     template_id="welcome",
        ...     template_data={"first_name": "Ada", "items": [1, 2]},
        ... )
    """

    always_serialized: ClassVar[frozenset[str]] = frozenset({"from_"})

    from_: Address = Field(alias="from")
    to: list[Address] = Field(default_factory=list)
    cc: list[Address] = Field(default_factory=list)
    bcc: list[Address] = Field(default_factory=list)
    subject: Optional[str] = None
    text_content: Optional[str] = None
    html_content: Optional[str] = None
    template_id: Optional[str] = None
    # Any JSON value; checked when the request is serialized.
    template_data: dict[str, Any] = Field(default_factory=dict)
    attachments: list[Attachment] = Field(default_factory=list)
    headers: dict[str, str] = Field(default_factory=dict)
    reply_to: Optional[Address] = None
    send_time: Optional[int] = Field(default=None, description="Epoch seconds for scheduled delivery")
    webhook_data: dict[str, str] = Field(default_factory=dict)
    tag: Optional[str] = None
    tracking: Optional[TrackingSettings] = None

    @field_validator("send_time", mode="before")
    @classmethod
    def datetime_to_epoch(cls, v: Any) -> Any:
        """Accept datetimes for send_time. Naive values are taken as UTC."""
        if isinstance(v, datetime):
            if v.tzinfo is None:
                v = v.replace(tzinfo=timezone.utc)
            return int(v.timestamp())
        return v


class EmailRequest(WireModel):
    """Request body for ``POST /v1/email/send``; all emails go in one call."""

    always_serialized: ClassVar[frozenset[str]] = frozenset({"emails"})

    emails: list[Email]

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-compatible request body."""
        try:
            return self.model_dump(mode="json", by_alias=True)
        except PydanticSerializationError as e:
            raise SerializationError(f"failed to marshal request: {e}") from e

    def to_json(self) -> bytes:
        """Encode the request body as UTF-8 JSON."""
        try:
            encoded = json.dumps(self.to_wire(), allow_nan=False, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to marshal request: {e}") from e
        return encoded.encode("utf-8")
