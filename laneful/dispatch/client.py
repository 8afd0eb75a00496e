"""
Async client for the Laneful email sending API.

A single POST per call: the request is serialized, sent with a bearer
token, and the response is decoded into an ApiResponse or raised as an
error. There is no retry, batching or rate limiting; resilience policy is
left to the caller.
"""

import asyncio
import logging
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from laneful.config import LanefulSettings, get_settings
from laneful.exceptions import (
    ApiError,
    ErrorResponseDecodeError,
    ResponseDecodeError,
    TransportError,
)
from laneful.models.email import Email, EmailRequest
from laneful.models.responses import ApiErrorResponse, ApiResponse

logger = logging.getLogger(__name__)


def _decode_body(model, content: bytes):
    # A JSON null body decodes to the zero-value model.
    if content.strip() == b"null":
        return model()
    return model.model_validate_json(content)


class LanefulClient:
    """
    Client for ``POST {base_url}/v1/email/send``.

    Holds the base URL, the bearer token and one reusable
    ``httpx.AsyncClient``. The instance carries no per-call state and can be
    shared by concurrent tasks.

    Usage:
        async with LanefulClient("https://api.example.com", token) as client:
            response = await client.send_email(email)
    """

    SEND_PATH = "/v1/email/send"
    # Fixed policy, not configurable
    TIMEOUT_SECONDS = 30.0

    def __init__(
        self,
        base_url: str,
        auth_token: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. ``https://api.example.com``
            auth_token: Bearer token sent with every request
            transport: Optional httpx transport, used by tests to stub the
                network
        """
        self.base_url = base_url.rstrip("/")
        self._auth_token = auth_token
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(self.TIMEOUT_SECONDS),
            verify=True,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[LanefulSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "LanefulClient":
        """
        Build a client from LANEFUL_* settings.

        Raises:
            ValueError: If base_url or auth_token is not configured
        """
        settings = settings or get_settings()
        if not settings.is_configured:
            raise ValueError(
                "Laneful base_url and auth_token must be configured "
                "(LANEFUL_BASE_URL, LANEFUL_AUTH_TOKEN)"
            )
        return cls(
            settings.base_url,
            settings.auth_token.get_secret_value(),
            transport=transport,
        )

    @property
    def send_url(self) -> str:
        return self.base_url + self.SEND_PATH

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._auth_token}",
        }

    async def send_emails(
        self, emails: Sequence[Email], *, timeout: Optional[float] = None
    ) -> ApiResponse:
        """
        Send one or more emails in a single request.

        Args:
            emails: Emails to send; all go in one request body
            timeout: Optional deadline in seconds for this call. The call
                never runs longer than TIMEOUT_SECONDS.

        Returns:
            The decoded ApiResponse

        Raises:
            SerializationError: If the request cannot be encoded (no request
                is sent)
            TransportError: On network failure or when the deadline expires
            ResponseDecodeError: If a 200 body is not a valid ApiResponse
            ErrorResponseDecodeError: If an error body is not a valid
                ApiErrorResponse
            ApiError: If the API rejected the request
        """
        body = EmailRequest(emails=list(emails)).to_json()

        deadline = self.TIMEOUT_SECONDS
        if timeout is not None:
            deadline = min(timeout, self.TIMEOUT_SECONDS)

        logger.debug(f"Sending {len(emails)} email(s) to {self.send_url}")
        try:
            async with asyncio.timeout(deadline):
                # post() reads and closes the response body before returning
                response = await self._http.post(
                    self.send_url, content=body, headers=self._headers()
                )
        except TimeoutError as e:
            raise TransportError(f"failed to send request: timed out after {deadline}s") from e
        except httpx.InvalidURL as e:
            raise TransportError(f"failed to create request: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"failed to send request: {e}") from e

        logger.debug(f"Laneful responded with HTTP {response.status_code}")
        return self._decode_response(response)

    async def send_email(
        self, email: Email, *, timeout: Optional[float] = None
    ) -> ApiResponse:
        """Send a single email. Same as ``send_emails([email])``."""
        return await self.send_emails([email], timeout=timeout)

    def _decode_response(self, response: httpx.Response) -> ApiResponse:
        if response.status_code != httpx.codes.OK:
            try:
                error_response = _decode_body(ApiErrorResponse, response.content)
            except ValidationError as e:
                raise ErrorResponseDecodeError(
                    f"failed to decode error response: {e}",
                    status_code=response.status_code,
                    body=response.content,
                ) from e
            raise ApiError(error_response.error, status_code=response.status_code)

        try:
            return _decode_body(ApiResponse, response.content)
        except ValidationError as e:
            raise ResponseDecodeError(
                f"failed to decode response: {e}",
                status_code=response.status_code,
                body=response.content,
            ) from e

    async def aclose(self) -> None:
        """Close the underlying HTTP transport."""
        await self._http.aclose()

    async def __aenter__(self) -> "LanefulClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
