"""
Errors raised by the Laneful client.

Every failure is raised to the caller. The client never retries, so the
exception type tells the caller what happened:

- SerializationError: the request could not be encoded, nothing was sent
- TransportError: the HTTP exchange did not complete (DNS, refused
  connection, timeout)
- ResponseDecodeError / ErrorResponseDecodeError: the server answered with
  a body that is not the expected JSON
- ApiError: the server rejected the request with an error message
"""


class LanefulError(Exception):
    """Base class for all Laneful client errors."""


class SerializationError(LanefulError):
    """Raised when an email request cannot be encoded as JSON."""


class TransportError(LanefulError):
    """Raised when the request fails at the network level or times out."""


class ResponseDecodeError(LanefulError):
    """Raised when a 200 response body is not a valid ApiResponse."""

    def __init__(self, message: str, status_code: int, body: bytes = b""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ErrorResponseDecodeError(ResponseDecodeError):
    """Raised when a non-200 response body is not a valid ApiErrorResponse."""


class ApiError(LanefulError):
    """The API explicitly rejected the request."""

    def __init__(self, message: str, status_code: int):
        super().__init__(f"API error: {message}")
        self.message = message
        self.status_code = status_code
