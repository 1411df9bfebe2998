"""Error types raised while sending requests and decoding responses.

Purpose:
- Give callers one base class, `WrapiError`, to catch for any failure.
- Keep the HTTP context (status code, decoded error body) on the exception.

Usage:
- Catch `ResponseError` to inspect `status_code` and `body` of a non-2xx answer.
- Catch `ClientError` for transport failures; the httpx error is the `__cause__`.
- Catch `ClientDecodeError` when a success body does not fit the response type.
"""

from __future__ import annotations

from typing import Any, Optional


class WrapiError(Exception):
    """Base error for all wrapi failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional structured context (e.g., decoded JSON body).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class ResponseError(WrapiError):
    """Raised when the API answers with a non-success status.

    Args:
        status_code: The HTTP status code of the response.
        body: The response body decoded as JSON, or None if it was not JSON.
    """

    def __init__(self, status_code: int, body: Optional[Any] = None) -> None:
        super().__init__(
            f"API response error with status {status_code} and body {body!r}",
            status_code=status_code,
            details=body,
        )
        self.body = body


class ClientError(WrapiError):
    """Raised when the HTTP client fails before a response is available."""

    def __init__(self, reason: Optional[str] = None) -> None:
        message = "HTTP client error"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ClientDecodeError(WrapiError):
    """Raised when a success response cannot be decoded into the response type."""

    def __init__(self, reason: Optional[str] = None, *, status_code: Optional[int] = None) -> None:
        message = "HTTP client failed to decode response"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, status_code=status_code)
