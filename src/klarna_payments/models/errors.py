"""Error models for the Klarna Payments SDK.

Every failure raised by the transport, the resources or the checkout flow is
one of the classes below. Lower-level exceptions (``httpx``, ``json``,
``pydantic``) are chained as ``__cause__`` and never escape on their own.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .payment import ErrorResponse


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    INVALID_URL = "INVALID_URL"
    NETWORK_ERROR = "NETWORK_ERROR"
    DECODING_ERROR = "DECODING_ERROR"
    API_ERROR = "API_ERROR"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    INVALID_BODY = "INVALID_BODY"
    INVALID_METHOD = "INVALID_METHOD"
    INVALID_STATE = "INVALID_STATE"


class KlarnaServiceError(Exception):
    """Base exception for the Klarna Payments SDK."""

    default_code: ErrorCode = ErrorCode.API_ERROR
    default_message: str = "Klarna service error"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code.value
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class InvalidURLError(KlarnaServiceError):
    """A URL or path could not be built from the given input."""

    default_code = ErrorCode.INVALID_URL
    default_message = "Invalid URL"

    def __init__(self, message: Optional[str] = None, url: Optional[str] = None):
        super().__init__(message, details={"url": url} if url is not None else None)
        self.url = url


class NetworkError(KlarnaServiceError):
    """The HTTP exchange failed below the HTTP layer."""

    default_code = ErrorCode.NETWORK_ERROR
    default_message = "Network error"

    def __init__(self, cause: BaseException):
        super().__init__(
            f"Network error: {cause}",
            details={"cause": type(cause).__name__},
        )
        self.cause = cause


class DecodingError(KlarnaServiceError):
    """A response body could not be decoded into the expected model."""

    default_code = ErrorCode.DECODING_ERROR
    default_message = "Decoding error"

    def __init__(self, cause: BaseException, target: Optional[str] = None):
        super().__init__(
            f"Decoding error: {cause}",
            details={"cause": type(cause).__name__, "target": target},
        )
        self.cause = cause
        self.target = target


class APIError(KlarnaServiceError):
    """The provider answered with a status code of 400 or above."""

    default_code = ErrorCode.API_ERROR

    def __init__(self, status_code: int, raw_message: str):
        super().__init__(
            f"Klarna API error ({status_code}): {raw_message}",
            details={"status_code": status_code},
        )
        self.status_code = status_code
        self.raw_message = raw_message

    @property
    def error_response(self) -> Optional["ErrorResponse"]:
        """The provider's structured error body, when the message carries one."""
        from pydantic import ValidationError

        from .payment import ErrorResponse

        try:
            return ErrorResponse.model_validate_json(self.raw_message)
        except (ValidationError, ValueError):
            return None

    @property
    def correlation_id(self) -> Optional[str]:
        response = self.error_response
        return response.correlation_id if response else None


class MissingCredentialsError(KlarnaServiceError):
    """An authenticated call was attempted without a username or password."""

    default_code = ErrorCode.MISSING_CREDENTIALS
    default_message = "Missing Klarna API credentials"


class InvalidResponseError(KlarnaServiceError):
    """The transport returned something that is not a usable HTTP response."""

    default_code = ErrorCode.INVALID_RESPONSE
    default_message = "Invalid response from Klarna API"


class InvalidBodyError(KlarnaServiceError):
    """The request body could not be encoded as JSON."""

    default_code = ErrorCode.INVALID_BODY
    default_message = "Unable to encode request body"

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(
            details={"cause": type(cause).__name__} if cause is not None else None,
        )
        self.cause = cause


class InvalidMethodError(KlarnaServiceError):
    """The request used an HTTP method the client does not send."""

    default_code = ErrorCode.INVALID_METHOD

    def __init__(self, method: str):
        super().__init__(f"Unsupported HTTP method: {method}", details={"method": method})
        self.method = method


class CheckoutStateError(KlarnaServiceError):
    """A checkout step was invoked from a state that does not allow it."""

    default_code = ErrorCode.INVALID_STATE

    def __init__(self, state: str, operation: str):
        super().__init__(
            f"Cannot {operation} while checkout is {state}",
            details={"state": state, "operation": operation},
        )
        self.state = state
        self.operation = operation


# Aliases
ServiceError = KlarnaServiceError
