"""
Structured error system for the Rebrickable API client.

Every failed call resolves to exactly one of the eight kinds in ErrorKind.
Each kind has one concrete exception class; the set is closed and callers
can branch on ``error.kind`` exhaustively.
"""

from enum import Enum
from typing import Any, Dict, Optional, Type


class ErrorKind(Enum):
    """All ways a Rebrickable API call can fail."""
    BAD_REQUEST = "bad_request"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    GENERIC = "generic"
    NETWORK = "network"
    PARSE = "parse"


class RebrickableError(Exception):
    """Base exception for all Rebrickable API related errors."""

    kind: ErrorKind = ErrorKind.GENERIC
    default_message: str = "API error"

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        status: Optional[int] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.status = status
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "status": self.status,
            "code": self.code,
            "cause": repr(self.cause) if self.cause is not None else None,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.status:
            parts.append(f"(Status: {self.status})")
        if self.code:
            parts.append(f"(Code: {self.code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, status={self.status!r})"


class BadRequestError(RebrickableError):
    """The request parameters were rejected (HTTP 400)."""
    kind = ErrorKind.BAD_REQUEST
    default_message = "Invalid request parameters"


class AuthenticationError(RebrickableError):
    """The API key is missing or invalid (HTTP 401)."""
    kind = ErrorKind.AUTHENTICATION
    default_message = "Authentication failed - invalid or missing API key"


class NotFoundError(RebrickableError):
    """The requested resource does not exist (HTTP 404)."""
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class RateLimitError(RebrickableError):
    """Too many requests (HTTP 429)."""
    kind = ErrorKind.RATE_LIMIT
    default_message = "Rate limit exceeded"


class ServerError(RebrickableError):
    """The service failed (HTTP 5xx)."""
    kind = ErrorKind.SERVER
    default_message = "Server error occurred"


class GenericApiError(RebrickableError):
    """Any other non-success status."""
    kind = ErrorKind.GENERIC
    default_message = "API error"


class NetworkError(RebrickableError):
    """No response was obtained from the transport."""
    kind = ErrorKind.NETWORK
    default_message = "Network error occurred"


class ParseError(RebrickableError):
    """A response was obtained but its body could not be decoded."""
    kind = ErrorKind.PARSE
    default_message = "Failed to parse API response"


ERROR_CLASSES: Dict[ErrorKind, Type[RebrickableError]] = {
    cls.kind: cls
    for cls in (
        BadRequestError,
        AuthenticationError,
        NotFoundError,
        RateLimitError,
        ServerError,
        GenericApiError,
        NetworkError,
        ParseError,
    )
}


def kind_for_status(status: int) -> ErrorKind:
    """Classify a non-success HTTP status code."""
    if status == 400:
        return ErrorKind.BAD_REQUEST
    elif status == 401:
        return ErrorKind.AUTHENTICATION
    elif status == 404:
        return ErrorKind.NOT_FOUND
    elif status == 429:
        return ErrorKind.RATE_LIMIT
    elif 500 <= status < 600:
        return ErrorKind.SERVER
    return ErrorKind.GENERIC


def error_for_status(
    status: int,
    message: Optional[str] = None,
    code: Optional[str] = None,
) -> RebrickableError:
    """Build the error matching an HTTP status code."""
    error_class = ERROR_CLASSES[kind_for_status(status)]
    return error_class(message, status=status, code=code)


def create_user_friendly_message(error: RebrickableError) -> str:
    """
    Create a user-friendly error message.

    Args:
        error: The RebrickableError to convert

    Returns:
        Message suitable for showing to an end user
    """
    if error.kind is ErrorKind.AUTHENTICATION:
        return "Authentication failed. Please check your Rebrickable API key in the BRIXIE_API_KEY environment variable."

    elif error.kind is ErrorKind.NOT_FOUND:
        return f"Not found: {error.message}"

    elif error.kind is ErrorKind.BAD_REQUEST:
        return f"The request was rejected: {error.message}"

    elif error.kind is ErrorKind.RATE_LIMIT:
        return "Rate limit exceeded. Please wait a moment and try again."

    elif error.kind is ErrorKind.NETWORK:
        return "Network error occurred. Please check your internet connection and try again."

    elif error.kind is ErrorKind.SERVER:
        return "Rebrickable is having trouble right now. Please try again later."

    elif error.kind is ErrorKind.PARSE:
        return "Received an unexpected response from Rebrickable."

    else:
        return f"An error occurred: {error.message}"
