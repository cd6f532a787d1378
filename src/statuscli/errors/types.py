"""Error types and classifications."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum


class ErrorCategory(StrEnum):
    """Error categories for handling decisions."""

    INPUT = "input"
    TRANSPORT = "transport"
    READ = "read"
    SERVER = "server"
    CLIENT = "client"
    DECODE = "decode"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class StatusCliError(Exception):
    """Base class for statuscli failures.

    Every error carries a category so callers can decide how to report it,
    and an optional remediation hint for the user.
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN
    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        remediation: str | None = None,
        details: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.remediation = remediation
        self.details = details or {}
        self.timestamp = datetime.now().astimezone()

    def to_dict(self) -> dict:
        """Convert to dict for JSON output."""
        data = {
            "message": self.message,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.url:
            data["url"] = self.url
        if self.remediation:
            data["remediation"] = self.remediation
        if self.details:
            data["details"] = self.details
        return data


class RequestError(StatusCliError):
    """Failure raised by the request pipeline."""


class InputError(RequestError):
    """Malformed URL, body or request. Retrying cannot help."""

    category = ErrorCategory.INPUT


class TransportError(RequestError):
    """Network-level failure (connection, DNS, timeout)."""

    category = ErrorCategory.TRANSPORT
    retryable = True

    def __init__(self, message: str, *, attempts: int = 1, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.attempts = attempts


class ResponseReadError(RequestError):
    """The response arrived but its body could not be read."""

    category = ErrorCategory.READ


class HTTPStatusError(StatusCliError):
    """A response whose status code signals failure."""

    def __init__(self, message: str, *, status_code: int, body: bytes = b"", **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body


class ServerError(HTTPStatusError):
    """5xx response, returned after retries were exhausted."""

    category = ErrorCategory.SERVER
    retryable = True


class ClientError(HTTPStatusError):
    """4xx response. Never retried."""

    category = ErrorCategory.CLIENT


class DecodeError(StatusCliError):
    """Response body does not match the expected JSON shape."""

    category = ErrorCategory.DECODE


class UnknownServiceError(StatusCliError, KeyError):
    """Service name not found in the catalog."""

    category = ErrorCategory.CONFIGURATION

    def __str__(self) -> str:
        return self.message


def classify_status(status_code: int) -> ErrorCategory | None:
    """Classify an HTTP status code.

    Returns None for codes that do not indicate failure.
    """
    if 500 <= status_code < 600:
        return ErrorCategory.SERVER
    if 400 <= status_code < 500:
        return ErrorCategory.CLIENT
    return None
