"""Error handling for statuscli."""

from statuscli.errors.messages import (
    STATUS_REMEDIATIONS,
    extract_error_message,
    get_status_remediation,
)
from statuscli.errors.network import (
    describe_transport_error,
    is_network_error,
)
from statuscli.errors.types import (
    ClientError,
    DecodeError,
    ErrorCategory,
    HTTPStatusError,
    InputError,
    RequestError,
    ResponseReadError,
    ServerError,
    StatusCliError,
    TransportError,
    UnknownServiceError,
    classify_status,
)

__all__ = [
    # Core types
    "ErrorCategory",
    "StatusCliError",
    "RequestError",
    "InputError",
    "TransportError",
    "ResponseReadError",
    "HTTPStatusError",
    "ServerError",
    "ClientError",
    "DecodeError",
    "UnknownServiceError",
    # Classification functions
    "classify_status",
    "is_network_error",
    "describe_transport_error",
    # Message templates
    "STATUS_REMEDIATIONS",
    "get_status_remediation",
    "extract_error_message",
]
