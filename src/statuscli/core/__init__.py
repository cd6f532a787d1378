"""Core request pipeline for statuscli."""

from statuscli.core.http import create_http_client, get_timeout_config
from statuscli.core.request import (
    AttemptRecord,
    RequestOptions,
    RequestOutcome,
    ResilientRequester,
    ResponseObserver,
    attempt_timeout,
    build_body,
    build_headers,
    build_url,
)
from statuscli.core.retry import (
    AttemptResult,
    StatusReceived,
    TransportFailure,
    calculate_retry_delay,
    is_retryable_status,
    should_retry,
)

__all__ = [
    # http
    "create_http_client",
    "get_timeout_config",
    # request
    "AttemptRecord",
    "RequestOptions",
    "RequestOutcome",
    "ResilientRequester",
    "ResponseObserver",
    "attempt_timeout",
    "build_body",
    "build_headers",
    "build_url",
    # retry
    "AttemptResult",
    "StatusReceived",
    "TransportFailure",
    "calculate_retry_delay",
    "is_retryable_status",
    "should_retry",
]
