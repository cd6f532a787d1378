"""Retry classification and linear backoff for statuscli."""

from __future__ import annotations

from dataclasses import dataclass

from statuscli.errors.network import is_network_error

BASE_DELAY = 0.3  # seconds


@dataclass(frozen=True)
class TransportFailure:
    """An attempt that failed before any response arrived."""

    error: BaseException


@dataclass(frozen=True)
class StatusReceived:
    """An attempt that produced a response with this status code."""

    status_code: int


AttemptResult = TransportFailure | StatusReceived


def is_retryable_status(status_code: int) -> bool:
    """5xx responses are retryable server errors."""
    return 500 <= status_code <= 599


def should_retry(result: AttemptResult, attempt: int, max_retries: int) -> bool:
    """Decide whether another attempt should follow this one.

    Args:
        result: Outcome of the attempt that just completed
        attempt: Index of that attempt (0-indexed)
        max_retries: Retries allowed after the first attempt

    Returns:
        True if the request should be attempted again
    """
    if attempt >= max_retries:
        return False

    match result:
        case TransportFailure(error=error):
            return is_network_error(error)
        case StatusReceived(status_code=status_code):
            return is_retryable_status(status_code)

    return False


def calculate_retry_delay(attempt: int, base_delay: float = BASE_DELAY) -> float:
    """Calculate delay before the next attempt using linear backoff.

    Args:
        attempt: Which attempt we just completed (0-indexed)
        base_delay: Delay unit in seconds

    Returns:
        Delay in seconds
    """
    return base_delay * (attempt + 1)
