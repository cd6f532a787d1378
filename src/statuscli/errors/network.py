"""Network error classification utilities.

This module decides which transport failures count as network-class errors
(and are therefore worth retrying) and turns them into readable messages.
"""

from __future__ import annotations

import httpx


def is_network_error(error: BaseException) -> bool:
    """Check if an exception is a network-related error.

    Covers httpx connection/read/write failures, httpx timeouts, and the
    builtin TimeoutError raised when an attempt's deadline expires.

    Args:
        error: Exception to check

    Returns:
        True if this is a network error
    """
    return isinstance(
        error,
        (
            httpx.NetworkError,
            httpx.TimeoutException,
            httpx.RemoteProtocolError,
            TimeoutError,
        ),
    )


def describe_transport_error(error: BaseException) -> tuple[str, str]:
    """Describe a transport failure for the user.

    Args:
        error: Exception raised while sending a request

    Returns:
        Tuple of (message, remediation)
    """
    if isinstance(error, httpx.ConnectTimeout):
        return (
            "Connection timed out",
            "Check your internet connection and try again.",
        )

    if isinstance(error, (httpx.ReadTimeout, httpx.PoolTimeout)):
        return (
            "Request timed out waiting for response",
            "The status page may be slow. Try again with a larger --timeout.",
        )

    if isinstance(error, httpx.WriteTimeout):
        return (
            "Request timed out while sending data",
            "Check your internet connection and try again.",
        )

    if isinstance(error, (TimeoutError, httpx.TimeoutException)):
        return (
            "Request exceeded its time limit",
            "Try again with a larger --timeout or more --retries.",
        )

    if isinstance(error, httpx.ConnectError):
        message = str(error).lower()
        if "connection refused" in message:
            return (
                "Connection refused by server",
                "The status page may be down. Try again later.",
            )
        if "name or service not known" in message or "nodename" in message or "dns" in message:
            return (
                "Could not resolve server address",
                "Check your internet connection and DNS settings.",
            )
        return (
            "Failed to connect to server",
            "Check your internet connection. The status page may be down.",
        )

    if isinstance(error, httpx.NetworkError):
        return (
            f"Network error: {error}",
            "Check your internet connection and try again.",
        )

    return (
        f"Transport error: {error}",
        "Check the service URL and your network settings.",
    )
