"""User-facing messages for HTTP failures."""

from __future__ import annotations

import msgspec

STATUS_REMEDIATIONS: dict[int, str] = {
    401: "This status page requires authentication, which statuscli does not support.",
    403: "Access to this status page is forbidden. Check the configured URL.",
    404: "The status endpoint was not found. The page may have moved; check the configured URL.",
    429: "Rate limited. Wait a few minutes before trying again.",
}


def get_status_remediation(status_code: int) -> str | None:
    """Return a remediation hint for an HTTP status code."""
    if status_code in STATUS_REMEDIATIONS:
        return STATUS_REMEDIATIONS[status_code]
    if status_code >= 500:
        return "The status page is experiencing issues. Try again later or raise --retries."
    if status_code >= 400:
        return "The request was rejected. Check the configured URL."
    return None


def extract_error_message(body: bytes, status_code: int) -> str:
    """Extract a meaningful error message from a response body.

    Args:
        body: Raw response body
        status_code: HTTP status code of the response

    Returns:
        Extracted error message
    """
    # Try JSON response first
    try:
        data = msgspec.json.decode(body)
    except msgspec.DecodeError:
        data = None

    if isinstance(data, dict):
        for key in ("error", "message", "detail", "error_description"):
            value = data.get(key)
            if isinstance(value, str):
                return value
            if isinstance(value, dict):
                # Some APIs nest the message
                for nested_key in ("message", "description"):
                    if nested_key in value:
                        return str(value[nested_key])

    # Fall back to short text content
    text = body.decode("utf-8", errors="replace").strip()
    if text and len(text) < 200:
        return text

    return f"HTTP {status_code}"
