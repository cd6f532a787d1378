"""Logging setup and the debug response observer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from statuscli.core.request import AttemptRecord

LOGGER_NAME = "statuscli"
MAX_BODY_LENGTH = 1000


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the statuscli namespace."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(debug: bool = False, color: bool = True) -> logging.Logger:
    """Configure the statuscli logger.

    Logs go to stderr through rich so they never mix with command output.
    Calling this again replaces the previously installed handler.

    Args:
        debug: Enable DEBUG level (request retries and response dumps)
        color: Allow colored log output

    Returns:
        The configured package logger
    """
    logger = get_logger()
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True, no_color=not color),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def truncate_body(body: bytes, limit: int = MAX_BODY_LENGTH) -> str:
    """Decode a response body for display, truncated to ``limit`` characters."""
    text = body.decode("utf-8", errors="replace")
    if len(text) > limit:
        return text[:limit] + "...[truncated]"
    return text


def log_debug_response(record: AttemptRecord) -> None:
    """Request observer that dumps the final response when debugging.

    Only acts on the final attempt of a request made with ``debug`` set and
    that produced a response.
    """
    if not (record.debug and record.final) or record.status_code is None:
        return

    logger = get_logger("http")
    headers = "; ".join(
        f"{name}: {value}" for name, value in (record.headers or {}).items()
    )
    logger.debug("===== HTTP Response Debug =====")
    logger.debug("Request: %s %s (attempt %d)", record.method, record.url, record.attempt + 1)
    logger.debug("Status: %d", record.status_code)
    logger.debug("Headers: %s", headers)
    logger.debug("Body: %s", truncate_body(record.body or b""))
    logger.debug("===============================")
