"""Status page lookups."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable

import msgspec

from statuscli.core.request import RequestOptions, ResilientRequester
from statuscli.errors.types import DecodeError, StatusCliError
from statuscli.logging import get_logger
from statuscli.models import Service, StatusResponse

logger = get_logger(__name__)


def decode_status(body: bytes, url: str | None = None) -> StatusResponse:
    """Decode a Statuspage ``status.json`` document.

    Raises:
        DecodeError: If the body is not JSON or does not match the shape
    """
    try:
        return msgspec.json.decode(body, type=StatusResponse)
    except msgspec.DecodeError as exc:
        raise DecodeError(
            f"Failed to parse status response: {exc}",
            url=url,
            remediation="The endpoint may not be a Statuspage status.json URL.",
        ) from exc


async def fetch_status(
    requester: ResilientRequester,
    url: str,
    *,
    options: RequestOptions | None = None,
) -> StatusResponse:
    """Fetch and decode the status of one status page.

    Args:
        requester: Request pipeline to issue the GET through
        url: Statuspage API status URL
        options: Request options (defaults if None)

    Returns:
        Decoded StatusResponse

    Raises:
        RequestError: The request could not be completed
        ServerError: The page kept answering 5xx
        ClientError: The page answered 4xx
        DecodeError: The body did not match the status shape
    """
    outcome = await requester.get(url, options)
    outcome.raise_for_status()
    return decode_status(outcome.body, url=url)


async def iter_statuses(
    requester: ResilientRequester,
    services: Iterable[Service],
    options: RequestOptions | None = None,
) -> AsyncIterator[tuple[Service, StatusResponse | StatusCliError]]:
    """Look services up one after another.

    A failed lookup yields its error and does not stop the remaining ones.
    """
    for service in services:
        try:
            result = await fetch_status(requester, service.url, options=options)
        except StatusCliError as e:
            logger.debug("status lookup for %s failed: %s", service.name, e)
            result = e
        yield service, result
