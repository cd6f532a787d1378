"""HTTP client construction for statuscli."""

from __future__ import annotations

import httpx

from statuscli import __version__
from statuscli.config.settings import FetchConfig

USER_AGENT = f"statuscli/{__version__}"


def get_timeout_config(fetch: FetchConfig) -> httpx.Timeout:
    """Build the client-level timeout from fetch settings."""
    return httpx.Timeout(fetch.timeout, connect=fetch.connect_timeout)


def create_http_client(
    fetch: FetchConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the HTTP client shared by every request of a run.

    The caller owns the client and must close it, typically with
    ``async with create_http_client(...) as client:``.

    Args:
        fetch: Fetch settings (defaults if None)
        transport: Optional transport override, e.g. ``httpx.MockTransport``

    Returns:
        Configured httpx.AsyncClient
    """
    fetch = fetch or FetchConfig()
    limits = httpx.Limits(
        max_connections=10,
        max_keepalive_connections=5,
    )
    return httpx.AsyncClient(
        timeout=get_timeout_config(fetch),
        limits=limits,
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        transport=transport,
    )
