"""Data models for statuscli.

Mirrors the document returned by Statuspage-style ``/api/v2/status.json``
endpoints and the service catalog entries that point at them.
"""

from __future__ import annotations

from enum import StrEnum

import msgspec


class StatusLevel(StrEnum):
    """Service operational status levels."""

    OPERATIONAL = "operational"
    DEGRADED = "degraded"
    PARTIAL_OUTAGE = "partial_outage"
    MAJOR_OUTAGE = "major_outage"
    UNKNOWN = "unknown"


# Statuspage indicator -> level
INDICATOR_LEVELS: dict[str, StatusLevel] = {
    "none": StatusLevel.OPERATIONAL,
    "minor": StatusLevel.DEGRADED,
    "major": StatusLevel.PARTIAL_OUTAGE,
    "critical": StatusLevel.MAJOR_OUTAGE,
}


def indicator_to_level(indicator: str | None) -> StatusLevel:
    """Convert a Statuspage indicator to a StatusLevel."""
    return INDICATOR_LEVELS.get(indicator, StatusLevel.UNKNOWN)


class StatusPage(msgspec.Struct, frozen=True):
    """Status page descriptor."""

    id: str
    name: str
    url: str
    time_zone: str
    updated_at: str


class PageStatus(msgspec.Struct, frozen=True):
    """Rolled-up status of a page."""

    indicator: str
    description: str


class StatusResponse(msgspec.Struct, frozen=True):
    """Decoded ``status.json`` document."""

    page: StatusPage
    status: PageStatus

    @property
    def level(self) -> StatusLevel:
        """Return the status level for the page indicator."""
        return indicator_to_level(self.status.indicator)

    @property
    def description(self) -> str:
        return self.status.description


class ServiceGroup(StrEnum):
    """Catalog groupings."""

    ATLASSIAN = "atlassian"
    CRYPTO = "crypto"
    SERVERLESS = "serverless"
    SAAS = "saas"
    CUSTOM = "custom"


class Service(msgspec.Struct, frozen=True):
    """A named status endpoint."""

    name: str
    url: str
    group: ServiceGroup = ServiceGroup.CUSTOM
