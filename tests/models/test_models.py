"""Tests for data models."""

from __future__ import annotations

import msgspec
import pytest

from statuscli.models import (
    PageStatus,
    Service,
    ServiceGroup,
    StatusLevel,
    StatusPage,
    StatusResponse,
    indicator_to_level,
)


class TestIndicatorToLevel:
    """Tests for indicator_to_level."""

    @pytest.mark.parametrize(
        ("indicator", "expected"),
        [
            ("none", StatusLevel.OPERATIONAL),
            ("minor", StatusLevel.DEGRADED),
            ("major", StatusLevel.PARTIAL_OUTAGE),
            ("critical", StatusLevel.MAJOR_OUTAGE),
            ("maintenance", StatusLevel.UNKNOWN),
            (None, StatusLevel.UNKNOWN),
        ],
    )
    def test_mapping(self, indicator, expected):
        assert indicator_to_level(indicator) == expected


class TestStatusResponse:
    """Tests for StatusResponse."""

    def test_properties(self):
        response = StatusResponse(
            page=StatusPage(
                id="abc",
                name="npm",
                url="https://status.npmjs.org",
                time_zone="America/Los_Angeles",
                updated_at="2024-05-01T12:00:00-07:00",
            ),
            status=PageStatus(indicator="critical", description="Major System Outage"),
        )

        assert response.level == StatusLevel.MAJOR_OUTAGE
        assert response.description == "Major System Outage"

    def test_frozen(self):
        status = PageStatus(indicator="none", description="ok")

        with pytest.raises(AttributeError):
            status.indicator = "major"

    def test_decode(self, github_status_body):
        response = msgspec.json.decode(github_status_body, type=StatusResponse)

        assert response.page.name == "GitHub"


class TestService:
    """Tests for Service."""

    def test_default_group_is_custom(self):
        service = Service("internal", "https://status.internal.example/api/v2/status.json")

        assert service.group == ServiceGroup.CUSTOM

    def test_equality(self):
        first = Service("npm", "https://status.npmjs.org/api/v2/status.json", ServiceGroup.SAAS)
        second = Service("npm", "https://status.npmjs.org/api/v2/status.json", ServiceGroup.SAAS)

        assert first == second
