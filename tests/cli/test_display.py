"""Tests for CLI display helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from io import StringIO

import msgspec
from rich.console import Console

from statuscli.cli.display import (
    format_timestamp,
    render_descriptive_status,
    render_error,
    render_full_status,
    status_symbol,
    status_to_dict,
)
from statuscli.errors.types import TransportError
from statuscli.models import StatusLevel, StatusResponse

TS = "2024-01-01T09:30:00+02:00"


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, no_color=True), buffer


def test_format_timestamp_second_precision():
    dt = datetime(2024, 1, 1, 9, 30, 0, 123456, tzinfo=timezone(timedelta(hours=2)))

    assert format_timestamp(dt) == TS


def test_status_symbol_unknown():
    assert status_symbol(StatusLevel.UNKNOWN) == "?"


def test_render_full_status(github_status_body):
    console, buffer = _console()
    response = msgspec.json.decode(github_status_body, type=StatusResponse)

    render_full_status(console, response, timestamp=TS)

    lines = buffer.getvalue().splitlines()
    assert lines[0] == f"==================== STATUS PAGE ==================== [{TS}]"
    assert lines[-1] == lines[0]
    assert "Page Name    : GitHub" in lines
    assert "Time Zone    : Etc/UTC" in lines
    assert "Description  : All Systems Operational" in lines


def test_render_descriptive_status(degraded_status_body):
    console, buffer = _console()
    response = msgspec.json.decode(degraded_status_body, type=StatusResponse)

    render_descriptive_status(console, "github", response, timestamp=TS)

    assert buffer.getvalue().strip() == f"[{TS}] ◐ github : Minor Service Outage"


def test_render_error_verbose():
    console, buffer = _console()
    error = TransportError("GET x failed: Connection timed out", remediation="Try again")

    render_error(console, error, name="npm", timestamp=TS, verbose=True)

    lines = buffer.getvalue().splitlines()
    assert lines[0] == f"[{TS}] Error: npm : GET x failed: Connection timed out"
    assert lines[1].strip() == "Try again"


def test_status_to_dict(github_status_body):
    response = msgspec.json.decode(github_status_body, type=StatusResponse)

    data = status_to_dict(response)

    assert data["level"] == "operational"
    assert data["page"]["name"] == "GitHub"
