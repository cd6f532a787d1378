"""Rich display components for the statuscli CLI."""

from __future__ import annotations

import json
import sys
from datetime import datetime

import msgspec
from rich.console import Console
from rich.table import Table
from rich.text import Text

from statuscli.errors.types import StatusCliError
from statuscli.models import Service, StatusLevel, StatusResponse

BORDER_TITLE = "==================== STATUS PAGE ===================="


def format_timestamp(dt: datetime | None = None) -> str:
    """Format a local timestamp as RFC 3339 with second precision."""
    dt = dt or datetime.now().astimezone()
    return dt.isoformat(timespec="seconds")


def status_symbol(level: StatusLevel) -> str:
    """Get Unicode symbol for status level."""
    return {
        StatusLevel.OPERATIONAL: "●",
        StatusLevel.DEGRADED: "◐",
        StatusLevel.PARTIAL_OUTAGE: "◑",
        StatusLevel.MAJOR_OUTAGE: "○",
        StatusLevel.UNKNOWN: "?",
    }.get(level, "?")


def status_color(level: StatusLevel) -> str:
    """Get color for status level."""
    return {
        StatusLevel.OPERATIONAL: "green",
        StatusLevel.DEGRADED: "yellow",
        StatusLevel.PARTIAL_OUTAGE: "dark_orange",
        StatusLevel.MAJOR_OUTAGE: "red",
        StatusLevel.UNKNOWN: "dim",
    }.get(level, "dim")


def render_full_status(
    console: Console,
    response: StatusResponse,
    timestamp: str | None = None,
) -> None:
    """Print every field of a status response between timestamped borders."""
    timestamp = timestamp or format_timestamp()
    border = Text(f"{BORDER_TITLE} [{timestamp}]", style="blue")
    color = status_color(response.level)

    rows = (
        ("Page Name", response.page.name, "cyan"),
        ("Page ID", response.page.id, "cyan"),
        ("URL", response.page.url, "cyan"),
        ("Time Zone", response.page.time_zone, "cyan"),
        ("Updated At", response.page.updated_at, "cyan"),
        ("Indicator", f"{status_symbol(response.level)} {response.status.indicator}", color),
        ("Description", response.status.description, "yellow"),
    )

    console.print(border)
    for label, value, style in rows:
        line = Text()
        line.append(f"{label:<13}:", style=style)
        line.append(f" {value}")
        console.print(line)
    console.print(border)


def render_descriptive_status(
    console: Console,
    name: str,
    response: StatusResponse,
    timestamp: str | None = None,
) -> None:
    """Print a one-line ``[timestamp] name : description`` summary."""
    timestamp = timestamp or format_timestamp()
    color = status_color(response.level)
    line = Text(f"[{timestamp}] ")
    line.append(status_symbol(response.level), style=color)
    line.append(f" {name} : {response.description}", style="yellow")
    console.print(line)


def render_error(
    console: Console,
    error: StatusCliError,
    name: str | None = None,
    timestamp: str | None = None,
    verbose: bool = False,
) -> None:
    """Print a timestamped error line, with remediation when verbose."""
    timestamp = timestamp or format_timestamp()
    line = Text(f"[{timestamp}] ")
    line.append("Error:", style="red")
    if name:
        line.append(f" {name} :")
    line.append(f" {error.message}")
    console.print(line)

    if verbose and error.remediation:
        console.print(Text(f"  {error.remediation}", style="dim"))


def render_service_table(console: Console, services: dict[str, Service]) -> None:
    """Print the service catalog as a table."""
    table = Table(title="Services", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Group", style="magenta")
    table.add_column("URL", style="dim")

    for name, service in services.items():
        table.add_row(name, service.group.value, service.url)

    console.print(table)


def status_to_dict(response: StatusResponse) -> dict:
    """Convert a status response to a JSON-ready dict."""
    data = msgspec.to_builtins(response)
    data["level"] = response.level.value
    return data


def output_json_pretty(data: object, indent: int = 2) -> None:
    """Output data as pretty-printed JSON to stdout.

    Args:
        data: Any msgspec-serializable object
        indent: Number of spaces for indentation
    """
    python_obj = msgspec.json.decode(msgspec.json.encode(data))
    sys.stdout.write(json.dumps(python_obj, indent=indent))
    sys.stdout.write("\n")
