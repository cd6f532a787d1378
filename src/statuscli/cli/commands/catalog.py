"""Service catalog command for statuscli."""

from __future__ import annotations

import typer
from rich.console import Console

from statuscli.cli.app import app
from statuscli.cli.display import output_json_pretty, render_service_table
from statuscli.config.settings import get_config
from statuscli.services.catalog import get_services


@app.command("list")
def list_command(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
    ),
) -> None:
    """List the services statuscli knows about."""
    services = get_services(get_config())

    if json_output:
        output_json_pretty(
            {name: {"group": svc.group.value, "url": svc.url} for name, svc in services.items()}
        )
        return

    console = Console(no_color=ctx.meta.get("no_color", False))
    render_service_table(console, services)
