"""Config management commands for statuscli."""

from __future__ import annotations

import msgspec.toml
import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from statuscli.cli.atyper import ATyper
from statuscli.cli.display import output_json_pretty
from statuscli.config.paths import config_dir, config_file
from statuscli.config.settings import get_config

config_app = ATyper(help="Show configuration settings.")


@config_app.command("show")
def config_show_command(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
    ),
) -> None:
    """Display current settings."""
    config = get_config()
    config_path = config_file()

    if json_output:
        data = msgspec.to_builtins(config)
        # to_builtins drops defaults; show the effective values instead
        data["fetch"] = {
            "timeout": config.fetch.timeout,
            "connect_timeout": config.fetch.connect_timeout,
            "max_retries": config.fetch.max_retries,
            "debug": config.fetch.debug,
        }
        data["display"] = {"color": config.display.color}
        data["default_service"] = config.default_service
        data["path"] = str(config_path)
        output_json_pretty(data)
        return

    console = Console(no_color=ctx.meta.get("no_color", False))
    toml_data = msgspec.toml.encode(config).decode()
    console.print(
        Panel(Syntax(toml_data or "# defaults", "toml"), title=f"Config: {config_path}")
    )

    if not config_path.exists():
        console.print("[dim]Using default configuration (file not created yet)[/dim]")


@config_app.command("path")
def config_path_command(ctx: typer.Context) -> None:
    """Show the config file location."""
    console = Console(no_color=ctx.meta.get("no_color", False))
    console.print(f"Config dir:    {config_dir()}")
    console.print(f"Config file:   {config_file()}")
    if ctx.meta.get("verbose", False):
        console.print(f"[dim]Config file exists: {config_file().exists()}[/dim]")
