"""Main CLI application for statuscli."""

from __future__ import annotations

from enum import IntEnum

import msgspec
import typer

from statuscli.cli.atyper import ATyper
from statuscli.config.settings import Config, FetchConfig, get_config
from statuscli.errors.types import ErrorCategory, StatusCliError
from statuscli.logging import configure_logging

app = ATyper(
    name="statuscli",
    help="Check third-party service status from the terminal",
    add_completion=True,
    no_args_is_help=False,
    invoke_without_command=True,
)


class ExitCode(IntEnum):
    """Exit codes for statuscli."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    NETWORK_ERROR = 3
    CONFIG_ERROR = 4
    PARTIAL_FAILURE = 5


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Enable debug logging for HTTP requests"
    ),
    timeout: float = typer.Option(
        None, "--timeout", "-t", min=0.1, help="Per-attempt timeout in seconds"
    ),
    retries: int = typer.Option(
        None, "--retries", "-r", min=0, help="Retries for network errors and 5xx responses"
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show remediation hints for errors"
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Statuscli - Check third-party service status."""
    if version:
        from statuscli import __version__

        typer.echo(f"statuscli {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    config = get_config()

    # Store options in context
    ctx.meta["debug"] = debug or config.fetch.debug
    ctx.meta["timeout"] = timeout
    ctx.meta["retries"] = retries
    ctx.meta["no_color"] = no_color or not config.display.color
    ctx.meta["verbose"] = verbose

    configure_logging(debug=ctx.meta["debug"], color=not ctx.meta["no_color"])


def resolve_fetch_config(ctx: typer.Context, config: Config | None = None) -> FetchConfig:
    """Apply command-line overrides to the configured fetch settings."""
    fetch = (config or get_config()).fetch
    overrides = {}
    if ctx.meta.get("timeout") is not None:
        overrides["timeout"] = float(ctx.meta["timeout"])
    if ctx.meta.get("retries") is not None:
        overrides["max_retries"] = int(ctx.meta["retries"])
    if ctx.meta.get("debug"):
        overrides["debug"] = True
    return msgspec.structs.replace(fetch, **overrides)


def exit_code_for(error: StatusCliError) -> ExitCode:
    """Map an error category to a process exit code."""
    match error.category:
        case ErrorCategory.TRANSPORT | ErrorCategory.READ | ErrorCategory.SERVER:
            return ExitCode.NETWORK_ERROR
        case ErrorCategory.INPUT | ErrorCategory.CONFIGURATION:
            return ExitCode.CONFIG_ERROR
        case _:
            return ExitCode.GENERAL_ERROR


def run_app() -> None:
    """Run the CLI app."""
    app()


# Import command modules - they register themselves via @app.command() decorators
from statuscli.cli.commands import catalog  # noqa: E402, F401
from statuscli.cli.commands import config as config_cmd  # noqa: E402
from statuscli.cli.commands import lookup  # noqa: E402, F401

app.add_typer(config_cmd.config_app, name="config")
