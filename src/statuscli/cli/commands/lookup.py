"""Status lookup commands: ``all`` and ``one``."""

from __future__ import annotations

import time

import typer
from rich.columns import Columns
from rich.console import Console
from rich.prompt import Prompt

from statuscli.cli.app import ExitCode, app, exit_code_for, resolve_fetch_config
from statuscli.cli.display import (
    format_timestamp,
    output_json_pretty,
    render_descriptive_status,
    render_error,
    render_full_status,
    status_to_dict,
)
from statuscli.config.settings import Config, get_config
from statuscli.core.request import RequestOptions, ResilientRequester
from statuscli.errors.types import StatusCliError
from statuscli.models import ServiceGroup
from statuscli.services.catalog import get_service, get_services
from statuscli.services.status import fetch_status, iter_statuses


@app.command("all")
async def all_command(
    ctx: typer.Context,
    group: str = typer.Option(
        None,
        "--group",
        "-g",
        help="Only check services in this group (atlassian, crypto, serverless, saas, custom)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
    ),
) -> None:
    """Show a one-line status for every service."""
    console = Console(no_color=ctx.meta.get("no_color", False))
    verbose = ctx.meta.get("verbose", False)

    config = get_config()
    services = get_services(config)

    if group:
        try:
            wanted = ServiceGroup(group.lower())
        except ValueError:
            console.print(f"[red]Unknown group:[/red] {group}")
            raise typer.Exit(ExitCode.CONFIG_ERROR) from None
        services = {name: svc for name, svc in services.items() if svc.group == wanted}

    fetch = resolve_fetch_config(ctx, config)
    options = RequestOptions.from_config(fetch)

    results: dict[str, dict] = {}
    failures = 0
    start_time = time.monotonic()

    async with ResilientRequester.from_config(fetch) as requester:
        async for service, result in iter_statuses(requester, services.values(), options):
            if isinstance(result, StatusCliError):
                failures += 1
                if json_output:
                    results[service.name] = {"error": result.to_dict()}
                else:
                    render_error(console, result, name=service.name, verbose=verbose)
                continue

            if json_output:
                results[service.name] = status_to_dict(result)
            else:
                render_descriptive_status(console, service.name, result)

    duration_ms = (time.monotonic() - start_time) * 1000

    if json_output:
        output_json_pretty(results)
    elif verbose:
        console.print(
            f"\n[dim]Checked {len(services)} services in {duration_ms:.0f}ms, "
            f"{failures} failed[/dim]"
        )

    if failures and failures == len(services):
        raise typer.Exit(ExitCode.NETWORK_ERROR)
    if failures:
        raise typer.Exit(ExitCode.PARTIAL_FAILURE)


@app.command("one")
async def one_command(
    ctx: typer.Context,
    service: str = typer.Argument(
        None,
        help="Service to show (prompts when omitted)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
    ),
) -> None:
    """Show the full status of a single service."""
    console = Console(no_color=ctx.meta.get("no_color", False))
    verbose = ctx.meta.get("verbose", False)

    config = get_config()
    if service is None:
        service = prompt_for_service(console, config)

    try:
        target = get_service(service, config)
    except StatusCliError as e:
        render_error(console, e, verbose=True)
        raise typer.Exit(exit_code_for(e)) from None

    fetch = resolve_fetch_config(ctx, config)
    options = RequestOptions.from_config(fetch)

    async with ResilientRequester.from_config(fetch) as requester:
        try:
            response = await fetch_status(requester, target.url, options=options)
        except StatusCliError as e:
            if json_output:
                output_json_pretty({"error": e.to_dict()})
            else:
                render_error(console, e, name=target.name, verbose=verbose)
            raise typer.Exit(exit_code_for(e)) from None

    if json_output:
        output_json_pretty(status_to_dict(response))
    else:
        render_full_status(console, response, timestamp=format_timestamp())


def prompt_for_service(console: Console, config: Config) -> str:
    """Ask the user to choose a service from the catalog."""
    names = list(get_services(config))
    default = config.default_service if config.default_service in names else names[0]

    console.print(Columns(names, equal=True, expand=False))
    return Prompt.ask(
        "Choose a service",
        console=console,
        choices=names,
        default=default,
        show_choices=False,
    )
