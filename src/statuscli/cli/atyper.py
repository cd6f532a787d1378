"""Async wrapper for Typer so commands can await the request pipeline."""

import asyncio
import inspect
from functools import wraps
from typing import Any, Callable

import typer
from typer.core import TyperCommand, TyperGroup


def _async_command_wrapper(f: Callable) -> Callable:
    """Wrap an async function to run synchronously with asyncio.run."""

    @wraps(f)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        coro = f(*args, **kwargs)
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(coro)
        # Inside a running loop (tests): let the caller await it
        return coro

    return sync_wrapper


class AsyncTyperGroup(TyperGroup):
    """Group that runs async callbacks with asyncio.run."""

    def invoke(self, ctx: Any) -> Any:
        if inspect.iscoroutinefunction(self.callback):
            return asyncio.run(self.callback(**ctx.params))
        return super().invoke(ctx)


class ATyper(typer.Typer):
    """Typer subclass with async command support."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("cls", AsyncTyperGroup)
        super().__init__(*args, **kwargs)

    def command(  # type: ignore[override]
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Register a command, wrapping async functions for execution."""

        def decorator(f: Callable) -> Callable:
            if inspect.iscoroutinefunction(f):
                f = _async_command_wrapper(f)
            return typer.Typer.command(self, name, cls=cls, **kwargs)(f)

        return decorator
