"""CLI framework for statuscli."""
from __future__ import annotations

from statuscli.cli.app import ExitCode
from statuscli.cli.app import app
from statuscli.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
