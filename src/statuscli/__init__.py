"""statuscli: Check third-party service status from the terminal."""

from __future__ import annotations

__version__ = "0.1.0"

from statuscli.models import PageStatus
from statuscli.models import Service
from statuscli.models import ServiceGroup
from statuscli.models import StatusLevel
from statuscli.models import StatusPage
from statuscli.models import StatusResponse
from statuscli.models import indicator_to_level

__all__ = [
    "__version__",
    "PageStatus",
    "Service",
    "ServiceGroup",
    "StatusLevel",
    "StatusPage",
    "StatusResponse",
    "indicator_to_level",
]


def main() -> None:
    """Entry point for the statuscli CLI."""
    from statuscli.cli.app import run_app

    run_app()
