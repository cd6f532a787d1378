"""Status services for statuscli."""

from statuscli.services.catalog import (
    BUILTIN_SERVICES,
    get_service,
    get_services,
    list_service_names,
)
from statuscli.services.status import decode_status, fetch_status, iter_statuses

__all__ = [
    # catalog
    "BUILTIN_SERVICES",
    "get_service",
    "get_services",
    "list_service_names",
    # status
    "decode_status",
    "fetch_status",
    "iter_statuses",
]
