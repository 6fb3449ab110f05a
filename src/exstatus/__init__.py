"""exstatus: example status persistence for re-running failed tests."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("exstatus")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from exstatus.api import (
    merge_statuses,
    dump_statuses,
    parse_statuses,
    load_statuses,
    persist_statuses,
    records_from_results,
)
from exstatus.codes import ExampleStatusValue
from exstatus.kernel.record import ExampleStatus, ScopedIdFormatError, UNKNOWN_STATUS

__all__ = [
    "__version__",
    "merge_statuses",
    "dump_statuses",
    "parse_statuses",
    "load_statuses",
    "persist_statuses",
    "records_from_results",
    "ExampleStatus",
    "ExampleStatusValue",
    "ScopedIdFormatError",
    "UNKNOWN_STATUS",
]
