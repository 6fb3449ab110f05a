"""Public API for the exstatus package.

High-level functions for recording, reconciling and reading example
statuses. Callers should use these instead of importing from _internal.
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from exstatus.kernel.merge import FileExistsPredicate, merge
from exstatus.kernel.record import ExampleStatus, Record
from exstatus.kernel.selection import (
    failed_example_ids,
    last_run_statuses,
    spec_files_with_failures,
    status_counts,
)
from exstatus.kernel.table import dump, parse
from exstatus._internal.io.status_file import file_exists as path_exists, load_from, persist


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def merge_statuses(
    this_run: List[Record],
    from_previous_runs: List[Record],
    file_exists: Optional[FileExistsPredicate] = None,
) -> List[Record]:
    """Merge this run's records with previously persisted ones.

    Args:
        this_run: Records for every example loaded this run. Examples that
            were not executed must have status ``"unknown"``.
        from_previous_runs: Records loaded from the status file.
        file_exists: Spec file existence predicate; defaults to checking the
            local filesystem.

    Returns:
        New list sorted by spec file and scoped id.
    """
    predicate = file_exists if file_exists is not None else path_exists
    return merge(this_run, from_previous_runs, predicate)


def dump_statuses(records: List[Record]) -> Optional[str]:
    """Render records in the persisted table format (``None`` if empty)."""
    return dump(records)


def parse_statuses(text: str) -> List[Record]:
    """Parse the persisted table format."""
    return parse(text)


def load_statuses(path: Union[str, os.PathLike, Path]) -> List[Record]:
    """Load records from a status file; missing file gives an empty list."""
    return load_from(_normalize_path(path))


def persist_statuses(
    records: List[Record],
    path: Union[str, os.PathLike, Path],
) -> List[Record]:
    """Merge ``records`` into the status file at ``path`` and rewrite it."""
    return persist(records, _normalize_path(path))


def records_from_results(results: Iterable[Dict[str, Any]]) -> List[Record]:
    """Build this-run records from raw result dicts.

    Each result needs an ``example_id`` (``id`` is accepted as an alias) and
    may carry ``status`` and ``run_time`` in seconds. A missing status marks
    the example as loaded but not executed.

    Raises:
        pydantic.ValidationError: If a result has unexpected or invalid fields.
    """
    records = []
    for result in results:
        data = dict(result)
        if "id" in data and "example_id" not in data:
            data["example_id"] = data.pop("id")
        records.append(ExampleStatus(**data).to_record())
    return records


__all__ = [
    "ExampleStatus",
    "Record",
    "merge_statuses",
    "dump_statuses",
    "parse_statuses",
    "load_statuses",
    "persist_statuses",
    "records_from_results",
    "last_run_statuses",
    "failed_example_ids",
    "spec_files_with_failures",
    "status_counts",
]
