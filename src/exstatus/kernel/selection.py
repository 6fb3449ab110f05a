"""Re-run selection over persisted example statuses."""

from typing import Dict, List

from exstatus.codes import ExampleStatusValue
from .record import EXAMPLE_ID, STATUS, Record, spec_file_from


def last_run_statuses(records: List[Record]) -> Dict[str, str]:
    """Map each example id to its last known status.

    Records without a status (short rows) are skipped.
    Ids absent from the result were never recorded; callers should treat
    them as ``UNKNOWN_STATUS``.
    """
    return {
        record[EXAMPLE_ID]: record[STATUS]
        for record in records
        if STATUS in record
    }


def failed_example_ids(records: List[Record]) -> List[str]:
    """Example ids whose last known status is failed, in list order."""
    return [
        record[EXAMPLE_ID]
        for record in records
        if record.get(STATUS) == ExampleStatusValue.FAILED.value
    ]


def spec_files_with_failures(records: List[Record]) -> List[str]:
    """Sorted spec files that contain at least one failed example."""
    return sorted({spec_file_from(example_id) for example_id in failed_example_ids(records)})


def status_counts(records: List[Record]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for record in records:
        status = record.get(STATUS, "")
        counts[status] = counts.get(status, 0) + 1
    return dict(sorted(counts.items()))
