"""Performance sentinel budgets and status list builders (perf tests)."""

from __future__ import annotations

import os
from typing import List, Tuple

from exstatus.kernel.record import Record


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_MERGE_MS = _budget_from_env("EXSTATUS_MAX_MERGE_MS", 500.0)
MAX_ROUND_TRIP_MS = _budget_from_env("EXSTATUS_MAX_ROUND_TRIP_MS", 500.0)

SPEC_FILES = 200
EXAMPLES_PER_FILE = 50


def build_statuses(
    spec_files: int = SPEC_FILES,
    examples_per_file: int = EXAMPLES_PER_FILE,
    status: str = "passed",
) -> List[Record]:
    """Build a uniform status list spread over nested example groups."""
    records = []
    for file_index in range(spec_files):
        spec_file = f"spec/unit/model_{file_index:04d}_spec.rb"
        for example_index in range(examples_per_file):
            group, example = divmod(example_index, 10)
            records.append({
                "example_id": f"{spec_file}[{group + 1}:{example + 1}]",
                "status": status,
                "run_time": f"0.{example_index:05d} seconds",
            })
    return records


def build_merge_case() -> Tuple[List[Record], List[Record]]:
    """This run loads half the files, with every other example not executed."""
    previous = build_statuses(status="failed")
    loaded = build_statuses(spec_files=SPEC_FILES // 2)
    this_run = [
        dict(record, status="unknown") if index % 2 else record
        for index, record in enumerate(loaded)
    ]
    return this_run, previous
