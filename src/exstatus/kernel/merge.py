"""Merge this run's example statuses with those persisted by previous runs.

The merged list:
- drops examples from previous runs that we know for sure no longer exist;
- keeps the latest known status for examples that either definitely exist
  or may still exist.

Examples that were loaded but not executed this run (filtering, fail-fast)
are expected to carry ``UNKNOWN_STATUS``; they never overwrite a status
recorded by an earlier run.
"""

from typing import Callable, Dict, FrozenSet, List, Optional

from .record import (
    EXAMPLE_ID,
    STATUS,
    UNKNOWN_STATUS,
    Record,
    sort_key_from,
    spec_file_from,
)

FileExistsPredicate = Callable[[str], bool]


class FileExistsCache:
    """Memoizes a file-existence predicate, one query per distinct path."""

    def __init__(self, predicate: FileExistsPredicate):
        self._predicate = predicate
        self._results: Dict[str, bool] = {}

    def exists(self, path: str) -> bool:
        if path not in self._results:
            self._results[path] = self._predicate(path)
        return self._results[path]

    def __len__(self) -> int:
        return len(self._results)


def _index_by_id(records: List[Record]) -> Dict[str, Record]:
    """Index records by example id. Later duplicates replace earlier ones."""
    indexed: Dict[str, Record] = {}
    for record in records:
        indexed[record[EXAMPLE_ID]] = record
    return indexed


class ExampleStatusMerger:
    """Single-use merge of two example status lists.

    Args:
        this_run: Records for every example loaded this run, executed or not.
        from_previous_runs: Records loaded from the persisted status file.
        file_exists: Predicate telling whether a spec file still exists.
            Queried at most once per spec file.
    """

    def __init__(
        self,
        this_run: List[Record],
        from_previous_runs: List[Record],
        file_exists: FileExistsPredicate,
    ):
        self._this_run = _index_by_id(this_run)
        self._from_previous_runs = _index_by_id(from_previous_runs)
        self._file_exists_cache = FileExistsCache(file_exists)
        self._loaded_spec_files: Optional[FrozenSet[str]] = None

    def merge(self) -> List[Record]:
        self._delete_previous_examples_that_no_longer_exist()

        merged = dict(self._this_run)
        for example_id, old in self._from_previous_runs.items():
            new = merged.get(example_id)
            if new is None or new[STATUS] == UNKNOWN_STATUS:
                merged[example_id] = old

        return sorted(merged.values(), key=sort_key_from)

    @property
    def loaded_spec_files(self) -> FrozenSet[str]:
        """Spec files with at least one example loaded this run."""
        if self._loaded_spec_files is None:
            self._loaded_spec_files = frozenset(
                spec_file_from(example_id) for example_id in self._this_run
            )
        return self._loaded_spec_files

    def _delete_previous_examples_that_no_longer_exist(self) -> None:
        self._from_previous_runs = {
            example_id: record
            for example_id, record in self._from_previous_runs.items()
            if not self._example_must_no_longer_exist(example_id)
        }

    def _example_must_no_longer_exist(self, example_id: str) -> bool:
        if example_id in self._this_run:
            return False

        spec_file = spec_file_from(example_id)

        # this_run includes loaded-but-not-executed examples, so a loaded file
        # missing this id means the example was removed or moved.
        if spec_file in self.loaded_spec_files:
            return True

        # Not loaded (filtered out): it may still exist while the file does.
        return not self._file_exists_cache.exists(spec_file)


def merge(
    this_run: List[Record],
    from_previous_runs: List[Record],
    file_exists: FileExistsPredicate,
) -> List[Record]:
    """Merge two example status lists into a new, sorted list.

    Records are selected whole, never combined field by field, and the
    inputs are left untouched.

    Raises:
        ScopedIdFormatError: If an example id cannot be parsed for sorting.
    """
    return ExampleStatusMerger(this_run, from_previous_runs, file_exists).merge()
