"""Status file I/O helpers (internal)."""

import logging
import os
from pathlib import Path
from typing import List, Union

from exstatus.kernel.merge import merge
from exstatus.kernel.record import Record
from exstatus.kernel.table import dump, parse

logger = logging.getLogger(__name__)


def file_exists(path: Union[str, os.PathLike]) -> bool:
    """Return whether ``path`` exists.

    Unlike ``os.path.exists`` this only treats a missing path as absent;
    other OS errors (e.g. permission denied) are raised.
    """
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def load_from(path: Union[str, Path]) -> List[Record]:
    """Load persisted example statuses; an absent file yields no records."""
    status_path = Path(path)
    if not file_exists(status_path):
        logger.debug("No status file at %s", status_path)
        return []

    records = parse(status_path.read_text(encoding="utf-8"))
    logger.debug("Loaded %d example statuses from %s", len(records), status_path)
    return records


def persist(records: List[Record], path: Union[str, Path]) -> List[Record]:
    """Merge this run's records into the status file at ``path``.

    The previous contents are read, merged with ``records`` and the file is
    rewritten. Parent directories are created as needed.

    Returns:
        The merged records as written.
    """
    status_path = Path(path)
    previous = load_from(status_path)
    merged = merge(records, previous, file_exists)
    logger.debug(
        "Merged %d this-run and %d previous statuses into %d",
        len(records), len(previous), len(merged),
    )

    status_path.parent.mkdir(parents=True, exist_ok=True)
    status_path.write_text(dump(merged) or "", encoding="utf-8")
    logger.info("Persisted %d example statuses to %s", len(merged), status_path)
    return merged
