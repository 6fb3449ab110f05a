"""Well-known example status values.

Statuses are opaque strings to the merge and table code; these constants
keep callers from spelling the common ones by hand.
"""

from enum import Enum


class ExampleStatusValue(str, Enum):
    """Status values written by the test runner."""

    # Terminal outcomes
    PASSED = "passed"
    FAILED = "failed"
    PENDING = "pending"

    # Loaded but not executed this run
    UNKNOWN = "unknown"
