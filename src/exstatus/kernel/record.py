"""Example status records and scoped identifier parsing.

A record is a plain insertion-ordered ``Dict[str, str]``. Every record in a
list is expected to carry the same field names in the same order; this is
the caller's responsibility and is not validated here.

Example ids follow the grammar ``<spec_file>[<int>(:<int>)*]``, e.g.
``"spec/foo_spec.rb[1:2]"``.
"""

import re
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from exstatus.codes import ExampleStatusValue

Record = Dict[str, str]

EXAMPLE_ID = "example_id"
STATUS = "status"
RUN_TIME = "run_time"

# Loaded this run but not executed (filtered out, fail-fast, etc.)
UNKNOWN_STATUS = ExampleStatusValue.UNKNOWN.value

_ON_SQUARE_BRACKETS = re.compile(r"[\[\]]")
_SCOPED_COMPONENT = re.compile(r"[0-9]+")

SUB_SECOND_PRECISION = 5
DEFAULT_PRECISION = 2


class ScopedIdFormatError(ValueError):
    """Raised when an example id does not carry a numeric scoped id."""
    pass


def spec_file_from(example_id: str) -> str:
    """Return the spec file portion of an example id (text before the first ``[``)."""
    return example_id.partition("[")[0]


def parse_example_id(example_id: str) -> Tuple[str, Tuple[int, ...]]:
    """Split an example id into its spec file and integer scoped id components.

    Raises:
        ScopedIdFormatError: If the id has no bracketed suffix or any
            component is not a non-negative integer.
    """
    parts = _ON_SQUARE_BRACKETS.split(example_id)
    if len(parts) < 2:
        raise ScopedIdFormatError(
            f"non-numeric scoped-id component in {example_id!r}: missing '[...]' suffix"
        )

    spec_file, scoped_id = parts[0], parts[1]
    components = []
    for component in scoped_id.split(":"):
        if not _SCOPED_COMPONENT.fullmatch(component):
            raise ScopedIdFormatError(
                f"non-numeric scoped-id component {component!r} in {example_id!r}"
            )
        components.append(int(component))
    return spec_file, tuple(components)


def sort_key_from(record: Record) -> Tuple[Union[str, int], ...]:
    """Sort key grouping records by spec file, then by nesting position."""
    spec_file, components = parse_example_id(record[EXAMPLE_ID])
    return (spec_file, *components)


def _strip_trailing_zeroes(formatted: str) -> str:
    if "." not in formatted:
        return formatted
    return formatted.rstrip("0").rstrip(".")


def _format_seconds(seconds: float, precision: int) -> str:
    return _strip_trailing_zeroes(f"{seconds:.{precision}f}")


def _pluralize(count: str, unit: str) -> str:
    return f"{count} {unit}" if count == "1" else f"{count} {unit}s"


def format_duration(seconds: float) -> str:
    """Render a run time the way it is stored in the status table.

    Precision shrinks as durations grow (five decimal places below a second,
    none past five minutes) and trailing zeros are dropped. Durations over a
    minute are split into minutes and seconds.

    >>> format_duration(0.0012)
    '0.0012 seconds'
    >>> format_duration(61.5)
    '1 minute 1.5 seconds'
    """
    if seconds < 1:
        precision = SUB_SECOND_PRECISION
    elif seconds < 120:
        precision = DEFAULT_PRECISION
    elif seconds < 300:
        precision = 1
    else:
        precision = 0

    if seconds > 60:
        minutes = int(seconds // 60)
        remainder = round(seconds - minutes * 60, precision)
        if remainder >= 60:
            minutes += 1
            remainder -= 60
        return (
            f"{_pluralize(str(minutes), 'minute')} "
            f"{_pluralize(_format_seconds(remainder, precision), 'second')}"
        )

    return _pluralize(_format_seconds(seconds, precision), "second")


class ExampleStatus(BaseModel):
    """Outcome of a single example in the current run."""
    example_id: str
    status: Optional[str] = None  # None when the example was loaded but not run
    run_time: Optional[float] = None  # seconds

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: Optional[str]) -> Optional[str]:
        """Reject empty status strings; missing status means not executed."""
        if v is not None and not v:
            raise ValueError("status must not be empty (omit it for examples that did not run)")
        return v

    def to_record(self) -> Record:
        """Convert to a persisted record with fields in table column order."""
        return {
            EXAMPLE_ID: self.example_id,
            STATUS: self.status if self.status is not None else UNKNOWN_STATUS,
            RUN_TIME: format_duration(self.run_time) if self.run_time is not None else "",
        }


def records_from(statuses: List[ExampleStatus]) -> List[Record]:
    """Convert this run's example statuses to records."""
    return [status.to_record() for status in statuses]
