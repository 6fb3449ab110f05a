"""Fixed-width text table used for the persisted example status file.

Format::

    example_id            | status | run_time        |
    --------------------- | ------ | --------------- |
    spec/foo_spec.rb[1:1] | passed | 0.00102 seconds |

Cells are left-justified to the column width, joined with ``" | "`` and every
line ends with ``" |"``. The text is newline-terminated.
"""

import re
from typing import List, Optional

from .record import Record

COLUMN_SEPARATOR = " | "
ROW_TERMINATOR = " |"

# Whitespace, a pipe, then one whitespace character (or end of line) so that
# empty cells and leading spaces in a value survive a round trip.
_SPLIT_PATTERN = re.compile(r"\s+\|(?:\s|$)")


class ExampleStatusDumper:
    """Renders uniform records as an aligned, human-readable table."""

    def __init__(self, records: List[Record]):
        self._records = records
        self._headers = list(records[0].keys()) if records else []
        self._rows = [
            [record.get(header, "") for header in self._headers]
            for record in records
        ]
        self._column_widths = self._compute_column_widths()

    def dump(self) -> Optional[str]:
        if not self._records:
            return None
        lines = self._formatted_header_rows() + [
            self._formatted_row_from(row) for row in self._rows
        ]
        return "\n".join(lines) + "\n"

    def _compute_column_widths(self) -> List[int]:
        widths = []
        for index, header in enumerate(self._headers):
            values = [row[index] for row in self._rows]
            widths.append(max(len(value) for value in values + [header]))
        return widths

    def _formatted_header_rows(self) -> List[str]:
        dividers = ["-" * width for width in self._column_widths]
        return [
            self._formatted_row_from(self._headers),
            self._formatted_row_from(dividers),
        ]

    def _formatted_row_from(self, values: List[str]) -> str:
        padded = [
            value.ljust(width) for value, width in zip(values, self._column_widths)
        ]
        return COLUMN_SEPARATOR.join(padded) + ROW_TERMINATOR


def _split_line(line: str) -> List[str]:
    line = line.rstrip("\r\n")
    cells = _SPLIT_PATTERN.split(line)
    # The row terminator leaves one empty trailing cell behind.
    if len(cells) > 1 and cells[-1] == "":
        cells.pop()
    return cells


def dump(records: List[Record]) -> Optional[str]:
    """Render records as a table; ``None`` when there is nothing to dump.

    Headers come from the first record. Records missing a header field render
    an empty cell; extra fields are ignored.
    """
    return ExampleStatusDumper(records).dump()


def parse(text: str) -> List[Record]:
    """Parse a table produced by :func:`dump` back into records.

    The first line holds the field names and the second (the divider) is
    skipped. Values are returned as raw strings. A row with fewer cells than
    there are headers yields a record with fewer fields; blank lines are
    ignored.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        return []

    headers = _split_line(lines[0])
    records = []
    for line in lines[2:]:
        if not line.strip():
            continue
        records.append(dict(zip(headers, _split_line(line))))
    return records
