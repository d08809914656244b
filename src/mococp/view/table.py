# SPDX-License-Identifier: MIT

import sys
from typing import Optional, Sequence, TextIO

Row = Sequence[str]


class MalformedTableError(ValueError):
    """Raised when a row does not have the same cell count as the first row."""

    def __init__(self, row_index: int, expected: int, actual: int) -> None:
        super().__init__(
            f"Row {row_index} has {actual} cells, expected {expected} "
            "like the first row"
        )
        self.row_index = row_index
        self.expected = expected
        self.actual = actual


def column_widths(rows: Sequence[Row]) -> list[int]:
    """
    Compute the display width of every column.

    The column count is fixed by the first row. Raises MalformedTableError for
    the first row whose cell count differs.
    """
    if len(rows) == 0:
        return []

    widths = [0] * len(rows[0])
    for row_index, row in enumerate(rows):
        if len(row) != len(widths):
            raise MalformedTableError(row_index, len(widths), len(row))
        for column_index, cell in enumerate(row):
            widths[column_index] = max(widths[column_index], len(cell))
    return widths


def render_table(rows: Sequence[Row]) -> str:
    """
    Render rows as left-aligned, tab-separated text.

    Every cell but the last of a row is padded with spaces to its column
    width, cells are separated by a single tab and every row ends with a
    newline. An empty table renders as an empty string.
    """
    if len(rows) == 0:
        return ""
    widths = column_widths(rows)

    lines = []
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        if cells:
            # No trailing padding on the last column
            cells[-1] = row[-1]
        lines.append("\t".join(cells) + "\n")
    return "".join(lines)


def print_table(rows: Sequence[Row], stdout: Optional[TextIO] = None) -> None:
    if stdout is None:
        stdout = sys.stdout
    stdout.write(render_table(rows))
    stdout.flush()
