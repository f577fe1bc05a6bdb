from __future__ import annotations

from collections.abc import Sequence


def cell_value(row: Sequence[str], index: int) -> str:
    """Cell at ``index``, or ``""`` when the row is short or the cell is empty.

    The Sheets API omits trailing empty cells, so rows are often shorter than the header.
    """
    if index >= len(row):
        return ""
    return row[index] or ""
