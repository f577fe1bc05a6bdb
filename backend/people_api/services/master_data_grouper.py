"""Master data sheet -> grouped category lists."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from people_api.models.master_data import Category, MasterData, SubCategory
from people_api.services.photo_resolver import PhotoLookup, resolve_photo
from people_api.services.sheet_cells import cell_value

logger = logging.getLogger(__name__)

# Rows above the data: a group title row and a column label row
_LABEL_ROWS = 2


class ColumnGroup(NamedTuple):
    name: str
    title_col: int
    photo_col: int
    key_col: int | None = None


# Sheet layout: one (title, photo) column pair per list, separated by a blank column.
COLUMN_LAYOUT: list[ColumnGroup] = [
    ColumnGroup("category", 1, 2, key_col=0),
    ColumnGroup("country", 4, 5),
    ColumnGroup("role", 7, 8),
    ColumnGroup("birthplace", 10, 11),
    ColumnGroup("yearofbirth", 13, 14),
    ColumnGroup("monthofbirth", 16, 17),
    ColumnGroup("project", 19, 20),
    ColumnGroup("club", 22, 23),
    ColumnGroup("gender", 25, 26),
    ColumnGroup("joiningyear", 28, 29),
    ColumnGroup("office", 31, 32),
]


def _entry(
    group: ColumnGroup,
    row: Sequence[str],
    photo_lookup: PhotoLookup,
    photo_host: str,
) -> Category | SubCategory | None:
    label_col = group.key_col if group.key_col is not None else group.title_col
    if not cell_value(row, label_col):
        return None

    title = cell_value(row, group.title_col)
    photo = resolve_photo(photo_lookup, cell_value(row, group.photo_col), photo_host)

    if group.key_col is not None:
        return Category(key=cell_value(row, group.key_col), title=title, photo=photo)
    return SubCategory(title=title, photo=photo)


def build_master_data(
    all_rows: Sequence[Sequence[str]],
    photo_lookup: PhotoLookup,
    photo_host: str,
) -> MasterData:
    groups: dict[str, list] = {group.name: [] for group in COLUMN_LAYOUT}

    if len(all_rows) <= 1:
        logger.info("No data found.")
        return MasterData(**groups)

    for row in all_rows[_LABEL_ROWS:]:
        for group in COLUMN_LAYOUT:
            entry = _entry(group, row, photo_lookup, photo_host)
            if entry is not None:
                groups[group.name].append(entry)

    return MasterData(**groups)
