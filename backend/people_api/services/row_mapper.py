"""Spreadsheet rows -> employee records."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from people_api.models.employee import KNOWN_FIELDS, MULTI_VALUED_FIELDS, EmployeeField, EmployeeRecord
from people_api.services.photo_resolver import PhotoLookup, resolve_photo
from people_api.services.sheet_cells import cell_value

logger = logging.getLogger(__name__)


def _split_list(value: str) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",")]


def _split_date(value: str) -> tuple[str, str]:
    """Return (month, year) from an ``MM/DD/YYYY`` value, or empty strings."""
    parts = value.split("/")
    if len(parts) < 3:
        return "", ""
    return parts[0], parts[2]


def _map_row(
    header_row: Sequence[str],
    row: Sequence[str],
    photo_lookup: PhotoLookup,
    photo_host: str,
) -> EmployeeRecord:
    employee: EmployeeRecord = {}

    for index, header in enumerate(header_row):
        value = cell_value(row, index)

        if header == EmployeeField.PHOTO:
            employee[header] = resolve_photo(photo_lookup, value, photo_host)
        elif header in MULTI_VALUED_FIELDS:
            employee[header] = _split_list(value)
        elif header == EmployeeField.DOB:
            month, year = _split_date(value)
            employee[EmployeeField.MONTH_OF_BIRTH.value] = month
            employee[EmployeeField.YEAR_OF_BIRTH.value] = year
            employee[header] = value
        elif header == EmployeeField.DATE_JOINED:
            _, year = _split_date(value)
            employee[EmployeeField.JOINING_YEAR.value] = year
            employee[header] = value
        else:
            employee[header] = value

    return employee


def map_rows(
    header_row: Sequence[str],
    data_rows: Sequence[Sequence[str]],
    photo_lookup: PhotoLookup,
    photo_host: str,
) -> list[EmployeeRecord]:
    """Map each data row to one employee record keyed by ``header_row``.

    Rows are never dropped: a short row yields empty strings (or empty lists)
    for its missing cells. Headers outside ``EmployeeField`` are still mapped
    verbatim but logged, so sheet layout drift is visible.
    """
    if any(not header for header in header_row):
        logger.warning("Employee sheet has blank header cells, mapping them under an empty key")
    unknown = [header for header in header_row if header and header not in KNOWN_FIELDS]
    if unknown:
        logger.warning("Unrecognized employee sheet headers: %s", ", ".join(unknown))

    return [_map_row(header_row, row, photo_lookup, photo_host) for row in data_rows]


def records_from_grid(
    rows: Sequence[Sequence[str]],
    photo_lookup: PhotoLookup,
    photo_host: str,
) -> list[EmployeeRecord]:
    if not rows:
        logger.info("No employee data found.")
        return []

    header_row, *data_rows = rows
    return map_rows(header_row, data_rows, photo_lookup, photo_host)
