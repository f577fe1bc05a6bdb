from __future__ import annotations

from collections.abc import Iterable

from people_api.core.errors import UnknownFieldError
from people_api.models.employee import KNOWN_FIELDS, MULTI_VALUED_FIELDS, EmployeeRecord
from people_api.models.master_data import Category, MasterData, SubCategory


def filter_category(name: str, master_data: MasterData) -> list[Category] | list[SubCategory]:
    if name not in MasterData.model_fields:
        raise UnknownFieldError(name)
    return getattr(master_data, name)


def filter_employee(field: str, value: str, employees: Iterable[EmployeeRecord]) -> list[EmployeeRecord]:
    if field not in KNOWN_FIELDS:
        raise UnknownFieldError(field)

    if field in MULTI_VALUED_FIELDS:
        return [employee for employee in employees if value in (employee.get(field) or [])]
    return [employee for employee in employees if employee.get(field) == value]
