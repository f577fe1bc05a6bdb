"""Employee record fields as read from the directory spreadsheet."""

from __future__ import annotations

from enum import Enum


class EmployeeField(str, Enum):
    ID = "id"
    NAME = "name"
    SHORT_NAME = "short_name"
    EMAIL = "email"
    GENDER = "gender"
    DOB = "dob"
    DATE_JOINED = "date_joined"
    ROLE = "role"
    PHONE = "phone"
    COUNTRY = "country"
    BIRTHPLACE = "birthplace"
    ADDRESS = "address"
    PROJECTS = "projects"
    CLUB = "club"
    BIO = "bio"
    PHOTO = "photo"

    # Derived from dob / date_joined
    YEAR_OF_BIRTH = "yearofbirth"
    MONTH_OF_BIRTH = "monthofbirth"
    JOINING_YEAR = "joiningyear"


KNOWN_FIELDS: frozenset[str] = frozenset(field.value for field in EmployeeField)

MULTI_VALUED_FIELDS: frozenset[str] = frozenset({EmployeeField.PROJECTS.value, EmployeeField.CLUB.value})

# Values are lists for MULTI_VALUED_FIELDS, plain strings otherwise.
EmployeeRecord = dict[str, str | list[str]]
