from __future__ import annotations

from enum import Enum


class RecordStatus(str, Enum):
    """Terminal status of an attendance record (no state machine)."""

    REGISTERED = "registrado"


class StorageBackend(str, Enum):
    MEMORY = "memory"
    FILE = "file"
    MYSQL = "mysql"


class ViewMode(str, Enum):
    """Period scoping applied before the review table is rendered."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class SortMode(str, Enum):
    NAME_ASC = "name_asc"
    DATE_DESC = "date_desc"
    DATE_ASC = "date_asc"
