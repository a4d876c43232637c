from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, CheckinConfig


class RecordStore(Protocol):
    """Repository interface for attendance records and the gate config.

    Services depend on this interface, not on a concrete storage backend.
    No uniqueness is enforced here; duplicate prevention belongs to callers.
    """

    def list_records(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def save_record(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def delete_record(self, record_id: str) -> None:
        raise NotImplementedError

    def get_config(self) -> CheckinConfig:
        raise NotImplementedError

    def save_config(self, config: CheckinConfig) -> None:
        raise NotImplementedError

    def find_todays_record(self, enrollment_id: str, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        raise NotImplementedError
