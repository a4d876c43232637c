from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..checkins.model import AttendanceRecord
from ..core.enums import ViewMode


class PeriodFilter(ABC):
    """Strategy Pattern: decide whether a record falls inside the selected period."""

    @abstractmethod
    def matches(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class DayFilter(PeriodFilter):
    selected_date: str

    def matches(self, record: AttendanceRecord) -> bool:
        return record.date_key == self.selected_date


@dataclass(frozen=True)
class MonthFilter(PeriodFilter):
    selected_month: str

    def matches(self, record: AttendanceRecord) -> bool:
        return record.date_key.startswith(self.selected_month)


@dataclass(frozen=True)
class YearFilter(PeriodFilter):
    selected_year: str

    def matches(self, record: AttendanceRecord) -> bool:
        return str(record.timestamp.year) == self.selected_year


@dataclass
class PeriodFilterFactory:
    """Factory Pattern: choose the period strategy for the active view mode."""

    def for_mode(self, mode: ViewMode, *, selected_date: str, selected_month: str, selected_year: str) -> PeriodFilter:
        if mode == ViewMode.DAY:
            return DayFilter(selected_date)
        if mode == ViewMode.MONTH:
            return MonthFilter(selected_month)
        if mode == ViewMode.YEAR:
            return YearFilter(selected_year)
        raise ValueError(f"Unsupported view mode: {mode!r}")
