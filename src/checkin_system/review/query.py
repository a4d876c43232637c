"""Filtered, sorted view over the stored records.

The view is a pure function of (records, query): it never mutates the
record collection and returns the same sequence for the same inputs.
"""
from __future__ import annotations

import unicodedata
from dataclasses import dataclass, replace
from datetime import date
from typing import Iterable, Mapping, Optional

from ..checkins.model import AttendanceRecord
from ..core.constants import DEFAULT_YEAR_OPTIONS
from ..core.enums import SortMode, ViewMode
from .periods import PeriodFilterFactory


@dataclass(frozen=True)
class ReviewQuery:
    mode: ViewMode
    selected_date: str
    selected_month: str
    selected_year: str
    search: str = ""
    sort: SortMode = SortMode.DATE_DESC

    @classmethod
    def default(cls, today: date) -> "ReviewQuery":
        return cls(
            mode=ViewMode.DAY,
            selected_date=today.isoformat(),
            selected_month=today.isoformat()[:7],
            selected_year=str(today.year),
        )

    @classmethod
    def from_params(cls, params: Mapping[str, str], *, today: date) -> "ReviewQuery":
        """Build a query from request arguments; unknown values fall back to defaults."""
        base = cls.default(today)
        return replace(
            base,
            mode=_enum_or(ViewMode, params.get("mode"), base.mode),
            selected_date=(params.get("date") or base.selected_date).strip(),
            selected_month=(params.get("month") or base.selected_month).strip(),
            selected_year=(params.get("year") or base.selected_year).strip(),
            search=params.get("q") or "",
            sort=_enum_or(SortMode, params.get("sort"), base.sort),
        )

    def as_params(self) -> dict[str, str]:
        return {
            "mode": self.mode.value,
            "date": self.selected_date,
            "month": self.selected_month,
            "year": self.selected_year,
            "q": self.search,
            "sort": self.sort.value,
        }


def _enum_or(enum_cls, value: Optional[str], fallback):
    try:
        return enum_cls(value)
    except ValueError:
        return fallback


def collation_key(text: str) -> str:
    """Accent- and case-insensitive key, close to a pt-BR localeCompare."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def matches_search(record: AttendanceRecord, term: str) -> bool:
    return term.casefold() in record.full_name.casefold() or term in record.enrollment_id


def apply_view(
    records: Iterable[AttendanceRecord],
    query: ReviewQuery,
    *,
    factory: Optional[PeriodFilterFactory] = None,
) -> list[AttendanceRecord]:
    period = (factory or PeriodFilterFactory()).for_mode(
        query.mode,
        selected_date=query.selected_date,
        selected_month=query.selected_month,
        selected_year=query.selected_year,
    )
    filtered = [r for r in records if period.matches(r)]

    term = query.search.strip()
    if term:
        filtered = [r for r in filtered if matches_search(r, term)]

    if query.sort == SortMode.NAME_ASC:
        return sorted(filtered, key=lambda r: (collation_key(r.full_name), r.full_name))
    if query.sort == SortMode.DATE_ASC:
        return sorted(filtered, key=lambda r: r.timestamp)
    return sorted(filtered, key=lambda r: r.timestamp, reverse=True)


def year_options(today: date, count: int = DEFAULT_YEAR_OPTIONS) -> list[int]:
    return [today.year - i for i in range(count)]
