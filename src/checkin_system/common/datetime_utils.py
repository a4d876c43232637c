from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_KEY_FORMAT, DISPLAY_DATE_FORMAT, TIME_LABEL_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def date_key_of(moment: datetime) -> str:
    return moment.strftime(DATE_KEY_FORMAT)


def time_label_of(moment: datetime) -> str:
    return moment.strftime(TIME_LABEL_FORMAT)


def display_date(date_key: str) -> str:
    """YYYY-MM-DD -> DD/MM/YYYY for messages and tables; other input is returned as-is."""
    try:
        return parse_iso_date(date_key).strftime(DISPLAY_DATE_FORMAT)
    except (TypeError, ValueError):
        return str(date_key)
