from __future__ import annotations

from checkin_system.common.datetime_utils import display_date


def test_display_date_formats_iso_date():
    assert display_date("2024-03-01") == "01/03/2024"


def test_display_date_keeps_malformed_input():
    assert display_date("01-03-2024") == "01-03-2024"
    assert display_date("") == ""
