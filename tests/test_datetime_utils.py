"""Tests for date key derivation."""

from datetime import date, datetime

import pytest

from todo_analytics.utils.datetime_utils import (
    from_epoch_ms,
    iso_week_key,
    local_date_key,
    month_bounds,
    month_key,
    shift_month,
    start_of_week,
    sunday_first_weekday,
    to_epoch_ms,
    trailing_days,
)


def test_local_date_key_zero_pads():
    assert local_date_key(datetime(2026, 3, 7, 23, 59)) == "2026-03-07"


def test_local_date_key_from_epoch_uses_local_day():
    late_evening = datetime(2026, 1, 5, 23, 45)
    assert local_date_key(to_epoch_ms(late_evening)) == "2026-01-05"


def test_local_date_key_accepts_date():
    assert local_date_key(date(2025, 12, 31)) == "2025-12-31"


def test_epoch_round_trip_keeps_local_time():
    moment = datetime(2026, 6, 1, 8, 15)
    assert from_epoch_ms(to_epoch_ms(moment)) == moment


@pytest.mark.parametrize("day, expected", [
    (datetime(2024, 12, 30), "2025-W01"),  # late December in week 1 of next year
    (datetime(2021, 1, 3), "2020-W53"),    # early January in last week of previous year
    (datetime(2026, 1, 1), "2026-W01"),
    (datetime(2027, 1, 1), "2026-W53"),
    (datetime(2026, 10, 19), "2026-W43"),
])
def test_iso_week_key_year_boundaries(day, expected):
    assert iso_week_key(day) == expected


def test_month_key():
    assert month_key(datetime(2026, 2, 28, 12)) == "2026-02"


def test_trailing_days_ends_today_oldest_first():
    days = trailing_days(datetime(2026, 3, 2, 9), 3)
    assert days == [date(2026, 2, 28), date(2026, 3, 1), date(2026, 3, 2)]


def test_start_of_week_is_monday():
    assert start_of_week(date(2026, 10, 25)) == date(2026, 10, 19)
    assert start_of_week(date(2026, 10, 19)) == date(2026, 10, 19)


def test_month_bounds_leap_year():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))


def test_shift_month_across_years():
    assert shift_month(2026, 1, -1) == (2025, 12)
    assert shift_month(2026, 10, -11) == (2025, 11)
    assert shift_month(2025, 12, 1) == (2026, 1)


def test_sunday_first_weekday():
    assert sunday_first_weekday(datetime(2026, 10, 18)) == 0  # Sunday
    assert sunday_first_weekday(datetime(2026, 10, 19)) == 1  # Monday
    assert sunday_first_weekday(datetime(2026, 10, 24)) == 6  # Saturday


def test_trend_and_logbook_labels_share_name_tables():
    from todo_analytics.engine import trends
    from todo_analytics.search import logbook
    from todo_analytics.utils import datetime_utils

    assert trends.WEEKDAY_NAMES is datetime_utils.WEEKDAY_NAMES
    assert logbook.MONTH_NAMES is datetime_utils.MONTH_NAMES
    assert logbook.format_day(date(2026, 1, 3)) == "Sat, Jan 3"
