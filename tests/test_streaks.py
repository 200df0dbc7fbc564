"""Tests for streak and daily average calculation."""

from datetime import timedelta

from todo_analytics.engine.streaks import (
    calculate_daily_average,
    calculate_streak,
    calculate_streak_and_average,
    count_daily_completions,
)

from .conftest import NOW, make_record, records_on_days


def test_five_consecutive_days_ending_today(now):
    records = records_on_days(range(5))
    summary = calculate_streak_and_average(records, now)
    assert summary.streak == 5


def test_empty_today_falls_back_to_yesterday(now):
    summary = calculate_streak_and_average(records_on_days([1], per_day=2), now)
    assert summary.streak == 1
    assert summary.daily_counts == {"2026-10-18": 2}


def test_empty_records(now):
    summary = calculate_streak_and_average([], now)
    assert summary.streak == 0
    assert summary.daily_average == "0.0"
    assert summary.daily_counts == {}


def test_today_and_yesterday_empty_breaks_streak(now):
    assert calculate_streak_and_average(records_on_days([2, 3, 4]), now).streak == 0


def test_gap_stops_the_walk(now):
    assert calculate_streak_and_average(records_on_days([0, 1, 3, 4]), now).streak == 2


def test_grace_day_then_run(now):
    assert calculate_streak_and_average(records_on_days([1, 2, 3]), now).streak == 3


def test_daily_average_divides_by_window_not_active_days(now):
    # 15 tasks on a single day inside the window
    records = records_on_days([3], per_day=15)
    assert calculate_streak_and_average(records, now).daily_average == "0.5"


def test_daily_average_window_includes_today_and_29_prior_days(now):
    inside = records_on_days([29], per_day=30)
    outside = records_on_days([30], per_day=30)
    assert calculate_streak_and_average(inside, now).daily_average == "1.0"
    assert calculate_streak_and_average(outside, now).daily_average == "0.0"


def test_records_without_completion_time_are_ignored(now):
    records = [make_record(uid="open", created_at=NOW - timedelta(hours=2))]
    counts = count_daily_completions(records)
    assert counts == {}
    assert calculate_streak(counts, now) == 0


def test_bucketing_uses_local_calendar_day(now):
    late = NOW.replace(hour=23, minute=59) - timedelta(days=1)
    early = NOW.replace(hour=0, minute=1)
    counts = count_daily_completions([
        make_record(uid="a", completed_at=late),
        make_record(uid="b", completed_at=early),
    ])
    assert counts == {"2026-10-18": 1, "2026-10-19": 1}


def test_daily_average_custom_window(now):
    counts = {"2026-10-19": 7}
    assert calculate_daily_average(counts, now, window_days=7) == "1.0"


def test_repeated_calls_are_deterministic(now):
    records = records_on_days([0, 1, 2, 5, 9], per_day=3)
    assert calculate_streak_and_average(records, now) == calculate_streak_and_average(records, now)
