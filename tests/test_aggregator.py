"""Tests for analytics aggregation."""

from datetime import timedelta

import pytest

from todo_analytics.engine.aggregator import build_analytics, generate_analytics, top_entries
from todo_analytics.models.task import TaskRecord
from todo_analytics.reporting.generator import TaskGenerator

from .conftest import NOW, make_record, records_on_days


def test_time_buckets_for_completed_records():
    analytics = generate_analytics([make_record(completed_at=NOW)])
    assert analytics.daily_counts == {"2026-10-19": 1}
    assert analytics.weekly_trend == {"2026-W43": 1}
    assert analytics.monthly_trend == {"2026-10": 1}
    assert analytics.hour_distribution[14] == 1
    assert analytics.weekday_distribution[1] == 1  # Monday
    assert sum(analytics.hour_distribution) == 1


def test_weekday_distribution_is_sunday_first():
    # NOW is Monday; six days back is the previous Tuesday, one day back is Sunday
    analytics = generate_analytics(records_on_days(range(7)))
    assert analytics.weekday_distribution == [1] * 7
    sunday_only = generate_analytics(records_on_days([1]))
    assert sunday_only.weekday_distribution[0] == 1


def test_text_extraction_runs_without_timestamps():
    record = make_record(content="Write #report for [[Project X]] {{[[DONE]]}}", page_title="Inbox")
    analytics = generate_analytics([record])
    assert analytics.total_completed == 1
    assert analytics.daily_counts == {}
    assert analytics.tags == {"report": 1}
    # Status markers such as {{[[DONE]]}} count as page links too
    assert analytics.pages == {"Project X": 1, "DONE": 1, "Inbox": 1}


def test_origin_page_shares_namespace_with_links():
    records = [
        make_record(uid="a", content="see [[Inbox]]", page_title="Inbox"),
        make_record(uid="b", content="plain", page_title="Inbox"),
    ]
    assert generate_analytics(records).pages == {"Inbox": 3}


def test_tags_truncated_to_ten_highest():
    records = []
    for i in range(15):
        for j in range(15 - i):
            records.append(make_record(uid=f"{i}-{j}", content=f"#tag{i}"))
    tags = generate_analytics(records).tags
    assert len(tags) == 10
    assert list(tags) == [f"tag{i}" for i in range(10)]


def test_top_entries_ties_keep_insertion_order():
    counts = {"b": 1, "a": 2, "c": 1, "d": 2}
    assert list(top_entries(counts, 3)) == ["a", "d", "b"]


def test_durations_longest_shortest_and_average():
    records = [
        make_record(uid="slow", content="slow " + "x" * 200, created_at=NOW - timedelta(hours=10), completed_at=NOW),
        make_record(uid="fast", content="fast", created_at=NOW - timedelta(hours=2), completed_at=NOW),
        make_record(uid="none", content="no creation", completed_at=NOW),
    ]
    analytics = generate_analytics(records)

    assert [d.uid for d in analytics.task_durations] == ["slow", "fast"]
    assert len(analytics.task_durations[0].content) == 100
    assert analytics.longest_task.uid == "slow"
    assert analytics.shortest_task.uid == "fast"
    assert analytics.avg_task_length == pytest.approx(6)
    assert analytics.avg_velocity_hours == pytest.approx(6)
    assert analytics.median_velocity_hours == pytest.approx(10)


def test_empty_input_is_total():
    analytics = generate_analytics([])
    assert analytics.total_completed == 0
    assert analytics.avg_task_length == 0
    assert analytics.longest_task is None
    assert analytics.avg_velocity_hours is None
    assert analytics.tags == {}


def test_top_n_is_configurable():
    records = [make_record(uid=str(i), content=f"#t{i}") for i in range(5)]
    assert len(generate_analytics(records, {"analytics": {"top_n": 3}}).tags) == 3


def test_build_analytics_attaches_streak_and_totals(now):
    analytics = build_analytics(records_on_days([0, 1, 2], per_day=2), now=now, total_todos=7)
    assert analytics.streak == 3
    assert analytics.daily_average == "0.2"
    assert analytics.total_todos == 7
    assert analytics.total_completed == 6
    assert analytics.max_daily == 2


def test_build_analytics_is_deterministic(now):
    records = TaskGenerator(seed=7).generate_records(now, count=120)
    first = build_analytics(records, now=now)
    second = build_analytics(records, now=now)
    assert first.to_dict() == second.to_dict()


def test_records_with_zero_timestamps_are_not_bucketed():
    record = TaskRecord(uid="x", content="#a", create_time=0, edit_time=0)
    analytics = generate_analytics([record])
    assert analytics.daily_counts == {}
    assert analytics.tags == {"a": 1}


def test_out_of_range_completion_time_does_not_raise(now):
    record = TaskRecord(uid="far", content="#a", create_time=1000, edit_time=300_000_000_000_000)
    analytics = build_analytics([record], now=now)
    assert analytics.total_completed == 1
    assert analytics.daily_counts == {}
    assert analytics.avg_velocity_hours is None
    assert analytics.tags == {"a": 1}
