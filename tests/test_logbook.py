"""Tests for the logbook views."""

from datetime import date, datetime

import pytest

from todo_analytics.search.logbook import (
    LogbookView,
    build_logbook,
    date_range,
    format_clock,
    format_day,
    format_hour,
)

from .conftest import make_record


@pytest.fixture
def records():
    return [
        make_record(uid="a", content="{{[[DONE]]}} Email Bob", completed_at=datetime(2026, 10, 19, 9, 5),
                    page_title="Work"),
        make_record(uid="b", content="{{[[DONE]]}} buy milk", completed_at=datetime(2026, 10, 19, 14, 30),
                    page_title="Home"),
        make_record(uid="c", content="{{[[DONE]]}} Answer email", completed_at=datetime(2026, 10, 19, 9, 40),
                    page_title="Work"),
        make_record(uid="d", content="{{[[DONE]]}} Sunday chores", completed_at=datetime(2026, 10, 18, 11, 0),
                    page_title="Home"),
        make_record(uid="open", content="{{[[TODO]]}} Not done", page_title="Inbox"),
    ]


def test_date_range_per_view():
    wednesday = date(2026, 10, 21)
    assert date_range(wednesday, LogbookView.DAY) == (wednesday, wednesday)
    assert date_range(wednesday, LogbookView.WEEK) == (date(2026, 10, 19), date(2026, 10, 25))
    assert date_range(wednesday, LogbookView.MONTH) == (date(2026, 10, 1), date(2026, 10, 31))


def test_time_labels():
    assert format_hour(0) == "12:00 AM"
    assert format_hour(9) == "9:00 AM"
    assert format_hour(12) == "12:00 PM"
    assert format_hour(13) == "1:00 PM"
    assert format_clock(datetime(2026, 1, 1, 0, 5)) == "12:05 AM"
    assert format_clock(datetime(2026, 1, 1, 15, 45)) == "3:45 PM"
    assert format_day(date(2026, 10, 19)) == "Mon, Oct 19"


def test_day_view_groups_by_hour(records):
    page = build_logbook(records, date(2026, 10, 19))

    assert [t.uid for t in page.tasks] == ["b", "c", "a"]
    assert [g.label for g in page.groups] == ["9:00 AM", "2:00 PM"]
    assert [t.uid for t in page.groups[0].tasks] == ["c", "a"]

    stats = page.stats
    assert stats.tasks_completed == 3
    assert stats.estimated_minutes == 6
    assert stats.estimated_time_label == "0h 6m"
    assert stats.productivity_percent == 30
    assert stats.first_task_time == "9:05 AM"


def test_week_view_starts_monday(records):
    page = build_logbook(records, date(2026, 10, 21), view="week")
    assert page.start_date == date(2026, 10, 19)
    assert {t.uid for t in page.tasks} == {"a", "b", "c"}
    assert [g.label for g in page.groups] == ["Mon, Oct 19"]
    assert page.stats.first_task_time is None
    assert page.stats.productivity_percent == 6


def test_month_view_groups_by_date(records):
    page = build_logbook(records, date(2026, 10, 5), view=LogbookView.MONTH)
    assert page.stats.tasks_completed == 4
    assert [g.key for g in page.groups] == ["2026-10-19", "2026-10-18"]
    assert page.stats.productivity_percent == 2


def test_empty_day(records):
    page = build_logbook(records, date(2026, 10, 1))
    assert page.tasks == []
    assert page.groups == []
    assert page.stats.productivity_percent == 0
    assert page.stats.first_task_time is None


def test_search_and_page_filters(records):
    page = build_logbook(records, date(2026, 10, 19), search_term="EMAIL")
    assert {t.uid for t in page.tasks} == {"a", "c"}

    page = build_logbook(records, date(2026, 10, 19), page="Home")
    assert [t.uid for t in page.tasks] == ["b"]


def test_page_options_cover_all_records(records):
    page = build_logbook(records, date(2026, 10, 19))
    assert page.page_options == ["Home", "Inbox", "Work"]


@pytest.mark.parametrize("sort_by, expected", [
    ("time-desc", ["b", "c", "a"]),
    ("time-asc", ["a", "c", "b"]),
    ("content", ["c", "b", "a"]),
])
def test_sort_orders(records, sort_by, expected):
    page = build_logbook(records, date(2026, 10, 19), sort_by=sort_by)
    assert [t.uid for t in page.tasks] == expected


def test_sort_by_page(records):
    page = build_logbook(records, date(2026, 10, 19), sort_by="page")
    assert [t.page_title for t in page.tasks] == ["Home", "Work", "Work"]


def test_invalid_arguments(records):
    with pytest.raises(ValueError):
        build_logbook(records, date(2026, 10, 19), sort_by="random")
    with pytest.raises(ValueError):
        build_logbook(records, date(2026, 10, 19), view="year")


def test_targets_from_config(records):
    config = {'logbook': {'minutes_per_task': 5, 'targets': {'day': 4}}}
    stats = build_logbook(records, date(2026, 10, 19), config=config).stats
    assert stats.estimated_time_label == "0h 15m"
    assert stats.productivity_percent == 75
