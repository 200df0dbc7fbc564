"""Shared fixtures: a fixed clock and a task record factory.

Timestamps are built from naive local datetimes so expectations hold in any
timezone.
"""

from datetime import datetime, timedelta
from typing import Optional

import pytest

from todo_analytics.models.task import TaskRecord
from todo_analytics.utils.datetime_utils import to_epoch_ms

# A Monday afternoon
NOW = datetime(2026, 10, 19, 14, 30)


def make_record(
    uid: str = "t1",
    content: str = "{{[[DONE]]}} task",
    completed_at: Optional[datetime] = None,
    created_at: Optional[datetime] = None,
    page_title: str = "Daily Notes",
) -> TaskRecord:
    """Build a TaskRecord from local datetimes."""
    return TaskRecord(
        uid=uid,
        content=content,
        create_time=to_epoch_ms(created_at) if created_at else None,
        edit_time=to_epoch_ms(completed_at) if completed_at else None,
        page_title=page_title,
    )


def records_on_days(days_ago, per_day: int = 1, hour: int = 10):
    """One or more completed records on each of the given days before NOW."""
    records = []
    for offset in days_ago:
        day = (NOW - timedelta(days=offset)).replace(hour=hour, minute=0)
        for i in range(per_day):
            records.append(make_record(uid=f"d{offset}-{i}", completed_at=day))
    return records


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def record_factory():
    return make_record
