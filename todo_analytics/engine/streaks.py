"""Streak and daily average calculation."""

from datetime import date, datetime, timedelta
from typing import Dict, Iterable, Optional

from ..models.analytics import StreakSummary
from ..models.task import TaskRecord
from ..utils.datetime_utils import local_date_key, trailing_days


def count_daily_completions(records: Iterable[TaskRecord]) -> Dict[str, int]:
    """Bucket records with a completion time by local date key."""
    daily_counts: Dict[str, int] = {}
    for record in records:
        if record.has_completion_time:
            key = local_date_key(record.edit_time)
            daily_counts[key] = daily_counts.get(key, 0) + 1
    return daily_counts


def _has_tasks(daily_counts: Dict[str, int], day: date) -> bool:
    return daily_counts.get(local_date_key(day), 0) > 0


def calculate_streak(daily_counts: Dict[str, int], now: datetime) -> int:
    """Count consecutive active days ending today.

    An empty today does not break the streak yet: counting then starts from
    yesterday. If yesterday is empty too, the streak is 0.
    """
    current = now.date()
    if not _has_tasks(daily_counts, current):
        current -= timedelta(days=1)

    streak = 0
    while _has_tasks(daily_counts, current):
        streak += 1
        current -= timedelta(days=1)
    return streak


def calculate_daily_average(daily_counts: Dict[str, int], now: datetime, window_days: int = 30) -> str:
    """Average completions per day over the trailing window, one decimal."""
    total_tasks = 0
    active_days = 0
    for day in trailing_days(now, window_days):
        count = daily_counts.get(local_date_key(day), 0)
        total_tasks += count
        if count > 0:
            active_days += 1

    if active_days == 0:
        return "0.0"
    return f"{total_tasks / window_days:.1f}"


def calculate_streak_and_average(
    records: Iterable[TaskRecord],
    now: Optional[datetime] = None,
    window_days: int = 30,
) -> StreakSummary:
    """Compute current streak, 30-day daily average and daily counts."""
    if now is None:
        now = datetime.now()

    daily_counts = count_daily_completions(records)

    return StreakSummary(
        streak=calculate_streak(daily_counts, now),
        daily_average=calculate_daily_average(daily_counts, now, window_days),
        daily_counts=daily_counts,
    )
