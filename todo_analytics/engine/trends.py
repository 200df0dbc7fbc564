"""Chart-ready trend series derived from daily counts."""

from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from ..models.analytics import DAYS_PER_WEEK, HOURS_PER_DAY, HeatmapCell, TrendPoint
from ..models.task import TaskRecord
from ..utils.datetime_utils import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    from_epoch_ms,
    iso_week_key,
    local_date_key,
    month_bounds,
    month_key,
    shift_month,
    start_of_week,
    trailing_days,
)


def _sum_range(daily_counts: Dict[str, int], start, end) -> int:
    total = 0
    day = start
    while day <= end:
        total += daily_counts.get(local_date_key(day), 0)
        day += timedelta(days=1)
    return total


def last_days_trend(daily_counts: Dict[str, int], now: datetime, days: int = 12) -> List[TrendPoint]:
    """Daily completion counts for the last `days` days, oldest first."""
    today = now.date()
    points = []
    for day in trailing_days(now, days):
        is_today = day == today
        label = "Today" if is_today else f"{WEEKDAY_NAMES[day.weekday()]} {day.day}"
        key = local_date_key(day)
        points.append(TrendPoint(key=key, label=label, count=daily_counts.get(key, 0), is_current=is_today))
    return points


def last_weeks_trend(daily_counts: Dict[str, int], now: datetime, weeks: int = 12) -> List[TrendPoint]:
    """Weekly totals for the last `weeks` Monday-start weeks, oldest first."""
    current_week_start = start_of_week(now.date())
    points = []
    for offset in range(weeks - 1, -1, -1):
        week_start = current_week_start - timedelta(days=offset * 7)
        week_end = week_start + timedelta(days=6)
        label = f"{week_start.month}/{week_start.day}-{week_end.month}/{week_end.day}"
        points.append(TrendPoint(
            key=iso_week_key(week_start),
            label=label,
            count=_sum_range(daily_counts, week_start, week_end),
            is_current=offset == 0,
        ))
    return points


def last_months_trend(daily_counts: Dict[str, int], now: datetime, months: int = 12) -> List[TrendPoint]:
    """Monthly totals for the last `months` calendar months, oldest first."""
    points = []
    for offset in range(months - 1, -1, -1):
        year, month = shift_month(now.year, now.month, -offset)
        first_day, last_day = month_bounds(year, month)
        points.append(TrendPoint(
            key=month_key(first_day),
            label=f"{MONTH_NAMES[month - 1]} {year}",
            count=_sum_range(daily_counts, first_day, last_day),
            is_current=offset == 0,
        ))
    return points


def intensity_level(count: int, max_count: int) -> int:
    """Map a count to a heatmap level: 0 for none, then quartiles 1-4."""
    if count == 0:
        return 0
    if count <= max_count * 0.25:
        return 1
    if count <= max_count * 0.5:
        return 2
    if count <= max_count * 0.75:
        return 3
    return 4


def heatmap_calendar(
    daily_counts: Dict[str, int],
    now: datetime,
    days: int = 364,
) -> List[List[Optional[HeatmapCell]]]:
    """Year calendar as Monday-first week columns.

    Days after today are None so every column has seven slots.
    """
    today = now.date()
    start = start_of_week(today - timedelta(days=days))
    max_count = max(max(daily_counts.values(), default=0), 1)
    week_count = (today - start).days // 7 + 1

    weeks = []
    for week in range(week_count):
        column: List[Optional[HeatmapCell]] = []
        for weekday in range(DAYS_PER_WEEK):
            day = start + timedelta(days=week * 7 + weekday)
            if day > today:
                column.append(None)
                continue
            key = local_date_key(day)
            count = daily_counts.get(key, 0)
            column.append(HeatmapCell(date_key=key, count=count, level=intensity_level(count, max_count)))
        weeks.append(column)
    return weeks


def weekly_activity_matrix(records: Iterable[TaskRecord]) -> List[List[int]]:
    """Completion counts by weekday (rows, Monday first) and hour (columns)."""
    matrix = [[0] * HOURS_PER_DAY for _ in range(DAYS_PER_WEEK)]
    for record in records:
        if record.has_completion_time:
            completed_at = from_epoch_ms(record.edit_time)
            matrix[completed_at.weekday()][completed_at.hour] += 1
    return matrix
