"""Logbook: browse completed tasks by day, week or month."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from ..models.task import TaskRecord
from ..utils.datetime_utils import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    from_epoch_ms,
    local_date_key,
    month_bounds,
    start_of_week,
)
from ..utils.text_utils import round_half_up

SORT_ORDERS = ('time-desc', 'time-asc', 'page', 'content')


class LogbookView(Enum):
    """Span of days shown at once."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass
class LogbookGroup:
    """Tasks sharing an hour (day view) or a date (week/month view)."""

    key: Union[int, str]
    label: str
    tasks: List[TaskRecord] = field(default_factory=list)


@dataclass
class LogbookStats:
    """Summary shown above the logbook."""

    tasks_completed: int
    estimated_minutes: int
    productivity_percent: int
    first_task_time: Optional[str] = None

    @property
    def estimated_time_label(self) -> str:
        return f"{self.estimated_minutes // 60}h {self.estimated_minutes % 60}m"


@dataclass
class LogbookPage:
    """One rendered logbook query."""

    view: LogbookView
    start_date: date
    end_date: date
    tasks: List[TaskRecord]
    groups: List[LogbookGroup]
    page_options: List[str]
    stats: LogbookStats


def date_range(selected: date, view: LogbookView) -> Tuple[date, date]:
    """Inclusive first and last day covered by a view around `selected`."""
    if view == LogbookView.WEEK:
        start = start_of_week(selected)
        return start, start + timedelta(days=6)
    if view == LogbookView.MONTH:
        return month_bounds(selected.year, selected.month)
    return selected, selected


def format_hour(hour: int) -> str:
    """12-hour clock label for the top of an hour."""
    display = 12 if hour == 0 else hour - 12 if hour > 12 else hour
    return f"{display}:00 {'PM' if hour >= 12 else 'AM'}"


def format_clock(moment: datetime) -> str:
    """12-hour clock time such as 9:05 AM."""
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d} {'PM' if moment.hour >= 12 else 'AM'}"


def format_day(day: date) -> str:
    """Short day label such as Mon, Oct 19."""
    return f"{WEEKDAY_NAMES[day.weekday()]}, {MONTH_NAMES[day.month - 1]} {day.day}"


def _sort_tasks(tasks: List[TaskRecord], sort_by: str) -> List[TaskRecord]:
    if sort_by == 'time-asc':
        return sorted(tasks, key=lambda t: t.edit_time or 0)
    if sort_by == 'page':
        return sorted(tasks, key=lambda t: t.page_title.casefold())
    if sort_by == 'content':
        return sorted(tasks, key=lambda t: t.content.casefold())
    return sorted(tasks, key=lambda t: t.edit_time or 0, reverse=True)


def _group_tasks(tasks: List[TaskRecord], view: LogbookView) -> List[LogbookGroup]:
    groups = {}
    for task in tasks:
        completed_at = from_epoch_ms(task.edit_time)
        if view == LogbookView.DAY:
            key = completed_at.hour
            label = format_hour(key)
        else:
            key = local_date_key(completed_at)
            label = format_day(completed_at.date())
        if key not in groups:
            groups[key] = LogbookGroup(key=key, label=label)
        groups[key].tasks.append(task)

    # Hour groups read top to bottom through the day
    if view == LogbookView.DAY:
        return [groups[hour] for hour in sorted(groups)]
    return list(groups.values())


def build_logbook(
    records: Iterable[TaskRecord],
    selected: date,
    view: Union[LogbookView, str] = LogbookView.DAY,
    search_term: str = '',
    page: str = 'all',
    sort_by: str = 'time-desc',
    config: Optional[dict] = None,
) -> LogbookPage:
    """Filter, sort and group completed tasks for one logbook view."""
    view = LogbookView(view)
    if sort_by not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order: {sort_by}")

    logbook_config = (config or {}).get('logbook', {})
    minutes_per_task = logbook_config.get('minutes_per_task', 2)
    targets = logbook_config.get('targets', {'day': 10, 'week': 50, 'month': 200})

    records = list(records)
    start_date, end_date = date_range(selected, view)

    tasks = [
        record for record in records
        if record.has_completion_time
        and start_date <= from_epoch_ms(record.edit_time).date() <= end_date
    ]

    if search_term:
        needle = search_term.lower()
        tasks = [task for task in tasks if needle in task.content.lower()]

    if page != 'all':
        tasks = [task for task in tasks if task.page_title == page]

    tasks = _sort_tasks(tasks, sort_by)

    count = len(tasks)
    target = targets.get(view.value, 10)
    first_task_time = None
    if view == LogbookView.DAY and tasks:
        first_task_time = format_clock(from_epoch_ms(min(task.edit_time for task in tasks)))

    stats = LogbookStats(
        tasks_completed=count,
        estimated_minutes=count * minutes_per_task,
        productivity_percent=round_half_up(count / target * 100) if count > 0 else 0,
        first_task_time=first_task_time,
    )

    return LogbookPage(
        view=view,
        start_date=start_date,
        end_date=end_date,
        tasks=tasks,
        groups=_group_tasks(tasks, view),
        page_options=sorted({record.page_title for record in records}),
        stats=stats,
    )
