"""Analytics aggregation over task records."""

from datetime import datetime
from typing import Dict, Iterable, Optional

import structlog

from ..models.analytics import Analytics, TaskDuration
from ..models.task import TaskRecord
from ..utils.datetime_utils import (
    from_epoch_ms,
    iso_week_key,
    local_date_key,
    month_key,
    sunday_first_weekday,
)
from ..utils.text_utils import extract_hashtags, extract_page_links, truncate
from .streaks import calculate_streak_and_average
from .velocity import MAX_VELOCITY_HOURS, calculate_task_velocity

log = structlog.get_logger()


def top_entries(counts: Dict[str, int], limit: int) -> Dict[str, int]:
    """Keep the `limit` highest counts; equal counts keep insertion order."""
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return dict(ranked[:limit])


def _increment(counts: Dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


class AnalyticsAggregator:
    """Single pass over task records producing the analytics bundle."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize aggregator with configuration."""
        self.config = config or {}
        analytics_config = self.config.get('analytics', {})
        self.top_n = analytics_config.get('top_n', 10)
        self.preview_chars = analytics_config.get('content_preview_chars', 100)
        self.velocity_max_hours = self.config.get('velocity', {}).get('max_hours', MAX_VELOCITY_HOURS)

    def aggregate(self, records: Iterable[TaskRecord]) -> Analytics:
        """Build analytics for records (streak and daily average left at defaults)."""
        records = list(records)
        analytics = Analytics(total_completed=len(records))
        tags: Dict[str, int] = {}
        pages: Dict[str, int] = {}

        for record in records:
            if record.has_completion_time:
                self._bucket_completion(analytics, record.edit_time)

            for tag in extract_hashtags(record.content):
                _increment(tags, tag)

            for page in extract_page_links(record.content):
                _increment(pages, page)

            # Origin page shares the namespace with linked pages
            if record.page_title:
                _increment(pages, record.page_title)

            self._track_duration(analytics, record)

        if analytics.task_durations:
            total_length = sum(t.duration for t in analytics.task_durations)
            analytics.avg_task_length = total_length / len(analytics.task_durations)

        analytics.tags = top_entries(tags, self.top_n)
        analytics.pages = top_entries(pages, self.top_n)

        velocity = calculate_task_velocity(records, self.velocity_max_hours)
        analytics.avg_velocity_hours = velocity.avg_velocity_hours
        analytics.median_velocity_hours = velocity.median_velocity_hours

        return analytics

    def _bucket_completion(self, analytics: Analytics, edit_time: int) -> None:
        """Count one completion into every time-bucketed distribution."""
        completed_at = from_epoch_ms(edit_time)
        _increment(analytics.daily_counts, local_date_key(completed_at))
        _increment(analytics.weekly_trend, iso_week_key(completed_at))
        _increment(analytics.monthly_trend, month_key(completed_at))
        analytics.hour_distribution[completed_at.hour] += 1
        analytics.weekday_distribution[sunday_first_weekday(completed_at)] += 1

    def _track_duration(self, analytics: Analytics, record: TaskRecord) -> None:
        """Record a valid duration and update the longest/shortest task."""
        duration = record.get_duration_hours()
        if duration is None:
            return

        analytics.task_durations.append(TaskDuration(
            content=truncate(record.content, self.preview_chars),
            duration=duration,
            uid=record.uid,
        ))

        if analytics.longest_task is None or duration > analytics.longest_task.duration:
            analytics.longest_task = TaskDuration(content=record.content, duration=duration, uid=record.uid)

        if analytics.shortest_task is None or duration < analytics.shortest_task.duration:
            analytics.shortest_task = TaskDuration(content=record.content, duration=duration, uid=record.uid)


def generate_analytics(records: Iterable[TaskRecord], config: Optional[dict] = None) -> Analytics:
    """Aggregate records with the given (or default) configuration."""
    return AnalyticsAggregator(config).aggregate(records)


def build_analytics(
    records: Iterable[TaskRecord],
    now: Optional[datetime] = None,
    total_todos: int = 0,
    config: Optional[dict] = None,
) -> Analytics:
    """Aggregate records and attach streak, daily average and total todos."""
    if now is None:
        now = datetime.now()
    config = config or {}
    records = list(records)

    window_days = config.get('analytics', {}).get('daily_average_window_days', 30)
    summary = calculate_streak_and_average(records, now, window_days)

    analytics = generate_analytics(records, config)
    analytics.streak = summary.streak
    analytics.daily_average = summary.daily_average
    analytics.daily_counts = summary.daily_counts
    analytics.total_todos = total_todos

    log.info(
        "analytics_built",
        total_completed=analytics.total_completed,
        active_days=analytics.active_days,
        streak=analytics.streak,
        daily_average=analytics.daily_average,
    )
    return analytics
