"""Achievement evaluation."""

from datetime import datetime
from typing import Optional, Sequence

from ..models.achievement import Achievement, AchievementDefinition, AchievementResult
from ..models.analytics import Analytics
from ..utils.datetime_utils import local_date_key, trailing_days
from .catalog import ACHIEVEMENT_CATALOG, AchievementContext

MORNING_HOURS = (5, 6, 7, 8)
NIGHT_HOURS = (22, 23, 0, 1, 2)
WEEKEND_DAYS = (0, 6)  # Sunday, Saturday
PERFECT_WEEK_DAYS = 7
PERFECT_WEEK_MIN_DAILY = 5
CONSISTENT_MONTH_DAYS = 30


def build_context(analytics: Analytics, now: datetime) -> AchievementContext:
    """Derive the values achievement rules read, once per evaluation."""
    daily_counts = analytics.daily_counts
    hours = analytics.hour_distribution
    weekdays = analytics.weekday_distribution

    has_perfect_week = all(
        daily_counts.get(local_date_key(day), 0) >= PERFECT_WEEK_MIN_DAILY
        for day in trailing_days(now, PERFECT_WEEK_DAYS)
    )
    days_with_tasks_in_month = sum(
        1 for day in trailing_days(now, CONSISTENT_MONTH_DAYS)
        if daily_counts.get(local_date_key(day), 0) > 0
    )

    return AchievementContext(
        analytics=analytics,
        max_daily=analytics.max_daily,
        morning_tasks=sum(hours[h] for h in MORNING_HOURS),
        night_tasks=sum(hours[h] for h in NIGHT_HOURS),
        weekend_tasks=sum(weekdays[d] for d in WEEKEND_DAYS),
        tag_count=len(analytics.tags),
        active_days=analytics.active_days,
        today_count=daily_counts.get(local_date_key(now), 0),
        has_perfect_week=has_perfect_week,
        days_with_tasks_in_month=days_with_tasks_in_month,
    )


class AchievementEvaluator:
    """Evaluates the achievement catalog against an analytics snapshot."""

    def __init__(self, catalog: Sequence[AchievementDefinition] = ACHIEVEMENT_CATALOG):
        self.catalog = catalog

    def evaluate(self, analytics: Analytics, now: Optional[datetime] = None) -> AchievementResult:
        """Partition the catalog into achieved and unachieved entries."""
        if now is None:
            now = datetime.now()

        context = build_context(analytics, now)

        evaluated = [
            Achievement(
                id=definition.id,
                name=definition.name,
                desc=definition.desc,
                icon=definition.icon,
                category=definition.category,
                requirement=bool(definition.rule(context)),
            )
            for definition in self.catalog
        ]

        return AchievementResult(
            achieved=[a for a in evaluated if a.requirement],
            unachieved=[a for a in evaluated if not a.requirement],
            all=evaluated,
        )


def calculate_achievements(analytics: Analytics, now: Optional[datetime] = None) -> AchievementResult:
    """Evaluate the built-in catalog."""
    return AchievementEvaluator().evaluate(analytics, now)
