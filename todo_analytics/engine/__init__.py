"""Analytics derivation engine."""

from .aggregator import AnalyticsAggregator, build_analytics, generate_analytics
from .streaks import calculate_streak_and_average
from .velocity import calculate_task_duration, calculate_task_velocity

__all__ = [
    'AnalyticsAggregator',
    'build_analytics',
    'generate_analytics',
    'calculate_streak_and_average',
    'calculate_task_duration',
    'calculate_task_velocity',
]
