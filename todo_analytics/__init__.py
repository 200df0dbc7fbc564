"""Productivity analytics for task blocks mined from a note-taking graph."""

from .engine import build_analytics, calculate_streak_and_average, calculate_task_velocity, generate_analytics
from .models import Analytics, TaskRecord
from .reporting import DashboardBuilder
from .scoring import AchievementEvaluator, LevelingCalculator, ProductivityScorer
from .search import fuzzy_matches, fuzzy_score

__version__ = "0.1.0"

__all__ = [
    'build_analytics',
    'calculate_streak_and_average',
    'calculate_task_velocity',
    'generate_analytics',
    'Analytics',
    'TaskRecord',
    'DashboardBuilder',
    'AchievementEvaluator',
    'LevelingCalculator',
    'ProductivityScorer',
    'fuzzy_matches',
    'fuzzy_score',
]
