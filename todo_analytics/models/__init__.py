"""Data models."""

from .task import TaskRecord
from .analytics import (
    Analytics,
    HeatmapCell,
    LevelProgress,
    ScoreBreakdown,
    ScoreComponent,
    StreakSummary,
    TaskDuration,
    TrendPoint,
    VelocityMetrics,
)
from .achievement import Achievement, AchievementDefinition, AchievementResult

__all__ = [
    'TaskRecord',
    'Analytics',
    'HeatmapCell',
    'LevelProgress',
    'ScoreBreakdown',
    'ScoreComponent',
    'StreakSummary',
    'TaskDuration',
    'TrendPoint',
    'VelocityMetrics',
    'Achievement',
    'AchievementDefinition',
    'AchievementResult',
]
