"""Scoring, leveling and achievements."""

from .achievements import AchievementEvaluator, calculate_achievements
from .catalog import ACHIEVEMENT_CATALOG
from .leveling import LevelingCalculator, calculate_level_and_xp
from .productivity import ProductivityScorer, score_emoji

__all__ = [
    'AchievementEvaluator',
    'calculate_achievements',
    'ACHIEVEMENT_CATALOG',
    'LevelingCalculator',
    'calculate_level_and_xp',
    'ProductivityScorer',
    'score_emoji',
]
