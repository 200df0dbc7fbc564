"""Level and XP progression."""

import math
from typing import Optional

from ..models.analytics import LevelProgress
from ..utils.text_utils import round_half_up


class LevelingCalculator:
    """Converts a completed-task count into a level, one XP per task."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize calculator with configuration."""
        self.config = config or {}
        leveling = self.config.get('leveling', {})
        self.base_xp = leveling.get('base_xp', 10)
        self.xp_multiplier = leveling.get('xp_multiplier', 1.2)

    def xp_for_level(self, level: int) -> int:
        """XP needed to advance from `level` to the next one (at least 1)."""
        return max(math.floor(self.base_xp * math.pow(self.xp_multiplier, level - 1)), 1)

    def calculate(self, total_completed: int) -> LevelProgress:
        """Walk the cost curve until the next level is out of reach."""
        total_completed = max(int(total_completed), 0)

        level = 1
        total_xp_required = 0
        xp_for_current_level = self.xp_for_level(level)

        while total_xp_required + xp_for_current_level <= total_completed:
            total_xp_required += xp_for_current_level
            level += 1
            xp_for_current_level = self.xp_for_level(level)

        xp_in_current_level = total_completed - total_xp_required

        return LevelProgress(
            level=level,
            xp_in_current_level=xp_in_current_level,
            xp_for_next_level=xp_for_current_level,
            progress_percent=round_half_up(xp_in_current_level / xp_for_current_level * 100),
        )


def calculate_level_and_xp(total_completed: int, config: Optional[dict] = None) -> LevelProgress:
    """Level progress for a completed-task count."""
    return LevelingCalculator(config).calculate(total_completed)
