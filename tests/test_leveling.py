"""Tests for level and XP progression."""

import pytest

from todo_analytics.scoring.leveling import LevelingCalculator, calculate_level_and_xp


def test_zero_completed_is_level_one():
    progress = calculate_level_and_xp(0)
    assert progress.level == 1
    assert progress.xp_in_current_level == 0
    assert progress.xp_for_next_level == 10
    assert progress.progress_percent == 0


@pytest.mark.parametrize("total, level, xp, next_cost, percent", [
    (5, 1, 5, 10, 50),
    (9, 1, 9, 10, 90),
    (10, 2, 0, 12, 0),
    (21, 2, 11, 12, 92),
    (22, 3, 0, 14, 0),
    (36, 4, 0, 17, 0),
])
def test_level_thresholds(total, level, xp, next_cost, percent):
    progress = calculate_level_and_xp(total)
    assert (progress.level, progress.xp_in_current_level, progress.xp_for_next_level,
            progress.progress_percent) == (level, xp, next_cost, percent)


def test_level_never_decreases():
    calculator = LevelingCalculator()
    levels = [calculator.calculate(n).level for n in range(0, 3000, 7)]
    assert levels == sorted(levels)


def test_xp_in_level_below_next_cost():
    calculator = LevelingCalculator()
    for n in range(0, 500):
        progress = calculator.calculate(n)
        assert 0 <= progress.xp_in_current_level < progress.xp_for_next_level


def test_negative_input_treated_as_zero():
    assert calculate_level_and_xp(-5).level == 1


def test_degenerate_curve_still_terminates():
    calculator = LevelingCalculator({'leveling': {'base_xp': 0, 'xp_multiplier': 1.0}})
    progress = calculator.calculate(25)
    assert progress.level == 26
    assert progress.xp_for_next_level == 1
