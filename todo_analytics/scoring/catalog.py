"""Fixed achievement catalog.

Each entry's rule is a predicate over an :class:`AchievementContext`, which
carries the analytics snapshot plus the values derived from it once per
evaluation.
"""

from dataclasses import dataclass
from typing import Tuple

from ..models.achievement import AchievementDefinition
from ..models.analytics import Analytics


@dataclass(frozen=True)
class AchievementContext:
    """Analytics snapshot and the derived values achievement rules read."""

    analytics: Analytics
    max_daily: int
    morning_tasks: int
    night_tasks: int
    weekend_tasks: int
    tag_count: int
    active_days: int
    today_count: int
    has_perfect_week: bool
    days_with_tasks_in_month: int

    @property
    def streak(self) -> int:
        return self.analytics.streak

    @property
    def total_completed(self) -> int:
        return self.analytics.total_completed

    @property
    def avg_velocity_hours(self):
        return self.analytics.avg_velocity_hours

    @property
    def max_tag_count(self) -> int:
        return max(self.analytics.tags.values(), default=0)


def _streak_at_least(days: int):
    return lambda ctx: ctx.streak >= days


def _total_at_least(count: int):
    return lambda ctx: ctx.total_completed >= count


def _max_daily_at_least(count: int):
    return lambda ctx: ctx.max_daily >= count


def _max_daily_in(*counts: int):
    return lambda ctx: ctx.max_daily in counts


def _avg_velocity_below(hours: float):
    return lambda ctx: bool(ctx.avg_velocity_hours) and ctx.avg_velocity_hours < hours


def _tags_at_least(count: int):
    return lambda ctx: ctx.tag_count >= count


def _active_days_at_least(days: int):
    return lambda ctx: ctx.active_days >= days


ACHIEVEMENT_CATALOG: Tuple[AchievementDefinition, ...] = (
    # Streaks
    AchievementDefinition('streak3', 'On Fire', '3 day streak', '🔥', 'streak', _streak_at_least(3)),
    AchievementDefinition('streak7', 'Week Warrior', '7 day streak', '⚔️', 'streak', _streak_at_least(7)),
    AchievementDefinition('streak14', 'Fortnight Fighter', '14 day streak', '🛡️', 'streak', _streak_at_least(14)),
    AchievementDefinition('streak30', 'Unstoppable', '30 day streak', '🚀', 'streak', _streak_at_least(30)),
    AchievementDefinition('streak60', 'Habit Master', '60 day streak', '👑', 'streak', _streak_at_least(60)),
    AchievementDefinition('streak100', 'Legendary', '100 day streak', '🏆', 'streak', _streak_at_least(100)),
    AchievementDefinition('streak365', 'Year of Fire', '365 day streak', '🌟', 'streak', _streak_at_least(365)),

    # Total completed
    AchievementDefinition('total1', 'First Step', 'Complete your first task', '👶', 'milestone', _total_at_least(1)),
    AchievementDefinition('total10', 'Getting Started', '10 tasks completed', '🌱', 'milestone', _total_at_least(10)),
    AchievementDefinition('total25', 'Quarter Century', '25 tasks completed', '🌿', 'milestone', _total_at_least(25)),
    AchievementDefinition('total50', 'Task Master', '50 tasks completed', '🎯', 'milestone', _total_at_least(50)),
    AchievementDefinition('total100', 'Century', '100 tasks completed', '💯', 'milestone', _total_at_least(100)),
    AchievementDefinition('total250', 'Task Warrior', '250 tasks completed', '⚔️', 'milestone', _total_at_least(250)),
    AchievementDefinition('total500', 'Productivity Guru', '500 tasks completed', '🧘', 'milestone', _total_at_least(500)),
    AchievementDefinition('total1000', 'Task Titan', '1000 tasks completed', '⚡', 'milestone', _total_at_least(1000)),
    AchievementDefinition('total2500', 'Grand Master', '2500 tasks completed', '🎖️', 'milestone', _total_at_least(2500)),
    AchievementDefinition('total5000', 'Task Legend', '5000 tasks completed', '🌌', 'milestone', _total_at_least(5000)),

    # Single day
    AchievementDefinition('daily5', 'Good Day', '5+ tasks in one day', '😊', 'daily', _max_daily_at_least(5)),
    AchievementDefinition('daily10', 'Productive Day', '10+ tasks in one day', '📈', 'daily', _max_daily_at_least(10)),
    AchievementDefinition('daily15', 'Power Day', '15+ tasks in one day', '💪', 'daily', _max_daily_at_least(15)),
    AchievementDefinition('daily20', 'Super Day', '20+ tasks in one day', '⚡', 'daily', _max_daily_at_least(20)),
    AchievementDefinition('daily30', 'Ultra Day', '30+ tasks in one day', '🌟', 'daily', _max_daily_at_least(30)),
    AchievementDefinition('daily50', 'Legendary Day', '50+ tasks in one day', '🏆', 'daily', _max_daily_at_least(50)),
    AchievementDefinition('daily100', 'Mythical Day', '100+ tasks in one day', '🔮', 'daily', _max_daily_at_least(100)),

    # Velocity
    AchievementDefinition('lightning', 'Lightning Fast', 'Avg completion < 1h', '⚡', 'speed', _avg_velocity_below(1)),
    AchievementDefinition('quick', 'Quick Draw', 'Avg completion < 6h', '🤠', 'speed', _avg_velocity_below(6)),
    AchievementDefinition('fast', 'Speed Demon', 'Avg completion < 24h', '💨', 'speed', _avg_velocity_below(24)),

    # Time of day
    AchievementDefinition('earlybird', 'Early Bird', '50+ tasks before 9 AM', '🐦', 'time',
                          lambda ctx: ctx.morning_tasks >= 50),
    AchievementDefinition('nightowl', 'Night Owl', '50+ tasks after 10 PM', '🦉', 'time',
                          lambda ctx: ctx.night_tasks >= 50),
    AchievementDefinition('earlybird100', 'Morning Person', '100+ tasks before 9 AM', '🌅', 'time',
                          lambda ctx: ctx.morning_tasks >= 100),
    AchievementDefinition('nightowl100', 'Nocturnal', '100+ tasks after 10 PM', '🌙', 'time',
                          lambda ctx: ctx.night_tasks >= 100),

    # Weekends
    AchievementDefinition('weekend50', 'Weekend Hustler', '50+ weekend tasks', '🏖️', 'pattern',
                          lambda ctx: ctx.weekend_tasks >= 50),
    AchievementDefinition('weekend100', 'Weekend Warrior', '100+ weekend tasks', '⚔️', 'pattern',
                          lambda ctx: ctx.weekend_tasks >= 100),
    AchievementDefinition('weekend250', 'No Rest', '250+ weekend tasks', '🔥', 'pattern',
                          lambda ctx: ctx.weekend_tasks >= 250),

    # Tag diversity
    AchievementDefinition('tags5', 'Tag Beginner', 'Used 5+ different tags', '🏷️', 'organization', _tags_at_least(5)),
    AchievementDefinition('tags10', 'Tag Explorer', 'Used 10+ different tags', '🗂️', 'organization', _tags_at_least(10)),
    AchievementDefinition('tags25', 'Tag Master', 'Used 25+ different tags', '🎨', 'organization', _tags_at_least(25)),
    AchievementDefinition('tags50', 'Tag Wizard', 'Used 50+ different tags', '🧙', 'organization', _tags_at_least(50)),
    AchievementDefinition('tags100', 'Tag Encyclopedia', 'Used 100+ different tags', '📚', 'organization',
                          _tags_at_least(100)),

    # Consistency
    AchievementDefinition('active30', 'Monthly Regular', 'Active for 30+ days', '📅', 'consistency',
                          _active_days_at_least(30)),
    AchievementDefinition('active100', 'Centurion', 'Active for 100+ days', '🗓️', 'consistency',
                          _active_days_at_least(100)),
    AchievementDefinition('active365', 'Year-Round', 'Active for 365+ days', '🎊', 'consistency',
                          _active_days_at_least(365)),
    AchievementDefinition('consistent20', 'Consistent Month', '20+ active days in 30 days', '📊', 'consistency',
                          lambda ctx: ctx.days_with_tasks_in_month >= 20),

    # Special
    AchievementDefinition('today5', "Today's Hero", '5+ tasks today', '⭐', 'special',
                          lambda ctx: ctx.today_count >= 5),
    AchievementDefinition('perfectweek', 'Perfect Week', '5+ tasks daily for 7 days', '💎', 'special',
                          lambda ctx: ctx.has_perfect_week),
    AchievementDefinition('firsttask', 'Hello World', 'Complete your very first task', '👋', 'special',
                          _total_at_least(1)),

    # Fun
    AchievementDefinition('prime', 'Prime Time', 'Complete exactly 13, 17, 23, 29, or 31 tasks in a day', '🔢', 'fun',
                          _max_daily_in(13, 17, 23, 29, 31)),
    AchievementDefinition('fibonacci', 'Fibonacci Fan', 'Complete exactly 1, 2, 3, 5, 8, 13, or 21 tasks in a day',
                          '🌻', 'fun', _max_daily_in(1, 2, 3, 5, 8, 13, 21)),
    AchievementDefinition('pi', 'Pi Day', 'Complete exactly 3, 14, or 31 tasks in a day', '🥧', 'fun',
                          _max_daily_in(3, 14, 31)),
    AchievementDefinition('answer', 'The Answer', 'Complete exactly 42 tasks in a day', '🌌', 'fun',
                          _max_daily_in(42)),
    AchievementDefinition('binary', 'Binary Boss', 'Complete exactly 2, 4, 8, 16, 32, or 64 tasks in a day', '💻', 'fun',
                          _max_daily_in(2, 4, 8, 16, 32, 64)),
    AchievementDefinition('lucky7', 'Lucky Seven', 'Complete exactly 7 or 77 tasks in a day', '🍀', 'fun',
                          _max_daily_in(7, 77)),

    # Productivity patterns
    AchievementDefinition('balanced', 'Work-Life Balance', 'Tasks spread across all 7 days of week', '⚖️', 'pattern',
                          lambda ctx: all(count > 0 for count in ctx.analytics.weekday_distribution)),
    AchievementDefinition('focused', 'Laser Focus', '100+ tasks with single tag', '🎯', 'pattern',
                          lambda ctx: ctx.max_tag_count >= 100),
    AchievementDefinition('diverse', 'Jack of All Trades', 'No single tag > 20% of tasks', '🤹', 'pattern',
                          lambda ctx: ctx.tag_count > 0 and ctx.max_tag_count < ctx.total_completed * 0.2),

    # Motivational
    # Approximation: any current streak after more than ten active days
    AchievementDefinition('comeback', 'Comeback Kid', 'Return after 7+ day break', '💪', 'special',
                          lambda ctx: ctx.streak >= 1 and ctx.active_days > 10),
    AchievementDefinition('marathon', 'Marathon Runner', 'Complete tasks for 30 days straight', '🏃', 'special',
                          _streak_at_least(30)),
    # Needs per-window completion timing that the analytics bundle does not carry
    AchievementDefinition('sprinter', 'Sprinter', '10+ tasks in under 2 hours', '🏃‍♂️', 'speed',
                          lambda ctx: False),
)
