"""Composite productivity score."""

from datetime import datetime, time, timedelta
from typing import Optional

from ..models.analytics import Analytics, ScoreBreakdown, ScoreComponent
from ..utils.datetime_utils import parse_date_key
from ..utils.text_utils import round_half_up


class ProductivityScorer:
    """Combines streak, daily average, consistency and velocity into a 0-100 score."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize scorer with configuration."""
        self.config = config or {}
        scoring = self.config.get('scoring', {})
        self.streak_points_per_day = scoring.get('streak_points_per_day', 3)
        self.streak_max = scoring.get('streak_max', 30)
        self.daily_average_points_per_task = scoring.get('daily_average_points_per_task', 4)
        self.daily_average_max = scoring.get('daily_average_max', 30)
        self.consistency_window_days = scoring.get('consistency_window_days', 30)
        self.consistency_max = scoring.get('consistency_max', 20)
        self.velocity_max = scoring.get('velocity_max', 20)
        self.velocity_cutoff_hours = scoring.get('velocity_cutoff_hours', 48)

    def score(self, analytics: Analytics, now: Optional[datetime] = None) -> ScoreBreakdown:
        """Score an analytics snapshot."""
        if now is None:
            now = datetime.now()

        streak_score = min(analytics.streak * self.streak_points_per_day, self.streak_max)

        avg_score = min(float(analytics.daily_average) * self.daily_average_points_per_task, self.daily_average_max)

        active_days = self.count_recent_active_days(analytics, now)
        consistency_score = min(active_days / self.consistency_window_days * self.consistency_max, self.consistency_max)

        velocity_score = self.velocity_score(analytics.avg_velocity_hours)

        total = round_half_up(streak_score + avg_score + consistency_score + velocity_score)

        avg_velocity = analytics.avg_velocity_hours
        velocity_value = f"{avg_velocity:.1f}h" if avg_velocity else 'N/A'

        return ScoreBreakdown(
            total=total,
            components={
                'streak': self._component(streak_score, self.streak_max, analytics.streak, 'Streak'),
                'daily_average': self._component(avg_score, self.daily_average_max, analytics.daily_average, 'Daily Average'),
                'consistency': self._component(consistency_score, self.consistency_max, active_days, 'Consistency'),
                'velocity': self._component(velocity_score, self.velocity_max, velocity_value, 'Velocity'),
            },
        )

    def count_recent_active_days(self, analytics: Analytics, now: datetime) -> int:
        """Days in daily_counts whose local midnight falls inside the window."""
        cutoff = now - timedelta(days=self.consistency_window_days)
        return sum(
            1 for key in analytics.daily_counts
            if datetime.combine(parse_date_key(key), time.min) >= cutoff
        )

    def velocity_score(self, avg_velocity_hours: Optional[float]) -> float:
        """Linear from full points at 0h down to 0 at the cutoff."""
        if avg_velocity_hours is None or avg_velocity_hours >= self.velocity_cutoff_hours:
            return 0.0
        hours_per_point = self.velocity_cutoff_hours / self.velocity_max
        return max(self.velocity_max - avg_velocity_hours / hours_per_point, 0.0)

    def _component(self, score: float, max_score: int, value, label: str) -> ScoreComponent:
        return ScoreComponent(
            score=round_half_up(score),
            max=max_score,
            percentage=round_half_up(score / max_score * 100),
            value=value,
            label=label,
        )


def score_emoji(score: int) -> str:
    """Emoji badge for a total score."""
    if score >= 90:
        return "🌟"
    if score >= 80:
        return "⭐"
    if score >= 70:
        return "✨"
    if score >= 60:
        return "👍"
    if score >= 50:
        return "📈"
    return "💪"
