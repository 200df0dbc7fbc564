"""Analytics result models."""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any

HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7


@dataclass
class TaskDuration:
    """Creation-to-completion time of a single task."""

    content: str
    duration: float
    uid: str


@dataclass
class StreakSummary:
    """Output of the streak and daily average calculation."""

    streak: int
    daily_average: str
    daily_counts: Dict[str, int]


@dataclass
class VelocityMetrics:
    """Average and median completion velocity in hours (None when no data)."""

    avg_velocity_hours: Optional[float] = None
    median_velocity_hours: Optional[float] = None


@dataclass
class Analytics:
    """Aggregate bundle derived from one set of task records."""

    total_completed: int = 0
    daily_counts: Dict[str, int] = field(default_factory=dict)
    weekly_trend: Dict[str, int] = field(default_factory=dict)
    monthly_trend: Dict[str, int] = field(default_factory=dict)
    hour_distribution: List[int] = field(default_factory=lambda: [0] * HOURS_PER_DAY)
    weekday_distribution: List[int] = field(default_factory=lambda: [0] * DAYS_PER_WEEK)
    tags: Dict[str, int] = field(default_factory=dict)
    pages: Dict[str, int] = field(default_factory=dict)
    task_durations: List[TaskDuration] = field(default_factory=list)
    longest_task: Optional[TaskDuration] = None
    shortest_task: Optional[TaskDuration] = None
    avg_task_length: float = 0.0
    avg_velocity_hours: Optional[float] = None
    median_velocity_hours: Optional[float] = None
    streak: int = 0
    daily_average: str = "0.0"
    total_todos: int = 0

    @property
    def active_days(self) -> int:
        """Number of distinct days with at least one completion."""
        return len(self.daily_counts)

    @property
    def max_daily(self) -> int:
        """Highest single-day completion count."""
        return max(self.daily_counts.values(), default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert analytics to dictionary for JSON export."""
        return asdict(self)


@dataclass
class ScoreComponent:
    """One explainable part of the productivity score."""

    score: int
    max: int
    percentage: int
    value: Any
    label: str


@dataclass
class ScoreBreakdown:
    """Composite productivity score (0-100) with its components."""

    total: int
    components: Dict[str, ScoreComponent]

    def to_dict(self) -> Dict[str, Any]:
        """Convert breakdown to dictionary for JSON export."""
        return asdict(self)


@dataclass
class LevelProgress:
    """Level reached and progress toward the next one."""

    level: int
    xp_in_current_level: int
    xp_for_next_level: int
    progress_percent: int

    @property
    def xp(self) -> int:
        """Alias for xp_in_current_level."""
        return self.xp_in_current_level

    def to_dict(self) -> Dict[str, Any]:
        """Convert level progress to dictionary for JSON export."""
        return asdict(self)


@dataclass
class TrendPoint:
    """One bar of a trend series."""

    key: str
    label: str
    count: int
    is_current: bool = False


@dataclass
class HeatmapCell:
    """One day of the calendar heatmap; level is 0 (none) to 4 (busiest)."""

    date_key: str
    count: int
    level: int
