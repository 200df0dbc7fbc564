"""Dashboard report assembly and export."""

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import structlog

from ..engine.aggregator import build_analytics
from ..engine.trends import (
    heatmap_calendar,
    last_days_trend,
    last_months_trend,
    last_weeks_trend,
    weekly_activity_matrix,
)
from ..models.achievement import AchievementResult
from ..models.analytics import Analytics, HeatmapCell, LevelProgress, ScoreBreakdown, TrendPoint
from ..models.task import TaskRecord
from ..scoring.achievements import AchievementEvaluator
from ..scoring.leveling import LevelingCalculator
from ..scoring.productivity import ProductivityScorer, score_emoji
from ..utils.text_utils import format_number

log = structlog.get_logger()


@dataclass
class DashboardReport:
    """Everything the dashboard shows for one refresh."""

    generated_at: datetime
    analytics: Analytics
    score: ScoreBreakdown
    level: LevelProgress
    achievements: AchievementResult
    trends: Dict[str, List[TrendPoint]] = field(default_factory=dict)
    heatmap: List[List[Optional[HeatmapCell]]] = field(default_factory=list)
    activity_matrix: List[List[int]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for JSON export."""
        return {
            'generated_at': self.generated_at.isoformat(),
            'analytics': self.analytics.to_dict(),
            'score': self.score.to_dict(),
            'score_emoji': score_emoji(self.score.total),
            'level': self.level.to_dict(),
            'achievements': self.achievements.to_dict(),
            'trends': {
                name: [asdict(point) for point in points]
                for name, points in self.trends.items()
            },
            'heatmap': [
                [asdict(cell) if cell is not None else None for cell in week]
                for week in self.heatmap
            ],
            'activity_matrix': self.activity_matrix,
        }

    def to_human_readable(self) -> str:
        """Generate human-readable summary."""
        analytics = self.analytics
        lines = [
            f"=== Todo Analytics: {self.generated_at:%Y-%m-%d %H:%M} ===",
            f"Completed: {format_number(analytics.total_completed)}",
            f"Open todos: {format_number(analytics.total_todos)}",
            f"Streak: {analytics.streak} days",
            f"Daily average: {analytics.daily_average}",
            "",
            f"Productivity score: {self.score.total}/100 {score_emoji(self.score.total)}",
        ]

        for component in self.score.components.values():
            lines.append(
                f"  {component.label}: {component.score}/{component.max} "
                f"({component.percentage}%) value={component.value}"
            )

        lines.extend([
            "",
            f"Level {self.level.level}: {self.level.xp_in_current_level}/{self.level.xp_for_next_level} XP "
            f"({self.level.progress_percent}%)",
            "",
            f"Achievements: {len(self.achievements.achieved)}/{len(self.achievements.all)}",
        ])

        for achievement in self.achievements.achieved:
            lines.append(f"  {achievement.icon} {achievement.name} - {achievement.desc}")

        if analytics.avg_velocity_hours is not None:
            lines.extend([
                "",
                f"Velocity: avg {analytics.avg_velocity_hours:.1f}h, median {analytics.median_velocity_hours:.1f}h",
            ])

        if analytics.tags:
            lines.extend(["", "Top tags:"])
            for tag, count in analytics.tags.items():
                lines.append(f"  #{tag}: {count}")

        if analytics.pages:
            lines.extend(["", "Top pages:"])
            for page, count in analytics.pages.items():
                lines.append(f"  {page}: {count}")

        for name, points in self.trends.items():
            lines.extend(["", f"Trend ({name}):"])
            for point in points:
                marker = " *" if point.is_current else ""
                lines.append(f"  {point.label:<14} {point.count}{marker}")

        lines.append("=" * 50)

        return "\n".join(lines)


class DashboardBuilder:
    """Runs the full analytics pipeline for one refresh."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize builder with configuration."""
        self.config = config or {}
        self.trends_config = self.config.get('trends', {})
        self.scorer = ProductivityScorer(self.config)
        self.leveling = LevelingCalculator(self.config)
        self.evaluator = AchievementEvaluator()

    def build(
        self,
        records: Iterable[TaskRecord],
        now: Optional[datetime] = None,
        total_todos: int = 0,
    ) -> DashboardReport:
        """Build a report; `now` is captured once and used for every step."""
        if now is None:
            now = datetime.now()
        records = list(records)

        analytics = build_analytics(records, now, total_todos, self.config)
        daily_counts = analytics.daily_counts

        report = DashboardReport(
            generated_at=now,
            analytics=analytics,
            score=self.scorer.score(analytics, now),
            level=self.leveling.calculate(analytics.total_completed),
            achievements=self.evaluator.evaluate(analytics, now),
            trends={
                'days': last_days_trend(daily_counts, now, self.trends_config.get('days', 12)),
                'weeks': last_weeks_trend(daily_counts, now, self.trends_config.get('weeks', 12)),
                'months': last_months_trend(daily_counts, now, self.trends_config.get('months', 12)),
            },
            heatmap=heatmap_calendar(daily_counts, now, self.trends_config.get('heatmap_days', 364)),
            activity_matrix=weekly_activity_matrix(records),
        )

        log.info(
            "dashboard_built",
            score=report.score.total,
            level=report.level.level,
            achievements=len(report.achievements.achieved),
        )
        return report

    def export(self, report: DashboardReport, output_dir: str = "results") -> Dict[str, Path]:
        """Write the report as JSON and as a human-readable log."""
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        stamp = report.generated_at.strftime("%Y%m%d_%H%M%S")
        json_path = output_path / f"dashboard_{stamp}.json"
        log_path = output_path / f"dashboard_{stamp}.log"

        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, indent=2, default=str, ensure_ascii=False)

        with open(log_path, 'w', encoding='utf-8') as f:
            f.write(report.to_human_readable())

        log.info("dashboard_exported", json_path=str(json_path), log_path=str(log_path))
        return {'json': json_path, 'log': log_path}
