"""Task velocity metrics."""

from typing import Iterable, List, Optional

from ..models.analytics import VelocityMetrics
from ..models.task import TaskRecord

MAX_VELOCITY_HOURS = 24 * 30


def calculate_task_duration(record: TaskRecord) -> Optional[float]:
    """Hours from creation to completion, or None if not measurable."""
    return record.get_duration_hours()


def collect_velocities(records: Iterable[TaskRecord], max_hours: float = MAX_VELOCITY_HOURS) -> List[float]:
    """Completion times in hours, dropping values outside (0, max_hours]."""
    velocities = []
    for record in records:
        if not (record.has_creation_time and record.has_completion_time):
            continue
        hours = (record.edit_time - record.create_time) / (1000 * 60 * 60)
        if 0 < hours <= max_hours:
            velocities.append(hours)
    return velocities


def calculate_task_velocity(records: Iterable[TaskRecord], max_hours: float = MAX_VELOCITY_HOURS) -> VelocityMetrics:
    """Average and median completion velocity.

    Both values are None when no record has a usable duration, so callers
    can tell "no data" apart from a very fast completion. The median is the
    upper middle element for even-sized samples.
    """
    velocities = collect_velocities(records, max_hours)
    if not velocities:
        return VelocityMetrics()

    avg = sum(velocities) / len(velocities)
    velocities.sort()
    median = velocities[len(velocities) // 2]

    return VelocityMetrics(avg_velocity_hours=avg, median_velocity_hours=median)
