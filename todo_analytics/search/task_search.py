"""Fuzzy-ranked search across task records."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..models.task import TaskRecord
from .fuzzy import fuzzy_score


class TaskStatus(Enum):
    """Status markers the host writes into task text."""
    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"
    ARCHIVED = "ARCHIVED"

    @property
    def marker(self) -> str:
        return "{{[[" + self.value + "]]}}"


MARKER_PATTERN = re.compile(r"\{\{\[\[(?:DONE|TODO|DOING|ARCHIVED)\]\]\}\}|\{\{(?:DONE|TODO)\}\}")


def detect_status(content: str) -> TaskStatus:
    """Status of a task from its markers; unmarked text counts as TODO."""
    for status in (TaskStatus.DONE, TaskStatus.DOING, TaskStatus.ARCHIVED):
        if status.marker in content:
            return status
    return TaskStatus.TODO


def clean_content(content: str) -> str:
    """Strip status markers and surrounding whitespace."""
    return MARKER_PATTERN.sub('', content).strip()


@dataclass
class SearchResult:
    """A matched task with its rank score."""

    record: TaskRecord
    score: int
    status: TaskStatus

    @property
    def display_content(self) -> str:
        return clean_content(self.record.content)


def _parse_status(status: Optional[str]) -> Optional[TaskStatus]:
    if status is None or status == 'all':
        return None
    try:
        return TaskStatus(status.upper())
    except ValueError:
        raise ValueError(f"Unknown task status filter: {status}") from None


def search_tasks(records: Iterable[TaskRecord], query: str = '', status: Optional[str] = 'all') -> List[SearchResult]:
    """Filter by status marker, then rank by fuzzy score (best first).

    An empty query keeps every record in its original order with score 0.
    """
    status_filter = _parse_status(status)
    candidates = [
        record for record in records
        if status_filter is None or status_filter.marker in record.content
    ]

    query = (query or '').strip()
    if not query:
        return [SearchResult(record, 0, detect_status(record.content)) for record in candidates]

    results = []
    for record in candidates:
        score = fuzzy_score(query, record.content)
        if score > 0:
            results.append(SearchResult(record, score, detect_status(record.content)))

    results.sort(key=lambda result: result.score, reverse=True)
    return results


def group_by_page(results: Iterable[SearchResult]) -> Dict[str, List[SearchResult]]:
    """Group results by origin page, pages in order of first appearance."""
    grouped: Dict[str, List[SearchResult]] = {}
    for result in results:
        grouped.setdefault(result.record.page_title, []).append(result)
    return grouped
