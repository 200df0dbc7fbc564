"""Task search and logbook browsing."""

from .fuzzy import fuzzy_matches, fuzzy_score
from .logbook import LogbookView, build_logbook, date_range
from .task_search import TaskStatus, clean_content, detect_status, group_by_page, search_tasks

__all__ = [
    'fuzzy_matches',
    'fuzzy_score',
    'LogbookView',
    'build_logbook',
    'date_range',
    'TaskStatus',
    'clean_content',
    'detect_status',
    'group_by_page',
    'search_tasks',
]
