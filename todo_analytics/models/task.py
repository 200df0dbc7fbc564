"""Task record data model."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

DEFAULT_PAGE_TITLE = "Untitled"

# 9999-12-30 UTC; later values cannot be represented as a local datetime
MAX_TIMESTAMP_MS = 253_402_128_000_000


def _is_valid_timestamp(value: Optional[int]) -> bool:
    return value is not None and 0 < value <= MAX_TIMESTAMP_MS


@dataclass
class TaskRecord:
    """One task-bearing block as supplied by the host application.

    Timestamps are epoch milliseconds. Values outside (0, MAX_TIMESTAMP_MS]
    are kept but treated as absent by every time-based calculation.
    """

    uid: str
    content: str
    create_time: Optional[int] = None
    edit_time: Optional[int] = None
    page_title: str = DEFAULT_PAGE_TITLE
    order: Optional[int] = None

    def __post_init__(self):
        """Normalize missing page titles and zero timestamps."""
        if not self.page_title:
            self.page_title = DEFAULT_PAGE_TITLE
        # The host reports a missing timestamp as 0
        if not self.create_time:
            self.create_time = None
        if not self.edit_time:
            self.edit_time = None

    @property
    def has_completion_time(self) -> bool:
        """Whether the record has a usable completion (edit) time."""
        return _is_valid_timestamp(self.edit_time)

    @property
    def has_creation_time(self) -> bool:
        """Whether the record has a usable creation time."""
        return _is_valid_timestamp(self.create_time)

    def get_duration_hours(self) -> Optional[float]:
        """Hours between creation and completion, or None if not measurable."""
        if not (self.has_creation_time and self.has_completion_time):
            return None
        hours = (self.edit_time - self.create_time) / 1000 / 3600
        if hours <= 0:
            return None
        return hours

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TaskRecord":
        """Build a record from a host-shaped dict (camelCase or snake_case keys)."""
        uid = data.get('uid')
        if not uid:
            raise ValueError(f"Task record is missing a uid: {data!r}")

        content = data.get('content', data.get('string', ''))
        if content is None:
            content = ''
        if not isinstance(content, str):
            raise ValueError(f"Task record {uid} has non-string content")

        return cls(
            uid=str(uid),
            content=content,
            create_time=data.get('createTime', data.get('create_time')),
            edit_time=data.get('editTime', data.get('edit_time')),
            page_title=data.get('pageTitle', data.get('page_title')) or DEFAULT_PAGE_TITLE,
            order=data.get('order'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the host's camelCase shape."""
        return {
            'uid': self.uid,
            'content': self.content,
            'createTime': self.create_time,
            'editTime': self.edit_time,
            'pageTitle': self.page_title,
            'order': self.order,
        }
