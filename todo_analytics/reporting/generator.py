"""Synthetic task record generator for demos and tests."""

import random
from datetime import datetime, timedelta
from typing import List, Optional

from ..models.task import TaskRecord
from ..utils.datetime_utils import to_epoch_ms


class TaskGenerator:
    """Generates deterministic task records in the host's shape."""

    TAGS = ['work', 'home', 'health', 'reading', 'finance', 'errand', 'writing', 'review']
    PAGES = ['Daily Notes', 'Project X', 'Inbox', 'Weekly Review', 'Reading List', 'Garden']
    VERBS = ['Write', 'Review', 'Call', 'Plan', 'Fix', 'Read', 'Email', 'Clean']
    OBJECTS = ['report', 'budget', 'draft', 'notes', 'backlog', 'chapter', 'invoice', 'kitchen']

    def __init__(self, seed: int = 42, config: dict = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.generator_config = self.config.get('generator', {})

    def _content(self, status: str) -> str:
        words = [self.random.choice(self.VERBS), self.random.choice(self.OBJECTS)]

        # Roughly half the tasks carry a tag, a third link a page
        if self.random.random() < 0.5:
            words.append(f"#{self.random.choice(self.TAGS)}")
        if self.random.random() < 0.3:
            words.append(f"for [[{self.random.choice(self.PAGES)}]]")

        return "{{[[" + status + "]]}} " + " ".join(words)

    def generate_records(
        self,
        now: datetime,
        count: Optional[int] = None,
        history_days: Optional[int] = None,
        status: str = "DONE",
    ) -> List[TaskRecord]:
        """Generate `count` records completed within the last `history_days`.

        Both default to the `generator` config section (200 records, 90 days).
        """
        if count is None:
            count = self.generator_config.get('count', 200)
        if history_days is None:
            history_days = self.generator_config.get('history_days', 90)
        records = []

        for i in range(count):
            completed_at = now - timedelta(
                days=self.random.randint(0, history_days - 1),
                hours=self.random.randint(0, 23),
                minutes=self.random.randint(0, 59),
            )
            completed_at = min(completed_at, now)

            # Some blocks have no recorded creation time
            create_time = None
            if self.random.random() < 0.8:
                lead_hours = self.random.choice([0.5, 2, 6, 20, 50, 200])
                create_time = to_epoch_ms(completed_at - timedelta(hours=lead_hours))

            records.append(TaskRecord(
                uid=f"task-{self.seed}-{i:04d}",
                content=self._content(status),
                create_time=create_time,
                edit_time=to_epoch_ms(completed_at),
                page_title=self.random.choice(self.PAGES),
                order=i,
            ))

        return records

    def generate_open_records(self, now: datetime, count: Optional[int] = None) -> List[TaskRecord]:
        """Generate TODO and DOING records without a completion time."""
        if count is None:
            count = self.generator_config.get('open_count', 40)
        records = []
        for i in range(count):
            status = self.random.choice(['TODO', 'DOING'])
            records.append(TaskRecord(
                uid=f"open-{self.seed}-{i:04d}",
                content=self._content(status),
                create_time=to_epoch_ms(now - timedelta(days=self.random.randint(0, 30))),
                page_title=self.random.choice(self.PAGES),
                order=i,
            ))
        return records
