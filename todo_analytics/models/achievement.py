"""Achievement data models."""

from dataclasses import dataclass, field, asdict
from typing import Callable, Dict, List, Any


@dataclass(frozen=True)
class AchievementDefinition:
    """Static catalog entry; `rule` decides whether it is unlocked."""

    id: str
    name: str
    desc: str
    icon: str
    category: str
    rule: Callable[[Any], bool] = field(compare=False, repr=False)


@dataclass
class Achievement:
    """Catalog entry evaluated against one analytics snapshot."""

    id: str
    name: str
    desc: str
    icon: str
    category: str
    requirement: bool


@dataclass
class AchievementResult:
    """Achieved/unachieved partition of the full catalog."""

    achieved: List[Achievement]
    unachieved: List[Achievement]
    all: List[Achievement]

    @property
    def completion_percent(self) -> int:
        """Share of the catalog unlocked, as a whole percentage."""
        if not self.all:
            return 0
        return round(len(self.achieved) / len(self.all) * 100)

    def by_category(self) -> Dict[str, List[Achievement]]:
        """Group every achievement by category, in catalog order."""
        grouped: Dict[str, List[Achievement]] = {}
        for achievement in self.all:
            grouped.setdefault(achievement.category, []).append(achievement)
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON export."""
        return {
            'achieved': [asdict(a) for a in self.achieved],
            'unachieved': [asdict(a) for a in self.unachieved],
            'all': [asdict(a) for a in self.all],
            'completion_percent': self.completion_percent,
        }
