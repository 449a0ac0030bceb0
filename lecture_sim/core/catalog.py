"""
Read-only catalog of lecture topics, keyed by week label.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional


DEFAULT_TOPICS: Dict[str, str] = {
    "Week 1": "Classes and objects: state, behaviour and identity",
    "Week 2": "Inheritance and polymorphism",
    "Week 3": "Interfaces and interchangeable strategies",
    "Week 4": "Exceptions and error handling",
}


def week_label(week: int) -> str:
    """Label used as the catalog key for a week number."""
    return f"Week {week}"


class LectureCatalog(Mapping):
    """Immutable mapping of week labels to lecture topics."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries = MappingProxyType(dict(DEFAULT_TOPICS if entries is None else entries))

    def lookup(self, label: str) -> Optional[str]:
        """Return the topic for a week label, or None if the week is not in the catalog."""
        return self._entries.get(label)

    def topic_for_week(self, week: int) -> Optional[str]:
        return self.lookup(week_label(week))

    def __getitem__(self, label: str) -> str:
        return self._entries[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LectureCatalog({dict(self._entries)!r})"
