"""
Core entities for the lecture simulator.
"""

import uuid
from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .enums import Nationality
from .exceptions import ValidationError


# Missed lectures above this count put a student at risk.
RISK_MISSED_THRESHOLD = 4


class AbstractEntity(ABC):
    """Base abstract entity with universal ID and creation timestamp."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or str(uuid.uuid4())
        self._created_at = datetime.now(timezone.utc)

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"


class Student(AbstractEntity):
    """Student taking part in the lecture series.

    A student is either standard or immune. Immune students keep all of their
    attributes but are never considered at risk.
    """

    def __init__(self, name: str, lectures_missed: int, respects_basics: bool,
                 nationality: Nationality, immune: bool = False, **kwargs):
        super().__init__(**kwargs)
        if lectures_missed < 0:
            raise ValidationError(
                f"lectures_missed must be non-negative, got {lectures_missed}",
                error_code="NEGATIVE_MISSED",
                details={'name': name, 'lectures_missed': lectures_missed}
            )
        self._name = name
        self._lectures_missed = lectures_missed
        self._respects_basics = respects_basics
        self._nationality = nationality
        self._immune = immune

    @property
    def name(self) -> str:
        return self._name

    @property
    def lectures_missed(self) -> int:
        return self._lectures_missed

    @property
    def respects_basics(self) -> bool:
        return self._respects_basics

    @property
    def nationality(self) -> Nationality:
        return self._nationality

    @property
    def immune(self) -> bool:
        return self._immune

    def attend(self) -> None:
        """Attend a lecture, making up for one missed lecture if any."""
        if self._lectures_missed > 0:
            self._lectures_missed -= 1

    def is_at_risk(self) -> bool:
        """Check whether the student has missed too much without respecting the basics."""
        if self._immune:
            return False
        return self._lectures_missed > RISK_MISSED_THRESHOLD and not self._respects_basics

    def grant_immunity(self) -> 'Student':
        """Return the immune variant of this student, keeping id and attributes."""
        promoted = Student(
            self._name,
            self._lectures_missed,
            self._respects_basics,
            self._nationality,
            immune=True,
            entity_id=self._id
        )
        promoted._created_at = self._created_at
        return promoted

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'name': self._name,
            'lectures_missed': self._lectures_missed,
            'respects_basics': self._respects_basics,
            'nationality': self._nationality.value,
            'immune': self._immune,
        })
        return data

    def __repr__(self) -> str:
        return (f"Student(name={self._name!r}, lectures_missed={self._lectures_missed}, "
                f"respects_basics={self._respects_basics}, nationality={self._nationality.value}, "
                f"immune={self._immune})")
