"""
Roster seed data and the exemption draw.
"""

import logging
import random
from typing import List, Optional

from ..core.entities import Student
from ..core.enums import Nationality

logger = logging.getLogger(__name__)


# (name, lectures missed, respects basics, nationality)
SEED_STUDENTS = [
    ("Anna", 1, True, Nationality.LOCAL),
    ("Lukas", 3, True, Nationality.UNION_MEMBER),
    ("Fatima", 6, False, Nationality.NON_UNION_MEMBER),
    ("Sofia", 7, False, Nationality.UNION_MEMBER),
    ("Carlos", 5, False, Nationality.NON_UNION_MEMBER),
]


def build_roster() -> List[Student]:
    """Create a fresh roster from the seed data."""
    return [Student(name, missed, respects, nationality)
            for name, missed, respects, nationality in SEED_STUDENTS]


def draw_exemption(roster: List[Student], rng: random.Random) -> Optional[Student]:
    """Grant immunity to one non-union student, replacing them in the roster.

    Returns the promoted student, or None when the roster has no
    non-union students (the roster is then left untouched).
    """
    candidates = [index for index, student in enumerate(roster)
                  if student.nationality is Nationality.NON_UNION_MEMBER]
    if not candidates:
        logger.debug("No non-union students on the roster, skipping exemption")
        return None

    index = rng.choice(candidates)
    promoted = roster[index].grant_immunity()
    roster[index] = promoted
    logger.info("Granted immunity to %s", promoted.name)
    return promoted
