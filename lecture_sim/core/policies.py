"""
Pass/fail policies used in the final evaluation.

Every judge is a plain function taking a student and returning True when the
student passes. Judges are addressed by JudgeKind so the driver can pick one
at random.
"""

import random
from types import MappingProxyType
from typing import Callable, Mapping

from .entities import Student
from .enums import JudgeKind


Judge = Callable[[Student], bool]

WEIGHTED_MISSED_FACTOR = 0.8
WEIGHTED_BASICS_BONUS = -2.0
WEIGHTED_BASICS_PENALTY = 2.0
WEIGHTED_PASS_LIMIT = 5.0


def strict_judge(student: Student) -> bool:
    """Pass only with at most two missed lectures and respect for the basics."""
    return student.lectures_missed <= 2 and student.respects_basics


def lenient_judge(student: Student) -> bool:
    """Pass with at most six missed lectures, or with respect for the basics."""
    return student.lectures_missed <= 6 or student.respects_basics


def weighted_score(student: Student) -> float:
    adjustment = WEIGHTED_BASICS_BONUS if student.respects_basics else WEIGHTED_BASICS_PENALTY
    return student.lectures_missed * WEIGHTED_MISSED_FACTOR + adjustment


def weighted_score_judge(student: Student) -> bool:
    """Pass when the weighted score stays strictly below the limit."""
    return weighted_score(student) < WEIGHTED_PASS_LIMIT


JUDGES: Mapping[JudgeKind, Judge] = MappingProxyType({
    JudgeKind.STRICT: strict_judge,
    JudgeKind.LENIENT: lenient_judge,
    JudgeKind.WEIGHTED_SCORE: weighted_score_judge,
})


def get_judge(kind: JudgeKind) -> Judge:
    return JUDGES[kind]


def choose_judge(rng: random.Random) -> JudgeKind:
    """Draw one of the built-in judges uniformly."""
    return rng.choice(list(JUDGES))
