"""
Enumerations and constants for the lecture simulator.
"""

from enum import Enum


class Nationality(Enum):
    """Nationality categories a student can belong to."""
    LOCAL = "local"
    UNION_MEMBER = "union_member"
    NON_UNION_MEMBER = "non_union_member"


class JudgeKind(Enum):
    """Built-in pass/fail policies."""
    STRICT = "strict"
    LENIENT = "lenient"
    WEIGHTED_SCORE = "weighted_score"


class AttendanceAction(Enum):
    """What a student did in a given week."""
    ATTENDED = "attended"
    SKIPPED = "skipped"


class Outcome(Enum):
    """Final verdict for a student."""
    PASSED = "passed"
    FAILED = "failed"
    FLAGGED = "flagged"


class SimulationPhase(Enum):
    """Phases of a simulation run, in execution order."""
    SETUP = "setup"
    EXEMPTION_DRAW = "exemption_draw"
    WEEKLY_ATTENDANCE = "weekly_attendance"
    FINAL_EVALUATION = "final_evaluation"
    COMPLETED = "completed"
