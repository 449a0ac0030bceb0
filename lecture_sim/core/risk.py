"""
Risk flagging performed before a student is judged.
"""

from dataclasses import dataclass
from typing import Optional

from .entities import Student
from .enums import Nationality


@dataclass(frozen=True)
class RiskCheckResult:
    """Outcome of a risk check: either clear or flagged with a message."""
    flagged: bool
    message: Optional[str] = None

    @classmethod
    def clear(cls) -> 'RiskCheckResult':
        return cls(flagged=False)

    @classmethod
    def flag(cls, message: str) -> 'RiskCheckResult':
        return cls(flagged=True, message=message)


def check_risk_flag(student: Student) -> RiskCheckResult:
    """Flag at-risk students from outside the union for deportation."""
    if student.is_at_risk() and student.nationality is Nationality.NON_UNION_MEMBER:
        return RiskCheckResult.flag(
            f"{student.name} missed too many lectures without respecting the basics "
            f"and has been flagged for deportation!"
        )
    return RiskCheckResult.clear()
