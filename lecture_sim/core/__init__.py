"""
Core module containing the student model, catalog, policies and risk rule.
"""

from .entities import *
from .catalog import *
from .policies import *
from .risk import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Student",

    # Catalog
    "LectureCatalog",
    "DEFAULT_TOPICS",
    "week_label",

    # Policies
    "Judge",
    "JUDGES",
    "strict_judge",
    "lenient_judge",
    "weighted_score",
    "weighted_score_judge",
    "get_judge",
    "choose_judge",

    # Risk
    "RiskCheckResult",
    "check_risk_flag",

    # Enums
    "Nationality",
    "JudgeKind",
    "AttendanceAction",
    "Outcome",
    "SimulationPhase",

    # Exceptions
    "SimulationException",
    "ValidationError",
    "ConfigurationError",
    "PhaseError",
]
