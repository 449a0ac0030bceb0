"""
Services module containing the roster helpers and the simulation driver.
"""

from .roster import build_roster, draw_exemption, SEED_STUDENTS
from .simulation_service import (
    SimulationService, SimulationReport, WeekReport,
    AttendanceRecord, EvaluationRecord
)

__all__ = [
    "build_roster",
    "draw_exemption",
    "SEED_STUDENTS",
    "SimulationService",
    "SimulationReport",
    "WeekReport",
    "AttendanceRecord",
    "EvaluationRecord",
]
