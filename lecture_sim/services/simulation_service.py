"""
Simulation driver: roster setup, exemption draw, weekly attendance and
final evaluation, run strictly in that order.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..config import SimulationConfig
from ..core.catalog import LectureCatalog, week_label
from ..core.entities import Student
from ..core.enums import AttendanceAction, JudgeKind, Outcome, SimulationPhase
from ..core.exceptions import PhaseError
from ..core.policies import choose_judge, get_judge
from ..core.risk import check_risk_flag
from .roster import build_roster, draw_exemption

logger = logging.getLogger(__name__)


@dataclass
class AttendanceRecord:
    """One student's action in one week."""
    week: int
    student_id: str
    student_name: str
    action: AttendanceAction
    lectures_missed: int


@dataclass
class WeekReport:
    week: int
    label: str
    topic: Optional[str]
    attendance: List[AttendanceRecord] = field(default_factory=list)


@dataclass
class EvaluationRecord:
    """Final verdict for one student."""
    student_id: str
    student_name: str
    judge: JudgeKind
    outcome: Outcome
    message: str


@dataclass
class SimulationReport:
    """Everything a single run produced."""
    exempted: Optional[str] = None
    weeks: List[WeekReport] = field(default_factory=list)
    evaluations: List[EvaluationRecord] = field(default_factory=list)
    transcript: List[str] = field(default_factory=list)

    def outcome_counts(self) -> Dict[str, int]:
        counts = {outcome.value: 0 for outcome in Outcome}
        for record in self.evaluations:
            counts[record.outcome.value] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            'exempted': self.exempted,
            'weeks': [
                {
                    'week': week.week,
                    'label': week.label,
                    'topic': week.topic,
                    'attendance': [
                        {
                            'student_id': record.student_id,
                            'student_name': record.student_name,
                            'action': record.action.value,
                            'lectures_missed': record.lectures_missed,
                        }
                        for record in week.attendance
                    ],
                }
                for week in self.weeks
            ],
            'evaluations': [
                {
                    'student_id': record.student_id,
                    'student_name': record.student_name,
                    'judge': record.judge.value,
                    'outcome': record.outcome.value,
                    'message': record.message,
                }
                for record in self.evaluations
            ],
            'outcome_counts': self.outcome_counts(),
            'transcript': list(self.transcript),
        }


class SimulationService:
    """Runs one simulation over a roster it owns for its whole lifetime."""

    def __init__(self, config: Optional[SimulationConfig] = None,
                 catalog: Optional[LectureCatalog] = None,
                 roster_factory: Callable[[], List[Student]] = build_roster,
                 rng: Optional[random.Random] = None,
                 output: Callable[[str], None] = print):
        self._config = config or SimulationConfig()
        self._catalog = catalog if catalog is not None else LectureCatalog()
        self._roster_factory = roster_factory
        self._rng = rng if rng is not None else random.Random(self._config.seed)
        self._output = output
        self._phase = SimulationPhase.SETUP
        self._roster: List[Student] = []
        self._report = SimulationReport()

    @property
    def phase(self) -> SimulationPhase:
        """Get the phase that will run next."""
        return self._phase

    @property
    def roster(self) -> List[Student]:
        return list(self._roster)

    @property
    def report(self) -> SimulationReport:
        return self._report

    def _emit(self, line: str) -> None:
        self._report.transcript.append(line)
        self._output(line)

    def _enter(self, expected: SimulationPhase) -> None:
        if self._phase is not expected:
            raise PhaseError(
                f"Cannot run {expected.value} while in {self._phase.value}",
                error_code="PHASE_ORDER",
                details={'expected': expected.value, 'current': self._phase.value}
            )
        logger.debug("Entering phase %s", expected.value)

    def setup(self) -> List[Student]:
        """Build the roster from seed data."""
        self._enter(SimulationPhase.SETUP)
        self._roster = list(self._roster_factory())
        self._emit(f"✓ Roster created with {len(self._roster)} students")
        for student in self._roster:
            self._emit(f"  - {student.name} ({student.nationality.value}, "
                       f"missed {student.lectures_missed}, "
                       f"respects basics: {'yes' if student.respects_basics else 'no'})")
        self._phase = SimulationPhase.EXEMPTION_DRAW
        return self.roster

    def draw_exemption(self) -> Optional[Student]:
        """Make one non-union student immune, if there is any."""
        self._enter(SimulationPhase.EXEMPTION_DRAW)
        exempted = draw_exemption(self._roster, self._rng)
        if exempted is not None:
            self._report.exempted = exempted.name
            self._emit(f"★ Plot twist: {exempted.name} has been granted immunity")
        self._phase = SimulationPhase.WEEKLY_ATTENDANCE
        return exempted

    def run_weeks(self) -> List[WeekReport]:
        """Run the weekly attendance loop."""
        self._enter(SimulationPhase.WEEKLY_ATTENDANCE)
        for week in range(1, self._config.weeks + 1):
            self._report.weeks.append(self._run_week(week))
        self._phase = SimulationPhase.FINAL_EVALUATION
        return self._report.weeks

    def _run_week(self, week: int) -> WeekReport:
        label = week_label(week)
        topic = self._catalog.lookup(label)
        self._emit("")
        if topic is None:
            logger.warning("No catalog entry for %s", label)
            self._emit(f"=== {label}: topic not found in catalog ===")
        else:
            self._emit(f"=== {label}: {topic} ===")

        report = WeekReport(week=week, label=label, topic=topic)
        for student in self._roster:
            if self._rng.random() < self._config.attend_probability:
                student.attend()
                action = AttendanceAction.ATTENDED
                self._emit(f"  ✓ {student.name} attended the lecture")
            else:
                action = AttendanceAction.SKIPPED
                self._emit(f"  ✗ {student.name} skipped the lecture")
            report.attendance.append(AttendanceRecord(
                week=week,
                student_id=student.id,
                student_name=student.name,
                action=action,
                lectures_missed=student.lectures_missed
            ))
        return report

    def evaluate(self) -> List[EvaluationRecord]:
        """Judge every student, removing flagged ones before judgement."""
        self._enter(SimulationPhase.FINAL_EVALUATION)
        self._emit("")
        self._emit("=== Final evaluation ===")
        for student in self._roster:
            self._report.evaluations.append(self._evaluate_student(student))
        self._phase = SimulationPhase.COMPLETED
        return self._report.evaluations

    def _evaluate_student(self, student: Student) -> EvaluationRecord:
        kind = choose_judge(self._rng)
        risk = check_risk_flag(student)
        if risk.flagged:
            logger.info("Flagged %s", student.name)
            self._emit(f"  🚨 {risk.message}")
            self._emit(f"  ✈ {student.name} has been removed from the simulation")
            return EvaluationRecord(
                student_id=student.id,
                student_name=student.name,
                judge=kind,
                outcome=Outcome.FLAGGED,
                message=risk.message
            )

        passed = get_judge(kind)(student)
        if passed:
            outcome = Outcome.PASSED
            message = f"{student.name} passed ({kind.value} judge)"
            self._emit(f"  ✓ {message}")
        else:
            outcome = Outcome.FAILED
            message = f"{student.name} failed ({kind.value} judge)"
            self._emit(f"  ✗ {message}")
        return EvaluationRecord(
            student_id=student.id,
            student_name=student.name,
            judge=kind,
            outcome=outcome,
            message=message
        )

    def run(self) -> SimulationReport:
        """Run every phase in order and return the report."""
        self.setup()
        self.draw_exemption()
        self.run_weeks()
        self.evaluate()
        logger.info("Simulation completed: %s", self._report.outcome_counts())
        return self._report
