"""
REST API for the lecture simulator using FastAPI.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .. import __version__
from ..config import SimulationConfig
from ..core.catalog import LectureCatalog, week_label
from ..core.exceptions import SimulationException
from ..services import SimulationService

logger = logging.getLogger(__name__)


# Pydantic models for API
class SimulationRequest(BaseModel):
    seed: Optional[int] = None
    weeks: Optional[int] = Field(None, ge=0, le=52)
    attend_probability: Optional[float] = Field(None, ge=0.0, le=1.0)


class AttendanceEntry(BaseModel):
    student_id: str
    student_name: str
    action: str
    lectures_missed: int


class WeekEntry(BaseModel):
    week: int
    label: str
    topic: Optional[str] = None
    attendance: List[AttendanceEntry] = []


class EvaluationEntry(BaseModel):
    student_id: str
    student_name: str
    judge: str
    outcome: str
    message: str


class SimulationResponse(BaseModel):
    success: bool
    message: str
    exempted: Optional[str] = None
    weeks: List[WeekEntry] = []
    evaluations: List[EvaluationEntry] = []
    outcome_counts: Dict[str, int] = {}
    transcript: List[str] = []


class TopicResponse(BaseModel):
    week: int
    label: str
    topic: str


class LectureSimRestAPI:
    """REST API exposing catalog lookups and simulation runs."""

    def __init__(self, config: Optional[SimulationConfig] = None,
                 catalog: Optional[LectureCatalog] = None):
        self._config = config or SimulationConfig()
        self._catalog = catalog if catalog is not None else LectureCatalog()

        self.app = FastAPI(
            title="Lecture Sim API",
            description="Classroom attendance and evaluation simulator",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes."""

        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            """Root endpoint."""
            return {
                "message": "Lecture Sim API",
                "version": __version__,
                "docs": "/docs"
            }

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        @self.app.get("/catalog", response_model=Dict[str, str])
        async def list_topics():
            """List every lecture topic."""
            return dict(self._catalog)

        @self.app.get("/catalog/{week}", response_model=TopicResponse)
        async def get_topic(week: int):
            """Get the topic for one week."""
            label = week_label(week)
            topic = self._catalog.lookup(label)
            if topic is None:
                raise HTTPException(status_code=404, detail=f"{label} not found in catalog")
            return TopicResponse(week=week, label=label, topic=topic)

        @self.app.post("/simulations", response_model=SimulationResponse, status_code=status.HTTP_201_CREATED)
        def run_simulation(request: SimulationRequest):
            """Run one simulation and return its report."""
            overrides = request.model_dump(exclude_none=True)
            try:
                config = self._config.model_copy(update=overrides)
                service = SimulationService(config=config, catalog=self._catalog, output=logger.debug)
                report = service.run()
            except SimulationException as e:
                raise HTTPException(status_code=400, detail=e.message)

            return SimulationResponse(success=True, message="Simulation completed", **report.to_dict())
