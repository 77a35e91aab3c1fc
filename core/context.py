"""Run context and lifecycle management."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.config import Settings
from core.ids import generate_run_id
from schemas import CoverageRecord, CoverageStatus, RawJobRecord


class RunStatus(str, Enum):
    """Status of a pipeline run."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class RunMetrics(BaseModel):
    """Metrics collected during a run."""

    num_companies: int = 0
    num_ok: int = 0
    num_empty: int = 0
    num_failed: int = 0
    num_unsupported: int = 0
    num_raw_jobs: int = 0
    num_duplicates_dropped: int = 0


class StageLog(BaseModel):
    """Log entry for a pipeline stage."""

    stage: str
    started_at: datetime
    completed_at: datetime | None = None
    status: str = "running"
    items_in: int = 0
    items_out: int = 0
    errors: list[str] = Field(default_factory=list)
    duration_seconds: float | None = None


class RunContext(BaseModel):
    """Context for a pipeline run - travels through all stages.

    Owns the append-only accumulators of a scrape run so that nothing is
    shared between runs.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    run_id: str
    started_at: datetime
    status: RunStatus = RunStatus.PENDING
    completed_at: datetime | None = None

    settings: Settings

    # Tracking
    metrics: RunMetrics = Field(default_factory=RunMetrics)
    stage_logs: list[StageLog] = Field(default_factory=list)

    # Accumulators
    raw_jobs: list[RawJobRecord] = Field(default_factory=list)
    coverage: list[CoverageRecord] = Field(default_factory=list)

    @classmethod
    def boot(cls, settings: Settings, run_id: str | None = None) -> RunContext:
        """Boot a new run context."""
        return cls(
            run_id=run_id or generate_run_id(),
            started_at=datetime.now(UTC),
            status=RunStatus.RUNNING,
            settings=settings,
        )

    def record_outcome(self, record: CoverageRecord, jobs: list[RawJobRecord]) -> None:
        """Append one company's coverage record and its raw jobs."""
        self.coverage.append(record)
        self.raw_jobs.extend(jobs)

        self.metrics.num_companies += 1
        self.metrics.num_raw_jobs += len(jobs)
        if record.status == CoverageStatus.OK:
            self.metrics.num_ok += 1
        elif record.status == CoverageStatus.EMPTY:
            self.metrics.num_empty += 1
        elif record.status == CoverageStatus.FAILED:
            self.metrics.num_failed += 1
        else:
            self.metrics.num_unsupported += 1

    def start_stage(self, stage: str, items_in: int = 0) -> StageLog:
        """Record start of a stage."""
        log = StageLog(
            stage=stage,
            started_at=datetime.now(UTC),
            items_in=items_in,
        )
        self.stage_logs.append(log)
        return log

    def complete_stage(
        self,
        stage: str,
        items_out: int = 0,
        errors: list[str] | None = None,
        status: str = "completed",
    ) -> StageLog | None:
        """Record completion of a stage."""
        for log in self.stage_logs:
            if log.stage == stage and log.completed_at is None:
                log.completed_at = datetime.now(UTC)
                log.items_out = items_out
                log.status = status
                if errors:
                    log.errors = errors
                log.duration_seconds = (
                    log.completed_at - log.started_at
                ).total_seconds()
                return log
        return None

    def complete_run(self, status: RunStatus = RunStatus.COMPLETED) -> None:
        """Mark the run as complete."""
        self.status = status
        self.completed_at = datetime.now(UTC)

    def summary(self) -> dict[str, Any]:
        """Get a summary of the run for display."""
        return {
            "run_id": self.run_id,
            "status": self.status.value,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "metrics": self.metrics.model_dump(),
            "stages": [
                {
                    "stage": log.stage,
                    "status": log.status,
                    "items_in": log.items_in,
                    "items_out": log.items_out,
                    "duration": log.duration_seconds,
                    "errors": len(log.errors),
                }
                for log in self.stage_logs
            ],
        }
