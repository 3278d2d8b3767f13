"""Operation results -- recoverable failures reported as values

Completion and note operations never raise for expected conditions
(double completion, window not open, stale id); callers branch on
TransitionResult.success / TransitionResult.error instead.
"""

from pydantic import BaseModel, Field

from .enums import ErrorCode
from .task import Task


class TransitionResult(BaseModel):
    """Outcome of a task write operation"""

    success: bool = Field(description="Whether the operation was applied")
    task: Task | None = Field(default=None, description="Updated task on success")
    error: ErrorCode | None = Field(default=None, description="Failure kind")
    message: str | None = Field(default=None, description="Human-readable failure message")

    @classmethod
    def ok(cls, task: Task) -> "TransitionResult":
        return cls(success=True, task=task)

    @classmethod
    def fail(cls, error: ErrorCode, message: str) -> "TransitionResult":
        return cls(success=False, error=error, message=message)


class DashboardStats(BaseModel):
    """Counters shown on the dashboard header"""

    total_patients: int = Field(ge=0, description="Distinct patients")
    pending_tasks: int = Field(ge=0, description="Tasks currently in their window")
    overdue_tasks: int = Field(ge=0, description="Tasks past their deadline")
    completed_today: int = Field(ge=0, description="Tasks completed since local midnight")
    urgent_tasks: int = Field(ge=0, description="Open tasks whose deadline is near")
