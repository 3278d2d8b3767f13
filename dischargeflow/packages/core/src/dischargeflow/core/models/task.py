"""Task Domain Model -- time-boxed follow-up task

Tasks are immutable values; every change produces a new instance via
model_copy(update=...). Only a COMPLETED status is meaningful in storage,
all other statuses are re-derived from the window on read.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import TaskStatus, TaskType


class Task(BaseModel):
    """Follow-up task generated from a discharge event"""

    model_config = ConfigDict(frozen=True)

    task_id: str = Field(description="Unique identifier, task_<ULID>")
    patient_id: str = Field(description="Patient that spawned the task")
    type: TaskType = Field(description="Task kind")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Last persisted status")
    window_start: datetime = Field(description="When the task window opens")
    window_end: datetime = Field(description="When the task window closes (deadline)")
    completed_at: datetime | None = Field(default=None, description="Completion time")
    completed_by: str | None = Field(default=None, description="Who completed the task")
    notes: str | None = Field(default=None, description="Free text notes")

    @field_validator("window_start", "window_end", "completed_at")
    @classmethod
    def _to_local_wall_clock(cls, value: datetime | None) -> datetime | None:
        # stored values may carry an offset; the core compares naive local times
        if value is not None and value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value

    @model_validator(mode="after")
    def _check_invariants(self) -> "Task":
        if self.window_start > self.window_end:
            raise ValueError("window_start must not be after window_end")
        if self.status == TaskStatus.COMPLETED and self.completed_at is None:
            raise ValueError("completed tasks require completed_at")
        return self


class TimeRemaining(BaseModel):
    """Time left until a task's deadline, floored to the minute"""

    hours: int = Field(ge=0, description="Whole hours")
    minutes: int = Field(ge=0, lt=60, description="Remaining minutes")
    total_minutes: int = Field(ge=0, description="Absolute remaining minutes")
    is_overdue: bool = Field(description="Deadline already passed")
