"""Transition guard -- manual task writes checked against the state machine

complete() accepts tasks whose derived status is PENDING or OVERDUE.
Completing an UPCOMING task is refused even though time alone will move it
to PENDING later. Rejections come back as TransitionResult values.
"""

from datetime import datetime

import structlog

from .models.enums import ErrorCode, TaskStatus, validate_transition
from .models.results import TransitionResult
from .models.task import Task
from .status import derive_status

log = structlog.get_logger()


def can_complete(task: Task, now: datetime) -> bool:
    """Whether complete() would succeed at `now`"""
    return validate_transition(derive_status(task, now), TaskStatus.COMPLETED)


def complete(
    task: Task,
    now: datetime,
    completed_by: str | None = None,
) -> TransitionResult:
    """Mark a task completed

    Args:
        task: task to complete (left untouched)
        now: completion time, also used to derive the current status
        completed_by: who completed the task

    Returns:
        TransitionResult with the completed copy, or ALREADY_COMPLETED /
        WINDOW_NOT_OPEN_YET
    """
    current = derive_status(task, now)

    if current == TaskStatus.COMPLETED:
        log.info(
            "task_completion_rejected",
            task_id=task.task_id,
            error=ErrorCode.ALREADY_COMPLETED.value,
        )
        return TransitionResult.fail(
            ErrorCode.ALREADY_COMPLETED, "Task is already completed"
        )

    if current == TaskStatus.UPCOMING:
        log.info(
            "task_completion_rejected",
            task_id=task.task_id,
            error=ErrorCode.WINDOW_NOT_OPEN_YET.value,
        )
        return TransitionResult.fail(
            ErrorCode.WINDOW_NOT_OPEN_YET,
            "Cannot complete a task before its window opens",
        )

    completed = task.model_copy(
        update={
            "status": TaskStatus.COMPLETED,
            "completed_at": now,
            "completed_by": completed_by,
        }
    )
    log.info(
        "task_completed",
        task_id=task.task_id,
        patient_id=task.patient_id,
        from_status=current.value,
        completed_by=completed_by,
    )
    return TransitionResult.ok(completed)


def add_notes(task: Task, text: str) -> Task:
    """Replace the task's notes; allowed in every status"""
    return task.model_copy(update={"notes": text})
