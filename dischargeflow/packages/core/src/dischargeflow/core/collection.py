"""Collection operations -- queries and id-based updates over a task list

Every function returns a new list and leaves the input sequence and its
tasks unchanged. A missing id is a normal outcome (None or a NOT_FOUND
result), never an exception.
"""

from collections.abc import Sequence
from datetime import datetime, time, timedelta

from .models.enums import ErrorCode, TaskStatus
from .models.results import TransitionResult
from .models.task import Task
from .status import derive_status
from .transitions import add_notes, complete


def find_index(tasks: Sequence[Task], task_id: str) -> int | None:
    for index, task in enumerate(tasks):
        if task.task_id == task_id:
            return index
    return None


def find_by_id(tasks: Sequence[Task], task_id: str) -> Task | None:
    index = find_index(tasks, task_id)
    return tasks[index] if index is not None else None


def by_status(tasks: Sequence[Task], status: TaskStatus, now: datetime) -> list[Task]:
    """Tasks whose derived status at `now` equals `status`"""
    return [task for task in tasks if derive_status(task, now) == status]


def by_patient(tasks: Sequence[Task], patient_id: str) -> list[Task]:
    return [task for task in tasks if task.patient_id == patient_id]


def overdue_only(tasks: Sequence[Task], now: datetime) -> list[Task]:
    return by_status(tasks, TaskStatus.OVERDUE, now)


def pending_only(tasks: Sequence[Task], now: datetime) -> list[Task]:
    return by_status(tasks, TaskStatus.PENDING, now)


def upcoming_only(tasks: Sequence[Task], now: datetime) -> list[Task]:
    return by_status(tasks, TaskStatus.UPCOMING, now)


def completed_only(tasks: Sequence[Task]) -> list[Task]:
    # completion is persisted, no derivation needed
    return [task for task in tasks if task.status == TaskStatus.COMPLETED]


def completed_in_range(
    tasks: Sequence[Task],
    start: datetime,
    end: datetime,
) -> list[Task]:
    """Completed tasks whose completed_at lies in [start, end]"""
    return [
        task
        for task in completed_only(tasks)
        if task.completed_at is not None and start <= task.completed_at <= end
    ]


def completed_today(tasks: Sequence[Task], now: datetime) -> list[Task]:
    """Tasks completed on the local calendar day of `now`"""
    start_of_day = datetime.combine(now.date(), time.min)
    end_of_day = datetime.combine(now.date(), time.max)
    return completed_in_range(tasks, start_of_day, end_of_day)


def urgent_only(
    tasks: Sequence[Task],
    now: datetime,
    within_hours: float,
) -> list[Task]:
    """Open tasks whose deadline falls within the next `within_hours` hours"""
    threshold = now + timedelta(hours=within_hours)
    return [
        task
        for task in tasks
        if task.status != TaskStatus.COMPLETED and now <= task.window_end <= threshold
    ]


def _not_found(task_id: str) -> TransitionResult:
    return TransitionResult.fail(ErrorCode.NOT_FOUND, f"Task with ID '{task_id}' not found")


def apply_complete_by_id(
    tasks: Sequence[Task],
    task_id: str,
    now: datetime,
    completed_by: str | None = None,
) -> tuple[list[Task], TransitionResult]:
    """Complete the task with `task_id` inside a copy of the collection

    Returns:
        (tasks, result) -- the completed task replaces the original at the
        same index on success; otherwise the tasks are returned unchanged
    """
    index = find_index(tasks, task_id)
    if index is None:
        return list(tasks), _not_found(task_id)

    result = complete(tasks[index], now, completed_by)
    if not result.success or result.task is None:
        return list(tasks), result

    updated = list(tasks)
    updated[index] = result.task
    return updated, result


def apply_notes_by_id(
    tasks: Sequence[Task],
    task_id: str,
    text: str,
) -> tuple[list[Task], TransitionResult]:
    """Replace the notes of the task with `task_id` inside a copy of the collection"""
    index = find_index(tasks, task_id)
    if index is None:
        return list(tasks), _not_found(task_id)

    updated = list(tasks)
    updated[index] = add_notes(tasks[index], text)
    return updated, TransitionResult.ok(updated[index])
