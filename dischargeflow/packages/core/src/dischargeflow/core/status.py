"""Status oracle -- derives a task's status from its window and a reference time

All functions are pure: `now` is always supplied by the caller and
nothing is mutated. Both window bounds are inclusive; a task is overdue
only once `now` strictly exceeds window_end.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta

from .models.enums import TaskStatus
from .models.task import Task, TimeRemaining

_ONE_MINUTE = timedelta(minutes=1)


def derive_status(task: Task, now: datetime) -> TaskStatus:
    """Current status of a task at `now`

    COMPLETED is sticky; otherwise the status follows the window:
    before it UPCOMING, inside it PENDING, after it OVERDUE.
    """
    if task.status == TaskStatus.COMPLETED:
        return TaskStatus.COMPLETED
    if now < task.window_start:
        return TaskStatus.UPCOMING
    if now > task.window_end:
        return TaskStatus.OVERDUE
    return TaskStatus.PENDING


def with_derived_status(task: Task, now: datetime) -> Task:
    """Copy of the task with its status brought up to date"""
    status = derive_status(task, now)
    if status == task.status:
        return task
    return task.model_copy(update={"status": status})


def refresh_all(tasks: Iterable[Task], now: datetime) -> list[Task]:
    """Snapshot of the collection with every non-completed status re-derived"""
    return [with_derived_status(task, now) for task in tasks]


def is_overdue(task: Task, now: datetime) -> bool:
    return derive_status(task, now) == TaskStatus.OVERDUE


def time_remaining(task: Task, now: datetime) -> timedelta:
    """Signed time until window_end; negative once the deadline has passed"""
    return task.window_end - now


def time_remaining_formatted(task: Task, now: datetime) -> TimeRemaining:
    """Remaining time split into whole hours and minutes

    The absolute remaining duration is floored to the minute; the overdue
    flag carries the sign.
    """
    remaining = time_remaining(task, now)
    total_minutes = abs(remaining) // _ONE_MINUTE
    return TimeRemaining(
        hours=total_minutes // 60,
        minutes=total_minutes % 60,
        total_minutes=total_minutes,
        is_overdue=remaining < timedelta(0),
    )
