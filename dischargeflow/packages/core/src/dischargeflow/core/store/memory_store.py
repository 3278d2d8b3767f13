"""In-memory task store

Holds the task collection and replaces it wholesale on every successful
write. Read accessors recompute statuses lazily; the injected clock is the
only place "now" defaults to the wall clock.
"""

from collections.abc import Callable, Iterable
from datetime import datetime

import structlog

from ..collection import (
    apply_complete_by_id,
    apply_notes_by_id,
    by_patient,
    by_status,
    find_by_id,
)
from ..models.enums import TaskStatus
from ..models.results import TransitionResult
from ..models.task import Task
from ..status import refresh_all, with_derived_status
from .serialization import deserialize_tasks, serialize_tasks

log = structlog.get_logger()


class InMemoryTaskStore:
    """Task collection with copy-on-write updates

    Not synchronised: hosts with concurrent writers must lock around
    complete_task()/add_notes() themselves.
    """

    def __init__(
        self,
        initial: Iterable[Task] = (),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._tasks: list[Task] = list(initial)
        self._clock = clock

    def _now(self, now: datetime | None) -> datetime:
        return now if now is not None else self._clock()

    def all_tasks(self, now: datetime | None = None) -> list[Task]:
        """All tasks with statuses derived at `now`"""
        return refresh_all(self._tasks, self._now(now))

    def get_task(self, task_id: str, now: datetime | None = None) -> Task | None:
        task = find_by_id(self._tasks, task_id)
        if task is None:
            return None
        return with_derived_status(task, self._now(now))

    def tasks_for_patient(self, patient_id: str, now: datetime | None = None) -> list[Task]:
        return refresh_all(by_patient(self._tasks, patient_id), self._now(now))

    def tasks_by_status(self, status: TaskStatus, now: datetime | None = None) -> list[Task]:
        at = self._now(now)
        return refresh_all(by_status(self._tasks, status, at), at)

    def complete_task(
        self,
        task_id: str,
        completed_by: str | None = None,
        now: datetime | None = None,
    ) -> TransitionResult:
        tasks, result = apply_complete_by_id(
            self._tasks, task_id, self._now(now), completed_by
        )
        if result.success:
            self._tasks = tasks
        return result

    def add_notes(self, task_id: str, text: str) -> TransitionResult:
        tasks, result = apply_notes_by_id(self._tasks, task_id, text)
        if result.success:
            self._tasks = tasks
        return result

    def add_tasks(self, tasks: Iterable[Task]) -> None:
        self._tasks = [*self._tasks, *tasks]

    def set_tasks(self, tasks: Iterable[Task]) -> None:
        self._tasks = list(tasks)

    def export_json(self) -> str:
        """Serialize the stored tasks (persisted statuses, not derived ones)"""
        return serialize_tasks(self._tasks)

    def import_json(self, text: str | bytes) -> None:
        self._tasks = deserialize_tasks(text)
        log.debug("tasks_imported", count=len(self._tasks))

    def count(self) -> int:
        return len(self._tasks)

    def clear(self) -> None:
        self._tasks = []
