"""Store Protocol definitions

The storage boundary the core talks to; any backend that round-trips the
task fields losslessly can satisfy it.
"""

from typing import Protocol, runtime_checkable

from ..models.task import Task


@runtime_checkable
class TaskStore(Protocol):
    """Persists and retrieves a task collection verbatim"""

    def load(self) -> list[Task]:
        """Read the whole task collection"""
        ...

    def save(self, tasks: list[Task]) -> None:
        """Replace the stored task collection"""
        ...
