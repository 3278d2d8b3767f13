"""Task collection (de)serialization

Timestamps are written as ISO-8601 strings with microsecond precision, so a
serialize/deserialize round trip reproduces every field exactly.
"""

from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from ..exceptions import StorageFormatError
from ..models.task import Task

_TASK_LIST = TypeAdapter(list[Task])


def serialize_tasks(tasks: Iterable[Task]) -> str:
    """Encode tasks as a JSON array"""
    return _TASK_LIST.dump_json(list(tasks), indent=2).decode("utf-8")


def deserialize_tasks(text: str | bytes) -> list[Task]:
    """Decode a JSON array produced by serialize_tasks

    Raises:
        StorageFormatError: not valid JSON or a record violates the Task model
    """
    try:
        return _TASK_LIST.validate_json(text)
    except ValidationError as exc:
        raise StorageFormatError(f"Unreadable task data: {exc.error_count()} error(s)") from exc
