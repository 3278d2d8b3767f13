"""dischargeflow Core Store -- storage boundary implementations

Storage technology is not part of the core; these stores exist so the
task collection can be held in memory and round-tripped through JSON.
"""

from .json_store import JsonFileTaskStore
from .memory_store import InMemoryTaskStore
from .protocols import TaskStore
from .serialization import deserialize_tasks, serialize_tasks

__all__ = [
    "TaskStore",
    "InMemoryTaskStore",
    "JsonFileTaskStore",
    "serialize_tasks",
    "deserialize_tasks",
]
