"""JSON file task store

Writes go to a temporary file in the same directory and are moved into
place with os.replace, so readers never see a half-written file.
"""

import os
import tempfile
from pathlib import Path

import structlog

from ..exceptions import StorageFormatError
from ..models.task import Task
from .serialization import deserialize_tasks, serialize_tasks

log = structlog.get_logger()


class JsonFileTaskStore:
    """TaskStore backed by a single JSON file"""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        """Read the task file; a missing file is an empty collection

        Raises:
            StorageFormatError: the file cannot be read or decoded
        """
        if not self._path.exists():
            return []
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise StorageFormatError(f"Cannot read task file {self._path}: {exc}") from exc
        tasks = deserialize_tasks(raw)
        log.debug("task_file_loaded", path=str(self._path), count=len(tasks))
        return tasks

    def save(self, tasks: list[Task]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(serialize_tasks(tasks))
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        log.info("task_file_saved", path=str(self._path), count=len(tasks))
