"""Task storage backends.

Tasks are stored one per line using the record format of
``Task.to_storage_line``::

    T | 0 | read book
    D | 1 | return book | 2/12/2019 1800
    E | 0 | project meeting | 6/8/2019 1400
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional

from src.tasks.exceptions import TaskFormatError
from src.tasks.models import Task

from .exceptions import StorageLoadError, StorageSaveError

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path("data") / "tasks.txt"
DATA_FILE_ENV_VAR = "TASK_TRACKER_DATA_FILE"


def decode_lines(lines: Iterable[str], location: str) -> list[Task]:
    """Decode storage records, skipping blank lines.

    Raises:
        StorageLoadError: If any record is malformed.
    """
    tasks = []
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            tasks.append(Task.from_storage_line(line))
        except TaskFormatError as e:
            raise StorageLoadError(location, f"line {number}: {e.reason}") from e
    return tasks


class TaskStorage(ABC):
    """Interface for loading and saving the task list.

    Implementations:
    - FileTaskStorage: One record per line in a text file
    - InMemoryTaskStorage: For testing, keeps records in memory
    """

    @abstractmethod
    def load(self) -> list[Task]:
        """Load all stored tasks in list order.

        Raises:
            StorageLoadError: If the stored tasks cannot be read.
        """
        pass

    @abstractmethod
    def save(self, tasks: Iterable[Task]) -> None:
        """Replace the stored tasks with ``tasks``.

        Raises:
            StorageSaveError: If the tasks cannot be written.
        """
        pass


class FileTaskStorage(TaskStorage):
    """Stores tasks in a UTF-8 text file, rewritten on every save."""

    def __init__(self, path: Optional[str | Path] = None):
        """Initialize the storage.

        Args:
            path: Data file location. Defaults to the TASK_TRACKER_DATA_FILE
                environment variable, then ``data/tasks.txt``.
        """
        if path is None:
            path = os.getenv(DATA_FILE_ENV_VAR) or DEFAULT_DATA_FILE
        self.path = Path(path)

    def load(self) -> list[Task]:
        """Load tasks from the data file. A missing file yields no tasks."""
        if not self.path.exists():
            logger.info("No data file at %s, starting with an empty list", self.path)
            return []
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageLoadError(str(self.path), str(e)) from e

        tasks = decode_lines(text.splitlines(), str(self.path))
        logger.info("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Write all tasks to the data file, creating its directory if needed."""
        lines = [task.to_storage_line() for task in tasks]
        content = "".join(f"{line}\n" for line in lines)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StorageSaveError(str(self.path), str(e)) from e
        logger.debug("Saved %d tasks to %s", len(lines), self.path)


class InMemoryTaskStorage(TaskStorage):
    """In-memory implementation for testing.

    Records are encoded on save and decoded on load, so tasks go through
    the same format as the file backend.
    """

    LOCATION = "<memory>"

    def __init__(self, lines: Optional[Iterable[str]] = None) -> None:
        """Initialize with optional pre-stored records."""
        self.lines: list[str] = list(lines) if lines else []
        self.save_count = 0

    def load(self) -> list[Task]:
        return decode_lines(self.lines, self.LOCATION)

    def save(self, tasks: Iterable[Task]) -> None:
        self.lines = [task.to_storage_line() for task in tasks]
        self.save_count += 1
