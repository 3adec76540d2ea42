"""TaskList: the ordered task store and its single-level undo."""

import logging
from typing import Callable, Iterable, Iterator, Optional

from src.commands.models import OperationKind
from src.dates import format_display, parse_time

from .exceptions import InvalidTaskKindError, WrongIndexError
from .models import (
    Deadline,
    Event,
    SearchResult,
    Task,
    ToDo,
    UndoableOperation,
    UndoLog,
)

logger = logging.getLogger(__name__)

NOTHING_TO_UNDO = "There is nothing to undo."
NO_KEYWORD_MATCH = "Sorry. There are no tasks matching the keyword you gave me :("
NO_DATE_MATCH = "Sorry. There are no tasks taking place at the time you gave me :("

TaskFactory = Callable[[str, str], Task]

TASK_FACTORIES: dict[OperationKind, TaskFactory] = {
    OperationKind.TODO: lambda description, time_text: ToDo(description=description),
    OperationKind.DEADLINE: lambda description, time_text: Deadline(
        description=description, time=parse_time(time_text)
    ),
    OperationKind.EVENT: lambda description, time_text: Event(
        description=description, time=parse_time(time_text)
    ),
}


class TaskList:
    """Ordered list of tasks with add, done, delete, search and undo.

    Indexes are zero-based. Callers validate an index with
    ``detect_index`` before passing it to ``mark_done`` or ``delete``.
    Every mutation overwrites the undo log; ``undo`` reverts it once.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        """Initialize the TaskList.

        Args:
            tasks: Initial tasks, e.g. loaded from storage. Empty if not provided.
        """
        self._tasks: list[Task] = list(tasks) if tasks else []
        self._undo_log = UndoLog()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the tasks in list order."""
        return list(self._tasks)

    @property
    def undo_log(self) -> UndoLog:
        return self._undo_log

    def get(self, index: int) -> Task:
        """Return the task at a validated index."""
        self.detect_index(index)
        return self._tasks[index]

    def detect_index(self, index: int) -> None:
        """Check that an index refers to a task.

        Raises:
            WrongIndexError: If ``index < 0`` or ``index >= len(self)``.
        """
        if index < 0 or index >= len(self._tasks):
            raise WrongIndexError(index, len(self._tasks))

    # -------------------- Mutations --------------------

    def add(self, kind: "OperationKind | str", description: str, time_text: str = "") -> Task:
        """Create a task of the given kind and append it.

        Args:
            kind: TODO, DEADLINE or EVENT, as an OperationKind or keyword.
            description: Task description.
            time_text: Raw time for deadlines and events; ignored for todos.

        Returns:
            The new task.

        Raises:
            InvalidTaskKindError: If the kind does not create a task.
        """
        try:
            resolved = OperationKind.from_keyword(kind)
        except ValueError:
            raise InvalidTaskKindError(str(kind)) from None

        if not resolved.creates_task:
            raise InvalidTaskKindError(resolved.value)

        task = TASK_FACTORIES[resolved](description, time_text)
        self._tasks.append(task)
        self._undo_log.record(UndoableOperation.ADD, task, len(self._tasks) - 1)
        logger.info("Added task '%s' (now %d tasks)", task.status_line, len(self._tasks))
        return task

    def mark_done(self, index: int) -> Task:
        """Mark the task at ``index`` as done."""
        self.detect_index(index)
        task = self._tasks[index]
        task.mark_done()
        self._undo_log.record(UndoableOperation.DONE, task, index)
        logger.info("Marked task %d as done", index + 1)
        return task

    def delete(self, index: int) -> Task:
        """Remove and return the task at ``index``."""
        self.detect_index(index)
        task = self._tasks.pop(index)
        self._undo_log.record(UndoableOperation.DELETE, task, index)
        logger.info("Deleted task %d (now %d tasks)", index + 1, len(self._tasks))
        return task

    def undo(self) -> str:
        """Revert the last add, done or delete.

        Returns:
            A message describing what was reverted, or NOTHING_TO_UNDO.
        """
        entry = self._undo_log.consume()
        if entry is None or entry.task is None:
            logger.debug("Undo requested with nothing pending")
            return NOTHING_TO_UNDO

        task = entry.task
        if entry.operation is UndoableOperation.ADD:
            self._tasks.pop()
            message = f"I've removed the task I just added:\n  {task.status_line}"
        elif entry.operation is UndoableOperation.DONE:
            task.mark_undone()
            message = f"I've marked this task as not done yet:\n  {task.status_line}"
        else:
            self._tasks.insert(entry.index, task)
            message = f"I've put this task back:\n  {task.status_line}"

        logger.info("Undid %s of task %d", entry.operation.value, entry.index + 1)
        return message

    # -------------------- Queries --------------------

    def find_tasks(self, keyword: str) -> SearchResult:
        """Return tasks whose status line contains ``keyword`` (case-sensitive)."""
        matches = [task for task in self._tasks if keyword in task.status_line]
        logger.debug("Keyword %r matched %d tasks", keyword, len(matches))
        return SearchResult(query=keyword, matches=matches, no_match_message=NO_KEYWORD_MATCH)

    def get_specific_date_event(self, time_text: str) -> SearchResult:
        """Return tasks taking place at the given time.

        A task matches when the raw query, or the query parsed and
        rendered in display form, appears in the task's storage time or
        in its status line.
        """
        parsed = parse_time(time_text)
        needles = [time_text]
        if parsed is not None:
            needles.append(format_display(parsed))

        matches = []
        for task in self._tasks:
            haystacks = [task.status_line]
            if task.storage_time is not None:
                haystacks.append(task.storage_time)
            if any(needle in haystack for needle in needles for haystack in haystacks):
                matches.append(task)

        logger.debug("Time %r matched %d tasks", time_text, len(matches))
        return SearchResult(query=time_text, matches=matches, no_match_message=NO_DATE_MATCH)
