"""TaskInterpreter: turns input lines into task list operations."""

import logging
from typing import Callable, Optional

from src.commands import CommandParser, OperationKind, ParsedCommand, ParseError
from src.storage import FileTaskStorage, StorageLoadError, StorageSaveError, TaskStorage
from src.tasks import TaskList, TasksError

from . import messages
from .models import Response

logger = logging.getLogger(__name__)

Handler = Callable[[str, str, int], str]


class TaskInterpreter:
    """Runs one command line at a time against a task list.

    The task list is loaded from storage once and saved back after
    every command that changes it. Parse errors, bad indexes and save
    failures are reported in the response text; none of them stop the
    interpreter.

    Example:
        interpreter = TaskInterpreter()
        print(interpreter.handle("todo read book").text)
    """

    def __init__(
        self,
        storage: Optional[TaskStorage] = None,
        task_list: Optional[TaskList] = None,
        parser: Optional[CommandParser] = None,
    ):
        """Initialize the TaskInterpreter.

        Args:
            storage: Where tasks are loaded from and saved to.
                FileTaskStorage with default settings if not provided.
            task_list: Pre-built task list. Loaded from storage if not provided.
            parser: Command parser. Created with defaults if not provided.
        """
        self._storage = storage or FileTaskStorage()
        self._parser = parser or CommandParser()
        self._task_list = task_list if task_list is not None else self._load_task_list()

        self._handlers: dict[OperationKind, Handler] = {
            OperationKind.BYE: self._bye,
            OperationKind.LIST: self._list,
            OperationKind.DONE: self._done,
            OperationKind.DELETE: self._delete,
            OperationKind.TELL: self._tell,
            OperationKind.FIND: self._find,
            OperationKind.UNDO: self._undo,
            OperationKind.TODO: self._add(OperationKind.TODO),
            OperationKind.DEADLINE: self._add(OperationKind.DEADLINE),
            OperationKind.EVENT: self._add(OperationKind.EVENT),
        }

    @property
    def task_list(self) -> TaskList:
        return self._task_list

    def _load_task_list(self) -> TaskList:
        """Load stored tasks, falling back to an empty list."""
        try:
            return TaskList(self._storage.load())
        except StorageLoadError as e:
            logger.warning("Starting with an empty task list: %s", e)
            return TaskList()

    # -------------------- Public API --------------------

    def parse(self, line: str) -> ParsedCommand:
        """Parse a line into its command fields.

        Raises:
            ParseError: If the line breaks the command grammar.
        """
        return self._parser.parse(line)

    def dispatch(
        self,
        operation: OperationKind,
        description: str = "",
        time_text: str = "",
        index: int = -1,
    ) -> str:
        """Run an operation and return the response text.

        Raises:
            TasksError: If the index is out of range.
        """
        handler = self._handlers[operation]
        return handler(description, time_text, index)

    def handle(self, line: str) -> Response:
        """Parse and run one line, saving the task list if it changed."""
        try:
            command = self.parse(line)
        except ParseError as e:
            logger.info("Rejected line %r: %s", line, type(e).__name__)
            return Response(text=str(e), success=False)

        operation = command.operation
        try:
            text = self.dispatch(
                operation, command.description, command.time_text, command.index
            )
        except TasksError as e:
            logger.info("%s failed: %s", operation.value, e)
            return Response(text=str(e), operation=operation, success=False)

        success = True
        if operation.mutates:
            try:
                self._storage.save(self._task_list)
            except StorageSaveError as e:
                logger.error("Failed to save tasks: %s", e)
                text = f"{text}\n{messages.SAVE_ERROR}"
                success = False

        return Response(
            text=text,
            operation=operation,
            success=success,
            exit_requested=operation is OperationKind.BYE,
        )

    # -------------------- Handlers --------------------

    def _bye(self, description: str, time_text: str, index: int) -> str:
        return messages.FAREWELL

    def _list(self, description: str, time_text: str, index: int) -> str:
        if not len(self._task_list):
            return messages.EMPTY_LIST
        lines = [messages.LIST_HEADER]
        lines.extend(
            f"{number}.{task.status_line}"
            for number, task in enumerate(self._task_list, start=1)
        )
        return "\n".join(lines)

    def _done(self, description: str, time_text: str, index: int) -> str:
        self._task_list.detect_index(index)
        task = self._task_list.mark_done(index)
        return messages.DONE_TEMPLATE.format(task=task.status_line)

    def _delete(self, description: str, time_text: str, index: int) -> str:
        self._task_list.detect_index(index)
        task = self._task_list.delete(index)
        return messages.DELETED_TEMPLATE.format(
            task=task.status_line, count=len(self._task_list)
        )

    def _tell(self, description: str, time_text: str, index: int) -> str:
        result = self._task_list.get_specific_date_event(time_text)
        return f"{messages.DATE_HEADER}\n{result.render()}"

    def _find(self, description: str, time_text: str, index: int) -> str:
        result = self._task_list.find_tasks(description)
        return f"{messages.FIND_HEADER}\n{result.render()}"

    def _undo(self, description: str, time_text: str, index: int) -> str:
        return self._task_list.undo()

    def _add(self, kind: OperationKind) -> Handler:
        def handler(description: str, time_text: str, index: int) -> str:
            task = self._task_list.add(kind, description, time_text)
            return messages.ADDED_TEMPLATE.format(
                task=task.status_line, count=len(self._task_list)
            )

        return handler
