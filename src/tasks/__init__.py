"""Task list module.

This module provides the TaskList for adding, completing, deleting and
searching tasks, with a single-level undo of the last change.
"""

from .exceptions import (
    InvalidTaskKindError,
    TaskFormatError,
    TasksError,
    WrongIndexError,
)
from .models import (
    Deadline,
    Event,
    LastExecution,
    SearchResult,
    Task,
    TimedTask,
    ToDo,
    UndoableOperation,
    UndoLog,
)
from .task_list import NO_DATE_MATCH, NO_KEYWORD_MATCH, NOTHING_TO_UNDO, TaskList

__all__ = [
    # Main classes
    "TaskList",
    # Models
    "Task",
    "ToDo",
    "TimedTask",
    "Deadline",
    "Event",
    "LastExecution",
    "UndoLog",
    "UndoableOperation",
    "SearchResult",
    # Messages
    "NOTHING_TO_UNDO",
    "NO_KEYWORD_MATCH",
    "NO_DATE_MATCH",
    # Exceptions
    "TasksError",
    "WrongIndexError",
    "InvalidTaskKindError",
    "TaskFormatError",
]
