"""Data models for the tasks module."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional

from src.dates import format_display, format_storage, parse_time

from .exceptions import TaskFormatError

FIELD_SEPARATOR = " | "


@dataclass
class Task:
    """A task in the list.

    Attributes:
        description: What the task is about. Never empty once accepted.
        done: Whether the task has been marked done.
    """

    TAG: ClassVar[str] = "?"

    description: str
    done: bool = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    @property
    def status_line(self) -> str:
        """Rendering shown to the user, e.g. ``[T][X] read book``."""
        return f"[{self.TAG}][{self.status_icon}] {self.description}"

    @property
    def storage_time(self) -> Optional[str]:
        """Time as written to storage, None for tasks without a time."""
        return None

    def mark_done(self) -> None:
        """Mark the task as done. Marking twice has no further effect."""
        self.done = True

    def mark_undone(self) -> None:
        """Clear the done flag. Only used when undoing a mark-done."""
        self.done = False

    def to_storage_line(self) -> str:
        """Encode as ``TAG | DONE | DESCRIPTION``."""
        return FIELD_SEPARATOR.join([self.TAG, "1" if self.done else "0", self.description])

    @classmethod
    def from_storage_line(cls, line: str) -> "Task":
        """Decode a storage record into the matching task variant.

        Raises:
            TaskFormatError: If the record is malformed.
        """
        line = line.rstrip("\r\n")
        parts = line.split(FIELD_SEPARATOR, 2)
        if len(parts) < 3:
            raise TaskFormatError(line, "expected at least three fields")

        tag, flag, rest = parts
        if flag not in ("0", "1"):
            raise TaskFormatError(line, f"done flag must be 0 or 1, got '{flag}'")
        done = flag == "1"

        if tag == ToDo.TAG:
            return ToDo(description=rest, done=done)

        variant = TIMED_VARIANTS.get(tag)
        if variant is None:
            raise TaskFormatError(line, f"unknown task tag '{tag}'")
        if FIELD_SEPARATOR not in rest:
            raise TaskFormatError(line, "timed task has no time field")
        description, time_text = rest.rsplit(FIELD_SEPARATOR, 1)
        return variant(description=description, done=done, time=parse_time(time_text))


@dataclass
class ToDo(Task):
    """A task without a time."""

    TAG: ClassVar[str] = "T"


@dataclass
class TimedTask(Task):
    """A task with a scheduled time, rendered as ``(<label>: <time>)``.

    Attributes:
        time: Scheduled time, or None when the time could not be parsed.
    """

    LABEL: ClassVar[str] = ""

    time: Optional[datetime] = field(default=None)

    @property
    def display_time(self) -> str:
        return format_display(self.time)

    @property
    def status_line(self) -> str:
        return f"{super().status_line} ({self.LABEL}: {self.display_time})"

    @property
    def storage_time(self) -> Optional[str]:
        return format_storage(self.time)

    def to_storage_line(self) -> str:
        """Encode as ``TAG | DONE | DESCRIPTION | TIME``."""
        return FIELD_SEPARATOR.join([super().to_storage_line(), self.storage_time])


@dataclass
class Deadline(TimedTask):
    """A task to finish by a given time."""

    TAG: ClassVar[str] = "D"
    LABEL: ClassVar[str] = "by"


@dataclass
class Event(TimedTask):
    """A task taking place at a given time."""

    TAG: ClassVar[str] = "E"
    LABEL: ClassVar[str] = "at"


TIMED_VARIANTS: dict[str, type[TimedTask]] = {
    Deadline.TAG: Deadline,
    Event.TAG: Event,
}


class UndoableOperation(Enum):
    """Task list operations that the undo log can revert."""

    NONE = "none"
    ADD = "add"
    DONE = "done"
    DELETE = "delete"


@dataclass
class LastExecution:
    """The most recent mutating operation on a task list.

    Attributes:
        operation: Which operation ran.
        task: The task it added, marked or removed.
        index: Where the task was in the list.
    """

    operation: UndoableOperation = UndoableOperation.NONE
    task: Optional[Task] = None
    index: int = -1

    @property
    def is_pending(self) -> bool:
        return self.operation is not UndoableOperation.NONE


class UndoLog:
    """Single-slot record of the last mutating operation.

    Every mutating call overwrites the slot. ``consume`` hands the entry
    out once and resets the slot, so at most one undo can follow a
    mutation.
    """

    def __init__(self) -> None:
        self._entry = LastExecution()

    @property
    def pending(self) -> LastExecution:
        return self._entry

    def record(self, operation: UndoableOperation, task: Task, index: int) -> None:
        self._entry = LastExecution(operation=operation, task=task, index=index)

    def consume(self) -> Optional[LastExecution]:
        """Return the pending entry and reset the slot, or None if empty."""
        entry = self._entry
        self._entry = LastExecution()
        return entry if entry.is_pending else None


@dataclass
class SearchResult:
    """Tasks matching a keyword or date query.

    Attributes:
        query: The keyword or time text searched for.
        matches: Matching tasks in list order.
        no_match_message: Text rendered when nothing matched.
    """

    query: str
    matches: list[Task] = field(default_factory=list)
    no_match_message: str = ""

    @property
    def count(self) -> int:
        return len(self.matches)

    def render(self) -> str:
        """Number the matches from 1, one per line."""
        if not self.matches:
            return self.no_match_message
        return "\n".join(
            f"{number}.{task.status_line}" for number, task in enumerate(self.matches, start=1)
        )
