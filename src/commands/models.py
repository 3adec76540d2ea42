"""Data models for the command parser module."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OperationKind(Enum):
    """Operations an input line can name.

    Declaration order is the order keywords are tried in when a line
    is matched.
    """

    BYE = "bye"
    DONE = "done"
    DELETE = "delete"
    TELL = "tell"
    FIND = "find"
    UNDO = "undo"
    LIST = "list"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @classmethod
    def match_prefix(cls, token: str) -> Optional["OperationKind"]:
        """Return the kind whose keyword starts ``token``, ignoring case."""
        upper = token.upper()
        for kind in cls:
            if upper.startswith(kind.name):
                return kind
        return None

    @classmethod
    def from_keyword(cls, keyword: "str | OperationKind") -> "OperationKind":
        """Resolve a keyword such as ``"Todo"`` to its kind.

        Raises:
            ValueError: If the keyword names no operation.
        """
        if isinstance(keyword, cls):
            return keyword
        return cls(keyword.strip().lower())

    @property
    def creates_task(self) -> bool:
        return self in TASK_KINDS

    @property
    def mutates(self) -> bool:
        """Whether the operation changes the task list."""
        return self in MUTATING_KINDS


TASK_KINDS = frozenset({OperationKind.TODO, OperationKind.DEADLINE, OperationKind.EVENT})

# Operations whose line carries a description.
DESCRIBED_KINDS = TASK_KINDS | {OperationKind.FIND}

INDEXED_KINDS = frozenset({OperationKind.DONE, OperationKind.DELETE})

MUTATING_KINDS = TASK_KINDS | INDEXED_KINDS | {OperationKind.UNDO}


@dataclass
class ParsedCommand:
    """The four fields extracted from one input line.

    Attributes:
        operation: The operation the line names.
        description: Task description or search keyword ("" if none).
        time_text: Raw time text after ``/by``, ``/at`` or ``tell`` ("" if none).
        index: Zero-based task index, or -1 when the line carries none.
    """

    operation: OperationKind
    description: str = ""
    time_text: str = ""
    index: int = -1

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "operation": self.operation.value,
            "description": self.description,
            "time_text": self.time_text,
            "index": self.index,
        }
