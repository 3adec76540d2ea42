"""Data models for the interpreter module."""

from dataclasses import dataclass
from typing import Any, Optional

from src.commands.models import OperationKind


@dataclass
class Response:
    """The interpreter's answer to one input line.

    Attributes:
        text: Text to show the user.
        operation: The operation the line named, None if it did not parse.
        success: Whether the operation ran without error.
        exit_requested: True after ``bye``; the caller should stop reading.
    """

    text: str
    operation: Optional[OperationKind] = None
    success: bool = True
    exit_requested: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "text": self.text,
            "operation": self.operation.value if self.operation else None,
            "success": self.success,
            "exit_requested": self.exit_requested,
        }
