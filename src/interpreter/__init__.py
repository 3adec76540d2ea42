"""Interpreter module connecting the command parser, task list and storage.

Public API:
    TaskInterpreter: Parses and dispatches input lines.
    Response: The result of handling one line.
"""

from .models import Response
from .task_interpreter import TaskInterpreter

__all__ = [
    "TaskInterpreter",
    "Response",
]
