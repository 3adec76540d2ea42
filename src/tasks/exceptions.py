"""Exceptions for the tasks module."""


class TasksError(Exception):
    """Base exception for all task list errors."""

    pass


class WrongIndexError(TasksError):
    """Raised when a task index is outside the task list."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__("OOPS!!! I'm sorry, but the index is invalid :-(")


class InvalidTaskKindError(TasksError):
    """Raised when a task is requested for an operation that creates none."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"OOPS!!! '{kind}' is not a kind of task I can add.")


class TaskFormatError(TasksError):
    """Raised when a storage record cannot be decoded into a task."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Failed to read task record '{line}': {reason}")
