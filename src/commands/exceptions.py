"""Exceptions for the command parser module."""


class ParseError(Exception):
    """Base exception for lines that cannot be parsed into a command."""

    def __init__(self, line: str, message: str):
        self.line = line
        super().__init__(message)


class EmptyCommandError(ParseError):
    """Raised when a line is empty or starts with whitespace."""

    def __init__(self, line: str):
        super().__init__(line, "OOPS!!! The command is empty.")


class UnknownOperationError(ParseError):
    """Raised when a line does not start with a known operation."""

    def __init__(self, line: str):
        super().__init__(line, "OOPS!!! I'm sorry, but I don't know what that means :-(")


class NoTaskError(ParseError):
    """Raised when a todo, deadline, event or find line has no description."""

    def __init__(self, line: str):
        super().__init__(line, "OOPS!!! The description of a task cannot be empty.")


class DeadlineFormatError(ParseError):
    """Raised when a deadline line lacks the ``/by`` marker."""

    def __init__(self, line: str):
        super().__init__(
            line,
            "OOPS!!! Please give the deadline in the form: deadline <task> /by <time>",
        )


class EventFormatError(ParseError):
    """Raised when an event line lacks the ``/at`` marker."""

    def __init__(self, line: str):
        super().__init__(
            line,
            "OOPS!!! Please give the event in the form: event <task> /at <time>",
        )


class TellFormatError(ParseError):
    """Raised when a tell line carries no time to search for."""

    def __init__(self, line: str):
        super().__init__(line, "OOPS!!! Please give the time in the form: tell <time>")
