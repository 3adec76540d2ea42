"""Command parser module for task tracker input lines.

Public API:
    CommandParser: Splits a line into operation, description, time, index.
    ExceptionDetector: Grammar checks applied before extraction.
    OperationKind: Enum of supported operations.
    ParsedCommand: The fields extracted from one line.
    ParseError: Base exception for unparseable lines.
"""

from .command_parser import NO_INDEX, CommandParser
from .detector import ExceptionDetector
from .exceptions import (
    DeadlineFormatError,
    EmptyCommandError,
    EventFormatError,
    NoTaskError,
    ParseError,
    TellFormatError,
    UnknownOperationError,
)
from .models import OperationKind, ParsedCommand

__all__ = [
    # Main classes
    "CommandParser",
    "ExceptionDetector",
    "NO_INDEX",
    # Models
    "OperationKind",
    "ParsedCommand",
    # Exceptions
    "ParseError",
    "EmptyCommandError",
    "UnknownOperationError",
    "NoTaskError",
    "DeadlineFormatError",
    "EventFormatError",
    "TellFormatError",
]
