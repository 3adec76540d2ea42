"""CommandParser for splitting input lines into command fields."""

import logging
from typing import Optional

from .detector import ExceptionDetector
from .models import DESCRIBED_KINDS, OperationKind, ParsedCommand
from .scanner import (
    DEADLINE_MARKER,
    EVENT_MARKER,
    after_first_space,
    after_marker,
    description_field,
    index_field,
)

logger = logging.getLogger(__name__)

NO_INDEX = -1


class CommandParser:
    """Extracts operation, description, time and index from one line.

    A line looks like ``<operation> [description] [/by|/at <time>]`` or
    ``<operation> [index]``. Each getter validates the part of the
    grammar it depends on before extracting its field, so any getter
    can be called on its own. Index bounds are not checked here; that
    needs the live task list.
    """

    def __init__(self, detector: Optional[ExceptionDetector] = None):
        """Initialize the CommandParser.

        Args:
            detector: Grammar checker. Created with defaults if not provided.
        """
        self._detector = detector or ExceptionDetector()

    def parse(self, line: str) -> ParsedCommand:
        """Parse a line into its four fields.

        Checks run in a fixed order: operation, description, time.

        Raises:
            ParseError: If the line breaks the command grammar.
        """
        command = ParsedCommand(
            operation=self.get_operation_type(line),
            description=self.get_task(line),
            time_text=self.get_time(line),
            index=self.get_index(line),
        )
        logger.debug("Parsed %r into %s", line, command.to_dict())
        return command

    def get_operation_type(self, line: str) -> OperationKind:
        """Return the operation named by the first token of the line."""
        return self._detector.detect_operation_type(line)

    def get_task(self, line: str) -> str:
        """Return the description for todo, deadline, event and find lines.

        Other operations have no description and yield "".
        """
        kind = self.get_operation_type(line)
        self._detector.detect_task(line, kind)
        if kind not in DESCRIBED_KINDS:
            return ""
        return description_field(line)

    def get_time(self, line: str) -> str:
        """Return the time text of deadline, event and tell lines."""
        kind = self.get_operation_type(line)
        self._detector.detect_task(line, kind)
        self._detector.detect_time(line, kind)

        if kind is OperationKind.DEADLINE:
            time_text = after_marker(line, DEADLINE_MARKER)
        elif kind is OperationKind.EVENT:
            time_text = after_marker(line, EVENT_MARKER)
        elif kind is OperationKind.TELL:
            time_text = after_first_space(line)
        else:
            time_text = ""
        return (time_text or "").strip()

    def get_index(self, line: str) -> int:
        """Return the zero-based index of done and delete lines.

        The line carries the one-based number shown to the user. Returns
        -1 when there is no usable number; callers check bounds with
        ``TaskList.detect_index``.
        """
        kind = self.get_operation_type(line)
        if not self._detector.has_index(line, kind):
            return NO_INDEX
        number = index_field(line)
        if number is None:
            return NO_INDEX
        return number - 1
