"""Grammar checks run on a raw line before its fields are extracted."""

from .exceptions import (
    DeadlineFormatError,
    EmptyCommandError,
    EventFormatError,
    NoTaskError,
    TellFormatError,
    UnknownOperationError,
)
from .models import DESCRIBED_KINDS, INDEXED_KINDS, OperationKind
from .scanner import (
    DEADLINE_MARKER,
    EVENT_MARKER,
    SPACE,
    after_first_space,
    description_field,
    first_token,
)


class ExceptionDetector:
    """Validates command lines against per-operation rules.

    Each check either returns quietly or raises the matching ParseError.
    The parser calls them in a fixed order: operation, description, time.
    """

    def detect_operation_type(self, line: str) -> OperationKind:
        """Check that the line starts with a known operation.

        Returns:
            The operation the line names.

        Raises:
            EmptyCommandError: If the line is empty or starts with whitespace.
            UnknownOperationError: If no operation keyword matches.
        """
        if not line or line[0].isspace():
            raise EmptyCommandError(line)

        kind = OperationKind.match_prefix(first_token(line))
        if kind is None:
            raise UnknownOperationError(line)
        return kind

    def detect_task(self, line: str, kind: OperationKind) -> None:
        """Check that a describing operation carries a description.

        Raises:
            NoTaskError: If the description is missing or blank.
        """
        if kind not in DESCRIBED_KINDS:
            return
        if SPACE not in line or not description_field(line).strip():
            raise NoTaskError(line)

    def detect_time(self, line: str, kind: OperationKind) -> None:
        """Check the time marker required by deadline, event and tell.

        Raises:
            DeadlineFormatError: If a deadline has no ``/by`` time.
            EventFormatError: If an event has no ``/at`` time.
            TellFormatError: If a tell line has no time.
        """
        if kind is OperationKind.DEADLINE and DEADLINE_MARKER not in line:
            raise DeadlineFormatError(line)
        if kind is OperationKind.EVENT and EVENT_MARKER not in line:
            raise EventFormatError(line)
        if kind is OperationKind.TELL:
            payload = after_first_space(line)
            if payload is None or not payload.strip():
                raise TellFormatError(line)

    def has_index(self, line: str, kind: OperationKind) -> bool:
        """Whether the line may carry a task index."""
        return kind in INDEXED_KINDS and SPACE in line
