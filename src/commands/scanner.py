"""Field scanning helpers for command lines.

Each helper finds one marker and returns the field it bounds, so every
extraction rule can be exercised on its own.
"""

from typing import Optional

SPACE = " "
DATE_MARKER = "/"
DEADLINE_MARKER = "/by "
EVENT_MARKER = "/at "


def first_token(line: str) -> str:
    """Text before the first space, or the whole line."""
    end = line.find(SPACE)
    return line if end == -1 else line[:end]


def after_first_space(line: str) -> Optional[str]:
    """Text after the first space, or None if the line has no space."""
    start = line.find(SPACE)
    if start == -1:
        return None
    return line[start + 1:]


def after_marker(line: str, marker: str) -> Optional[str]:
    """Text after the first occurrence of ``marker``, or None if absent."""
    start = line.find(marker)
    if start == -1:
        return None
    return line[start + len(marker):]


def description_field(line: str) -> str:
    """Text between the first space and the date marker.

    Runs to the end of the line when there is no marker. The space
    separating the description from the marker is dropped.
    """
    start = line.find(SPACE)
    if start == -1:
        return ""
    end = line.find(DATE_MARKER)
    if end == -1:
        return line[start + 1:]
    return line[start + 1:end].rstrip(SPACE)


def index_field(line: str) -> Optional[int]:
    """The integer after the first space, or None if it is not a number."""
    raw = after_first_space(line)
    if raw is None:
        return None
    raw = raw.strip()
    # str.isdigit also accepts superscripts and other digits int() rejects
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)
