"""Task time parsing and formatting.

Public API:
    parse_time: Parse ``D/M/Y HHMM`` or ``YYYY-MM-DD`` text, None if unknown.
    is_valid_date: Calendar check for day/month/year/hour/minute fields.
    format_display: Human-readable rendering used in status lines.
    format_storage: Numeric rendering used in storage records.
    UNKNOWN_TIME_TEXT: Fallback text for unknown times.
"""

from .date_parser import (
    UNKNOWN_TIME_TEXT,
    format_display,
    format_storage,
    is_leap_year,
    is_valid_date,
    parse_time,
)

__all__ = [
    "parse_time",
    "is_valid_date",
    "is_leap_year",
    "format_display",
    "format_storage",
    "UNKNOWN_TIME_TEXT",
]
