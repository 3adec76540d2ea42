"""Parsing and formatting of task times.

Two textual shapes are recognized:

1. ``D/M/Y HHMM`` such as ``2/12/2019 1800``
2. ``YYYY-MM-DD`` such as ``2019-12-02`` (read as local midnight)

Anything that does not parse, or that names a date missing from the
calendar, becomes ``None``. Parsing never raises.
"""

import logging
import re
from datetime import date, datetime, timedelta
from typing import Optional

logger = logging.getLogger(__name__)

UNKNOWN_TIME_TEXT = "I don't know the time"

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

THIRTY_DAY_MONTHS = {4, 6, 9, 11}

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Plain ASCII digits only: no sign, underscore or surrounding space.
NUMERIC_FIELD = re.compile(r"\d+", re.ASCII)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in THIRTY_DAY_MONTHS:
        return 30
    return 31


def is_valid_date(day: int, month: int, year: int, hour: int, minute: int) -> bool:
    """Check the fields of a ``D/M/Y HHMM`` time against the calendar.

    Hour may be 24 and minute may be 60; both roll over when the
    datetime is built.
    """
    if month < 1 or month > 12:
        return False
    if day < 1 or day > days_in_month(month, year):
        return False
    if hour < 0 or hour > 24:
        return False
    return 0 <= minute <= 60


def _is_day_month_year(text: str) -> bool:
    return (
        "/" in text
        and text.find("/", 3) != -1
        and " " in text
        and "-" not in text
    )


def _parse_day_month_year(text: str) -> Optional[datetime]:
    first_slash = text.find("/")
    second_slash = text.find("/", first_slash + 1)
    last_space = text.rfind(" ")
    if second_slash == -1 or last_space < second_slash:
        return None

    clock = text[last_space + 1:]
    fields = {
        "day": text[:first_slash],
        "month": text[first_slash + 1:second_slash],
        "year": text[second_slash + 1:last_space],
        "hour": clock[:2],
        "minute": clock[2:],
    }
    if not all(NUMERIC_FIELD.fullmatch(raw) for raw in fields.values()):
        logger.debug("Non-numeric field in time %r", text)
        return None
    values = {name: int(raw) for name, raw in fields.items()}

    if not is_valid_date(**values):
        logger.debug("Time %r is not a calendar date", text)
        return None

    try:
        midnight = datetime(values["year"], values["month"], values["day"])
    except ValueError:
        # year outside the supported range
        return None
    return midnight + timedelta(hours=values["hour"], minutes=values["minute"])


def _parse_iso_date(text: str) -> Optional[datetime]:
    if not ISO_DATE_PATTERN.match(text):
        return None
    try:
        parsed = date.fromisoformat(text)
    except ValueError:
        logger.debug("Time %r is not a calendar date", text)
        return None
    return datetime(parsed.year, parsed.month, parsed.day)


def parse_time(text: Optional[str]) -> Optional[datetime]:
    """Convert time text into a datetime.

    Args:
        text: Raw time text from a command or a storage record.

    Returns:
        The parsed datetime, or None when the time is unknown.
    """
    if not text:
        return None
    text = text.strip()

    if _is_day_month_year(text):
        return _parse_day_month_year(text)
    if "-" in text:
        return _parse_iso_date(text)
    return None


def format_display(value: Optional[datetime]) -> str:
    """Render a time for status lines, e.g. ``Dec 02 2019 18:00``."""
    if value is None:
        return UNKNOWN_TIME_TEXT
    month = MONTH_ABBREVIATIONS[value.month - 1]
    return f"{month} {value.day:02d} {value.year} {value.hour:02d}:{value.minute:02d}"


def format_storage(value: Optional[datetime]) -> str:
    """Render a time for storage records, e.g. ``2/12/2019 1800``."""
    if value is None:
        return UNKNOWN_TIME_TEXT
    return f"{value.day}/{value.month}/{value.year} {value.hour:02d}{value.minute:02d}"
