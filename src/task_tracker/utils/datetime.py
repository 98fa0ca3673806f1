"""Datetime utilities with consistent UTC timezone handling.

Task date/time fields are stored as the text the user typed. These helpers
resolve that text into timezone-aware datetimes when something needs to
order tasks in time, and never reject text they cannot understand.
"""

import re
from datetime import datetime, timezone
from typing import Optional

import parsedatetime


_calendar = parsedatetime.Calendar()

# Formats tried before falling back to natural language parsing
_FIXED_FORMATS = [
    (re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$"), "%Y-%m-%d %H:%M"),
    (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "%Y-%m-%d"),
    (re.compile(r"^\d{1,2}/\d{1,2}/\d{4} \d{4}$"), "%d/%m/%Y %H%M"),
    (re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$"), "%d/%m/%Y"),
]


def now_utc() -> datetime:
    """Return current datetime in UTC timezone."""
    return datetime.now(timezone.utc)


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """Ensure datetime is timezone-aware, assuming UTC if naive.

    Args:
        dt: Datetime to check/convert, or None

    Returns:
        Timezone-aware datetime in UTC, or None if input was None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt


def max_utc() -> datetime:
    """Return datetime.max with UTC timezone for sorting fallbacks."""
    return datetime.max.replace(tzinfo=timezone.utc)


def to_iso_string(dt: Optional[datetime]) -> Optional[str]:
    """Convert datetime to ISO string with timezone info."""
    if dt is None:
        return None
    return ensure_aware(dt).isoformat()


def resolve_datetime(text: Optional[str], source_time: Optional[datetime] = None) -> Optional[datetime]:
    """Best-effort conversion of a user supplied date/time string.

    Tries a few fixed formats first, then parsedatetime's natural language
    parser ("tomorrow 18:00", "Aug 26 2020 11:59pm").

    Args:
        text: The raw date/time text, or None
        source_time: Reference point for relative expressions (defaults to now)

    Returns:
        Timezone-aware datetime, or None when the text cannot be resolved
    """
    if not text or not text.strip():
        return None

    text = text.strip()

    for pattern, fmt in _FIXED_FORMATS:
        if pattern.match(text):
            try:
                return ensure_aware(datetime.strptime(text, fmt))
            except ValueError:
                continue

    source = (source_time or now_utc()).replace(tzinfo=None)
    try:
        time_struct, parse_status = _calendar.parse(text, sourceTime=source.timetuple())
        if parse_status > 0:
            return ensure_aware(datetime(*time_struct[:6]))
    except (ValueError, OverflowError):
        # Dates past year 9999 cannot be represented
        return None

    return None
