"""Time-of-day arithmetic on zero-padded 24-hour HH:MM strings."""

import re

from .errors import FormatError

_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")


def parse_time(value: str) -> tuple[int, int]:
    """
    Parse an HH:MM string into (hour, minute).

    Raises FormatError unless hour is 00-23 and minute is 00-59.
    """
    match = _TIME_PATTERN.match(value) if isinstance(value, str) else None
    if not match:
        raise FormatError(f"Invalid time {value!r}: expected HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise FormatError(f"Invalid time {value!r}: out of range")
    return hour, minute


def format_time(hour: int, minute: int) -> str:
    """Format hour and minute as zero-padded HH:MM."""
    return f"{hour:02d}:{minute:02d}"


def end_time(time: str, duration_minutes: int) -> str:
    """
    End of the interval [time, time + duration).

    The hour is not wrapped at midnight: 23:30 plus 90 minutes is "25:00".
    Results stay zero-padded so they compare lexicographically against
    start times.
    """
    hour, minute = parse_time(time)
    total = hour * 60 + minute + duration_minutes
    return format_time(total // 60, total % 60)

