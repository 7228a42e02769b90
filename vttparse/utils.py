"""
Timestamp conversion utilities for VTTParse.

Converts between Time values, seconds and timestamp strings.
"""

import math

from .errors import ParsingError
from .grammar.timestamp import parse_time
from .models import Time


def time_to_seconds(time: Time) -> float:
    """
    Convert a Time to seconds.

    Example:
        >>> time_to_seconds(Time(0, 1, 30, 500))
        90.5
    """
    return time.to_seconds()


def seconds_to_time(seconds: float) -> Time:
    """
    Convert seconds to a Time, rounded to the nearest millisecond.

    Args:
        seconds: Non-negative offset in seconds

    Returns:
        Time value

    Raises:
        ValueError: If seconds is negative or not finite, or the hours do
            not fit a Time

    Example:
        >>> seconds_to_time(90.5)
        Time(hours=0, minutes=1, seconds=30, milliseconds=500)
    """
    if not math.isfinite(seconds):
        raise ValueError(f"Cannot convert non-finite offset to Time: {seconds}")
    if seconds < 0:
        raise ValueError(f"Cannot convert negative offset to Time: {seconds}")

    total_ms = int(round(seconds * 1000))
    hours, remainder = divmod(total_ms, 3600 * 1000)
    minutes, remainder = divmod(remainder, 60 * 1000)
    secs, milliseconds = divmod(remainder, 1000)
    return Time(hours, minutes, secs, milliseconds)


def timestamp_to_seconds(timestamp: str) -> float:
    """
    Parse a ``HH:MM:SS.mmm`` or ``MM:SS.mmm`` string to seconds.

    Raises:
        ParsingError: If the string is not exactly one timestamp
        ParsingIncomplete: If the string stops partway through a timestamp

    Example:
        >>> timestamp_to_seconds("01:30.500")
        90.5
    """
    data = timestamp.encode("utf-8")
    time, pos = parse_time(data)
    if pos != len(data):
        raise ParsingError("timestamp", pos, "unexpected trailing characters")
    return time.to_seconds()
