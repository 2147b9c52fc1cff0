"""
Shared utility functions for VTTScan.

Timestamp conversion between WebVTT timestamp strings, Time values and
floating point seconds.
"""

from .exceptions import VTTFormatError
from .models import Time
from .scanner import parse_time


def timestamp_to_seconds(timestamp: str) -> float:
    """
    Convert a WebVTT timestamp to seconds.

    Accepts all three timestamp forms (SS[.sss], MM:SS[.sss] and
    HH:MM:SS[.sss]) with the same rules as cue timings.

    Args:
        timestamp: Timestamp string

    Returns:
        Time in seconds as float

    Raises:
        VTTFormatError: If the string is not a single valid timestamp

    Example:
        >>> timestamp_to_seconds("00:01:30.500")
        90.5
        >>> timestamp_to_seconds("90.5")
        90.5
    """
    time, idx = parse_time(timestamp, 0)
    if timestamp[idx:].strip(" \t"):
        raise VTTFormatError(f"Unexpected text after timestamp: {timestamp!r}", timestamp)
    return time.presentation() / 1000


def seconds_to_timestamp(seconds: float) -> str:
    """
    Convert seconds to HH:MM:SS.mmm format, rounded to the millisecond.

    Negative values clamp to zero.

    Example:
        >>> seconds_to_timestamp(90.5)
        '00:01:30.500'
    """
    return str(Time.from_presentation(round(seconds * 1000)))
