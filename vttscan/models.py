"""
Data models for VTTScan.

Defines the core data structures used throughout the package: the Time value
type, the Setting and Cue records produced by the scanner, and the
configuration objects consumed by scanners and sources.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Union

# Characters the scanner matches as raw bytes
_ASCII_PROBE = "WEBVTT\r\n\t -->:.0123456789"


@dataclass(frozen=True, order=True)
class Time:
    """
    A WebVTT timestamp with millisecond precision.

    Fields are always normalized: minutes and seconds in [0, 59],
    milliseconds in [0, 999], hours unbounded. Field-wise ordering therefore
    agrees with ordering by presentation().

    Example:
        >>> t = Time.from_presentation(3725500)
        >>> str(t)
        '01:02:05.500'
        >>> (t + 500).presentation()
        3726000
    """
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self):
        for name in ("hours", "minutes", "seconds", "milliseconds"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if self.hours < 0:
            raise ValueError(f"hours out of range: {self.hours}")
        if not 0 <= self.minutes < 60:
            raise ValueError(f"minutes out of range: {self.minutes}")
        if not 0 <= self.seconds < 60:
            raise ValueError(f"seconds out of range: {self.seconds}")
        if not 0 <= self.milliseconds < 1000:
            raise ValueError(f"milliseconds out of range: {self.milliseconds}")

    @classmethod
    def from_presentation(cls, milliseconds: int) -> "Time":
        """
        Build a Time from a total count of milliseconds.

        Negative counts yield the zero time.
        """
        if milliseconds < 0:
            return cls()

        seconds, millis = divmod(milliseconds, 1000)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        return cls(hours, minutes, seconds, millis)

    def presentation(self) -> int:
        """Total duration in milliseconds."""
        return ((self.hours * 60 + self.minutes) * 60 + self.seconds) * 1000 + self.milliseconds

    def __add__(self, milliseconds: int) -> "Time":
        if not isinstance(milliseconds, int):
            return NotImplemented
        return Time.from_presentation(self.presentation() + milliseconds)

    def __sub__(self, other: Union["Time", int]) -> Union["Time", int]:
        # Time - Time is a duration in milliseconds; Time - int is a Time.
        if isinstance(other, Time):
            return self.presentation() - other.presentation()
        if isinstance(other, int):
            return Time.from_presentation(self.presentation() - other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}.{self.milliseconds:03d}"


@dataclass
class Setting:
    """A NAME:VALUE cue setting from the timings line."""
    name: str
    value: str


@dataclass
class Cue:
    """
    One parsed subtitle entry.

    An empty identifier means the cue had no identifier line. The scanner
    overwrites every field on each successful parse, so one instance can be
    reused across calls.
    """
    identifier: str = ""
    start_time: Time = field(default_factory=Time)
    stop_time: Time = field(default_factory=Time)
    settings: List[Setting] = field(default_factory=list)
    payload: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.payload)


@dataclass
class ScannerConfig:
    """
    Configuration for decoding scanned lines into text.

    The BOM, the WEBVTT signature and line terminators are matched as raw
    bytes before decoding, so the encoding must be ASCII-compatible (UTF-8,
    Latin-1, ...). UTF-16 and UTF-32 are rejected.
    """
    encoding: str = "utf-8"
    errors: str = "strict"

    def __post_init__(self):
        try:
            encoded = _ASCII_PROBE.encode(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e
        if encoded != _ASCII_PROBE.encode("ascii"):
            raise ValueError(f"Encoding is not ASCII-compatible: {self.encoding}")


@dataclass
class ReaderConfig:
    """Configuration for buffered character sources."""
    chunk_size: int = 8192
    timeout: int = 30  # seconds, HTTP only
    verify_ssl: bool = True
    headers: Dict[str, str] = field(default_factory=dict)
