"""
Exceptions raised by VTTScan.

Format errors come from the scanner and the timestamp helpers; source errors
come from character sources and pass through the scanner untouched.
"""

from typing import Optional


class VTTError(Exception):
    """Base class for all VTTScan errors."""


class VTTFormatError(VTTError, ValueError):
    """
    Raised when the input violates the WebVTT grammar.

    Covers a bad or partial BOM, a missing WEBVTT signature, a missing blank
    line after the header, a missing arrow token, out-of-range or malformed
    timestamps, malformed settings and cues without payload.

    Attributes:
        line: The offending line of text, when one is available.
    """

    def __init__(self, message: str, line: Optional[str] = None) -> None:
        super().__init__(message)
        self.line = line


class VTTSourceError(VTTError, IOError):
    """Raised when a character source fails to deliver data."""
