"""
Streaming WebVTT scanner.

Converts a character stream into Cue records in a single pass, reading one
character at a time from a CharSource. The grammar never needs more than one
character of lookahead (to tell a BOM from content, and a lone CR from CRLF),
so the scanner keeps a single pushback slot instead of relying on seek or
peek support from the source.

Typical use:
    >>> scanner = VTTScanner(StringReader(content))
    >>> scanner.init()
    >>> cue = Cue()
    >>> while scanner.parse(cue):
    ...     print(cue.start_time, cue.text)
"""

import logging
from typing import List, Optional, Tuple

from .exceptions import VTTFormatError
from .models import Cue, ScannerConfig, Setting, Time
from .sources.base import CharSource

logger = logging.getLogger(__name__)

_LF = b"\n"
_CR = b"\r"
_BOM = b"\xef\xbb\xbf"
_SIGNATURE = b"WEBVTT"
_HEADER_SEPARATORS = (b" ", b"\t")

_ARROW = "-->"
_WHITESPACE = (" ", "\t")
_DIGITS = "0123456789"
_INT_MAX = 2 ** 31 - 1


def _char_at(line: str, idx: int) -> str:
    # "" marks the end of the segment being scanned
    return line[idx] if idx < len(line) else ""


def _skip_whitespace(line: str, idx: int) -> int:
    while _char_at(line, idx) in _WHITESPACE:
        idx += 1
    return idx


def parse_number(line: str, idx: int) -> Tuple[int, int]:
    """
    Parse a run of ASCII digits starting at idx.

    Args:
        line: Text segment being scanned
        idx: Cursor at the first digit

    Returns:
        Tuple of (value, cursor just past the last digit)

    Raises:
        VTTFormatError: If no digit is present at idx, or the value exceeds
            the 32-bit signed maximum
    """
    c = _char_at(line, idx)
    if not c or c not in _DIGITS:
        raise VTTFormatError(f"Expected a digit at position {idx}", line)

    val = 0
    while True:
        c = _char_at(line, idx)
        if not c or c not in _DIGITS:
            break
        val = val * 10 + int(c)
        if val > _INT_MAX:
            raise VTTFormatError("Numeric value overflows", line)
        idx += 1

    return val, idx


def parse_time(line: str, idx: int = 0) -> Tuple[Time, int]:
    """
    Parse a WebVTT timestamp starting at idx.

    Timestamps come in three flavors:
        SS[.sss]        total seconds, no upper bound
        MM:SS[.sss]     minutes and seconds, both below 60
        HH:MM:SS[.sss]  hours unbounded, minutes and seconds below 60

    Leading spaces and tabs are skipped. The timestamp must be followed by
    the end of the segment, a space or a tab.

    Args:
        line: Text segment being scanned
        idx: Cursor at (or before whitespace preceding) the timestamp

    Returns:
        Tuple of (Time, cursor just past the timestamp)

    Raises:
        VTTFormatError: If the timestamp is malformed or out of range

    Example:
        >>> parse_time("01:02.5 --> 3")
        (Time(hours=0, minutes=1, seconds=2, milliseconds=500), 7)
    """
    if idx >= len(line):
        raise VTTFormatError("Missing timestamp", line)

    idx = _skip_whitespace(line, idx)

    # We don't know which component this is until we see what follows it.
    val, idx = parse_number(line, idx)

    if _char_at(line, idx) == ":":
        first_val = val
        idx += 1

        val, idx = parse_number(line, idx)
        if val >= 60:
            raise VTTFormatError(f"Timestamp component out of range: {val}", line)

        if _char_at(line, idx) == ":":
            # HH:MM:SS
            hours, minutes = first_val, val
            idx += 1

            seconds, idx = parse_number(line, idx)
            if seconds >= 60:
                raise VTTFormatError(f"Seconds out of range: {seconds}", line)
        else:
            # MM:SS
            if first_val >= 60:
                raise VTTFormatError(f"Minutes out of range: {first_val}", line)
            hours, minutes, seconds = 0, first_val, val
    else:
        # SS only
        minutes, seconds = divmod(val, 60)
        hours, minutes = divmod(minutes, 60)

    milliseconds = 0
    if _char_at(line, idx) == ".":
        idx += 1
        start = idx
        val, idx = parse_number(line, idx)
        digits = idx - start
        if digits > 3:
            raise VTTFormatError("Too many fractional digits in timestamp", line)
        milliseconds = val * 10 ** (3 - digits)

    if _char_at(line, idx) not in ("",) + _WHITESPACE:
        raise VTTFormatError(f"Unexpected character after timestamp: {line[idx]!r}", line)

    return Time(hours, minutes, seconds, milliseconds), idx


def parse_settings(line: str, idx: int) -> List[Setting]:
    """
    Parse whitespace-separated NAME:VALUE settings from idx to end of line.

    Args:
        line: Text segment being scanned
        idx: Cursor at the start of the settings region

    Returns:
        Settings in order of appearance (may be empty)

    Raises:
        VTTFormatError: On an empty name or value, a missing colon, or a
            colon inside the value
    """
    settings = []

    while True:
        idx = _skip_whitespace(line, idx)
        if idx >= len(line):
            return settings

        name_start = idx
        while _char_at(line, idx) != ":":
            if _char_at(line, idx) in ("",) + _WHITESPACE:
                raise VTTFormatError("Setting is missing its NAME:VALUE colon", line)
            idx += 1

        name = line[name_start:idx]
        if not name:
            raise VTTFormatError("Setting has an empty name", line)

        idx += 1  # colon

        value_start = idx
        while _char_at(line, idx) not in ("",) + _WHITESPACE:
            if line[idx] == ":":
                raise VTTFormatError(f"Setting value of {name!r} contains a colon", line)
            idx += 1

        value = line[value_start:idx]
        if not value:
            raise VTTFormatError(f"Setting {name!r} has an empty value", line)

        settings.append(Setting(name, value))


class VTTScanner:
    """
    Single-pass WebVTT scanner over a CharSource.

    Call init() once to validate the header, then parse() repeatedly until it
    returns False. The first error aborts the current call and leaves the
    scanner unusable; the scanner never closes its source.

    Attributes:
        header_text: Free text that followed the WEBVTT signature, with the
            separating space or tab removed
    """

    def __init__(self, source: CharSource, config: Optional[ScannerConfig] = None):
        self.source = source
        self.config = config or ScannerConfig()
        self.header_text = ""
        self._pushback: Optional[bytes] = None

    def init(self) -> None:
        """
        Validate the stream header.

        Consumes an optional UTF-8 BOM, the WEBVTT signature, the rest of the
        signature line and the blank line that separates the header from the
        first cue. A stream that ends right after the signature line is a
        valid empty document.

        Raises:
            VTTFormatError: If the header is malformed
            VTTSourceError: If the source fails
        """
        if not self._parse_bom():
            raise VTTFormatError("Empty stream: missing WEBVTT signature")

        # Match one character at a time so binary input without line
        # terminators is rejected early.
        for i in range(len(_SIGNATURE)):
            c = self._get_char()
            if c != _SIGNATURE[i:i + 1]:
                raise VTTFormatError("Stream does not start with WEBVTT")

        line = self._parse_line_bytes()
        if line is None:
            logger.debug("Stream ends after WEBVTT signature")
            return

        if line:
            if line[:1] not in _HEADER_SEPARATORS:
                raise VTTFormatError("Unexpected text after WEBVTT signature", self._decode(line))
            self.header_text = self._decode(line[1:])

        line = self._parse_line_bytes()
        if line is None:
            logger.debug("Stream ends after header line")
            return

        if line:
            raise VTTFormatError("WEBVTT header must be followed by a blank line", self._decode(line))

        logger.debug("WebVTT header accepted")

    def parse(self, cue: Cue) -> bool:
        """
        Parse the next cue into the caller-supplied Cue.

        Args:
            cue: Output record; every field is overwritten on success

        Returns:
            True if a cue was parsed, False at end of stream

        Raises:
            VTTFormatError: If the cue block is malformed
            VTTSourceError: If the source fails
        """
        while True:
            line = self._parse_line()
            if line is None:
                return False
            if line:
                break

        # The arrow token may not appear in an identifier line, so its
        # presence marks the timings line.
        arrow_pos = line.find(_ARROW)

        if arrow_pos >= 0:
            identifier = ""
        else:
            identifier = line
            line = self._parse_line()
            if line is None:
                raise VTTFormatError("Stream ends after cue identifier", identifier)

            arrow_pos = line.find(_ARROW)
            if arrow_pos < 0:
                raise VTTFormatError("Cue identifier is not followed by a timings line", line)

        start_time, stop_time, settings = self._parse_timings_line(line, arrow_pos)

        payload = []
        while True:
            line = self._parse_line()
            if not line:
                break
            payload.append(line)

        if not payload:
            raise VTTFormatError("Cue has no payload", identifier or None)

        cue.identifier = identifier
        cue.start_time = start_time
        cue.stop_time = stop_time
        cue.settings = settings
        cue.payload = payload

        logger.debug(f"Parsed cue {start_time} --> {stop_time} ({len(payload)} lines)")
        return True

    def _get_char(self) -> Optional[bytes]:
        if self._pushback is not None:
            c, self._pushback = self._pushback, None
            return c
        return self.source.get_char()

    def _unget_char(self, c: bytes) -> None:
        if self._pushback is not None:
            raise RuntimeError("Pushback buffer already holds a character")
        self._pushback = c

    def _parse_bom(self) -> bool:
        """
        Consume an optional UTF-8 BOM.

        Returns False if the stream ends before its first character. A BOM
        that matches its first byte must be complete: only one character can
        be pushed back, so a partial BOM cannot be returned to the stream.
        """
        for i in range(len(_BOM)):
            c = self._get_char()
            if c is None:
                if i == 0:
                    return False
                raise VTTFormatError("Stream ends inside byte order mark")

            if c != _BOM[i:i + 1]:
                if i == 0:
                    self._unget_char(c)
                    return True
                raise VTTFormatError("Incomplete byte order mark")

        logger.debug("Skipped UTF-8 byte order mark")
        return True

    def _parse_line_terminator(self, c: bytes) -> None:
        # Lines end with LF, CR, or CR LF.
        if c == _LF:
            return

        c = self._get_char()
        if c is not None and c != _LF:
            self._unget_char(c)

    def _parse_line_bytes(self) -> Optional[bytes]:
        """
        Read one raw line without its terminator.

        Returns None at end of stream when nothing was read; an unterminated
        trailing line is returned like any other line.
        """
        line = bytearray()

        while True:
            c = self._get_char()
            if c is None:
                return bytes(line) if line else None

            if c == _LF or c == _CR:
                self._parse_line_terminator(c)
                return bytes(line)

            line += c

    def _parse_line(self) -> Optional[str]:
        line = self._parse_line_bytes()
        if line is None:
            return None
        return self._decode(line)

    def _decode(self, line: bytes) -> str:
        try:
            return line.decode(self.config.encoding, self.config.errors)
        except UnicodeDecodeError as e:
            raise VTTFormatError(f"Line is not valid {self.config.encoding}: {e}") from e

    def _parse_timings_line(self, line: str, arrow_pos: int) -> Tuple[Time, Time, List[Setting]]:
        """
        Parse "<start> --> <stop> [NAME:VALUE ...]".

        The line is split at the arrow into a start segment and a
        stop-plus-settings segment, each scanned up to its own end.
        """
        if not 0 <= arrow_pos < len(line):
            raise VTTFormatError("Arrow position outside timings line", line)

        start_segment = line[:arrow_pos]
        start_time, idx = parse_time(start_segment, 0)

        # Only whitespace may sit between the start time and the arrow.
        if _skip_whitespace(start_segment, idx) != len(start_segment):
            raise VTTFormatError("Unexpected text before arrow token", line)

        stop_segment = line[arrow_pos + len(_ARROW):]
        stop_time, idx = parse_time(stop_segment, 0)

        settings = parse_settings(stop_segment, idx)
        return start_time, stop_time, settings
