"""
Character source interface for VTTScan.

The scanner reads its input one character at a time through a CharSource.
Characters are single bytes of the encoded stream, delivered as length-1
``bytes`` objects; decoding to text happens in the scanner, one line at a
time.
"""

import logging
from typing import Optional

from ..models import ReaderConfig

logger = logging.getLogger(__name__)


class CharSource:
    """
    Base interface for character sources.

    get_char() returns the next byte as a length-1 bytes object, or None at
    end of stream. Source-specific failures raise VTTSourceError.
    """

    def get_char(self) -> Optional[bytes]:
        raise NotImplementedError


class BufferedSource(CharSource):
    """
    CharSource that refills an internal buffer one chunk at a time.

    Subclasses implement _read_chunk(), returning b"" once the underlying
    data is exhausted.
    """

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()
        self._buffer = b""
        self._pos = 0
        self._exhausted = False

    def _read_chunk(self) -> bytes:
        raise NotImplementedError

    def get_char(self) -> Optional[bytes]:
        if self._pos >= len(self._buffer):
            if self._exhausted:
                return None
            self._buffer = self._read_chunk()
            self._pos = 0
            if not self._buffer:
                self._exhausted = True
                logger.debug(f"{type(self).__name__} reached end of stream")
                return None

        c = self._buffer[self._pos:self._pos + 1]
        self._pos += 1
        return c

    def close(self) -> None:
        """Release any resource held by the source."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
