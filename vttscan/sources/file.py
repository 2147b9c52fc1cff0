"""
File-backed character source.

Reads a binary file in chunks of ReaderConfig.chunk_size bytes. Accepts
either a path, which the reader opens and owns, or an already-open binary
file object, which stays open after close().
"""

import logging
import os
from typing import BinaryIO, Optional, Union

from ..exceptions import VTTSourceError
from ..models import ReaderConfig
from .base import BufferedSource

logger = logging.getLogger(__name__)


class FileReader(BufferedSource):
    """
    Character source over a VTT file.

    Example:
        >>> with FileReader("subtitles.vtt") as reader:
        ...     scanner = VTTScanner(reader)
        ...     scanner.init()
    """

    def __init__(
        self,
        file: Union[str, os.PathLike, BinaryIO],
        config: Optional[ReaderConfig] = None
    ):
        super().__init__(config)
        if isinstance(file, (str, os.PathLike)):
            try:
                self._file = open(file, "rb")
            except OSError as e:
                raise VTTSourceError(f"Failed to open VTT file {file}: {e}") from e
            self._owns_file = True
            logger.debug(f"Opened VTT file: {file}")
        else:
            self._file = file
            self._owns_file = False

    def _read_chunk(self) -> bytes:
        try:
            return self._file.read(self.config.chunk_size)
        except OSError as e:
            raise VTTSourceError(f"Failed to read VTT file: {e}") from e

    def close(self) -> None:
        if self._owns_file and not self._file.closed:
            self._file.close()
