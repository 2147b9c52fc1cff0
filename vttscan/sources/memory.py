"""In-memory character sources."""

from .base import BufferedSource


class BytesReader(BufferedSource):
    """Serves characters from a bytes buffer."""

    def __init__(self, data: bytes):
        super().__init__()
        self._data = bytes(data)

    def _read_chunk(self) -> bytes:
        data, self._data = self._data, b""
        return data


class StringReader(BytesReader):
    """
    Serves characters from a text string, encoded before scanning.

    A leading U+FEFF in the text encodes to the UTF-8 BOM and is stripped by
    the scanner like any other BOM.
    """

    def __init__(self, text: str, encoding: str = "utf-8"):
        super().__init__(text.encode(encoding))
