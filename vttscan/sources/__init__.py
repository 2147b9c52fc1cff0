"""
Character sources for the VTT scanner.

The scanner only needs CharSource.get_char(); the concrete sources here
cover the common cases of in-memory data, files and HTTP streams.
"""

from .base import CharSource, BufferedSource
from .memory import BytesReader, StringReader
from .file import FileReader
from .http import HTTPReader

__all__ = [
    "CharSource",
    "BufferedSource",
    "BytesReader",
    "StringReader",
    "FileReader",
    "HTTPReader",
]
