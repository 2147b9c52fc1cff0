"""
VTTScan - Streaming WebVTT Parser

A single-pass WebVTT scanner that reads subtitle streams one character at a
time and produces structured cue records, with sources for in-memory data,
files and HTTP streams.

Features:
- Strict header validation (BOM, WEBVTT signature, blank separator)
- Cue identifiers, timings in all three timestamp forms, NAME:VALUE settings
- LF, CR and CRLF line terminators, freely mixed
- Millisecond Time values with ordering and arithmetic
- Conversion of cues to dictionaries and segments.json output

Example usage:
    >>> from vttscan import VTTScanner, StringReader, Cue
    >>>
    >>> scanner = VTTScanner(StringReader(content))
    >>> scanner.init()
    >>> cue = Cue()
    >>> while scanner.parse(cue):
    ...     print(cue.start_time, cue.stop_time, cue.payload)
"""

import logging

__version__ = "0.1.0"
__author__ = "VTTScan Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Data models
from .models import Time, Setting, Cue, ScannerConfig, ReaderConfig

# Errors
from .exceptions import VTTError, VTTFormatError, VTTSourceError

# Character sources
from .sources import (
    CharSource,
    BufferedSource,
    BytesReader,
    StringReader,
    FileReader,
    HTTPReader,
)

# Scanner and grammar routines
from .scanner import VTTScanner, parse_time, parse_settings, parse_number

# Core utility functions
from .utils import timestamp_to_seconds, seconds_to_timestamp

# Timestamp correction
from .corrector import VTTTimestampCorrector, add_seconds_to_timestamp, apply_offset_to_cues

# VTT to JSON conversion (from vtt_json package)
from .vtt_json import (
    iter_cues,
    read_cues,
    cue_to_dict,
    parse_vtt_content,
    parse_vtt,
    format_transcript_with_timestamps,
    VTTParser,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Models
    "Time",
    "Setting",
    "Cue",
    "ScannerConfig",
    "ReaderConfig",

    # Errors
    "VTTError",
    "VTTFormatError",
    "VTTSourceError",

    # Sources
    "CharSource",
    "BufferedSource",
    "BytesReader",
    "StringReader",
    "FileReader",
    "HTTPReader",

    # Scanner
    "VTTScanner",
    "parse_time",
    "parse_settings",
    "parse_number",

    # Utility functions
    "timestamp_to_seconds",
    "seconds_to_timestamp",
    "add_seconds_to_timestamp",
    "apply_offset_to_cues",
    "VTTTimestampCorrector",

    # Conversion
    "iter_cues",
    "read_cues",
    "cue_to_dict",
    "parse_vtt_content",
    "parse_vtt",
    "format_transcript_with_timestamps",
    "VTTParser",
]
