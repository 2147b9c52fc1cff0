"""
VTT to JSON conversion package.

Runs the streaming scanner over whole documents and converts cues to
structured dictionaries and segments.json output.
"""

from .converter import (
    iter_cues,
    read_cues,
    cue_to_dict,
    parse_vtt_content,
    parse_vtt,
    format_transcript_with_timestamps,
)

from .parser import VTTParser

__all__ = [
    # Core conversion functions
    "iter_cues",
    "read_cues",
    "cue_to_dict",
    "parse_vtt_content",
    "parse_vtt",
    "format_transcript_with_timestamps",

    # Parser class
    "VTTParser",
]
