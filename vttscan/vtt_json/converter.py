"""
VTT content parsing and conversion utilities.

Drives the streaming scanner over whole documents and converts the resulting
cues to plain dictionaries suitable for JSON output.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ..corrector import VTTTimestampCorrector
from ..models import Cue, ScannerConfig
from ..scanner import VTTScanner
from ..sources import BytesReader, CharSource, FileReader, StringReader

logger = logging.getLogger(__name__)


def iter_cues(source: CharSource, config: Optional[ScannerConfig] = None) -> Iterator[Cue]:
    """
    Validate the header of a source and yield its cues one at a time.

    Each yielded Cue is a fresh object, so callers may keep them.

    Raises:
        VTTFormatError: If the header or any cue is malformed
        VTTSourceError: If the source fails
    """
    scanner = VTTScanner(source, config)
    scanner.init()

    while True:
        cue = Cue()
        if not scanner.parse(cue):
            return
        yield cue


def read_cues(source: CharSource, config: Optional[ScannerConfig] = None) -> List[Cue]:
    """Parse every cue of a source into a list."""
    return list(iter_cues(source, config))


def cue_to_dict(cue: Cue) -> Dict[str, Any]:
    """
    Convert a Cue to a JSON-friendly dictionary.

    Settings stay a list of name/value pairs because duplicate names are
    preserved.
    """
    return {
        'identifier': cue.identifier,
        'start_time': str(cue.start_time),
        'end_time': str(cue.stop_time),
        'settings': [{'name': s.name, 'value': s.value} for s in cue.settings],
        'text': cue.text,
        'payload': list(cue.payload),
    }


def parse_vtt_content(
    vtt_content: Union[str, bytes],
    config: Optional[ScannerConfig] = None
) -> Dict[str, Any]:
    """
    Parse VTT content into a structured dictionary.

    Args:
        vtt_content: VTT document as text or encoded bytes
        config: Optional scanner configuration

    Returns:
        Dictionary with 'header' and 'cues' keys

    Raises:
        VTTFormatError: If the content is not valid WebVTT
    """
    if isinstance(vtt_content, bytes):
        source = BytesReader(vtt_content)
    else:
        source = StringReader(vtt_content)

    return _parse_source(source, config)


def _parse_source(
    source: CharSource,
    config: Optional[ScannerConfig] = None,
    corrector: Optional[VTTTimestampCorrector] = None
) -> Dict[str, Any]:
    scanner = VTTScanner(source, config)
    scanner.init()

    cues = []
    while True:
        cue = Cue()
        if not scanner.parse(cue):
            break
        cues.append(cue)

    header = {
        'format': 'WEBVTT',
        'description': scanner.header_text,
        'cues_count': len(cues),
    }
    if corrector is not None:
        cues = corrector.apply_to_cues(cues)
        header['correction'] = corrector.get_correction_metadata()

    logger.debug(f"Converted {len(cues)} cues")
    return {
        'header': header,
        'cues': [cue_to_dict(cue) for cue in cues],
    }


def format_transcript_with_timestamps(cues: List[Dict[str, Any]]) -> str:
    """
    Format transcript with human-readable timestamps in [HH:MM:SS] format.

    Args:
        cues: List of cue dictionaries from cue_to_dict()

    Returns:
        Formatted transcript as a string with one line per cue
    """
    formatted_lines = []
    for cue in cues:
        # Keep HH:MM:SS, drop milliseconds
        timestamp = f"[{cue['start_time'].rsplit('.', 1)[0]}]"
        text = " ".join(line.strip() for line in cue['payload'])
        formatted_lines.append(f"{timestamp} {text}")
    return "\n".join(formatted_lines)


def parse_vtt(vtt_file_path: str, config: Optional[ScannerConfig] = None) -> Tuple[str, Dict[str, Any]]:
    """
    Parse a VTT file and return both the formatted transcript and the structured data.

    Args:
        vtt_file_path: Path to the VTT file
        config: Optional scanner configuration

    Returns:
        A tuple of (formatted transcript string, structured VTT data)

    Raises:
        VTTSourceError: If the file cannot be opened or read
        VTTFormatError: If the file is not valid WebVTT
    """
    with FileReader(vtt_file_path) as reader:
        result = _parse_source(reader, config)
    return format_transcript_with_timestamps(result["cues"]), result
