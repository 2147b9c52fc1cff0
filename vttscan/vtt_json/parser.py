"""
VTT parser for segments.json generation.

Parses VTT files, in-memory content or remote URLs with the streaming
scanner and writes the structured result as JSON.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

import requests

from .converter import _parse_source, parse_vtt_content
from ..corrector import VTTTimestampCorrector
from ..models import ReaderConfig, ScannerConfig
from ..sources import FileReader, HTTPReader

logger = logging.getLogger(__name__)


class VTTParser:
    """
    Parser for converting VTT documents to segments.json format.

    Args:
        config: Scanner configuration shared by all parse calls
        reader_config: Buffering and HTTP options for file and URL sources
        session: Optional requests.Session used for URL sources
    """

    def __init__(
        self,
        config: Optional[ScannerConfig] = None,
        reader_config: Optional[ReaderConfig] = None,
        session: Optional[requests.Session] = None
    ):
        self.config = config or ScannerConfig()
        self.reader_config = reader_config or ReaderConfig()
        self.session = session

    def parse_to_segments(
        self,
        vtt_file: str,
        output_file: str = "segments.json",
        offset_ms: int = 0
    ) -> Dict[str, Any]:
        """
        Parse a VTT file and write segments.json.

        When offset_ms is non-zero every cue is shifted by it and the
        correction is recorded in the segments.json header.

        Args:
            vtt_file: Path to VTT file
            output_file: Output filename (default: "segments.json")
            offset_ms: Offset added to every cue time (default: 0)

        Returns:
            Dictionary containing:
                - segments_path: Path to saved segments.json file
                - cues_count: Number of cues extracted

        Raises:
            VTTSourceError: If the VTT file cannot be read
            VTTFormatError: If the VTT file is malformed

        Example:
            >>> parser = VTTParser()
            >>> result = parser.parse_to_segments("movie.vtt", "segments.json")
            >>> print(f"Parsed {result['cues_count']} cues")
        """
        logger.info(f"Parsing VTT file: {vtt_file}")

        corrector = VTTTimestampCorrector(offset_ms) if offset_ms else None
        with FileReader(vtt_file, self.reader_config) as reader:
            segments_data = _parse_source(reader, self.config, corrector)

        os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(segments_data, f, indent=2, ensure_ascii=False)

        cues_count = len(segments_data['cues'])
        logger.info(f"VTT parsing complete: {cues_count} cues extracted")

        return {
            "segments_path": output_file,
            "cues_count": cues_count,
        }

    def parse_content_to_dict(self, vtt_content: str) -> Dict[str, Any]:
        """
        Parse VTT content string directly to dictionary (no file I/O).

        Returns:
            Dictionary with 'header' and 'cues' keys
        """
        return parse_vtt_content(vtt_content, self.config)

    def parse_url_to_dict(self, url: str) -> Dict[str, Any]:
        """
        Stream a remote VTT file and parse it to a dictionary.

        Raises:
            VTTSourceError: If the request or the stream fails
            VTTFormatError: If the document is malformed
        """
        with HTTPReader(url, self.reader_config, session=self.session) as reader:
            result = _parse_source(reader, self.config)

        logger.info(f"Parsed {len(result['cues'])} cues from {url}")
        return result
