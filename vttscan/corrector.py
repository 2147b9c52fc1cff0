"""
Timestamp correction utilities for VTTScan.

Shifts parsed cues by a fixed offset, e.g. to align a subtitle track that
starts late or early against its media. Offsets are whole milliseconds and
shifted times clamp at zero.
"""

import copy
import logging
from typing import Any, Dict, List

from .models import Cue
from .utils import seconds_to_timestamp, timestamp_to_seconds

logger = logging.getLogger(__name__)


def add_seconds_to_timestamp(timestamp_str: str, offset_seconds: float) -> str:
    """
    Add seconds to a VTT timestamp string.

    Args:
        timestamp_str: VTT timestamp string
        offset_seconds: Seconds to add (may be negative)

    Returns:
        Adjusted timestamp string in HH:MM:SS.mmm format

    Raises:
        VTTFormatError: If timestamp_str is not a valid timestamp

    Example:
        >>> add_seconds_to_timestamp("00:05:30.000", 120)
        '00:07:30.000'
    """
    return seconds_to_timestamp(timestamp_to_seconds(timestamp_str) + offset_seconds)


def apply_offset_to_cues(cues: List[Cue], offset_ms: int) -> List[Cue]:
    """
    Apply a timestamp offset to all cues.

    Args:
        cues: Parsed cues
        offset_ms: Milliseconds to add to start and stop times

    Returns:
        New list of shifted copies; the input cues are left untouched

    Example:
        >>> shifted = apply_offset_to_cues(cues, 120000)
        >>> str(shifted[0].start_time)
        '00:02:05.000'
    """
    if offset_ms == 0:
        return list(cues)

    logger.info(f"Applying timestamp offset to {len(cues)} cues: {offset_ms}ms")

    adjusted_cues = []
    for cue in cues:
        adjusted_cue = copy.deepcopy(cue)
        adjusted_cue.start_time = cue.start_time + offset_ms
        adjusted_cue.stop_time = cue.stop_time + offset_ms
        adjusted_cues.append(adjusted_cue)

    return adjusted_cues


class VTTTimestampCorrector:
    """
    Holds a fixed offset and applies it to cues.

    Example:
        >>> corrector = VTTTimestampCorrector(offset_ms=-1500)
        >>> cues = corrector.apply_to_cues(cues)
    """

    def __init__(self, offset_ms: int = 0):
        self.offset_ms = offset_ms

    def apply_to_cues(self, cues: List[Cue]) -> List[Cue]:
        return apply_offset_to_cues(cues, self.offset_ms)

    def get_correction_metadata(self) -> Dict[str, Any]:
        return {
            'applied': self.offset_ms != 0,
            'offset_ms': self.offset_ms,
        }
