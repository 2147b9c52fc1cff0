"""
Basic VTTScan usage example.

Demonstrates scanning a VTT file cue by cue and writing segments.json.
"""

import logging
import sys

from vttscan import Cue, FileReader, VTTFormatError, VTTParser, VTTScanner

def main():
    logging.basicConfig(level=logging.INFO)
    vtt_path = sys.argv[1] if len(sys.argv) > 1 else "subtitles.vtt"

    # Scan cues one at a time, reusing a single Cue
    print("Scanning VTT file...")
    with FileReader(vtt_path) as reader:
        scanner = VTTScanner(reader)
        try:
            scanner.init()
            cue = Cue()
            while scanner.parse(cue):
                print(f"{cue.start_time} --> {cue.stop_time}  {cue.text!r}")
        except VTTFormatError as e:
            print(f"Invalid VTT: {e}")
            return

    # Parse to segments.json
    print("\nWriting segments.json...")
    result = VTTParser().parse_to_segments(
        vtt_file=vtt_path,
        output_file="segments.json"
    )

    print(f"Parsed {result['cues_count']} cues")
    print(f"Output saved to: {result['segments_path']}")

if __name__ == "__main__":
    main()
