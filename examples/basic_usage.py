"""
Basic VTTParse usage example.

Parses a VTT file and prints its cues.
"""

import sys

from vttparse import VTTError, parse_from_file

def main():
    vtt_path = sys.argv[1] if len(sys.argv) > 1 else "captions.vtt"

    try:
        vtt = parse_from_file(vtt_path)
    except VTTError as e:
        print(f"Could not parse {vtt_path}: {e}")
        return 1

    print(f"Kind: {vtt.kind}, language: {vtt.language}")
    print(f"Parsed {len(vtt.subtitles)} cues\n")

    for subtitle in vtt.subtitles:
        if subtitle.note:
            print(f"  NOTE {subtitle.note}")
        print(f"{subtitle.start} --> {subtitle.end}  {subtitle.text!r}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
