"""
VTT to JSON export example.

Writes segments.json for a VTT file and re-saves a normalized copy of it.
"""

import logging

from vttparse import ExportConfig, export_from_config, parse_from_file, write_vtt

def main():
    logging.basicConfig(level=logging.INFO)

    config = ExportConfig(vtt_file="captions.vtt", output_file="segments.json")
    result = export_from_config(config)
    print(f"Exported {result['cues_count']} cues to {result['json_path']}")

    # Timestamps come back zero-padded; the style block is not written
    write_vtt(parse_from_file(config.vtt_file), "captions.normalized.vtt")

if __name__ == "__main__":
    main()
