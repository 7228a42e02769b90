"""
Entry points for parsing WebVTT documents.

Wraps the grammar with in-memory and file-based loading, and provides JSON
export of a parsed document in the header/cues layout.
"""

import json
import logging
import os
from typing import Any, Dict, Union

from .errors import VTTIOError
from .grammar import parse_vtt
from .models import ExportConfig, Vtt

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def parse_from_slice(data: Union[bytes, bytearray, memoryview, str]) -> Vtt:
    """
    Parse a WebVTT document held in memory.

    Args:
        data: Raw document bytes (UTF-8), or text which is encoded as UTF-8

    Returns:
        Parsed Vtt document

    Raises:
        ParsingError: If the document violates the grammar
        ParsingIncomplete: If the document ends partway through a rule,
            e.g. the last cue is missing its closing blank line

    Example:
        >>> vtt = parse_from_slice(b"WEBVTT\\n\\n00:01.000 --> 00:02.000\\nHi\\n\\n")
        >>> vtt.subtitles[0].text
        'Hi'
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    else:
        data = bytes(data)

    vtt, _ = parse_vtt(data)
    logger.debug(
        f"Parsed VTT document: {len(vtt.subtitles)} cues "
        f"(kind={vtt.kind!r}, language={vtt.language!r}, style={vtt.style is not None})"
    )
    return vtt


def parse_from_file(path: PathLike) -> Vtt:
    """
    Read a VTT file into memory and parse it.

    Raises:
        VTTIOError: If the file cannot be opened or read
        ParsingError: If the document violates the grammar
        ParsingIncomplete: If the document ends partway through a rule
    """
    logger.info(f"Parsing VTT file: {path}")

    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.error(f"Failed to read VTT file {path}: {e}")
        raise VTTIOError(os.fspath(path), e) from e

    return parse_from_slice(data)


def parse_to_json(vtt_file: PathLike, output_file: PathLike = "segments.json", indent: int = 2) -> Dict[str, Any]:
    """
    Parse a VTT file and save it as JSON.

    Args:
        vtt_file: Path to VTT file
        output_file: Output filename (default: "segments.json")
        indent: JSON indentation (default: 2)

    Returns:
        Dictionary with 'json_path' and 'cues_count'
    """
    vtt = parse_from_file(vtt_file)
    data = vtt.to_dict()

    os.makedirs(os.path.dirname(os.fspath(output_file)) or ".", exist_ok=True)
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)

    logger.info(f"VTT export complete: {len(vtt.subtitles)} cues written to {output_file}")

    return {
        "json_path": os.fspath(output_file),
        "cues_count": len(vtt.subtitles),
    }


def export_from_config(config: ExportConfig) -> Dict[str, Any]:
    """Export a VTT file to JSON using an ExportConfig object."""
    return parse_to_json(
        vtt_file=config.vtt_file,
        output_file=config.output_file,
        indent=config.indent,
    )


class VTTParser:
    """
    Parser for WebVTT files.

    Thin object wrapper around parse_from_file / parse_from_slice for callers
    that prefer to pass a parser instance around.
    """

    def parse_file(self, vtt_file: PathLike) -> Vtt:
        """Parse a VTT file from disk."""
        return parse_from_file(vtt_file)

    def parse_content(self, vtt_content: Union[bytes, str]) -> Vtt:
        """Parse VTT content held in memory."""
        return parse_from_slice(vtt_content)

    def parse_content_to_dict(self, vtt_content: Union[bytes, str]) -> Dict[str, Any]:
        """
        Parse VTT content directly to a dictionary (no file I/O).

        Returns:
            Dictionary with 'header' and 'cues' keys
        """
        return parse_from_slice(vtt_content).to_dict()

    def parse_to_json(self, vtt_file: PathLike, output_file: PathLike = "segments.json") -> Dict[str, Any]:
        """Parse a VTT file and write it as JSON. See parse_to_json()."""
        return parse_to_json(vtt_file, output_file)
