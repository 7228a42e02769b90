"""
WebVTT serialization for VTTParse.

Renders a parsed document back to text accepted by the parser. Two known
limitations:

- The style block is never written, so a document parsed from a file with
  a ``Style:`` section loses it on a serialize/parse round trip.
- Timestamps are always zero-padded to ``HH:MM:SS.mmm``, so only the typed
  fields round-trip, not the original bytes.
"""

import logging
import os
from typing import Union

from .models import Subtitle, Time, Vtt

logger = logging.getLogger(__name__)

MAGIC_NUMBER = "WEBVTT"


def format_time(time: Time) -> str:
    """
    Format a Time as ``HH:MM:SS.mmm``.

    Example:
        >>> format_time(Time(0, 1, 30, 500))
        '00:01:30.500'
    """
    return f"{time.hours:02d}:{time.minutes:02d}:{time.seconds:02d}.{time.milliseconds:03d}"


def format_subtitle(subtitle: Subtitle) -> str:
    """Format one cue, ending with a single newline after its text."""
    content = ""
    if subtitle.note is not None:
        content += f"NOTE {subtitle.note}\n\n"
    content += f"{format_time(subtitle.start)} --> {format_time(subtitle.end)}"
    if subtitle.positioning is not None:
        content += f" {subtitle.positioning}"
    content += f"\n{subtitle.text}\n"
    return content


def format_vtt(vtt: Vtt) -> str:
    """
    Format a document as WebVTT text.

    Example:
        >>> doc = Vtt(subtitles=[Subtitle(Time(0, 0, 1, 0), Time(0, 0, 2, 0), "Hello")])
        >>> format_vtt(doc)
        'WEBVTT\\n\\n00:00:01.000 --> 00:00:02.000\\nHello\\n\\n'
    """
    content = f"{MAGIC_NUMBER}\n"
    if vtt.kind is not None:
        content += f"Kind: {vtt.kind}\n"
    if vtt.language is not None:
        content += f"Language: {vtt.language}\n"
    content += "\n"

    for subtitle in vtt.subtitles:
        # Extra newline closes the cue's payload block
        content += format_subtitle(subtitle) + "\n"

    return content


def write_vtt(vtt: Vtt, output_path: Union[str, "os.PathLike[str]"]) -> None:
    """
    Save a document to a VTT file.

    Args:
        vtt: Document to write
        output_path: Destination path; parent directories are created
    """
    os.makedirs(os.path.dirname(os.fspath(output_path)) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(format_vtt(vtt))

    logger.info(f"Saved VTT with {len(vtt.subtitles)} cues to {output_path}")
