"""
Cue recognizer.

A cue is an optional ``NOTE`` block, a ``start --> end`` timing line with
optional positioning settings, and a payload block ending in a blank line.
"""

from .primitives import Result, block, eol, line, optional, space, tag
from .timestamp import parse_time
from ..errors import ParsingError
from ..models import Subtitle

NOTE_KEYWORD = b"NOTE"
ARROW = b" --> "


def _note(data: bytes, pos: int) -> Result:
    _, pos = tag(data, pos, NOTE_KEYWORD, "NOTE")
    try:
        _, pos = eol(data, pos)
    except ParsingError:
        _, pos = space(data, pos)
    return block(data, pos)


def _positioning(data: bytes, pos: int) -> Result:
    _, pos = space(data, pos)
    return line(data, pos)


def parse_subtitle(data: bytes, pos: int = 0) -> Result:
    """
    Parse one cue starting at ``pos``.

    The payload must be closed by a blank line, including for the last cue
    in a file.

    Returns:
        Tuple of (Subtitle, position after the closing blank line)
    """
    note, pos = optional(_note, data, pos)
    start, pos = parse_time(data, pos)
    _, pos = tag(data, pos, ARROW, "' --> '")
    end, pos = parse_time(data, pos)
    positioning, pos = optional(_positioning, data, pos)
    _, pos = eol(data, pos)
    text, pos = block(data, pos)
    return Subtitle(start=start, end=end, text=text, note=note, positioning=positioning), pos
