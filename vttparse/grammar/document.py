"""
Document recognizer.

Header layout, in this fixed order::

    WEBVTT
    Kind: <value>          (optional)
    Language: <value>      (optional)
    Style:                 (optional, closed by a "##" line)
    ...
    ##
    <blank line>
    <one or more cues>
"""

import logging
from typing import List

from .primitives import Result, eol, line, optional, style_block, tag
from .subtitle import parse_subtitle
from ..errors import ParsingError
from ..models import Subtitle, Vtt

logger = logging.getLogger(__name__)

MAGIC_NUMBER = b"WEBVTT"
KIND_PREFIX = b"Kind: "
LANGUAGE_PREFIX = b"Language: "
STYLE_PREFIX = b"Style:"


def _header_field(data: bytes, pos: int, prefix: bytes) -> Result:
    _, pos = tag(data, pos, prefix)
    value, pos = line(data, pos)
    _, pos = eol(data, pos)
    return value, pos


def _style(data: bytes, pos: int) -> Result:
    _, pos = tag(data, pos, STYLE_PREFIX)
    _, pos = eol(data, pos)
    return style_block(data, pos)


def _subtitles(data: bytes, pos: int) -> Result:
    if pos >= len(data):
        raise ParsingError("subtitles", pos, "expected at least one cue")

    subtitle, pos = parse_subtitle(data, pos)
    subtitles: List[Subtitle] = [subtitle]

    # Keep going until a cue no longer matches; trailing bytes are ignored
    while pos < len(data):
        try:
            subtitle, pos = parse_subtitle(data, pos)
        except ParsingError:
            break
        subtitles.append(subtitle)

    return subtitles, pos


def parse_vtt(data: bytes, pos: int = 0) -> Result:
    """
    Parse a complete WebVTT document.

    Returns:
        Tuple of (Vtt, position after the last recognized cue)

    Raises:
        ParsingError: If the header or the first cue is malformed
        ParsingIncomplete: If the input ends inside a header line or cue
    """
    _, pos = tag(data, pos, MAGIC_NUMBER, "magic number")
    _, pos = eol(data, pos)
    kind, pos = optional(_header_field, data, pos, KIND_PREFIX)
    language, pos = optional(_header_field, data, pos, LANGUAGE_PREFIX)
    style, pos = optional(_style, data, pos)
    _, pos = eol(data, pos)
    subtitles, pos = _subtitles(data, pos)

    if pos < len(data):
        logger.debug(f"Ignoring {len(data) - pos} trailing byte(s) after last cue")

    return Vtt(subtitles=subtitles, language=language, kind=kind, style=style), pos
