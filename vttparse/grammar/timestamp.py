"""Timestamp recognizer: ``HH:MM:SS.mmm`` or ``MM:SS.mmm``."""

from .primitives import Result, tag, u8_digit, u16_digit
from ..errors import ParsingError
from ..models import Time


def _hour_form(data: bytes, pos: int) -> Result:
    hours, pos = u8_digit(data, pos)
    _, pos = tag(data, pos, b":", "':' after hours")
    minutes, pos = u8_digit(data, pos)
    _, pos = tag(data, pos, b":", "':' after minutes")
    seconds, pos = u8_digit(data, pos)
    _, pos = tag(data, pos, b".", "'.' after seconds")
    milliseconds, pos = u16_digit(data, pos)
    return Time(hours, minutes, seconds, milliseconds), pos


def _minute_form(data: bytes, pos: int) -> Result:
    minutes, pos = u8_digit(data, pos)
    _, pos = tag(data, pos, b":", "':' after minutes")
    seconds, pos = u8_digit(data, pos)
    _, pos = tag(data, pos, b".", "'.' after seconds")
    milliseconds, pos = u16_digit(data, pos)
    return Time(0, minutes, seconds, milliseconds), pos


def parse_time(data: bytes, pos: int = 0) -> Result:
    """
    Parse a single timestamp starting at ``pos``.

    The hour form is tried first; only a grammar mismatch (not running out
    of input) falls back to the short form. Field values are not range
    checked beyond fitting their integer width, so ``00:99.000`` is accepted.

    Returns:
        Tuple of (Time, position after the timestamp)
    """
    try:
        return _hour_form(data, pos)
    except ParsingError:
        return _minute_form(data, pos)
