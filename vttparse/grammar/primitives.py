"""
Byte-level recognizers shared by the grammar.

Every recognizer is a pure function of ``(data, pos)``: it returns the
recognized value together with the position just past it, or raises
ParsingError (the input does not match) / ParsingIncomplete (the input ran
out before the rule could decide).
"""

from typing import Any, Callable, Optional, Tuple

from ..errors import ParsingError, ParsingIncomplete
from ..models import U8_MAX, U16_MAX

Result = Tuple[Any, int]
Rule = Callable[..., Result]

NEWLINE = b"\n"
BLANK_LINE = b"\n\n"
STYLE_END = b"##\n"

_DIGITS = frozenset(b"0123456789")
_SPACES = frozenset(b" \t")


def tag(data: bytes, pos: int, literal: bytes, rule: Optional[str] = None) -> Result:
    """Match an exact literal."""
    end = pos + len(literal)
    chunk = data[pos:end]
    if chunk == literal:
        return literal, end
    if len(chunk) < len(literal) and literal.startswith(chunk):
        raise ParsingIncomplete(len(literal) - len(chunk))
    raise ParsingError(rule or repr(literal.decode("ascii")), pos)


def eol(data: bytes, pos: int) -> Result:
    """Match a line terminator (LF or CRLF)."""
    if data[pos:pos + 1] == b"\n":
        return b"\n", pos + 1
    if data[pos:pos + 2] == b"\r\n":
        return b"\r\n", pos + 2
    if pos >= len(data) or data[pos:] == b"\r":
        raise ParsingIncomplete(1)
    raise ParsingError("line terminator", pos)


def _take_while(data: bytes, pos: int, allowed: frozenset, rule: str) -> Result:
    end = pos
    while end < len(data) and data[end] in allowed:
        end += 1
    if end == pos:
        if pos >= len(data):
            raise ParsingIncomplete(1)
        raise ParsingError(rule, pos)
    return data[pos:end], end


def space(data: bytes, pos: int) -> Result:
    """Match one or more spaces or tabs."""
    return _take_while(data, pos, _SPACES, "space")


def digits(data: bytes, pos: int) -> Result:
    """Match a run of one or more ASCII digits."""
    return _take_while(data, pos, _DIGITS, "digit")


def _bounded_int(data: bytes, pos: int, limit: int, rule: str) -> Result:
    raw, end = digits(data, pos)
    # Width is checked on the significant digits before converting
    significant = raw.lstrip(b"0")
    if len(significant) > len(str(limit)):
        raise ParsingError(rule, pos, f"{len(significant)}-digit value exceeds {limit}")
    value = int(raw)
    if value > limit:
        raise ParsingError(rule, pos, f"value {value} exceeds {limit}")
    return value, end


def u8_digit(data: bytes, pos: int) -> Result:
    return _bounded_int(data, pos, U8_MAX, "8-bit integer")


def u16_digit(data: bytes, pos: int) -> Result:
    return _bounded_int(data, pos, U16_MAX, "16-bit integer")


def _decode(raw: bytes, rule: str, pos: int) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParsingError(rule, pos, "invalid UTF-8") from e


def _take_until(data: bytes, pos: int, delimiter: bytes, consume: bool, rule: str) -> Result:
    index = data.find(delimiter, pos)
    if index < 0:
        raise ParsingIncomplete()
    end = index + len(delimiter) if consume else index
    return _decode(data[pos:index], rule, pos), end


def line(data: bytes, pos: int) -> Result:
    """Text up to, but not including, the next newline."""
    return _take_until(data, pos, NEWLINE, False, "line")


def block(data: bytes, pos: int) -> Result:
    """Text up to the next blank line; the blank line is consumed."""
    return _take_until(data, pos, BLANK_LINE, True, "block")


def style_block(data: bytes, pos: int) -> Result:
    """Text up to the ``##`` terminator line, which is consumed."""
    return _take_until(data, pos, STYLE_END, True, "style block")


def optional(rule: Rule, data: bytes, pos: int, *args: Any) -> Result:
    """
    Try ``rule``; a grammar mismatch yields ``(None, pos)``.

    ParsingIncomplete is not a mismatch and propagates.
    """
    try:
        return rule(data, pos, *args)
    except ParsingError:
        return None, pos
