"""
Error types for VTTParse.

Every failure raised by the package derives from VTTError, so callers can
treat any of them as "document not usable" and still tell malformed content
apart from an unreadable file.
"""

from typing import Optional


class VTTError(Exception):
    """Base class for all VTTParse failures."""


class ParsingError(VTTError):
    """
    The input violates the WebVTT grammar.

    Attributes:
        rule: Name of the grammar rule that did not match
        offset: Byte offset into the input where the rule was tried
        reason: Optional extra detail (e.g. integer overflow)
    """

    def __init__(self, rule: str, offset: int, reason: Optional[str] = None):
        self.rule = rule
        self.offset = offset
        self.reason = reason
        message = f"Failed to parse {rule} at byte {offset}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ParsingIncomplete(VTTError):
    """
    The input ended before the grammar could decide.

    Attributes:
        needed: Number of additional bytes required, or None if unknown
    """

    def __init__(self, needed: Optional[int] = None):
        self.needed = needed
        if needed is None:
            message = "Unexpected end of input (unknown amount of data needed)"
        else:
            message = f"Unexpected end of input ({needed} more byte(s) needed)"
        super().__init__(message)


class VTTIOError(VTTError):
    """Reading the VTT file failed before parsing began."""

    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"Failed to read VTT file {path}: {error}")
