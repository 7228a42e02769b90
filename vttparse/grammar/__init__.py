"""
WebVTT grammar package.

Recursive-descent recognizers for timestamps, cues and whole documents.
"""

from .timestamp import parse_time
from .subtitle import parse_subtitle
from .document import parse_vtt, MAGIC_NUMBER

__all__ = [
    "parse_time",
    "parse_subtitle",
    "parse_vtt",
    "MAGIC_NUMBER",
]
