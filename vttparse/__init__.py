"""
VTTParse - WebVTT Document Parser

Parses WebVTT subtitle documents into an immutable document tree and
renders the tree back to WebVTT text.

Features:
- Strict grammar: header, Kind/Language metadata, Style block, cues
- Cue notes, positioning settings and multi-line payloads
- Distinct errors for malformed content, truncated input and I/O failures
- Serialization back to WebVTT and export to JSON

Example usage:
    >>> from vttparse import parse_from_file, format_vtt
    >>>
    >>> vtt = parse_from_file("captions.vtt")
    >>> print(vtt.kind, vtt.language, len(vtt.subtitles))
    >>> print(format_vtt(vtt))
"""

import logging

__version__ = "0.1.0"
__author__ = "VTTParse Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Data models
from .models import Time, Subtitle, Vtt, ExportConfig

# Errors
from .errors import VTTError, ParsingError, ParsingIncomplete, VTTIOError

# Parsing entry points
from .parser import parse_from_slice, parse_from_file, parse_to_json, export_from_config, VTTParser

# Serialization
from .serializer import format_time, format_subtitle, format_vtt, write_vtt

# Timestamp utilities
from .utils import time_to_seconds, seconds_to_time, timestamp_to_seconds

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Models
    "Time",
    "Subtitle",
    "Vtt",
    "ExportConfig",

    # Errors
    "VTTError",
    "ParsingError",
    "ParsingIncomplete",
    "VTTIOError",

    # Parsing
    "parse_from_slice",
    "parse_from_file",
    "parse_to_json",
    "export_from_config",
    "VTTParser",

    # Serialization
    "format_time",
    "format_subtitle",
    "format_vtt",
    "write_vtt",

    # Timestamp utilities
    "time_to_seconds",
    "seconds_to_time",
    "timestamp_to_seconds",
]
