"""
Data models for VTTParse.

Defines the document tree produced by the parser. All entities are frozen:
a consumer that needs a modified document builds a new one.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

U8_MAX = 0xFF
U16_MAX = 0xFFFF


@dataclass(frozen=True)
class Time:
    """A cue start or end time."""
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def __post_init__(self):
        for name in ("hours", "minutes", "seconds"):
            value = getattr(self, name)
            if not 0 <= value <= U8_MAX:
                raise ValueError(f"Time.{name} must be in 0..{U8_MAX}, got {value}")
        if not 0 <= self.milliseconds <= U16_MAX:
            raise ValueError(f"Time.milliseconds must be in 0..{U16_MAX}, got {self.milliseconds}")

    def to_seconds(self) -> float:
        """Total offset in seconds."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds + self.milliseconds / 1000

    def __str__(self) -> str:
        from .serializer import format_time
        return format_time(self)


@dataclass(frozen=True)
class Subtitle:
    """A single cue with its optional note and positioning settings."""
    start: Time
    end: Time
    text: str  # internal line breaks kept verbatim
    note: Optional[str] = None
    positioning: Optional[str] = None

    @property
    def line_count(self) -> int:
        # Only "\n" separates payload lines
        return len(self.text.split("\n"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_time": str(self.start),
            "end_time": str(self.end),
            "text": self.text,
            "note": self.note,
            "positioning": self.positioning,
        }

    def __str__(self) -> str:
        from .serializer import format_subtitle
        return format_subtitle(self)


@dataclass(frozen=True)
class Vtt:
    """
    A parsed WebVTT document.

    A document always holds at least one subtitle, in file order.
    """
    subtitles: Tuple[Subtitle, ...]
    language: Optional[str] = None
    kind: Optional[str] = None
    style: Optional[str] = None

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        if not isinstance(self.subtitles, tuple):
            object.__setattr__(self, "subtitles", tuple(self.subtitles))
        if not self.subtitles:
            raise ValueError("Vtt requires at least one subtitle")

    def to_dict(self) -> Dict[str, Any]:
        """Render as the header/cues dictionary used for JSON export."""
        return {
            "header": {
                "kind": self.kind,
                "language": self.language,
                "style": self.style,
                "cues_count": len(self.subtitles),
            },
            "cues": [subtitle.to_dict() for subtitle in self.subtitles],
        }

    def __str__(self) -> str:
        from .serializer import format_vtt
        return format_vtt(self)


@dataclass
class ExportConfig:
    """Configuration for VTT to JSON export."""
    vtt_file: str
    output_file: str = "segments.json"
    indent: int = 2
