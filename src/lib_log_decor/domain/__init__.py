"""Domain entities and value objects used by the line decorator."""

from __future__ import annotations

from .levels import LogLevel
from .line_state import LineState, OpenLine, as_domain_chain
from .palette import ColorPair, ansi_gray, ansi_rgb
from .timestamp import TimestampFormat, format_timestamp
from .transducer import LineTransducer

__all__ = [
    "ColorPair",
    "LineState",
    "LineTransducer",
    "LogLevel",
    "OpenLine",
    "TimestampFormat",
    "ansi_gray",
    "ansi_rgb",
    "as_domain_chain",
    "format_timestamp",
]
