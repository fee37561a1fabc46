"""Use cases composing the domain state machine with the ports."""

from __future__ import annotations

from .filter import FilterOptions, LevelFilter
from .progress import ProgressIndicator
from .sinks import LineSink, create_decorated_sink, create_plain_sink

__all__ = [
    "FilterOptions",
    "LevelFilter",
    "LineSink",
    "ProgressIndicator",
    "create_decorated_sink",
    "create_plain_sink",
]
