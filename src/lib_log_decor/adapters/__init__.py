"""Concrete adapters: decorators, writers, and terminal probing."""

from __future__ import annotations

from .decorators import BracketedDecorator, ColoredDecorator
from .stream import LevelWriter
from .terminal import enable_virtual_terminal
from .writer import StreamWriter

__all__ = [
    "BracketedDecorator",
    "ColoredDecorator",
    "LevelWriter",
    "StreamWriter",
    "enable_virtual_terminal",
]
