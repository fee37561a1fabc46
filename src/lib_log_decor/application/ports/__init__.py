"""Protocols describing the collaborators of the sink assembly."""

from __future__ import annotations

from .decorator import DecoratorPort
from .sink import SinkPort
from .terminal import TerminalPort
from .time import ClockPort
from .writer import WriterPort

__all__ = ["ClockPort", "DecoratorPort", "SinkPort", "TerminalPort", "WriterPort"]
