"""Port for terminal capability probing."""

from __future__ import annotations

from collections.abc import Callable
from typing import IO, Any, Protocol, runtime_checkable


@runtime_checkable
class TerminalPort(Protocol):
    """Switch ``stream`` into colour mode when supported.

    Returns ``(ok, restore)`` where ``restore`` undoes any mode change and is
    safe to call when nothing was changed.
    """

    def __call__(self, stream: IO[Any]) -> tuple[bool, Callable[[], None]]: ...


__all__ = ["TerminalPort"]
