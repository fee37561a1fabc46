"""Sink port: the single entry point the logging façade talks to.

Purpose
-------
Describe the operations every sink (decorated, plain, filtered) offers so the
façade and the filter can compose sinks without knowing their internals.

Contents
--------
* :class:`SinkPort` - runtime-checkable protocol.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol, runtime_checkable

from lib_log_decor.domain.levels import LogLevel


@runtime_checkable
class SinkPort(Protocol):
    """Receive level transitions and payload bytes."""

    def emit(
        self,
        timestamp: datetime | None,
        level: LogLevel,
        domains: Iterable[str] | str | None,
        payload: bytes,
    ) -> None:
        """Transition to ``level`` (``STOPPED`` flushes, ``CONTINUE`` keeps the line) and append ``payload``."""

    def want_level(
        self,
        level: LogLevel,
        domains: Iterable[str] | str | None = None,
        *,
        timestamp: datetime | None = None,
    ) -> None:
        """Open a line at ``level`` unless the open line already matches."""

    def allows(self, level: LogLevel) -> bool:
        """Return ``True`` when output at ``level`` would be written."""

    def flush(self) -> None:
        """Terminate the open line."""

    def push_domain(self, name: str) -> None:
        """Push ``name`` onto the domain stack."""

    def pop_domain(self) -> str:
        """Pop the innermost domain."""

    @property
    def domains(self) -> tuple[str, ...]:
        """Return the pushed domain stack."""


__all__ = ["SinkPort"]
