"""Sink assembly wiring state machine, transducer, and writer.

Purpose
-------
Turn a writer (and optionally a decorator) into the single ``emit`` entry point
the façade calls for every message, every streamed chunk, and every shutdown.

Contents
--------
* :class:`LineSink` - lock-protected wrapper around a :class:`LineState`.
* :func:`create_decorated_sink` - state machine -> transducer -> writer.
* :func:`create_plain_sink` - state machine -> writer, no decoration.

System Role
-----------
Application-layer composition invoked by the runtime. Every public call holds
the sink's lock for its full duration, so concurrent callers interleave at call
granularity and never split one call's prefix, content, and suffix.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from lib_log_decor.application.ports import ClockPort, DecoratorPort, SinkPort, WriterPort
from lib_log_decor.domain.levels import LogLevel
from lib_log_decor.domain.line_state import DomainArg, LineCallback, LineState, OpenLine
from lib_log_decor.domain.transducer import LineTransducer


class LineSink(SinkPort):
    """Dispatch sink calls into a :class:`LineState` under one lock."""

    def __init__(self, on_line: LineCallback, *, clock: ClockPort | None = None) -> None:
        now = clock.now if clock is not None else None
        self._state = LineState(on_line, now=now)
        self._lock = threading.RLock()

    @property
    def domains(self) -> tuple[str, ...]:
        with self._lock:
            return self._state.domains

    @property
    def open_line(self) -> OpenLine | None:
        with self._lock:
            return self._state.open_line

    def emit(self, timestamp: datetime | None, level: LogLevel, domains: DomainArg, payload: bytes) -> None:
        """Apply the level transition for ``level`` and append ``payload``.

        ``STOPPED`` closes the open line, ``CONTINUE`` keeps it, and every real
        level opens a fresh line. An empty ``payload`` only transitions.
        """

        with self._lock:
            if level is LogLevel.STOPPED:
                self._state.flush()
            elif level is not LogLevel.CONTINUE:
                self._state.start_level(level, domains, timestamp=timestamp)
            if payload:
                self._state.append(payload)

    def allows(self, level: LogLevel) -> bool:
        return True

    def want_level(self, level: LogLevel, domains: DomainArg = None, *, timestamp: datetime | None = None) -> None:
        with self._lock:
            self._state.want_level(level, domains, timestamp=timestamp)

    def flush(self) -> None:
        with self._lock:
            self._state.flush()

    def push_domain(self, name: str) -> None:
        with self._lock:
            self._state.push_domain(name)

    def pop_domain(self) -> str:
        with self._lock:
            return self._state.pop_domain()

    @contextmanager
    def domain(self, name: str) -> Iterator[tuple[str, ...]]:
        """Push ``name`` for the duration of the ``with`` block."""

        self.push_domain(name)
        try:
            yield self.domains
        finally:
            self.pop_domain()


def create_decorated_sink(
    writer: WriterPort,
    decorator: DecoratorPort | None,
    *,
    clock: ClockPort | None = None,
) -> LineSink:
    """Build a sink that decorates every physical line.

    Parameters
    ----------
    writer:
        Destination for the decorated byte stream.
    decorator:
        Prefix/suffix strategy; ``None`` keeps line splitting but inserts
        nothing.
    clock:
        Timestamp source for lines opened without an explicit timestamp.

    Examples
    --------
    >>> from io import BytesIO
    >>> from lib_log_decor.adapters.writer import StreamWriter
    >>> buffer = BytesIO()
    >>> deco = lambda ts, level, domains, is_prefix: f"[{level.tag}] ".encode() if is_prefix else b""
    >>> sink = create_decorated_sink(StreamWriter(buffer), deco)
    >>> sink.emit(None, LogLevel.INFO, (), b"line1\\nline2")
    >>> sink.emit(None, LogLevel.STOPPED, (), b"")
    >>> buffer.getvalue()
    b'[INFO] line1\\n[INFO] line2\\n'
    """

    def _decorate(timestamp: datetime, level: LogLevel, domains, is_prefix: bool) -> bytes:
        if decorator is None or level.is_sentinel:
            return b""
        return decorator(timestamp, level, domains, is_prefix)

    transducer = LineTransducer(_decorate, writer.write)
    return LineSink(transducer.feed, clock=clock)


def create_plain_sink(writer: WriterPort, *, clock: ClockPort | None = None) -> LineSink:
    """Build a sink that writes payload bytes unchanged.

    Only the synthetic ``\\n`` closing each message is added, so
    consecutive messages still land on separate lines.
    """

    def _write(timestamp: datetime, level: LogLevel, domains: tuple[str, ...], payload: bytes) -> None:
        writer.write(payload)

    return LineSink(_write, clock=clock)


__all__ = ["LineSink", "create_decorated_sink", "create_plain_sink"]
