"""Runtime composition helpers wiring options into a root sink.

Purpose
-------
Translate :class:`Options` into the live sink the façade writes to: pick the
writer, the decoration strategy, and the optional level filter.

Contents
--------
* :class:`SystemClock` - concrete clock port.
* :func:`select_decorator` - colour/plain strategy selection.
* :func:`build_sink` - full composition returning the sink and a restore hook.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime, timezone
from typing import IO, Any

from lib_log_decor.adapters import BracketedDecorator, ColoredDecorator, StreamWriter, enable_virtual_terminal
from lib_log_decor.application.ports import ClockPort, DecoratorPort, SinkPort, TerminalPort
from lib_log_decor.application.use_cases import LevelFilter, create_decorated_sink, create_plain_sink
from lib_log_decor.domain.timestamp import TimestampFormat

from ._settings import Options, OutputFormat

LOGGER = logging.getLogger(__name__)


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def _noop() -> None:
    return None


def select_decorator(
    fmt: OutputFormat,
    timestamp: TimestampFormat,
    stream: IO[Any],
    terminal: TerminalPort,
) -> tuple[DecoratorPort, Callable[[], None]]:
    """Return the decorator for ``fmt`` and the terminal restore action.

    ``AUTO`` probes ``stream`` through ``terminal`` and falls back to the
    bracketed format when colour is unavailable.
    """

    if fmt is OutputFormat.COLOR:
        return ColoredDecorator(timestamp), _noop
    if fmt is OutputFormat.AUTO:
        ok, restore = terminal(stream)
        if ok:
            LOGGER.debug("Colour output enabled for %r", stream)
            return ColoredDecorator(timestamp), restore
    return BracketedDecorator(timestamp), _noop


def build_sink(
    options: Options,
    *,
    terminal: TerminalPort = enable_virtual_terminal,
    clock: ClockPort | None = None,
) -> tuple[SinkPort, Callable[[], None]]:
    """Assemble the root sink described by ``options``.

    Returns
    -------
    tuple[SinkPort, Callable[[], None]]
        The sink (filtered) and the action restoring the terminal mode.
    """

    stream = options.output if options.output is not None else sys.stdout
    writer = StreamWriter(stream)
    clock = clock or SystemClock()

    restore: Callable[[], None] = _noop
    if options.format is OutputFormat.RAW:
        sink: SinkPort = create_plain_sink(writer, clock=clock)
    else:
        decorator, restore = select_decorator(options.format, options.timestamp, stream, terminal)
        sink = create_decorated_sink(writer, decorator, clock=clock)
    return LevelFilter(options.filter, sink), restore


def build_default_sink() -> SinkPort:
    """Return the sink used before :func:`lib_log_decor.configure` is called."""

    decorator = BracketedDecorator(TimestampFormat.TIME | TimestampFormat.MICROSECONDS)
    return create_decorated_sink(StreamWriter(sys.stderr), decorator, clock=SystemClock())


__all__ = ["SystemClock", "build_default_sink", "build_sink", "select_decorator"]
