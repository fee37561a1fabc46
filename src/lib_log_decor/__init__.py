"""Public package surface of the line-oriented console log decorator.

``import lib_log_decor as log`` gives access to the runtime façade
(:func:`configure`, :func:`info`, :func:`level_writer`, :func:`stop`...) and to
the building blocks needed to assemble custom sinks.
"""

from __future__ import annotations

from .adapters import BracketedDecorator, ColoredDecorator, LevelWriter, StreamWriter
from .application.use_cases import LevelFilter, LineSink, ProgressIndicator, create_decorated_sink, create_plain_sink
from .domain import LineState, LineTransducer, LogLevel, TimestampFormat, format_timestamp
from .runtime import (
    CONFIGURATION_TOKENS,
    FilterOptions,
    Options,
    OutputFormat,
    close,
    configure,
    debug,
    debug_writer,
    domain,
    echo,
    emit,
    error,
    error_writer,
    fatal,
    fatal_writer,
    get_sink,
    info,
    info_writer,
    level_writer,
    pop_domain,
    progress,
    push_domain,
    set_sink,
    shutdown,
    stop,
    summary_info,
    trace,
    trace_writer,
    want_level,
    warn,
    warn_writer,
)

__all__ = [
    "BracketedDecorator",
    "CONFIGURATION_TOKENS",
    "ColoredDecorator",
    "FilterOptions",
    "LevelFilter",
    "LevelWriter",
    "LineSink",
    "LineState",
    "LineTransducer",
    "LogLevel",
    "Options",
    "OutputFormat",
    "ProgressIndicator",
    "StreamWriter",
    "TimestampFormat",
    "close",
    "configure",
    "create_decorated_sink",
    "create_plain_sink",
    "debug",
    "debug_writer",
    "domain",
    "echo",
    "emit",
    "error",
    "error_writer",
    "fatal",
    "fatal_writer",
    "format_timestamp",
    "get_sink",
    "info",
    "info_writer",
    "level_writer",
    "pop_domain",
    "progress",
    "push_domain",
    "set_sink",
    "shutdown",
    "stop",
    "summary_info",
    "trace",
    "trace_writer",
    "want_level",
    "warn",
    "warn_writer",
]
