"""Runtime façade over the line-decorating logging pipeline.

Purpose
-------
Expose a stable, module-level API (``configure``, ``info``, ``level_writer``,
``stop``...) so host applications never touch the sink internals. The façade
owns one root sink; every helper forwards to it.

Contents
--------
* ``configure`` / ``close`` / ``stop`` / ``shutdown`` - lifecycle.
* ``emit``, ``trace`` ... ``fatal`` and ``echo`` - message helpers.
* ``want_level`` - keep streaming onto the open line when level and domain
  match.
* ``level_writer`` and the per-level ``*_writer`` helpers - file-like streams.
* ``push_domain`` / ``pop_domain`` / ``domain`` - scoped domain chains.
* ``progress`` - countdown indicator on the open line.

System Role
-----------
Outer shell of the package. Until :func:`configure` runs, output goes to
``sys.stderr`` with ``HH:MM:SS.ffffff [LEVEL] `` prefixes and no level filter.
Callers must invoke :func:`stop` (or :func:`shutdown`) before exiting, otherwise
the last open line is left without its terminator.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from lib_log_decor.adapters.stream import LevelWriter
from lib_log_decor.application.ports import SinkPort
from lib_log_decor.application.use_cases.progress import ProgressIndicator
from lib_log_decor.domain.levels import LogLevel
from lib_log_decor.domain.line_state import DomainArg

from ._composition import build_default_sink, build_sink
from ._settings import CONFIGURATION_TOKENS, FilterOptions, Options, OutputFormat
from ._state import LoggingRuntime, clear_runtime, current_runtime, is_configured, set_runtime


def _runtime() -> LoggingRuntime:
    return current_runtime(build_default_sink)


def get_sink() -> SinkPort:
    """Return the root sink, creating the default one on first use."""

    return _runtime().sink


def set_sink(sink: SinkPort) -> None:
    """Replace the root sink with ``sink`` after closing the current one."""

    shutdown()
    set_runtime(LoggingRuntime(sink=sink))


def configure(options: Options | None = None, *, tokens: Iterable[str] = ()) -> Options:
    """Rebuild the root sink from ``options`` adjusted by ``tokens``.

    The previous sink's open line is terminated and any terminal mode change
    it made is undone first.

    Parameters
    ----------
    options:
        Base configuration; a fresh :class:`Options` when omitted. The
        instance is modified in place by ``tokens``.
    tokens:
        Configuration tokens (see :data:`CONFIGURATION_TOKENS`).

    Returns
    -------
    Options
        The effective options.
    """

    effective = options if options is not None else Options()
    effective.apply(*tokens)
    shutdown()
    sink, restore = build_sink(effective)
    set_runtime(LoggingRuntime(sink=sink, restore_terminal=restore))
    return effective


def close() -> None:
    """Restore the terminal to its original mode."""

    if not is_configured():
        return
    runtime = _runtime()
    restore = runtime.restore_terminal
    runtime.restore_terminal = _noop
    restore()


def stop() -> None:
    """Terminate the open line; call before the process exits."""

    if is_configured():
        _runtime().sink.flush()


def shutdown() -> None:
    """Stop, close, and drop the root sink so the next call starts fresh."""

    stop()
    close()
    clear_runtime()


def _noop() -> None:
    return None


def _emit(level: LogLevel, message: Any, args: tuple[Any, ...], domain: DomainArg) -> None:
    text = str(message) % args if args else str(message)
    get_sink().emit(None, level, domain, text.encode("utf-8"))


def emit(level: LogLevel, message: Any, *args: Any, domain: DomainArg = None) -> None:
    """Log ``message % args`` at ``level``.

    ``CONTINUE`` appends to the open line; ``STOPPED`` ignores the message and
    terminates the open line.
    """

    if level is LogLevel.STOPPED:
        get_sink().emit(None, level, domain, b"")
        return
    _emit(level, message, args, domain)


def trace(message: Any, *args: Any, domain: DomainArg = None) -> None:
    """Log ``message % args`` at ``TRACE`` on a new line."""

    _emit(LogLevel.TRACE, message, args, domain)


def debug(message: Any, *args: Any, domain: DomainArg = None) -> None:
    _emit(LogLevel.DEBUG, message, args, domain)


def info(message: Any, *args: Any, domain: DomainArg = None) -> None:
    """Log ``message % args`` at ``INFO`` on a new line.

    Examples
    --------
    >>> from io import BytesIO
    >>> buffer = BytesIO()
    >>> _ = configure(Options(output=buffer), tokens=["plain"])
    >>> info("%d files", 3, domain="scan")
    >>> stop()
    >>> buffer.getvalue()
    b'[INFO:scan] 3 files\\n'
    >>> shutdown()
    """

    _emit(LogLevel.INFO, message, args, domain)


def warn(message: Any, *args: Any, domain: DomainArg = None) -> None:
    _emit(LogLevel.WARN, message, args, domain)


def error(message: Any, *args: Any, domain: DomainArg = None) -> None:
    _emit(LogLevel.ERROR, message, args, domain)


def fatal(message: Any, *args: Any, domain: DomainArg = None) -> None:
    """Log at ``FATAL`` and terminate the line immediately."""

    _emit(LogLevel.FATAL, message, args, domain)
    stop()


def echo(text: str | bytes) -> None:
    """Append ``text`` to the open line without starting a new one."""

    payload = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    get_sink().emit(None, LogLevel.CONTINUE, None, payload)


def want_level(level: LogLevel, domain: DomainArg = None) -> None:
    """Open a line at ``level`` unless the open line already has it."""

    get_sink().want_level(level, domain)


def push_domain(name: str) -> None:
    get_sink().push_domain(name)


def pop_domain() -> str:
    return get_sink().pop_domain()


@contextmanager
def domain(name: str) -> Iterator[tuple[str, ...]]:
    """Prefix every line opened inside the ``with`` block with ``name``."""

    sink = get_sink()
    sink.push_domain(name)
    try:
        yield sink.domains
    finally:
        sink.pop_domain()


def level_writer(level: LogLevel, domain: DomainArg = None) -> LevelWriter:
    """Return a file-like writer streaming into the root sink at ``level``."""

    return LevelWriter(get_sink(), level, domain)


def trace_writer(domain: DomainArg = None) -> LevelWriter:
    return level_writer(LogLevel.TRACE, domain)


def debug_writer(domain: DomainArg = None) -> LevelWriter:
    return level_writer(LogLevel.DEBUG, domain)


def info_writer(domain: DomainArg = None) -> LevelWriter:
    return level_writer(LogLevel.INFO, domain)


def warn_writer(domain: DomainArg = None) -> LevelWriter:
    return level_writer(LogLevel.WARN, domain)


def error_writer(domain: DomainArg = None) -> LevelWriter:
    return level_writer(LogLevel.ERROR, domain)


def fatal_writer(domain: DomainArg = None) -> LevelWriter:
    return level_writer(LogLevel.FATAL, domain)


def progress(max_pos: int) -> ProgressIndicator:
    """Return a progress indicator drawing onto the open line."""

    return ProgressIndicator(max_pos, echo)


def summary_info() -> str:
    """Return the metadata banner printed by the CLI ``info`` command.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    from lib_log_decor import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "CONFIGURATION_TOKENS",
    "FilterOptions",
    "LevelWriter",
    "LoggingRuntime",
    "Options",
    "OutputFormat",
    "close",
    "configure",
    "debug",
    "debug_writer",
    "domain",
    "echo",
    "emit",
    "error",
    "error_writer",
    "fatal",
    "fatal_writer",
    "get_sink",
    "info",
    "info_writer",
    "is_configured",
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
