"""Runtime options and the configuration-token vocabulary.

Purpose
-------
Capture everything :func:`lib_log_decor.configure` needs (timestamp format,
output target, colour mode, level filter) in one mutable dataclass that can be
adjusted from command-line or environment tokens.

Contents
--------
* :class:`OutputFormat` - colour selection.
* :class:`Options` - configuration dataclass with :meth:`Options.apply`.
* :data:`CONFIGURATION_TOKENS` - accepted token names.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Any

from lib_log_decor.application.use_cases.filter import FilterOptions
from lib_log_decor.domain.timestamp import TimestampFormat

LOGGER = logging.getLogger(__name__)


class OutputFormat(Enum):
    """How lines are decorated."""

    AUTO = "auto"
    PLAIN = "plain"
    COLOR = "color"
    RAW = "raw"


CONFIGURATION_TOKENS: tuple[str, ...] = (
    "notime",
    "time",
    "microsecond",
    "utc",
    "date",
    "nodate",
    "debug",
    "trace",
    "plain",
    "color",
    "raw",
    "stdout",
    "stderr",
)
"""Token names accepted by :meth:`Options.apply`, in documentation order."""


@dataclass(slots=True)
class Options:
    """Formatting style, output target, and filter for the root sink.

    Attributes
    ----------
    timestamp:
        :class:`TimestampFormat` flags used by the decorators.
    output:
        Text or binary stream; ``None`` resolves to ``sys.stdout`` when the
        sink is built.
    format:
        :class:`OutputFormat` colour selection.
    filter:
        :class:`FilterOptions` enabling trace/debug output.
    """

    timestamp: TimestampFormat = TimestampFormat.NONE
    output: IO[Any] | None = None
    format: OutputFormat = OutputFormat.AUTO
    filter: FilterOptions = field(default_factory=FilterOptions)

    def apply(self, *tokens: str) -> "Options":
        """Apply configuration ``tokens`` in order and return ``self``.

        Unknown tokens are skipped and reported through :mod:`logging` at debug
        level, so a stray value in ``LOG_DECOR_OPTIONS`` never blocks logging.

        Examples
        --------
        >>> opts = Options().apply("date", "microsecond", "debug", "plain")
        >>> opts.timestamp == TimestampFormat.DATE | TimestampFormat.TIME | TimestampFormat.MICROSECONDS
        True
        >>> opts.filter.debug, opts.format.value
        (True, 'plain')
        >>> Options().apply("verbose").format.value
        'auto'
        """

        for raw in tokens:
            token = raw.strip()
            if not token:
                continue
            handler = _TOKEN_HANDLERS.get(token)
            if handler is None:
                LOGGER.debug("Ignoring unknown configuration token %r", raw)
                continue
            handler(self)
        return self


def _set_format(value: OutputFormat):
    def handler(opts: Options) -> None:
        opts.format = value

    return handler


def _add_timestamp(flags: TimestampFormat):
    def handler(opts: Options) -> None:
        opts.timestamp |= flags

    return handler


def _drop_timestamp(flags: TimestampFormat):
    def handler(opts: Options) -> None:
        opts.timestamp &= ~flags

    return handler


def _enable_debug(opts: Options) -> None:
    opts.filter.debug = True


def _enable_trace(opts: Options) -> None:
    opts.filter.trace = True


def _use_stdout(opts: Options) -> None:
    opts.output = sys.stdout


def _use_stderr(opts: Options) -> None:
    opts.output = sys.stderr


_TOKEN_HANDLERS = {
    "notime": _drop_timestamp(TimestampFormat.TIME | TimestampFormat.MICROSECONDS | TimestampFormat.UTC),
    "time": _add_timestamp(TimestampFormat.TIME),
    "microsecond": _add_timestamp(TimestampFormat.TIME | TimestampFormat.MICROSECONDS),
    "utc": _add_timestamp(TimestampFormat.TIME | TimestampFormat.UTC),
    "date": _add_timestamp(TimestampFormat.DATE),
    "nodate": _drop_timestamp(TimestampFormat.DATE),
    "debug": _enable_debug,
    "trace": _enable_trace,
    "plain": _set_format(OutputFormat.PLAIN),
    "color": _set_format(OutputFormat.COLOR),
    "raw": _set_format(OutputFormat.RAW),
    "stdout": _use_stdout,
    "stderr": _use_stderr,
}


__all__ = ["CONFIGURATION_TOKENS", "FilterOptions", "Options", "OutputFormat"]
