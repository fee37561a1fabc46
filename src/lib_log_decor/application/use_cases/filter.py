"""Minimum-level gate placed in front of a sink.

Trace and debug output is opt-in. Only the suppressed call itself is dropped:
``CONTINUE`` and ``STOPPED`` always reach the target, so a line opened by an
allowed level keeps receiving its content while verbose calls are skipped.
Streaming writers ask :meth:`LevelFilter.allows` up front and stay silent when
their level is gated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from lib_log_decor.application.ports import SinkPort
from lib_log_decor.domain.levels import LogLevel
from lib_log_decor.domain.line_state import DomainArg


@dataclass(slots=True)
class FilterOptions:
    """Switches enabling the verbose levels."""

    trace: bool = False
    debug: bool = False

    def allows(self, level: LogLevel) -> bool:
        """Return ``True`` when ``level`` passes the gate.

        Examples
        --------
        >>> FilterOptions().allows(LogLevel.DEBUG)
        False
        >>> FilterOptions(debug=True).allows(LogLevel.DEBUG)
        True
        >>> FilterOptions().allows(LogLevel.CONTINUE)
        True
        """

        if level is LogLevel.TRACE:
            return self.trace
        if level is LogLevel.DEBUG:
            return self.debug
        return True


class LevelFilter(SinkPort):
    """Forward only the levels enabled by ``options`` to ``target``."""

    def __init__(self, options: FilterOptions, target: SinkPort) -> None:
        self._options = options
        self._target = target

    @property
    def target(self) -> SinkPort:
        return self._target

    @property
    def domains(self) -> tuple[str, ...]:
        return self._target.domains

    def allows(self, level: LogLevel) -> bool:
        return self._options.allows(level) and self._target.allows(level)

    def emit(self, timestamp: datetime | None, level: LogLevel, domains: DomainArg, payload: bytes) -> None:
        if self._options.allows(level):
            self._target.emit(timestamp, level, domains, payload)

    def want_level(self, level: LogLevel, domains: DomainArg = None, *, timestamp: datetime | None = None) -> None:
        if self._options.allows(level):
            self._target.want_level(level, domains, timestamp=timestamp)

    def flush(self) -> None:
        self._target.flush()

    def push_domain(self, name: str) -> None:
        self._target.push_domain(name)

    def pop_domain(self) -> str:
        return self._target.pop_domain()


__all__ = ["FilterOptions", "LevelFilter"]
