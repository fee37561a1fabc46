"""Level/domain state machine tracking the currently open log line.

Purpose
-------
Decide when a new decorated line starts, which level and domain chain it
carries, and when the open line must be closed with a synthetic terminator.

Contents
--------
* :class:`OpenLine` - immutable snapshot of the open line.
* :class:`LineState` - the state machine plus the pushed domain stack.
* :func:`as_domain_chain` - normalise caller domain arguments.

System Role
-----------
One instance lives inside every sink. Content flows out through the line
callback supplied at construction; the sink decides what the callback does
with it (decorate and split, or write verbatim).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone

from .levels import LogLevel

DomainArg = str | Iterable[str] | None
LineCallback = Callable[[datetime, LogLevel, tuple[str, ...], bytes], None]
Now = Callable[[], datetime]


def as_domain_chain(domain: DomainArg) -> tuple[str, ...]:
    """Return ``domain`` as a tuple of non-empty segments.

    Examples
    --------
    >>> as_domain_chain("net")
    ('net',)
    >>> as_domain_chain(["server", "", "tls"])
    ('server', 'tls')
    >>> as_domain_chain("")
    ()
    """

    if domain is None:
        return ()
    if isinstance(domain, str):
        return (domain,) if domain else ()
    return tuple(segment for segment in domain if segment)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, frozen=True)
class OpenLine:
    """Timestamp, level and effective domain chain of the open line."""

    timestamp: datetime
    level: LogLevel
    domains: tuple[str, ...]


class LineState:
    """Track the open line and forward appended content to ``on_line``.

    Examples
    --------
    >>> seen = []
    >>> state = LineState(lambda ts, lvl, chain, data: seen.append((lvl.tag, chain, data)))
    >>> state.append(b"dropped")
    >>> state.push_domain("net")
    >>> state.start_level(LogLevel.INFO)
    >>> state.append(b"up")
    >>> state.flush()
    >>> seen
    [('INFO', ('net',), b'up'), ('INFO', ('net',), b'\\n')]
    """

    def __init__(self, on_line: LineCallback, *, now: Now | None = None) -> None:
        self._on_line = on_line
        self._now = now or _utc_now
        self._stack: list[str] = []
        self._open: OpenLine | None = None

    @property
    def is_open(self) -> bool:
        return self._open is not None

    @property
    def level(self) -> LogLevel:
        """Return the open line's level, ``STOPPED`` when no line is open."""

        return self._open.level if self._open is not None else LogLevel.STOPPED

    @property
    def open_line(self) -> OpenLine | None:
        return self._open

    @property
    def domains(self) -> tuple[str, ...]:
        """Return the pushed domain stack, outermost first."""

        return tuple(self._stack)

    def effective_chain(self, domain: DomainArg = None) -> tuple[str, ...]:
        """Return the pushed stack extended by the per-call ``domain``."""

        return as_domain_chain(self._stack) + as_domain_chain(domain)

    def start_level(self, level: LogLevel, domain: DomainArg = None, *, timestamp: datetime | None = None) -> None:
        """Close any open line and open a new one at ``level``."""

        if level is LogLevel.STOPPED:
            self.flush()
            return
        if level is LogLevel.CONTINUE:
            raise ValueError("CONTINUE cannot open a line; append to the open line instead")
        self.flush()
        self._open = OpenLine(
            timestamp=timestamp if timestamp is not None else self._now(),
            level=level,
            domains=self.effective_chain(domain),
        )

    def want_level(self, level: LogLevel, domain: DomainArg = None, *, timestamp: datetime | None = None) -> None:
        """Open a line at ``level`` unless the open line already matches."""

        current = self._open
        if current is not None and current.level is level and current.domains == self.effective_chain(domain):
            return
        self.start_level(level, domain, timestamp=timestamp)

    def append(self, payload: bytes) -> None:
        """Forward ``payload`` on the open line; dropped when nothing is open."""

        current = self._open
        if current is None or not payload:
            return
        self._on_line(current.timestamp, current.level, current.domains, payload)

    def flush(self) -> None:
        """Terminate the open line, if any, and return to ``STOPPED``.

        The closing ``\\n`` is forwarded unconditionally, so content that
        already ended in a newline is followed by one empty decorated line.
        """

        current = self._open
        if current is None:
            return
        self._on_line(current.timestamp, current.level, current.domains, b"\n")
        self._open = None

    def push_domain(self, name: str) -> None:
        """Push ``name`` onto the domain stack used by lines opened later."""

        self._stack.append(name)

    def pop_domain(self) -> str:
        """Remove and return the innermost pushed domain."""

        if not self._stack:
            raise RuntimeError("No domain is currently pushed")
        return self._stack.pop()

    @contextmanager
    def domain(self, name: str) -> Iterator[tuple[str, ...]]:
        """Push ``name`` for the duration of the ``with`` block."""

        self.push_domain(name)
        try:
            yield self.domains
        finally:
            self.pop_domain()


__all__ = ["DomainArg", "LineCallback", "LineState", "OpenLine", "as_domain_chain"]
