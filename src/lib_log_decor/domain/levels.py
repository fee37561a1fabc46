"""Severity levels understood by the line decorator.

Purpose
-------
Offer a domain-specific representation of log severities including the two
control values the state machine relies on.

Contents
--------
* :class:`LogLevel` enum with name parsing and the four-letter tag table.
* ``_TAG_TABLE`` constant mapping real levels to their bracketed tags.

System Role
-----------
Used by the state machine to track the open line, by the decorators to render
level tags, and by the filter to gate trace/debug output.
"""

from __future__ import annotations

from enum import Enum


class LogLevel(Enum):
    """Enumerated severities plus the ``STOPPED``/``CONTINUE`` sentinels."""

    CONTINUE = -1
    STOPPED = 0
    TRACE = 1
    DEBUG = 2
    INFO = 3
    WARN = 4
    ERROR = 5
    FATAL = 6

    @property
    def is_sentinel(self) -> bool:
        """Return ``True`` for control values that never open a decorated line."""

        return self.value <= 0

    @property
    def tag(self) -> str:
        """Return the tag rendered inside decorations (``""`` for sentinels).

        Examples
        --------
        >>> LogLevel.ERROR.tag
        'ERR!'
        >>> LogLevel.CONTINUE.tag
        ''
        """

        return _TAG_TABLE.get(self, "")

    @classmethod
    def real_levels(cls) -> tuple["LogLevel", ...]:
        """Return the renderable levels ordered by severity."""

        return tuple(level for level in cls if not level.is_sentinel)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            level = cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc
        if level.is_sentinel:
            raise ValueError(f"Unknown log level: {name!r}")
        return level

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value


_TAG_TABLE = {
    LogLevel.TRACE: "TRCE",
    LogLevel.DEBUG: "DBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERR!",
    LogLevel.FATAL: "FATAL!",
}

_ALIASES = {
    "WARNING": "WARN",
    "TRCE": "TRACE",
    "DBUG": "DEBUG",
    "ERR": "ERROR",
    "CRITICAL": "FATAL",
}


__all__ = ["LogLevel"]
