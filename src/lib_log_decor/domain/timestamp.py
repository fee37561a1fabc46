"""Timestamp rendering used by the decorators.

Purpose
-------
Convert event timestamps into the compact ``YYYY/MM/DD HH:MM:SS.ffffff`` form
shown in line prefixes, controlled by a small set of flags.

Contents
--------
* :class:`TimestampFormat` flag set.
* :func:`format_timestamp` renderer.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import IntFlag


class TimestampFormat(IntFlag):
    """Flags controlling which timestamp parts are rendered."""

    NONE = 0
    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    UTC = 8

    @property
    def has_output(self) -> bool:
        """Return ``True`` when the format renders a date or a time."""

        return bool(self & (TimestampFormat.DATE | TimestampFormat.TIME))


def format_timestamp(ts: datetime, fmt: TimestampFormat) -> str:
    """Render ``ts`` according to ``fmt``.

    Naive timestamps are interpreted as local time. Without the ``UTC`` flag
    the value is shown in local time.

    Examples
    --------
    >>> ts = datetime(2024, 1, 23, 4, 5, 6, 789, tzinfo=timezone.utc)
    >>> format_timestamp(ts, TimestampFormat.DATE | TimestampFormat.TIME | TimestampFormat.UTC)
    '2024/01/23 04:05:06'
    >>> format_timestamp(ts, TimestampFormat.TIME | TimestampFormat.MICROSECONDS | TimestampFormat.UTC)
    '04:05:06.000789'
    >>> format_timestamp(ts, TimestampFormat.UTC)
    ''
    """

    fmt = TimestampFormat(fmt)
    if not fmt.has_output:
        return ""

    if fmt & TimestampFormat.UTC:
        ts = ts.astimezone(timezone.utc)
    else:
        ts = ts.astimezone()

    parts: list[str] = []
    if fmt & TimestampFormat.DATE:
        parts.append(f"{ts.year:04d}/{ts.month:02d}/{ts.day:02d}")
    if fmt & TimestampFormat.TIME:
        clock = f"{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
        if fmt & TimestampFormat.MICROSECONDS:
            clock += f".{ts.microsecond:06d}"
        parts.append(clock)
    return " ".join(parts)


__all__ = ["TimestampFormat", "format_timestamp"]
