"""Resumable byte-stream transducer inserting per-line decorations.

Purpose
-------
Split arbitrarily chunked byte input into physical lines and surround each
line's content with a prefix and a suffix, writing everything to a raw target.

Contents
--------
* :class:`LineTransducer` - the transducer holding the one-byte carry state.
* ``Decorate`` / ``Target`` callable aliases.

System Role
-----------
Sits between the level/domain state machine and the byte writer. Output for a
given byte sequence is identical no matter how the sequence is split into
chunks: a ``\\r\\n`` split across two calls is still one terminator, and a line
left open at the end of one chunk continues undecorated in the next.

Terminators are ``\\n``, ``\\r\\n`` and a bare ``\\r``. They are written back
exactly as received. A ``\\r`` at the very end of a chunk is held back until
the next byte shows whether it starts a ``\\r\\n`` pair.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from datetime import datetime
from enum import Enum

from .levels import LogLevel

Decorate = Callable[[datetime, LogLevel, Sequence[str], bool], bytes]
Target = Callable[[bytes], None]

_TERMINATOR = re.compile(rb"[\r\n]")
_CR = 0x0D
_LF = 0x0A


class _Carry(Enum):
    LINE_START = "line_start"
    IN_LINE = "in_line"
    DANGLING_CR = "dangling_cr"


class LineTransducer:
    """Decorate physical lines of a chunked byte stream.

    Examples
    --------
    >>> out = []
    >>> def decorate(ts, level, domains, is_prefix):
    ...     return b"<" if is_prefix else b">"
    >>> transducer = LineTransducer(decorate, out.append)
    >>> transducer.feed(None, LogLevel.INFO, (), b"a\\r")
    >>> transducer.feed(None, LogLevel.INFO, (), b"\\nb")
    >>> b"".join(out)
    b'<a>\\r\\n<b'
    """

    def __init__(self, decorate: Decorate, target: Target) -> None:
        self._decorate = decorate
        self._target = target
        self._carry = _Carry.LINE_START

    @property
    def at_line_start(self) -> bool:
        """Return ``True`` when the next byte begins a new physical line."""

        return self._carry is _Carry.LINE_START

    @property
    def holds_carriage_return(self) -> bool:
        """Return ``True`` while a trailing ``\\r`` waits for the next chunk."""

        return self._carry is _Carry.DANGLING_CR

    def reset(self) -> None:
        """Forget the carry state; a held ``\\r`` is discarded."""

        self._carry = _Carry.LINE_START

    def feed(self, timestamp: datetime, level: LogLevel, domains: Sequence[str], chunk: bytes) -> None:
        """Write ``chunk`` to the target with decorations inserted.

        ``timestamp``, ``level`` and ``domains`` are handed to the decoration
        callable for every prefix and suffix emitted while processing this
        chunk.
        """

        data = bytes(chunk)
        pos = 0
        end = len(data)
        while pos < end:
            if self._carry is _Carry.DANGLING_CR:
                if data[pos] == _LF:
                    self._write(b"\r\n")
                    self._carry = _Carry.LINE_START
                    pos += 1
                    continue
                self._write(b"\r")
                self._carry = _Carry.LINE_START

            if self._carry is _Carry.LINE_START:
                self._write(self._decorate(timestamp, level, domains, True))
                self._carry = _Carry.IN_LINE

            match = _TERMINATOR.search(data, pos)
            if match is None:
                self._write(data[pos:])
                return

            stop = match.start()
            self._write(data[pos:stop])
            self._write(self._decorate(timestamp, level, domains, False))

            if data[stop] == _LF:
                self._write(b"\n")
                pos = stop + 1
            elif stop + 1 == end:
                self._carry = _Carry.DANGLING_CR
                return
            elif data[stop + 1] == _LF:
                self._write(b"\r\n")
                pos = stop + 2
            else:
                self._write(b"\r")
                pos = stop + 1
            self._carry = _Carry.LINE_START

    def _write(self, payload: bytes) -> None:
        if payload:
            self._target(payload)


__all__ = ["Decorate", "LineTransducer", "Target"]
