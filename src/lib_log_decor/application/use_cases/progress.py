"""Incremental progress indicator drawn onto the open log line."""

from __future__ import annotations

from collections.abc import Callable

COUNTDOWN = "9:.:8:.:7:.:6:.:5:.:4:.:3:.:2:.:1:.:0"


class ProgressIndicator:
    """Reveal a countdown bar as ``position`` advances towards ``max_pos``.

    Only newly revealed characters are echoed, so the bar grows in place on
    the current line instead of being redrawn.

    Examples
    --------
    >>> drawn = []
    >>> bar = ProgressIndicator(4, drawn.append)
    >>> bar.position(2)
    >>> bar.position(4)
    >>> bar.done("ok")
    >>> "".join(drawn)
    '[9:.:8:.:7:.:6:.:5:.:4:.:3:.:2:.:1:.:0] ok'
    """

    def __init__(self, max_pos: int, echo: Callable[[str], None]) -> None:
        self._max_pos = max_pos
        self._echo = echo
        self._showing_pos = 0
        self._showing = ""

    @property
    def rendered(self) -> str:
        """Return the part of the bar echoed so far."""

        return self._showing

    def position(self, pos: int) -> None:
        """Advance the bar to ``pos``; repeated positions are ignored."""

        if pos == self._showing_pos:
            return
        self._showing_pos = pos

        if self._max_pos <= 0:
            text = "..."
        else:
            total = len(COUNTDOWN)
            count = min(max(pos * total // self._max_pos, 0), total)
            text = "[" + COUNTDOWN[:count]
            if pos >= self._max_pos:
                text += "]"

        if len(text) > len(self._showing):
            self._echo(text[len(self._showing) :])
            self._showing = text

    def done(self, message: str = "") -> None:
        """Finish the bar, appending ``message`` after a separating space."""

        if self._showing and message:
            self._echo(" ")
        if message:
            self._echo(message)


__all__ = ["COUNTDOWN", "ProgressIndicator"]
