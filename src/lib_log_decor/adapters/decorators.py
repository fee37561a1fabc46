"""Bracketed and colour decoration strategies.

Purpose
-------
Produce the per-line prefix bytes ``<timestamp> [<LEVEL>:<domain>] `` either as
plain text or wrapped in 256-colour escape sequences.

Contents
--------
* :class:`BracketedDecorator` - plain-text prefix.
* :class:`ColoredDecorator` - prefix with coloured timestamp, level, and
  domain segments; escapes rendered with :class:`rich.style.Style`.

System Role
-----------
Implement :class:`~lib_log_decor.application.ports.DecoratorPort`. Format
strings and escape sequences are computed once in the constructor; each call
only substitutes the timestamp and the domain chain. Both variants return an
empty suffix and empty bytes for sentinel levels.

Alignment Notes
---------------
Colour indices come from :mod:`lib_log_decor.domain.palette`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime

from rich.color import Color, ColorSystem
from rich.style import Style

from lib_log_decor.application.ports.decorator import DecoratorPort
from lib_log_decor.domain.levels import LogLevel
from lib_log_decor.domain.palette import DOMAIN_COLORS, LEVEL_COLORS, TIME_COLORS, ColorPair
from lib_log_decor.domain.timestamp import TimestampFormat, format_timestamp

DOMAIN_SEPARATOR = ":"


class _TemplateDecorator(DecoratorPort):
    """Shared substitution logic over two precomputed template tables.

    ``_plain`` holds templates for lines without a domain chain and
    ``_with_domain`` for lines with one. Templates use ``{ts}`` and
    ``{domains}`` placeholders.
    """

    _plain: Mapping[LogLevel, str]
    _with_domain: Mapping[LogLevel, str]

    def __init__(self, timestamp_format: TimestampFormat) -> None:
        self._timestamp_format = TimestampFormat(timestamp_format)

    @property
    def timestamp_format(self) -> TimestampFormat:
        return self._timestamp_format

    def __call__(self, timestamp: datetime, level: LogLevel, domains: Sequence[str], is_prefix: bool) -> bytes:
        if not is_prefix:
            return b""
        template = (self._with_domain if domains else self._plain).get(level)
        if not template:
            return b""
        ts = format_timestamp(timestamp, self._timestamp_format) if self._timestamp_format.has_output else ""
        return template.format(ts=ts, domains=DOMAIN_SEPARATOR.join(domains)).encode("utf-8")


def _escape_braces(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


class BracketedDecorator(_TemplateDecorator):
    """Render ``"<ts> [<LEVEL>] "`` or ``"<ts> [<LEVEL>:<d1>:<d2>] "``.

    Examples
    --------
    >>> from datetime import timezone
    >>> deco = BracketedDecorator(TimestampFormat.TIME | TimestampFormat.UTC)
    >>> ts = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    >>> deco(ts, LogLevel.WARN, ("server", "tls"), True)
    b'07:08:09 [WARN:server:tls] '
    >>> BracketedDecorator(TimestampFormat.NONE)(ts, LogLevel.ERROR, (), True)
    b'[ERR!] '
    """

    def __init__(self, timestamp_format: TimestampFormat = TimestampFormat.NONE) -> None:
        super().__init__(timestamp_format)
        stamp = "{ts} " if self._timestamp_format.has_output else ""
        self._plain = {level: f"{stamp}[{level.tag}] " for level in LogLevel.real_levels()}
        self._with_domain = {level: f"{stamp}[{level.tag}:{{domains}}] " for level in LogLevel.real_levels()}


class ColoredDecorator(_TemplateDecorator):
    """Render coloured ``" <ts> "``, ``" <LEVEL> "`` and ``" <domains> "`` segments."""

    def __init__(
        self,
        timestamp_format: TimestampFormat = TimestampFormat.NONE,
        *,
        level_colors: Mapping[LogLevel, ColorPair] = LEVEL_COLORS,
        time_colors: ColorPair = TIME_COLORS,
        domain_colors: ColorPair = DOMAIN_COLORS,
    ) -> None:
        super().__init__(timestamp_format)
        stamp = _paint(" {ts} ", time_colors) if self._timestamp_format.has_output else ""
        domain_segment = _paint(" {domains} ", domain_colors)
        self._plain = {}
        self._with_domain = {}
        for level, colors in level_colors.items():
            if level.is_sentinel:
                continue
            label = _paint(f" {_escape_braces(level.tag)} ", colors)
            self._plain[level] = f"{stamp}{label} "
            self._with_domain[level] = f"{stamp}{label}{domain_segment} "


def _paint(text: str, colors: ColorPair) -> str:
    """Wrap ``text`` in set/reset escapes for ``colors`` on the 256-colour system."""

    style = Style(color=Color.from_ansi(colors.fg), bgcolor=Color.from_ansi(colors.bg))
    return style.render(text, color_system=ColorSystem.EIGHT_BIT)


__all__ = ["BracketedDecorator", "ColoredDecorator", "DOMAIN_SEPARATOR"]
