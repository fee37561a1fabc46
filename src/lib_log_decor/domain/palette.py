"""256-colour palette indices for the coloured decorator.

Purpose
-------
Keep the colour choices of every decoration segment in one table, expressed as
indices into the standard 256-colour ANSI palette.

Contents
--------
* :func:`ansi_rgb` / :func:`ansi_gray` index helpers.
* :class:`ColorPair` plus the ``TIME_COLORS``, ``DOMAIN_COLORS`` and
  ``LEVEL_COLORS`` tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .levels import LogLevel

BLACK = 0
WHITE = 15


def ansi_rgb(r: int, g: int, b: int) -> int:
    """Return the colour-cube index closest to the 8-bit ``(r, g, b)`` triple.

    Examples
    --------
    >>> ansi_rgb(0, 0, 0)
    16
    >>> ansi_rgb(255, 255, 255)
    231
    """

    rr = (r * 3) >> 7
    gg = (g * 3) >> 7
    bb = (b * 3) >> 7
    return rr * 36 + gg * 6 + bb + 16


def ansi_gray(lightness: int) -> int:
    """Return the grey-ramp index for an 8-bit ``lightness``.

    Examples
    --------
    >>> ansi_gray(0), ansi_gray(128), ansi_gray(255)
    (0, 244, 15)
    """

    v = (lightness * 25 + 128) >> 8
    if v == 0:
        return BLACK
    if v == 25:
        return WHITE
    return v + 231


@dataclass(slots=True, frozen=True)
class ColorPair:
    """Foreground/background palette indices for one decoration segment."""

    fg: int
    bg: int


TIME_COLORS = ColorPair(fg=BLACK, bg=ansi_gray(128))
DOMAIN_COLORS = ColorPair(fg=WHITE, bg=ansi_gray(64))

LEVEL_COLORS: Mapping[LogLevel, ColorPair] = MappingProxyType(
    {
        LogLevel.TRACE: ColorPair(fg=ansi_gray(96), bg=ansi_rgb(32, 32, 48)),
        LogLevel.DEBUG: ColorPair(fg=ansi_gray(96), bg=ansi_rgb(72, 32, 64)),
        LogLevel.INFO: ColorPair(fg=ansi_gray(240), bg=ansi_rgb(64, 64, 96)),
        LogLevel.WARN: ColorPair(fg=BLACK, bg=ansi_rgb(128, 128, 64)),
        LogLevel.ERROR: ColorPair(fg=WHITE, bg=ansi_rgb(128, 64, 64)),
        LogLevel.FATAL: ColorPair(fg=BLACK, bg=ansi_rgb(240, 64, 64)),
    }
)


__all__ = [
    "BLACK",
    "ColorPair",
    "DOMAIN_COLORS",
    "LEVEL_COLORS",
    "TIME_COLORS",
    "WHITE",
    "ansi_gray",
    "ansi_rgb",
]
