"""Terminal capability probing for automatic colour selection.

Purpose
-------
Decide whether the configured output understands ANSI colour sequences and,
on Windows consoles, switch virtual-terminal processing on.

Contents
--------
* :func:`enable_virtual_terminal` - implementation of
  :class:`~lib_log_decor.application.ports.TerminalPort`.

System Role
-----------
Consulted once by the runtime composition when the output format is ``AUTO``.
The returned restore action is kept by the runtime and invoked on
:func:`lib_log_decor.close`.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import IO, Any

from rich.console import Console

LOGGER = logging.getLogger(__name__)

_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


def _noop() -> None:
    return None


def enable_virtual_terminal(stream: IO[Any]) -> tuple[bool, Callable[[], None]]:
    """Return ``(ok, restore)`` for colour output on ``stream``.

    ``ok`` is ``True`` when Rich detects a colour-capable terminal behind
    ``stream`` (``NO_COLOR`` and ``FORCE_COLOR`` are honoured). On Windows the
    console mode is switched to virtual-terminal processing first and
    ``restore`` puts the previous mode back.
    """

    restore: Callable[[], None] = _noop
    if sys.platform == "win32":
        enabled, restore = _enable_windows_vt(stream)
        if not enabled:
            return False, _noop

    console = Console(file=stream)
    ok = console.is_terminal and console.color_system is not None and not console.no_color
    if not ok:
        restore()
        return False, _noop
    return True, restore


def _enable_windows_vt(stream: IO[Any]) -> tuple[bool, Callable[[], None]]:  # pragma: no cover - windows only
    try:
        import ctypes
        import msvcrt

        handle = msvcrt.get_osfhandle(stream.fileno())
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
    except (AttributeError, ImportError, OSError, ValueError):
        return False, _noop

    mode = ctypes.c_uint32()
    if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
        return False, _noop
    original = mode.value
    if original & _ENABLE_VIRTUAL_TERMINAL_PROCESSING:
        return True, _noop
    if not kernel32.SetConsoleMode(handle, original | _ENABLE_VIRTUAL_TERMINAL_PROCESSING):
        LOGGER.debug("SetConsoleMode refused virtual terminal processing")
        return False, _noop

    def restore() -> None:
        kernel32.SetConsoleMode(handle, original)

    return True, restore


__all__ = ["enable_virtual_terminal"]
