"""Root sink container and access helpers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from threading import RLock

from lib_log_decor.application.ports import SinkPort


def _noop() -> None:
    return None


@dataclass(slots=True)
class LoggingRuntime:
    """Root sink plus the action undoing terminal changes made while configuring."""

    sink: SinkPort
    restore_terminal: Callable[[], None] = field(default=_noop)


_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> LoggingRuntime | None:
    """Remove and return the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        runtime, _STATE = _STATE, None
        return runtime


def current_runtime(default: Callable[[], SinkPort]) -> LoggingRuntime:
    """Return the active runtime, installing one around ``default()`` on first use."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is None:
            _STATE = LoggingRuntime(sink=default())
        return _STATE


def is_configured() -> bool:
    """Return ``True`` when a runtime is installed."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "LoggingRuntime",
    "clear_runtime",
    "current_runtime",
    "is_configured",
    "set_runtime",
]
