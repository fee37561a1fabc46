"""Decorator port describing how prefixes and suffixes are produced.

Purpose
-------
Define the capability the sink needs from a decoration strategy so the
bracketed and coloured variants can be swapped at configuration time.

Contents
--------
* :class:`DecoratorPort` - runtime-checkable protocol with ``__call__``.

System Role
-----------
Implementations must be deterministic and side-effect free: the transducer
calls them twice per physical line.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol, runtime_checkable

from lib_log_decor.domain.levels import LogLevel


@runtime_checkable
class DecoratorPort(Protocol):
    """Return the decoration bytes for one side of a physical line."""

    def __call__(self, timestamp: datetime, level: LogLevel, domains: Sequence[str], is_prefix: bool) -> bytes:
        """Return the prefix (``is_prefix=True``) or suffix bytes, possibly empty."""


__all__ = ["DecoratorPort"]
