"""Port for the raw byte destination at the end of the pipeline."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class WriterPort(Protocol):
    """Accept already decorated bytes; failures must not propagate."""

    def write(self, payload: bytes) -> None: ...


__all__ = ["WriterPort"]
