"""Best-effort byte writer over text or binary streams.

Purpose
-------
Give the sink a single ``write(bytes)`` target regardless of whether the
configured output is ``sys.stderr``, a binary file, or an in-memory buffer.

Contents
--------
* :class:`StreamWriter` - implementation of :class:`WriterPort`.

System Role
-----------
Last hop of the pipeline. Logging must never crash its host, so write errors
are reported through :mod:`logging` at debug level and otherwise ignored.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Any

from lib_log_decor.application.ports.writer import WriterPort

LOGGER = logging.getLogger(__name__)


class StreamWriter(WriterPort):
    """Write bytes to ``stream``, going through its binary buffer when it has one.

    Examples
    --------
    >>> text = io.StringIO()
    >>> StreamWriter(text).write(b"caf\\xc3\\xa9\\n")
    >>> text.getvalue()
    'café\\n'
    """

    def __init__(self, stream: IO[Any], *, encoding: str = "utf-8", flush: bool = True) -> None:
        self._stream = stream
        self._encoding = encoding
        self._flush = flush

    @property
    def stream(self) -> IO[Any]:
        return self._stream

    def write(self, payload: bytes) -> None:
        """Write ``payload``; failures are logged and swallowed."""

        if not payload:
            return
        try:
            self._write(payload)
        except (OSError, ValueError):
            LOGGER.debug("Dropping %d bytes: write to %r failed", len(payload), self._stream, exc_info=True)

    def _write(self, payload: bytes) -> None:
        stream = self._stream
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            stream.write(payload)
        else:
            buffer = getattr(stream, "buffer", None)
            if buffer is not None:
                # text already queued in the wrapper must reach the buffer first
                stream.flush()
                stream = buffer
                stream.write(payload)
            else:
                stream.write(payload.decode(self._encoding, errors="replace"))
        if self._flush:
            stream.flush()


__all__ = ["StreamWriter"]
