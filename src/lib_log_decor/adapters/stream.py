"""File-like adapter streaming arbitrary output into one log level.

Useful for piping subprocess output or build-tool progress into the log: the
writer opens a line at its level on creation and every ``write`` continues the
open line, letting the transducer decorate each physical line as it arrives.
A writer whose level the sink does not allow discards everything written to it.
"""

from __future__ import annotations

from types import TracebackType

from lib_log_decor.application.ports import SinkPort
from lib_log_decor.domain.levels import LogLevel
from lib_log_decor.domain.line_state import DomainArg, as_domain_chain


class LevelWriter:
    """Write text or bytes into ``sink`` at ``level``.

    Examples
    --------
    >>> from io import BytesIO
    >>> from lib_log_decor.adapters.writer import StreamWriter
    >>> from lib_log_decor.adapters.decorators import BracketedDecorator
    >>> from lib_log_decor.application.use_cases.sinks import create_decorated_sink
    >>> buffer = BytesIO()
    >>> sink = create_decorated_sink(StreamWriter(buffer), BracketedDecorator())
    >>> with LevelWriter(sink, LogLevel.WARN, "make") as out:
    ...     _ = out.write("step 1\\nstep")
    ...     _ = out.write(b" 2")
    >>> buffer.getvalue()
    b'[WARN:make] step 1\\n[WARN:make] step 2\\n'
    """

    def __init__(self, sink: SinkPort, level: LogLevel, domain: DomainArg = None, *, encoding: str = "utf-8") -> None:
        if level.is_sentinel:
            raise ValueError(f"LevelWriter needs a real level, got {level.name}")
        self._sink = sink
        self._level = level
        self._domains = as_domain_chain(domain)
        self._encoding = encoding
        self._closed = False
        self._enabled = sink.allows(level)
        if self._enabled:
            sink.emit(None, level, self._domains, b"")

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def closed(self) -> bool:
        return self._closed

    def writable(self) -> bool:
        return not self._closed

    def write(self, data: bytes | bytearray | str) -> int:
        """Append ``data`` to the open line and return the number of items consumed."""

        if self._closed:
            raise ValueError("I/O operation on closed LevelWriter")
        if self._enabled:
            payload = data.encode(self._encoding) if isinstance(data, str) else bytes(data)
            self._sink.emit(None, LogLevel.CONTINUE, self._domains, payload)
        return len(data)

    def flush(self) -> None:
        """Nothing is buffered here; present for file-like compatibility."""

    def close(self) -> None:
        """Terminate the open line and refuse further writes."""

        if self._closed:
            return
        self._closed = True
        if self._enabled:
            self._sink.emit(None, LogLevel.STOPPED, self._domains, b"")

    def __enter__(self) -> "LevelWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["LevelWriter"]
