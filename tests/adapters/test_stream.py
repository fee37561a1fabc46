from __future__ import annotations

from io import BytesIO

import pytest

from lib_log_decor.adapters.stream import LevelWriter
from lib_log_decor.application.use_cases.filter import FilterOptions, LevelFilter
from lib_log_decor.application.use_cases.sinks import LineSink
from lib_log_decor.domain.levels import LogLevel


def test_writer_decorates_each_streamed_line(bracketed_sink: LineSink, buffer: BytesIO) -> None:
    with LevelWriter(bracketed_sink, LogLevel.INFO, "build") as out:
        out.write("compiling\r\nlink")
        out.write(b"ing\n")
        out.write("done")

    assert buffer.getvalue() == b"[INFO:build] compiling\r\n[INFO:build] linking\n[INFO:build] done\n"


def test_write_returns_consumed_length(bracketed_sink: LineSink) -> None:
    out = LevelWriter(bracketed_sink, LogLevel.DEBUG)

    assert out.write("héllo") == 5
    assert out.write(b"h\xc3\xa9") == 3


def test_writer_opens_its_line_immediately(bracketed_sink: LineSink, buffer: BytesIO) -> None:
    bracketed_sink.emit(None, LogLevel.INFO, None, b"before")

    writer = LevelWriter(bracketed_sink, LogLevel.WARN)

    assert buffer.getvalue() == b"[INFO] before\n"
    assert writer.level is LogLevel.WARN
    writer.close()


def test_close_is_idempotent_and_blocks_writes(bracketed_sink: LineSink, buffer: BytesIO) -> None:
    out = LevelWriter(bracketed_sink, LogLevel.ERROR)
    out.write("x")
    out.close()
    out.close()

    assert out.closed
    assert not out.writable()
    assert buffer.getvalue() == b"[ERR!] x\n"
    with pytest.raises(ValueError, match="closed"):
        out.write("y")


@pytest.mark.parametrize("level", [LogLevel.STOPPED, LogLevel.CONTINUE])
def test_sentinel_levels_are_rejected(bracketed_sink: LineSink, level: LogLevel) -> None:
    with pytest.raises(ValueError, match="real level"):
        LevelWriter(bracketed_sink, level)


def test_writer_works_with_print(bracketed_sink: LineSink, buffer: BytesIO) -> None:
    with LevelWriter(bracketed_sink, LogLevel.INFO, ["a", "b"]) as out:
        print("one", "two", file=out, end="")

    assert buffer.getvalue() == b"[INFO:a:b] one two\n"


def test_writer_for_a_gated_level_leaves_the_open_line_alone(bracketed_sink: LineSink, buffer: BytesIO) -> None:
    filtered = LevelFilter(FilterOptions(), bracketed_sink)
    filtered.emit(None, LogLevel.INFO, None, b"copying")

    with LevelWriter(filtered, LogLevel.DEBUG) as out:
        assert out.write("hidden\n") == 7
    filtered.emit(None, LogLevel.CONTINUE, None, b" done")
    filtered.flush()

    assert buffer.getvalue() == b"[INFO] copying done\n"


def test_trailing_newline_before_close_adds_an_empty_line(bracketed_sink: LineSink, buffer: BytesIO) -> None:
    with LevelWriter(bracketed_sink, LogLevel.INFO) as out:
        out.write("last\n")

    assert buffer.getvalue() == b"[INFO] last\n[INFO] \n"
