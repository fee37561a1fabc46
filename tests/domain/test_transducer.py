from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

import pytest

from lib_log_decor.domain.levels import LogLevel
from lib_log_decor.domain.transducer import LineTransducer


def _decorate(ts: datetime, level: LogLevel, domains: Sequence[str], is_prefix: bool) -> bytes:
    return b"<" if is_prefix else b">"


class _Collector:
    def __init__(self) -> None:
        self.parts: list[bytes] = []

    def __call__(self, payload: bytes) -> None:
        self.parts.append(payload)

    @property
    def output(self) -> bytes:
        return b"".join(self.parts)


def _run(*chunks: bytes) -> tuple[bytes, LineTransducer]:
    collector = _Collector()
    transducer = LineTransducer(_decorate, collector)
    for chunk in chunks:
        transducer.feed(None, LogLevel.INFO, (), chunk)  # type: ignore[arg-type]
    return collector.output, transducer


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"abc", b"<abc"),
        (b"line1\nline2", b"<line1>\n<line2"),
        (b"a\r\nb", b"<a>\r\n<b"),
        (b"a\rb", b"<a>\r<b"),
        (b"\n", b"<>\n"),
        (b"a\n\nb\n", b"<a>\n<>\n<b>\n"),
        (b"x\r\r\ny", b"<x>\r<>\r\n<y"),
    ],
)
def test_lines_are_decorated_and_terminators_preserved(data: bytes, expected: bytes) -> None:
    output, _ = _run(data)

    assert output == expected


@pytest.mark.parametrize(
    "data",
    [
        b"one\ntwo\r\nthree\rfour\n",
        b"\r\n\r\n\n\r\r",
        b"trailing text without newline",
        b"a\r\nb\r",
    ],
)
def test_output_is_independent_of_chunk_boundaries(data: bytes) -> None:
    whole, _ = _run(data)

    for split in range(len(data) + 1):
        pieces, _ = _run(data[:split], data[split:])
        assert pieces == whole, split

    bytewise, _ = _run(*(data[i : i + 1] for i in range(len(data))))
    assert bytewise == whole


def test_crlf_split_across_chunks_is_one_terminator() -> None:
    output, transducer = _run(b"a\r")

    assert output == b"<a>"
    assert transducer.holds_carriage_return

    collector = _Collector()
    transducer2 = LineTransducer(_decorate, collector)
    transducer2.feed(None, LogLevel.INFO, (), b"a\r")  # type: ignore[arg-type]
    transducer2.feed(None, LogLevel.INFO, (), b"\nb")  # type: ignore[arg-type]

    assert collector.output == b"<a>\r\n<b"


def test_held_carriage_return_is_released_by_next_content() -> None:
    output, transducer = _run(b"a\r", b"b")

    assert output == b"<a>\r<b"
    assert not transducer.holds_carriage_return


def test_empty_chunk_changes_nothing() -> None:
    collector = _Collector()
    transducer = LineTransducer(_decorate, collector)

    transducer.feed(None, LogLevel.INFO, (), b"")  # type: ignore[arg-type]

    assert collector.parts == []
    assert transducer.at_line_start


def test_open_line_continues_without_new_prefix() -> None:
    output, transducer = _run(b"partial", b" more\n")

    assert output == b"<partial more>\n"
    assert transducer.at_line_start


def test_empty_decorations_are_not_written() -> None:
    parts: list[bytes] = []
    transducer = LineTransducer(lambda *args: b"", parts.append)

    transducer.feed(None, LogLevel.INFO, (), b"a\nb")  # type: ignore[arg-type]

    assert b"" not in parts
    assert b"".join(parts) == b"a\nb"


def test_decorate_receives_call_arguments() -> None:
    calls: list[tuple[object, LogLevel, Sequence[str], bool]] = []

    def recording(ts, level, domains, is_prefix):
        calls.append((ts, level, domains, is_prefix))
        return b""

    transducer = LineTransducer(recording, lambda payload: None)
    transducer.feed("ts", LogLevel.WARN, ("net",), b"x\n")  # type: ignore[arg-type]

    assert calls == [("ts", LogLevel.WARN, ("net",), True), ("ts", LogLevel.WARN, ("net",), False)]


def test_reset_discards_carry() -> None:
    _, transducer = _run(b"a\r")

    transducer.reset()

    assert transducer.at_line_start
    assert not transducer.holds_carriage_return
