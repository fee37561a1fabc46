from __future__ import annotations

import sys
from io import BytesIO

from lib_log_decor.adapters.decorators import BracketedDecorator, ColoredDecorator
from lib_log_decor.adapters.terminal import enable_virtual_terminal
from lib_log_decor.adapters.writer import StreamWriter
from lib_log_decor.application.ports import ClockPort, DecoratorPort, SinkPort, TerminalPort, WriterPort
from lib_log_decor.application.use_cases.filter import FilterOptions, LevelFilter
from lib_log_decor.application.use_cases.sinks import create_decorated_sink, create_plain_sink
from lib_log_decor.runtime._composition import SystemClock


def test_writer_adapter_satisfies_port() -> None:
    assert isinstance(StreamWriter(BytesIO()), WriterPort)
    assert isinstance(StreamWriter(sys.stderr), WriterPort)


def test_decorators_satisfy_port() -> None:
    assert isinstance(BracketedDecorator(), DecoratorPort)
    assert isinstance(ColoredDecorator(), DecoratorPort)


def test_sinks_satisfy_port() -> None:
    writer = StreamWriter(BytesIO())
    decorated = create_decorated_sink(writer, BracketedDecorator())

    assert isinstance(decorated, SinkPort)
    assert isinstance(create_plain_sink(writer), SinkPort)
    assert isinstance(LevelFilter(FilterOptions(), decorated), SinkPort)


def test_clock_and_terminal_satisfy_ports() -> None:
    assert isinstance(SystemClock(), ClockPort)
    assert SystemClock().now().tzinfo is not None
    assert isinstance(enable_virtual_terminal, TerminalPort)
