from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timezone
from io import BytesIO

import pytest

import lib_log_decor as log
from lib_log_decor.adapters.decorators import BracketedDecorator
from lib_log_decor.adapters.writer import StreamWriter
from lib_log_decor.application.use_cases.sinks import LineSink, create_decorated_sink

FIXED_TS = datetime(2024, 3, 4, 5, 6, 7, 890123, tzinfo=timezone.utc)


class FixedClock:
    """Clock port returning the same instant on every call."""

    def __init__(self, value: datetime = FIXED_TS) -> None:
        self.value = value

    def now(self) -> datetime:
        return self.value


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def buffer() -> BytesIO:
    return BytesIO()


@pytest.fixture
def bracketed_sink(buffer: BytesIO, fixed_clock: FixedClock) -> LineSink:
    """Decorated sink without timestamps writing into ``buffer``."""

    return create_decorated_sink(StreamWriter(buffer), BracketedDecorator(), clock=fixed_clock)


@pytest.fixture(autouse=True)
def reset_runtime() -> Iterator[None]:
    try:
        yield
    finally:
        log.shutdown()
