from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_log_decor.domain.timestamp import TimestampFormat, format_timestamp

TS = datetime(2023, 12, 31, 23, 59, 58, 1234, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "fmt, expected",
    [
        (TimestampFormat.NONE, ""),
        (TimestampFormat.UTC, ""),
        (TimestampFormat.MICROSECONDS | TimestampFormat.UTC, ""),
        (TimestampFormat.DATE | TimestampFormat.UTC, "2023/12/31"),
        (TimestampFormat.TIME | TimestampFormat.UTC, "23:59:58"),
        (TimestampFormat.TIME | TimestampFormat.MICROSECONDS | TimestampFormat.UTC, "23:59:58.001234"),
        (
            TimestampFormat.DATE | TimestampFormat.TIME | TimestampFormat.MICROSECONDS | TimestampFormat.UTC,
            "2023/12/31 23:59:58.001234",
        ),
    ],
)
def test_format_timestamp_in_utc(fmt: TimestampFormat, expected: str) -> None:
    assert format_timestamp(TS, fmt) == expected


def test_utc_flag_converts_offset_timestamps() -> None:
    local = datetime(2024, 1, 1, 1, 30, tzinfo=timezone(timedelta(hours=2)))

    assert format_timestamp(local, TimestampFormat.DATE | TimestampFormat.TIME | TimestampFormat.UTC) == "2023/12/31 23:30:00"


def test_without_utc_flag_uses_local_time() -> None:
    expected = TS.astimezone().strftime("%H:%M:%S")

    assert format_timestamp(TS, TimestampFormat.TIME) == expected


def test_has_output_requires_date_or_time() -> None:
    assert not TimestampFormat.NONE.has_output
    assert not (TimestampFormat.MICROSECONDS | TimestampFormat.UTC).has_output
    assert TimestampFormat.DATE.has_output
    assert TimestampFormat.TIME.has_output
