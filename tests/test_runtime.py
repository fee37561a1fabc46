from __future__ import annotations

from io import BytesIO

import pytest

import lib_log_decor as log
from lib_log_decor import LogLevel, Options
from lib_log_decor.runtime import _state


@pytest.fixture
def output() -> BytesIO:
    target = BytesIO()
    log.configure(Options(output=target), tokens=["plain"])
    return target


def test_message_helpers_write_decorated_lines(output: BytesIO) -> None:
    log.info("%d files", 3, domain="scan")
    log.warn("low disk")
    log.error("failed: %s", "io")
    log.stop()

    assert output.getvalue() == b"[INFO:scan] 3 files\n[WARN] low disk\n[ERR!] failed: io\n"


def test_message_without_args_is_not_formatted(output: BytesIO) -> None:
    log.info("100% done")
    log.stop()

    assert output.getvalue() == b"[INFO] 100% done\n"


def test_verbose_levels_need_tokens(output: BytesIO) -> None:
    log.trace("t")
    log.debug("d")
    log.stop()

    assert output.getvalue() == b""

    target = BytesIO()
    log.configure(Options(output=target), tokens=["plain", "debug", "trace"])
    log.trace("t")
    log.debug("d")
    log.stop()

    assert target.getvalue() == b"[TRCE] t\n[DBUG] d\n"


def test_echo_and_emit_continue_extend_the_open_line(output: BytesIO) -> None:
    log.info("downloading")
    log.echo(" ...")
    log.emit(LogLevel.CONTINUE, " %s", "ok")
    log.emit(LogLevel.STOPPED, "ignored")
    log.echo("dropped")

    assert output.getvalue() == b"[INFO] downloading ... ok\n"


def test_fatal_terminates_immediately(output: BytesIO) -> None:
    log.fatal("crash")

    assert output.getvalue() == b"[FATAL!] crash\n"


def test_domain_scopes_nest(output: BytesIO) -> None:
    with log.domain("server"):
        with log.domain("tls") as chain:
            assert chain == ("server", "tls")
            log.info("handshake")
        log.push_domain("db")
        log.info("query", domain="read")
        assert log.pop_domain() == "db"
    log.info("idle")
    log.stop()

    assert output.getvalue() == (
        b"[INFO:server:tls] handshake\n[INFO:server:db:read] query\n[INFO] idle\n"
    )


def test_pop_domain_without_push_raises(output: BytesIO) -> None:
    with pytest.raises(RuntimeError):
        log.pop_domain()


def test_want_level_reuses_matching_line(output: BytesIO) -> None:
    log.want_level(LogLevel.INFO, "job")
    log.echo("a")
    log.want_level(LogLevel.INFO, "job")
    log.echo("b")
    log.want_level(LogLevel.WARN, "job")
    log.echo("c")
    log.stop()

    assert output.getvalue() == b"[INFO:job] ab\n[WARN:job] c\n"


def test_level_writers_stream_into_the_log(output: BytesIO) -> None:
    with log.error_writer("make") as out:
        out.write("line 1\nline 2")

    assert output.getvalue() == b"[ERR!:make] line 1\n[ERR!:make] line 2\n"


@pytest.mark.parametrize(
    "factory, tag",
    [
        (log.info_writer, b"INFO"),
        (log.warn_writer, b"WARN"),
        (log.fatal_writer, b"FATAL!"),
    ],
)
def test_per_level_writer_helpers(output: BytesIO, factory, tag: bytes) -> None:
    with factory() as out:
        out.write("x")

    assert output.getvalue() == b"[" + tag + b"] x\n"


def test_progress_draws_on_open_line(output: BytesIO) -> None:
    log.info("copy ")
    bar = log.progress(2)
    bar.position(1)
    bar.position(2)
    bar.done("ok")
    log.stop()

    assert output.getvalue().startswith(b"[INFO] copy [9:.")
    assert output.getvalue().endswith(b":0] ok\n")


def test_raw_format_skips_decoration() -> None:
    target = BytesIO()
    log.configure(Options(output=target), tokens=["raw"])

    log.info("plain text", domain="ignored")
    log.info("second")
    log.stop()

    assert target.getvalue() == b"plain text\nsecond\n"


def test_configure_terminates_previous_sink(output: BytesIO) -> None:
    log.info("pending")

    log.configure(Options(output=BytesIO()), tokens=["plain"])

    assert output.getvalue() == b"[INFO] pending\n"


def test_configure_ignores_unknown_token() -> None:
    target = BytesIO()

    effective = log.configure(Options(output=target), tokens=["plain", "sparkles"])
    log.info("still here")
    log.stop()

    assert effective.format is log.OutputFormat.PLAIN
    assert target.getvalue() == b"[INFO] still here\n"


def test_suppressed_debug_call_does_not_silence_an_open_writer(output: BytesIO) -> None:
    out = log.info_writer("build")
    out.write("step 1\n")
    log.debug("hidden")
    out.write("step 2")
    out.close()

    assert output.getvalue() == b"[INFO:build] step 1\n[INFO:build] step 2\n"


def test_debug_writer_is_silent_while_debug_is_off(output: BytesIO) -> None:
    log.info("copying")
    with log.debug_writer() as out:
        out.write("hidden\n")
    log.echo(" done")
    log.stop()

    assert output.getvalue() == b"[INFO] copying done\n"


def test_set_sink_installs_custom_sink() -> None:
    target = BytesIO()
    sink = log.create_plain_sink(log.StreamWriter(target))

    log.set_sink(sink)
    log.info("custom")
    log.stop()

    assert log.get_sink() is sink
    assert target.getvalue() == b"custom\n"


def test_close_runs_terminal_restore_once() -> None:
    calls: list[str] = []
    log.set_sink(log.create_plain_sink(log.StreamWriter(BytesIO())))
    _state.current_runtime(lambda: None).restore_terminal = lambda: calls.append("restored")  # type: ignore[arg-type,return-value]

    log.close()
    log.close()

    assert calls == ["restored"]


def test_shutdown_drops_runtime(output: BytesIO) -> None:
    log.info("bye")

    log.shutdown()

    assert output.getvalue() == b"[INFO] bye\n"
    assert not _state.is_configured()


def test_stop_without_runtime_is_a_no_op() -> None:
    log.shutdown()

    log.stop()

    assert not _state.is_configured()


def test_default_sink_writes_to_stderr(capfd: pytest.CaptureFixture[str]) -> None:
    log.shutdown()

    log.warn("unconfigured")
    log.stop()

    captured = capfd.readouterr()
    assert captured.err.endswith("[WARN] unconfigured\n")
    assert captured.err.splitlines()[-1][2] == ":"


def test_summary_info_lists_metadata() -> None:
    summary = log.summary_info()

    assert summary.startswith("Info for lib_log_decor:")
    assert "version" in summary
