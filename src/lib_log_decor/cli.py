"""Click command line interface for lib_log_decor.

Purpose
-------
Expose the decorator on the shell: print the metadata banner, show every
decoration style, or pipe another program's output through a level writer.

Contents
--------
* :func:`cli` - click group with global ``--log`` tokens and dotenv toggle.
* ``info`` / ``demo`` / ``pipe`` sub-commands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
import time
from collections.abc import Sequence

import click

from . import __init__conf__
from . import config as log_config
from . import runtime as log
from .domain.levels import LogLevel
from .runtime import CONFIGURATION_TOKENS

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_LEVEL_NAMES = [level.name.lower() for level in LogLevel.real_levels()]


def _configure_from_context(ctx: click.Context) -> None:
    tokens = log_config.tokens_from_env() + list(ctx.obj or ())
    log.configure(tokens=tokens)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help="Load environment variables from the nearest .env before running commands.",
)
@click.option(
    "--log",
    "tokens",
    multiple=True,
    type=click.Choice(CONFIGURATION_TOKENS),
    help="Configuration token applied after LOG_DECOR_OPTIONS; repeatable.",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None, tokens: tuple[str, ...]) -> None:
    """Decorate console output line by line with timestamps, levels, and domains."""

    if log_config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()
    ctx.obj = tokens
    if ctx.invoked_subcommand is None:
        click.echo(log.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(log.summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--delay", type=float, default=0.0, show_default=True, help="Seconds between progress steps.")
@click.pass_context
def cli_demo(ctx: click.Context, delay: float) -> None:
    """Emit one line per level, nested domains, a streamed block, and a progress bar."""

    _configure_from_context(ctx)
    try:
        for level in LogLevel.real_levels():
            log.emit(level, "%s message", level.name.lower())
        with log.domain("server"):
            log.info("listening on port %d", 8080)
            log.warn("certificate expires soon", domain="tls")
        with log.info_writer("build") as out:
            out.write("compiling\r\nlinking")
            out.write("\ndone")
        log.info("downloading ")
        bar = log.progress(10)
        for step in range(1, 11):
            bar.position(step)
            if delay:
                time.sleep(delay)
        bar.done("complete")
    finally:
        log.shutdown()


@cli.command("pipe", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--level",
    type=click.Choice(_LEVEL_NAMES, case_sensitive=False),
    default="info",
    show_default=True,
    help="Level every piped line is logged at.",
)
@click.option("--domain", "domains", multiple=True, help="Domain segment; repeat to build a chain.")
@click.option("--chunk-size", type=click.IntRange(min=1), default=4096, show_default=True)
@click.pass_context
def cli_pipe(ctx: click.Context, level: str, domains: tuple[str, ...], chunk_size: int) -> None:
    """Copy standard input to the log, decorating every line."""

    _configure_from_context(ctx)
    stdin = click.get_binary_stream("stdin")
    read = getattr(stdin, "read1", stdin.read)
    try:
        with log.level_writer(LogLevel.from_name(level), domains) as out:
            while True:
                chunk = read(chunk_size)
                if not chunk:
                    break
                out.write(chunk)
    finally:
        log.shutdown()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the click group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_log_decor, version ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return 0


__all__ = ["cli", "main"]
