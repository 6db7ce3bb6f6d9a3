"""Root CLI command for headr: option parsing and run wiring."""

from __future__ import annotations

import contextlib
import os
import sys

import click
from click.core import ParameterSource

from headr import PROG_NAME, __version__
from headr._base import HeadrCommand
from headr.config.models import HeadConfig
from headr.domain.counts import BYTE_COUNT_ERROR, LINE_COUNT_ERROR, count_error, parse_positive
from headr.errors import HeadrUsageError, WriteError


def _parse_count(ctx: click.Context, prefix: str, value: str) -> int:
    try:
        return parse_positive(value)
    except ValueError as exc:
        raise HeadrUsageError(count_error(prefix, str(exc)), ctx=ctx) from exc


def _silence_stdout() -> None:
    """Point the stdout descriptor at devnull so the exit-time flush can't fail again."""
    with contextlib.suppress(OSError, ValueError):
        fd = sys.stdout.fileno()
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, fd)
        os.close(devnull)


@click.command(
    cls=HeadrCommand,
    examples="""\
  headr notes.txt
  headr -n 3 notes.txt todo.txt
  headr -c 64 data.bin
  cat notes.txt | headr -n 5
  headr a.txt - b.txt < stdin.txt""",
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.argument("files", nargs=-1, metavar="[FILE]...")
@click.option(
    "-n",
    "--lines",
    metavar="LINES",
    default="10",
    show_default=True,
    help="Number of lines to print.",
)
@click.option(
    "-c",
    "--bytes",
    "bytes_",
    metavar="BYTES",
    default=None,
    help="Number of bytes to print. Conflicts with --lines.",
)
@click.option("--debug", is_flag=True, help="Debug log events on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    lines: str,
    bytes_: str | None,
    debug: bool,
    log_json: bool,
) -> None:
    """Print the first lines or bytes of each FILE.

    With no FILE, or when FILE is -, read standard input. With more than
    one FILE, precede each with a header giving the file name.
    """
    # The conflict is reported before either count is validated.
    if bytes_ is not None and ctx.get_parameter_source("lines") is ParameterSource.COMMANDLINE:
        raise HeadrUsageError("--lines and --bytes are mutually exclusive", ctx=ctx)

    if bytes_ is not None:
        config = HeadConfig.build(files, bytes_=_parse_count(ctx, BYTE_COUNT_ERROR, bytes_))
    else:
        config = HeadConfig.build(files, lines=_parse_count(ctx, LINE_COUNT_ERROR, lines))

    from headr.config.logging import configure_logging
    from headr.config.settings import HeadrSettings

    configure_logging(HeadrSettings.from_cli(debug=debug, log_json=log_json))

    from headr.services.head import HeadService

    try:
        HeadService(config).run(stdout=sys.stdout.buffer, stderr=sys.stderr)
    except BrokenPipeError:
        # The reader went away; there is nobody left to report to.
        _silence_stdout()
        ctx.exit(1)
    except OSError as exc:
        from headr.infrastructure.sources import os_error_text

        raise WriteError(os_error_text(exc)) from exc
