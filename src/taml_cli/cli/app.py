"""Typer CLI application: read stdin, convert, report."""

from enum import IntEnum
from typing import Callable

import typer

from taml_cli.cli import reporter
from taml_cli.codec.taml_encoder import encode
from taml_cli.convert.service import Classification, Encoder, Failure, classify, convert
from taml_cli.io.reader import InputReadError, read_stdin


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1


def run(
    read_input: Callable[[], str] = read_stdin,
    encoder: Encoder = encode,
) -> ExitCode:
    """
    Run one conversion from input to report.

    Every failure is reported on stderr exactly once and yields
    ExitCode.FAILURE; output is written to stdout only on success.
    The process is never exited from here.
    """
    try:
        text = read_input()
    except InputReadError as e:
        reporter.report_read_error(e)
        return ExitCode.FAILURE

    if classify(text) is Classification.ABSENT:
        reporter.report_no_input()
        return ExitCode.FAILURE

    # Pass the untrimmed text; surrounding whitespace is part of the output
    result = convert(text, encoder)
    if isinstance(result, Failure):
        reporter.report_conversion_error(result.cause)
        return ExitCode.FAILURE

    reporter.write_output(result.output)
    return ExitCode.SUCCESS


def create_app(
    encoder: Encoder = encode,
    read_input: Callable[[], str] = read_stdin,
) -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="taml-cli",
        help="Convert ANSI escape sequences on stdin to TAML markup.",
        add_completion=False,
        no_args_is_help=False,
    )

    # Arguments are ignored; all input comes from stdin
    @app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
    def convert_stdin() -> None:
        """Convert ANSI text piped on stdin to TAML markup on stdout."""
        raise typer.Exit(int(run(read_input, encoder)))

    return app
