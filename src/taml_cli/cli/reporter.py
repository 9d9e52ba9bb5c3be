"""Write conversion results to stdout and diagnostics to stderr."""

import typer
from rich.console import Console

NO_INPUT_MESSAGE = (
    "Error: No input provided. Please pipe ANSI text to this command.",
    "Usage: cat file.txt | taml-cli",
    '       echo -e "\\e[31mRed text\\e[0m" | taml-cli',
)
CONVERSION_ERROR_LABEL = "Error processing ANSI text:"
READ_ERROR_LABEL = "Error reading input:"

# Literal text only: no markup, highlighting, emoji codes or wrapping
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def _describe(error: BaseException) -> str:
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name


def _error(line: str) -> None:
    err_console.print(line, markup=False)


def write_output(text: str) -> None:
    """Write converted markup plus one trailing newline to stdout."""
    # color=True keeps escape sequences the encoder passed through
    typer.echo(text, color=True)


def report_no_input() -> None:
    for line in NO_INPUT_MESSAGE:
        _error(line)


def report_conversion_error(cause: Exception) -> None:
    _error(f"{CONVERSION_ERROR_LABEL} {_describe(cause)}")


def report_read_error(error: Exception) -> None:
    cause = error.__cause__ or error
    _error(f"{READ_ERROR_LABEL} {_describe(cause)}")
