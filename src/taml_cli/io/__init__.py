"""Input handling for the CLI."""

from taml_cli.io.reader import InputReadError, decode_chunks, read_stdin, read_stream

__all__ = ["InputReadError", "decode_chunks", "read_stdin", "read_stream"]
