"""Read piped ANSI text from standard input."""

import codecs
import sys
from typing import BinaryIO, Iterable, Iterator

CHUNK_SIZE = 64 * 1024


class InputReadError(Exception):
    """Raised when the input stream fails before end-of-stream."""

    def __init__(self, message: str, bytes_received: int = 0):
        super().__init__(message)
        self.bytes_received = bytes_received


def decode_chunks(chunks: Iterable[bytes]) -> str:
    """
    Decode byte chunks as UTF-8, in arrival order.

    Multi-byte characters split across chunk boundaries are joined
    correctly; invalid bytes become U+FFFD. If the iterable fails with
    an I/O error, the partial text is discarded and InputReadError is
    raised instead.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    parts: list[str] = []
    received = 0

    try:
        for chunk in chunks:
            received += len(chunk)
            parts.append(decoder.decode(chunk))
    except (OSError, ValueError) as e:
        raise InputReadError(str(e) or type(e).__name__, bytes_received=received) from e

    parts.append(decoder.decode(b"", final=True))
    return "".join(parts)


def _iter_chunks(stream: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    # read1 returns whatever is available instead of waiting for a full chunk
    read = getattr(stream, "read1", stream.read)
    while True:
        chunk = read(chunk_size)
        if not chunk:
            return
        yield chunk


def read_stream(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> str:
    """Read a binary stream to exhaustion and return its UTF-8 text."""
    return decode_chunks(_iter_chunks(stream, chunk_size))


def read_stdin() -> str:
    """Read all of standard input. Blocks until the stream is closed."""
    stream = getattr(sys.stdin, "buffer", None)
    if stream is None:
        raise InputReadError("standard input is not available")
    return read_stream(stream)
