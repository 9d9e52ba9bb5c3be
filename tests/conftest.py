"""Shared fixtures for CLI and conversion tests."""

from typing import Callable, Iterator

import pytest


class StubEncoderError(Exception):
    """Raised by the failing stub encoder."""


class RecordingEncoder:
    """Encoder stub that records its inputs and returns a fixed transform."""

    def __init__(self, transform: Callable[[str], str] = lambda text: text):
        self.transform = transform
        self.calls: list[str] = []

    def __call__(self, text: str) -> str:
        self.calls.append(text)
        return self.transform(text)


@pytest.fixture
def identity_encoder() -> RecordingEncoder:
    return RecordingEncoder()


@pytest.fixture
def failing_encoder() -> Callable[[str], str]:
    def encoder(text: str) -> str:
        raise StubEncoderError("Encoding failed")
    return encoder


@pytest.fixture
def failing_chunks() -> Callable[[list[bytes]], Iterator[bytes]]:
    """Chunk iterables that yield some data and then fail like a broken pipe."""
    def make(chunks: list[bytes]) -> Iterator[bytes]:
        yield from chunks
        raise OSError("Stdin read error")
    return make
