"""Classify acquired input and run it through the encoder."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from taml_cli.codec.taml_encoder import encode

Encoder = Callable[[str], str]

# Whitespace as trimmed by ECMAScript String.prototype.trim, BOM included
BLANK_PATTERN = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]*"
)


class Classification(Enum):
    """Whether acquired text counts as real input."""
    USABLE = "usable"
    ABSENT = "absent"


@dataclass(frozen=True)
class Success:
    """Encoder returned markup."""
    output: str


@dataclass(frozen=True)
class Failure:
    """Encoder raised; the cause is kept as-is for reporting."""
    cause: Exception


ConversionResult = Success | Failure


def classify(text: str) -> Classification:
    """Return ABSENT for empty or whitespace-only text (BOM counts as whitespace)."""
    if BLANK_PATTERN.fullmatch(text):
        return Classification.ABSENT
    return Classification.USABLE


def convert(text: str, encoder: Encoder = encode) -> ConversionResult:
    """
    Run one conversion attempt over the complete input.

    Any exception from the encoder is wrapped as a Failure without
    inspecting it. No retries.
    """
    try:
        output = encoder(text)
    except Exception as e:
        return Failure(e)
    return Success(output)
