"""Input classification and conversion."""

from taml_cli.convert.service import (
    Classification,
    ConversionResult,
    Encoder,
    Failure,
    Success,
    classify,
    convert,
)

__all__ = [
    "Classification",
    "ConversionResult",
    "Encoder",
    "Failure",
    "Success",
    "classify",
    "convert",
]
