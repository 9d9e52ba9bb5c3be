"""Encoding of ANSI-styled text into TAML markup."""

from taml_cli.codec.taml_encoder import EncodeError, TamlEncoder, encode

__all__ = ["EncodeError", "TamlEncoder", "encode"]
