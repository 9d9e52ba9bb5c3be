"""Core color and tag definitions for TAML markup."""

from taml_cli.core.color import Color, ColorMode

__all__ = ["Color", "ColorMode"]
