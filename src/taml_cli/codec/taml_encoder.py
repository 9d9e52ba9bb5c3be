"""ANSI SGR sequence to TAML markup encoder."""

import re

from taml_cli.core.color import Color
from taml_cli.core.constants import BG, FG, STYLE_RESETS, STYLE_TAGS


class EncodeError(ValueError):
    """Raised when input cannot be encoded as TAML."""


class TamlEncoder:
    """
    Stateful encoder that turns ANSI-styled text into TAML markup.

    Only SGR sequences (ESC [ params m) are interpreted; any other
    escape sequence is passed through as plain text. Each slot
    (foreground, background, and every style) holds at most one open
    tag, and tags are always closed in nesting order.
    """

    # Regex for SGR sequences: ESC [ params m
    SGR_PATTERN = re.compile(r'\x1b\[([0-9;]*)m')

    def __init__(self) -> None:
        self._parts: list[str] = []
        # Open tags, outermost first: (slot, tag)
        self._stack: list[tuple[str, str]] = []

    def encode(self, text: str) -> str:
        """Encode a complete ANSI string and return the TAML markup."""
        if not isinstance(text, str):
            raise EncodeError(f"Expected str input, got {type(text).__name__}")

        self._parts = []
        self._stack = []

        pos = 0
        for match in self.SGR_PATTERN.finditer(text):
            self._put_text(text[pos:match.start()])
            self._handle_sgr(self._parse_params(match.group(1)))
            pos = match.end()
        self._put_text(text[pos:])

        self._close_all()
        return ''.join(self._parts)

    @staticmethod
    def _parse_params(params_str: str) -> list[int]:
        if not params_str:
            return [0]
        return [int(p) if p else 0 for p in params_str.split(';')]

    def _put_text(self, text: str) -> None:
        if text:
            self._parts.append(text.replace('<', '&lt;'))

    def _handle_sgr(self, params: list[int]) -> None:
        """Handle SGR (Select Graphic Rendition) parameters."""
        i = 0
        while i < len(params):
            p = params[i]

            if p == 0:
                self._close_all()
            elif p in STYLE_TAGS:
                self._open(*STYLE_TAGS[p])
            elif p in STYLE_RESETS:
                self._close(*STYLE_RESETS[p])
            elif 30 <= p <= 37 or 90 <= p <= 97:
                self._open(FG, Color.from_sgr(p).tag())
            elif 40 <= p <= 47 or 100 <= p <= 107:
                self._open(BG, Color.from_sgr(p).tag(background=True))
            elif p in (38, 48):
                # Extended color: 38;5;n / 38;2;r;g;b (48 for background)
                color, consumed = self._extended_color(params, i)
                if color is not None:
                    if p == 38:
                        self._open(FG, color.tag())
                    else:
                        self._open(BG, color.tag(background=True))
                i += consumed

            i += 1

    def _extended_color(self, params: list[int], i: int) -> tuple[Color | None, int]:
        """Parse the color following a 38/48 code; returns (color, params consumed)."""
        try:
            if i + 2 < len(params) and params[i + 1] == 5:
                return Color.from_256(params[i + 2]), 2
            if i + 4 < len(params) and params[i + 1] == 2:
                r, g, b = params[i + 2:i + 5]
                return Color.from_rgb(r, g, b), 4
        except ValueError as e:
            raise EncodeError(str(e)) from e
        return None, 0

    def _open(self, slot: str, tag: str) -> None:
        for open_slot, open_tag in self._stack:
            if open_slot == slot:
                if open_tag == tag:
                    return
                self._close(slot)
                break

        self._stack.append((slot, tag))
        self._parts.append(f'<{tag}>')

    def _close(self, *slots: str) -> None:
        """Close the tags in ``slots``, reopening other tags nested inside them."""
        indexes = [i for i, (open_slot, _) in enumerate(self._stack) if open_slot in slots]
        if not indexes:
            return

        index = indexes[0]
        reopen = [entry for entry in self._stack[index:] if entry[0] not in slots]
        for _, tag in reversed(self._stack[index:]):
            self._parts.append(f'</{tag}>')
        del self._stack[index:]

        for entry in reopen:
            self._stack.append(entry)
            self._parts.append(f'<{entry[1]}>')

    def _close_all(self) -> None:
        while self._stack:
            _, tag = self._stack.pop()
            self._parts.append(f'</{tag}>')


def encode(text: str) -> str:
    """Convert ANSI escape sequences in ``text`` to TAML markup."""
    return TamlEncoder().encode(text)
