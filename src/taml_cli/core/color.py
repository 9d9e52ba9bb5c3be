"""Color representation and reduction to the TAML 16-color palette."""

from dataclasses import dataclass
from enum import Enum

from taml_cli.core.constants import COLOR_NAMES


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


def _round(value: float) -> int:
    """Round half up (not to even)."""
    return int(value + 0.5)


def rgb_to_256(r: int, g: int, b: int) -> int:
    """Map an RGB triple onto the xterm 256-color cube or grayscale ramp."""
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return _round((r - 8) / 247 * 24) + 232

    return (
        16
        + 36 * _round(r / 255 * 5)
        + 6 * _round(g / 255 * 5)
        + _round(b / 255 * 5)
    )


def ansi256_to_16(index: int) -> int:
    """
    Reduce a 256-color index to a 16-color palette index.

    0-15 map to themselves. Cube and grayscale entries are split into
    red/green/blue components; each component picks a bit of the base
    color, and a fully saturated component selects the bright variant.
    """
    if index < 16:
        return index

    if index >= 232:
        level = ((index - 232) * 10 + 8) / 255
        red = green = blue = level
    else:
        index -= 16
        remainder = index % 36
        red = (index // 36) / 5
        green = (remainder // 6) / 5
        blue = (remainder % 6) / 5

    value = max(red, green, blue) * 2
    if value == 0:
        return 0

    result = (_round(blue) << 2) | (_round(green) << 1) | _round(red)
    if value == 2:
        result += 8
    return result


@dataclass(frozen=True)
class Color:
    """
    Represents a color value from an SGR sequence.

    Supports 16-color, 256-color, and true color modes. Every color
    reduces to one of the 16 named TAML colors.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from an SGR code (30-37, 40-47, 90-97, 100-107)."""
        if 30 <= code <= 37:
            return cls(ColorMode.STANDARD_16, code - 30)
        elif 40 <= code <= 47:
            return cls(ColorMode.STANDARD_16, code - 40)
        elif 90 <= code <= 97:
            return cls(ColorMode.STANDARD_16, code - 90 + 8)
        elif 100 <= code <= 107:
            return cls(ColorMode.STANDARD_16, code - 100 + 8)
        else:
            raise ValueError(f"Invalid SGR color code: {code}")

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    def to_index16(self) -> int:
        """Return the nearest 16-color palette index."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            return self.value
        elif self.mode == ColorMode.EXTENDED_256:
            assert isinstance(self.value, int)
            return ansi256_to_16(self.value)
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            return ansi256_to_16(rgb_to_256(*self.value))

    def tag(self, background: bool = False) -> str:
        """Return the TAML tag name, e.g. ``red`` or ``bgBrightYellow``."""
        name = COLOR_NAMES[self.to_index16()]
        if background:
            return "bg" + name[0].upper() + name[1:]
        return name
