"""Shared constants for ANSI to TAML conversion."""

# 16-color palette names, indexed like the SGR 30-37 / 90-97 range
COLOR_NAMES: tuple[str, ...] = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
    "brightBlack", "brightRed", "brightGreen", "brightYellow",
    "brightBlue", "brightMagenta", "brightCyan", "brightWhite",
)

# SGR code -> (slot, tag) for text styles
STYLE_TAGS: dict[int, tuple[str, str]] = {
    1: ("bold", "bold"),
    2: ("dim", "dim"),
    3: ("italic", "italic"),
    4: ("underline", "underline"),
    9: ("strikethrough", "strikethrough"),
}

# SGR code -> slots it closes
STYLE_RESETS: dict[int, tuple[str, ...]] = {
    22: ("bold", "dim"),  # normal intensity
    23: ("italic",),
    24: ("underline",),
    29: ("strikethrough",),
    39: ("fg",),
    49: ("bg",),
}

# Slots for color tags
FG = "fg"
BG = "bg"
