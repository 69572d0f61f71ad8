"""
Label color assignment for the debug logger.

Every label maps to one of 256 terminal colors, chosen deterministically:

    label  →  FNV-1a 64-bit hash  →  PALETTE index  →  xterm-256 code

The palette is a curated list of saturated colors that stay readable on
both dark and light terminals. The same label gets the same color in every
run and every process, so a given subsystem is always recognizable at a
glance.
"""

from typing import Tuple


# Reference colors, picked for legibility in a terminal
PALETTE = (
    '#0000CC', '#0000FF', '#0033CC', '#0033FF', '#0066CC', '#0066FF', '#0099CC', '#0099FF',
    '#00CC00', '#00CC33', '#00CC66', '#00CC99', '#00CCCC', '#00CCFF', '#3300CC', '#3300FF',
    '#3333CC', '#3333FF', '#3366CC', '#3366FF', '#3399CC', '#3399FF', '#33CC00', '#33CC33',
    '#33CC66', '#33CC99', '#33CCCC', '#33CCFF', '#6600CC', '#6600FF', '#6633CC', '#6633FF',
    '#66CC00', '#66CC33', '#9900CC', '#9900FF', '#9933CC', '#9933FF', '#99CC00', '#99CC33',
    '#CC0000', '#CC0033', '#CC0066', '#CC0099', '#CC00CC', '#CC00FF', '#CC3300', '#CC3333',
    '#CC3366', '#CC3399', '#CC33CC', '#CC33FF', '#CC6600', '#CC6633', '#CC9900', '#CC9933',
    '#CCCC00', '#CCCC33', '#FF0000', '#FF0033', '#FF0066', '#FF0099', '#FF00CC', '#FF00FF',
    '#FF3300', '#FF3333', '#FF3366', '#FF3399', '#FF33CC', '#FF33FF', '#FF6600', '#FF6633',
    '#FF9900', '#FF9933', '#FFCC00', '#FFCC33',
)

# Used when a palette entry cannot be converted (light cyan)
DEFAULT_COLOR = 123

# Upper bounds of the six bands each channel falls into on the color cube
_CUBE_BANDS = (47, 114, 154, 194, 234)

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def stable_hash(text: str) -> int:
    """64-bit FNV-1a hash of the UTF-8 encoding of text.

    The built-in hash() is salted per process, so it cannot be used
    for colors that must stay put between runs.

    Lone surrogates (undecodable bytes from argv or the filesystem)
    are encoded as-is rather than rejected.
    """
    h = _FNV_OFFSET
    for byte in text.encode('utf-8', 'surrogatepass'):
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK_64
    return h


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Parse '#RRGGBB' (leading '#' optional) into an (r, g, b) tuple.

    Raises:
        ValueError: if the string is not six hex digits
    """
    digits = hex_color.lstrip('#')
    if len(digits) != 6:
        raise ValueError(f"expected 6 hex digits, got {hex_color!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _cube_level(value: int) -> int:
    for level, upper in enumerate(_CUBE_BANDS):
        if value <= upper:
            return level
    return 5


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Map an RGB triple to the nearest xterm-256 color code.

    Pure grays use the 24-step grayscale ramp (232-255), with the
    extremes snapped to cube black (16) and cube white (231). Everything
    else lands on the 6x6x6 color cube (16-231).
    """
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return 232 + (r - 8) * 24 // 247

    return 16 + 36 * _cube_level(r) + 6 * _cube_level(g) + _cube_level(b)


def hex_to_ansi256(hex_color: str) -> int:
    """Convert a '#RRGGBB' string to an xterm-256 color code."""
    return rgb_to_ansi256(*hex_to_rgb(hex_color))


def color_for(label: str) -> int:
    """Return the terminal color code for a label.

    Pure function of the label string. Never raises: a palette entry
    that fails to convert falls back to DEFAULT_COLOR.
    """
    hex_color = PALETTE[stable_hash(label) % len(PALETTE)]
    try:
        return hex_to_ansi256(hex_color)
    except ValueError:
        return DEFAULT_COLOR


def colorize(color: int, text: str) -> str:
    """Wrap text in a bold 256-color foreground escape, then reset."""
    return f"\x1b[1;38;5;{color}m{text}\x1b[0m"
