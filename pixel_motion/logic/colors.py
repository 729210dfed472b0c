"""
Color Helpers for Pixel Motion

Colors travel through the UI as hex strings (what the color picker and the
palette swatches hand us) and through the pixel data as RGBA tuples.

"""

import re
from typing import NamedTuple


class Color(NamedTuple):
    """A single RGBA pixel, 8 bits per channel (straight alpha)"""
    r: int
    g: int
    b: int
    a: int = 255


TRANSPARENT = Color(0, 0, 0, 0)
OPAQUE_BLACK = Color(0, 0, 0, 255)

# === Palette shown in the tool station (DB16-ish sprite palette) === #
DEFAULT_PALETTE = [
    '#000000', '#1a1c2c', '#5d275d', '#b13e53', '#ef7d57', '#ffcd75',
    '#a7f070', '#38b764', '#257179', '#29366f', '#3b5dc9', '#41a6f6',
    '#73eff7', '#f4f4f4', '#94b0c2', '#566c86', '#333c57',
]

_HEX_PATTERN = re.compile(r'#(?:[0-9a-fA-F]{3}){1,2}')


def hex_to_rgba(text) -> Color:
    """
    Convert '#rgb' or '#rrggbb' into an opaque Color.

    Anything that doesn't match either form comes back as opaque black,
    never an exception.
    """
    if not isinstance(text, str) or not _HEX_PATTERN.fullmatch(text):
        return OPAQUE_BLACK

    digits = text[1:]
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)

    value = int(digits, 16)
    return Color((value >> 16) & 255, (value >> 8) & 255, value & 255, 255)


def rgba_to_hex(color) -> str:
    """Drop the alpha channel and format as lowercase '#rrggbb'"""
    r, g, b = color[0], color[1], color[2]
    return f"#{r:02x}{g:02x}{b:02x}"
