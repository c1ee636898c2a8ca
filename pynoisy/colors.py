"""
Hex color parsing for pynoisy.

Colors are given on the command line as 7-character '#RRGGBB' strings with
case-insensitive hex digits. Alpha is not part of the notation and is always
set to fully opaque.

Author: B.G.
"""

from dataclasses import dataclass

import numpy as np

from . import constants as cte
from .errors import ColorParseError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = cte.OPAQUE_ALPHA

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel '{name}' must be in [0, 255], got {value}")

    def as_array(self) -> np.ndarray:
        """Return the channels as a uint8 array in R, G, B, A order."""
        return np.array([self.r, self.g, self.b, self.a], dtype=np.uint8)

    def as_tuple(self):
        return (self.r, self.g, self.b, self.a)


def is_valid_hex(s: str) -> bool:
    """Check that `s` is '#' followed by exactly six hex digits."""
    if len(s) != 7 or s[0] != "#":
        return False
    return all(c in _HEX_DIGITS for c in s[1:])


def parse_hex_color(s: str) -> Color:
    """
    Parse a '#RRGGBB' string into an opaque Color.

    Args:
        s: Hex color string, e.g. '#FF8800' or '#ff8800'

    Returns:
        Color: Parsed color with alpha 255

    Raises:
        ColorParseError: If `s` is not a valid hex code

    Example:
        parse_hex_color("#FF0000")  # Color(r=255, g=0, b=0, a=255)
    """
    if not isinstance(s, str) or not is_valid_hex(s):
        raise ColorParseError(f"{s} is not a valid hex code")

    return Color(int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))
