"""RGB colours and their 0xRRGGBB integer form."""

from __future__ import annotations

import math
from dataclasses import dataclass

RGBHEX_MIN = 0x000000
RGBHEX_MAX = 0xFFFFFF

# Largest possible distance between two colours, rounded up.
_MAX_DISTANCE = 442.0


@dataclass(frozen=True)
class RGBColor:
    """A colour with 8-bit red, green and blue channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel out of range: {channel}")


def rgb_to_hex(red: int, green: int, blue: int) -> int:
    """Pack three channels into a 0xRRGGBB integer."""
    return (red << 16) | (green << 8) | blue


def hex_from_rgb(color: RGBColor) -> int:
    """Return the 0xRRGGBB value of ``color``."""
    return rgb_to_hex(color.red, color.green, color.blue)


def red_from_hex(value: int) -> int:
    return (value >> 16) & 0xFF


def green_from_hex(value: int) -> int:
    return (value >> 8) & 0xFF


def blue_from_hex(value: int) -> int:
    return value & 0xFF


def rgb_from_hex(value: int) -> RGBColor:
    """Unpack a 0xRRGGBB integer into an :class:`RGBColor`."""
    return RGBColor(red_from_hex(value), green_from_hex(value), blue_from_hex(value))


def _within(d1: int, d2: int, d3: int, tolerance: float) -> bool:
    # Channel differences wrap to 8 bits before squaring.
    d1 &= 0xFF
    d2 &= 0xFF
    d3 &= 0xFF
    return math.sqrt(d1 * d1 + d2 * d2 + d3 * d3) <= tolerance * _MAX_DISTANCE


def colors_similar(c1: RGBColor, c2: RGBColor, tolerance: float) -> bool:
    """Whether two colours match within ``tolerance`` (0 exact, 1 any)."""
    if tolerance <= 0.0:
        return c1 == c2
    return _within(c1.red - c2.red, c1.green - c2.green, c1.blue - c2.blue, tolerance)


def hex_similar(h1: int, h2: int, tolerance: float) -> bool:
    """Like :func:`colors_similar`, for 0xRRGGBB values."""
    if tolerance <= 0.0:
        return h1 == h2
    return _within(
        red_from_hex(h1) - red_from_hex(h2),
        green_from_hex(h1) - green_from_hex(h2),
        blue_from_hex(h1) - blue_from_hex(h2),
        tolerance,
    )