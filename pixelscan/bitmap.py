"""In-memory bitmaps stored top-left first with BGR pixel order."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from pixelscan.geometry import Point, Rect
from pixelscan.rgb import RGBColor, hex_from_rgb


@dataclass
class Bitmap:
    """A raster image.

    ``buffer`` holds ``height`` rows of ``bytewidth`` bytes each; every pixel
    occupies ``bytes_per_pixel`` bytes in blue, green, red order.
    """

    buffer: bytes | bytearray | None
    width: int
    height: int
    bytewidth: int
    bits_per_pixel: int = 24
    bytes_per_pixel: int | None = None

    def __post_init__(self) -> None:
        if self.bytes_per_pixel is None:
            self.bytes_per_pixel = self.bits_per_pixel // 8
        if self.buffer is not None and len(self.buffer) < self.height * self.bytewidth:
            raise ValueError(
                f"buffer holds {len(self.buffer)} bytes, "
                f"expected {self.height * self.bytewidth}"
            )

    def copy(self) -> Bitmap:
        """Return a copy with its own pixel buffer."""
        buffer = None if self.buffer is None else bytes(self.buffer[: self.height * self.bytewidth])
        return dataclasses.replace(self, buffer=buffer)

    def copy_portion(self, rect: Rect) -> Bitmap:
        """Return a new bitmap holding the part of this one inside ``rect``."""
        if self.buffer is None:
            raise ValueError("bitmap has no pixel data")
        if not self.rect_in_bounds(rect):
            raise ValueError(f"rect {rect} is outside the bitmap bounds")
        size = rect.height * self.bytewidth
        offset = self.bytewidth * rect.y + rect.x * self.bytes_per_pixel
        chunk = bytes(self.buffer[offset : offset + size]).ljust(size, b"\0")
        return Bitmap(
            chunk,
            rect.width,
            rect.height,
            self.bytewidth,
            self.bits_per_pixel,
            self.bytes_per_pixel,
        )

    def point_in_bounds(self, point: Point) -> bool:
        return point.x < self.width and point.y < self.height

    def rect_in_bounds(self, rect: Rect) -> bool:
        return rect.x + rect.width <= self.width and rect.y + rect.height <= self.height

    def bounds(self) -> Rect:
        return Rect.make(0, 0, self.width, self.height)

    def color_at(self, x: int, y: int) -> RGBColor:
        """Return the colour of the pixel at (x, y)."""
        if self.buffer is None:
            raise ValueError("bitmap has no pixel data")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} bitmap")
        offset = self.bytewidth * y + x * self.bytes_per_pixel
        blue, green, red = self.buffer[offset : offset + 3]
        return RGBColor(red, green, blue)

    def hex_at(self, x: int, y: int) -> int:
        """Return the 0xRRGGBB value of the pixel at (x, y)."""
        return hex_from_rgb(self.color_at(x, y))