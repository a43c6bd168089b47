"""Basic geometric value types: points, sizes and rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field

BYTE_ALIGN = 4
"""Bytes that pixel buffer rows are aligned to (a power of two)."""

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def add_padding(width: int) -> int:
    """Round ``width`` up to the next multiple of :data:`BYTE_ALIGN`."""
    if width < 0:
        raise ValueError(f"width must not be negative: {width}")
    return BYTE_ALIGN + ((width - 1) & ~(BYTE_ALIGN - 1))


@dataclass(frozen=True)
class Point:
    """An unsigned point; both coordinates are non-negative."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"point coordinates must not be negative: ({self.x}, {self.y})")


@dataclass(frozen=True)
class SignedPoint:
    """A point whose coordinates are 32-bit signed integers."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        for value in (self.x, self.y):
            if not _INT32_MIN <= value <= _INT32_MAX:
                raise ValueError(f"coordinate out of 32-bit range: {value}")


@dataclass(frozen=True)
class Size:
    """A width and height, both non-negative."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"size must not be negative: {self.width}x{self.height}")


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left origin and its size."""

    origin: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @classmethod
    def make(cls, x: int, y: int, width: int, height: int) -> Rect:
        """Build a rectangle from its four components."""
        return cls(Point(x, y), Size(width, height))

    @property
    def x(self) -> int:
        return self.origin.x

    @property
    def y(self) -> int:
        return self.origin.y

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height