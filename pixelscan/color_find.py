"""Search a bitmap for pixels of a given colour."""

from __future__ import annotations

from collections.abc import Iterator

from pixelscan.bitmap import Bitmap
from pixelscan.geometry import Point, Rect
from pixelscan.rgb import hex_similar


def _find_color_at(
    image: Bitmap, color: int, rect: Rect, tolerance: float, start: Point
) -> Point | None:
    if not image.rect_in_bounds(rect):
        return None
    x, y = start.x, start.y
    while y < rect.height:
        while x < rect.width:
            if hex_similar(color, image.hex_at(x, y), tolerance):
                return Point(x, y)
            x += 1
        x = rect.x
        y += 1
    return None


def _iter_color(image: Bitmap, color: int, rect: Rect, tolerance: float) -> Iterator[Point]:
    point = Point()
    while (found := _find_color_at(image, color, rect, tolerance, point)) is not None:
        yield found
        x, y = found.x + 1, found.y
        if x >= rect.width:
            x, y = rect.x, y + 1
        point = Point(x, y)


def find_color_in_rect(
    image: Bitmap, color: int, rect: Rect, tolerance: float
) -> Point | None:
    """Return the first pixel matching ``color`` inside ``rect``, or ``None``.

    ``tolerance`` runs from 0.0 (exact colour) to 1.0 (any colour).
    """
    return _find_color_at(image, color, rect, tolerance, rect.origin)


def find_color(image: Bitmap, color: int, tolerance: float) -> Point | None:
    """:func:`find_color_in_rect` over the whole image."""
    return find_color_in_rect(image, color, image.bounds(), tolerance)


def find_all_color_in_rect(
    image: Bitmap, color: int, rect: Rect, tolerance: float
) -> list[Point]:
    """Return every pixel matching ``color`` inside ``rect``, row by row."""
    return list(_iter_color(image, color, rect, tolerance))


def find_all_color(image: Bitmap, color: int, tolerance: float) -> list[Point]:
    """:func:`find_all_color_in_rect` over the whole image."""
    return find_all_color_in_rect(image, color, image.bounds(), tolerance)


def count_of_colors_in_rect(image: Bitmap, color: int, rect: Rect, tolerance: float) -> int:
    """Return the number of pixels matching ``color`` inside ``rect``."""
    return sum(1 for _ in _iter_color(image, color, rect, tolerance))


def count_of_colors(image: Bitmap, color: int, tolerance: float) -> int:
    """:func:`count_of_colors_in_rect` over the whole image."""
    return count_of_colors_in_rect(image, color, image.bounds(), tolerance)