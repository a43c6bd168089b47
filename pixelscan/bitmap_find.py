"""Search for one bitmap inside another."""

from __future__ import annotations

from collections.abc import Iterator

from pixelscan.bitmap import Bitmap
from pixelscan.geometry import Point, Rect
from pixelscan.rgb import hex_similar


def _needle_pixels(needle: Bitmap) -> list[tuple[int, int, int]]:
    """Needle pixels as (x, y, colour), from the bottom-right corner backwards."""
    if needle.width <= 0 or needle.height <= 0:
        raise ValueError("needle bitmap must not be empty")
    return [
        (x, y, needle.hex_at(x, y))
        for y in reversed(range(needle.height))
        for x in reversed(range(needle.width))
    ]


def _needle_at_offset(
    pixels: list[tuple[int, int, int]],
    haystack: Bitmap,
    offset_x: int,
    offset_y: int,
    tolerance: float,
) -> bool:
    return all(
        hex_similar(color, haystack.hex_at(offset_x + x, offset_y + y), tolerance)
        for x, y, color in pixels
    )


def _find_at(
    pixels: list[tuple[int, int, int]],
    needle: Bitmap,
    haystack: Bitmap,
    rect: Rect,
    tolerance: float,
    start: Point,
) -> Point | None:
    if (
        needle.height > haystack.height
        or needle.width > haystack.width
        or not haystack.rect_in_bounds(rect)
        or needle.height > rect.height
        or needle.width > rect.width
    ):
        return None

    scan_height = rect.height - needle.height
    scan_width = rect.width - needle.width
    x, y = start.x, start.y
    while y <= scan_height:
        while x <= scan_width:
            if _needle_at_offset(pixels, haystack, x, y, tolerance):
                # The reported point lies one pixel right of and below the match.
                return Point(x + 1, y + 1)
            x += 1
        x = rect.x
        y += 1
    return None


def _iter_matches(
    needle: Bitmap, haystack: Bitmap, rect: Rect, tolerance: float
) -> Iterator[Point]:
    pixels = _needle_pixels(needle)
    point = Point()
    while (found := _find_at(pixels, needle, haystack, rect, tolerance, point)) is not None:
        yield found
        scan_width = haystack.width - needle.width + 1
        x, y = found.x + 1, found.y
        if x >= scan_width:
            x, y = 0, y + 1
        point = Point(x, y)


def find_bitmap_in_rect(
    needle: Bitmap, haystack: Bitmap, rect: Rect, tolerance: float
) -> Point | None:
    """Find ``needle`` in ``haystack`` within ``rect``.

    ``tolerance`` runs from 0.0 (exact colours) to 1.0 (any colour). Returns the
    point one pixel right of and below the match's top-left corner, or ``None``.
    """
    pixels = _needle_pixels(needle)
    return _find_at(pixels, needle, haystack, rect, tolerance, Point())


def find_bitmap(needle: Bitmap, haystack: Bitmap, tolerance: float) -> Point | None:
    """:func:`find_bitmap_in_rect` over the whole of ``haystack``."""
    return find_bitmap_in_rect(needle, haystack, haystack.bounds(), tolerance)


def find_all_bitmap_in_rect(
    needle: Bitmap, haystack: Bitmap, rect: Rect, tolerance: float
) -> list[Point]:
    """Return every occurrence of ``needle`` found scanning ``rect``."""
    return list(_iter_matches(needle, haystack, rect, tolerance))


def find_all_bitmap(needle: Bitmap, haystack: Bitmap, tolerance: float) -> list[Point]:
    """:func:`find_all_bitmap_in_rect` over the whole of ``haystack``."""
    return find_all_bitmap_in_rect(needle, haystack, haystack.bounds(), tolerance)


def count_of_bitmap_in_rect(
    needle: Bitmap, haystack: Bitmap, rect: Rect, tolerance: float
) -> int:
    """Return the number of occurrences of ``needle`` found scanning ``rect``."""
    return sum(1 for _ in _iter_matches(needle, haystack, rect, tolerance))


def count_of_bitmap(needle: Bitmap, haystack: Bitmap, tolerance: float) -> int:
    """:func:`count_of_bitmap_in_rect` over the whole of ``haystack``."""
    return count_of_bitmap_in_rect(needle, haystack, haystack.bounds(), tolerance)