import pytest

from pixelscan.bitmap import Bitmap
from pixelscan.color_find import (
    count_of_colors,
    count_of_colors_in_rect,
    find_all_color,
    find_all_color_in_rect,
    find_color,
    find_color_in_rect,
)
from pixelscan.geometry import Point, Rect, add_padding

WHITE = 0xFFFFFF
BLUE = 0x0000FF
GREEN = 0x00FF00


def make_bitmap(rows):
    height = len(rows)
    width = len(rows[0])
    bytewidth = add_padding(width * 3)
    buf = bytearray(bytewidth * height)
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            offset = y * bytewidth + x * 3
            buf[offset : offset + 3] = bytes(
                (value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF)
            )
    return Bitmap(bytes(buf), width, height, bytewidth)


@pytest.fixture
def image():
    return make_bitmap(
        [
            [WHITE, BLUE, WHITE],
            [WHITE, WHITE, BLUE],
        ]
    )


def test_find_first(image):
    assert find_color(image, BLUE, 0.0) == Point(1, 0)


def test_find_all(image):
    assert find_all_color(image, BLUE, 0.0) == [Point(1, 0), Point(2, 1)]


def test_count(image):
    assert count_of_colors(image, BLUE, 0.0) == 2


def test_found_points_have_colour(image):
    for point in find_all_color(image, WHITE, 0.0):
        assert image.hex_at(point.x, point.y) == WHITE


def test_count_matches_find_all(image):
    assert count_of_colors(image, WHITE, 0.0) == len(find_all_color(image, WHITE, 0.0))


def test_missing_colour(image):
    assert find_color(image, GREEN, 0.0) is None
    assert find_all_color(image, GREEN, 0.0) == []
    assert count_of_colors(image, GREEN, 0.0) == 0


def test_full_tolerance_matches_every_pixel(image):
    assert count_of_colors(image, GREEN, 1.0) == image.width * image.height
    assert find_color(image, GREEN, 1.0) == Point(0, 0)


def test_rect_excluding_colour(image):
    assert find_color_in_rect(image, BLUE, Rect.make(0, 0, 1, 2), 0.0) is None


def test_whole_bounds_same_as_image(image):
    rect = image.bounds()
    assert find_color_in_rect(image, BLUE, rect, 0.0) == find_color(image, BLUE, 0.0)
    assert find_all_color_in_rect(image, BLUE, rect, 0.0) == find_all_color(image, BLUE, 0.0)
    assert count_of_colors_in_rect(image, BLUE, rect, 0.0) == count_of_colors(image, BLUE, 0.0)


def test_rect_out_of_bounds(image):
    rect = Rect.make(1, 0, image.width, image.height)
    assert find_color_in_rect(image, BLUE, rect, 0.0) is None
    assert find_all_color_in_rect(image, BLUE, rect, 0.0) == []
    assert count_of_colors_in_rect(image, BLUE, rect, 0.0) == 0


def test_results_in_row_order():
    image = make_bitmap([[BLUE] * 3 for _ in range(3)])
    found = find_all_color(image, BLUE, 0.0)
    assert found == sorted(found, key=lambda p: (p.y, p.x))
    assert len(found) == image.width * image.height