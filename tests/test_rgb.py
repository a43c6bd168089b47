import pytest

from pixelscan.rgb import (
    RGBHEX_MAX,
    RGBColor,
    blue_from_hex,
    colors_similar,
    green_from_hex,
    hex_from_rgb,
    hex_similar,
    red_from_hex,
    rgb_from_hex,
    rgb_to_hex,
)

SAMPLES = [0x000000, 0xFFFFFF, 0x123456, 0xFF0000, 0x00FF00, 0x0000FF, 0xABCDEF]


def test_rgb_to_hex_packs_channels():
    assert rgb_to_hex(0x12, 0x34, 0x56) == 0x123456


@pytest.mark.parametrize("value", SAMPLES)
def test_hex_round_trip(value):
    assert hex_from_rgb(rgb_from_hex(value)) == value


@pytest.mark.parametrize("value", SAMPLES)
def test_channel_extraction_matches_color(value):
    color = rgb_from_hex(value)
    assert (color.red, color.green, color.blue) == (
        red_from_hex(value),
        green_from_hex(value),
        blue_from_hex(value),
    )
    assert rgb_to_hex(color.red, color.green, color.blue) == value


def test_channel_out_of_range_rejected():
    with pytest.raises(ValueError):
        RGBColor(256, 0, 0)


def test_zero_tolerance_is_exact():
    assert hex_similar(0x123456, 0x123456, 0.0)
    assert not hex_similar(0x123456, 0x123457, 0.0)
    assert not colors_similar(RGBColor(1, 2, 3), RGBColor(1, 2, 4), 0.0)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_full_tolerance_matches_anything(a, b):
    assert hex_similar(a, b, 1.0)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_color_and_hex_forms_agree(a, b):
    for tolerance in (0.0, 0.05, 0.3, 0.9):
        assert colors_similar(rgb_from_hex(a), rgb_from_hex(b), tolerance) == hex_similar(a, b, tolerance)


def test_small_difference_within_tolerance():
    assert hex_similar(0x0A0A0A, 0x000000, 0.1)
    assert not hex_similar(0x808080, 0x000000, 0.1)


def test_max_constant_is_white():
    assert rgb_from_hex(RGBHEX_MAX) == RGBColor(255, 255, 255)