import pytest

from ceoclash.colors import (
    Color,
    alpha,
    blue,
    brightness,
    byte_lerp,
    color_to_int,
    green,
    int_to_color,
    lerp_color,
    lerp_rgba,
    red,
    rgba_to_int,
)


def test_channel_accessors_read_bytes():
    pixel = 0x44332211
    assert red(pixel) == 0x11
    assert green(pixel) == 0x22
    assert blue(pixel) == 0x33
    assert alpha(pixel) == 0x44


def test_rgba_to_int_layout():
    assert rgba_to_int(0x11, 0x22, 0x33, 0x44) == 0x11223344


def test_color_to_int_matches_rgba():
    c = Color(10, 20, 30, 40)
    assert color_to_int(c) == rgba_to_int(10, 20, 30, 40)


@pytest.mark.parametrize("c", [Color(0, 0, 0, 0), Color(255, 128, 1, 254), Color(7, 8, 9, 255)])
def test_int_color_round_trip(c):
    assert int_to_color(color_to_int(c)) == c


def test_brightness_black_is_zero():
    assert brightness(0xFF000000) == 0


def test_brightness_weights_green_above_red_and_blue():
    assert brightness(0x0000FF00) > brightness(0x000000FF) > brightness(0x00FF0000)


def test_byte_lerp_endpoints():
    assert byte_lerp(40, 200, 0.0) == 40
    assert byte_lerp(40, 200, 1.0) == 200
    assert byte_lerp(200, 40, 1.0) == 40


def test_byte_lerp_midpoint():
    assert byte_lerp(10, 20, 0.5) == 15


def test_byte_lerp_rounds_half_away_from_zero():
    assert byte_lerp(0, 1, 0.5) == 1
    assert byte_lerp(1, 0, 0.5) == 0


def test_lerp_color_endpoints():
    a = 0x80402010
    b = 0x10204080
    assert lerp_color(a, b, 0.0) == a
    assert lerp_color(a, b, 1.0) == b


def test_lerp_color_channels_between():
    a = 0x00000000
    b = 0xC8C8C8C8
    mid = lerp_color(a, b, 0.5)
    for channel in (red, green, blue, alpha):
        assert channel(mid) == byte_lerp(channel(a), channel(b), 0.5)


def test_lerp_rgba_endpoints():
    a = Color(1, 2, 3, 4)
    b = Color(250, 240, 230, 220)
    assert lerp_rgba(a, b, 0.0) == a
    assert lerp_rgba(a, b, 1.0) == b