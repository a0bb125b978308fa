"""Colour packing, channel access and interpolation.

Packed pixels keep red in the lowest byte, then green, blue and alpha in the
highest byte. :func:`rgba_to_int` and :func:`color_to_int` use the other
layout, red in the highest byte down to alpha in the lowest, which is the
layout :func:`int_to_color` reads back.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int


def red(color: int) -> int:
    return color & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return (color >> 16) & 0xFF


def alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def brightness(color: int) -> int:
    """Relative luminance of a packed pixel, truncated to a byte."""
    return int(0.2126 * red(color) + 0.7152 * green(color) + 0.0722 * blue(color)) & 0xFF


def rgba_to_int(r: int, g: int, b: int, a: int) -> int:
    return ((r & 0xFF) << 24) | ((g & 0xFF) << 16) | ((b & 0xFF) << 8) | (a & 0xFF)


def color_to_int(color: Color) -> int:
    return rgba_to_int(color.r, color.g, color.b, color.a)


def int_to_color(value: int) -> Color:
    return Color((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def _round_half_away(x: float) -> int:
    return math.floor(x + 0.5) if x >= 0 else math.ceil(x - 0.5)


def byte_lerp(start: int, stop: int, amt: float) -> int:
    """Interpolate between two bytes, rounding halves away from zero, modulo 256."""
    return (start + _round_half_away((stop - start) * amt)) & 0xFF


def lerp_color(a: int, b: int, amt: float) -> int:
    """Interpolate every channel of two packed pixels."""
    r = byte_lerp(red(a), red(b), amt)
    g = byte_lerp(green(a), green(b), amt)
    bl = byte_lerp(blue(a), blue(b), amt)
    al = byte_lerp(alpha(a), alpha(b), amt)
    return r | (g << 8) | (bl << 16) | (al << 24)


def lerp_rgba(a: Color, b: Color, amt: float) -> Color:
    return Color(
        byte_lerp(a.r, b.r, amt),
        byte_lerp(a.g, b.g, amt),
        byte_lerp(a.b, b.b, amt),
        byte_lerp(a.a, b.a, amt),
    )