"""Colours and colour helpers."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

from .binary import FormatError


class LocColor(Enum):
    """Where in a level a colour is used."""

    BG1 = 0
    BG2 = 1
    FG = 2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


def read_color(stream: BinaryIO) -> Color:
    """Read a colour stored as four bytes: red, green, blue, alpha."""
    data = stream.read(4)
    if len(data) != 4:
        raise FormatError("unexpected end of data while reading colour")
    return Color(*data)


def interpolate_color(start: Color, end: Color, percent: float) -> Color:
    """Blend linearly from ``start`` to ``end``."""

    def mix(a: int, b: int) -> int:
        return int(a + (b - a) * percent)

    return Color(
        mix(start.r, end.r), mix(start.g, end.g), mix(start.b, end.b), mix(start.a, end.a)
    )


def rotate_color(color: Color, degrees: float) -> Color:
    """Rotate the hue of ``color`` by ``degrees``, keeping alpha."""
    h, s, v = colorsys.rgb_to_hsv(color.r / 255, color.g / 255, color.b / 255)
    h = (h + degrees / 360.0) % 1.0
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return Color(round(r * 255), round(g * 255), round(b * 255), color.a)