"""The six-colour palette of the 7.3" e-paper panel and nearest-colour lookup."""

from __future__ import annotations

from enum import IntEnum
from functools import lru_cache
from typing import Iterable, Tuple

Color = Tuple[int, int, int]


class EPDColor(IntEnum):
    """Colour codes understood by the panel controller (one nibble per pixel)."""

    BLACK = 0x00
    WHITE = 0x01
    YELLOW = 0x02
    RED = 0x03
    BLUE = 0x05
    GREEN = 0x06

    @property
    def rgb(self) -> Color:
        """The RGB value this panel colour stands for."""
        return PALETTE[self]


PALETTE: dict[EPDColor, Color] = {
    EPDColor.BLACK: (0, 0, 0),
    EPDColor.WHITE: (255, 255, 255),
    EPDColor.YELLOW: (255, 255, 0),
    EPDColor.RED: (255, 0, 0),
    EPDColor.BLUE: (0, 0, 255),
    EPDColor.GREEN: (0, 255, 0),
}


def _distance(a: Color, b: Color) -> int:
    return sum((int(x) - int(y)) ** 2 for x, y in zip(a, b))


@lru_cache(maxsize=1 << 16)
def _closest(rgb: Color) -> EPDColor:
    # Ties go to the colour listed first, i.e. the lowest code.
    return min(PALETTE, key=lambda color: _distance(rgb, PALETTE[color]))


def _as_color(rgb: Iterable[int]) -> Color:
    r, g, b = rgb
    return (int(r), int(g), int(b))


def closest_epd_color(rgb: Iterable[int]) -> EPDColor:
    """Return the panel colour nearest to ``rgb`` in Euclidean RGB space."""
    return _closest(_as_color(rgb))


def nearest_color(rgb: Iterable[int]) -> Color:
    """Return the palette RGB value nearest to ``rgb``."""
    return PALETTE[closest_epd_color(rgb)]