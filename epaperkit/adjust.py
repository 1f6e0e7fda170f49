"""Colour adjustments applied to flat RGB buffers before dithering."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class ImageAdjustParams:
    """Photographic adjustments in normalised units."""

    exposure: float = 0.0  # EV, each step doubles brightness
    contrast: float = 1.0  # 1 leaves the image unchanged
    highlight: float = 0.0  # 0..1, compresses highlights
    shadow: float = 0.0  # 0..1, lifts shadows
    saturation: float = 1.0  # 1 leaves the image unchanged
    temperature: float = 0.0  # -1..1
    tint: float = 0.0  # -1..1


@dataclass(frozen=True)
class SliderParams:
    """Slider positions, each in -100..100, for the simple adjustment pass."""

    exposure: int = 0
    contrast: int = 0
    highlight: int = 0
    shadow: int = 0
    saturation: int = 0
    temperature: int = 0
    hue: int = 0


def _triples(pixels: bytes, width: int, height: int) -> Iterator[Tuple[int, int, int]]:
    if width < 0 or height < 0 or len(pixels) != width * height * 3:
        raise ValueError("buffer size mismatch")
    it = iter(pixels)
    return zip(it, it, it)


def _clip01(v: float) -> float:
    return min(1.0, max(0.0, v))


def _clamp_byte(v: float) -> int:
    return max(0, min(255, int(v)))


def _luma(r: float, g: float, b: float) -> float:
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def _to_byte(v: float) -> int:
    # Round half away from zero on a value already clipped to 0..1.
    return int(math.floor(_clip01(v) * 255.0 + 0.5))


def adjust_image(pixels: bytes, width: int, height: int, params: ImageAdjustParams) -> bytearray:
    """Apply exposure, white balance, contrast, tone and saturation changes."""
    k_exp = 2.0 ** params.exposure
    k_c = params.contrast
    k_sat = params.saturation
    h_hl = _clip01(params.highlight)
    h_sh = _clip01(params.shadow)

    r_t = 1.0 + max(0.0, params.temperature) + params.tint * 0.05
    g_t = 1.0 + params.tint * -0.10
    b_t = 1.0 + max(0.0, -params.temperature) + params.tint * 0.05

    out = bytearray()
    for r8, g8, b8 in _triples(pixels, width, height):
        r, g, b = r8 / 255.0, g8 / 255.0, b8 / 255.0

        r, g, b = r * k_exp * r_t, g * k_exp * g_t, b * k_exp * b_t

        r = (r - 0.5) * k_c + 0.5
        g = (g - 0.5) * k_c + 0.5
        b = (b - 0.5) * k_c + 0.5

        y = _luma(r, g, b)
        y_adj = y + (0.5 - y) * h_sh if y < 0.5 else y - (y - 0.5) * h_hl
        f = 0.0 if y == 0.0 else y_adj / y
        r, g, b = r * f, g * f, b * f

        gray = _luma(r, g, b)
        r = gray + (r - gray) * k_sat
        g = gray + (g - gray) * k_sat
        b = gray + (b - gray) * k_sat

        out += bytes((_to_byte(r), _to_byte(g), _to_byte(b)))
    return out


def adjust_image_sliders(pixels: bytes, width: int, height: int, params: SliderParams) -> bytearray:
    """Apply the rough slider-driven adjustments: exposure, contrast, HSV,
    temperature and highlight/shadow scaling."""
    exp_f = 1.0 + params.exposure / 100.0
    con_f = 1.0 + params.contrast / 100.0
    sat_f = 1.0 + params.saturation / 100.0
    hi_f = 1.0 + params.highlight / 100.0
    sh_f = 1.0 + params.shadow / 100.0
    hue_shift = params.hue / 360.0

    out = bytearray()
    for r8, g8, b8 in _triples(pixels, width, height):
        r, g, b = r8 * exp_f, g8 * exp_f, b8 * exp_f
        r = (r - 128.0) * con_f + 128.0
        g = (g - 128.0) * con_f + 128.0
        b = (b - 128.0) * con_f + 128.0

        h, s, v = colorsys.rgb_to_hsv(
            _clamp_byte(r) / 255.0, _clamp_byte(g) / 255.0, _clamp_byte(b) / 255.0
        )
        h += hue_shift
        if h < 0.0:
            h += 1.0
        if h > 1.0:
            h -= 1.0
        s = _clip01(s * sat_f)
        rf, gf, bf = colorsys.hsv_to_rgb(math.fmod(h, 1.0), s, _clip01(v))
        r = float(int(rf * 255.0 + 0.5))
        g = float(int(gf * 255.0 + 0.5))
        b = float(int(bf * 255.0 + 0.5))

        r += params.temperature
        b -= params.temperature

        lum = 0.299 * r + 0.587 * g + 0.114 * b
        if lum > 128.0:
            r = 128.0 + (r - 128.0) * hi_f
            g = 128.0 + (g - 128.0) * hi_f
            b = 128.0 + (b - 128.0) * hi_f
        else:
            r, g, b = r * sh_f, g * sh_f, b * sh_f

        out += bytes((_clamp_byte(r), _clamp_byte(g), _clamp_byte(b)))
    return out