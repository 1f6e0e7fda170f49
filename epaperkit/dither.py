"""Error-diffusion dithering to the panel palette and buffer rotation."""

from __future__ import annotations

from .palette import nearest_color

BYTES_PER_PIXEL = 3

_FLOYD_WEIGHTS = (
    ((1, 0), 7 / 16),
    ((-1, 1), 3 / 16),
    ((0, 1), 5 / 16),
    ((1, 1), 1 / 16),
)

_ATKINSON_OFFSETS = ((1, 0), (2, 0), (-1, 1), (0, 1), (1, 1), (0, 2))


def _checked(pixels: bytes, width: int, height: int) -> bytearray:
    if width < 0 or height < 0 or len(pixels) != width * height * BYTES_PER_PIXEL:
        raise ValueError("buffer size mismatch")
    return bytearray(pixels)


def _clamp(value: int) -> int:
    return max(0, min(255, value))


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _quantize(img: bytearray, index: int) -> list[int]:
    old = img[index:index + 3]
    new = nearest_color(old)
    img[index:index + 3] = bytes(new)
    return [o - n for o, n in zip(old, new)]


def floyd_steinberg(pixels: bytes, width: int, height: int) -> bytearray:
    """Floyd–Steinberg dither of a flat RGB buffer; returns a new buffer.

    The first and last columns and the last row are not quantized.
    """
    img = _checked(pixels, width, height)
    for y in range(height - 1):
        for x in range(1, width - 1):
            err = _quantize(img, BYTES_PER_PIXEL * (y * width + x))
            for (dx, dy), coef in _FLOYD_WEIGHTS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < width and 0 <= ny < height):
                    continue
                j = BYTES_PER_PIXEL * (ny * width + nx)
                img[j:j + 3] = bytes(
                    _clamp(v + int(e * coef)) for v, e in zip(img[j:j + 3], err)
                )
    return img


def atkinson(pixels: bytes, width: int, height: int) -> bytearray:
    """Atkinson dither of a flat RGB buffer; returns a new buffer.

    The last two columns and rows are not quantized.
    """
    img = _checked(pixels, width, height)
    for y in range(height - 2):
        for x in range(width - 2):
            err = [_trunc_div(e, 8) for e in _quantize(img, BYTES_PER_PIXEL * (y * width + x))]
            for dx, dy in _ATKINSON_OFFSETS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < width and 0 <= ny < height):
                    continue
                j = BYTES_PER_PIXEL * (ny * width + nx)
                img[j:j + 3] = bytes(_clamp(v + e) for v, e in zip(img[j:j + 3], err))
    return img


def rotate90(pixels: bytes, width: int, height: int) -> bytearray:
    """Rotate a flat RGB buffer 90 degrees counter-clockwise.

    The result is ``height`` pixels wide and ``width`` pixels high.
    """
    src = _checked(pixels, width, height)
    dst_width = height
    dst = bytearray(len(src))
    for y in range(height):
        for x in range(width):
            s = (y * width + x) * BYTES_PER_PIXEL
            d = ((width - 1 - x) * dst_width + y) * BYTES_PER_PIXEL
            dst[d:d + 3] = src[s:s + 3]
    return dst