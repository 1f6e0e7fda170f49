"""Nibble-packed frame buffers for the 800x480 six-colour panel."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Tuple

from PIL import Image

from .dither import rotate90
from .palette import EPDColor, closest_epd_color

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 480
PIXELS_PER_BYTE = 2
BUFFER_SIZE = SCREEN_WIDTH * SCREEN_HEIGHT // PIXELS_PER_BYTE

SEGMENT_COLORS = (
    EPDColor.BLACK,
    EPDColor.WHITE,
    EPDColor.YELLOW,
    EPDColor.RED,
    EPDColor.BLUE,
    EPDColor.GREEN,
)


def set_pixel(buffer: bytearray, x: int, y: int, value: int) -> None:
    """Write the colour code ``value`` for pixel (x, y) into a packed buffer.

    Even columns live in the high nibble, odd columns in the low nibble.
    Coordinates outside the screen are ignored.
    """
    if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
        return
    index = (y * SCREEN_WIDTH + x) // PIXELS_PER_BYTE
    if x % 2 == 0:
        buffer[index] = (buffer[index] & 0x0F) | ((value << 4) & 0xF0)
    else:
        buffer[index] = (buffer[index] & 0xF0) | (value & 0x0F)


def draw_box(margin: int, width: int, value: int) -> bytearray:
    """Return a black frame buffer with a rectangular outline of colour ``value``.

    The outline is ``width`` pixels thick and inset ``margin`` pixels from
    every edge of the screen.
    """
    if not (
        margin >= 0
        and width > 0
        and margin + width <= SCREEN_WIDTH // 2
        and margin + width <= SCREEN_HEIGHT // 2
    ):
        raise ValueError("margin and width do not fit on the screen")

    buf = bytearray(BUFFER_SIZE)
    x0, x1 = margin, SCREEN_WIDTH - margin - 1
    y0, y1 = margin, SCREEN_HEIGHT - margin - 1

    for y in range(y0, y0 + width):
        for x in range(x0, x1 + 1):
            set_pixel(buf, x, y, value)
            set_pixel(buf, x, y1 - (y - y0), value)

    for y in range(y0 + width, y1 - width + 1):
        for x in range(x0, x0 + width):
            set_pixel(buf, x, y, value)
            set_pixel(buf, x1 - (x - x0), y, value)

    return buf


def fill_segmented_screen() -> bytearray:
    """Return a buffer showing the six colours as vertical stripes."""
    segment_width = SCREEN_WIDTH // len(SEGMENT_COLORS)
    row = bytearray(SCREEN_WIDTH // PIXELS_PER_BYTE)
    for x in range(SCREEN_WIDTH):
        segment = min(x // segment_width, len(SEGMENT_COLORS) - 1)
        set_pixel(row, x, 0, SEGMENT_COLORS[segment])
    return row * SCREEN_HEIGHT


def pack_pixels(pixels: Iterable[Sequence[int]]) -> bytes:
    """Map RGB pixels to panel colours and pack two per byte.

    The first pixel of each pair goes into the high nibble. An odd pixel
    count is padded with black.
    """
    codes = [closest_epd_color(p) for p in pixels]
    if len(codes) % 2:
        codes.append(EPDColor.BLACK)
    return bytes(((hi << 4) | (lo & 0x0F)) for hi, lo in zip(codes[::2], codes[1::2]))


def _triples(pixels: bytes) -> Iterator[Tuple[int, int, int]]:
    it = iter(pixels)
    return zip(it, it, it)


def encode_rgb(pixels: bytes, width: int, height: int) -> bytes:
    """Encode a flat RGB buffer of 800x480, or 480x800 portrait, into panel bytes.

    A portrait buffer is turned 90 degrees counter-clockwise first.
    """
    if (width, height) == (SCREEN_WIDTH, SCREEN_HEIGHT):
        if len(pixels) != width * height * 3:
            raise ValueError("buffer size mismatch")
        landscape = bytes(pixels)
    elif (width, height) == (SCREEN_HEIGHT, SCREEN_WIDTH):
        landscape = bytes(rotate90(pixels, width, height))
    else:
        raise ValueError("Expected 800x480 or rotated 480x800 image")
    return pack_pixels(_triples(landscape))


def load_rgb(path) -> Tuple[bytes, int, int]:
    """Load an image file as a flat RGB buffer; returns (pixels, width, height)."""
    try:
        with Image.open(path) as img:
            rgb = img.convert("RGB")
    except OSError as exc:
        raise OSError(f"Failed to load image: {path}") from exc
    return rgb.tobytes(), rgb.width, rgb.height


def encode_image(path, allow_rotated: bool = False) -> bytes:
    """Load an image file and encode it into the panel's packed format.

    Only 800x480 images are accepted, plus 480x800 when ``allow_rotated``.
    """
    pixels, width, height = load_rgb(path)
    size = (width, height)
    if size != (SCREEN_WIDTH, SCREEN_HEIGHT):
        if not allow_rotated:
            raise ValueError("Expected 800x480 image")
        if size != (SCREEN_HEIGHT, SCREEN_WIDTH):
            raise ValueError("Expected 800x480 or rotated 480x800 image")
    return encode_rgb(pixels, width, height)