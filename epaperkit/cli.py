"""Command line tool: fit an image to the panel and dither it to a PNG."""

from __future__ import annotations

import sys

from PIL import Image

from .dither import atkinson, floyd_steinberg

WIDTH = 800
HEIGHT = 480

USAGE = "Usage: epaperkit <0:Floyd|1:Atkinson> <input> <output>"


def fit_canvas(image: Image.Image, width: int, height: int) -> Image.Image:
    """Scale ``image`` to cover width x height, keeping its aspect ratio,
    and crop the centre."""
    rgb = image.convert("RGB")
    iw, ih = rgb.size
    in_ar = iw / ih
    out_ar = width / height
    if in_ar > out_ar:
        rh = height
        rw = max(width, int(height * in_ar))
    else:
        rw = width
        rh = max(height, int(width / in_ar))
    resized = rgb.resize((rw, rh), Image.Resampling.BILINEAR)
    cx = (rw - width) // 2
    cy = (rh - height) // 2
    return resized.crop((cx, cy, cx + width, cy + height))


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print(USAGE, file=sys.stderr)
        return 1
    method_text, source, target = args
    try:
        method = int(method_text)
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        with Image.open(source) as img:
            canvas = fit_canvas(img, WIDTH, HEIGHT)
    except OSError:
        print("Failed to load image", file=sys.stderr)
        return 2

    pixels = canvas.tobytes()
    if method == 0:
        dithered = floyd_steinberg(pixels, WIDTH, HEIGHT)
    else:
        dithered = atkinson(pixels, WIDTH, HEIGHT)

    try:
        Image.frombytes("RGB", (WIDTH, HEIGHT), bytes(dithered)).save(target, format="PNG")
    except (OSError, ValueError):
        print("Failed to write image", file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())