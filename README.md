# epaperkit

Tools for preparing pictures for 6-colour (black, white, yellow, red, blue,
green) 800×480 e-paper panels. The package maps colours to the panel palette,
dithers, adjusts tone and colour, and packs pixels into the panel's
4-bit-per-pixel frame format.

## Install

    pip install epaperkit

## Command line

    epaperkit <method> <input> <output>

The command scales the input image so that it covers 800×480 while keeping
its aspect ratio, crops the centre, dithers it to the panel palette and writes
the result as a PNG. A method of `0` uses Floyd–Steinberg; any other number
uses Atkinson.

    epaperkit 0 photo.jpg out.png   # Floyd–Steinberg
    epaperkit 1 photo.jpg out.png   # Atkinson

Exit status: `0` on success, `1` for wrong arguments (a usage line is printed
to standard error), `2` if the input cannot be loaded, `3` if the output cannot
be written.

## Library

### `epaperkit.palette`

- `EPDColor`: the panel colour codes (`BLACK=0`, `WHITE=1`, `YELLOW=2`,
  `RED=3`, `BLUE=5`, `GREEN=6`); each member's `rgb` property gives its RGB
  value.
- `closest_epd_color(rgb)`: the `EPDColor` nearest to an RGB triple in
  Euclidean RGB space; ties go to the lower code.
- `nearest_color(rgb)`: the RGB value of that nearest palette colour.

### `epaperkit.dither`

All functions take a flat RGB888 buffer (`bytes` or `bytearray`) with its
width and height, raise `ValueError` if the buffer length does not match, and
return a new `bytearray`.

- `floyd_steinberg(pixels, width, height)`: Floyd–Steinberg error diffusion.
  The first and last columns and the last row are left unquantized.
- `atkinson(pixels, width, height)`: Atkinson error diffusion. The last two
  columns and the last two rows are left unquantized.
- `rotate90(pixels, width, height)`: rotates 90° counter-clockwise; the result
  is `height` pixels wide and `width` pixels high.

### `epaperkit.adjust`

- `ImageAdjustParams` (exposure in EV, contrast, highlight, shadow,
  saturation, temperature, tint) with
  `adjust_image(pixels, width, height, params)`: applies exposure, white
  balance and tint, contrast around mid-grey, highlight compression and shadow
  lifting, then saturation, on normalised values.
- `SliderParams` (exposure, contrast, highlight, shadow, saturation,
  temperature, hue; slider positions in -100..100) with
  `adjust_image_sliders(pixels, width, height, params)`: a rougher pass using
  scaling, an HSV hue and saturation shift, a red/blue temperature offset and
  luminance-based highlight/shadow scaling.

Both return a new `bytearray` and raise `ValueError` on a size mismatch.

### `epaperkit.packing`

A panel buffer is 800×480 / 2 = 192,000 bytes. Each byte holds two pixels:
the left (even-column) pixel in the high nibble and the right pixel in the
low nibble, using the codes of `EPDColor`.

- `pack_pixels(pixels)`: maps an iterable of RGB triples to panel colours and
  packs them two per byte; an odd count is padded with black.
- `encode_rgb(pixels, width, height)`: encodes a flat 800×480 RGB buffer, or a
  480×800 one after turning it counter-clockwise; other sizes raise
  `ValueError`.
- `load_rgb(path)`: loads an image file with Pillow and returns
  `(pixels, width, height)`; raises `OSError` if it cannot be read.
- `encode_image(path, allow_rotated=False)`: loads and encodes a file. Only
  800×480 images are accepted, plus 480×800 when `allow_rotated` is true;
  otherwise `ValueError` is raised.
- Test patterns: `set_pixel(buffer, x, y, value)` writes one pixel into a
  packed buffer (ignoring off-screen coordinates), `draw_box(margin, width,
  value)` returns a black buffer with a rectangular outline, and
  `fill_segmented_screen()` returns six vertical colour stripes.

Example:

    from epaperkit.packing import encode_image

    payload = encode_image("picture.bmp", allow_rotated=True)
    assert len(payload) == 800 * 480 // 2

## What it does not do

epaperkit only produces images and frame buffers. It does not drive the
panel over GPIO/SPI, does not send payloads over the network or run a server
that receives them, and has no graphical editor; the bytes it produces are
for another program to deliver to the display.

## Tests

    pip install epaperkit[test]
    pytest