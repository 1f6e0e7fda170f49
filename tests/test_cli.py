from PIL import Image

from epaperkit.cli import HEIGHT, WIDTH, fit_canvas, main
from epaperkit.palette import PALETTE

PALETTE_COLORS = set(PALETTE.values())


def test_fit_canvas_uniform_image_keeps_colour():
    img = Image.new("RGB", (30, 10), (10, 20, 30))
    out = fit_canvas(img, 8, 4)
    assert out.size == (8, 4)
    assert set(out.getdata()) == {(10, 20, 30)}


def test_fit_canvas_tall_image_size():
    img = Image.new("RGB", (10, 50), (1, 2, 3))
    out = fit_canvas(img, WIDTH, HEIGHT)
    assert out.size == (WIDTH, HEIGHT)
    assert out.mode == "RGB"


def test_fit_canvas_crops_centre():
    img = Image.new("RGB", (40, 10), (255, 0, 0))
    img.paste((0, 0, 255), (20, 0, 40, 10))
    out = fit_canvas(img, 8, 4)
    assert out.getpixel((0, 2)) == (255, 0, 0)
    assert out.getpixel((7, 2)) == (0, 0, 255)


def test_main_usage(capsys):
    assert main(["0", "only-input"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_bad_method(capsys, tmp_path):
    assert main(["fast", str(tmp_path / "a.png"), str(tmp_path / "b.png")]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_input(tmp_path):
    assert main(["1", str(tmp_path / "absent.png"), str(tmp_path / "out.png")]) == 2


def test_main_atkinson_writes_palette_png(tmp_path):
    source = tmp_path / "in.png"
    target = tmp_path / "out.png"
    Image.new("RGB", (40, 30), (128, 128, 128)).save(source)
    assert main(["1", str(source), str(target)]) == 0
    with Image.open(target) as out:
        assert out.size == (WIDTH, HEIGHT)
        data = list(out.convert("RGB").getdata())
    quantized = {
        data[y * WIDTH + x] for y in range(0, HEIGHT - 2, 7) for x in range(0, WIDTH - 2, 7)
    }
    assert quantized <= PALETTE_COLORS


def test_main_floyd_write_failure(tmp_path):
    source = tmp_path / "in.png"
    Image.new("RGB", (16, 16), (255, 255, 0)).save(source)
    target = tmp_path / "missing" / "out.png"
    assert main(["0", str(source), str(target)]) == 3
    assert not target.exists()