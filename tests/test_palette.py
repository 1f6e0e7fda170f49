import pytest

from epaperkit.palette import PALETTE, EPDColor, closest_epd_color, nearest_color


@pytest.mark.parametrize("color", list(EPDColor))
def test_palette_colors_map_to_themselves(color):
    assert closest_epd_color(PALETTE[color]) is color
    assert nearest_color(PALETTE[color]) == PALETTE[color]


@pytest.mark.parametrize("color", list(EPDColor))
def test_rgb_property_matches_palette(color):
    assert nearest_color(color.rgb) == PALETTE[color]
    assert closest_epd_color(color.rgb) is color


def test_yellow_code_is_two():
    assert closest_epd_color((255, 255, 0)) == 2


def test_dark_grey_goes_to_black():
    assert nearest_color((10, 10, 10)) == PALETTE[EPDColor.BLACK]
    assert closest_epd_color([10, 10, 10]) is EPDColor.BLACK


def test_light_grey_goes_to_white():
    assert closest_epd_color((240, 240, 240)) is EPDColor.WHITE


@pytest.mark.parametrize(
    "rgb",
    [(0, 0, 0), (12, 200, 40), (250, 10, 10), (30, 30, 220), (200, 190, 20), (127, 128, 129)],
)
def test_result_is_minimal_distance(rgb):
    best = nearest_color(rgb)
    assert best in PALETTE.values()
    best_d = sum((a - b) ** 2 for a, b in zip(rgb, best))
    for other in PALETTE.values():
        assert best_d <= sum((a - b) ** 2 for a, b in zip(rgb, other))


@pytest.mark.parametrize("rgb", [(1, 2, 3), (200, 100, 50), (90, 250, 90), (0, 0, 130)])
def test_two_lookups_agree(rgb):
    assert closest_epd_color(rgb).rgb == nearest_color(rgb)


def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        nearest_color((1, 2))