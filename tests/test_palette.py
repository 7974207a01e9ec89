import pytest

from terrain.palette import HSB, clamp, derive_bottom_color, derive_palette, derive_top_color
from terrain.sun import sun_color


@pytest.mark.parametrize("hue", [0.0, 1.5, 120.0, 200.25, 255.0])
def test_top_color_fixed_channels(hue):
    top = derive_top_color(hue)
    assert top.hue == hue
    assert top.saturation == 115
    assert top.brightness == 150


def test_bottom_color_relationships():
    for top in (derive_top_color(42.0), HSB(10.0, 250.0, 200.0), HSB(0.0, 0.0, 0.0)):
        bottom = derive_bottom_color(top)
        assert bottom.hue == top.hue
        assert bottom.saturation == pytest.approx(clamp(top.saturation * 0.9))
        assert bottom.brightness == pytest.approx(clamp(top.brightness * 1.5))


def test_out_of_range_is_clamped_not_rejected():
    bright = derive_bottom_color(HSB(10.0, 250.0, 200.0))
    assert bright.brightness == 255.0
    assert HSB.of(-5, 300, 128) == HSB(0.0, 255.0, 128.0)


def test_sun_brighter_than_sky_bottom():
    palette = derive_palette(120.0)
    sun = sun_color(palette.top)
    assert sun.hue == palette.top.hue
    assert sun.brightness == pytest.approx(240.0)
    assert sun.brightness > palette.bottom.brightness


def test_to_rgb_extremes():
    assert HSB(0, 0, 0).to_rgb() == (0, 0, 0)
    assert HSB(0, 0, 255).to_rgb() == (255, 255, 255)
    assert HSB(0, 255, 255).to_rgb() == (255, 0, 0)
