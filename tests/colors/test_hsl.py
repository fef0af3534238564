import pytest

from tincture.colors import HSL, RGB
from tincture.errors import InvalidComponentCountError, InvalidComponentValueError, OutOfRangeValueError
from tincture.units import Hue, Percentage
from ..samples import samples_rgb, samples_rgb_hsl


def test_channels():
    color = HSL(400, 120, -5)
    assert color.to_tuple() == (40.0, 100.0, 0.0)
    assert isinstance(color.hue, Hue)
    assert isinstance(color.saturation, Percentage)
    assert isinstance(color.lightness, Percentage)
    assert color.has_hue


def test_parse():
    assert HSL.parse("hsl(210, 40%, 60%)") == HSL(210, 40, 60)
    assert HSL.parse("HSL(210deg, 40, 60)") == HSL(210, 40, 60)
    assert HSL.parse("hsl(12.5, 0.5%, 99.9%)").to_tuple() == (12.5, 0.5, 99.9)
    assert HSL.parse("hsl(-30, 50%, 50%)").hue == 330


def test_parse_errors():
    with pytest.raises(InvalidComponentCountError, match="Expected 3 HSL values, got 2"):
        HSL.parse("hsl(10, 20%)")
    with pytest.raises(InvalidComponentValueError, match="Invalid hue value: 'red'"):
        HSL.parse("hsl(red, 20%, 30%)")
    with pytest.raises(InvalidComponentValueError, match="saturation"):
        HSL.parse("hsl(10, lots, 30%)")
    with pytest.raises(OutOfRangeValueError, match="Saturation must be between 0 and 100, got 150"):
        HSL.parse("hsl(10, 150%, 30%)")
    with pytest.raises(OutOfRangeValueError, match="Lightness"):
        HSL.parse("hsl(10, 50%, -1%)")


def test_to_rgb():
    for rgb, hsl in samples_rgb_hsl.items():
        if rgb in ((255, 128, 0), (128, 128, 128)):
            continue
        assert HSL(hsl).to_rgb() == RGB(rgb)


def test_round_trip_through_rgb():
    for rgb in samples_rgb:
        color = RGB(rgb)
        assert color.to_hsl().to_rgb() == color


def test_lighten_darken():
    color = HSL(200, 50, 40)
    assert color.lighten(0.5).lightness == 70
    assert color.darken(0.5).lightness == 20
    assert color.lighten(0.5).hue == 200
    assert color.lighten(0.5).saturation == 50
    assert HSL(0, 0, 100).lighten(0.3).lightness == 100
    assert HSL(0, 0, 0).darken(0.3).lightness == 0


def test_blend_takes_short_hue_arc():
    a = HSL(350, 100, 50)
    b = HSL(10, 100, 50)
    assert a.blend(b, 0.5).hue == 0.0
    assert float(a.blend(b, 0.25).hue) == pytest.approx(355.0)


def test_to_css():
    assert HSL(210, 40, 60).to_css() == "hsl(210.0, 40.0%, 60.0%)"
    assert str(HSL(12.34567, 50, 50)) == "hsl(12.3457, 50.0%, 50.0%)"
