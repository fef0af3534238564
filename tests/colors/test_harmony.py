import pytest

from tincture.colors import HSL, OKLCH, RGB

RED = RGB(255, 0, 0)


def hues(colors):
    return [round(c.to_hsl().hue.value) % 360 for c in colors]


def test_complementary():
    assert RED.complementary() == RGB(0, 255, 255)
    assert HSL(30, 50, 50).complementary() == HSL(210, 50, 50)


def test_schemes_rotate_hue():
    assert hues(RED.analogous()) == [330, 30]
    assert hues(RED.analogous(45)) == [315, 45]
    assert hues(RED.triadic()) == [120, 240]
    assert hues(RED.split_complementary()) == [150, 210]
    assert hues(RED.tetradic_square()) == [90, 180, 270]
    assert hues(RED.tetradic_rectangle()) == [60, 180, 240]


def test_results_stay_in_the_callers_space():
    assert all(isinstance(c, RGB) for c in RED.triadic())
    assert all(isinstance(c, HSL) for c in HSL(0, 100, 50).triadic())
    assert all(isinstance(c, OKLCH) for c in RED.to_oklch().analogous())


def test_monochromatic():
    colors = HSL(200, 60, 50).monochromatic(5)
    assert [c.lightness.value for c in colors] == pytest.approx([15, 32.5, 50, 67.5, 85])
    assert all(c.hue == 200 and c.saturation == 60 for c in colors)
    assert [c.lightness.value for c in HSL(200, 60, 50).monochromatic(1)] == [50]


def test_shades_tints_tones():
    base = HSL(0, 80, 60)

    shades = base.shades(4, amount=0.5)
    assert [c.lightness.value for c in shades] == pytest.approx([52.5, 45, 37.5, 30])

    tints = base.tints(4, amount=0.5)
    assert [c.lightness.value for c in tints] == pytest.approx([65, 70, 75, 80])

    tones = base.tones(4, amount=0.5)
    assert [c.saturation.value for c in tones] == pytest.approx([70, 60, 50, 40])
    assert all(c.lightness == 60 for c in tones)


def test_steps_must_be_positive():
    for method in ("monochromatic", "shades", "tints", "tones"):
        with pytest.raises(ValueError, match="steps must be at least 1"):
            getattr(RED, method)(0)
