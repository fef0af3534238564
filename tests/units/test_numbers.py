import math

import pytest

from tincture.units import (
    Component,
    Hue,
    Chroma,
    Percentage,
    UnitFloat,
    round_half_up,
    safe_divide,
    wrap_angle,
)


def test_component_clamps_and_rounds_half_up():
    assert Component(300) == 255
    assert Component(-5) == 0
    assert Component(127.5) == 128
    assert Component(2.5) == 3
    assert Component(2.4) == 2
    assert Component(" 12 ") == 12
    assert isinstance(Component(10), int)


def test_component_arithmetic_stays_in_range():
    result = Component(250) + 10
    assert result == 255
    assert isinstance(result, Component)

    assert Component(100) * 3 == 255
    assert 10 - Component(20) == 0
    assert isinstance(10 - Component(20), Component)
    assert Component(100) / 3 == 33
    assert -Component(10) == 0
    assert abs(Component(10)) == 10


def test_division_by_zero_lands_on_a_bound():
    assert Component(100) / 0 == 255
    assert Component(0) / 0 == 0
    assert -Component(0) / 0 == 0
    assert Percentage(50) / 0 == 100
    assert Chroma(0.2) / 0 == 0.5
    assert UnitFloat(0.3) / -0.0 == 0.0
    assert 10 / Component(0) == 255
    assert Hue(90) / 0 == 0
    assert isinstance(Hue(90) / 0, Hue)


def test_safe_divide():
    assert safe_divide(6.0, 3.0) == 2.0
    assert safe_divide(1.0, 0.0) == math.inf
    assert safe_divide(-1.0, 0.0) == -math.inf
    assert safe_divide(1.0, -0.0) == -math.inf
    assert safe_divide(0.0, 0.0) == 0.0


def test_wrap_angle_non_finite():
    assert wrap_angle(math.inf) == 0.0
    assert wrap_angle(math.nan) == 0.0


def test_component_rejects_non_numbers():
    with pytest.raises(TypeError):
        Component(10) + "x"
    with pytest.raises(ValueError):
        Component("abc")


def test_hue_wraps():
    assert Hue(370) == 10
    assert Hue(-30) == 330
    assert Hue(360) == 0
    assert Hue(720) == 0
    assert Hue(359.5) == 359.5


def test_hue_arithmetic_wraps():
    result = Hue(350) + 20
    assert math.isclose(result, 10)
    assert isinstance(result, Hue)
    assert -Hue(90) == 270
    assert math.isclose(Hue(10) - 30, 340)
    assert 0 <= Hue(200) * 2 < 360


def test_wrap_angle_never_returns_period():
    for value in (-1e-17, -360.0, 360.0, 1e-300, -0.0):
        wrapped = wrap_angle(value)
        assert 0.0 <= wrapped < 360.0
    assert math.copysign(1.0, wrap_angle(-0.0)) == 1.0


def test_percentage():
    assert Percentage(150) == 100
    assert Percentage(-1) == 0
    assert Percentage(3, 4) == 75
    assert Percentage(1, 0) == 0
    assert Percentage(75.5).format() == "75.5%"
    assert Percentage(12.5).format(0) == "12%"
    assert Percentage(40).format(2) == "40.00%"
    assert str(Percentage(50)) == "50.0%"
    assert Percentage(25).to_ratio() == 0.25


def test_percentage_arithmetic_clamps():
    result = Percentage(90) + 20
    assert result == 100
    assert isinstance(result, Percentage)


def test_bounded_floats():
    assert UnitFloat(1.5) == 1.0
    assert UnitFloat(-0.5) == 0.0
    assert Chroma(0.7) == 0.5
    assert Chroma(-1) == 0.0
    assert Chroma(0.2).value == 0.2
    assert isinstance(UnitFloat(0.5) * 4, UnitFloat)
    assert UnitFloat(0.5) * 4 == 1.0


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
