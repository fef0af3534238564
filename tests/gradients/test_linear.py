import pytest

from tincture.colors import HSL, OKLCH, RGB
from tincture.errors import DegenerateGradientDimensionError, GradientError
from tincture.gradients import (
    HSLLinearGradient,
    OKLCHLinearGradient,
    RGBLinearGradient,
    linear,
)
from tincture.units import Degrees, Direction

RED = RGB(255, 0, 0)
BLUE = RGB(0, 0, 255)


class TestRasterize:
    def test_to_right_three_pixels(self):
        bitmap = linear("to right", "red", "blue").rasterize(width=3, height=1)
        assert bitmap.at(0) == RED
        assert bitmap.at(2) == BLUE
        assert bitmap.at(1) == RED.blend(BLUE, 0.5)
        assert bitmap.at(1) == RGB(128, 0, 128)

    def test_default_direction_runs_top_to_bottom(self):
        bitmap = linear("red", "blue").rasterize(width=2, height=3)
        assert bitmap[0, 0] == RED
        assert bitmap[1, 0] == RED
        assert bitmap[0, 2] == BLUE
        assert bitmap[0, 1] == RGB(128, 0, 128)

    def test_to_left_reverses(self):
        bitmap = linear("to left", "red", "blue").rasterize(width=3)
        assert bitmap.at(0) == BLUE
        assert bitmap.at(2) == RED

    def test_to_top(self):
        bitmap = linear("to top", "red", "blue").rasterize(height=2)
        assert bitmap[0, 0] == BLUE
        assert bitmap[0, 1] == RED

    def test_single_pixel_is_the_midpoint(self):
        bitmap = linear("to right", "red", "blue").rasterize()
        assert len(bitmap) == 1
        assert bitmap.first == RGB(128, 0, 128)

    def test_diagonal_corners(self):
        bitmap = linear("to bottom right", "black", "white").rasterize(width=5, height=5)
        assert bitmap[0, 0] == RGB(0, 0, 0)
        assert bitmap[4, 4] == RGB(255, 255, 255)
        # the anti-diagonal sits halfway
        assert bitmap[4, 0] == bitmap[0, 4]

    def test_multi_stop(self):
        gradient = linear("to right", "red", "lime", "blue")
        bitmap = gradient.rasterize(width=5)
        assert [c.to_hex() for c in bitmap] == [
            "#ff0000", "#808000", "#00ff00", "#008080", "#0000ff",
        ]

    def test_outside_stop_range_uses_edge_colors(self):
        gradient = linear("to right", ("red", 0.25), ("blue", 0.75))
        bitmap = gradient.rasterize(width=5)
        assert bitmap.at(0) == RED
        assert bitmap.at(1) == RED
        assert bitmap.at(2) == RGB(128, 0, 128)
        assert bitmap.at(4) == BLUE

    def test_hard_stop(self):
        gradient = linear("to right", ("red", 0.0), ("red", 0.5), ("blue", 0.5), ("blue", 1.0))
        bitmap = gradient.rasterize(width=3)
        assert bitmap.at(0) == RED
        assert bitmap.at(2) == BLUE

    def test_bad_dimensions(self):
        gradient = linear("red", "blue")
        for width, height in ((0, 1), (1, 0), (-2, 3), (1.5, 1), (True, 1)):
            with pytest.raises(DegenerateGradientDimensionError):
                gradient.rasterize(width=width, height=height)


class TestSpaces:
    def test_space_follows_first_color(self):
        assert isinstance(linear("red", "blue"), RGBLinearGradient)
        assert isinstance(linear("hsl(0, 100%, 50%)", "blue"), HSLLinearGradient)
        assert isinstance(linear("oklch(0.6 0.2 30)", "blue"), OKLCHLinearGradient)
        assert isinstance(linear(HSL(0, 100, 50), "blue"), HSLLinearGradient)
        assert isinstance(linear(OKLCH(0.6, 0.2, 30), RED), OKLCHLinearGradient)
        assert isinstance(linear(("hsl(0, 100%, 50%)", 0.0), "blue"), HSLLinearGradient)

    def test_hsl_gradient_interpolates_hue(self):
        bitmap = linear("to right", HSL(0, 100, 50), HSL(240, 100, 50)).rasterize(width=3)
        middle = bitmap.at(1)
        assert isinstance(middle, HSL)
        # shorter arc from 0 to 240 goes backwards through magenta
        assert float(middle.hue) == pytest.approx(300)

    def test_oklch_pixels_stay_in_space(self):
        bitmap = linear("to right", OKLCH(0.5, 0.1, 20), OKLCH(0.7, 0.1, 80)).rasterize(width=3)
        assert all(isinstance(c, OKLCH) for c in bitmap)
        assert float(bitmap.at(1).hue) == pytest.approx(50)
        assert float(bitmap.at(1).lightness) == pytest.approx(0.6)

    def test_unknown_first_color(self):
        with pytest.raises(GradientError):
            linear(None, "blue")


class TestArguments:
    def test_direction_forms(self):
        for direction in (
            90, "90deg", "to right", "from left to right", Degrees.RIGHT,
            Direction.LEFT_TO_RIGHT, {"from": 270, "to": 90},
        ):
            gradient = linear(direction, "red", "blue")
            assert gradient.direction == Direction.LEFT_TO_RIGHT, direction

    def test_direction_keyword(self):
        gradient = linear("red", "blue", direction="to left")
        assert gradient.direction == Direction.RIGHT_TO_LEFT

    def test_single_list_argument(self):
        gradient = linear(["red", ("blue", 1.0)])
        assert [s.position for s in gradient.stops] == [0.0, 1.0]
        gradient = linear("to right", ["red", "blue"])
        assert gradient.direction == Direction.LEFT_TO_RIGHT

    def test_needs_colors(self):
        with pytest.raises(GradientError):
            linear()
        with pytest.raises(GradientError):
            linear("to right")
        with pytest.raises(GradientError):
            linear([])
