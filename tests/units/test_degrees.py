import pytest

from tincture.errors import DegreesParseError, InvalidDirectionKeywordError
from tincture.units import Degrees, KEYWORD_ANGLES


def test_parse_numbers():
    assert Degrees.parse("45") == 45
    assert Degrees.parse("45deg") == 45
    assert Degrees.parse("45DEG") == 45
    assert Degrees.parse("45°") == 45
    assert Degrees.parse(" -12.5 ") == 347.5
    assert Degrees.parse("450") == 90
    assert Degrees.parse(90) == 90


def test_parse_keywords():
    assert Degrees.parse("to top") == 0
    assert Degrees.parse("to right") == 90
    assert Degrees.parse("to bottom") == 180
    assert Degrees.parse("to left") == 270
    assert Degrees.parse("to top right") == 45
    assert Degrees.parse("to bottom right") == 135
    assert Degrees.parse("to bottom left") == 225
    assert Degrees.parse("to top left") == 315


def test_keyword_order_does_not_matter():
    assert Degrees.parse("to bottom left") == 225
    assert Degrees.parse("to left bottom") == 225
    assert Degrees.parse("to  RIGHT   top") == 45


def test_keyword_returns_named_constant():
    assert Degrees.parse("to top") is Degrees.TOP
    assert Degrees.parse("to left bottom") is Degrees.BOTTOM_LEFT
    assert Degrees.parse("to bottom").name == "bottom"


def test_invalid_keyword():
    with pytest.raises(InvalidDirectionKeywordError):
        Degrees.parse("to middle")
    with pytest.raises(InvalidDirectionKeywordError):
        Degrees.parse("to top bottom")
    # still a parse error for callers catching the broader type
    with pytest.raises(DegreesParseError):
        Degrees.parse("to nowhere")


def test_invalid_format():
    with pytest.raises(DegreesParseError, match="Invalid degrees format"):
        Degrees.parse("forty five")
    with pytest.raises(DegreesParseError):
        Degrees.parse("")
    with pytest.raises(DegreesParseError, match="Input must be a string"):
        Degrees.parse(None)


def test_find_by_name():
    assert Degrees.find_by_name("top") is Degrees.TOP
    assert Degrees.find_by_name("north") is Degrees.TOP
    assert Degrees.find_by_name("Bottom Left") is Degrees.BOTTOM_LEFT
    assert Degrees.find_by_name("left bottom") is Degrees.BOTTOM_LEFT
    assert Degrees.find_by_name("bottom-left") is Degrees.BOTTOM_LEFT
    assert Degrees.find_by_name("southwest") is Degrees.BOTTOM_LEFT
    assert Degrees.find_by_name("topleft") is Degrees.TOP_LEFT
    assert Degrees.find_by_name("center") is None
    assert Degrees.find_by_name(12) is None


def test_parse_bare_names():
    assert Degrees.parse("top") is Degrees.TOP
    assert Degrees.parse("east") is Degrees.RIGHT


def test_opposite():
    assert Degrees(0).opposite == 180
    assert Degrees(350).opposite == 170
    assert Degrees.TOP.opposite is Degrees.BOTTOM
    assert Degrees.TOP_RIGHT.opposite is Degrees.BOTTOM_LEFT
    assert Degrees(10).opposite.name is None


def test_build():
    assert Degrees.build(Degrees.LEFT) is Degrees.LEFT
    assert Degrees.build(30) == 30
    assert Degrees.build("to right") == 90
    with pytest.raises(DegreesParseError, match="Expected Numeric, String, or Degrees"):
        Degrees.build([1, 2])
    with pytest.raises(DegreesParseError):
        Degrees.build(True)


def test_arithmetic_wraps_and_drops_name():
    result = Degrees.LEFT + 180
    assert result == 90
    assert isinstance(result, Degrees)
    assert result.name is None


def test_output():
    assert Degrees(225).to_css() == "225.0deg"
    assert str(Degrees(123)) == "123.0°"
    assert str(Degrees.BOTTOM_LEFT) == "bottom left"
    assert repr(Degrees.TOP) == "Degrees(0.0, name='top')"
    assert repr(Degrees(12.5)) == "Degrees(12.5)"


def test_named_constants_match_keyword_table():
    named = {float(d): d for d in Degrees.named()}
    assert len(named) == 8
    for angle in KEYWORD_ANGLES.values():
        assert angle in named


def test_named_constants_are_immutable():
    with pytest.raises(AttributeError):
        Degrees.TOP.name = "up"
    with pytest.raises(AttributeError):
        Degrees.TOP.aliases = ("north",)
    with pytest.raises(AttributeError):
        Degrees(30).name = "thirty"
    assert Degrees.TOP.name == "top"
    assert Degrees.find_by_name("top") is Degrees.TOP
