import threading

import pytest

from tincture.colors import CSS, X11, RGB, is_named, lookup, parse_named
from tincture.colors.named import NamedColorDatabase, get_database, normalize_name, split_prefix
from tincture.colors.named_tables import CSS_COLORS, gray_ramp
from tincture.errors import NamedColorNotFoundError


def test_normalize_name():
    assert normalize_name("Dark Golden Rod") == "darkgoldenrod"
    assert normalize_name("  RED\t") == "red"


def test_default_database_is_x11():
    assert lookup("gray") == RGB(190, 190, 190)
    assert lookup("green") == RGB(0, 255, 0)


def test_prefix_selects_database():
    assert lookup("css:gray") == RGB(128, 128, 128)
    assert lookup("w3c:gray") == RGB(128, 128, 128)
    assert lookup("x11:gray") == RGB(190, 190, 190)
    assert lookup("CSS : green") == RGB(0, 128, 0)


def test_unknown_prefix_is_part_of_the_name():
    db, name = split_prefix("foo:red")
    assert db is X11
    assert name == "foo:red"
    assert lookup("foo:red") is None


def test_explicit_database_argument():
    assert lookup("gray", database="css") == RGB(128, 128, 128)
    assert lookup("gray", database=CSS) == RGB(128, 128, 128)
    with pytest.raises(ValueError, match="Unknown named color database"):
        get_database("pantone")


def test_x11_only_names():
    assert lookup("navyblue") == RGB(0, 0, 128)
    assert lookup("gray50") == RGB(127, 127, 127)
    assert lookup("grey100") == RGB(255, 255, 255)
    assert lookup("css:navyblue") is None


def test_gray_ramp():
    ramp = gray_ramp()
    assert ramp["gray0"] == 0x000000
    assert ramp["gray100"] == 0xFFFFFF
    assert ramp["gray90"] == 0xE5E5E5
    assert ramp["gray1"] == 0x030303
    assert ramp["grey42"] == ramp["gray42"]


def test_css_table():
    assert len(CSS) == len(CSS_COLORS)
    assert "rebeccapurple" in CSS
    assert CSS.lookup("RebeccaPurple") == RGB(0x66, 0x33, 0x99)
    assert 12 not in CSS


def test_parse_named():
    assert parse_named("tomato") == RGB(255, 99, 71)
    with pytest.raises(NamedColorNotFoundError, match="Unknown color name in x11 database: 'blurple'") as info:
        parse_named("blurple")
    assert info.value.database == "x11"
    with pytest.raises(NamedColorNotFoundError, match="css database"):
        parse_named("css:navyblue")


def test_is_named():
    assert is_named("aliceblue")
    assert not is_named("#ffffff")
    assert not is_named(None)


def test_database_loads_once_under_concurrency():
    calls = []

    def loader():
        calls.append(1)
        return {"red": 0xFF0000}

    db = NamedColorDatabase("test", loader)
    assert not db.loaded

    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(db.lookup("red"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert db.loaded
    assert results == [RGB(255, 0, 0)] * 8
    assert db.names() == ["red"]
