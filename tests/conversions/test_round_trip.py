import numpy as np

from tincture.conversions import convert, np_convert
from ..samples import samples_rgb


def test_rgb_hsl_rgb_round_trip():
    for rgb in samples_rgb:
        hsl = convert(rgb, "rgb", "hsl")
        assert convert(hsl, "hsl", "rgb") == rgb


def test_rgb_oklch_rgb_round_trip():
    for rgb in samples_rgb:
        oklch = convert(rgb, "rgb", "oklch")
        assert convert(oklch, "oklch", "rgb") == rgb


def test_full_cube_round_trip_numpy():
    levels = np.arange(0, 256, 15, dtype=float)
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    cube = np.stack([r, g, b], axis=-1).reshape(-1, 3)

    for space in ("hsl", "oklch"):
        there = np_convert(cube, "rgb", space)
        back = np_convert(there, space, "rgb")
        assert np.array_equal(back, cube.astype(int)), space


def test_hsl_oklch_hsl_round_trip():
    hsl = (200.0, 60.0, 45.0)
    oklch = convert(hsl, "hsl", "oklch")
    h, s, l = convert(oklch, "oklch", "hsl")
    assert abs(h - hsl[0]) < 1e-4
    assert abs(s - hsl[1]) < 1e-4
    assert abs(l - hsl[2]) < 1e-4
