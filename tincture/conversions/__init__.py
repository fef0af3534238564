"""
Tincture Color Space Conversions
================================

Vectorized (numpy) conversion kernels between RGB, HSL and OKLCH plus
the sRGB transfer functions and WCAG luminance they build on.

Kernels
-------
RGB ↔ HSL:
    np_unit_rgb_to_hsl(r, g, b)
    np_hsl_to_unit_rgb(h, s, l)

RGB ↔ OKLCH (through linear light and OKLab):
    np_unit_rgb_to_oklch(r, g, b)
    np_oklch_to_unit_rgb(L, C, H)

sRGB transfer:
    np_srgb_to_linear(c), np_linear_to_srgb(c)
    np_relative_luminance(rgb), relative_luminance(r, g, b)

High-Level API
--------------
    convert(color, from_space, to_space)
        Convert a channel tuple in stored ranges (rgb 0-255, hsl deg/%/%,
        oklch 0-1/0-0.5/deg). HSL ↔ OKLCH goes through unit RGB without
        intermediate rounding.
    np_convert(color, from_space, to_space)
        Same over an array of shape (..., 3)

Examples
--------
>>> from tincture.conversions import convert
>>> convert((255, 0, 0), "rgb", "hsl")
(0.0, 100.0, 50.0)
"""

from .hsl import np_unit_rgb_to_hsl, np_hsl_to_unit_rgb
from .oklab import (
    np_unit_rgb_to_oklch,
    np_oklch_to_unit_rgb,
    np_linear_srgb_to_oklab,
    np_oklab_to_linear_srgb,
)
from .srgb import (
    np_srgb_to_linear,
    np_linear_to_srgb,
    np_relative_luminance,
    relative_luminance,
)
from .wrapper import convert, np_convert

__all__ = [
    'np_unit_rgb_to_hsl',
    'np_hsl_to_unit_rgb',
    'np_unit_rgb_to_oklch',
    'np_oklch_to_unit_rgb',
    'np_linear_srgb_to_oklab',
    'np_oklab_to_linear_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'np_relative_luminance',
    'relative_luminance',
    'convert',
    'np_convert',
]
