"""
Gradient engine.

Gradients are lists of :class:`Stop` plus a :class:`~tincture.units.Direction`.
:func:`linear` picks the color space from the first color; the typed
classes can be used directly when the space is known.

Examples:
    >>> from tincture.gradients import linear
    >>> bitmap = linear("to right", "#ff0000", "#0000ff").rasterize(width=3)
    >>> [c.to_hex() for c in bitmap]
    ['#ff0000', '#800080', '#0000ff']
"""
from .stop import Stop
from .bitmap import Bitmap
from .base import LinearGradient, balance_positions, DEFAULT_DIRECTION
from .linear import (
    RGBLinearGradient,
    HSLLinearGradient,
    OKLCHLinearGradient,
    GRADIENT_CLASSES,
    linear,
)

__all__ = [
    "Stop",
    "Bitmap",
    "LinearGradient",
    "balance_positions",
    "DEFAULT_DIRECTION",
    "RGBLinearGradient",
    "HSLLinearGradient",
    "OKLCHLinearGradient",
    "GRADIENT_CLASSES",
    "linear",
]
