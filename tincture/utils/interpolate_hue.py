"""
Hue interpolation along the shorter arc of the color wheel.
"""
import numpy as np
from numpy import ndarray as NDArray
from typing import Union

ArrayOrFloat = Union[float, NDArray]


def hue_delta(h0: ArrayOrFloat, h1: ArrayOrFloat) -> ArrayOrFloat:
    """Signed shortest angular distance from ``h0`` to ``h1``, in ``[-180, 180)``."""
    return ((np.asarray(h1, dtype=float) - np.asarray(h0, dtype=float) + 540.0) % 360.0) - 180.0


def hue_lerp(h0: ArrayOrFloat, h1: ArrayOrFloat, u: ArrayOrFloat) -> ArrayOrFloat:
    """
    Interpolate hue values with wrapping support.

    When the raw difference exceeds 180 degrees the interpolation runs
    through the 0/360 wrap point instead of the long way round.

    Args:
        h0: Start hue(s) in degrees [0, 360)
        h1: End hue(s) in degrees [0, 360)
        u: Interpolation coefficients in [0, 1]

    Returns:
        Interpolated hue values in [0, 360); a float when every input is scalar.
    """
    result = (np.asarray(h0, dtype=float) + hue_delta(h0, h1) * np.asarray(u, dtype=float)) % 360.0
    if np.ndim(result) == 0:
        return float(result)
    return result
