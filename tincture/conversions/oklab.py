"""
OKLab / OKLCH conversions.

Matrices from Björn Ottosson, "A perceptual color space for image
processing" (2020): https://bottosson.github.io/posts/oklab/
"""
import numpy as np
from numpy import ndarray as NDArray

from .srgb import np_srgb_to_linear, np_linear_to_srgb

LINEAR_SRGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

LMS_TO_LINEAR_SRGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])

# below this chroma the hue angle is numerical noise
ACHROMATIC_CHROMA = 1e-4


def np_linear_srgb_to_oklab(rgb: NDArray) -> NDArray:
    """(..., 3) linear-light RGB -> (..., 3) OKLab."""
    lms = np.asarray(rgb, dtype=float) @ LINEAR_SRGB_TO_LMS.T
    return np.cbrt(lms) @ LMS_TO_OKLAB.T


def np_oklab_to_linear_srgb(lab: NDArray) -> NDArray:
    """(..., 3) OKLab -> (..., 3) linear-light RGB (may be out of gamut)."""
    lms_ = np.asarray(lab, dtype=float) @ OKLAB_TO_LMS.T
    return (lms_ ** 3) @ LMS_TO_LINEAR_SRGB.T


def np_oklab_to_oklch(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    C = np.hypot(a, b)
    H = np.degrees(np.arctan2(b, a)) % 360
    H = np.where(C < ACHROMATIC_CHROMA, 0.0, H)
    return np.stack([L, C, H], axis=-1)


def np_oklch_to_oklab(lch: NDArray) -> NDArray:
    lch = np.asarray(lch, dtype=float)
    L, C, H = lch[..., 0], lch[..., 1], np.radians(lch[..., 2])
    return np.stack([L, C * np.cos(H), C * np.sin(H)], axis=-1)


def np_unit_rgb_to_oklch(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert gamma-encoded RGB to OKLCH.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        oklch: array of shape (..., 3): (lightness [0,1], chroma >= 0, hue [0,360))
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float)
    ), axis=-1)
    return np_oklab_to_oklch(np_linear_srgb_to_oklab(np_srgb_to_linear(rgb)))


def np_oklch_to_unit_rgb(L: NDArray, C: NDArray, H: NDArray) -> NDArray:
    """
    Vectorized: Convert OKLCH to gamma-encoded RGB, clipped to the sRGB gamut.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    lch = np.stack(np.broadcast_arrays(
        np.asarray(L, dtype=float), np.asarray(C, dtype=float), np.asarray(H, dtype=float)
    ), axis=-1)
    return np_linear_to_srgb(np_oklab_to_linear_srgb(np_oklch_to_oklab(lch)))
