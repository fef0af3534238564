import numpy as np
from numpy import ndarray as NDArray

# sRGB transfer function breakpoints
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
# WCAG 2.x relative luminance uses the older breakpoint
WCAG_THRESHOLD = 0.03928
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """
    Vectorized inverse sRGB transfer (gamma expansion).

    Args:
        c: array-like, gamma-encoded channel values in [0, 1]

    Returns:
        linear-light values in [0, 1]
    """
    c = np.clip(np.asarray(c, dtype=float), 0.0, 1.0)
    return np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / 12.92,
        ((c + 0.055) / 1.055) ** 2.4,
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """
    Vectorized sRGB transfer (gamma compression).

    Values outside [0, 1] are out of gamut and are clipped first.
    """
    c = np.clip(np.asarray(c, dtype=float), 0.0, 1.0)
    return np.where(
        c <= SRGB_ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * c ** (1 / 2.4) - 0.055,
    )


def np_relative_luminance(rgb: NDArray) -> NDArray:
    """
    WCAG relative luminance of unit RGB values.

    Args:
        rgb: array of shape (..., 3), channels in [0, 1]

    Returns:
        array of shape (...) with luminance in [0, 1]
    """
    c = np.clip(np.asarray(rgb, dtype=float), 0.0, 1.0)
    linear = np.where(c <= WCAG_THRESHOLD, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    return linear @ LUMINANCE_WEIGHTS


def relative_luminance(r: float, g: float, b: float) -> float:
    """Scalar WCAG relative luminance of a unit RGB triple."""
    return float(np_relative_luminance(np.array([r, g, b], dtype=float)))
