from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ColorElement = Tuple[Scalar, Scalar, Scalar]
ColorSpace = Literal["rgb", "hsl", "oklch"]
COLOR_SPACES: Tuple[ColorSpace, ...] = ("rgb", "hsl", "oklch")
HUE_SPACES = {"hsl", "oklch"}


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: tuple of channel values or an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.array([float(v) for v in element], dtype=float)


def validate_space(color_space: str) -> ColorSpace:
    """Return the lowercased space name or raise ValueError when unknown."""
    space = color_space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown color space: {color_space!r}")
    return space  # type: ignore[return-value]
