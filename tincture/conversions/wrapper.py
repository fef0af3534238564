import numpy as np
from typing import Callable, Dict, Tuple

from .hsl import np_unit_rgb_to_hsl, np_hsl_to_unit_rgb
from .oklab import np_unit_rgb_to_oklch, np_oklch_to_unit_rgb

from ..types.color_types import ColorElement, element_to_array, ColorSpace, validate_space

RGB_MAX = 255.0
PERCENT_MAX = 100.0

# Direct kernels; every other pair goes through unit RGB.
CONVERT_NUMPY: Dict[Tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_unit_rgb,
    ("rgb", "oklch"): np_unit_rgb_to_oklch,
    ("oklch", "rgb"): np_oklch_to_unit_rgb,
}


def normalize(color: np.ndarray, space: str) -> np.ndarray:
    """Map stored channel ranges onto the unit ranges the kernels expect."""
    if space == "rgb":
        return color / RGB_MAX

    if space == "hsl":
        h = color[..., 0]
        s = color[..., 1] / PERCENT_MAX
        l = color[..., 2] / PERCENT_MAX
        return np.stack([h, s, l], axis=-1)

    if space == "oklch":
        return color

    raise ValueError(f"Unknown space: {space}")


def scale(color: np.ndarray, space: str) -> np.ndarray:
    """Inverse of :func:`normalize`. RGB output is clipped and rounded half up."""
    if space == "rgb":
        scaled = np.clip(color, 0.0, 1.0) * RGB_MAX
        return np.floor(scaled + 0.5).astype(int)

    if space == "hsl":
        h = color[..., 0]
        s = color[..., 1] * PERCENT_MAX
        l = color[..., 2] * PERCENT_MAX
        return np.stack([h, s, l], axis=-1)

    if space == "oklch":
        return color

    raise ValueError(f"Unknown space: {space}")


def _apply(kernel, color: np.ndarray) -> np.ndarray:
    return kernel(color[..., 0], color[..., 1], color[..., 2])


def _convert_core(color: np.ndarray, from_space: str, to_space: str) -> np.ndarray:
    # normalize → convert → scale
    base_norm = normalize(color, from_space)

    if from_space == to_space:
        converted = base_norm
    elif (from_space, to_space) in CONVERT_NUMPY:
        converted = _apply(CONVERT_NUMPY[(from_space, to_space)], base_norm)
    else:
        unit_rgb = _apply(CONVERT_NUMPY[(from_space, "rgb")], base_norm)
        converted = _apply(CONVERT_NUMPY[("rgb", to_space)], unit_rgb)

    return scale(converted, to_space)


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorElement:
    """
    Convert one color between spaces.

    Args:
        color: channel tuple in the stored ranges of ``from_space``
            (rgb 0-255, hsl (deg, %, %), oklch (0-1, 0-0.5, deg))
        from_space, to_space: "rgb", "hsl" or "oklch"

    Returns:
        channel tuple in the stored ranges of ``to_space``
    """
    fs, ts = validate_space(from_space), validate_space(to_space)
    if fs == ts:
        return color  # No conversion needed
    result = _convert_core(element_to_array(color), fs, ts)
    return tuple(v.item() for v in result.flat)  # type: ignore[return-value]


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """Vectorized :func:`convert` over an array of shape (..., 3)."""
    fs, ts = validate_space(from_space), validate_space(to_space)
    arr = np.asarray(color, dtype=float)
    if arr.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {arr.shape}")
    if fs == ts:
        return arr
    return _convert_core(arr, fs, ts)
