from .color_types import (
    Scalar,
    ColorElement,
    ColorSpace,
    COLOR_SPACES,
    HUE_SPACES,
    element_to_array,
    validate_space,
)

__all__ = [
    "Scalar",
    "ColorElement",
    "ColorSpace",
    "COLOR_SPACES",
    "HUE_SPACES",
    "element_to_array",
    "validate_space",
]
