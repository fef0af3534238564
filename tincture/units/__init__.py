from .numbers import (
    Component,
    ClampedComponent,
    BoundedFloat,
    UnitFloat,
    Chroma,
    Percentage,
    ClampedPercentage,
    Hue,
    WrappingAngle,
    COMPONENT_MAX,
    HUE_360,
    CHROMA_MAX,
    PERCENT_MAX,
    to_float,
    round_half_up,
    safe_divide,
    wrap_angle,
)
from .degrees import Degrees, KEYWORD_ANGLES
from .direction import Direction

__all__ = [
    "Component",
    "ClampedComponent",
    "BoundedFloat",
    "UnitFloat",
    "Chroma",
    "Percentage",
    "ClampedPercentage",
    "Hue",
    "WrappingAngle",
    "COMPONENT_MAX",
    "HUE_360",
    "CHROMA_MAX",
    "PERCENT_MAX",
    "to_float",
    "round_half_up",
    "safe_divide",
    "wrap_angle",
    "Degrees",
    "KEYWORD_ANGLES",
    "Direction",
]
