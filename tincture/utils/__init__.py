from .interpolate_hue import hue_lerp, hue_delta

__all__ = ["hue_lerp", "hue_delta"]
