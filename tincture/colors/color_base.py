from __future__ import annotations
import warnings
from typing import Any, Callable, ClassVar, Optional, Tuple, Union

import numpy as np
from boundednumbers import clamp

from ..conversions import convert
from ..types.color_types import ColorSpace, HUE_SPACES
from ..utils import hue_lerp
from .harmony import Harmony

DEFAULT_CONTRAST_RATIO = 4.5
LIGHT_LUMINANCE_THRESHOLD = 0.5
# binary search steps when adjusting for contrast (2**-24 resolution)
CONTRAST_SEARCH_STEPS = 24

ColorLike = Union["ColorBase", str]


class ColorBase(Harmony):
    """
    Immutable three-channel color.

    Subclasses declare their space through ClassVars and get construction,
    conversion, blending and contrast helpers from here. Channels may be
    given positionally, by keyword, or as another color (which is converted).
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode:          ClassVar[ColorSpace]
    channels:      ClassVar[Tuple[str, str, str]]
    channel_types: ClassVar[Tuple[type, type, type]]
    hue_index:     ClassVar[Optional[int]] = None
    # def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        # ---- Handle ColorBase input ----
        if len(args) == 1 and not kwargs and isinstance(args[0], ColorBase):
            other = args[0]
            if other.mode == self.mode:
                values = other.to_tuple()
            else:
                values = convert(other.to_tuple(), other.mode, self.mode)
        # ---- Handle a single tuple/array of channels ----
        elif len(args) == 1 and not kwargs and isinstance(args[0], (tuple, list, np.ndarray)):
            values = tuple(args[0])
            if len(values) != len(self.channels):
                raise ValueError(
                    f"{self.mode} expects {len(self.channels)} channels, got {len(values)}"
                )
        # ---- Handle positional / keyword channels ----
        else:
            values = self._bind_channels(args, kwargs)

        self._value = tuple(kind(v) for kind, v in zip(self.channel_types, values))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _bind_channels(cls, args: Tuple[Any, ...], kwargs: dict) -> Tuple[Any, ...]:
        if len(args) > len(cls.channels):
            raise TypeError(
                f"{cls.__name__} takes at most {len(cls.channels)} channels, got {len(args)}"
            )
        unexpected = set(kwargs) - set(cls.channels)
        if unexpected:
            raise TypeError(f"{cls.__name__} got unexpected channel(s): {sorted(unexpected)}")
        values = list(args)
        for name in cls.channels[len(args):]:
            if name not in kwargs:
                raise TypeError(f"{cls.__name__} missing channel {name!r}")
            values.append(kwargs[name])
        duplicated = set(cls.channels[:len(args)]) & set(kwargs)
        if duplicated:
            raise TypeError(f"{cls.__name__} got multiple values for {sorted(duplicated)}")
        return tuple(values)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, Any, Any]:
        """Channel values as their unit types (Component, Hue, ...)."""
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def to_tuple(self) -> Tuple[float, ...]:
        """Channel values as plain numbers."""
        return tuple(v.value for v in self._value)

    def to_array(self) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=float)

    def replace(self, **channels: Any):
        """Return a copy with some channels changed."""
        current = dict(zip(self.channels, self.to_tuple()))
        unexpected = set(channels) - set(current)
        if unexpected:
            raise TypeError(f"{self.__class__.__name__} got unexpected channel(s): {sorted(unexpected)}")
        current.update(channels)
        return self.__class__(**current)

    # ------------------ CONVERSION ------------------
    def to_rgb(self):
        return self.convert("rgb")

    def to_hsl(self):
        return self.convert("hsl")

    def to_oklch(self):
        return self.convert("oklch")

    @staticmethod
    def _as_color(other: ColorLike) -> "ColorBase":
        if isinstance(other, str):
            from .color import parse  # local import to avoid cycles
            other = parse(other)
        if not isinstance(other, ColorBase):
            raise TypeError(f"Expected a color or a color string, got {type(other).__name__}")
        return other

    def _coerce(self, other: ColorLike) -> "ColorBase":
        """Parse strings and convert any color into this color's space."""
        other = self._as_color(other)
        return other if other.mode == self.mode else other.convert(self.mode)

    # ------------------ LUMINANCE / CONTRAST ------------------
    def luminance(self) -> float:
        """WCAG relative luminance in [0, 1], computed from the RGB form."""
        return self.to_rgb().luminance()

    def is_light(self) -> bool:
        return self.luminance() > LIGHT_LUMINANCE_THRESHOLD

    def is_dark(self) -> bool:
        return not self.is_light()

    def contrast_ratio(self, other: ColorLike) -> float:
        """WCAG contrast ratio between 1.0 (identical) and 21.0 (black on white)."""
        other = self._as_color(other)
        a, b = self.luminance(), other.luminance()
        lighter, darker = max(a, b), min(a, b)
        return (lighter + 0.05) / (darker + 0.05)

    def contrast_color(self):
        """Black for light colors, white for dark ones."""
        from .rgb import RGB  # local import to avoid cycles
        return RGB(0, 0, 0) if self.is_light() else RGB(255, 255, 255)

    def adjust_for_contrast(self, background: ColorLike, target_ratio: float = DEFAULT_CONTRAST_RATIO):
        """
        Return the closest color to this one that reaches ``target_ratio``
        against ``background``.

        The color is lightened when the background is darker and darkened
        when it is lighter. The smallest sufficient amount is found by
        bisection. When even the lightness bound misses the target, the
        bound is returned and a RuntimeWarning is emitted.
        """
        background = self._as_color(background)
        if self.contrast_ratio(background) >= target_ratio:
            return self

        own, other = self.luminance(), background.luminance()
        if other < own or (other == own and not background.is_light()):
            step = self.lighten
        else:
            step = self.darken

        bound = step(1.0)
        if bound.contrast_ratio(background) < target_ratio:
            warnings.warn(
                f"Cannot reach contrast ratio {target_ratio} for {self} against {background}; "
                f"best is {bound.contrast_ratio(background):.2f}",
                RuntimeWarning,
                stacklevel=2,
            )
            return bound

        low, high = 0.0, 1.0
        for _ in range(CONTRAST_SEARCH_STEPS):
            mid = (low + high) / 2
            if step(mid).contrast_ratio(background) >= target_ratio:
                high = mid
            else:
                low = mid
        return step(high)

    # ------------------ MIXING ------------------
    def blend(self, other: ColorLike, amount: float = 0.5):
        """
        Mix ``other`` into this color.

        ``other`` is converted into this color's space first. Channels are
        interpolated linearly; hue channels take the shorter arc.
        ``amount`` is clamped to [0, 1].
        """
        other = self._coerce(other)
        amount = float(clamp(float(amount), 0.0, 1.0))
        if amount == 0.0:
            return self
        if amount == 1.0:
            return other

        a, b = self.to_array(), other.to_array()
        mixed = a + (b - a) * amount
        if self.hue_index is not None:
            mixed[self.hue_index] = hue_lerp(a[self.hue_index], b[self.hue_index], amount)
        return self.__class__(*mixed.tolist())

    @staticmethod
    def _amount(amount: float) -> float:
        return float(clamp(float(amount), 0.0, 1.0))

    def lighten(self, amount: float = 0.1):
        raise NotImplementedError

    def darken(self, amount: float = 0.1):
        raise NotImplementedError

    # ------------------ OUTPUT ------------------
    def to_css(self) -> str:
        raise NotImplementedError

    def __str__(self):
        return self.to_css()

    def __repr__(self):
        inner = ", ".join(f"{name}={value!r}" for name, value in zip(self.channels, self.to_tuple()))
        return f"{self.__class__.__name__}({inner})"

    def __eq__(self, other):
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash((self.mode, self.to_tuple()))


def build_registry(*classes: type[ColorBase]):
    return {cls.mode: cls for cls in classes}
