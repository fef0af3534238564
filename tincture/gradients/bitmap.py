from __future__ import annotations
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from ..colors.color_base import ColorBase
from ..types.color_types import ColorSpace


class Bitmap:
    """
    Row-major grid of colors produced by rasterizing a gradient.

    ``pixels[y][x]`` with the origin at the top-left.
    """
    __slots__ = ('_width', '_height', '_pixels', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, width: int, height: int, pixels: Sequence[Sequence[ColorBase]]) -> None:
        rows = tuple(tuple(row) for row in pixels)
        if len(rows) != height or any(len(row) != width for row in rows):
            raise ValueError(f"pixels must be {height} rows of {width} colors")
        self._width = width
        self._height = height
        self._pixels = rows
        super().__setattr__('_is_frozen', True)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> Tuple[Tuple[ColorBase, ...], ...]:
        return self._pixels

    @property
    def rows(self) -> Tuple[Tuple[ColorBase, ...], ...]:
        return self._pixels

    @property
    def first(self) -> ColorBase:
        return self._pixels[0][0]

    def at(self, x: int, y: int = 0) -> ColorBase:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} bitmap")
        return self._pixels[y][x]

    def __getitem__(self, key: Union[int, Tuple[int, int]]) -> ColorBase:
        if isinstance(key, tuple):
            return self.at(*key)
        return self.at(key)

    def to_list(self) -> List[ColorBase]:
        """All pixels, left to right then top to bottom."""
        return [color for row in self._pixels for color in row]

    def __iter__(self) -> Iterator[ColorBase]:
        return iter(self.to_list())

    def __len__(self):
        return self.width * self.height

    def to_array(self, space: ColorSpace = "rgb") -> np.ndarray:
        """
        Channel values as an array of shape (height, width, 3).

        RGB comes back as uint8; HSL and OKLCH as float64 in their stored ranges.
        """
        values = [[color.convert(space).to_tuple() for color in row] for row in self._pixels]
        dtype = np.uint8 if space == "rgb" else np.float64
        return np.array(values, dtype=dtype).reshape(self.height, self.width, 3)

    def __repr__(self):
        return f"Bitmap(width={self.width}, height={self.height})"
