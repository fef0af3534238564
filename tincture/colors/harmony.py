"""
Color harmonies.

Every scheme is computed on the HSL wheel and each result is converted back
into the space of the color it was called on.
"""
from __future__ import annotations
from typing import List

MONOCHROMATIC_LIGHTNESS = (15.0, 85.0)


class Harmony:
    """Mixin adding harmony schemes to ColorBase."""
    __slots__ = ()

    mode: str

    def _from_hsl(self, hsl):
        return hsl.convert(self.mode)

    def _rotate_hue(self, degrees: float):
        hsl = self.to_hsl()
        return self._from_hsl(hsl.replace(hue=hsl.hue + degrees))

    @staticmethod
    def _check_steps(steps: int) -> None:
        if steps < 1:
            raise ValueError("steps must be at least 1")

    def complementary(self):
        return self._rotate_hue(180)

    def analogous(self, angle: float = 30) -> List:
        return [self._rotate_hue(-angle), self._rotate_hue(angle)]

    def triadic(self) -> List:
        return [self._rotate_hue(120), self._rotate_hue(240)]

    def split_complementary(self, angle: float = 30) -> List:
        return [self._rotate_hue(180 - angle), self._rotate_hue(180 + angle)]

    def tetradic_square(self) -> List:
        return [self._rotate_hue(90), self._rotate_hue(180), self._rotate_hue(270)]

    def tetradic_rectangle(self, angle: float = 60) -> List:
        return [self._rotate_hue(angle), self._rotate_hue(180), self._rotate_hue(180 + angle)]

    def monochromatic(self, steps: int = 5) -> List:
        """``steps`` colors of the same hue with lightness spread over 15%-85%."""
        self._check_steps(steps)
        hsl = self.to_hsl()
        low, high = MONOCHROMATIC_LIGHTNESS
        if steps == 1:
            lightness = [(low + high) / 2]
        else:
            step = (high - low) / (steps - 1)
            lightness = [low + i * step for i in range(steps)]
        return [self._from_hsl(hsl.replace(lightness=l)) for l in lightness]

    def shades(self, steps: int = 5, amount: float = 0.5) -> List:
        """Progressively darker variants, the last one ``amount`` of the way to black."""
        self._check_steps(steps)
        hsl = self.to_hsl()
        step = amount / steps
        return [
            self._from_hsl(hsl.replace(lightness=hsl.lightness * (1 - step * i)))
            for i in range(1, steps + 1)
        ]

    def tints(self, steps: int = 5, amount: float = 0.5) -> List:
        """Progressively lighter variants, the last one ``amount`` of the way to white."""
        self._check_steps(steps)
        hsl = self.to_hsl()
        step = amount / steps
        return [
            self._from_hsl(hsl.replace(lightness=hsl.lightness + (100 - hsl.lightness) * (step * i)))
            for i in range(1, steps + 1)
        ]

    def tones(self, steps: int = 5, amount: float = 0.5) -> List:
        """Progressively greyer variants, the last one with ``amount`` less saturation."""
        self._check_steps(steps)
        hsl = self.to_hsl()
        step = amount / steps
        return [
            self._from_hsl(hsl.replace(saturation=hsl.saturation * (1 - step * i)))
            for i in range(1, steps + 1)
        ]
