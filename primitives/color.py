from __future__ import annotations

from dataclasses import dataclass
import operator
from typing import Optional, Tuple
import numpy as np


@dataclass(frozen=True)
class Color:
    """
    8-bit RGBA color value. Alpha defaults to fully opaque.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            raw = getattr(self, name)
            try:
                v = operator.index(raw)
            except TypeError:
                raise TypeError(f"color channel {name} must be an integer, got {raw!r}") from None
            if not 0 <= v <= 255:
                raise ValueError(f"color channel {name}={v} outside [0, 255]")
            object.__setattr__(self, name, v)

    @staticmethod
    def rgb(r: int, g: int, b: int) -> "Color":
        return Color(r, g, b)

    @staticmethod
    def rgba(r: int, g: int, b: int, a: int) -> "Color":
        return Color(r, g, b, a)

    @staticmethod
    def random(rng: Optional[np.random.Generator] = None) -> "Color":
        if rng is None:
            rng = np.random.default_rng()
        r, g, b = rng.integers(0, 256, size=3)
        return Color(int(r), int(g), int(b))

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def as_unit_rgba(self) -> Tuple[float, float, float, float]:
        # matplotlib wants floats in [0,1]
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)
