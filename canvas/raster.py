from __future__ import annotations

import os
from typing import Dict, List, Optional, Set, Tuple
import numpy as np
from PIL import Image

from primitives import Color, Displayable


class Canvas(Displayable):
    """
    RGBA pixel buffer backed by a (height, width, 4) uint8 array.
    Writes outside the buffer are dropped.
    """
    def __init__(self, width: int, height: int, background: Optional[Color] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.background = background if background is not None else Color.rgb(0, 0, 0)
        self.pixels = np.empty((self.height, self.width, 4), dtype=np.uint8)
        self.clear()

    def clear(self) -> None:
        self.pixels[:, :] = np.array(self.background.as_tuple(), dtype=np.uint8)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def display(self, x: int, y: int, color: Color) -> None:
        if self.contains(x, y):
            self.pixels[y, x] = color.as_tuple()

    def get_pixel(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return Color(r, g, b, a)

    def to_image(self) -> Image.Image:
        # (h, w, 4) uint8 is inferred as RGBA
        return Image.fromarray(self.pixels)

    def save(self, out_path: str) -> None:
        out_dir = os.path.dirname(out_path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        self.to_image().save(out_path)


class PixelLog(Displayable):
    """
    Records every write in order. Useful for inspecting what a shape emits.
    """
    def __init__(self):
        self.writes: List[Tuple[int, int, Color]] = []

    def display(self, x: int, y: int, color: Color) -> None:
        self.writes.append((x, y, color))

    def coordinates(self) -> List[Tuple[int, int]]:
        return [(x, y) for x, y, _ in self.writes]

    def pixel_set(self) -> Set[Tuple[int, int]]:
        return set(self.coordinates())

    def final(self) -> Dict[Tuple[int, int], Color]:
        # later writes win
        return {(x, y): c for x, y, c in self.writes}

    def __len__(self) -> int:
        return len(self.writes)
