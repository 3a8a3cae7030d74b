from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from primitives import Color, DEFAULT_RADIUS_RANGE


@dataclass(frozen=True)
class SceneConfig:
    width: int = 1000
    height: int = 1000
    num_points: int = 1
    num_lines: int = 1
    num_triangles: int = 1
    num_rectangles: int = 1
    num_circles: int = 50
    radius_range: Tuple[int, int] = DEFAULT_RADIUS_RANGE
    random_seed: Optional[int] = 42
    background: Color = field(default_factory=lambda: Color.rgb(0, 0, 0))

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.width}x{self.height}")
        counts = (self.num_points, self.num_lines, self.num_triangles, self.num_rectangles, self.num_circles)
        if any(c < 0 for c in counts):
            raise ValueError("shape counts must be non-negative")
        rmin, rmax = self.radius_range
        if rmin < 0 or rmax <= rmin:
            raise ValueError(f"radius_range must satisfy 0 <= lo < hi, got {self.radius_range}")
