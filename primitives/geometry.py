from __future__ import annotations

from dataclasses import dataclass, replace
import operator
from typing import Iterator, List, Optional, Tuple
import numpy as np

from .color import Color


DEFAULT_POINT_COLOR = Color.rgb(255, 0, 0)
DEFAULT_LINE_COLOR = Color.rgb(0, 255, 0)
DEFAULT_TRIANGLE_COLOR = Color.rgb(0, 0, 255)
DEFAULT_RECTANGLE_COLOR = Color.rgb(255, 255, 0)
DEFAULT_CIRCLE_COLOR = Color.rgb(255, 255, 255)

# Half-open [lo, hi) range for Circle.random radii
DEFAULT_RADIUS_RANGE: Tuple[int, int] = (5, 50)


def _default_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return np.random.default_rng() if rng is None else rng


def _as_int(name: str, value) -> int:
    # Accepts Python and numpy integers; floats raise instead of truncating
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {value!r}") from None


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """
    Integer line walk from (x0, y0) to (x1, y1), both endpoints included.

    The walk always runs from the lexicographically smaller endpoint so that
    swapping the endpoints yields the same pixel set in reverse order.
    """
    if (x1, y1) < (x0, y0):
        yield from reversed(list(_bresenham_walk(x1, y1, x0, y0)))
        return
    yield from _bresenham_walk(x0, y0, x1, y1)


def _bresenham_walk(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def midpoint_circle(cx: int, cy: int, r: int) -> Iterator[Tuple[int, int]]:
    """
    Midpoint circle walk over one octant, reflected into all eight.
    Yields 8 coordinates per step; coincident pixels are yielded more than once.
    """
    x = 0
    y = r
    d = 1 - r
    while x <= y:
        yield cx + x, cy + y
        yield cx - x, cy + y
        yield cx + x, cy - y
        yield cx - x, cy - y
        yield cx + y, cy + x
        yield cx - y, cy + x
        yield cx + y, cy - x
        yield cx - y, cy - x
        if d < 0:
            d += 2 * x + 3
        else:
            d += 2 * (x - y) + 5
            y -= 1
        x += 1


class Displayable:
    """
    Pixel sink. Bounds handling is up to the implementation.
    """
    def display(self, x: int, y: int, color: Color) -> None:
        raise NotImplementedError


class Drawable:
    """
    Anything that can write itself into a Displayable.
    Subclasses carry a `color` attribute.
    """
    color: Color

    def draw(self, display: Displayable) -> None:
        raise NotImplementedError

    def with_color(self, color: Color) -> "Drawable":
        return replace(self, color=color)

    def __setattr__(self, name, value):
        # Only color may change once a shape is built
        if name != "color" and getattr(self, "_sealed", False):
            raise AttributeError(f"{type(self).__name__}.{name} is read-only; only color may be reassigned")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if getattr(self, "_sealed", False):
            raise AttributeError(f"cannot delete {type(self).__name__}.{name}")
        super().__delattr__(name)

    def _seal(self) -> None:
        object.__setattr__(self, "_sealed", True)


@dataclass(frozen=True)
class Point(Drawable):
    x: int
    y: int
    color: Color = DEFAULT_POINT_COLOR

    def __post_init__(self):
        object.__setattr__(self, "x", _as_int("x", self.x))
        object.__setattr__(self, "y", _as_int("y", self.y))

    @staticmethod
    def random(width: int, height: int, rng: Optional[np.random.Generator] = None) -> "Point":
        rng = _default_rng(rng)
        x = int(rng.integers(0, width))
        y = int(rng.integers(0, height))
        return Point(x, y, Color.random(rng))

    def draw(self, display: Displayable) -> None:
        display.display(self.x, self.y, self.color)


@dataclass
class Line(Drawable):
    """
    Segment between two points. The line's own color wins over the endpoints'.
    """
    start: Point
    end: Point
    color: Color = DEFAULT_LINE_COLOR

    def __post_init__(self):
        self._seal()

    @staticmethod
    def random(width: int, height: int, rng: Optional[np.random.Generator] = None) -> "Line":
        rng = _default_rng(rng)
        start = Point(int(rng.integers(0, width)), int(rng.integers(0, height)))
        end = Point(int(rng.integers(0, width)), int(rng.integers(0, height)))
        return Line(start, end, Color.random(rng))

    def pixels(self) -> Iterator[Tuple[int, int]]:
        return bresenham(self.start.x, self.start.y, self.end.x, self.end.y)

    def draw(self, display: Displayable) -> None:
        for x, y in self.pixels():
            display.display(x, y, self.color)


@dataclass
class Triangle(Drawable):
    p1: Point
    p2: Point
    p3: Point
    color: Color = DEFAULT_TRIANGLE_COLOR

    def __post_init__(self):
        self._seal()

    @staticmethod
    def random(width: int, height: int, rng: Optional[np.random.Generator] = None) -> "Triangle":
        rng = _default_rng(rng)
        p1, p2, p3 = (Point.random(width, height, rng) for _ in range(3))
        return Triangle(p1, p2, p3, Color.random(rng))

    def edges(self) -> List[Line]:
        return [
            Line(self.p1, self.p2, self.color),
            Line(self.p2, self.p3, self.color),
            Line(self.p3, self.p1, self.color),
        ]

    def draw(self, display: Displayable) -> None:
        for edge in self.edges():
            edge.draw(display)


@dataclass
class Rectangle(Drawable):
    """
    Axis-aligned outline. The two corners may be given in any order; they are
    stored normalized so top_left holds the minimum of both axes.
    """
    top_left: Point
    bottom_right: Point
    color: Color = DEFAULT_RECTANGLE_COLOR

    def __post_init__(self):
        a, b = self.top_left, self.bottom_right
        self.top_left = Point(min(a.x, b.x), min(a.y, b.y))
        self.bottom_right = Point(max(a.x, b.x), max(a.y, b.y))
        self._seal()

    @staticmethod
    def random(width: int, height: int, rng: Optional[np.random.Generator] = None) -> "Rectangle":
        rng = _default_rng(rng)
        a = Point.random(width, height, rng)
        b = Point.random(width, height, rng)
        return Rectangle(a, b, Color.random(rng))

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        tl, br = self.top_left, self.bottom_right
        tr = Point(br.x, tl.y)
        bl = Point(tl.x, br.y)
        return tl, tr, br, bl

    def edges(self) -> List[Line]:
        tl, tr, br, bl = self.corners()
        return [
            Line(tl, tr, self.color),
            Line(tr, br, self.color),
            Line(br, bl, self.color),
            Line(bl, tl, self.color),
        ]

    def draw(self, display: Displayable) -> None:
        for edge in self.edges():
            edge.draw(display)


@dataclass
class Circle(Drawable):
    center: Point
    radius: int
    color: Color = DEFAULT_CIRCLE_COLOR

    def __post_init__(self):
        self.radius = _as_int("radius", self.radius)
        if self.radius < 0:
            raise ValueError(f"radius must be non-negative, got {self.radius}")
        self._seal()

    @staticmethod
    def random(width: int, height: int,
               rng: Optional[np.random.Generator] = None,
               radius_range: Tuple[int, int] = DEFAULT_RADIUS_RANGE) -> "Circle":
        rng = _default_rng(rng)
        rmin, rmax = radius_range
        center = Point(int(rng.integers(0, width)), int(rng.integers(0, height)))
        radius = int(rng.integers(rmin, rmax))
        return Circle(center, radius, Color.random(rng))

    def pixels(self) -> Iterator[Tuple[int, int]]:
        return midpoint_circle(self.center.x, self.center.y, self.radius)

    def draw(self, display: Displayable) -> None:
        for x, y in self.pixels():
            display.display(x, y, self.color)
