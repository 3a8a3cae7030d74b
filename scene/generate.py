from __future__ import annotations

from typing import List, Literal, Tuple
import numpy as np

from primitives import Circle, Drawable, Line, Point, Rectangle, Triangle

from .config import SceneConfig


ShapeKind = Literal["point", "line", "triangle", "rectangle", "circle"]


def random_shape(rng: np.random.Generator, kind: ShapeKind, cfg: SceneConfig) -> Drawable:
    w, h = cfg.width, cfg.height
    if kind == "point":
        return Point.random(w, h, rng)
    if kind == "line":
        return Line.random(w, h, rng)
    if kind == "triangle":
        return Triangle.random(w, h, rng)
    if kind == "rectangle":
        return Rectangle.random(w, h, rng)
    if kind == "circle":
        return Circle.random(w, h, rng, radius_range=cfg.radius_range)
    raise ValueError(f"unknown shape kind: {kind}")


def random_scene(rng: np.random.Generator, cfg: SceneConfig) -> List[Drawable]:
    # Draw order matters: later shapes overwrite earlier ones
    plan: List[Tuple[ShapeKind, int]] = [
        ("line", cfg.num_lines),
        ("point", cfg.num_points),
        ("rectangle", cfg.num_rectangles),
        ("triangle", cfg.num_triangles),
        ("circle", cfg.num_circles),
    ]
    shapes: List[Drawable] = []
    for kind, count in plan:
        shapes.extend(random_shape(rng, kind, cfg) for _ in range(count))
    return shapes


def initialize_scene(cfg: SceneConfig) -> Tuple[np.random.Generator, List[Drawable]]:
    rng = np.random.default_rng(cfg.random_seed)
    return rng, random_scene(rng, cfg)


def demo_scene() -> List[Drawable]:
    """
    Fixed composition used by draw_demo.py.
    """
    return [
        Line(Point(0, 0), Point(3, 3)),
        Rectangle(Point(150, 150), Point(50, 50)),
        Triangle(Point(500, 500), Point(250, 700), Point(700, 800)),
        Circle(Point(500, 300), 120),
        Circle(Point(10, 10), 0),
        Point(900, 100),
    ]
