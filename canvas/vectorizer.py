import os
from typing import Any, Iterable

import matplotlib.pyplot as plt
from shapely.geometry import LineString, Point as ShapelyPoint, box

from primitives import Circle, Drawable, Line, Point, Rectangle, Triangle


def shape_to_shapely(shape: Drawable) -> Any:
    """
    Ideal (continuous) outline of a shape, in pixel coordinates.
    Degenerate lines and zero-radius circles collapse to a shapely Point.
    """
    if isinstance(shape, Point):
        return ShapelyPoint(shape.x, shape.y)
    if isinstance(shape, Line):
        if (shape.start.x, shape.start.y) == (shape.end.x, shape.end.y):
            return ShapelyPoint(shape.start.x, shape.start.y)
        return LineString([(shape.start.x, shape.start.y), (shape.end.x, shape.end.y)])
    if isinstance(shape, Triangle):
        pts = [(p.x, p.y) for p in (shape.p1, shape.p2, shape.p3, shape.p1)]
        return LineString(pts)
    if isinstance(shape, Rectangle):
        tl, br = shape.top_left, shape.bottom_right
        return box(tl.x, tl.y, br.x, br.y).exterior
    if isinstance(shape, Circle):
        center = ShapelyPoint(shape.center.x, shape.center.y)
        if shape.radius == 0:
            return center
        return center.buffer(shape.radius, resolution=64).exterior
    raise ValueError(f"Unknown shape {type(shape).__name__}")


def draw_scene_on_axis(
    ax: plt.Axes,
    shapes: Iterable[Drawable],
    width: int,
    height: int,
) -> None:
    """
    Draws shape outlines onto a Matplotlib axis using image coordinates
    (origin top-left, y pointing down).
    """
    ax.set_aspect('equal')
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.axis('off')

    for shape in shapes:
        geom = shape_to_shapely(shape)
        rgba = shape.color.as_unit_rgba()
        if isinstance(geom, ShapelyPoint):
            ax.plot([geom.x], [geom.y], marker='s', markersize=1.5, color=rgba, linestyle='none')
            continue
        x, y = geom.xy
        ax.plot(list(x), list(y), color=rgba, linewidth=0.8, solid_joinstyle='round')


def save_scene_as_svg(
    shapes: Iterable[Drawable],
    filename: str,
    width: int,
    height: int,
    background: str = 'black',
) -> None:
    fig, ax = plt.subplots(figsize=(6, 6 * height / width))
    fig.patch.set_facecolor(background)

    draw_scene_on_axis(ax, shapes, width, height)

    out_dir = os.path.dirname(filename)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(
        filename,
        format='svg',
        bbox_inches='tight',
        pad_inches=0,
        facecolor=background,
    )
    plt.close(fig)
