from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple
import os
import matplotlib.pyplot as plt

from primitives import Color, Displayable, Drawable

from .raster import Canvas


def draw_all(shapes: Iterable[Drawable], display: Displayable) -> None:
    """
    Draw shapes in order. Writes are sequential, so later shapes win on overlap.
    """
    for shape in shapes:
        shape.draw(display)


def render_scene(
    shapes: Iterable[Drawable],
    width: int,
    height: int,
    background: Optional[Color] = None,
) -> Canvas:
    canvas = Canvas(width, height, background)
    draw_all(shapes, canvas)
    return canvas


def render_to_file(
    shapes: Iterable[Drawable],
    out_path: str,
    width: int,
    height: int,
    background: Optional[Color] = None,
) -> Canvas:
    canvas = render_scene(shapes, width, height, background)
    canvas.save(out_path)
    return canvas


def render_preview_grid(
    canvases: Sequence[Canvas],
    out_path: str,
    cols: int = 4,
    figsize_per_cell: Tuple[float, float] = (3.0, 3.0),
    titles: Optional[Sequence[str]] = None,
    dpi: int = 200,
) -> None:
    """
    Lays several canvases out in a matplotlib grid and saves it.
    Format follows the file extension (svg or png).
    """
    n = len(canvases)
    if n == 0:
        raise ValueError("No canvases provided")
    cols = max(1, min(cols, n))
    rows = (n + cols - 1) // cols
    fig_w = figsize_per_cell[0] * cols
    fig_h = figsize_per_cell[1] * rows

    fig, axes = plt.subplots(rows, cols, figsize=(fig_w, fig_h), constrained_layout=True, squeeze=False)
    fig.patch.set_facecolor('white')

    for idx, canvas in enumerate(canvases):
        ax = axes[idx // cols, idx % cols]
        ax.imshow(canvas.pixels, interpolation="nearest")
        ax.set_xticks([])
        ax.set_yticks([])
        title = titles[idx] if titles is not None else f"{idx}"
        ax.set_title(title, fontsize=10, color='black')

    for idx in range(n, rows * cols):
        axes[idx // cols, idx % cols].axis("off")

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    fmt = "svg" if out_path.endswith(".svg") else "png"
    fig.savefig(out_path, dpi=dpi, format=fmt, transparent=False, facecolor='white')
    plt.close(fig)
