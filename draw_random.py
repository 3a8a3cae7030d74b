from __future__ import annotations

import argparse
import os

from canvas import render_preview_grid, render_to_file, save_scene_as_svg
from primitives import DEFAULT_RADIUS_RANGE
from scene import SceneConfig, initialize_scene


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Rasterize a scene of randomly generated shapes.")
    p.add_argument("--width", type=int, default=1000, help="canvas width in pixels (default: 1000)")
    p.add_argument("--height", type=int, default=1000, help="canvas height in pixels (default: 1000)")
    p.add_argument("--points", type=int, default=1, help="number of random points")
    p.add_argument("--lines", type=int, default=1, help="number of random lines")
    p.add_argument("--triangles", type=int, default=1, help="number of random triangles")
    p.add_argument("--rectangles", type=int, default=1, help="number of random rectangles")
    p.add_argument("--circles", type=int, default=50, help="number of random circles")
    p.add_argument("--min-radius", type=int, default=DEFAULT_RADIUS_RANGE[0], help="smallest circle radius (inclusive)")
    p.add_argument("--max-radius", type=int, default=DEFAULT_RADIUS_RANGE[1], help="largest circle radius (exclusive)")
    p.add_argument("--seed", type=int, default=42, help="base random seed (each run offsets this)")
    p.add_argument("--runs", type=int, default=1, help="number of scenes to render")
    p.add_argument("--out", type=str, default="image.png", help="output PNG path; extra runs get a _NNN suffix")
    p.add_argument("--svg", action="store_true", help="also save a vector outline of each scene as SVG")
    p.add_argument("--preview", type=str, default="", help="optional path for a grid preview of all runs")
    p.add_argument("--cols", type=int, default=4, help="columns in the preview grid")
    return p.parse_args()


def _run_path(out_path: str, run: int, runs: int) -> str:
    if runs == 1:
        return out_path
    stem, ext = os.path.splitext(out_path)
    return f"{stem}_{run:03d}{ext or '.png'}"


def main() -> None:
    args = parse_args()
    if args.runs <= 0:
        raise ValueError("--runs must be positive.")
    canvases = []
    for i in range(args.runs):
        cfg = SceneConfig(
            width=args.width,
            height=args.height,
            num_points=args.points,
            num_lines=args.lines,
            num_triangles=args.triangles,
            num_rectangles=args.rectangles,
            num_circles=args.circles,
            radius_range=(args.min_radius, args.max_radius),
            random_seed=int(args.seed) + i,
        )
        _, shapes = initialize_scene(cfg)
        out_path = _run_path(args.out, i, args.runs)
        print(f"[Run {i+1}/{args.runs}] Drawing {len(shapes)} shapes on {cfg.width}x{cfg.height} (seed={cfg.random_seed}) -> {out_path}")
        canvases.append(render_to_file(shapes, out_path, cfg.width, cfg.height, cfg.background))
        if args.svg:
            svg_path = os.path.splitext(out_path)[0] + ".svg"
            save_scene_as_svg(shapes, svg_path, cfg.width, cfg.height)
            print(f"Saved outline: {svg_path}")
    if args.preview:
        print(f"Rendering preview grid -> {args.preview}")
        render_preview_grid(canvases, out_path=args.preview, cols=args.cols)
    print("All scenes completed.")


if __name__ == "__main__":
    main()
