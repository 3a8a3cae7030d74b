from __future__ import annotations

from canvas import render_to_file, save_scene_as_svg
from scene import demo_scene


def main():
    shapes = demo_scene()
    render_to_file(shapes, out_path="plots/demo.png", width=1000, height=1000)
    save_scene_as_svg(shapes, "plots/demo.svg", width=1000, height=1000)
    print("Saved plots to:")
    print(" - plots/demo.png")
    print(" - plots/demo.svg")


if __name__ == "__main__":
    main()
