from .raster import Canvas, PixelLog
from .renderer import draw_all, render_scene, render_to_file, render_preview_grid
from .vectorizer import shape_to_shapely, draw_scene_on_axis, save_scene_as_svg
