# Re-export core shape API for convenience
from .color import Color
from .geometry import (
    Drawable,
    Displayable,
    Point,
    Line,
    Triangle,
    Rectangle,
    Circle,
    bresenham,
    midpoint_circle,
    DEFAULT_POINT_COLOR,
    DEFAULT_LINE_COLOR,
    DEFAULT_TRIANGLE_COLOR,
    DEFAULT_RECTANGLE_COLOR,
    DEFAULT_CIRCLE_COLOR,
    DEFAULT_RADIUS_RANGE,
)
