"""Tests for midpoint circle rasterization."""

import math

import numpy as np
import pytest
from shapely.geometry import Point as ShapelyPoint

from canvas import shape_to_shapely
from primitives import Circle, Color, DEFAULT_CIRCLE_COLOR, Point, midpoint_circle


def test_zero_radius_emits_center_only(log):
    Circle(Point(10, 10), 0).draw(log)

    assert log.pixel_set() == {(10, 10)}
    assert len(log) == 8


def test_small_circle_octant_walk():
    pts = set(midpoint_circle(0, 0, 3))
    assert pts == {
        (0, 3), (0, -3), (3, 0), (-3, 0),
        (1, 3), (-1, 3), (1, -3), (-1, -3),
        (3, 1), (-3, 1), (3, -1), (-3, -1),
        (2, 2), (-2, 2), (2, -2), (-2, -2),
    }


@pytest.mark.parametrize("radius", [1, 2, 5, 13, 50, 120])
def test_pixels_stay_near_radius(radius):
    cx, cy = 40, -7
    for px, py in midpoint_circle(cx, cy, radius):
        dist = math.hypot(px - cx, py - cy)
        assert abs(round(dist) - radius) <= 1


@pytest.mark.parametrize("radius", [1, 4, 9, 31])
def test_pixel_set_is_mirror_symmetric(radius):
    cx, cy = 100, 50
    pts = set(midpoint_circle(cx, cy, radius))
    for px, py in pts:
        assert (2 * cx - px, py) in pts
        assert (px, 2 * cy - py) in pts
    assert {(cx + radius, cy), (cx - radius, cy), (cx, cy + radius), (cx, cy - radius)} <= pts


def test_pixels_lie_on_ideal_outline():
    circle = Circle(Point(60, 60), 25)
    ring = shape_to_shapely(circle)
    for px, py in circle.pixels():
        assert ring.distance(ShapelyPoint(px, py)) <= 1.0


def test_draw_uses_circle_color(log):
    circle = Circle(Point(0, 0), 6, Color.rgb(10, 20, 30))
    circle.draw(log)

    assert len(log) % 8 == 0
    assert {c for _, _, c in log.writes} == {Color.rgb(10, 20, 30)}


def test_default_color():
    assert Circle(Point(1, 1), 2).color == DEFAULT_CIRCLE_COLOR


def test_negative_radius_rejected():
    with pytest.raises(ValueError):
        Circle(Point(0, 0), -1)


def test_random_circle_respects_radius_range(rng):
    for _ in range(100):
        c = Circle.random(300, 200, rng, radius_range=(50, 350))
        assert 50 <= c.radius < 350
        assert 0 <= c.center.x < 300
        assert 0 <= c.center.y < 200


def test_random_circle_default_range(rng):
    radii = {Circle.random(100, 100, rng).radius for _ in range(200)}
    assert min(radii) >= 5
    assert max(radii) < 50


def test_circle_may_emit_negative_coordinates(log):
    Circle(Point(2, 2), 5).draw(log)
    assert any(x < 0 or y < 0 for x, y in log.coordinates())


def test_radius_cannot_be_reassigned(log):
    circle = Circle(Point(10, 10), 3)
    with pytest.raises(AttributeError):
        circle.radius = -4
    with pytest.raises(AttributeError):
        circle.center = Point(0, 0)
    circle.draw(log)
    assert circle.radius == 3
    assert len(log) > 0


@pytest.mark.parametrize("radius", [2.9, 3.0, "3"])
def test_non_integer_radius_rejected(radius):
    with pytest.raises(TypeError):
        Circle(Point(0, 0), radius)


def test_numpy_integer_radius_accepted():
    circle = Circle(Point(0, 0), np.int64(4))
    assert circle.radius == 4 and type(circle.radius) is int
