"""Tests for the draw_random command line."""

import sys

from draw_random import parse_args
from primitives import DEFAULT_RADIUS_RANGE


def test_radius_flags_default_to_shared_range(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["draw_random.py"])
    args = parse_args()
    assert (args.min_radius, args.max_radius) == DEFAULT_RADIUS_RANGE


def test_radius_flags_override(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["draw_random.py", "--min-radius", "50", "--max-radius", "350"])
    args = parse_args()
    assert (args.min_radius, args.max_radius) == (50, 350)
