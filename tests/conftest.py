"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from canvas import PixelLog


@pytest.fixture
def log() -> PixelLog:
    return PixelLog()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
