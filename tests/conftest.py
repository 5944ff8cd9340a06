"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from streaklab.engine.config import FieldConfig
from streaklab.render.canvas import Canvas
from streaklab.render.paint import BLACK

SMALL_CONFIG = FieldConfig(dimension=64, num_streaks=12, noise_dots=50, noise_pixels=200)


class RecordingCanvas:
    """Stand-in canvas that records draw calls instead of rasterizing."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.fill_style = BLACK
        self.stroke_style = BLACK
        self.line_width = 1.0
        self.global_alpha = 1.0
        self.fills: list[tuple[float, float, float, float, object]] = []
        self.lines: list[tuple[float, float, float, float]] = []

    def fill_rect(self, x, y, w, h) -> None:
        self.fills.append((x, y, w, h, self.fill_style))

    def stroke_line(self, x0, y0, x1, y1) -> None:
        self.lines.append((x0, y0, x1, y1))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def small_config() -> FieldConfig:
    return SMALL_CONFIG


@pytest.fixture
def black_canvas() -> Canvas:
    canvas = Canvas(64)
    canvas.fill_style = BLACK
    canvas.fill_rect(0, 0, 64, 64)
    return canvas


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas(64)
