"""N01 — Uniform haze.

One full-canvas gray wash at very low opacity.
"""

from __future__ import annotations

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.noise_constants import HAZE_ALPHA, HAZE_GRAY
from streaklab.engine.registry import noise_layer
from streaklab.render.canvas import Canvas
from streaklab.render.paint import rgba


@noise_layer(id="N01", description="Full-canvas gray haze")
def uniform_haze(canvas: Canvas, rng: np.random.Generator, config: FieldConfig) -> None:
    canvas.fill_style = rgba(HAZE_GRAY, HAZE_GRAY, HAZE_GRAY, HAZE_ALPHA)
    canvas.fill_rect(0, 0, canvas.size, canvas.size)
