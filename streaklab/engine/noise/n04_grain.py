"""N04 — Gaussian-like grain.

Approximates additive Gaussian noise with GRAIN_COUNT faint independent
1×1 dots. The pixel values are not normally distributed; only the overall
look is similar.
"""

from __future__ import annotations

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.noise_constants import GRAIN_ALPHA, GRAIN_COUNT
from streaklab.engine.registry import noise_layer
from streaklab.render.canvas import Canvas
from streaklab.render.paint import WHITE


@noise_layer(id="N04", dependencies=["N03"], description="Low-opacity pixel grain")
def grain(canvas: Canvas, rng: np.random.Generator, config: FieldConfig) -> None:
    canvas.fill_style = WHITE.with_alpha(GRAIN_ALPHA)
    for _ in range(GRAIN_COUNT):
        canvas.fill_rect(rng.uniform(0, canvas.size), rng.uniform(0, canvas.size), 1, 1)
