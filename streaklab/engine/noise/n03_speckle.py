"""N03 — Speckle. Faint white squares of random size at random positions."""

from __future__ import annotations

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.noise_constants import SPECKLE_ALPHA, SPECKLE_COUNT, SPECKLE_SIZE_RANGE
from streaklab.engine.registry import noise_layer
from streaklab.render.canvas import Canvas
from streaklab.render.paint import WHITE


@noise_layer(id="N03", dependencies=["N02"], description="Random square speckle")
def speckle(canvas: Canvas, rng: np.random.Generator, config: FieldConfig) -> None:
    canvas.fill_style = WHITE.with_alpha(SPECKLE_ALPHA)
    for _ in range(SPECKLE_COUNT):
        x = rng.uniform(0, canvas.size)
        y = rng.uniform(0, canvas.size)
        side = rng.uniform(*SPECKLE_SIZE_RANGE)
        canvas.fill_rect(x, y, side, side)
