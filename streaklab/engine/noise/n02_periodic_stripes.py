"""N02 — Periodic stripes.

Thin vertical lines every STRIPE_SPACING pixels, mimicking sensor-row
periodicity.
"""

from __future__ import annotations

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.noise_constants import STRIPE_ALPHA, STRIPE_SPACING, STRIPE_WIDTH
from streaklab.engine.registry import noise_layer
from streaklab.render.canvas import Canvas
from streaklab.render.paint import WHITE


def stripe_positions(size: int) -> range:
    return range(0, size, STRIPE_SPACING)


@noise_layer(id="N02", dependencies=["N01"], description="Vertical sensor stripes")
def periodic_stripes(canvas: Canvas, rng: np.random.Generator, config: FieldConfig) -> None:
    canvas.stroke_style = WHITE.with_alpha(STRIPE_ALPHA)
    canvas.line_width = STRIPE_WIDTH
    for x in stripe_positions(canvas.size):
        canvas.stroke_line(x, 0, x, canvas.size)
