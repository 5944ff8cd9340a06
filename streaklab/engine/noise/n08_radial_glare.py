"""N08 — Radial glare. Soft white bloom off-center toward the upper right."""

from __future__ import annotations

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.noise_constants import GLARE_ALPHA, GLARE_CENTER, GLARE_RADIUS
from streaklab.engine.registry import noise_layer
from streaklab.render.canvas import Canvas
from streaklab.render.paint import TRANSPARENT, WHITE, RadialGradient


def glare_gradient(size: int) -> RadialGradient:
    cx, cy = GLARE_CENTER[0] * size, GLARE_CENTER[1] * size
    return (
        RadialGradient(cx0=cx, cy0=cy, r0=0.0, cx1=cx, cy1=cy, r1=GLARE_RADIUS * size)
        .add_stop(0.0, WHITE.with_alpha(GLARE_ALPHA))
        .add_stop(1.0, TRANSPARENT)
    )


@noise_layer(id="N08", dependencies=["N07"], description="Radial lens glare")
def radial_glare(canvas: Canvas, rng: np.random.Generator, config: FieldConfig) -> None:
    canvas.fill_style = glare_gradient(canvas.size)
    canvas.fill_rect(0, 0, canvas.size, canvas.size)
