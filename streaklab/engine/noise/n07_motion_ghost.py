"""N07 — Motion-blur ghost.

Blends a frozen copy of the raster as it was before this layer, shifted by
MOTION_OFFSET, at MOTION_ALPHA. Reading from a copy keeps the blit from
feeding back into itself.
"""

from __future__ import annotations

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.noise_constants import MOTION_ALPHA, MOTION_OFFSET
from streaklab.engine.registry import noise_layer
from streaklab.render.canvas import Canvas


@noise_layer(id="N07", dependencies=["N06"], description="Offset self-blend ghost")
def motion_ghost(canvas: Canvas, rng: np.random.Generator, config: FieldConfig) -> None:
    frozen = canvas.freeze()
    canvas.global_alpha = MOTION_ALPHA
    try:
        canvas.blit(frozen, *MOTION_OFFSET)
    finally:
        canvas.global_alpha = 1.0
