"""N05 — Salt-and-pepper.

``config.noise_pixels`` single pixels at integer positions, each
independently near-opaque white or near-opaque black.
"""

from __future__ import annotations

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.noise_constants import SALT_PEPPER_ALPHA, SALT_PROBABILITY
from streaklab.engine.registry import noise_layer
from streaklab.render.canvas import Canvas
from streaklab.render.paint import BLACK, WHITE

_SALT = WHITE.with_alpha(SALT_PEPPER_ALPHA)
_PEPPER = BLACK.with_alpha(SALT_PEPPER_ALPHA)


@noise_layer(id="N05", dependencies=["N04"], description="Salt-and-pepper pixels")
def salt_pepper(canvas: Canvas, rng: np.random.Generator, config: FieldConfig) -> None:
    for _ in range(config.noise_pixels):
        x = int(rng.integers(0, canvas.size))
        y = int(rng.integers(0, canvas.size))
        canvas.fill_style = _SALT if rng.random() < SALT_PROBABILITY else _PEPPER
        canvas.fill_rect(x, y, 1, 1)
