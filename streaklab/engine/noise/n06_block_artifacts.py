"""N06 — Block artifacts.

Tiles the canvas into BLOCK_SIZE squares (the last row/column may be
partial) and lightens each tile with probability BLOCK_PROBABILITY,
imitating compression blockiness.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.noise_constants import BLOCK_ALPHA, BLOCK_PROBABILITY, BLOCK_SIZE
from streaklab.engine.registry import noise_layer
from streaklab.render.canvas import Canvas
from streaklab.render.paint import WHITE


def block_origins(size: int, block: int = BLOCK_SIZE) -> Iterator[tuple[int, int]]:
    """Top-left corners of the ceil(size/block)² candidate blocks, row-major."""
    for y in range(0, size, block):
        for x in range(0, size, block):
            yield (x, y)


def block_count(size: int, block: int = BLOCK_SIZE) -> int:
    return math.ceil(size / block) ** 2


@noise_layer(id="N06", dependencies=["N05"], description="16x16 compression blocks")
def block_artifacts(canvas: Canvas, rng: np.random.Generator, config: FieldConfig) -> None:
    canvas.fill_style = WHITE.with_alpha(BLOCK_ALPHA)
    for x, y in block_origins(canvas.size):
        if rng.random() < BLOCK_PROBABILITY:
            canvas.fill_rect(x, y, BLOCK_SIZE, BLOCK_SIZE)
