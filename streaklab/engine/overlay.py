"""Vector overlay — arrowheads at each streak tail plus the crosshair marker.

Arrowheads are pure functions of each record's geometry; the ledger is only
read. The arrow points toward increasing y, the direction in which a streak's
intensity falls off.
"""

from __future__ import annotations

import numpy as np

from streaklab.engine.context import StreakLedger, StreakRecord
from streaklab.engine.noise_constants import (
    ARROW_ALPHA,
    ARROW_HALF_WIDTH,
    ARROW_HEIGHT,
    ARROW_SHAFT_WIDTH,
    CROSSHAIR_GLOW_RADIUS,
    CROSSHAIR_HALF_LENGTH,
    CROSSHAIR_LINE_WIDTH,
)
from streaklab.render.canvas import Canvas
from streaklab.render.paint import RED, TRANSPARENT, WHITE, RadialGradient

Point = tuple[float, float]


def arrowhead_vertices(record: StreakRecord) -> tuple[Point, Point, Point]:
    """Triangle with its base on the tail and its apex ARROW_HEIGHT below."""
    tx, ty = record.tail
    return (
        (tx - ARROW_HALF_WIDTH, ty),
        (tx + ARROW_HALF_WIDTH, ty),
        (tx, ty + ARROW_HEIGHT),
    )


def draw_vectors(canvas: Canvas, ledger: StreakLedger) -> int:
    """Fill one red arrowhead per record. Returns the number drawn."""
    drawn = 0
    with canvas.paint_state():
        canvas.fill_style = RED.with_alpha(ARROW_ALPHA)
        # Set for shaft lines; only arrowheads are drawn.
        canvas.stroke_style = RED.with_alpha(ARROW_ALPHA)
        canvas.line_width = ARROW_SHAFT_WIDTH
        for record in ledger:
            canvas.fill_polygon(arrowhead_vertices(record))
            drawn += 1
    return drawn


def crosshair_segments(cx: float, cy: float) -> tuple[tuple[Point, Point], tuple[Point, Point]]:
    h = CROSSHAIR_HALF_LENGTH
    return (((cx - h, cy), (cx + h, cy)), ((cx, cy - h), (cx, cy + h)))


def stamp_crosshair(canvas: Canvas, rng: np.random.Generator) -> Point:
    """Draw the decorative "+" marker at a random point and return that point."""
    cx = float(rng.uniform(0, canvas.size))
    cy = float(rng.uniform(0, canvas.size))
    glow = (
        RadialGradient(cx0=cx, cy0=cy, r0=0.0, cx1=cx, cy1=cy, r1=CROSSHAIR_GLOW_RADIUS)
        .add_stop(0.0, WHITE)
        .add_stop(1.0, TRANSPARENT)
    )
    with canvas.paint_state():
        canvas.stroke_style = glow
        canvas.line_width = CROSSHAIR_LINE_WIDTH
        for (x0, y0), (x1, y1) in crosshair_segments(cx, cy):
            canvas.stroke_line(x0, y0, x1, y1)
    return (cx, cy)
