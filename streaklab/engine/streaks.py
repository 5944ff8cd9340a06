"""Streak field generator.

Draw order matters: later draws land on top of earlier ones.
1. Opaque black fill
2. ``noise_dots`` faint white 1×1 dots anywhere on the canvas
3. ``num_streaks`` vertical streaks, each recorded in the ledger before it is drawn
"""

from __future__ import annotations

import logging

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.context import StreakLedger, StreakRecord
from streaklab.engine.noise_constants import (
    BACKGROUND_DOT_ALPHA,
    STREAK_ALPHA_RANGE,
    STREAK_LENGTH_RANGE,
    STREAK_MID_ALPHA_FACTOR,
    STREAK_MID_STOP,
    STREAK_WIDTH_RANGE,
    STREAK_Y_FRACTION,
)
from streaklab.errors import LedgerStateError
from streaklab.render.canvas import Canvas
from streaklab.render.paint import BLACK, TRANSPARENT, WHITE, LinearGradient

logger = logging.getLogger(__name__)


def sample_streak(rng: np.random.Generator, dimension: int) -> StreakRecord:
    """Draw one record from the streak distribution."""
    y_limit = max(1, int(dimension * STREAK_Y_FRACTION))
    return StreakRecord(
        x=int(rng.integers(0, dimension)),
        y=int(rng.integers(0, y_limit)),
        length=float(rng.uniform(*STREAK_LENGTH_RANGE)),
        alpha=float(rng.uniform(*STREAK_ALPHA_RANGE)),
        line_width=float(rng.uniform(*STREAK_WIDTH_RANGE)),
    )


def streak_gradient(record: StreakRecord) -> LinearGradient:
    """Head-to-tail fade along the streak's own segment."""
    (hx, hy), (tx, ty) = record.head, record.tail
    return (
        LinearGradient(x0=hx, y0=hy, x1=tx, y1=ty)
        .add_stop(0.0, WHITE.with_alpha(record.alpha))
        .add_stop(STREAK_MID_STOP, WHITE.with_alpha(record.alpha * STREAK_MID_ALPHA_FACTOR))
        .add_stop(1.0, TRANSPARENT)
    )


def draw_streak(canvas: Canvas, record: StreakRecord) -> None:
    (hx, hy), (tx, ty) = record.head, record.tail
    canvas.stroke_style = streak_gradient(record)
    canvas.line_width = record.line_width
    canvas.stroke_line(hx, hy, tx, ty)


def draw_background_grain(canvas: Canvas, rng: np.random.Generator, count: int) -> None:
    canvas.fill_style = WHITE.with_alpha(BACKGROUND_DOT_ALPHA)
    for x, y in rng.integers(0, canvas.size, size=(count, 2)):
        canvas.fill_rect(int(x), int(y), 1, 1)


def generate(
    canvas: Canvas,
    rng: np.random.Generator,
    config: FieldConfig,
    ledger: StreakLedger | None = None,
) -> StreakLedger:
    """Render a fresh streak field and fill ``ledger`` with its geometry.

    Args:
        canvas: Surface to draw on; its previous contents are covered.
        rng: Random source; a seeded generator gives a reproducible field.
        config: Canvas dimension and sample counts.
        ledger: Empty ledger to fill. A new one is created when omitted.

    Returns:
        The ledger, holding exactly ``config.num_streaks`` records.

    Raises:
        LedgerStateError: ``ledger`` still holds records from an earlier pass.
    """
    if ledger is None:
        ledger = StreakLedger()
    elif not ledger.is_empty:
        raise LedgerStateError(
            f"generate() needs an empty ledger, got {len(ledger)} records; clear it first"
        )
    if canvas.size != config.dimension:
        raise ValueError(
            f"Canvas size {canvas.size} does not match configured dimension {config.dimension}"
        )

    with canvas.paint_state():
        canvas.global_alpha = 1.0
        canvas.fill_style = BLACK
        canvas.fill_rect(0, 0, canvas.size, canvas.size)

        draw_background_grain(canvas, rng, config.noise_dots)

        for _ in range(config.num_streaks):
            record = sample_streak(rng, config.dimension)
            ledger.append(record)
            draw_streak(canvas, record)

    logger.debug("Generated %d streaks on %dpx field", len(ledger), canvas.size)
    return ledger
