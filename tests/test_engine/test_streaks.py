"""Tests for streak field generation and the ledger contract."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from streaklab.engine.config import FieldConfig
from streaklab.engine.context import StreakLedger, StreakRecord
from streaklab.engine.streaks import draw_streak, generate, sample_streak, streak_gradient
from streaklab.errors import LedgerStateError
from streaklab.render.canvas import Canvas
from streaklab.render.paint import RED


def test_ledger_length_and_ranges():
    config = FieldConfig()
    ledger = generate(Canvas(config.dimension), np.random.default_rng(0), config)
    assert len(ledger) == 150
    d = config.dimension
    for r in ledger:
        assert 0 <= r.x <= d
        assert 0 <= r.y <= 0.9 * d
        assert 10 <= r.length < 50
        assert 0.1 <= r.alpha < 0.8
        assert 1 <= r.line_width < 2


def test_sample_streak_types(rng):
    record = sample_streak(rng, 400)
    assert isinstance(record.x, int)
    assert isinstance(record.y, int)
    assert record.tail == (record.x, record.y + record.length)
    assert record.head == (record.x, record.y)


def test_non_empty_ledger_rejected(small_config, rng):
    canvas = Canvas(small_config.dimension)
    ledger = generate(canvas, rng, small_config)
    with pytest.raises(LedgerStateError):
        generate(canvas, rng, small_config, ledger)


def test_regeneration_after_clear_never_accumulates(small_config, rng):
    canvas = Canvas(small_config.dimension)
    ledger = StreakLedger()
    for _ in range(3):
        ledger.clear()
        generate(canvas, rng, small_config, ledger)
        assert len(ledger) == small_config.num_streaks


def test_canvas_dimension_mismatch_rejected(small_config, rng):
    with pytest.raises(ValueError):
        generate(Canvas(32), rng, small_config)


def test_field_is_opaque_and_covers_previous_content(small_config, rng):
    canvas = Canvas(small_config.dimension)
    canvas.fill_style = RED
    canvas.fill_rect(0, 0, 64, 64)
    generate(canvas, rng, small_config)
    pixels = canvas.to_array()
    assert (pixels[:, :, 3] == 255).all()
    # Only white and gray appear; no red survives the black base fill
    assert (pixels[:, :, 0] == pixels[:, :, 1]).all()


def test_paint_state_untouched(small_config, rng):
    canvas = Canvas(small_config.dimension)
    before = canvas.state
    generate(canvas, rng, small_config)
    assert canvas.state == before


def test_seeded_generation_is_deterministic(small_config):
    results = []
    for _ in range(2):
        canvas = Canvas(small_config.dimension)
        ledger = generate(canvas, np.random.default_rng(99), small_config)
        results.append((ledger.records, canvas.to_array()))
    assert results[0][0] == results[1][0]
    assert np.array_equal(results[0][1], results[1][1])


def test_head_is_brighter_than_tail(black_canvas):
    record = StreakRecord(x=20, y=5, length=40.0, alpha=0.7, line_width=1.5)
    draw_streak(black_canvas, record)
    pixels = black_canvas.to_array().astype(int)
    head = pixels[5, 18:23, 0].sum()
    tail = pixels[44, 18:23, 0].sum()
    assert head > 0
    assert head > 4 * tail


def test_gradient_stops_fade_head_to_tail():
    record = StreakRecord(x=5, y=10, length=20.0, alpha=0.6, line_width=1.5)
    g = streak_gradient(record)
    assert [s.offset for s in g.stops] == [0.0, 0.8, 1.0]
    assert [s.color.a for s in g.stops] == [0.6, 0.3, 0.0]
    assert (g.x0, g.y0, g.x1, g.y1) == (5.0, 10.0, 5.0, 30.0)


def test_records_are_frozen():
    record = StreakRecord(x=1, y=2, length=10.0, alpha=0.5, line_width=1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.x = 3
