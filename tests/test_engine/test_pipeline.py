"""Tests for the pipeline orchestrator."""

from __future__ import annotations

import asyncio

import numpy as np
import pytest

import streaklab.engine.pipeline as pipeline_module
from streaklab.engine.compositor import apply_noise
from streaklab.engine.config import FieldConfig
from streaklab.engine.context import Stage
from streaklab.engine.pipeline import Pipeline, create_pipeline
from streaklab.engine.streaks import generate
from streaklab.errors import PersistenceError
from streaklab.render.canvas import Canvas
from streaklab.render.sinks import MemorySink, PngDirectorySink, StageArtifact


class EventSink(MemorySink):
    """MemorySink that also logs each save into a shared event list."""

    def __init__(self, events: list[str], fail_on: str | None = None, error: Exception | None = None):
        super().__init__()
        self.events = events
        self.fail_on = fail_on
        self.error = error

    async def save(self, snapshot, name):
        if name == self.fail_on:
            raise self.error
        self.events.append(f"save:{name}")
        return await super().save(snapshot, name)


@pytest.fixture
def events(monkeypatch) -> list[str]:
    log: list[str] = []

    def traced(label, fn):
        def wrapper(*args, **kwargs):
            log.append(label)
            return fn(*args, **kwargs)
        return wrapper

    monkeypatch.setattr(pipeline_module, "generate", traced("generate", pipeline_module.generate))
    monkeypatch.setattr(pipeline_module, "apply_noise", traced("noise", pipeline_module.apply_noise))
    monkeypatch.setattr(pipeline_module, "draw_vectors", traced("vectors", pipeline_module.draw_vectors))
    monkeypatch.setattr(pipeline_module, "stamp_crosshair", traced("crosshair", pipeline_module.stamp_crosshair))
    return log


def test_full_run_default_config():
    sink = MemorySink()
    result = asyncio.run(Pipeline(sink).run(seed=2024))
    assert [a.name for a in result.artifacts] == ["stage1", "stage2", "stage3", "stage4"]
    assert list(sink.images) == ["stage1", "stage2", "stage3", "stage4"]
    assert len(result.streaks) == 150
    assert all((a.width, a.height) == (400, 400) for a in result.artifacts)
    assert set(result.timings_ms) == {"stage1", "stage2", "stage3", "stage4"}


def test_stage_and_save_ordering(events, small_config):
    sink = EventSink(events)
    asyncio.run(Pipeline(sink, config=small_config).run(seed=1))
    assert events == [
        "generate", "save:stage1",
        "noise", "save:stage2",
        "generate", "save:stage3",
        "vectors", "crosshair", "save:stage4",
    ]


def test_snapshots_match_state_right_after_each_stage(small_config):
    sink = MemorySink()
    asyncio.run(Pipeline(sink, config=small_config).run(seed=8))

    # Replay the first two stages by hand with the same random stream
    rng = np.random.default_rng(8)
    canvas = Canvas(small_config.dimension)
    generate(canvas, rng, small_config)
    assert np.array_equal(sink.snapshots["stage1"].pixels, canvas.to_array())
    apply_noise(canvas, rng, small_config)
    assert np.array_equal(sink.snapshots["stage2"].pixels, canvas.to_array())


def test_regeneration_resets_ledger(small_config):
    pipeline = Pipeline(MemorySink(), config=small_config)
    ctx = pipeline.create_context(seed=3)
    result = asyncio.run(pipeline.run(ctx=ctx))
    assert len(ctx.ledger) == small_config.num_streaks
    assert len(result.streaks) == small_config.num_streaks
    assert ctx.stage == Stage.DONE


def test_seeded_runs_are_bit_identical(small_config):
    runs = []
    for _ in range(2):
        sink = MemorySink()
        result = asyncio.run(Pipeline(sink, config=small_config).run(seed=77))
        runs.append((result, sink))
    (r1, s1), (r2, s2) = runs
    assert r1.streaks == r2.streaks
    assert r1.crosshair == r2.crosshair
    for name in ("stage1", "stage2", "stage3", "stage4"):
        assert np.array_equal(s1.snapshots[name].pixels, s2.snapshots[name].pixels)


def test_stages_differ_where_expected(small_config):
    sink = MemorySink()
    asyncio.run(Pipeline(sink, config=small_config).run(seed=5))
    px = {name: snap.pixels for name, snap in sink.snapshots.items()}
    assert not np.array_equal(px["stage1"], px["stage2"])
    assert not np.array_equal(px["stage3"], px["stage4"])
    # Regenerated field is grayscale again
    assert (px["stage3"][:, :, 0] == px["stage3"][:, :, 1]).all()


def test_persistence_failure_aborts_remaining_stages(events, small_config):
    sink = EventSink(events, fail_on="stage2", error=PersistenceError("stage2"))
    with pytest.raises(PersistenceError):
        asyncio.run(Pipeline(sink, config=small_config).run(seed=1))
    assert events == ["generate", "save:stage1", "noise"]


def test_os_error_from_sink_is_wrapped(events, small_config):
    sink = EventSink(events, fail_on="stage1", error=PermissionError("read-only"))
    with pytest.raises(PersistenceError) as exc:
        asyncio.run(Pipeline(sink, config=small_config).run(seed=1))
    assert exc.value.name == "stage1"
    assert events == ["generate"]


def test_context_cannot_be_reused(small_config):
    pipeline = Pipeline(MemorySink(), config=small_config)
    ctx = pipeline.create_context(seed=1)
    asyncio.run(pipeline.run(ctx=ctx))
    with pytest.raises(ValueError):
        asyncio.run(Pipeline(MemorySink(), config=small_config).run(ctx=ctx))


def test_stage_listener_sees_each_stage(small_config):
    seen: list[tuple[Stage, StageArtifact]] = []
    pipeline = create_pipeline(
        MemorySink(), config=small_config, on_stage=lambda s, a: seen.append((s, a))
    )
    asyncio.run(pipeline.run(seed=1))
    assert [s for s, _ in seen] == [Stage.BASE, Stage.NOISY, Stage.CLEAN, Stage.FINAL]
    assert [a.name for _, a in seen] == ["stage1", "stage2", "stage3", "stage4"]


def test_directory_sink_end_to_end(tmp_path, small_config):
    result = asyncio.run(Pipeline(PngDirectorySink(tmp_path), config=small_config).run(seed=1))
    for artifact in result.artifacts:
        assert (tmp_path / f"{artifact.name}.png").is_file()


def test_field_config_validation():
    with pytest.raises(ValueError):
        FieldConfig(dimension=0)
    with pytest.raises(ValueError):
        FieldConfig(num_streaks=-1)
