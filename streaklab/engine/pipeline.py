"""Pipeline orchestrator — four drawing stages, each followed by an awaited save.

INIT → BASE → NOISY → CLEAN → FINAL → DONE

Every stage snapshots the canvas after its last draw and waits for the sink
to finish before the next stage touches the canvas. A sink failure aborts
the run; nothing is retried or skipped.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from streaklab.engine.compositor import apply_noise
from streaklab.engine.config import FieldConfig
from streaklab.engine.context import PipelineContext, Stage, StreakRecord
from streaklab.engine.overlay import draw_vectors, stamp_crosshair
from streaklab.engine.streaks import generate
from streaklab.errors import PersistenceError
from streaklab.render.sinks import SnapshotSink, StageArtifact

logger = logging.getLogger(__name__)

StageListener = Callable[[Stage, StageArtifact], None]

STAGE_NAMES: dict[Stage, str] = {
    Stage.BASE: "stage1",
    Stage.NOISY: "stage2",
    Stage.CLEAN: "stage3",
    Stage.FINAL: "stage4",
}


@dataclass
class PipelineResult:
    artifacts: list[StageArtifact]
    streaks: tuple[StreakRecord, ...]
    crosshair: tuple[float, float]
    timings_ms: dict[str, float] = field(default_factory=dict)


class Pipeline:
    """Drives one run over a single canvas and ledger."""

    def __init__(
        self,
        sink: SnapshotSink,
        config: FieldConfig | None = None,
        on_stage: StageListener | None = None,
    ) -> None:
        self.sink = sink
        self.config = config or FieldConfig()
        self.on_stage = on_stage

    def create_context(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> PipelineContext:
        return PipelineContext.create(self.config, seed=seed, rng=rng)

    async def run(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        ctx: PipelineContext | None = None,
    ) -> PipelineResult:
        """Run all four stages on a fresh (or supplied) context."""
        ctx = ctx or self.create_context(seed=seed, rng=rng)
        if ctx.stage != Stage.INIT:
            raise ValueError(f"Pipeline context already at stage {ctx.stage.name}")

        start = time.perf_counter()

        # BASE: the ledger starts empty; generate() enforces that
        generate(ctx.canvas, ctx.rng, ctx.config, ctx.ledger)
        await self._finish_stage(ctx, Stage.BASE, start)

        t0 = time.perf_counter()
        apply_noise(ctx.canvas, ctx.rng, ctx.config)
        await self._finish_stage(ctx, Stage.NOISY, t0)

        # CLEAN: reset-and-regenerate, not a filter over the noisy pixels
        t0 = time.perf_counter()
        ctx.ledger.clear()
        generate(ctx.canvas, ctx.rng, ctx.config, ctx.ledger)
        await self._finish_stage(ctx, Stage.CLEAN, t0)

        t0 = time.perf_counter()
        draw_vectors(ctx.canvas, ctx.ledger)
        crosshair = stamp_crosshair(ctx.canvas, ctx.rng)
        await self._finish_stage(ctx, Stage.FINAL, t0)

        ctx.stage = Stage.DONE
        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d stages, %d streaks in %.0fms",
            len(ctx.artifacts),
            len(ctx.ledger),
            total,
        )
        return PipelineResult(
            artifacts=list(ctx.artifacts),
            streaks=ctx.ledger.records,
            crosshair=crosshair,
            timings_ms=dict(ctx.timings_ms),
        )

    async def _finish_stage(self, ctx: PipelineContext, stage: Stage, t0: float) -> None:
        name = STAGE_NAMES[stage]
        snapshot = ctx.canvas.snapshot()
        try:
            artifact = await self.sink.save(snapshot, name)
        except PersistenceError:
            logger.error("Stage %s (%s) could not be saved; aborting run", stage.name, name)
            raise
        except OSError as e:
            logger.error("Stage %s (%s) could not be saved; aborting run", stage.name, name)
            raise PersistenceError(name, e) from e

        ctx.stage = stage
        ctx.artifacts.append(artifact)
        elapsed = round((time.perf_counter() - t0) * 1000, 1)
        ctx.timings_ms[name] = elapsed
        logger.info("  %s %s saved in %.1fms", stage.name, name, elapsed)
        if self.on_stage is not None:
            self.on_stage(stage, artifact)


def create_pipeline(
    sink: SnapshotSink,
    config: FieldConfig | None = None,
    on_stage: StageListener | None = None,
) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(sink, config=config, on_stage=on_stage)
