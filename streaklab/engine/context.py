"""Pipeline state: streak records, the ledger, and the per-run context.

StreakRecord → one streak's geometry, frozen once sampled
StreakLedger → ordered records for one generation pass
PipelineContext → canvas + ledger + random source owned by a single run
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.render.canvas import Canvas
from streaklab.render.sinks import StageArtifact


@dataclass(frozen=True)
class StreakRecord:
    """Geometry and peak intensity of one vertical streak.

    The head (x, y) is the brightest point; intensity falls off toward the
    tail (x, y + length).
    """

    x: int
    y: int
    length: float
    alpha: float
    line_width: float

    @property
    def head(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))

    @property
    def tail(self) -> tuple[float, float]:
        return (float(self.x), self.y + self.length)

    def to_dict(self) -> dict[str, float]:
        return {
            "x": self.x,
            "y": self.y,
            "length": self.length,
            "alpha": self.alpha,
            "line_width": self.line_width,
        }


class StreakLedger:
    """Append-only record list for one generation pass; cleared between passes."""

    def __init__(self) -> None:
        self._records: list[StreakRecord] = []

    def append(self, record: StreakRecord) -> None:
        self._records.append(record)

    def clear(self) -> None:
        self._records.clear()

    @property
    def records(self) -> tuple[StreakRecord, ...]:
        return tuple(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StreakRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> StreakRecord:
        return self._records[index]

    def __repr__(self) -> str:
        return f"StreakLedger({len(self._records)} records)"


class Stage(enum.IntEnum):
    INIT = 0
    BASE = 1
    NOISY = 2
    CLEAN = 3
    FINAL = 4
    DONE = 5


@dataclass
class PipelineContext:
    """Everything one run owns. Created per run; never shared."""

    config: FieldConfig
    rng: np.random.Generator
    canvas: Canvas
    ledger: StreakLedger = field(default_factory=StreakLedger)
    stage: Stage = Stage.INIT

    # --- Run metadata ---
    artifacts: list[StageArtifact] = field(default_factory=list)
    timings_ms: dict[str, float] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        config: FieldConfig | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> PipelineContext:
        config = config or FieldConfig()
        return cls(
            config=config,
            rng=rng if rng is not None else np.random.default_rng(seed),
            canvas=Canvas(config.dimension),
        )
