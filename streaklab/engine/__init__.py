"""StreakLab synthesis engine."""

from streaklab.engine.compositor import apply_noise
from streaklab.engine.config import FieldConfig
from streaklab.engine.context import PipelineContext, Stage, StreakLedger, StreakRecord
from streaklab.engine.overlay import draw_vectors, stamp_crosshair
from streaklab.engine.pipeline import Pipeline, PipelineResult, create_pipeline
from streaklab.engine.registry import get_registry, noise_layer
from streaklab.engine.streaks import generate

__all__ = [
    "apply_noise",
    "FieldConfig",
    "PipelineContext",
    "Stage",
    "StreakLedger",
    "StreakRecord",
    "draw_vectors",
    "stamp_crosshair",
    "Pipeline",
    "PipelineResult",
    "create_pipeline",
    "get_registry",
    "noise_layer",
    "generate",
]
