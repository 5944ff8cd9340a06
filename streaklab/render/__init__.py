"""Raster surface, paint sources and snapshot sinks."""

from streaklab.render.canvas import Canvas, PaintState, RasterSnapshot
from streaklab.render.paint import Color, LinearGradient, RadialGradient
from streaklab.render.sinks import MemorySink, PngDirectorySink, SnapshotSink, StageArtifact

__all__ = [
    "Canvas",
    "PaintState",
    "RasterSnapshot",
    "Color",
    "LinearGradient",
    "RadialGradient",
    "MemorySink",
    "PngDirectorySink",
    "SnapshotSink",
    "StageArtifact",
]
