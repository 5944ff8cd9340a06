"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    noise_layers: int = 0


class StreakModel(BaseModel):
    x: int
    y: int
    length: float
    alpha: float
    line_width: float


class StageImage(BaseModel):
    stage: str
    name: str
    png_base64: str


class RenderResponse(BaseModel):
    stages: list[StageImage] = Field(default_factory=list)
    streaks: list[StreakModel] = Field(default_factory=list)
    crosshair: tuple[float, float] = (0.0, 0.0)
    processing_time_ms: float = 0.0
