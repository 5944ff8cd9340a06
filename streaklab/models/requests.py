"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from streaklab.engine.config import FieldConfig


class RenderRequest(BaseModel):
    seed: int | None = Field(default=None, description="Seed for a reproducible run")
    dimension: int = Field(default=400, ge=16, le=2048, description="Canvas width/height")
    num_streaks: int = Field(default=150, ge=0, le=5000)
    noise_dots: int = Field(default=1000, ge=0, le=100_000)
    noise_pixels: int = Field(default=4000, ge=0, le=200_000)

    def to_field_config(self) -> FieldConfig:
        return FieldConfig(
            dimension=self.dimension,
            num_streaks=self.num_streaks,
            noise_dots=self.noise_dots,
            noise_pixels=self.noise_pixels,
        )
