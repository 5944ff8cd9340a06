"""Canvas size and sample counts for one pipeline run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldConfig:
    """Startup parameters; everything else in the pipeline is a fixed constant."""

    # Canvas width and height in pixels
    dimension: int = 400
    # Streaks per generation pass (ledger length after generate())
    num_streaks: int = 150
    # Background grain dots drawn before the streaks
    noise_dots: int = 1000
    # Salt-and-pepper pixels in the noise stack
    noise_pixels: int = 4000

    def __post_init__(self) -> None:
        if self.dimension <= 0:
            raise ValueError(f"dimension must be positive, got {self.dimension}")
        for name in ("num_streaks", "noise_dots", "noise_pixels"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
