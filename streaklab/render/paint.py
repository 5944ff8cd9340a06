"""Solid colors and gradients, converted to cairo patterns when drawn."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar, Union

import cairocffi as cairo

from streaklab.errors import GradientStopError


@dataclass(frozen=True)
class Color:
    """RGBA color: 0-255 channels, alpha in [0, 1]."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        if not 0.0 <= self.a <= 1.0:
            raise ValueError(f"Color alpha out of range: {self.a}")

    def with_alpha(self, a: float) -> Color:
        return Color(self.r, self.g, self.b, a)

    def as_cairo(self) -> tuple[float, float, float, float]:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, float(self.a))


def rgba(r: int, g: int, b: int, a: float = 1.0) -> Color:
    return Color(r, g, b, a)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
TRANSPARENT = Color(0, 0, 0, 0.0)


@dataclass(frozen=True)
class ColorStop:
    offset: float
    color: Color


_G = TypeVar("_G", bound="_Gradient")


@dataclass
class _Gradient:
    """Ordered color stops shared by linear and radial gradients.

    Stops must be added with non-decreasing offsets inside [0, 1]; anything
    else raises GradientStopError instead of being silently reordered.
    """

    stops: list[ColorStop] = field(default_factory=list, init=False)

    def add_stop(self: _G, offset: float, color: Color) -> _G:
        if not 0.0 <= offset <= 1.0:
            raise GradientStopError(f"Stop offset {offset} outside [0, 1]")
        if self.stops and offset < self.stops[-1].offset:
            raise GradientStopError(
                f"Stop offset {offset} precedes previous stop {self.stops[-1].offset}"
            )
        self.stops.append(ColorStop(offset, color))
        return self

    def _apply_stops(self, pattern: cairo.Gradient) -> cairo.Gradient:
        for stop in self.stops:
            pattern.add_color_stop_rgba(stop.offset, *stop.color.as_cairo())
        return pattern

    def to_pattern(self) -> cairo.Pattern:
        raise NotImplementedError


@dataclass
class LinearGradient(_Gradient):
    x0: float = 0.0
    y0: float = 0.0
    x1: float = 0.0
    y1: float = 0.0

    def to_pattern(self) -> cairo.Pattern:
        return self._apply_stops(cairo.LinearGradient(self.x0, self.y0, self.x1, self.y1))


@dataclass
class RadialGradient(_Gradient):
    cx0: float = 0.0
    cy0: float = 0.0
    r0: float = 0.0
    cx1: float = 0.0
    cy1: float = 0.0
    r1: float = 0.0

    def to_pattern(self) -> cairo.Pattern:
        return self._apply_stops(
            cairo.RadialGradient(self.cx0, self.cy0, self.r0, self.cx1, self.cy1, self.r1)
        )


Paint = Union[Color, LinearGradient, RadialGradient]


def set_source(ctx: cairo.Context, paint: Paint) -> None:
    """Install a paint as the cairo context's current source."""
    if isinstance(paint, Color):
        ctx.set_source_rgba(*paint.as_cairo())
    else:
        ctx.set_source(paint.to_pattern())
