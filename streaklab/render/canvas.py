"""Canvas — square raster surface with an HTML-canvas-like paint state.

Wraps a cairo ARGB32 image surface. Drawing calls read the current paint
state (fill style, stroke style, line width, global alpha); ``save()`` and
``restore()`` push and pop that state.
"""

from __future__ import annotations

import io
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, replace

import cairocffi as cairo
import numpy as np
from numpy.typing import NDArray
from PIL import Image

from streaklab.errors import CanvasStateError
from streaklab.render.paint import BLACK, Paint, set_source


@dataclass(frozen=True)
class PaintState:
    fill_style: Paint = BLACK
    stroke_style: Paint = BLACK
    line_width: float = 1.0
    global_alpha: float = 1.0


@dataclass(frozen=True)
class RasterSnapshot:
    """Frozen copy of the canvas pixels as straight-alpha RGBA (H, W, 4)."""

    pixels: NDArray[np.uint8]

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.pixels))

    def to_png_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.to_image().save(buf, format="PNG")
        return buf.getvalue()


def _surface_to_rgba(surface: cairo.ImageSurface) -> NDArray[np.uint8]:
    """Copy an ARGB32 surface into a straight-alpha RGBA array."""
    surface.flush()
    w, h, stride = surface.get_width(), surface.get_height(), surface.get_stride()
    # ARGB32 pixels are native-endian words; as little-endian bytes they read B, G, R, A
    words = np.frombuffer(surface.get_data(), dtype=np.uint32)
    data = words.astype("<u4", copy=False).tobytes()
    image = Image.frombuffer("RGBA", (w, h), data, "raw", "BGRa", stride, 1)
    out = np.array(image, dtype=np.uint8)
    out.setflags(write=False)
    return out


class Canvas:
    """Mutable D×D raster with fill/stroke/gradient/blit primitives."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Canvas size must be positive, got {size}")
        self.size = size
        self._surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, size, size)
        self._ctx = cairo.Context(self._surface)
        self._state = PaintState()
        self._stack: list[PaintState] = []

    # --- Paint state ---

    @property
    def state(self) -> PaintState:
        return self._state

    @property
    def fill_style(self) -> Paint:
        return self._state.fill_style

    @fill_style.setter
    def fill_style(self, paint: Paint) -> None:
        self._state = replace(self._state, fill_style=paint)

    @property
    def stroke_style(self) -> Paint:
        return self._state.stroke_style

    @stroke_style.setter
    def stroke_style(self, paint: Paint) -> None:
        self._state = replace(self._state, stroke_style=paint)

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @line_width.setter
    def line_width(self, width: float) -> None:
        if width <= 0:
            raise ValueError(f"Line width must be positive, got {width}")
        self._state = replace(self._state, line_width=float(width))

    @property
    def global_alpha(self) -> float:
        return self._state.global_alpha

    @global_alpha.setter
    def global_alpha(self, alpha: float) -> None:
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"Global alpha out of range: {alpha}")
        self._state = replace(self._state, global_alpha=float(alpha))

    @property
    def save_depth(self) -> int:
        return len(self._stack)

    def save(self) -> None:
        self._stack.append(self._state)

    def restore(self) -> None:
        if not self._stack:
            raise CanvasStateError("restore() without matching save()")
        self._state = self._stack.pop()

    @contextmanager
    def paint_state(self) -> Iterator[Canvas]:
        """save() on entry, restore() on exit, even if drawing raises."""
        self.save()
        try:
            yield self
        finally:
            self.restore()

    # --- Drawing ---

    @contextmanager
    def _composited(self) -> Iterator[cairo.Context]:
        # Global alpha below 1 needs the shape drawn into a group first so
        # the group, not each source, is attenuated.
        ctx = self._ctx
        alpha = self._state.global_alpha
        if alpha >= 1.0:
            yield ctx
            return
        ctx.push_group()
        try:
            yield ctx
        finally:
            ctx.pop_group_to_source()
            ctx.paint_with_alpha(alpha)

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        with self._composited() as ctx:
            ctx.new_path()
            ctx.rectangle(x, y, w, h)
            set_source(ctx, self._state.fill_style)
            ctx.fill()

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        with self._composited() as ctx:
            ctx.new_path()
            ctx.move_to(x0, y0)
            ctx.line_to(x1, y1)
            ctx.set_line_width(self._state.line_width)
            set_source(ctx, self._state.stroke_style)
            ctx.stroke()

    def fill_polygon(self, points: Sequence[tuple[float, float]]) -> None:
        if len(points) < 3:
            raise ValueError(f"Polygon needs at least 3 vertices, got {len(points)}")
        with self._composited() as ctx:
            ctx.new_path()
            ctx.move_to(*points[0])
            for px, py in points[1:]:
                ctx.line_to(px, py)
            ctx.close_path()
            set_source(ctx, self._state.fill_style)
            ctx.fill()

    def freeze(self) -> cairo.ImageSurface:
        """Independent copy of the current surface, usable as a blit source."""
        frozen = cairo.ImageSurface(cairo.FORMAT_ARGB32, self.size, self.size)
        ctx = cairo.Context(frozen)
        ctx.set_operator(cairo.OPERATOR_SOURCE)
        ctx.set_source_surface(self._surface, 0, 0)
        ctx.paint()
        frozen.flush()
        return frozen

    def blit(self, source: cairo.ImageSurface, dx: float = 0.0, dy: float = 0.0) -> None:
        """Composite ``source`` at offset (dx, dy) using the current global alpha."""
        if source is self._surface:
            raise ValueError("blit source must be a frozen copy, not the live surface")
        ctx = self._ctx
        ctx.save()
        try:
            ctx.set_source_surface(source, dx, dy)
            ctx.paint_with_alpha(self._state.global_alpha)
        finally:
            ctx.restore()

    # --- Readback ---

    def snapshot(self) -> RasterSnapshot:
        """Capture the pixels now; later drawing does not affect the result."""
        return RasterSnapshot(pixels=_surface_to_rgba(self._surface))

    def to_array(self) -> NDArray[np.uint8]:
        return self.snapshot().pixels
