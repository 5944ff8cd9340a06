"""Noise compositor — applies the registered noise layers in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

import numpy as np

from streaklab.engine.config import FieldConfig
from streaklab.engine.registry import NoiseLayerSpec, NoiseRegistry, get_registry
from streaklab.render.canvas import Canvas

logger = logging.getLogger(__name__)


def register_noise_layers() -> None:
    """Import all noise layer modules so @noise_layer decorators fire."""
    package = importlib.import_module("streaklab.engine.noise")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"streaklab.engine.noise.{module_name}")


def noise_stack(registry: NoiseRegistry | None = None) -> list[NoiseLayerSpec]:
    """The layers apply_noise() will run, in compositing order."""
    if registry is None:
        register_noise_layers()
        registry = get_registry()
    return registry.resolve_order()


def apply_noise(
    canvas: Canvas,
    rng: np.random.Generator,
    config: FieldConfig | None = None,
    registry: NoiseRegistry | None = None,
) -> list[str]:
    """Composite every noise layer onto ``canvas`` in place.

    All drawing happens inside a save/restore, so the caller's paint state
    (styles, line width, global alpha) is unchanged afterwards. A failing
    layer propagates; the canvas is then left partially composited.

    Returns:
        IDs of the layers applied, in order.
    """
    config = config or FieldConfig(dimension=canvas.size)
    layers = noise_stack(registry)
    start = time.perf_counter()

    with canvas.paint_state():
        canvas.global_alpha = 1.0
        for spec in layers:
            t0 = time.perf_counter()
            spec.fn(canvas, rng, config)
            logger.debug(
                "  %s %s in %.1fms",
                spec.id,
                spec.description,
                (time.perf_counter() - t0) * 1000,
            )

    logger.info(
        "Noise stack: %d layers in %.0fms",
        len(layers),
        (time.perf_counter() - start) * 1000,
    )
    return [spec.id for spec in layers]
