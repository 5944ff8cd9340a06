"""Noise layer registry — every layer is a standalone function registered via decorator.

Usage:
    @noise_layer(id="N03", dependencies=["N02"], description="Random square speckle")
    def speckle(canvas: Canvas, rng: np.random.Generator, config: FieldConfig) -> None:
        ...

Each layer depends on the one before it, so the topological order is the
compositing order. Adding a layer = one file with the decorator plus a
dependency edge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    import numpy as np

    from streaklab.engine.config import FieldConfig
    from streaklab.render.canvas import Canvas

logger = logging.getLogger(__name__)

LayerFn = Callable[["Canvas", "np.random.Generator", "FieldConfig"], None]


@dataclass
class NoiseLayerSpec:
    id: str
    fn: LayerFn
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class NoiseRegistry:
    """Registry of noise layers, resolved into a compositing order."""

    def __init__(self) -> None:
        self._layers: dict[str, NoiseLayerSpec] = {}

    def register(self, spec: NoiseLayerSpec) -> None:
        if spec.id in self._layers:
            raise ValueError(f"Duplicate noise layer ID: {spec.id}")
        self._layers[spec.id] = spec
        logger.debug("Registered noise layer %s", spec.id)

    def resolve_order(self) -> list[NoiseLayerSpec]:
        """Topological sort of every registered layer respecting dependencies."""
        pool = self._layers

        # Kahn's algorithm
        in_degree: dict[str, int] = {lid: 0 for lid in pool}
        for lid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[lid] += 1

        queue = sorted([lid for lid, d in in_degree.items() if d == 0])
        ordered: list[NoiseLayerSpec] = []

        while queue:
            lid = queue.pop(0)
            ordered.append(pool[lid])
            for other_id, other_spec in pool.items():
                if lid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered


# Module-level registry of layer code (not of run state)
_registry = NoiseRegistry()


def get_registry() -> NoiseRegistry:
    return _registry


def noise_layer(
    *,
    id: str,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a noise layer function."""

    def decorator(fn: LayerFn) -> LayerFn:
        spec = NoiseLayerSpec(
            id=id,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
