"""Snapshot sinks. Each stage's raster goes to one once drawing finishes.

A sink receives an already-frozen ``RasterSnapshot``; it never reads the live
canvas, so the caller is free to keep drawing once ``save()`` returns.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from streaklab.errors import PersistenceError
from streaklab.render.canvas import RasterSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageArtifact:
    name: str
    location: str
    width: int
    height: int


class SnapshotSink(Protocol):
    async def save(self, snapshot: RasterSnapshot, name: str) -> StageArtifact: ...


class PngDirectorySink:
    """Writes ``<name>.png`` files into a directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _write(self, snapshot: RasterSnapshot, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        snapshot.to_image().save(path, format="PNG")

    async def save(self, snapshot: RasterSnapshot, name: str) -> StageArtifact:
        path = self.directory / f"{name}.png"
        try:
            await asyncio.to_thread(self._write, snapshot, path)
        except OSError as e:
            raise PersistenceError(name, e) from e
        logger.info("Saved %s (%dx%d)", path, snapshot.width, snapshot.height)
        return StageArtifact(
            name=name,
            location=str(path),
            width=snapshot.width,
            height=snapshot.height,
        )


@dataclass
class MemorySink:
    """Keeps encoded PNG bytes in memory, keyed by stage name, in save order."""

    images: dict[str, bytes] = field(default_factory=dict)
    snapshots: dict[str, RasterSnapshot] = field(default_factory=dict)

    async def save(self, snapshot: RasterSnapshot, name: str) -> StageArtifact:
        if name in self.images:
            raise PersistenceError(name, ValueError("stage already saved"))
        self.images[name] = await asyncio.to_thread(snapshot.to_png_bytes)
        self.snapshots[name] = snapshot
        logger.debug("Encoded %s in memory (%d bytes)", name, len(self.images[name]))
        return StageArtifact(
            name=name,
            location=f"memory://{name}",
            width=snapshot.width,
            height=snapshot.height,
        )
