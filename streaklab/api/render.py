"""POST /api/render — run the full pipeline and return all four stage images."""

from __future__ import annotations

import base64
import time

from fastapi import APIRouter

from streaklab.engine.pipeline import STAGE_NAMES, create_pipeline
from streaklab.models.requests import RenderRequest
from streaklab.models.responses import RenderResponse, StageImage, StreakModel
from streaklab.render.sinks import MemorySink

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    start = time.perf_counter()
    sink = MemorySink()
    pipeline = create_pipeline(sink, config=req.to_field_config())
    result = await pipeline.run(seed=req.seed)

    stage_by_name = {name: stage for stage, name in STAGE_NAMES.items()}
    stages = [
        StageImage(
            stage=stage_by_name[artifact.name].name,
            name=artifact.name,
            png_base64=base64.b64encode(sink.images[artifact.name]).decode("ascii"),
        )
        for artifact in result.artifacts
    ]

    return RenderResponse(
        stages=stages,
        streaks=[StreakModel(**record.to_dict()) for record in result.streaks],
        crosshair=result.crosshair,
        processing_time_ms=(time.perf_counter() - start) * 1000,
    )
