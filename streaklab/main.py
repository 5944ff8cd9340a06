"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from streaklab import __version__
from streaklab.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="StreakLab",
        description="Synthetic streak-field imagery with layered noise and vector overlays",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all noise layer modules to trigger registration
    from streaklab.engine.compositor import register_noise_layers

    register_noise_layers()

    from streaklab.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
