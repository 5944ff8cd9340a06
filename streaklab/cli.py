"""Command-line entry point: render the four stage PNGs into a directory."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from streaklab.config import Settings
from streaklab.engine.config import FieldConfig
from streaklab.engine.context import Stage
from streaklab.engine.pipeline import create_pipeline
from streaklab.errors import PersistenceError
from streaklab.render.sinks import PngDirectorySink, StageArtifact

logger = logging.getLogger("streaklab")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    defaults = FieldConfig()
    parser = argparse.ArgumentParser(description="Render synthetic streak field stages")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Run the pipeline and write stage1..stage4 PNGs")
    render.add_argument("-o", "--out", default=settings.output_dir, help="Output directory")
    render.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    render.add_argument("--dimension", type=int, default=defaults.dimension, help="Canvas size")
    render.add_argument("--streaks", type=int, default=defaults.num_streaks, help="Streak count")
    render.add_argument("--dots", type=int, default=defaults.noise_dots, help="Background dots")
    render.add_argument(
        "--noise-pixels", type=int, default=defaults.noise_pixels, help="Salt-and-pepper pixels"
    )
    render.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def _report(stage: Stage, artifact: StageArtifact) -> None:
    logger.info("%s → %s", stage.name, artifact.location)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = Settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = FieldConfig(
            dimension=args.dimension,
            num_streaks=args.streaks,
            noise_dots=args.dots,
            noise_pixels=args.noise_pixels,
        )
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    pipeline = create_pipeline(PngDirectorySink(args.out), config=config, on_stage=_report)
    try:
        asyncio.run(pipeline.run(seed=args.seed))
    except PersistenceError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
