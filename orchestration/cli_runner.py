# orchestration/cli_runner.py
"""Command-line runner for the comprehensive engines."""

from __future__ import annotations

import asyncio
import json
import os
from dataclasses import dataclass

import structlog
from core.cost_monitor import cost_monitor
from core.llm_interface import llm_service
from engines.comprehensive_engines import ComprehensiveEngineRunner
from ui.rich_display import RichDisplayManager, render_run_summary
from utils.logging import setup_logging
from yaml_parser import load_story_file

from models.engine_models import ComprehensiveEngineResult, GenerationMode

logger = structlog.get_logger(__name__)


@dataclass
class RunOptions:
    episode_path: str
    story_bible_path: str
    mode: GenerationMode = GenerationMode.BEAST
    output_path: str | None = None
    include_genre_engines: bool = True
    timeout_override: float | None = None
    max_concurrency: int | None = None


def write_result(result: ComprehensiveEngineResult, output_path: str) -> None:
    """Write the notes and metadata as JSON."""
    out_dir = os.path.dirname(output_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(result.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
    logger.info("Wrote engine notes", path=output_path)


async def _run(options: RunOptions) -> ComprehensiveEngineResult | None:
    episode = load_story_file(options.episode_path)
    story_bible = load_story_file(options.story_bible_path)
    if episode is None or story_bible is None:
        logger.error(
            "Could not load input files",
            episode=options.episode_path,
            story_bible=options.story_bible_path,
        )
        return None

    runner = ComprehensiveEngineRunner(
        generator=llm_service, max_concurrency=options.max_concurrency
    )
    display = RichDisplayManager(cost_monitor)
    display.start(str(episode.get("title", "Episode")), options.mode.value)
    try:
        result = await runner.run(
            episode,
            story_bible,
            options.mode,
            include_genre_engines=options.include_genre_engines,
            timeout_override=options.timeout_override,
        )
    finally:
        await display.stop()
        await llm_service.aclose()

    render_run_summary(result)
    snapshot = cost_monitor.snapshot()
    logger.info(
        "LLM usage for run",
        requests=snapshot.total_requests,
        failed=snapshot.failed_requests,
        input_tokens=snapshot.total_input_tokens,
        output_tokens=snapshot.total_output_tokens,
        cost_usd=round(snapshot.total_cost, 4),
    )
    if options.output_path:
        write_result(result, options.output_path)
    return result


def run(options: RunOptions) -> ComprehensiveEngineResult | None:
    """Set up logging and run the engines for one episode."""
    setup_logging()
    try:
        return asyncio.run(_run(options))
    except KeyboardInterrupt:
        logger.info("Engine run interrupted by user; shutting down.")
    except Exception as main_err:  # pragma: no cover - entry point catch
        logger.critical(
            "Engine run encountered an unhandled exception: %s",
            main_err,
            exc_info=True,
        )
    return None
