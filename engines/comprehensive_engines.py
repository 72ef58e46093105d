# engines/comprehensive_engines.py
"""Fan out the comprehensive enhancement engines and aggregate their notes."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Mapping, Sequence
from typing import Any

import structlog
from config import settings
from core.llm_interface import llm_service

from models.engine_models import (
    ComprehensiveEngineMetadata,
    ComprehensiveEngineNotes,
    ComprehensiveEngineResult,
    EngineContext,
    EngineExecutionResult,
    GenerationMode,
)
from models.story_input_models import EpisodeInput, StoryBibleInput

from .catalog import (
    ENGINE_FIELD_MAP,
    MANDATORY_ENGINES,
    EngineConfig,
    get_fallback_content,
    order_by_priority,
)
from .context_builder import build_engine_context
from .executor import EngineExecutor, TextGenerator
from .genre_selector import select_conditional_engines
from .quality import calculate_run_quality_score

logger = structlog.get_logger(__name__)

EpisodeLike = Mapping[str, Any] | EpisodeInput
StoryBibleLike = Mapping[str, Any] | StoryBibleInput


class ComprehensiveEngineRunner:
    """Dispatch mandatory and genre engines concurrently and merge the results."""

    def __init__(
        self,
        generator: TextGenerator | None = None,
        catalog: Mapping[str, EngineConfig] | None = None,
        mandatory_engines: Sequence[str] = MANDATORY_ENGINES,
        max_concurrency: int | None = None,
    ) -> None:
        self.executor = EngineExecutor(generator or llm_service, catalog)
        self.mandatory_engines = tuple(mandatory_engines)
        self.max_concurrency = (
            settings.ENGINE_MAX_CONCURRENCY if max_concurrency is None else max_concurrency
        )
        # None or 0 means unbounded.
        if self.max_concurrency is not None and self.max_concurrency < 0:
            raise ValueError(
                f"max_concurrency must be positive, got {self.max_concurrency}"
            )

    async def _execute_batch(
        self,
        engine_names: Sequence[str],
        context: EngineContext,
        mode: GenerationMode,
        timeout_override: float | None,
    ) -> list[tuple[str, EngineExecutionResult]]:
        semaphore = (
            asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None
        )

        async def _run_one(name: str) -> EngineExecutionResult:
            if semaphore is None:
                return await self.executor.execute(
                    name, context, mode, timeout_override=timeout_override
                )
            async with semaphore:
                return await self.executor.execute(
                    name, context, mode, timeout_override=timeout_override
                )

        tasks = [_run_one(name) for name in engine_names]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        settled: list[tuple[str, EngineExecutionResult]] = []
        for name, res in zip(engine_names, results, strict=True):
            if isinstance(res, EngineExecutionResult):
                settled.append((name, res))
                continue
            logger.warning("Engine task failed", engine=name, error=repr(res))
            settled.append(
                (
                    name,
                    EngineExecutionResult(
                        engine_name=name,
                        success=False,
                        content=get_fallback_content(name),
                        error=str(res) or type(res).__name__,
                    ),
                )
            )
        return settled

    @staticmethod
    def _record(
        notes: ComprehensiveEngineNotes,
        metadata: ComprehensiveEngineMetadata,
        engine_name: str,
        result: EngineExecutionResult,
    ) -> None:
        field_name = ENGINE_FIELD_MAP.get(engine_name)
        if field_name and result.content:
            setattr(notes, field_name, result.content)

        metadata.engine_performance[engine_name] = result
        metadata.total_engines_run += 1
        if result.success:
            metadata.successful_engines += 1
        else:
            metadata.failed_engines += 1
            metadata.errors.append(f"{engine_name}: {result.error or 'Unknown error'}")

    async def _run_phase(
        self,
        label: str,
        engine_names: Sequence[str],
        context: EngineContext,
        mode: GenerationMode,
        timeout_override: float | None,
        notes: ComprehensiveEngineNotes,
        metadata: ComprehensiveEngineMetadata,
    ) -> None:
        logger.info(
            f"{label}: Executing {len(engine_names)} engines in parallel",
            engines=list(engine_names),
        )
        phase_started = time.perf_counter()
        for name, result in await self._execute_batch(
            engine_names, context, mode, timeout_override
        ):
            self._record(notes, metadata, name, result)
        metadata.phase_execution_times_ms.append(
            int((time.perf_counter() - phase_started) * 1000)
        )

    async def run(
        self,
        episode: EpisodeLike,
        story_bible: StoryBibleLike,
        mode: GenerationMode | str = GenerationMode.BEAST,
        *,
        include_genre_engines: bool | None = None,
        timeout_override: float | None = None,
    ) -> ComprehensiveEngineResult:
        """Run every applicable engine. Never raises for engine-level failures."""
        started = time.perf_counter()
        notes = ComprehensiveEngineNotes()
        metadata = ComprehensiveEngineMetadata()
        if include_genre_engines is None:
            include_genre_engines = settings.INCLUDE_GENRE_ENGINES

        try:
            generation_mode = GenerationMode(mode)
            bible = (
                story_bible
                if isinstance(story_bible, StoryBibleInput)
                else StoryBibleInput.model_validate(story_bible)
            )
            context = build_engine_context(episode, bible)

            await self._run_phase(
                "Core engines",
                self.mandatory_engines,
                context,
                generation_mode,
                timeout_override,
                notes,
                metadata,
            )

            if include_genre_engines:
                genre_engines = select_conditional_engines(bible.genre, bible.tone)
                if genre_engines:
                    await self._run_phase(
                        "Genre engines",
                        order_by_priority(genre_engines),
                        context,
                        generation_mode,
                        timeout_override,
                        notes,
                        metadata,
                    )
        except Exception as exc:
            logger.error(
                "Comprehensive engines: critical failure", error=str(exc), exc_info=True
            )
            metadata.errors.append(f"Critical error: {exc}")

        metadata.total_execution_time_ms = int((time.perf_counter() - started) * 1000)
        metadata.success_rate = (
            metadata.successful_engines / metadata.total_engines_run * 100
            if metadata.total_engines_run
            else 0.0
        )
        metadata.quality_score = calculate_run_quality_score(
            metadata.engine_performance.values(), metadata.success_rate
        )
        logger.info(
            f"Comprehensive engines: Completed {metadata.successful_engines}/{metadata.total_engines_run} "
            f"engines ({metadata.success_rate:.1f}%) in {metadata.total_execution_time_ms}ms",
            quality_score=metadata.quality_score,
        )
        return ComprehensiveEngineResult(notes=notes, metadata=metadata)


async def run_comprehensive_engines(
    episode: EpisodeLike,
    story_bible: StoryBibleLike,
    mode: GenerationMode | str = GenerationMode.BEAST,
    *,
    include_genre_engines: bool | None = None,
    max_concurrency: int | None = None,
    timeout_override: float | None = None,
    generator: TextGenerator | None = None,
) -> ComprehensiveEngineResult:
    """Enhance one episode with every mandatory engine plus matching genre engines."""
    runner = ComprehensiveEngineRunner(
        generator=generator, max_concurrency=max_concurrency
    )
    return await runner.run(
        episode,
        story_bible,
        mode,
        include_genre_engines=include_genre_engines,
        timeout_override=timeout_override,
    )
