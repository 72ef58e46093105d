# engines/executor.py
"""Run one engine: deadline per attempt, bounded retries, fallback on exhaustion."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Mapping
from typing import Any, Protocol

import structlog
from config import settings
from prompt_renderer import render_engine_prompt

from models.engine_models import EngineContext, EngineExecutionResult, GenerationMode

from .catalog import ENGINE_CONFIGURATIONS, EngineConfig, get_fallback_content
from .quality import FALLBACK_QUALITY_SCORE, assess_output_quality

logger = structlog.get_logger(__name__)

CONFIG_NOT_FOUND_ERROR = "Engine configuration not found"
TIMEOUT_ERROR = "Timeout"


class TextGenerator(Protocol):
    """Anything that can answer a prompt with an object exposing ``content``."""

    async def generate(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        mode: GenerationMode | str = GenerationMode.BEAST,
        engine_name: str | None = None,
    ) -> Any: ...


def _error_message(exc: BaseException) -> str:
    if isinstance(exc, asyncio.TimeoutError):
        return TIMEOUT_ERROR
    return str(exc) or type(exc).__name__


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class EngineExecutor:
    """Execute engines from a catalog against a shared context."""

    def __init__(
        self,
        generator: TextGenerator,
        catalog: Mapping[str, EngineConfig] | None = None,
        retry_delay: float | None = None,
    ) -> None:
        self.generator = generator
        self.catalog = ENGINE_CONFIGURATIONS if catalog is None else catalog
        self.retry_delay = (
            settings.ENGINE_RETRY_DELAY_SECONDS if retry_delay is None else retry_delay
        )

    async def _generate_with_deadline(
        self,
        config: EngineConfig,
        prompt: str,
        mode: GenerationMode,
        timeout: float,
    ) -> str:
        # wait_for cancels the pending call when the deadline passes.
        response = await asyncio.wait_for(
            self.generator.generate(
                prompt,
                system_prompt=config.system_prompt,
                temperature=config.temperature,
                max_tokens=config.max_tokens,
                mode=mode,
                engine_name=config.name,
            ),
            timeout=timeout,
        )
        return response.content

    async def execute(
        self,
        engine_name: str,
        context: EngineContext,
        mode: GenerationMode | str = GenerationMode.BEAST,
        timeout_override: float | None = None,
    ) -> EngineExecutionResult:
        """Run ``engine_name`` and always return a result, never raise for call failures."""
        config = self.catalog.get(engine_name)
        if config is None:
            logger.error("Engine configuration not found", engine=engine_name)
            return EngineExecutionResult(
                engine_name=engine_name,
                success=False,
                error=CONFIG_NOT_FOUND_ERROR,
            )

        generation_mode = GenerationMode(mode)
        timeout = timeout_override if timeout_override is not None else config.timeout
        total_attempts = config.retry_count + 1
        started = time.perf_counter()
        last_error = ""

        for attempt in range(total_attempts):
            logger.debug(
                f"{engine_name}: Attempt {attempt + 1}/{total_attempts}",
                engine=engine_name,
            )
            prompt = render_engine_prompt(config, context)
            try:
                content = await self._generate_with_deadline(
                    config, prompt, generation_mode, timeout
                )
            except Exception as exc:
                last_error = _error_message(exc)
                logger.warning(
                    f"{engine_name}: Attempt {attempt + 1} failed: {last_error}",
                    engine=engine_name,
                    attempt=attempt + 1,
                    error_type=type(exc).__name__,
                )
                if attempt < total_attempts - 1 and self.retry_delay > 0:
                    await asyncio.sleep(self.retry_delay)
                continue

            quality_score = assess_output_quality(content)
            execution_time_ms = _elapsed_ms(started)
            logger.info(
                f"{engine_name}: Success in {execution_time_ms}ms (quality: {quality_score}/100)",
                engine=engine_name,
                retries=attempt,
            )
            return EngineExecutionResult(
                engine_name=engine_name,
                success=True,
                content=content,
                execution_time_ms=execution_time_ms,
                retry_count=attempt,
                quality_score=quality_score,
            )

        logger.warning(
            f"{engine_name}: Using fallback content after {total_attempts} attempts",
            engine=engine_name,
            error=last_error,
        )
        return EngineExecutionResult(
            engine_name=engine_name,
            success=False,
            content=get_fallback_content(engine_name),
            execution_time_ms=_elapsed_ms(started),
            retry_count=total_attempts,
            quality_score=FALLBACK_QUALITY_SCORE,
            error=last_error,
        )
