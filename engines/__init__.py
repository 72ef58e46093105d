"""Comprehensive episode enhancement engines."""

from .catalog import (
    CONDITIONAL_ENGINES,
    ENGINE_CONFIGURATIONS,
    ENGINE_FIELD_MAP,
    MANDATORY_ENGINES,
    EngineCategory,
    EngineConfig,
    get_engine_config,
    get_fallback_content,
)
from .comprehensive_engines import ComprehensiveEngineRunner, run_comprehensive_engines
from .context_builder import build_engine_context
from .executor import EngineExecutor
from .genre_selector import select_conditional_engines
from .quality import assess_output_quality, calculate_run_quality_score

__all__ = [
    "CONDITIONAL_ENGINES",
    "ENGINE_CONFIGURATIONS",
    "ENGINE_FIELD_MAP",
    "MANDATORY_ENGINES",
    "EngineCategory",
    "EngineConfig",
    "get_engine_config",
    "get_fallback_content",
    "ComprehensiveEngineRunner",
    "run_comprehensive_engines",
    "build_engine_context",
    "EngineExecutor",
    "select_conditional_engines",
    "assess_output_quality",
    "calculate_run_quality_score",
]
