# config.py
"""Configuration settings for the narrative engine system.
Uses Pydantic BaseSettings for automatic environment variable loading.
"""

from __future__ import annotations

from typing import Any

import structlog
from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

logger = structlog.get_logger()

_PLACEHOLDER_API_KEYS = {"", "nope", "changeme"}


class EngineSettings(BaseSettings):
    """Full configuration for the narrative engine system."""

    # Beast mode provider (OpenAI-compatible / Azure OpenAI)
    OPENAI_API_BASE: str = "https://api.openai.com/v1"
    OPENAI_API_KEY: str = "nope"
    BEAST_MODE_MODEL: str = "gpt-4.1"

    # Stable mode provider (Gemini via its OpenAI-compatible endpoint)
    STABLE_MODE_API_BASE: str = (
        "https://generativelanguage.googleapis.com/v1beta/openai"
    )
    STABLE_MODE_API_KEY: str | None = None
    STABLE_MODE_MODEL: str = "gemini-1.5-pro"

    # Generation defaults
    DEFAULT_SYSTEM_PROMPT: str = (
        "You are a professional AI assistant specialized in film and television"
        " production."
    )
    DEFAULT_TEMPERATURE: float = 0.7
    DEFAULT_MAX_TOKENS: int = 2000
    LLM_TOP_P: float = 0.95

    # LLM Call Settings
    HTTPX_TIMEOUT: float = 180.0
    TIKTOKEN_DEFAULT_ENCODING: str = "cl100k_base"
    FALLBACK_CHARS_PER_TOKEN: float = 4.0
    TOKENIZER_CACHE_SIZE: int = 10
    # Concurrency and Rate Limiting
    MAX_CONCURRENT_LLM_CALLS: int = 20

    # Engine execution
    ENGINE_DEFAULT_TIMEOUT_SECONDS: float = 60.0
    ENGINE_DEFAULT_RETRY_COUNT: int = 2
    ENGINE_RETRY_DELAY_SECONDS: float = 0.0
    ENGINE_MAX_CONCURRENCY: int | None = None
    INCLUDE_GENRE_ENGINES: bool = True

    # Cost monitoring (USD per 1k tokens)
    MODEL_COSTS: dict[str, dict[str, float]] = {
        "gpt-4.1": {"input": 0.01, "output": 0.03},
        "gpt-4": {"input": 0.03, "output": 0.06},
        "gpt-4o": {"input": 0.01, "output": 0.03},
        "gpt-3.5-turbo": {"input": 0.001, "output": 0.002},
        "gemini-1.5-pro": {"input": 0.00125, "output": 0.005},
    }
    DEFAULT_COST_PER_1K: dict[str, float] = {"input": 0.01, "output": 0.03}
    COST_ALERT_THRESHOLD_USD: float = 50.0

    # Logging & UI
    LOG_LEVEL_STR: str = Field("INFO", alias="AGENT_LOG_LEVEL")
    LOG_FORMAT: str = (
        "%(asctime)s - %(levelname)s - [%(name)s:%(funcName)s:%(lineno)d] - %(message)s"
    )
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    LOG_DIR: str = "engine_output"
    LOG_FILE: str | None = "engine_run.log"
    ENABLE_RICH_PROGRESS: bool = True

    @model_validator(mode="after")
    def set_dynamic_provider_defaults(self) -> EngineSettings:
        if self.OPENAI_API_KEY.strip().lower() in _PLACEHOLDER_API_KEYS:
            logger.warning(
                "OPENAI_API_KEY is not configured; beast mode generation calls will fail."
            )
        if self.STABLE_MODE_API_KEY is None:
            self.STABLE_MODE_API_KEY = self.OPENAI_API_KEY
        return self

    def cost_for_model(self, model_name: str) -> dict[str, Any]:
        """Return the per-1k token pricing for ``model_name``."""
        return self.MODEL_COSTS.get(model_name, self.DEFAULT_COST_PER_1K)

    model_config = SettingsConfigDict(env_prefix="", env_file=".env")


settings = EngineSettings()
