# core/llm_interface.py
"""
Handles all direct interactions with the hosted Large Language Models used by
the narrative engines. Routes each generation mode to its provider, posts
OpenAI-compatible chat completion requests, cleans responses and meters usage.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.

Copyright 2025 Dennis Lewis
"""

from __future__ import annotations

# Standard library imports
import asyncio
import functools
import re
from dataclasses import dataclass
from typing import Any

# Third-party imports
import httpx
import structlog
import tiktoken

# Local imports
from config import settings
from models.engine_models import GenerationMode

from core.cost_monitor import CostMonitor, cost_monitor
from core.usage import TokenUsage

logger = structlog.get_logger(__name__)


class LLMGenerationError(RuntimeError):
    """A provider call failed or produced no usable content."""


# Token parameter handling
def _completion_token_param(api_base: str) -> str:
    """Return the token count parameter expected by the provider."""
    if "api.openai.com" in api_base or "openai.azure.com" in api_base:
        return "max_completion_tokens"
    return "max_tokens"


@functools.lru_cache(maxsize=settings.TOKENIZER_CACHE_SIZE)
def _get_tokenizer(model_name: str) -> tiktoken.Encoding | None:
    """
    Gets a tiktoken encoder for the given model name, with caching.
    Tries model-specific encoding, then a default, then returns None.
    """
    try:
        try:
            return tiktoken.encoding_for_model(model_name)
        except KeyError:
            logger.debug(
                f"No direct tiktoken encoding for '{model_name}'. Using default '{settings.TIKTOKEN_DEFAULT_ENCODING}'."
            )
            return tiktoken.get_encoding(settings.TIKTOKEN_DEFAULT_ENCODING)
    except Exception as e:
        logger.error(
            f"Unexpected error getting tokenizer for '{model_name}': {e}",
            exc_info=True,
        )
        return None


def count_tokens(text: str, model_name: str) -> int:
    """
    Counts the number of tokens in a string for a given model.
    Uses tiktoken with caching and a character-based fallback.
    """
    if not text:
        return 0

    encoder = _get_tokenizer(model_name)
    if encoder:
        return len(encoder.encode(text, allowed_special="all"))
    return int(len(text) / settings.FALLBACK_CHARS_PER_TOKEN)


@dataclass(frozen=True)
class ProviderRoute:
    """Endpoint, credentials and model serving one generation mode."""

    api_base: str
    api_key: str
    model: str

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/chat/completions"


@dataclass
class GenerationResponse:
    content: str
    model: str
    mode: GenerationMode
    usage: TokenUsage


class LLMService:
    """Client for the chat completion endpoints behind each generation mode."""

    def __init__(
        self,
        timeout: float = settings.HTTPX_TIMEOUT,
        cost_monitor: CostMonitor = cost_monitor,
        client: httpx.AsyncClient | None = None,
    ):
        # Use a single async client for all requests to reuse connections
        self._client = client or httpx.AsyncClient(timeout=timeout)
        # Add a semaphore to limit concurrent requests
        self._semaphore = asyncio.Semaphore(settings.MAX_CONCURRENT_LLM_CALLS)
        self.cost_monitor = cost_monitor
        self.request_count = 0
        logger.info(
            f"LLMService initialized with a concurrency limit of {settings.MAX_CONCURRENT_LLM_CALLS}."
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def route_for_mode(self, mode: GenerationMode | str) -> ProviderRoute:
        """Resolve the provider for ``mode``."""
        if GenerationMode(mode) is GenerationMode.STABLE:
            return ProviderRoute(
                api_base=settings.STABLE_MODE_API_BASE,
                api_key=settings.STABLE_MODE_API_KEY or settings.OPENAI_API_KEY,
                model=settings.STABLE_MODE_MODEL,
            )
        return ProviderRoute(
            api_base=settings.OPENAI_API_BASE,
            api_key=settings.OPENAI_API_KEY,
            model=settings.BEAST_MODE_MODEL,
        )

    def _log_llm_usage(self, model_name: str, usage: TokenUsage) -> None:
        """Helper to log LLM token usage."""
        logger.info(
            f"LLM ('{model_name}') Usage - Prompt: {usage.prompt_tokens} tk, "
            f"Comp: {usage.completion_tokens} tk, Total: {usage.total_tokens} tk"
            + (" (estimated)" if usage.estimated else "")
        )

    async def _post_non_streaming(
        self, route: ProviderRoute, payload: dict[str, Any], headers: dict[str, str]
    ) -> tuple[str, dict[str, int] | None]:
        """Send a regular chat completion request."""
        payload["stream"] = False
        response = await self._client.post(route.endpoint, json=payload, headers=headers)
        response.raise_for_status()
        data = response.json()
        raw_text = ""
        if data.get("choices") and len(data["choices"]) > 0:
            message = data["choices"][0].get("message")
            if message and message.get("content"):
                raw_text = message["content"]
        else:
            logger.error(
                f"LLM ('{payload['model']}') Invalid response structure - missing choices/content despite 200 OK: {data}"
            )
        return raw_text, data.get("usage")

    async def generate(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        mode: GenerationMode | str = GenerationMode.BEAST,
        engine_name: str | None = None,
    ) -> GenerationResponse:
        """Run one chat completion. Raises ``LLMGenerationError`` on failure."""
        if not prompt or not prompt.strip():
            raise LLMGenerationError("Empty prompt")

        generation_mode = GenerationMode(mode)
        route = self.route_for_mode(generation_mode)
        effective_system_prompt = system_prompt or settings.DEFAULT_SYSTEM_PROMPT
        prompt_token_count = count_tokens(
            effective_system_prompt + prompt, route.model
        )

        payload: dict[str, Any] = {
            "model": route.model,
            "messages": [
                {"role": "system", "content": effective_system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": (
                temperature if temperature is not None else settings.DEFAULT_TEMPERATURE
            ),
            "top_p": settings.LLM_TOP_P,
            _completion_token_param(route.api_base): (
                max_tokens if max_tokens is not None else settings.DEFAULT_MAX_TOKENS
            ),
        }
        headers = {
            "Authorization": f"Bearer {route.api_key}",
            "Content-Type": "application/json",
        }

        logger.debug(
            "Calling LLM",
            engine=engine_name,
            model=route.model,
            mode=generation_mode.value,
            prompt_tokens=prompt_token_count,
        )

        async with self._semaphore:
            self.request_count += 1
            try:
                raw_text, usage_data = await self._post_non_streaming(
                    route, payload, headers
                )
            except (httpx.HTTPError, ValueError) as exc:
                self.cost_monitor.log_usage(
                    model=route.model,
                    input_tokens=prompt_token_count,
                    output_tokens=0,
                    endpoint=route.endpoint,
                    success=False,
                )
                raise LLMGenerationError(
                    f"{route.model} request failed: {exc}"
                ) from exc

        content = self.clean_model_response(raw_text)
        usage = TokenUsage.from_api(
            usage_data,
            prompt_estimate=prompt_token_count,
            completion_estimate=count_tokens(raw_text, route.model),
        )
        self._log_llm_usage(route.model, usage)
        self.cost_monitor.log_usage(
            model=route.model,
            input_tokens=usage.prompt_tokens,
            output_tokens=usage.completion_tokens,
            endpoint=route.endpoint,
            success=bool(content),
        )
        if not content:
            raise LLMGenerationError(f"{route.model} returned an empty response")

        return GenerationResponse(
            content=content, model=route.model, mode=generation_mode, usage=usage
        )

    def clean_model_response(self, text: str) -> str:
        """Strip reasoning blocks and code fences and normalize newlines."""
        if not isinstance(text, str):
            logger.warning(
                f"clean_model_response received non-string input: {type(text)}. Returning empty string."
            )
            return ""

        cleaned_text = text
        for tag_name in ("think", "thinking", "reasoning", "analysis"):
            cleaned_text = re.sub(
                rf"<\s*{tag_name}\s*>.*?<\s*/\s*{tag_name}\s*>",
                "",
                cleaned_text,
                flags=re.DOTALL | re.IGNORECASE,
            )
            cleaned_text = re.sub(
                rf"<\s*/?\s*{tag_name}\s*/?\s*>",
                "",
                cleaned_text,
                flags=re.IGNORECASE,
            )

        cleaned_text = re.sub(
            r"```(?:[a-zA-Z0-9_-]+)?\s*(.*?)\s*```",
            r"\1",
            cleaned_text,
            flags=re.DOTALL,
        )

        final_text = cleaned_text.strip()
        final_text = re.sub(r"\n{3,}", "\n\n", final_text)
        return final_text


# Instantiate the service for other modules to import and use
llm_service = LLMService()
