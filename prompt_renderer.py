# prompt_renderer.py
"""Utilities for rendering engine prompts using Jinja2 templates."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from models.engine_models import EngineContext, LocationContext

if TYPE_CHECKING:
    from engines.catalog import EngineConfig

PROMPTS_PATH = Path(__file__).parent / "prompts"
ENGINE_PROMPT_TEMPLATE = "comprehensive_engines/engine_prompt.j2"

_env = Environment(
    loader=FileSystemLoader(PROMPTS_PATH),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)


def _format_locations(locations: Iterable[LocationContext]) -> str:
    """``name: description [atmosphere]`` entries joined by `` | ``."""
    rendered = " | ".join(
        f"{loc.name}: {loc.description} [{loc.atmosphere}]" for loc in locations
    )
    return rendered or "Various locations"


_env.filters["format_locations"] = _format_locations


def render_prompt(template_name: str, context: dict[str, Any]) -> str:
    """Render a Jinja2 template from the prompts directory."""
    template = _env.get_template(template_name)
    return template.render(**context)


def render_engine_prompt(config: EngineConfig, context: EngineContext) -> str:
    """Render the full prompt for one engine against the shared episode context."""
    return render_prompt(ENGINE_PROMPT_TEMPLATE, {"config": config, "context": context})
