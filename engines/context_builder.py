# engines/context_builder.py
"""Build the shared, read-only ``EngineContext`` for one orchestrator run."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from models.engine_models import (
    CharacterContext,
    EngineContext,
    LocationContext,
    NarrativeElementsContext,
    SceneContext,
    WorldBuildingContext,
)
from models.story_input_models import (
    CharacterInput,
    EpisodeInput,
    NarrativeElementsInput,
    StoryBibleInput,
    WorldBuildingInput,
)

logger = structlog.get_logger(__name__)


def flatten_text(value: Any) -> str:
    """Render loosely typed free text (lists, mappings) as a single line."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, Mapping):
        parts = [f"{k}: {flatten_text(v)}" for k, v in value.items() if v]
        return "; ".join(p for p in parts if p)
    if isinstance(value, list | tuple | set):
        return "; ".join(t for t in (flatten_text(v) for v in value) if t)
    return str(value)


def genre_label(genre: str | list[str] | None) -> str:
    if isinstance(genre, list):
        return ", ".join(g for g in genre if g) or "drama"
    return genre or "drama"


def _character_context(character: CharacterInput) -> CharacterContext:
    defaults = CharacterContext()
    return CharacterContext(
        name=character.name or defaults.name,
        archetype=character.archetype or character.premise_role or defaults.archetype,
        description=character.description
        or character.background
        or defaults.description,
        arc=flatten_text(character.arc) or defaults.arc,
        relationships=flatten_text(character.relationships) or defaults.relationships,
        motivation=flatten_text(character.motivation) or defaults.motivation,
        internal_conflict=flatten_text(character.internal_conflict)
        or defaults.internal_conflict,
        voice=flatten_text(character.voice) or defaults.voice,
    )


def _world_building_context(world: WorldBuildingInput | None) -> WorldBuildingContext:
    defaults = WorldBuildingContext()
    if world is None:
        return defaults
    return WorldBuildingContext(
        setting=world.setting or defaults.setting,
        cultural_context=world.cultural_context or defaults.cultural_context,
        locations=tuple(
            LocationContext(
                name=loc.name or "",
                description=loc.description or "",
                atmosphere=loc.atmosphere or "",
            )
            for loc in world.locations
        ),
    )


def _narrative_elements_context(
    elements: NarrativeElementsInput | None,
) -> NarrativeElementsContext:
    defaults = NarrativeElementsContext()
    if elements is None:
        return defaults
    return NarrativeElementsContext(
        callbacks=flatten_text(elements.callbacks) or defaults.callbacks,
        foreshadowing=flatten_text(elements.foreshadowing) or defaults.foreshadowing,
        recurring_motifs=flatten_text(elements.recurring_motifs)
        or defaults.recurring_motifs,
    )


def build_engine_context(
    episode: Mapping[str, Any] | EpisodeInput,
    story_bible: Mapping[str, Any] | StoryBibleInput,
) -> EngineContext:
    """Normalize caller input into an ``EngineContext`` with every field defaulted.

    Raises ``pydantic.ValidationError`` when either input cannot be read as a
    mapping of the expected shape.
    """
    episode_in = (
        episode
        if isinstance(episode, EpisodeInput)
        else EpisodeInput.model_validate(episode)
    )
    bible_in = (
        story_bible
        if isinstance(story_bible, StoryBibleInput)
        else StoryBibleInput.model_validate(story_bible)
    )

    synopsis = episode_in.synopsis or (
        bible_in.premise.premise_statement if bible_in.premise else None
    )
    theme = bible_in.theme or (bible_in.themes[0] if bible_in.themes else "")
    scenes = tuple(
        SceneContext(
            title=scene.title or "Untitled Scene",
            content=scene.content or "Scene content to be developed",
        )
        for scene in episode_in.scenes
    )

    context = EngineContext(
        series_title=bible_in.series_title or "Series",
        title=episode_in.title or "Episode",
        episode_number=episode_in.episode_number or 1,
        synopsis=synopsis or "",
        genre=genre_label(bible_in.genre),
        theme=theme,
        scene_count=len(scenes) or 1,
        scenes=scenes,
        characters=tuple(_character_context(c) for c in bible_in.main_characters),
        world_building=_world_building_context(bible_in.world_building),
        narrative_elements=_narrative_elements_context(bible_in.narrative_elements),
    )
    logger.debug(
        "Built engine context",
        title=context.title,
        characters=len(context.characters),
        scenes=len(context.scenes),
    )
    return context
