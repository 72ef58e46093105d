# models/story_input_models.py
"""Caller-facing models for episode drafts and story bibles.

Every field is optional. Keys are accepted in snake_case or camelCase so
payloads produced by the web client validate unchanged. Explicit ``null``
collections read as empty and scalar text fields accept numbers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Free-text fields that clients sometimes send as lists or mappings.
LooseText = str | list[Any] | dict[str, Any] | None


def _scalar_text(value: Any) -> Any:
    """Numbers and booleans become strings; everything else passes through."""
    if isinstance(value, int | float | bool):
        return str(value)
    return value


def _loose_text(value: Any) -> Any:
    if value is None or isinstance(value, str | list | dict):
        return value
    return str(value)


def _as_list(value: Any) -> Any:
    """``None`` -> ``[]``; a lone item -> ``[item]``; ``None`` entries dropped."""
    if value is None:
        return []
    if isinstance(value, list | tuple):
        return [item for item in value if item is not None]
    return [value]


class StoryInputModel(BaseModel):
    """Base for input records; unknown keys are kept."""

    model_config = ConfigDict(
        extra="allow", populate_by_name=True, alias_generator=to_camel
    )


class CharacterInput(StoryInputModel):
    """A main character from the story bible."""

    name: str | None = None
    archetype: str | None = None
    premise_role: str | None = None
    description: str | None = None
    background: str | None = None
    arc: LooseText = None
    relationships: LooseText = None
    motivation: LooseText = None
    internal_conflict: LooseText = None
    voice: LooseText = None

    @field_validator(
        "name", "archetype", "premise_role", "description", "background", mode="before"
    )
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_text(value)

    @field_validator(
        "arc", "relationships", "motivation", "internal_conflict", "voice", mode="before"
    )
    @classmethod
    def _coerce_loose_text(cls, value: Any) -> Any:
        return _loose_text(value)


class LocationInput(StoryInputModel):
    name: str | None = None
    description: str | None = None
    atmosphere: str | None = None

    @field_validator("name", "description", "atmosphere", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_text(value)


class WorldBuildingInput(StoryInputModel):
    setting: str | None = None
    cultural_context: str | None = None
    locations: list[LocationInput] = Field(default_factory=list)

    @field_validator("setting", "cultural_context", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_text(value)

    @field_validator("locations", mode="before")
    @classmethod
    def _coerce_locations(cls, value: Any) -> Any:
        return _as_list(value)


class NarrativeElementsInput(StoryInputModel):
    callbacks: LooseText = None
    foreshadowing: LooseText = None
    recurring_motifs: LooseText = None

    @field_validator("callbacks", "foreshadowing", "recurring_motifs", mode="before")
    @classmethod
    def _coerce_loose_text(cls, value: Any) -> Any:
        return _loose_text(value)


class PremiseInput(StoryInputModel):
    premise_statement: str | None = None

    @field_validator("premise_statement", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_text(value)


class SceneInput(StoryInputModel):
    title: str | None = None
    content: str | None = None

    @field_validator("title", "content", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_text(value)


class EpisodeInput(StoryInputModel):
    """Episode draft being enhanced."""

    title: str | None = None
    episode_number: int | str | None = None
    synopsis: str | None = None
    scenes: list[SceneInput] = Field(default_factory=list)

    @field_validator("title", "synopsis", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_text(value)

    @field_validator("scenes", mode="before")
    @classmethod
    def _coerce_scenes(cls, value: Any) -> Any:
        return _as_list(value)


class StoryBibleInput(StoryInputModel):
    """Series-level metadata shared by every episode."""

    series_title: str | None = None
    genre: str | list[str] | None = None
    tone: str | None = None
    theme: str | None = None
    themes: list[str] = Field(default_factory=list)
    premise: PremiseInput | None = None
    main_characters: list[CharacterInput] = Field(default_factory=list)
    world_building: WorldBuildingInput | None = None
    narrative_elements: NarrativeElementsInput | None = None

    @field_validator("series_title", "tone", "theme", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_text(value)

    @field_validator("genre", mode="before")
    @classmethod
    def _coerce_genre(cls, value: Any) -> Any:
        if isinstance(value, list | tuple):
            return [str(g) for g in value if g is not None]
        return _scalar_text(value)

    @field_validator("themes", mode="before")
    @classmethod
    def _coerce_themes(cls, value: Any) -> Any:
        return [str(t) for t in _as_list(value)]

    @field_validator("main_characters", mode="before")
    @classmethod
    def _coerce_characters(cls, value: Any) -> Any:
        return _as_list(value)
