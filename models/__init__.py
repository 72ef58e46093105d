"""Central package for narrative engine data models."""

from .engine_models import (
    NOT_AVAILABLE,
    CharacterContext,
    ComprehensiveEngineMetadata,
    ComprehensiveEngineNotes,
    ComprehensiveEngineResult,
    EngineContext,
    EngineExecutionResult,
    GenerationMode,
    LocationContext,
    NarrativeElementsContext,
    SceneContext,
    WorldBuildingContext,
)
from .story_input_models import (
    CharacterInput,
    EpisodeInput,
    LocationInput,
    NarrativeElementsInput,
    PremiseInput,
    SceneInput,
    StoryBibleInput,
    WorldBuildingInput,
)

__all__ = [
    "NOT_AVAILABLE",
    "GenerationMode",
    "CharacterContext",
    "LocationContext",
    "WorldBuildingContext",
    "SceneContext",
    "NarrativeElementsContext",
    "EngineContext",
    "EngineExecutionResult",
    "ComprehensiveEngineNotes",
    "ComprehensiveEngineMetadata",
    "ComprehensiveEngineResult",
    "CharacterInput",
    "LocationInput",
    "WorldBuildingInput",
    "NarrativeElementsInput",
    "PremiseInput",
    "SceneInput",
    "EpisodeInput",
    "StoryBibleInput",
]
