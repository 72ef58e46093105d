# models/engine_models.py
"""Models shared by the engine executor and the comprehensive orchestrator."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

NOT_AVAILABLE = "N/A"


class GenerationMode(str, Enum):
    """Quality/cost tier forwarded to the generation call."""

    BEAST = "beast"
    STABLE = "stable"


class _FrozenContextModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CharacterContext(_FrozenContextModel):
    name: str = "Character"
    archetype: str = "Character"
    description: str = "Character development in progress"
    arc: str = "Arc to be developed"
    relationships: str = "Relationships to be explored"
    motivation: str = "Motivation to be established"
    internal_conflict: str = "Internal journey to unfold"
    voice: str = "Voice to be developed"


class LocationContext(_FrozenContextModel):
    name: str = ""
    description: str = ""
    atmosphere: str = ""


class WorldBuildingContext(_FrozenContextModel):
    setting: str = "Contemporary setting"
    cultural_context: str = "Modern society"
    locations: tuple[LocationContext, ...] = ()


class SceneContext(_FrozenContextModel):
    title: str = "Untitled Scene"
    content: str = "Scene content to be developed"


class NarrativeElementsContext(_FrozenContextModel):
    callbacks: str = "To be established"
    foreshadowing: str = "To be woven in"
    recurring_motifs: str = "To be developed"


class EngineContext(_FrozenContextModel):
    """Read-only snapshot of one episode and its story bible.

    Built once per orchestrator run and shared by every engine call.
    """

    series_title: str = "Series"
    title: str = "Episode"
    episode_number: int | str = 1
    synopsis: str = ""
    genre: str = "drama"
    theme: str = ""
    scene_count: int = 1
    scenes: tuple[SceneContext, ...] = ()
    characters: tuple[CharacterContext, ...] = ()
    world_building: WorldBuildingContext = Field(default_factory=WorldBuildingContext)
    narrative_elements: NarrativeElementsContext = Field(
        default_factory=NarrativeElementsContext
    )


class EngineExecutionResult(BaseModel):
    """Outcome of one engine's attempt loop."""

    engine_name: str
    success: bool
    content: str = ""
    execution_time_ms: int = 0
    retry_count: int = 0
    quality_score: int = 0
    error: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def output_length(self) -> int:
        return len(self.content)


class ComprehensiveEngineNotes(BaseModel):
    """One text field per engine; untouched fields keep the ``N/A`` sentinel."""

    # Narrative architecture
    fractal_narrative: str = NOT_AVAILABLE
    episode_cohesion: str = NOT_AVAILABLE
    conflict_architecture: str = NOT_AVAILABLE
    hook_cliffhanger: str = NOT_AVAILABLE
    serialized_continuity: str = NOT_AVAILABLE
    pacing_rhythm: str = NOT_AVAILABLE

    # Dialogue & character
    dialogue: str = NOT_AVAILABLE
    strategic_dialogue: str = NOT_AVAILABLE

    # World & environment
    world_building: str = NOT_AVAILABLE
    living_world: str = NOT_AVAILABLE
    language: str = NOT_AVAILABLE

    # Format & engagement
    five_minute_canvas: str = NOT_AVAILABLE
    interactive_choice: str = NOT_AVAILABLE
    tension_escalation: str = NOT_AVAILABLE
    genre_mastery: str = NOT_AVAILABLE

    # Genre-specific (conditional)
    comedy_timing: str = NOT_AVAILABLE
    horror: str = NOT_AVAILABLE
    romance_chemistry: str = NOT_AVAILABLE
    mystery: str = NOT_AVAILABLE


class ComprehensiveEngineMetadata(BaseModel):
    """Run-level counters, timings and per-engine performance."""

    total_engines_run: int = 0
    successful_engines: int = 0
    failed_engines: int = 0
    total_execution_time_ms: int = 0
    success_rate: float = 0.0
    quality_score: int = 0
    errors: list[str] = Field(default_factory=list)
    phase_execution_times_ms: list[int] = Field(default_factory=list)
    engine_performance: dict[str, EngineExecutionResult] = Field(
        default_factory=dict
    )


class ComprehensiveEngineResult(BaseModel):
    notes: ComprehensiveEngineNotes = Field(default_factory=ComprehensiveEngineNotes)
    metadata: ComprehensiveEngineMetadata = Field(
        default_factory=ComprehensiveEngineMetadata
    )
