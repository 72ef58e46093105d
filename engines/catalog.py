# engines/catalog.py
"""Static registry of the comprehensive enhancement engines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from config import settings


class EngineCategory(str, Enum):
    NARRATIVE = "narrative"
    CHARACTER = "character"
    WORLD = "world"
    FORMAT = "format"
    ENGAGEMENT = "engagement"
    GENRE = "genre"


@dataclass(frozen=True)
class EngineConfig:
    """Immutable description of one engine. ``timeout`` is in seconds."""

    name: str
    category: EngineCategory
    priority: int
    temperature: float
    max_tokens: int
    system_prompt: str
    task_prompt: str
    specific_instructions: str
    timeout: float = settings.ENGINE_DEFAULT_TIMEOUT_SECONDS
    retry_count: int = settings.ENGINE_DEFAULT_RETRY_COUNT


_CONFIGS: tuple[EngineConfig, ...] = (
    # ===== Narrative architecture =====
    EngineConfig(
        name="FractalNarrativeEngineV2",
        category=EngineCategory.NARRATIVE,
        priority=1,
        temperature=0.85,
        max_tokens=1500,
        system_prompt=(
            "You are a master narrative architect specializing in fractal story structures "
            "where each part reflects the whole. Expert in recursive themes, nested conflicts, "
            "and structural elegance."
        ),
        task_prompt=(
            "Analyze the narrative structure and suggest 3-5 sophisticated structural "
            "enhancements using fractal narrative principles."
        ),
        specific_instructions="""\
• Recursive themes that appear at scene, episode, and series levels
• Nested conflicts that mirror the overall story arc
• Structural elegance where each scene reflects the episode's core conflict
• Pattern recognition in character behavior and story beats
• Thematic resonance across different story scales

Expected Output Format: Bullet points with specific structural recommendations
Example: "• Echo the main character's internal struggle in the environmental setting - if Alex feels trapped by corporate lies, place scenes in glass offices and sterile hallways that reflect this psychological state\"""",
    ),
    EngineConfig(
        name="EpisodeCohesionEngineV2",
        category=EngineCategory.NARRATIVE,
        priority=2,
        temperature=0.8,
        max_tokens=1200,
        system_prompt=(
            "You are a series continuity expert ensuring perfect episode-to-episode flow, "
            "character development consistency, and narrative thread management."
        ),
        task_prompt=(
            "Analyze episode cohesion and suggest 3-5 enhancements for series continuity "
            "and character consistency."
        ),
        specific_instructions="""\
• Character development consistency across episodes
• Plot thread continuity and resolution tracking
• Thematic progression throughout the series
• Callback integration to previous episodes
• Setup for future episode developments
• Emotional arc continuity for all characters

Expected Output Format: Specific continuity recommendations with episode references
Example: "• Reference Alex's discovery in Episode 2 when they hesitate to trust the new informant - show the emotional scar through a subtle gesture or internal thought\"""",
    ),
    EngineConfig(
        name="ConflictArchitectureEngineV2",
        category=EngineCategory.NARRATIVE,
        priority=3,
        temperature=0.9,
        max_tokens=1400,
        system_prompt=(
            "You are a conflict architect who creates multi-dimensional dramatic tensions. "
            "Expert in internal vs external conflicts, character vs world tensions, and "
            "ideal vs reality dilemmas."
        ),
        task_prompt=(
            "Design sophisticated conflict layers: internal vs external, character vs world, "
            "ideal vs reality."
        ),
        specific_instructions="""\
• Multi-layered conflicts operating simultaneously
• Internal character struggles reflected in external events
• Character desires vs world obstacles
• Moral dilemmas with no clear right answer
• Escalating tension that builds naturally
• Conflicts that reveal character through adversity

Expected Output Format: Layered conflict analysis with escalation strategies
Example: "• Internal: Alex wants to trust Marcus (personal need) vs fear of betrayal (past trauma) | External: Corporate surveillance vs need to share information | World: Tech industry loyalty culture vs whistleblower justice\"""",
    ),
    EngineConfig(
        name="HookCliffhangerEngineV2",
        category=EngineCategory.NARRATIVE,
        priority=4,
        temperature=0.9,
        max_tokens=1000,
        system_prompt=(
            "You are a master of compelling episode openings and endings. Expert in audience "
            "engagement, dramatic timing, and cliffhanger construction."
        ),
        task_prompt=(
            "Enhance episode hooks and cliffhangers for maximum audience engagement and "
            "episode-to-episode retention."
        ),
        specific_instructions="""\
• Compelling episode openings that immediately engage
• Cliffhanger endings that create anticipation
• Emotional hooks that connect to character stakes
• Plot hooks that advance the overall series arc
• Question-raising techniques that compel continued viewing
• Balance between resolution and anticipation

Expected Output Format: Specific hook and cliffhanger enhancement suggestions
Example: "• Opening Hook: Start mid-conversation with Alex saying 'I know what you did to Sarah' - audience immediately wonders who they're talking to and what happened | Ending: Alex discovers the USB drive is empty, but hears footsteps approaching - combines plot revelation with immediate physical danger\"""",
    ),
    EngineConfig(
        name="SerializedContinuityEngineV2",
        category=EngineCategory.NARRATIVE,
        priority=5,
        temperature=0.8,
        max_tokens=1300,
        system_prompt=(
            "You are a serialized storytelling expert ensuring perfect cross-episode "
            "consistency, character tracking, and narrative thread management."
        ),
        task_prompt=(
            "Ensure serialized continuity with character states, world changes, and narrative "
            "thread progression."
        ),
        specific_instructions="""\
• Character state consistency across episodes (what they know, feel, relationships)
• World state changes that persist (environmental, political, social changes)
• Narrative thread tracking and development (ongoing mysteries, relationships)
• Information consistency (what characters know/don't know when)
• Timeline and causality maintenance
• Relationship evolution tracking

Expected Output Format: Continuity notes with specific character and world state tracking
Example: "• Alex now distrusts corporate environments (Episode 2 consequence) - show this through body language in office scenes | Sarah's reputation is damaged - other characters reference this | The hidden server room is now known to security - increase surveillance details\"""",
    ),
    EngineConfig(
        name="PacingRhythmEngineV2",
        category=EngineCategory.NARRATIVE,
        priority=6,
        temperature=0.85,
        max_tokens=1200,
        system_prompt=(
            "You are a pacing and rhythm specialist optimizing narrative flow for 5-minute "
            "episodes. Expert in dramatic beats, tension curves, and audience attention "
            "management."
        ),
        task_prompt="Optimize episode pacing and rhythm for maximum engagement in 5-minute format.",
        specific_instructions="""\
• Optimal scene length distribution for 5-minute episodes (2-4 scenes)
• Tension curve management (build, release, build)
• Beat placement for maximum impact
• Attention span optimization for short-form content
• Emotional rhythm and breathing room
• Dramatic peak timing and intensity

Expected Output Format: Specific pacing adjustments with timing recommendations
Example: "• Scene 1 (90 seconds): Quick hook and character state establishment | Scene 2 (180 seconds): Conflict escalation with dialogue-heavy development | Scene 3 (90 seconds): Resolution with cliffhanger setup - ensures each beat serves multiple purposes\"""",
    ),
    # ===== Dialogue & character =====
    EngineConfig(
        name="DialogueEngineV2",
        category=EngineCategory.CHARACTER,
        priority=7,
        temperature=0.95,
        max_tokens=1800,
        retry_count=3,
        system_prompt=(
            "You are a dialogue master who creates conversations that reveal character "
            "psychology and advance plot simultaneously. Expert in subtext, voice "
            "differentiation, and authentic speech patterns."
        ),
        task_prompt=(
            "Enhance character dialogue with psychological depth, subtext, and authentic "
            "voice differentiation."
        ),
        specific_instructions="""\
• Each line serves multiple purposes: character development, plot advancement, thematic exploration
• Unique voice patterns for each character (vocabulary, rhythm, cultural background)
• Subtext and what characters DON'T say directly
• Psychological authenticity in speech patterns
• Cultural and background influence on dialogue
• Conflict and tension through conversation
• Natural speech rhythms, interruptions, and overlapping dialogue

Expected Output Format: Enhanced dialogue examples with voice notes for each character
Example: "Alex (tech-savvy, direct): 'The data's corrupted. Convenient.' | Marcus (corporate, careful): 'These things happen, Alex. We work with what we have.' | [SUBTEXT: Alex suspects deliberate sabotage, Marcus deflects with corporate speak - neither says what they really mean]\"""",
    ),
    EngineConfig(
        name="StrategicDialogueEngine",
        category=EngineCategory.CHARACTER,
        priority=8,
        temperature=0.9,
        max_tokens=1500,
        system_prompt=(
            "You are a strategic dialogue specialist focusing on purposeful conversations "
            "that advance story goals while revealing character motivations."
        ),
        task_prompt="Optimize dialogue for strategic story advancement and character revelation.",
        specific_instructions="""\
• Every conversation has clear dramatic purpose
• Information revelation through natural dialogue flow
• Character motivations emerging through speech patterns
• Conflict escalation through verbal tension
• Relationship dynamics expressed in conversation
• Plot advancement disguised as natural interaction

Expected Output Format: Strategic dialogue enhancements with purpose annotations
Example: "• PURPOSE: Reveal Alex's technical expertise while showing Marcus's ignorance | DIALOGUE: Alex: 'The hash function's been altered - SHA-256 doesn't just corrupt randomly' | Marcus: 'In English?' | EFFECT: Establishes Alex's competence and Marcus's potential involvement\"""",
    ),
    # ===== World & environment =====
    EngineConfig(
        name="WorldBuildingEngineV2",
        category=EngineCategory.WORLD,
        priority=9,
        temperature=0.85,
        max_tokens=1600,
        system_prompt=(
            "You are a world-building specialist who creates lived-in, authentic environments "
            "that support and enhance storytelling through environmental details."
        ),
        task_prompt=(
            "Enhance environmental storytelling, cultural details, and immersive world elements."
        ),
        specific_instructions="""\
• Environmental storytelling through setting details
• Cultural authenticity and specific details
• Atmospheric elements that enhance mood and theme
• Location significance to character and plot
• Sensory details that immerse the audience
• World rules that create story opportunities and constraints

Expected Output Format: Environmental enhancement notes with specific setting details
Example: "• TechCorp Office: Glass walls suggest transparency but reflect only surfaces - ironic considering corporate secrets | The server room hums with white noise that masks whispered conversations | Coffee stations become natural gathering points for information exchange\"""",
    ),
    EngineConfig(
        name="LivingWorldEngineV2",
        category=EngineCategory.WORLD,
        priority=10,
        temperature=0.85,
        max_tokens=1200,
        system_prompt=(
            "You are a living world specialist who creates dynamic environments where "
            "characters naturally enter and exit, and the world feels alive beyond the main "
            "story."
        ),
        task_prompt=(
            "Create dynamic world elements including character entrances/exits and living "
            "world details."
        ),
        specific_instructions="""\
• Natural character entrances and exits with logical reasons
• Background character presence and purpose
• World events happening beyond main story
• Environmental changes that reflect story progression
• Organic character interactions with setting
• World feeling alive and responsive to character actions

Expected Output Format: Living world enhancement notes with character movement suggestions
Example: "• Other employees work late, creating natural cover for Alex's investigation | Security guards patrol on predictable schedules | The office cleaning crew provides unexpected witnesses | Background conversations hint at company-wide unrest\"""",
    ),
    EngineConfig(
        name="LanguageEngineV2",
        category=EngineCategory.WORLD,
        priority=11,
        temperature=0.9,
        max_tokens=1300,
        system_prompt=(
            "You are a language and cultural authenticity expert who creates realistic, "
            "respectful, and authentic speech patterns that reflect cultural background while "
            "avoiding stereotypes."
        ),
        task_prompt=(
            "Enhance dialogue for cultural authenticity and character-specific language patterns."
        ),
        specific_instructions="""\
• Authentic cultural speech patterns without stereotypes
• Educational background influence on vocabulary choices
• Regional and social class language variations
• Professional jargon and industry-specific language
• Generational differences in speech patterns
• Emotional state influence on language choices

Expected Output Format: Language enhancement notes with cultural authenticity guidelines
Example: "• Alex uses tech jargon naturally: 'backdoor,' 'kernel access,' 'packet sniffing' | Marcus uses corporate euphemisms: 'rightsizing,' 'synergistic opportunities' | Generational gap: Alex texts with abbreviations, Marcus uses full sentences\"""",
    ),
    # ===== Format & engagement =====
    EngineConfig(
        name="FiveMinuteCanvasEngineV2",
        category=EngineCategory.FORMAT,
        priority=12,
        temperature=0.8,
        max_tokens=1100,
        system_prompt=(
            "You are a short-form content optimization specialist who maximizes narrative "
            "impact within 5-minute constraints while maintaining cinematic quality."
        ),
        task_prompt="Optimize content structure and pacing for 5-minute episode format.",
        specific_instructions="""\
• Optimal scene count (2-4 scenes) and length distribution
• Attention retention techniques for short-form content
• Narrative compression without quality loss
• Hook placement for sustained engagement (every 60-90 seconds)
• Information density optimization
• Emotional impact maximization in limited time

Expected Output Format: 5-minute optimization recommendations with timing
Example: "• 0-30s: Immediate hook with character conflict | 30-150s: Core scene with dialogue and character development | 150-240s: Conflict escalation with stakes | 240-300s: Resolution with cliffhanger - each 30-second block serves specific purpose\"""",
    ),
    EngineConfig(
        name="InteractiveChoiceEngineV2",
        category=EngineCategory.ENGAGEMENT,
        priority=13,
        temperature=0.9,
        max_tokens=1500,
        system_prompt=(
            "You are an interactive storytelling expert who creates meaningful choices that "
            "genuinely impact story direction and character development."
        ),
        task_prompt=(
            "Design sophisticated interactive choices that emerge naturally from episode "
            "events and character motivations."
        ),
        specific_instructions="""\
• Choices emerge naturally from story events and character dilemmas
• Each option represents different character values or approaches
• Genuine consequences that affect future episodes
• Moral complexity with no obvious "right" answer
• Character-specific decision-making opportunities
• Stakes that matter to both character and audience

Expected Output Format: Enhanced choice options with consequence analysis
Example: "CHOICE: Alex discovers Marcus's encrypted files | Option A: 'Confront Marcus directly' (values honesty, risks relationship) | Option B: 'Investigate secretly' (values caution, risks trust) | Option C: 'Report to authorities' (values justice, risks career) - each choice reflects different aspects of Alex's character\"""",
    ),
    EngineConfig(
        name="TensionEscalationEngine",
        category=EngineCategory.ENGAGEMENT,
        priority=14,
        temperature=0.85,
        max_tokens=1200,
        system_prompt=(
            "You are a dramatic tension specialist who builds and releases tension throughout "
            "episodes for maximum emotional impact."
        ),
        task_prompt="Enhance dramatic tension and emotional escalation throughout the episode.",
        specific_instructions="""\
• Natural tension building through scene progression
• Emotional stakes that increase throughout episode
• Character pressure points and breaking moments
• Conflict escalation that feels inevitable yet surprising
• Tension release moments for audience breathing
• Dramatic peaks strategically placed for maximum impact

Expected Output Format: Tension escalation notes with specific scene enhancement suggestions
Example: "• Scene 1: Establish baseline tension (Alex's suspicious about missing data) | Scene 2: Escalate through discovery (encrypted files found) | Scene 3: Peak tension through confrontation (Marcus appears unexpectedly) | Brief release through dialogue, then cliffhanger spike\"""",
    ),
    EngineConfig(
        name="GenreMasteryEngineV2",
        category=EngineCategory.ENGAGEMENT,
        priority=15,
        temperature=0.85,
        max_tokens=1300,
        system_prompt=(
            "You are a genre expert who applies sophisticated genre-specific storytelling "
            "techniques and conventions while innovating within genre boundaries."
        ),
        task_prompt=(
            "Apply advanced genre-specific storytelling techniques and innovative approaches."
        ),
        specific_instructions="""\
• Genre convention utilization and subversion
• Audience expectation management
• Genre-specific pacing and structure techniques
• Trope usage and innovative variations
• Cross-genre blending when applicable
• Genre authenticity while maintaining originality

Expected Output Format: Genre-specific enhancement recommendations with technique explanations
Example: "• THRILLER TECHNIQUES: Use paranoia building through environmental details (security cameras, closed doors) | WORKPLACE DRAMA: Leverage office politics and hierarchy for conflict | TECH NOIR: Contrast sterile corporate environment with dark digital secrets\"""",
    ),
    # ===== Genre-specific (conditional) =====
    EngineConfig(
        name="ComedyTimingEngineV2",
        category=EngineCategory.GENRE,
        priority=16,
        temperature=0.9,
        max_tokens=1000,
        system_prompt=(
            "You are a comedy expert specializing in timing, rhythm, and comedic structure. "
            "Master of setup-punchline construction, character-based humor, and situational "
            "comedy."
        ),
        task_prompt="Enhance comedy timing, beats, and comedic structure throughout the episode.",
        specific_instructions="""\
• Setup-punchline structure with proper timing
• Character-based humor that reveals personality
• Situational comedy emerging from plot circumstances
• Comedic rhythm and beat placement
• Comic relief balanced with dramatic moments
• Running gags and callback humor

Expected Output Format: Comedy enhancement notes with timing specifications
Example: "• SETUP (30s): Alex struggles with high-tech security system | PAUSE (beat) | PUNCHLINE: System accepts 'password123' | CHARACTER HUMOR: Alex's tech expertise vs corporate simplicity | TIMING: 2-second pause before reveal for maximum impact\"""",
    ),
    EngineConfig(
        name="HorrorEngineV2",
        category=EngineCategory.GENRE,
        priority=17,
        temperature=0.85,
        max_tokens=1200,
        system_prompt=(
            "You are a horror atmosphere specialist who creates psychological tension, dread, "
            "and atmospheric fear through environmental and character elements."
        ),
        task_prompt="Enhance horror atmosphere, psychological tension, and fear elements.",
        specific_instructions="""\
• Atmospheric tension building through environmental details
• Psychological fear vs cheap jump scares
• Environmental horror through setting manipulation
• Character vulnerability and isolation
• Anticipation and dread creation techniques
• Subtle horror escalation that builds naturally

Expected Output Format: Horror enhancement notes with atmosphere suggestions
Example: "• ATMOSPHERE: Office lights flicker when Alex accesses forbidden files | PSYCHOLOGICAL: Alex's reflection in multiple monitors creates surveillance paranoia | DREAD: Elevator music distorts slightly, suggesting digital corruption | ISOLATION: Alex realizes they're alone on the floor during discovery\"""",
    ),
    EngineConfig(
        name="RomanceChemistryEngineV2",
        category=EngineCategory.GENRE,
        priority=18,
        temperature=0.95,
        max_tokens=1400,
        system_prompt=(
            "You are a relationship dynamics expert who creates authentic romantic chemistry, "
            "emotional connection, and relationship development through subtle character "
            "interactions."
        ),
        task_prompt=(
            "Enhance romantic chemistry, relationship dynamics, and emotional connection "
            "between characters."
        ),
        specific_instructions="""\
• Authentic chemistry between characters through subtle moments
• Emotional vulnerability and connection opportunities
• Relationship progression that feels natural and earned
• Romantic tension without cliché or forced interaction
• Character growth through relationship development
• Obstacles that test and ultimately strengthen bonds

Expected Output Format: Romance enhancement notes with chemistry suggestions
Example: "• CHEMISTRY: Alex and Sam's hands touch while reaching for same file - lingering moment of connection | VULNERABILITY: Alex shares fear about corporate retaliation, Sam listens without judgment | TENSION: Professional relationship vs personal attraction conflict | GROWTH: Alex learns to trust through Sam's consistent support\"""",
    ),
    EngineConfig(
        name="MysteryEngineV2",
        category=EngineCategory.GENRE,
        priority=19,
        temperature=0.85,
        max_tokens=1300,
        system_prompt=(
            "You are a mystery construction expert who plants clues, manages revelations, and "
            "builds investigative narratives with fair play and satisfying resolutions."
        ),
        task_prompt=(
            "Enhance mystery elements including clue placement, revelation timing, and "
            "investigative progression."
        ),
        specific_instructions="""\
• Fair play clue placement and foreshadowing
• Information revelation timing and pacing
• Red herrings that serve the story and character development
• Investigative progression that feels logical and earned
• Character deduction and reasoning processes
• Mystery resolution that satisfies established expectations

Expected Output Format: Mystery enhancement notes with clue placement strategies
Example: "• CLUE PLACEMENT: Marcus's coffee cup has a pharmaceutical company logo (early hint at medical data theft) | RED HERRING: Alex suspects Sarah, but her suspicious behavior is due to personal issues | DEDUCTION: Alex pieces together file timestamps with Marcus's meeting schedule | REVELATION: Save biggest twist for episode end to drive next episode\"""",
    ),
)

ENGINE_CONFIGURATIONS: MappingProxyType[str, EngineConfig] = MappingProxyType(
    {config.name: config for config in _CONFIGS}
)

MANDATORY_ENGINES: tuple[str, ...] = tuple(
    c.name for c in _CONFIGS if c.category is not EngineCategory.GENRE
)
CONDITIONAL_ENGINES: tuple[str, ...] = tuple(
    c.name for c in _CONFIGS if c.category is EngineCategory.GENRE
)

# Engine name -> ComprehensiveEngineNotes field
ENGINE_FIELD_MAP: MappingProxyType[str, str] = MappingProxyType(
    {
        "FractalNarrativeEngineV2": "fractal_narrative",
        "EpisodeCohesionEngineV2": "episode_cohesion",
        "ConflictArchitectureEngineV2": "conflict_architecture",
        "HookCliffhangerEngineV2": "hook_cliffhanger",
        "SerializedContinuityEngineV2": "serialized_continuity",
        "PacingRhythmEngineV2": "pacing_rhythm",
        "DialogueEngineV2": "dialogue",
        "StrategicDialogueEngine": "strategic_dialogue",
        "WorldBuildingEngineV2": "world_building",
        "LivingWorldEngineV2": "living_world",
        "LanguageEngineV2": "language",
        "FiveMinuteCanvasEngineV2": "five_minute_canvas",
        "InteractiveChoiceEngineV2": "interactive_choice",
        "TensionEscalationEngine": "tension_escalation",
        "GenreMasteryEngineV2": "genre_mastery",
        "ComedyTimingEngineV2": "comedy_timing",
        "HorrorEngineV2": "horror",
        "RomanceChemistryEngineV2": "romance_chemistry",
        "MysteryEngineV2": "mystery",
    }
)

DEFAULT_FALLBACK_CONTENT = (
    "• General enhancement recommendations\n"
    "• Consider narrative improvements\n"
    "• Focus on story quality"
)

FALLBACK_CONTENT: MappingProxyType[str, str] = MappingProxyType(
    {
        "FractalNarrativeEngineV2": "• Consider recursive themes across scenes\n• Mirror episode conflicts in character arcs\n• Ensure structural consistency",
        "EpisodeCohesionEngineV2": "• Maintain character continuity\n• Reference previous episodes\n• Set up future developments",
        "ConflictArchitectureEngineV2": "• Escalate internal conflicts\n• Layer external pressures\n• Build toward climax",
        "HookCliffhangerEngineV2": "• Create compelling opening hook\n• Build tension toward cliffhanger\n• Connect ending to next episode",
        "SerializedContinuityEngineV2": "• Track character development\n• Maintain plot consistency\n• Reference series history",
        "PacingRhythmEngineV2": "• Balance action and dialogue\n• Vary scene lengths\n• Optimize for 5-minute format",
        "DialogueEngineV2": "• Develop character voices\n• Add subtext layers\n• Ensure natural flow",
        "StrategicDialogueEngine": "• Purpose-driven conversations\n• Reveal character through speech\n• Advance plot through dialogue",
        "WorldBuildingEngineV2": "• Enhance environmental details\n• Ensure world consistency\n• Add atmospheric elements",
        "LivingWorldEngineV2": "• Make environment responsive\n• Add background life\n• Create dynamic interactions",
        "LanguageEngineV2": "• Improve prose rhythm\n• Enhance cultural authenticity\n• Strengthen narrative voice",
        "FiveMinuteCanvasEngineV2": "• Compress narrative efficiently\n• Focus on core conflict\n• Ensure complete arc",
        "InteractiveChoiceEngineV2": "• Create meaningful choices\n• Ensure clear consequences\n• Balance difficulty",
        "TensionEscalationEngine": "• Increase stakes gradually\n• Use dramatic reveals\n• Maintain emotional pressure",
        "GenreMasteryEngineV2": "• Apply genre conventions\n• Subvert expectations\n• Enhance authenticity",
        "ComedyTimingEngineV2": "• Perfect comedic timing\n• Setup-punchline structure\n• Character-based humor",
        "HorrorEngineV2": "• Build atmospheric dread\n• Psychological tension\n• Environmental horror",
        "RomanceChemistryEngineV2": "• Authentic emotional connection\n• Natural relationship progression\n• Chemistry through interaction",
        "MysteryEngineV2": "• Fair play clue placement\n• Logical deduction paths\n• Satisfying revelations",
    }
)


def get_engine_config(name: str) -> EngineConfig | None:
    """Return the configuration for ``name`` or ``None`` when unknown."""
    return ENGINE_CONFIGURATIONS.get(name)


def get_fallback_content(name: str) -> str:
    return FALLBACK_CONTENT.get(name, DEFAULT_FALLBACK_CONTENT)


def order_by_priority(names: set[str] | frozenset[str] | list[str]) -> list[str]:
    """Sort engine names by catalog priority; unknown names go last."""
    return sorted(
        names,
        key=lambda n: (
            ENGINE_CONFIGURATIONS[n].priority if n in ENGINE_CONFIGURATIONS else 10**6,
            n,
        ),
    )
