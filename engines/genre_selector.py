# engines/genre_selector.py
"""Pick the conditional genre engines that apply to a story."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class GenreRule:
    engine: str
    genre_keywords: tuple[str, ...]
    tone_keywords: tuple[str, ...]

    def matches(self, genre: str, tone: str) -> bool:
        return any(k in genre for k in self.genre_keywords) or any(
            k in tone for k in self.tone_keywords
        )


CONDITIONAL_ENGINE_RULES: tuple[GenreRule, ...] = (
    GenreRule(
        engine="ComedyTimingEngineV2",
        genre_keywords=("comedy", "humor", "funny"),
        tone_keywords=("humorous", "comedic", "lighthearted"),
    ),
    GenreRule(
        engine="HorrorEngineV2",
        genre_keywords=("horror", "thriller", "suspense", "scary"),
        tone_keywords=("dark", "ominous", "suspenseful", "eerie"),
    ),
    GenreRule(
        engine="RomanceChemistryEngineV2",
        genre_keywords=("romance", "romantic", "love"),
        tone_keywords=("romantic", "intimate", "passionate"),
    ),
    GenreRule(
        engine="MysteryEngineV2",
        genre_keywords=("mystery", "detective", "investigation", "noir", "crime"),
        tone_keywords=("mysterious", "enigmatic", "puzzling"),
    ),
)


def select_conditional_engines(
    genre: str | Sequence[str] | None, tone: str | None = None
) -> frozenset[str]:
    """Return the genre engines triggered by ``genre`` and ``tone``.

    Matching is case-insensitive substring search; rules are independent so
    several engines can be selected at once. A missing or empty genre still
    lets the tone select engines.
    """
    if genre is None or isinstance(genre, str):
        genres = [genre or ""]
    else:
        genres = [g or "" for g in genre] or [""]
    tone_text = (tone or "").lower()

    selected: set[str] = set()
    for entry in genres:
        genre_text = str(entry).lower()
        for rule in CONDITIONAL_ENGINE_RULES:
            if rule.matches(genre_text, tone_text):
                selected.add(rule.engine)
    return frozenset(selected)
