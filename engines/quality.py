# engines/quality.py
"""Heuristic scoring of engine output."""

from __future__ import annotations

import re
from collections.abc import Iterable

from models.engine_models import EngineExecutionResult

BASE_SCORE = 50
FALLBACK_QUALITY_SCORE = 25
MAX_SCORE = 100

# (minimum length exclusive, bonus)
LENGTH_BONUSES: tuple[tuple[int, int], ...] = ((100, 15), (300, 15), (600, 10))
BULLET_BONUS = 10
MULTILINE_BONUS = 5
SPECIFICITY_BONUS = 15
STRUCTURED_BONUS = 10
HEADER_BONUS = 5

GENERIC_FILLER_RE = re.compile(r"N/A|not available|unclear|generic", re.IGNORECASE)
CATEGORY_HEADER_RE = re.compile(r"[A-Z][A-Z ]+:")


def assess_output_quality(content: str) -> int:
    """Score generated text from 0 to 100.

    Starts at 50 and adds bonuses for length past 100/300/600 characters,
    bullets, more than three lines, absence of filler phrases, ``label: value |``
    structure and ALL-CAPS headers.
    """
    score = BASE_SCORE

    for threshold, bonus in LENGTH_BONUSES:
        if len(content) > threshold:
            score += bonus

    if "•" in content or "-" in content:
        score += BULLET_BONUS
    if len(content.split("\n")) > 3:
        score += MULTILINE_BONUS
    if not GENERIC_FILLER_RE.search(content):
        score += SPECIFICITY_BONUS

    if ":" in content and "|" in content:
        score += STRUCTURED_BONUS
    if CATEGORY_HEADER_RE.search(content):
        score += HEADER_BONUS

    return min(score, MAX_SCORE)


def calculate_run_quality_score(
    results: Iterable[EngineExecutionResult], success_rate: float
) -> int:
    """Blend mean quality of successful engines (70%) with success rate (30%)."""
    scores = [r.quality_score for r in results if r.success]
    if not scores:
        return 0
    average_quality = sum(scores) / len(scores)
    return round(average_quality * 0.7 + success_rate * 0.3)
