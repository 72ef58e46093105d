from engines.quality import (
    FALLBACK_QUALITY_SCORE,
    assess_output_quality,
    calculate_run_quality_score,
)

from models.engine_models import EngineExecutionResult


def test_short_specific_text():
    assert assess_output_quality("A short note.") == 65


def test_filler_text_scores_base_only():
    assert assess_output_quality("N/A") == 50
    assert assess_output_quality("Unclear - maybe") == 60


def test_length_bonuses():
    assert assess_output_quality("x" * 101) == 80
    assert assess_output_quality("x" * 301) == 95
    assert assess_output_quality("x" * 601) == 100


def test_structured_output_is_capped():
    content = (
        "PACING: tighten act one | HOOK: open on the alarm\n"
        "• Scene 1 - cut the preamble\n"
        "• Scene 2 - end on the reveal\n"
        "• Scene 3 - hold the cliffhanger"
    )
    assert assess_output_quality(content) == 100


def test_richer_output_scores_higher():
    plain = "Tighten the middle scene."
    bulleted = (
        "• Tighten the middle scene so the reveal lands harder.\n"
        "• Cut the second reveal and move the alarm to the cold open."
    )
    assert len(bulleted) > 100
    assert assess_output_quality(plain) == 65
    assert assess_output_quality(bulleted) == 90
    assert assess_output_quality(bulleted) > assess_output_quality(plain)


def test_run_quality_blends_success_rate():
    results = [
        EngineExecutionResult(engine_name="A", success=True, quality_score=80),
        EngineExecutionResult(engine_name="B", success=True, quality_score=100),
        EngineExecutionResult(
            engine_name="C", success=False, quality_score=FALLBACK_QUALITY_SCORE
        ),
    ]
    assert calculate_run_quality_score(results, 200 / 3) == 83


def test_run_quality_without_successes_is_zero():
    results = [EngineExecutionResult(engine_name="A", success=False, quality_score=25)]
    assert calculate_run_quality_score(results, 0.0) == 0
    assert calculate_run_quality_score([], 0.0) == 0
