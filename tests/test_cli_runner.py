import json

import main
import pytest
import yaml
from config import settings
from orchestration import cli_runner
from orchestration.cli_runner import RunOptions, write_result

from models.engine_models import (
    ComprehensiveEngineMetadata,
    ComprehensiveEngineNotes,
    ComprehensiveEngineResult,
    EngineExecutionResult,
    GenerationMode,
)


def test_write_result_creates_json(tmp_path):
    metadata = ComprehensiveEngineMetadata(total_engines_run=1, successful_engines=1)
    metadata.engine_performance["DialogueEngineV2"] = EngineExecutionResult(
        engine_name="DialogueEngineV2", success=True, content="• Sharper lines"
    )
    result = ComprehensiveEngineResult(
        notes=ComprehensiveEngineNotes(dialogue="• Sharper lines"), metadata=metadata
    )
    output_path = tmp_path / "out" / "notes.json"

    write_result(result, str(output_path))

    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["notes"]["dialogue"] == "• Sharper lines"
    assert data["notes"]["horror"] == "N/A"
    perf = data["metadata"]["engine_performance"]["DialogueEngineV2"]
    assert perf["output_length"] == len("• Sharper lines")


def test_main_builds_run_options(monkeypatch):
    captured: list[RunOptions] = []

    def fake_run(options):
        captured.append(options)
        return ComprehensiveEngineResult()

    monkeypatch.setattr(main, "run", fake_run)
    exit_code = main.main(
        [
            "--episode",
            "episode.yaml",
            "--story-bible",
            "bible.json",
            "--mode",
            "stable",
            "--no-genre-engines",
            "--timeout",
            "5",
            "--max-concurrency",
            "4",
        ]
    )

    assert exit_code == 0
    (options,) = captured
    assert options.mode is GenerationMode.STABLE
    assert options.include_genre_engines is False
    assert options.timeout_override == 5.0
    assert options.max_concurrency == 4
    assert options.output_path is None


def test_main_reports_failure(monkeypatch):
    monkeypatch.setattr(main, "run", lambda _options: None)
    assert main.main(["--episode", "e.yaml", "--story-bible", "b.yaml"]) == 1


@pytest.mark.asyncio
async def test_run_reads_files_and_writes_notes(
    monkeypatch, tmp_path, make_generator, episode, story_bible
):
    episode_path = tmp_path / "episode.yaml"
    episode_path.write_text(yaml.safe_dump(episode), encoding="utf-8")
    bible_path = tmp_path / "bible.json"
    bible_path.write_text(json.dumps(story_bible), encoding="utf-8")
    output_path = tmp_path / "notes.json"

    generator = make_generator()
    monkeypatch.setattr(cli_runner, "llm_service", generator)
    monkeypatch.setattr(settings, "ENABLE_RICH_PROGRESS", False)

    result = await cli_runner._run(
        RunOptions(
            episode_path=str(episode_path),
            story_bible_path=str(bible_path),
            output_path=str(output_path),
        )
    )

    assert result is not None
    assert result.metadata.total_engines_run == 16
    assert generator.closed is True
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["notes"]["horror"] == generator.content


@pytest.mark.asyncio
async def test_run_returns_none_for_missing_input(tmp_path, make_generator, monkeypatch):
    generator = make_generator()
    monkeypatch.setattr(cli_runner, "llm_service", generator)

    result = await cli_runner._run(
        RunOptions(
            episode_path=str(tmp_path / "missing.yaml"),
            story_bible_path=str(tmp_path / "missing.json"),
        )
    )

    assert result is None
    assert generator.calls == []


@pytest.mark.parametrize(
    "flag, value",
    [
        ("--max-concurrency", "0"),
        ("--max-concurrency", "-2"),
        ("--max-concurrency", "many"),
        ("--timeout", "0"),
        ("--timeout", "-1.5"),
    ],
)
def test_main_rejects_non_positive_limits(monkeypatch, flag, value):
    calls: list[RunOptions] = []
    monkeypatch.setattr(main, "run", calls.append)

    with pytest.raises(SystemExit) as excinfo:
        main.main(["--episode", "e.yaml", "--story-bible", "b.yaml", flag, value])

    assert excinfo.value.code == 2
    assert calls == []


def test_positive_int_accepts_counts():
    assert main.positive_int("3") == 3
    assert main.positive_float("0.5") == 0.5
