# tests/test_config_validators.py

import config
from config import EngineSettings


def _capture_warnings(monkeypatch) -> list[str]:
    warnings: list[str] = []

    def fake_warning(msg: str, **_kw: object) -> None:
        warnings.append(msg)

    monkeypatch.setattr(config.logger, "warning", fake_warning)
    return warnings


def test_openai_key_placeholder_warns(monkeypatch):
    warnings = _capture_warnings(monkeypatch)
    EngineSettings(OPENAI_API_KEY="nope")
    assert any("OPENAI_API_KEY" in msg for msg in warnings)


def test_real_openai_key_does_not_warn(monkeypatch):
    warnings = _capture_warnings(monkeypatch)
    EngineSettings(OPENAI_API_KEY="valid")
    assert warnings == []


def test_stable_key_falls_back_to_openai_key(monkeypatch):
    monkeypatch.delenv("STABLE_MODE_API_KEY", raising=False)
    assert EngineSettings(OPENAI_API_KEY="valid").STABLE_MODE_API_KEY == "valid"
    assert (
        EngineSettings(
            OPENAI_API_KEY="valid", STABLE_MODE_API_KEY="gemini"
        ).STABLE_MODE_API_KEY
        == "gemini"
    )


def test_engine_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("ENGINE_DEFAULT_RETRY_COUNT", "5")
    monkeypatch.setenv("INCLUDE_GENRE_ENGINES", "false")
    loaded = EngineSettings(OPENAI_API_KEY="valid")
    assert loaded.ENGINE_DEFAULT_RETRY_COUNT == 5
    assert loaded.INCLUDE_GENRE_ENGINES is False


def test_cost_for_unknown_model_uses_default():
    loaded = EngineSettings(OPENAI_API_KEY="valid")
    assert loaded.cost_for_model("unknown") == loaded.DEFAULT_COST_PER_1K
    assert loaded.cost_for_model("gpt-4.1") == {"input": 0.01, "output": 0.03}
