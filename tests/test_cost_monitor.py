from concurrent.futures import ThreadPoolExecutor

import pytest
from core import cost_monitor as cost_monitor_module
from core.cost_monitor import CostMonitor

PRICES = {"model-a": {"input": 0.01, "output": 0.02}}


def test_cost_is_priced_per_thousand_tokens():
    monitor = CostMonitor(alert_threshold_usd=100, model_costs=PRICES)
    record = monitor.log_usage("model-a", 2000, 500, "https://x/chat", True)

    assert record.cost == pytest.approx(0.03)
    assert monitor.estimate_cost("model-a", 1000, 1000) == pytest.approx(0.03)


def test_failed_requests_are_counted_but_not_billed():
    monitor = CostMonitor(alert_threshold_usd=100, model_costs=PRICES)
    monitor.log_usage("model-a", 1000, 0, "https://x/chat", True)
    monitor.log_usage("model-a", 1000, 0, "https://x/chat", False)

    snapshot = monitor.snapshot()
    assert snapshot.total_requests == 2
    assert snapshot.failed_requests == 1
    assert snapshot.error_rate == 50.0
    assert snapshot.total_input_tokens == 2000
    assert snapshot.total_cost == pytest.approx(0.01)


def test_alert_fires_once(monkeypatch):
    warnings: list[str] = []

    def fake_warning(msg: str, **_kw: object) -> None:
        warnings.append(msg)

    monkeypatch.setattr(cost_monitor_module.logger, "warning", fake_warning)
    monitor = CostMonitor(alert_threshold_usd=0.05, model_costs=PRICES)
    for _ in range(4):
        monitor.log_usage("model-a", 2000, 500, "https://x/chat", True)

    assert warnings == ["Cost alert threshold reached"]


def test_snapshot_groups_cost_by_model():
    monitor = CostMonitor(
        alert_threshold_usd=100,
        model_costs={**PRICES, "model-b": {"input": 0.001, "output": 0.001}},
    )
    monitor.log_usage("model-a", 1000, 1000, "https://a/chat", True)
    monitor.log_usage("model-b", 1000, 1000, "https://b/chat", True)

    snapshot = monitor.snapshot()
    assert snapshot.cost_by_model == pytest.approx({"model-a": 0.03, "model-b": 0.002})
    assert snapshot.total_output_tokens == 2000


def test_reset_clears_totals_and_rearms_alert(monkeypatch):
    warnings: list[str] = []
    monkeypatch.setattr(
        cost_monitor_module.logger, "warning", lambda msg, **_kw: warnings.append(msg)
    )
    monitor = CostMonitor(alert_threshold_usd=0.01, model_costs=PRICES)
    monitor.log_usage("model-a", 1000, 0, "https://x/chat", True)
    monitor.reset()

    assert monitor.snapshot().total_requests == 0
    assert monitor.snapshot().total_cost == 0.0
    monitor.log_usage("model-a", 1000, 0, "https://x/chat", True)
    assert len(warnings) == 2


def test_unknown_model_uses_default_pricing():
    monitor = CostMonitor(alert_threshold_usd=100)
    assert monitor.estimate_cost("mystery-model", 1000, 1000) == pytest.approx(0.04)


def test_concurrent_logging_is_consistent():
    monitor = CostMonitor(alert_threshold_usd=1000, model_costs=PRICES)

    def worker(_):
        for _ in range(100):
            monitor.log_usage("model-a", 10, 10, "https://x/chat", True)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(worker, range(8)))

    snapshot = monitor.snapshot()
    assert snapshot.total_requests == 800
    assert snapshot.total_input_tokens == 8000
