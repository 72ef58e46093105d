# core/cost_monitor.py
"""Process-wide metering of LLM usage and spend."""

from __future__ import annotations

import threading

import structlog
from config import settings

from core.usage import CostSnapshot, UsageRecord

logger = structlog.get_logger(__name__)


class CostMonitor:
    """Append-only usage ledger with a one-shot spend alert."""

    def __init__(
        self,
        alert_threshold_usd: float | None = None,
        model_costs: dict[str, dict[str, float]] | None = None,
    ) -> None:
        self.alert_threshold_usd = (
            settings.COST_ALERT_THRESHOLD_USD
            if alert_threshold_usd is None
            else alert_threshold_usd
        )
        self._model_costs = model_costs
        self._lock = threading.Lock()
        self._records: list[UsageRecord] = []
        self._total_cost = 0.0
        self._alert_sent = False

    def _price(self, model: str) -> dict[str, float]:
        if self._model_costs is not None:
            return self._model_costs.get(model, settings.DEFAULT_COST_PER_1K)
        return settings.cost_for_model(model)

    def estimate_cost(self, model: str, input_tokens: int, output_tokens: int) -> float:
        price = self._price(model)
        return (input_tokens / 1000) * price["input"] + (
            output_tokens / 1000
        ) * price["output"]

    def log_usage(
        self,
        model: str,
        input_tokens: int,
        output_tokens: int,
        endpoint: str,
        success: bool,
    ) -> UsageRecord:
        """Record one request. Failed requests are counted but not billed."""
        cost = self.estimate_cost(model, input_tokens, output_tokens) if success else 0.0
        record = UsageRecord(
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            cost=cost,
            endpoint=endpoint,
            success=success,
        )
        with self._lock:
            self._records.append(record)
            self._total_cost += cost
            crossed = (
                not self._alert_sent and self._total_cost >= self.alert_threshold_usd
            )
            if crossed:
                self._alert_sent = True
            total_cost = self._total_cost

        logger.debug(
            "LLM usage recorded",
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            cost=round(cost, 6),
            success=success,
        )
        if crossed:
            logger.warning(
                "Cost alert threshold reached",
                total_cost=round(total_cost, 4),
                threshold=self.alert_threshold_usd,
            )
        return record

    def snapshot(self) -> CostSnapshot:
        """Return accumulated totals."""
        with self._lock:
            records = list(self._records)
            total_cost = self._total_cost
        cost_by_model: dict[str, float] = {}
        for record in records:
            cost_by_model[record.model] = (
                cost_by_model.get(record.model, 0.0) + record.cost
            )
        return CostSnapshot(
            total_requests=len(records),
            failed_requests=sum(1 for r in records if not r.success),
            total_input_tokens=sum(r.input_tokens for r in records),
            total_output_tokens=sum(r.output_tokens for r in records),
            total_cost=total_cost,
            cost_by_model=cost_by_model,
        )

    def reset(self) -> None:
        with self._lock:
            self._records.clear()
            self._total_cost = 0.0
            self._alert_sent = False


cost_monitor = CostMonitor()
