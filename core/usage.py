from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TokenUsage:
    """Token usage reported for a single generation call."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    estimated: bool = False

    @classmethod
    def from_api(
        cls,
        usage: dict[str, Any] | None,
        *,
        prompt_estimate: int = 0,
        completion_estimate: int = 0,
    ) -> TokenUsage:
        """Build usage from a provider ``usage`` block, estimating when absent."""
        if usage and isinstance(usage.get("prompt_tokens"), int):
            prompt_tokens = usage["prompt_tokens"]
            completion_tokens = usage.get("completion_tokens") or 0
            return cls(
                prompt_tokens=prompt_tokens,
                completion_tokens=completion_tokens,
                total_tokens=usage.get("total_tokens")
                or prompt_tokens + completion_tokens,
            )
        return cls(
            prompt_tokens=prompt_estimate,
            completion_tokens=completion_estimate,
            total_tokens=prompt_estimate + completion_estimate,
            estimated=True,
        )


@dataclass(frozen=True)
class UsageRecord:
    """One metered generation request."""

    model: str
    input_tokens: int
    output_tokens: int
    cost: float
    endpoint: str
    success: bool
    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True)
class CostSnapshot:
    """Point-in-time view of accumulated usage."""

    total_requests: int = 0
    failed_requests: int = 0
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    total_cost: float = 0.0
    cost_by_model: dict[str, float] = field(default_factory=dict)

    @property
    def error_rate(self) -> float:
        if not self.total_requests:
            return 0.0
        return self.failed_requests / self.total_requests * 100
