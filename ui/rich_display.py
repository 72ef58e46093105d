from __future__ import annotations

import asyncio
import time

from config import settings
from core.cost_monitor import CostMonitor
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from models.engine_models import ComprehensiveEngineResult


class RichDisplayManager:
    """Live status panel shown while the engines run."""

    def __init__(
        self,
        cost_monitor: CostMonitor,
        console: Console | None = None,
    ) -> None:
        self.cost_monitor = cost_monitor
        self.live: Live | None = None
        self.status_text_title: Text = Text("Episode: N/A")
        self.status_text_mode: Text = Text("Mode: N/A")
        self.status_text_requests: Text = Text("LLM Requests: 0")
        self.status_text_spend: Text = Text("Spend: $0.0000")
        self.status_text_elapsed_time: Text = Text("Elapsed Time: 0s")
        self.run_start_time: float = 0.0
        self._stop_event: asyncio.Event = asyncio.Event()
        self._task: asyncio.Task | None = None

        if settings.ENABLE_RICH_PROGRESS:
            self.live = Live(
                Panel(
                    Group(
                        self.status_text_title,
                        self.status_text_mode,
                        self.status_text_requests,
                        self.status_text_spend,
                        self.status_text_elapsed_time,
                    ),
                    title="Comprehensive Engines",
                    border_style="blue",
                    expand=True,
                ),
                console=console,
                refresh_per_second=4,
                transient=True,
                redirect_stdout=False,
                redirect_stderr=False,
            )

    def start(self, title: str, mode: str) -> None:
        self.status_text_title.plain = f"Episode: {title}"
        self.status_text_mode.plain = f"Mode: {mode}"
        self.run_start_time = time.time()
        if self.live:
            self.live.start()
            self._stop_event.clear()
            self._task = asyncio.create_task(self._auto_refresh())

    async def stop(self) -> None:
        self._stop_event.set()
        if self._task:
            await self._task
            self._task = None
        if self.live and self.live.is_started:
            self.live.stop()

    async def _auto_refresh(self) -> None:
        while not self._stop_event.is_set():
            self.update()
            await asyncio.sleep(1)

    def update(self) -> None:
        snapshot = self.cost_monitor.snapshot()
        self.status_text_requests.plain = (
            f"LLM Requests: {snapshot.total_requests} ({snapshot.failed_requests} failed)"
        )
        self.status_text_spend.plain = f"Spend: ${snapshot.total_cost:.4f}"
        elapsed_seconds = time.time() - self.run_start_time
        self.status_text_elapsed_time.plain = (
            f"Elapsed Time: {time.strftime('%H:%M:%S', time.gmtime(elapsed_seconds))}"
        )


def build_summary_table(result: ComprehensiveEngineResult) -> Table:
    """One row per engine, plus a caption with the run totals."""
    metadata = result.metadata
    table = Table(
        title="Engine Results",
        caption=(
            f"{metadata.successful_engines}/{metadata.total_engines_run} succeeded "
            f"({metadata.success_rate:.1f}%) in {metadata.total_execution_time_ms}ms, "
            f"quality {metadata.quality_score}/100"
        ),
    )
    table.add_column("Engine")
    table.add_column("Status")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Retries", justify="right")
    table.add_column("Quality", justify="right")
    table.add_column("Error")
    for name, perf in metadata.engine_performance.items():
        table.add_row(
            name,
            "[green]ok[/green]" if perf.success else "[red]fallback[/red]",
            str(perf.execution_time_ms),
            str(perf.retry_count),
            str(perf.quality_score),
            Text(perf.error or ""),
        )
    return table


def render_run_summary(
    result: ComprehensiveEngineResult, console: Console | None = None
) -> None:
    console = console or Console()
    console.print(build_summary_table(result))
    for error in result.metadata.errors:
        if error.startswith("Critical error"):
            console.print(Text(error, style="bold red"))
