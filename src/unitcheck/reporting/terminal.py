"""Terminal reporter rendering progress and summaries."""
from __future__ import annotations

import time

import click

from unitcheck.core.results import CaseResult, RunReport, summarize

from .base import Reporter

STATUS_COLORS = {
    "passed": "green",
    "failed": "red",
}


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        self._start_time = 0.0
        self._failures: list[tuple[int, CaseResult]] = []

    def on_start(self, suite: str, total: int) -> None:
        self._start_time = time.perf_counter()
        self._failures.clear()
        click.echo(self._styled(f"Starting run: suite={suite} {total} case(s)", force_color="cyan"))

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        ms = result.duration_s * 1000
        status_text = self._styled(result.status.upper())
        click.echo(f"[{index}/{total}] {result.name} -> {status_text} ({ms:.2f} ms)")
        if not result.passed:
            self._failures.append((index, result))
            self._print_failure_details(result)

    def on_complete(self, report: RunReport) -> None:
        duration = time.perf_counter() - self._start_time
        summary = summarize(report)
        click.echo(
            self._styled(
                f"Summary: total={summary.total} passed={summary.passed} failed={summary.failed} "
                f"duration={duration:.2f}s",
                force_color="cyan" if summary.failed == 0 else "red",
            )
        )
        if self._failures:
            click.echo(self._styled("Failure details:", force_color="red"))
            for index, result in self._failures:
                click.echo(f"  [{index}] {result.name} -> {result.status}")
                self._print_failure_details(result, indent="    ")

    def _styled(self, text: str, *, force_color: str | None = None) -> str:
        if not self._use_color:
            return text
        color = force_color or STATUS_COLORS.get(text.lower(), None)
        if color:
            return click.style(text, fg=color)
        return text

    def _print_failure_details(self, result: CaseResult, *, indent: str = "    ") -> None:
        if result.description:
            click.echo(f"{indent}about: {result.description}")
        for outcome in result.failures:
            kind = f"{outcome.kind} ({outcome.error_kind})" if outcome.error_kind else outcome.kind
            click.echo(f"{indent}{kind}: {outcome.message or 'failed'}")
