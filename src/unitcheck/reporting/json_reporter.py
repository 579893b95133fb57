"""JSON reporter emitting structured execution results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
import time
from typing import Any, Dict

import click
from jsonschema import validate

from unitcheck.core.results import CaseResult, RunReport, summarize

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes results to a JSON file validated against the schema."""

    def __init__(self, path: str | None) -> None:
        self._path = pathlib.Path(path) if path else None
        self._records: list[Dict[str, Any]] = []
        self._start_time = 0.0

    def on_start(self, suite: str, total: int) -> None:
        self._records.clear()
        self._start_time = time.perf_counter()

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        self._records.append(_case_to_dict(result))

    def on_complete(self, report: RunReport) -> None:
        summary = summarize(report)
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
            "summary": {
                "suite": report.suite,
                "total": summary.total,
                "passed": summary.passed,
                "failed": summary.failed,
                "duration_s": time.perf_counter() - self._start_time,
            },
            "cases": self._records,
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        text = json.dumps(payload, indent=2)
        if self._path is None:
            click.echo(text)
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def _case_to_dict(result: CaseResult) -> Dict[str, Any]:
    return {
        "name": result.name,
        "description": result.description,
        "status": result.status,
        "duration_ms": result.duration_s * 1000,
        "outcomes": [
            {
                "kind": outcome.kind,
                "passed": bool(outcome.passed),
                "message": outcome.message,
                "error_kind": outcome.error_kind,
            }
            for outcome in result.outcomes
        ],
    }
