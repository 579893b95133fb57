from __future__ import annotations

import json
from pathlib import Path

from unitcheck.core import Suite, assert_identical, run_all
from unitcheck.reporting import JsonReporter, ReportManager, TerminalReporter


def _suite() -> Suite:
    suite = Suite("reporting")
    suite.register("ok", lambda: assert_identical("A", "A"))
    suite.register(
        "mismatch",
        lambda: assert_identical([1, 2, 3], [1, 2, 3, 4]),
        description="lengths must agree",
    )
    return suite


def _run_with(reporter) -> None:
    manager = ReportManager([reporter])
    manager.start("reporting", 2)
    report = run_all(_suite(), on_result=manager.handle_result)
    manager.complete(report)


def test_terminal_reporter_renders_failure_details(capsys) -> None:
    _run_with(TerminalReporter(use_color=False))
    output = capsys.readouterr().out
    assert "Starting run: suite=reporting 2 case(s)" in output
    assert "[1/2] ok -> PASSED" in output
    assert "[2/2] mismatch -> FAILED" in output
    assert "Summary: total=2 passed=1 failed=1" in output
    assert "Failure details:" in output
    assert "about: lengths must agree" in output
    assert "identical: value: length mismatch: expected 3, got 4" in output


def test_json_reporter_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "reports" / "report.json"
    _run_with(JsonReporter(path=str(output_path)))
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["schema_version"] == "1.0.0"
    assert payload["generated_at"].endswith("Z")
    assert payload["summary"]["suite"] == "reporting"
    assert (payload["summary"]["total"], payload["summary"]["failed"]) == (2, 1)
    mismatch = payload["cases"][1]
    assert mismatch["name"] == "mismatch"
    assert mismatch["status"] == "failed"
    assert mismatch["outcomes"][0]["kind"] == "identical"
    assert "length mismatch" in mismatch["outcomes"][0]["message"]


def test_json_reporter_prints_without_path(capsys) -> None:
    _run_with(JsonReporter(path=None))
    payload = json.loads(capsys.readouterr().out)
    assert payload["summary"]["passed"] == 1
