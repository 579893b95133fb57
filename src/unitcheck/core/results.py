"""Result data structures produced by the test runner."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from .models import FAILED, PASSED, AssertionOutcome


def status_for(outcomes: Iterable[AssertionOutcome]) -> str:
    """A case fails iff at least one of its outcomes failed."""

    return FAILED if any(not outcome.passed for outcome in outcomes) else PASSED


@dataclass(frozen=True)
class CaseResult:
    """Outcome of executing a single test case."""

    name: str
    outcomes: Tuple[AssertionOutcome, ...] = tuple()
    description: str = ""
    duration_s: float = field(default=0.0, compare=False)

    @property
    def status(self) -> str:
        return status_for(self.outcomes)

    @property
    def passed(self) -> bool:
        return self.status == PASSED

    @property
    def failures(self) -> Tuple[AssertionOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.passed)


@dataclass(frozen=True)
class RunReport:
    """Ordered results for one suite run."""

    suite: str
    results: Tuple[CaseResult, ...] = tuple()

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    def get(self, name: str) -> CaseResult:
        for result in self.results:
            if result.name == name:
                return result
        raise KeyError(f"No result for case '{name}' in suite '{self.suite}'")


@dataclass(frozen=True)
class Summary:
    total: int
    passed: int
    failed: int


def summarize(report: RunReport | Sequence[CaseResult]) -> Summary:
    results = report.results if isinstance(report, RunReport) else tuple(report)
    passed = sum(1 for result in results if result.passed)
    return Summary(total=len(results), passed=passed, failed=len(results) - passed)
