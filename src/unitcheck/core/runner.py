"""Test runner executing a suite's cases sequentially."""
from __future__ import annotations

import fnmatch
import logging
import time
from typing import Callable, List, Optional, Sequence

from .assertions import collecting, outcome_for_exception
from .models import AssertionOutcome, TestCase
from .results import CaseResult, RunReport, Summary, summarize
from .suite import Suite

logger = logging.getLogger(__name__)

ResultCallback = Callable[[CaseResult, int, int], None]

__all__ = ["TestRunner", "run_all", "select_cases", "summarize", "Summary"]


def select_cases(
    suite: Suite, *, cases: Sequence[str] = (), tags: Sequence[str] = ()
) -> List[TestCase]:
    """Cases matching any of the name globs and sharing a tag, in registration order."""

    selected: List[TestCase] = []
    for case in suite:
        if cases and not any(fnmatch.fnmatchcase(case.name, pattern) for pattern in cases):
            continue
        if tags and not case.has_any_tag(tuple(tags)):
            continue
        selected.append(case)
    return selected


class TestRunner:
    """Executes the cases of a suite in registration order."""

    __test__ = False

    def __init__(
        self,
        *,
        fail_fast: bool = False,
        cases: Sequence[str] = (),
        tags: Sequence[str] = (),
    ) -> None:
        self._fail_fast = fail_fast
        self._cases = tuple(cases)
        self._tags = tuple(tags)

    def run(self, suite: Suite, *, on_result: Optional[ResultCallback] = None) -> RunReport:
        suite.reset()
        selected = select_cases(suite, cases=self._cases, tags=self._tags)
        total = len(selected)
        results: List[CaseResult] = []
        logger.debug("running suite %s: %d of %d case(s)", suite.name, total, len(suite))
        try:
            suite.set_up()
        except Exception as exc:
            logger.error("setup of suite %s failed: %s", suite.name, exc)
            outcome = outcome_for_exception(exc)
            setup_outcome = AssertionOutcome(
                kind="setup",
                passed=False,
                actual=exc,
                message=f"suite setup failed: {outcome.message}",
                error_kind=outcome.error_kind,
            )
            for index, case in enumerate(selected, start=1):
                result = CaseResult(name=case.name, outcomes=(setup_outcome,), description=case.description)
                case.status = result.status
                results.append(result)
                if on_result:
                    on_result(result, index, total)
            return RunReport(suite=suite.name, results=tuple(results))

        try:
            for index, case in enumerate(selected, start=1):
                result = self._execute_case(case)
                results.append(result)
                if on_result:
                    on_result(result, index, total)
                if self._fail_fast and not result.passed:
                    logger.debug("fail-fast: stopping after %s", case.name)
                    break
        finally:
            try:
                suite.tear_down()
            except Exception as exc:
                logger.error("teardown of suite %s failed: %s", suite.name, exc)
                outcome = outcome_for_exception(exc)
                results.append(
                    CaseResult(
                        name=f"{suite.name}::teardown",
                        outcomes=(
                            AssertionOutcome(
                                kind="teardown",
                                passed=False,
                                actual=exc,
                                message=f"suite teardown failed: {outcome.message}",
                                error_kind=outcome.error_kind,
                            ),
                        ),
                    )
                )
                if on_result:
                    on_result(results[-1], len(results), len(results))
        return RunReport(suite=suite.name, results=tuple(results))

    def _execute_case(self, case: TestCase) -> CaseResult:
        start = time.perf_counter()
        with collecting() as collector:
            try:
                case.body()
            except Exception as exc:
                logger.debug("case %s raised %s", case.name, type(exc).__name__, exc_info=True)
                collector.record(outcome_for_exception(exc))
        duration = time.perf_counter() - start
        result = CaseResult(
            name=case.name,
            outcomes=collector.outcomes,
            description=case.description,
            duration_s=duration,
        )
        case.status = result.status
        return result


def run_all(
    suite: Suite,
    *,
    fail_fast: bool = False,
    cases: Sequence[str] = (),
    tags: Sequence[str] = (),
    on_result: Optional[ResultCallback] = None,
) -> RunReport:
    """Run every selected case of ``suite`` and return the report."""

    runner = TestRunner(fail_fast=fail_fast, cases=cases, tags=tags)
    return runner.run(suite, on_result=on_result)
