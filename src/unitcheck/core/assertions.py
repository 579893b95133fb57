"""Assertion primitives recording outcomes into the active collector.

Every check builds an :class:`AssertionOutcome`, records it into the collector
the runner opened for the case being executed and returns it. Outside a run
there is no active collector and the outcome is only returned, so the checks
can also be used as plain predicates.
"""
from __future__ import annotations

import contextlib
import warnings
from contextvars import ContextVar
from typing import Any, Callable, Iterator, List, Optional, Tuple, Type, Union

from .comparator import compare_approx, compare_identical
from .errors import UnhandledBodyError
from .models import AssertionOutcome, Tolerance
from .values import ValueKind, classify, describe

ErrorKind = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


class OutcomeCollector:
    """Accumulates outcomes for the case currently executing."""

    def __init__(self) -> None:
        self._outcomes: List[AssertionOutcome] = []

    def record(self, outcome: AssertionOutcome) -> AssertionOutcome:
        self._outcomes.append(outcome)
        return outcome

    @property
    def outcomes(self) -> Tuple[AssertionOutcome, ...]:
        return tuple(self._outcomes)


_ACTIVE: ContextVar[Optional[OutcomeCollector]] = ContextVar("unitcheck_collector", default=None)


@contextlib.contextmanager
def collecting() -> Iterator[OutcomeCollector]:
    """Make a fresh collector active for the duration of the block."""

    collector = OutcomeCollector()
    token = _ACTIVE.set(collector)
    try:
        yield collector
    finally:
        _ACTIVE.reset(token)


def _record(outcome: AssertionOutcome) -> AssertionOutcome:
    collector = _ACTIVE.get()
    if collector is not None:
        collector.record(outcome)
    return outcome


def _join(message: Optional[str], detail: Optional[str]) -> Optional[str]:
    if message and detail:
        return f"{message}: {detail}"
    return message or detail


def _kind_name(error_kind: ErrorKind) -> str:
    if isinstance(error_kind, tuple):
        return " | ".join(kind.__name__ for kind in error_kind)
    return error_kind.__name__


def assert_identical(expected: Any, actual: Any, message: Optional[str] = None) -> AssertionOutcome:
    comparison = compare_identical(expected, actual)
    return _record(
        AssertionOutcome(
            kind="identical",
            passed=comparison.passed,
            expected=expected,
            actual=actual,
            message=_join(message, comparison.message),
        )
    )


def assert_true(expression: Any, message: Optional[str] = None) -> AssertionOutcome:
    kind = classify(expression)
    detail: Optional[str] = None
    if kind is ValueKind.BOOLEAN:
        passed = bool(expression)
        if not passed:
            detail = "expression is False"
    elif kind is ValueKind.ARRAY and expression.dtype == bool:
        # never collapse a vector condition to its first element
        passed = False
        detail = f"condition has length {expression.size}, expected a single boolean"
    else:
        passed = False
        detail = f"expected a boolean, got {kind.value} {describe(expression)}"
    return _record(
        AssertionOutcome(
            kind="true",
            passed=passed,
            expected=True,
            actual=expression,
            message=_join(message, detail),
        )
    )


def assert_approx_equal(
    expected: Any,
    actual: Any,
    tolerance: Union[Tolerance, float, None] = None,
    message: Optional[str] = None,
) -> AssertionOutcome:
    comparison = compare_approx(expected, actual, Tolerance.coerce(tolerance))
    return _record(
        AssertionOutcome(
            kind="approx",
            passed=comparison.passed,
            expected=expected,
            actual=actual,
            message=_join(message, comparison.message),
        )
    )


def assert_raises(
    func: Callable[[], Any], error_kind: ErrorKind, message: Optional[str] = None
) -> AssertionOutcome:
    expected_name = _kind_name(error_kind)
    try:
        value = func()
    except error_kind as exc:
        outcome = AssertionOutcome(
            kind="raises",
            passed=True,
            expected=expected_name,
            actual=exc,
            message=message,
            error_kind=type(exc).__name__,
        )
    except Exception as exc:
        outcome = AssertionOutcome(
            kind="raises",
            passed=False,
            expected=expected_name,
            actual=exc,
            message=_join(message, f"expected {expected_name}, got {type(exc).__name__}: {exc}"),
            error_kind=type(exc).__name__,
        )
    else:
        outcome = AssertionOutcome(
            kind="raises",
            passed=False,
            expected=expected_name,
            actual=value,
            message=_join(message, f"expected {expected_name} to be raised, returned {describe(value)}"),
        )
    return _record(outcome)


def assert_warns(
    func: Callable[[], Any],
    warning_kind: Type[Warning] = Warning,
    message: Optional[str] = None,
) -> AssertionOutcome:
    error: Optional[Exception] = None
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            func()
        except Exception as exc:
            error = exc
    matching = [item for item in caught if issubclass(item.category, warning_kind)]
    if error is not None:
        detail: Optional[str] = (
            f"expected {warning_kind.__name__} without aborting, "
            f"got {type(error).__name__}: {error}"
        )
    elif not matching:
        seen = ", ".join(item.category.__name__ for item in caught) or "none"
        detail = f"expected {warning_kind.__name__}, warnings seen: {seen}"
    else:
        detail = None
    return _record(
        AssertionOutcome(
            kind="warns",
            passed=detail is None,
            expected=warning_kind.__name__,
            actual=[str(item.message) for item in matching],
            message=_join(message, detail),
            error_kind=type(error).__name__ if error is not None else None,
        )
    )


def fail(message: str) -> AssertionOutcome:
    return _record(AssertionOutcome(kind="fail", passed=False, message=message))


def outcome_for_exception(exc: BaseException) -> AssertionOutcome:
    """Translate an exception escaping a test body into a failed outcome."""

    if isinstance(exc, AssertionError):
        text = str(exc) or "assertion failed"
        return AssertionOutcome(kind="assertion", passed=False, actual=exc, message=text)
    wrapped = UnhandledBodyError(exc)
    return AssertionOutcome(
        kind="error",
        passed=False,
        actual=exc,
        message=str(wrapped),
        error_kind=type(wrapped).__name__,
    )


def collect_outcomes(func: Callable[[], Any]) -> Tuple[AssertionOutcome, ...]:
    """Run ``func`` under its own collector and return what it recorded.

    Nothing is recorded into the enclosing case, which lets one case inspect
    how a separate batch of checks behaves.
    """

    with collecting() as collector:
        try:
            func()
        except Exception as exc:
            collector.record(outcome_for_exception(exc))
    return collector.outcomes
