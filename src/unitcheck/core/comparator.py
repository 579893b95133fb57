"""Structural and approximate comparison of expected and actual values."""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np

from .models import Tolerance
from .values import ValueKind, classify, describe


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing two values, with the location of the first difference."""

    passed: bool
    message: str | None = None
    path: str | None = None
    max_abs_error: float | None = None
    mismatched: int = 0
    total: int = 0


_OK = ComparisonResult(passed=True)


def _mismatch(path: str, detail: str) -> ComparisonResult:
    return ComparisonResult(passed=False, message=f"{path}: {detail}", path=path)


def compare_identical(expected: Any, actual: Any, path: str = "value") -> ComparisonResult:
    """Exact structural equality; kinds, container types and lengths must agree."""

    expected_kind = classify(expected)
    actual_kind = classify(actual)
    if expected_kind is not actual_kind:
        return _mismatch(
            path,
            f"kind mismatch: expected {expected_kind.value} {describe(expected)}, "
            f"got {actual_kind.value} {describe(actual)}",
        )
    kind = expected_kind
    if kind is ValueKind.MISSING:
        return _OK
    if kind is ValueKind.BOOLEAN:
        if bool(expected) == bool(actual):
            return _OK
        return _mismatch(path, f"expected {expected!r}, got {actual!r}")
    if kind is ValueKind.NUMBER:
        return _compare_numbers(expected, actual, path)
    if kind is ValueKind.TEXT:
        if type(expected) is type(actual) and expected == actual:
            return _OK
        return _mismatch(path, f"expected {describe(expected)}, got {describe(actual)}")
    if kind is ValueKind.SEQUENCE:
        return _compare_sequences(expected, actual, path)
    if kind is ValueKind.ARRAY:
        return _compare_arrays(expected, actual, path)
    if kind is ValueKind.RECORD:
        return _compare_records(expected, actual, path)
    if kind is ValueKind.OTHER:
        if type(expected) is type(actual) and expected == actual:
            return _OK
        return _mismatch(path, f"expected {describe(expected)}, got {describe(actual)}")
    raise AssertionError(f"unhandled value kind {kind!r}")  # pragma: no cover


def _number_family(value: Any) -> str:
    if isinstance(value, numbers.Integral):
        return "integer"
    if isinstance(value, numbers.Real):
        return "real"
    return "complex"


def _same_float(expected: Any, actual: Any) -> bool:
    return expected == actual or (math.isnan(expected) and math.isnan(actual))


def _same_floats(expected: np.ndarray, actual: np.ndarray) -> np.ndarray:
    return (expected == actual) | (np.isnan(expected) & np.isnan(actual))


def _compare_numbers(expected: Any, actual: Any, path: str) -> ComparisonResult:
    expected_family = _number_family(expected)
    actual_family = _number_family(actual)
    if expected_family != actual_family:
        return _mismatch(
            path,
            f"type mismatch: expected {expected_family} {expected!r}, got {actual_family} {actual!r}",
        )
    if expected_family == "real" and _same_float(expected, actual):
        return _OK
    if expected_family == "complex" and (
        _same_float(expected.real, actual.real) and _same_float(expected.imag, actual.imag)
    ):
        return _OK
    if expected == actual:
        return _OK
    return _mismatch(path, f"expected {expected!r}, got {actual!r}")


def _compare_sequences(expected: Any, actual: Any, path: str) -> ComparisonResult:
    if type(expected) is not type(actual):
        return _mismatch(
            path,
            f"type mismatch: expected {type(expected).__name__}, got {type(actual).__name__}",
        )
    if len(expected) != len(actual):
        return _mismatch(
            path,
            f"length mismatch: expected {len(expected)}, got {len(actual)} "
            f"({describe(expected)} vs {describe(actual)})",
        )
    for index, (exp, act) in enumerate(zip(expected, actual)):
        result = compare_identical(exp, act, f"{path}[{index}]")
        if not result.passed:
            return result
    return _OK


def _compare_records(expected: Any, actual: Any, path: str) -> ComparisonResult:
    if type(expected) is not type(actual):
        return _mismatch(
            path,
            f"type mismatch: expected {type(expected).__name__}, got {type(actual).__name__}",
        )
    missing = [key for key in expected if key not in actual]
    extra = [key for key in actual if key not in expected]
    if missing or extra:
        return _mismatch(path, f"field mismatch: missing {missing}, unexpected {extra}")
    for key in expected:
        result = compare_identical(expected[key], actual[key], f"{path}[{key!r}]")
        if not result.passed:
            return result
    return _OK


def _compare_arrays(expected: np.ndarray, actual: np.ndarray, path: str) -> ComparisonResult:
    if expected.shape != actual.shape:
        if expected.ndim == 1 and actual.ndim == 1:
            detail = f"length mismatch: expected {expected.shape[0]}, got {actual.shape[0]}"
        else:
            detail = f"shape mismatch: expected {expected.shape}, got {actual.shape}"
        return _mismatch(path, detail)
    if expected.dtype != actual.dtype:
        return _mismatch(path, f"dtype mismatch: expected {expected.dtype}, got {actual.dtype}")
    if expected.dtype.kind == "f":
        same = _same_floats(expected, actual)
    elif expected.dtype.kind == "c":
        same = _same_floats(expected.real, actual.real) & _same_floats(expected.imag, actual.imag)
    elif expected.dtype.kind in "mM":
        same = (expected == actual) | (np.isnat(expected) & np.isnat(actual))
    elif expected.dtype.kind == "O":
        same = np.array(
            [compare_identical(expected[i], actual[i], path).passed for i in np.ndindex(expected.shape)],
            dtype=bool,
        ).reshape(expected.shape)
    else:
        same = expected == actual
    same = np.asarray(same, dtype=bool)
    if bool(same.all()):
        return _OK
    index = tuple(int(i) for i in np.argwhere(~same)[0]) if same.ndim else ()
    mismatched = int(same.size - np.count_nonzero(same))
    return ComparisonResult(
        passed=False,
        message=(
            f"{path}: {mismatched}/{same.size} element(s) differ; first at {index}: "
            f"expected {expected[index]!r}, got {actual[index]!r}"
        ),
        path=path,
        mismatched=mismatched,
        total=int(same.size),
    )


def compare_approx(expected: Any, actual: Any, tolerance: Tolerance, path: str = "value") -> ComparisonResult:
    """Elementwise ``|actual - expected| <= absolute + relative * |expected|``."""

    for label, value in (("expected", expected), ("actual", actual)):
        offending = _first_non_numeric(value)
        if offending is not None:
            return _mismatch(path, f"{label} value is not numeric: {offending}")
    try:
        exp = np.asarray(expected, dtype=np.float64)
        act = np.asarray(actual, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        return _mismatch(path, f"values are not numeric: {exc}")
    if exp.shape != act.shape:
        if exp.ndim == act.ndim == 1:
            detail = f"length mismatch: expected {exp.size}, got {act.size}"
        else:
            detail = f"shape mismatch: expected {exp.shape}, got {act.shape}"
        return _mismatch(path, detail)
    close = np.isclose(act, exp, atol=tolerance.absolute, rtol=tolerance.relative, equal_nan=True)
    mismatched = int(close.size - int(np.count_nonzero(close)))
    max_abs, index = _max_abs_error(act, exp)
    if mismatched == 0:
        return ComparisonResult(passed=True, max_abs_error=max_abs, total=int(close.size))
    location = f" at {index}" if index else ""
    return ComparisonResult(
        passed=False,
        message=(
            f"{path}: {mismatched}/{close.size} element(s) differ beyond tolerance "
            f"({tolerance.label()}); max_abs={max_abs:.3e}{location}: "
            f"expected {describe(expected)}, got {describe(actual)}"
        ),
        path=path,
        max_abs_error=max_abs,
        mismatched=mismatched,
        total=int(close.size),
    )


def _first_non_numeric(value: Any) -> str | None:
    """Describe the first element that would only become a float through coercion."""

    kind = classify(value)
    if kind is ValueKind.NUMBER:
        if isinstance(value, numbers.Real):
            return None
        return f"complex {describe(value)}"
    if kind is ValueKind.ARRAY:
        if value.dtype.kind in "iuf":
            return None
        return f"array of dtype {value.dtype}"
    if kind is ValueKind.SEQUENCE:
        for item in value:
            offending = _first_non_numeric(item)
            if offending is not None:
                return offending
        return None
    return f"{kind.value} {describe(value)}"


def _max_abs_error(actual: np.ndarray, expected: np.ndarray) -> tuple[float, tuple[int, ...] | None]:
    if actual.size == 0:
        return 0.0, None
    diff = np.abs(actual - expected)
    # NaN in the same position is not an error
    diff = np.where(np.isnan(actual) & np.isnan(expected), 0.0, diff)
    diff = np.where(np.isnan(diff), np.inf, diff)
    flat_index = int(np.argmax(diff))
    index = tuple(int(i) for i in np.unravel_index(flat_index, actual.shape))
    return float(diff.flat[flat_index]), index
