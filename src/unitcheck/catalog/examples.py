"""Built-in examples: a buggy and a fixed variant of small functions plus their checks."""
from __future__ import annotations

import math
import string
import warnings
from typing import Any, Callable, List, Optional, Sequence, Tuple

import numpy as np

from unitcheck.core.assertions import assert_approx_equal, assert_identical, assert_raises, assert_warns
from unitcheck.core.values import ValueKind, classify, is_number

ALPHABET: Tuple[str, ...] = tuple(string.ascii_uppercase)

Impl = Callable[..., Any]


class Example:
    """Base class for built-in examples."""

    name: str
    lesson: str
    description: str = ""
    tags: tuple = ()

    @staticmethod
    def buggy(*args: Any) -> Any:  # pragma: no cover - interface
        raise NotImplementedError

    @staticmethod
    def fixed(*args: Any) -> Any:  # pragma: no cover - interface
        raise NotImplementedError

    @classmethod
    def check(cls, impl: Impl) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    @classmethod
    def demonstrate_bug(cls, buggy: Impl) -> None:
        """Checks that pass only because ``buggy`` misbehaves; none by default."""


class IsIn(Example):
    """Keep the elements of ``x`` that occur in ``y``."""

    name = "is_in"
    lesson = "Subset by membership, not by position."
    tags = ("membership", "sequences")

    @staticmethod
    def buggy(x: Sequence[str], y: Sequence[str]) -> List[Optional[str]]:
        positions = [y.index(value) if value in y else None for value in x]
        return [y[position] if position is not None else None for position in positions]

    @staticmethod
    def fixed(x: Sequence[str], y: Sequence[str]) -> List[str]:
        return [value for value in x if value in y]

    @classmethod
    def check(cls, impl: Impl) -> None:
        assert_identical(["A", "B", "Z"], impl(["A", "B", "Z"], ALPHABET))
        assert_identical(
            ["A", "B", "Z"],
            impl(["A", "B", "Z", "!"], ALPHABET),
            "out-of-vocabulary elements are dropped",
        )


class ExactMatch(Example):
    """Select the names equal to a query."""

    name = "exact_match"
    lesson = "Match strings exactly; a prefix is not a match."
    tags = ("strings", "matching")

    @staticmethod
    def buggy(names: Sequence[str], query: str) -> List[str]:
        return [name for name in names if query in name]

    @staticmethod
    def fixed(names: Sequence[str], query: str) -> List[str]:
        return [name for name in names if name == query]

    @classmethod
    def check(cls, impl: Impl) -> None:
        names = ["gene1", "gene2", "gene10"]
        assert_identical(["gene1"], impl(names, "gene1"))
        assert_identical([], impl(names, "gene"), "a partial name matches nothing")


class AbsValues(Example):
    """Elementwise absolute value of a numeric vector."""

    name = "abs_values"
    lesson = "A conditional on a vector needs a vectorized branch."
    tags = ("vectors", "conditionals")

    @staticmethod
    def buggy(x: Any) -> np.ndarray:
        values = np.asarray(x, dtype=np.float64)
        if values < 0:
            return -values
        return values

    @staticmethod
    def fixed(x: Any) -> np.ndarray:
        values = np.asarray(x, dtype=np.float64)
        return np.where(values < 0, -values, values)

    @classmethod
    def check(cls, impl: Impl) -> None:
        assert_identical(np.array([2.0]), impl([-2.0]))
        assert_identical(np.array([1.0, 2.0, 3.0]), impl([-1.0, 2.0, -3.0]))


def as_point(value: Any) -> Tuple[float, float]:
    """Normalize a 2D point given as a numeric pair, a 1x2 row or an ``{x, y}`` record."""

    kind = classify(value)
    if kind is ValueKind.RECORD:
        missing = [key for key in ("x", "y") if key not in value]
        if missing:
            raise ValueError(f"point record is missing field(s) {missing}")
        return float(value["x"]), float(value["y"])
    if kind is ValueKind.ARRAY:
        if value.shape not in ((2,), (1, 2)):
            raise ValueError(f"point array must have shape (2,) or (1, 2), got {value.shape}")
        flat = value.astype(np.float64).reshape(-1)
        return float(flat[0]), float(flat[1])
    if kind is ValueKind.SEQUENCE:
        if len(value) != 2 or not all(is_number(item) for item in value):
            raise ValueError(f"point sequence must hold exactly two numbers, got {value!r}")
        return float(value[0]), float(value[1])
    raise TypeError(f"cannot interpret a {kind.value} value as a point")


class Distance(Example):
    """Euclidean distance between two points."""

    name = "distance"
    lesson = "Know your inputs: a point may arrive as a pair, a matrix row or a record."
    tags = ("coercion", "numeric")

    @staticmethod
    def buggy(p: Any, q: Any) -> float:
        return math.sqrt((p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2)

    @staticmethod
    def fixed(p: Any, q: Any) -> float:
        (x1, y1), (x2, y2) = as_point(p), as_point(q)
        return math.hypot(x2 - x1, y2 - y1)

    @classmethod
    def check(cls, impl: Impl) -> None:
        assert_approx_equal(math.sqrt(2), impl((0, 0), (1, 1)))
        assert_approx_equal(
            5.0, impl(np.array([[0.0, 0.0]]), np.array([[3.0, 4.0]])), message="points as matrix rows"
        )
        assert_approx_equal(5.0, impl({"x": 0, "y": 0}, {"x": 3, "y": 4}), message="points as records")


def _colon(start: int, end: int) -> List[int]:
    """``start:end`` sequence that counts down when ``end < start``."""

    step = 1 if end >= start else -1
    return list(range(start, end + step, step))


def _element(x: Sequence[float], position: int) -> Optional[float]:
    """1-based lookup: position 0 selects nothing, positions past the end read NaN."""

    if position == 0:
        return None
    if position > len(x):
        return math.nan
    return x[position - 1]


class SqrtAbs(Example):
    """Square root of the absolute value of each element."""

    name = "sqrt_abs"
    lesson = "Iterate over the elements, not over 1..length, so empty input stays empty."
    tags = ("iteration", "edge-cases")

    @staticmethod
    def buggy(x: Sequence[float]) -> List[float]:
        selected = [_element(x, position) for position in _colon(1, len(x))]
        return [math.sqrt(abs(value)) for value in selected if value is not None]

    @staticmethod
    def fixed(x: Sequence[float]) -> List[float]:
        return [math.sqrt(abs(value)) for value in x]

    @classmethod
    def check(cls, impl: Impl) -> None:
        assert_approx_equal([2.0, 3.0], impl([-4.0, 9.0]))
        assert_identical([], impl([]), "empty input gives empty output")


class SafeRatio(Example):
    """Ratio of two numbers that warns instead of aborting on a zero denominator."""

    name = "safe_ratio"
    lesson = "Decide what an error condition does: abort or warn and carry on."
    tags = ("errors", "warnings")

    @staticmethod
    def buggy(numerator: float, denominator: float) -> float:
        return numerator / denominator

    @staticmethod
    def fixed(numerator: float, denominator: float) -> float:
        if denominator == 0:
            warnings.warn("division by zero, returning NaN", RuntimeWarning, stacklevel=2)
            return math.nan
        return numerator / denominator

    @classmethod
    def check(cls, impl: Impl) -> None:
        assert_identical(2.0, impl(4, 2))
        assert_warns(lambda: impl(1, 0), RuntimeWarning, "zero denominator warns")

    @classmethod
    def demonstrate_bug(cls, buggy: Impl) -> None:
        assert_raises(lambda: buggy(1, 0), ArithmeticError, "zero denominator aborts")


BUILTIN_EXAMPLE_CLASSES: Tuple[type[Example], ...] = (
    IsIn,
    ExactMatch,
    AbsValues,
    Distance,
    SqrtAbs,
    SafeRatio,
)
