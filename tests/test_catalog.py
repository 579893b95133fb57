import math

import numpy as np
import pytest

from unitcheck.catalog import BUGGY, BUILTIN_EXAMPLE_CLASSES, FIXED, as_point, build_suite
from unitcheck.catalog.examples import ALPHABET, AbsValues, Distance, IsIn, SafeRatio, SqrtAbs
from unitcheck.core import FAILED, PASSED, Suite, assert_identical, assert_raises, collect_outcomes, run_all
from unitcheck.registry import registry


def test_catalog_suite_passes_when_every_buggy_variant_is_caught() -> None:
    report = run_all(build_suite())
    assert [result.name for result in report.results] == [cls.name for cls in BUILTIN_EXAMPLE_CLASSES]
    assert report.passed, [result.failures for result in report.results]


def test_fixed_variants_pass_their_checks() -> None:
    report = run_all(build_suite(FIXED))
    assert report.passed, [result.failures for result in report.results]


def test_buggy_variants_fail_their_checks() -> None:
    report = run_all(build_suite(BUGGY))
    assert [result.status for result in report.results] == [FAILED] * len(BUILTIN_EXAMPLE_CLASSES)


def test_builtin_suites_are_registered() -> None:
    assert {"examples", "examples-fixed", "examples-buggy"} <= set(registry.names())


def test_unknown_variant_is_rejected() -> None:
    with pytest.raises(ValueError):
        build_suite("sideways")


def test_membership_subsetting_scenario() -> None:
    suite = Suite("is_in")
    suite.register("fixed", lambda: assert_identical(["A", "B", "Z"], IsIn.fixed(["A", "B", "Z", "!"], ALPHABET)))
    suite.register("buggy", lambda: assert_identical(["A", "B", "Z"], IsIn.buggy(["A", "B", "Z", "!"], ALPHABET)))
    suite.register("in_vocabulary", lambda: assert_identical(["A", "B", "Z"], IsIn.fixed(["A", "B", "Z"], ALPHABET)))
    report = run_all(suite)
    assert report.get("fixed").status == PASSED
    assert report.get("in_vocabulary").status == PASSED
    buggy = report.get("buggy")
    assert buggy.status == FAILED
    assert "length mismatch: expected 3, got 4" in buggy.outcomes[0].message


def test_zero_length_iteration_scenario() -> None:
    buggy_result = SqrtAbs.buggy([])
    assert len(buggy_result) == 1
    assert math.isnan(buggy_result[0])
    assert not assert_identical([], buggy_result).passed
    assert assert_identical([], SqrtAbs.fixed([])).passed


def test_vectorized_conditional_on_long_vector_raises() -> None:
    assert assert_raises(lambda: AbsValues.buggy([-1.0, 2.0]), ValueError).passed
    assert assert_identical(np.array([1.0, 2.0]), AbsValues.fixed([-1.0, 2.0])).passed


def test_buggy_distance_breaks_on_records() -> None:
    outcomes = collect_outcomes(lambda: Distance.check(Distance.buggy))
    assert outcomes[0].passed
    assert any(outcome.error_kind == "UnhandledBodyError" for outcome in outcomes)


def test_catalog_shows_buggy_ratio_aborting() -> None:
    report = run_all(build_suite(), cases=("safe_ratio",))
    raises = [outcome for outcome in report.get("safe_ratio").outcomes if outcome.kind == "raises"]
    assert len(raises) == 1
    assert raises[0].passed
    assert raises[0].error_kind == "ZeroDivisionError"


def test_divide_by_zero_scenario() -> None:
    assert assert_raises(lambda: SafeRatio.buggy(1, 0), ArithmeticError).passed
    assert not assert_raises(lambda: SafeRatio.buggy(4, 2), ArithmeticError).passed
    with pytest.warns(RuntimeWarning):
        assert math.isnan(SafeRatio.fixed(1, 0))


@pytest.mark.parametrize(
    "value",
    [(3, 4), [3.0, 4.0], np.array([3.0, 4.0]), np.array([[3, 4]]), {"x": 3, "y": 4}],
)
def test_as_point_accepts_every_point_representation(value) -> None:
    assert as_point(value) == (3.0, 4.0)


@pytest.mark.parametrize(
    "value, error",
    [
        ({"x": 1}, ValueError),
        (np.zeros((2, 2)), ValueError),
        ((1, 2, 3), ValueError),
        (("1", "2"), ValueError),
        ("1,2", TypeError),
    ],
)
def test_as_point_rejects_other_shapes(value, error) -> None:
    with pytest.raises(error):
        as_point(value)
