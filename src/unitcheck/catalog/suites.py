"""Suites built from the example catalog."""
from __future__ import annotations

from typing import Dict, Sequence

from unitcheck.core.assertions import assert_true, collect_outcomes
from unitcheck.core.models import TestBody
from unitcheck.core.suite import Suite

from .examples import BUILTIN_EXAMPLE_CLASSES, Example

BOTH = "both"
FIXED = "fixed"
BUGGY = "buggy"

SUITE_NAMES: Dict[str, str] = {
    BOTH: "examples",
    FIXED: "examples-fixed",
    BUGGY: "examples-buggy",
}


def _check_variant(example: type[Example], variant: str) -> TestBody:
    def body() -> None:
        impl = example.fixed if variant == FIXED else example.buggy
        example.check(impl)

    return body


def _check_both(example: type[Example]) -> TestBody:
    def body() -> None:
        example.check(example.fixed)
        example.demonstrate_bug(example.buggy)
        outcomes = collect_outcomes(lambda: example.check(example.buggy))
        failures = [outcome for outcome in outcomes if not outcome.passed]
        assert_true(bool(failures), f"the buggy {example.name} should fail at least one check")

    return body


def build_suite(
    variant: str = BOTH, examples: Sequence[type[Example]] = BUILTIN_EXAMPLE_CLASSES
) -> Suite:
    """Suite with one case per example exercising the requested variant(s)."""

    if variant not in SUITE_NAMES:
        raise ValueError(f"Unknown variant '{variant}', expected one of {sorted(SUITE_NAMES)}")
    suite = Suite(
        SUITE_NAMES[variant],
        description=f"Example catalog ({variant} variant{'s' if variant == BOTH else ''})",
    )
    for example in examples:
        body = _check_both(example) if variant == BOTH else _check_variant(example, variant)
        suite.register(
            example.name,
            body,
            description=example.lesson,
            tags=(variant,) + tuple(example.tags),
        )
    return suite
