"""Core models and helpers exposed at the package level."""
from .assertions import (
    assert_approx_equal,
    assert_identical,
    assert_raises,
    assert_true,
    assert_warns,
    collect_outcomes,
    fail,
)
from .errors import (
    AssertionFailure,
    ConfigError,
    DuplicateNameError,
    SuiteDefinitionError,
    UnhandledBodyError,
    UnitcheckError,
    UnknownSuiteError,
)
from .models import FAILED, NOT_RUN, PASSED, AssertionOutcome, TestCase, Tolerance
from .results import CaseResult, RunReport, Summary, summarize
from .runner import TestRunner, run_all
from .suite import Suite
from .values import ValueKind, classify

__all__ = [
    "AssertionFailure",
    "AssertionOutcome",
    "CaseResult",
    "ConfigError",
    "DuplicateNameError",
    "FAILED",
    "NOT_RUN",
    "PASSED",
    "RunReport",
    "Suite",
    "SuiteDefinitionError",
    "Summary",
    "TestCase",
    "TestRunner",
    "Tolerance",
    "UnhandledBodyError",
    "UnitcheckError",
    "UnknownSuiteError",
    "ValueKind",
    "assert_approx_equal",
    "assert_identical",
    "assert_raises",
    "assert_true",
    "assert_warns",
    "classify",
    "collect_outcomes",
    "fail",
    "run_all",
    "summarize",
]
