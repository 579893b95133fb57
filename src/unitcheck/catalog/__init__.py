"""Example catalog exports."""
from .examples import BUILTIN_EXAMPLE_CLASSES, Example, as_point
from .suites import BOTH, BUGGY, FIXED, SUITE_NAMES, build_suite

__all__ = [
    "BOTH",
    "BUGGY",
    "BUILTIN_EXAMPLE_CLASSES",
    "Example",
    "FIXED",
    "SUITE_NAMES",
    "as_point",
    "build_suite",
]
