"""Registers a suite through the plugin hook.

    UNITCHECK_PLUGINS=plugin unitcheck run --suite strings
"""
from unitcheck.core import Suite, assert_identical
from unitcheck.registry import register_suite


def register() -> None:
    suite = Suite("strings", description="String helpers registered via plugin")
    suite.register(
        "strip_is_exact",
        lambda: assert_identical("gene1", "  gene1 ".strip()),
        description="Whitespace is removed from both ends",
        tags=("strings",),
    )
    register_suite(suite)
