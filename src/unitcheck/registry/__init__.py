"""Suite registry public API."""
from .registry import (
    SuiteRegistry,
    load_builtins,
    register_factory,
    register_suite,
    registry,
)

__all__ = [
    "SuiteRegistry",
    "registry",
    "register_suite",
    "register_factory",
    "load_builtins",
]
