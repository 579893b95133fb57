"""Named suite registry used by the CLI."""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator

from unitcheck.core import DuplicateNameError, Suite, UnknownSuiteError


class SuiteRegistry:
    """Stores suites by name and exposes lookup utilities."""

    def __init__(self) -> None:
        self._suites: Dict[str, Suite] = {}

    def register(self, suite: Suite) -> Suite:
        if suite.name in self._suites:
            raise DuplicateNameError(f"Suite '{suite.name}' already registered")
        self._suites[suite.name] = suite
        return suite

    def update_or_register(self, suite: Suite) -> Suite:
        self._suites[suite.name] = suite
        return suite

    def get(self, name: str) -> Suite:
        try:
            return self._suites[name]
        except KeyError as exc:
            available = ", ".join(sorted(self._suites)) or "none"
            raise UnknownSuiteError(
                f"Suite '{name}' is not registered (available: {available})"
            ) from exc

    def __contains__(self, name: str) -> bool:
        return name in self._suites

    def __iter__(self) -> Iterator[Suite]:
        return iter(self._suites.values())

    def names(self) -> Iterable[str]:
        return tuple(self._suites.keys())

    def unregister(self, name: str) -> None:
        self._suites.pop(name, None)


registry = SuiteRegistry()


def register_factory(factory: Callable[[], Suite]) -> Callable[[], Suite]:
    """Decorator registering the suite returned by the decorated factory."""

    registry.register(factory())
    return factory


def register_suite(suite: Suite) -> Suite:
    return registry.register(suite)


def load_builtins() -> None:
    from unitcheck.catalog import SUITE_NAMES, build_suite  # noqa: WPS433

    for variant in SUITE_NAMES:
        registry.update_or_register(build_suite(variant))
