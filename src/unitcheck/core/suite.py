"""Suites: ordered collections of registered test cases."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, Optional, Sequence, Tuple

from .errors import DuplicateNameError, SuiteDefinitionError
from .models import NOT_RUN, TestBody, TestCase

logger = logging.getLogger(__name__)

Hook = Callable[[], None]


class Suite:
    """Stores test cases in registration order and owns the run lifecycle hooks."""

    def __init__(
        self,
        name: str,
        *,
        setup: Optional[Hook] = None,
        teardown: Optional[Hook] = None,
        description: str = "",
    ) -> None:
        if not isinstance(name, str) or not name.strip():
            raise SuiteDefinitionError("Suite name must be a non-empty string")
        self.name = name.strip()
        self.description = description
        self._setup = setup
        self._teardown = teardown
        self._cases: Dict[str, TestCase] = {}

    def register(
        self,
        name: str,
        body: TestBody,
        *,
        description: str = "",
        tags: Sequence[str] = (),
    ) -> TestCase:
        if not isinstance(name, str) or not name.strip():
            raise SuiteDefinitionError(f"Test names in suite '{self.name}' must be non-empty strings")
        if not callable(body):
            raise SuiteDefinitionError(f"Body of test '{name}' is not callable")
        if name in self._cases:
            raise DuplicateNameError(f"Test '{name}' already registered in suite '{self.name}'")
        case = TestCase(name=name, body=body, description=description, tags=tuple(tags))
        self._cases[name] = case
        logger.debug("registered test %s::%s", self.name, name)
        return case

    def test(
        self,
        name: Optional[str] = None,
        *,
        description: Optional[str] = None,
        tags: Sequence[str] = (),
    ) -> Callable[[TestBody], TestBody]:
        """Decorator registering the decorated function as a test body."""

        def decorator(func: TestBody) -> TestBody:
            doc = (func.__doc__ or "").strip().splitlines()
            self.register(
                name or func.__name__,
                func,
                description=description if description is not None else (doc[0] if doc else ""),
                tags=tags,
            )
            return func

        return decorator

    def get(self, name: str) -> TestCase:
        try:
            return self._cases[name]
        except KeyError as exc:
            raise KeyError(f"Test '{name}' is not registered in suite '{self.name}'") from exc

    def cases(self) -> Tuple[TestCase, ...]:
        return tuple(self._cases.values())

    def names(self) -> Iterable[str]:
        return tuple(self._cases.keys())

    def reset(self) -> None:
        for case in self._cases.values():
            case.status = NOT_RUN

    def set_up(self) -> None:
        if self._setup is not None:
            self._setup()

    def tear_down(self) -> None:
        if self._teardown is not None:
            self._teardown()

    def __contains__(self, name: str) -> bool:
        return name in self._cases

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self._cases.values())

    def __len__(self) -> int:
        return len(self._cases)

    def __repr__(self) -> str:
        return f"Suite(name={self.name!r}, cases={len(self._cases)})"
