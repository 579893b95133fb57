"""Core dataclasses shared across unitcheck subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple, Union

NOT_RUN = "not_run"
PASSED = "passed"
FAILED = "failed"

TestBody = Callable[[], Any]


@dataclass(frozen=True)
class Tolerance:
    """Numerical tolerance definition for approximate comparisons."""

    absolute: float = 1e-8
    relative: float = 1e-6

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Tolerance":
        if not data:
            return cls()
        return cls(
            absolute=float(data.get("abs", data.get("absolute", 1e-8))),
            relative=float(data.get("rel", data.get("relative", 1e-6))),
        )

    @classmethod
    def coerce(cls, value: Union["Tolerance", float, Mapping[str, Any], None]) -> "Tolerance":
        """Accept a Tolerance, a plain absolute tolerance, a mapping or None."""

        if value is None:
            return cls()
        if isinstance(value, Tolerance):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        return cls(absolute=float(value), relative=0.0)

    def label(self) -> str:
        return f"abs={self.absolute:g},rel={self.relative:g}"


@dataclass(eq=False)
class TestCase:
    """A named unit of verification owned by a suite."""

    __test__ = False  # keep pytest from collecting the dataclass

    name: str
    body: TestBody
    description: str = ""
    tags: Tuple[str, ...] = tuple()
    status: str = NOT_RUN

    def has_any_tag(self, tags: Tuple[str, ...]) -> bool:
        return bool(set(tags) & set(self.tags))


@dataclass(frozen=True)
class AssertionOutcome:
    """Recorded result of one check inside a test body.

    ``expected`` and ``actual`` hold the raw compared values; they may be
    numpy arrays, so equality between outcomes uses the rendered message
    instead of the values themselves.
    """

    kind: str
    passed: bool
    expected: Any = field(default=None, compare=False)
    actual: Any = field(default=None, compare=False)
    message: Optional[str] = None
    error_kind: Optional[str] = None
