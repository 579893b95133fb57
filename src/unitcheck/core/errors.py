"""Error taxonomy shared across unitcheck subsystems."""
from __future__ import annotations


class UnitcheckError(Exception):
    """Base class for every error raised by unitcheck itself."""


class AssertionFailure(UnitcheckError, AssertionError):
    """Raised from a test body to abort it with a failed assertion."""


class DuplicateNameError(UnitcheckError, ValueError):
    """A name is already registered in the target suite or registry."""


class SuiteDefinitionError(UnitcheckError, ValueError):
    """A suite or test case is malformed."""


class UnknownSuiteError(UnitcheckError, KeyError):
    """No suite is registered under the requested name."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep messages readable.
        return str(self.args[0]) if self.args else ""


class ConfigError(UnitcheckError, ValueError):
    """The run configuration file is invalid."""


class UnhandledBodyError(UnitcheckError):
    """Wraps an unexpected exception raised by a test body."""

    def __init__(self, original: BaseException) -> None:
        self.original = original
        super().__init__(f"{type(original).__name__}: {original}")

    @property
    def original_kind(self) -> str:
        return type(self.original).__name__
