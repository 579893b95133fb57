"""Run options shared by the config loader and the CLI."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

DEFAULT_SUITE = "examples"
REPORT_FORMATS = ("terminal", "json")


@dataclass(frozen=True)
class RunOptions:
    suite: Optional[str] = None
    source: Optional[Path] = None
    cases: Sequence[str] = field(default_factory=tuple)
    tags: Sequence[str] = field(default_factory=tuple)
    fail_fast: bool = False
    report: str = "terminal"
    report_path: Optional[str] = None
    color: bool = True

    def merged(self, **overrides: Any) -> "RunOptions":
        """Copy with every override that is not None (or empty) applied."""

        values = {key: value for key, value in overrides.items() if value not in (None, ())}
        return dataclasses.replace(self, **values)
