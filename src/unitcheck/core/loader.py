"""Helpers for loading suites defined in user-provided Python files."""
from __future__ import annotations

import importlib.machinery
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Tuple

from .errors import SuiteDefinitionError
from .suite import Suite

logger = logging.getLogger(__name__)


def load_suites_from_source(source: Path | str) -> Tuple[Suite, ...]:
    """Import the Python file at ``source`` and return the suites it defines at module level."""

    path = Path(source).expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Suite source file not found: {path}")
    module_name = f"unitcheck_source_{path.stem}_{hash(str(path)) & 0xFFFF:x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Unable to load module from {path}")
    module = importlib.util.module_from_spec(spec)
    loader = spec.loader
    assert isinstance(loader, importlib.machinery.SourceFileLoader)  # type: ignore[attr-defined]
    sys.modules[module_name] = module
    loader.exec_module(module)
    suites = tuple(value for value in vars(module).values() if isinstance(value, Suite))
    if not suites:
        raise SuiteDefinitionError(f"No Suite objects defined at module level in {path}")
    logger.debug("loaded %d suite(s) from %s", len(suites), path)
    return suites
