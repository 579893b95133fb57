"""YAML loader and validation for run configuration files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft7Validator

from unitcheck.core.errors import ConfigError

from .models import REPORT_FORMATS, RunOptions

logger = logging.getLogger(__name__)

_STRING_LIST = {"type": "array", "items": {"type": "string", "minLength": 1}}

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "unitcheck run configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "suite": {"type": "string", "minLength": 1},
        "source": {"type": "string", "minLength": 1},
        "cases": _STRING_LIST,
        "tags": _STRING_LIST,
        "fail_fast": {"type": "boolean"},
        "report": {"type": "string", "enum": list(REPORT_FORMATS)},
        "report_path": {"type": "string", "minLength": 1},
        "color": {"type": "boolean"},
    },
}

_validator = Draft7Validator(CONFIG_SCHEMA)


def load_config(path: str | Path) -> RunOptions:
    """Load and validate a run configuration file."""

    config_path = Path(path).expanduser().resolve()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {config_path} is not valid YAML: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Config file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ConfigError(f"Config schema validation failed: {messages}")
    options = _build_options(raw, config_path.parent)
    logger.debug("loaded config %s: %s", config_path, options)
    return options


def _build_options(raw: Mapping[str, Any], base: Path) -> RunOptions:
    source = raw.get("source")
    source_path = None
    if source:
        source_path = Path(source)
        if not source_path.is_absolute():
            source_path = base / source_path
    report_path = raw.get("report_path")
    if report_path and not Path(report_path).is_absolute():
        report_path = str(base / report_path)
    return RunOptions(
        suite=raw.get("suite"),
        source=source_path,
        cases=tuple(raw.get("cases", ()) or ()),
        tags=tuple(raw.get("tags", ()) or ()),
        fail_fast=bool(raw.get("fail_fast", False)),
        report=raw.get("report", "terminal"),
        report_path=report_path,
        color=bool(raw.get("color", True)),
    )
