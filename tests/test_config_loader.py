from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from unitcheck.config import RunOptions, load_config
from unitcheck.core import ConfigError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "unitcheck.yaml"
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_load_config_resolves_paths_against_config_dir(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        suite: scores
        source: suites/scores.py
        cases: ["mean_*"]
        tags: [smoke]
        fail_fast: true
        report: json
        report_path: out/report.json
        color: false
        """,
    )
    options = load_config(path)
    assert options.suite == "scores"
    assert options.source == tmp_path.resolve() / "suites" / "scores.py"
    assert options.cases == ("mean_*",)
    assert options.tags == ("smoke",)
    assert options.fail_fast is True
    assert options.report == "json"
    assert options.report_path == str(tmp_path.resolve() / "out" / "report.json")
    assert options.color is False


def test_empty_config_gives_defaults(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "")) == RunOptions()


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc:
        load_config(_write(tmp_path, "suite: examples\ntimeout: 3\n"))
    assert "timeout" in str(exc.value)


def test_report_format_is_validated(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc:
        load_config(_write(tmp_path, "report: html\n"))
    assert "report" in str(exc.value)


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, "- examples\n"))


def test_invalid_yaml_is_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, "suite: [unclosed\n"))


def test_merged_applies_only_given_overrides() -> None:
    base = RunOptions(suite="scores", fail_fast=True, tags=("smoke",))
    merged = base.merged(suite=None, tags=(), fail_fast=None, report="json")
    assert merged == RunOptions(suite="scores", fail_fast=True, tags=("smoke",), report="json")
