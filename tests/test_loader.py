from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

import unitcheck
from unitcheck.config import RunOptions
from unitcheck.core import SuiteDefinitionError, UnknownSuiteError, run_all
from unitcheck.core.loader import load_suites_from_source
from unitcheck.registry import SuiteRegistry, registry
from unitcheck.session import resolve_suite

TWO_SUITES = """
from unitcheck.core import Suite, assert_identical

first = Suite("first")
first.register("same", lambda: assert_identical(1, 1))

second = Suite("second")
second.register("differs", lambda: assert_identical(1, 2))
"""


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_load_suites_from_source_collects_module_level_suites(tmp_path: Path) -> None:
    suites = load_suites_from_source(_write(tmp_path, "two.py", TWO_SUITES))
    assert [suite.name for suite in suites] == ["first", "second"]


def test_source_without_suites_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(SuiteDefinitionError):
        load_suites_from_source(_write(tmp_path, "empty.py", "VALUE = 1\n"))


def test_missing_source_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_suites_from_source(tmp_path / "absent.py")


def test_resolve_suite_requires_name_when_source_defines_several(tmp_path: Path) -> None:
    source = _write(tmp_path, "two.py", TWO_SUITES)
    with pytest.raises(SuiteDefinitionError):
        resolve_suite(RunOptions(source=source))
    assert resolve_suite(RunOptions(source=source, suite="second")).name == "second"
    with pytest.raises(UnknownSuiteError):
        resolve_suite(RunOptions(source=source, suite="third"))


def test_resolve_suite_defaults_to_builtin_examples() -> None:
    assert resolve_suite(RunOptions()).name == "examples"


def test_unknown_registry_suite_lists_available_names() -> None:
    with pytest.raises(UnknownSuiteError) as exc:
        resolve_suite(RunOptions(suite="nope"), suites=SuiteRegistry())
    assert str(exc.value) == "Suite 'nope' is not registered (available: none)"


def test_plugins_register_suites(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(
        tmp_path,
        "unitcheck_test_plugin.py",
        """
        from unitcheck.core import Suite
        from unitcheck.registry import register_factory


        def register():
            @register_factory
            def from_plugin():
                suite = Suite("from_plugin")
                suite.register("noop", lambda: None)
                return suite
        """,
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.setenv("UNITCHECK_PLUGINS", "unitcheck_test_plugin, ")
    try:
        unitcheck._load_plugins()
        assert "from_plugin" in registry
    finally:
        registry.unregister("from_plugin")


def test_bundled_plugin_example_registers_strings_suite(monkeypatch: pytest.MonkeyPatch) -> None:
    plugin_dir = Path(__file__).resolve().parent.parent / "examples" / "plugin_suite"
    monkeypatch.syspath_prepend(str(plugin_dir))
    monkeypatch.setenv("UNITCHECK_PLUGINS", "plugin")
    try:
        unitcheck._load_plugins()
        assert run_all(registry.get("strings")).passed
    finally:
        registry.unregister("strings")
