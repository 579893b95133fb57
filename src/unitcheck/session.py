"""Resolve a suite from run options, execute it and report the results."""
from __future__ import annotations

import logging

import click

from unitcheck.config import DEFAULT_SUITE, RunOptions
from unitcheck.core import Suite, SuiteDefinitionError, UnknownSuiteError, run_all
from unitcheck.core.loader import load_suites_from_source
from unitcheck.core.runner import select_cases
from unitcheck.registry import SuiteRegistry, registry
from unitcheck.reporting import JsonReporter, ReportManager, Reporter, TerminalReporter

logger = logging.getLogger(__name__)


def resolve_suite(options: RunOptions, *, suites: SuiteRegistry = registry) -> Suite:
    """Pick the suite named by ``options`` from its source file or the registry."""

    if options.source is None:
        return suites.get(options.suite or DEFAULT_SUITE)
    loaded = load_suites_from_source(options.source)
    if options.suite is None:
        if len(loaded) == 1:
            return loaded[0]
        names = ", ".join(suite.name for suite in loaded)
        raise SuiteDefinitionError(
            f"{options.source} defines several suites ({names}); choose one with --suite"
        )
    for suite in loaded:
        if suite.name == options.suite:
            return suite
    names = ", ".join(suite.name for suite in loaded)
    raise UnknownSuiteError(f"Suite '{options.suite}' not found in {options.source} (available: {names})")


def build_reporter(options: RunOptions) -> Reporter:
    if options.report == "json":
        return JsonReporter(options.report_path)
    return TerminalReporter(use_color=options.color)


def run_session(options: RunOptions, *, suites: SuiteRegistry = registry) -> int:
    """Execute the configured suite; returns process exit code (0 success, 1 failures)."""

    suite = resolve_suite(options, suites=suites)
    selected = select_cases(suite, cases=options.cases, tags=options.tags)
    if not selected:
        click.echo("No cases matched the provided filters.")
        return 1
    manager = ReportManager([build_reporter(options)])
    manager.start(suite.name, len(selected))
    report = run_all(
        suite,
        fail_fast=options.fail_fast,
        cases=options.cases,
        tags=options.tags,
        on_result=manager.handle_result,
    )
    manager.complete(report)
    logger.debug("suite %s finished, passed=%s", suite.name, report.passed)
    return 0 if report.passed else 1
