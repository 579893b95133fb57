"""CLI entry point for unitcheck."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from unitcheck import __version__, bootstrap
from unitcheck.config import REPORT_FORMATS, RunOptions, load_config
from unitcheck.registry import registry
from unitcheck.session import resolve_suite, run_session

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"unitcheck {__version__}")
    raise click.exceptions.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the unitcheck version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for unitcheck."""

    _configure_logging(verbose)
    bootstrap()
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.option("--suite", "suite_name", type=str, help="Name of the suite to run (default: examples).")
@click.option(
    "--source",
    type=click.Path(exists=True, dir_okay=False),
    help="Python file defining Suite objects at module level.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML run configuration; command-line flags override it.",
)
@click.option("--cases", "case_filters", type=str, help="Comma-separated case filters (supports globs).")
@click.option("--tags", "tag_filters", type=str, help="Comma-separated tags to include.")
@click.option("--fail-fast", is_flag=True, help="Stop after the first failing case.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(list(REPORT_FORMATS)),
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path instead of stdout.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def run(
    state: CliState,
    suite_name: Optional[str],
    source: Optional[str],
    config_path: Optional[str],
    case_filters: Optional[str],
    tag_filters: Optional[str],
    fail_fast: bool,
    report_format: Optional[str],
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """Run the test cases of a suite and print a report."""

    try:
        base = load_config(config_path) if config_path else RunOptions()
        options = base.merged(
            suite=suite_name,
            source=Path(source) if source else None,
            cases=_split_csv(case_filters),
            tags=_split_csv(tag_filters),
            fail_fast=True if fail_fast else None,
            report=report_format,
            report_path=report_path,
            color=False if no_color else None,
        )
        exit_code = run_session(options)
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


@cli.command(name="list")
@click.option("--suite", "suite_name", type=str, help="List the cases of this suite.")
@click.option(
    "--source",
    type=click.Path(exists=True, dir_okay=False),
    help="Python file defining Suite objects at module level.",
)
def list_command(suite_name: Optional[str], source: Optional[str]) -> None:
    """List registered suites, or the cases of one suite."""

    if not suite_name and not source:
        for suite in registry:
            click.echo(f"{suite.name} ({len(suite)} case(s)) {suite.description}".rstrip())
        return
    try:
        suite = resolve_suite(RunOptions(suite=suite_name, source=Path(source) if source else None))
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    click.echo(f"{suite.name}:")
    for case in suite:
        tags = f" [{','.join(case.tags)}]" if case.tags else ""
        about = f" - {case.description}" if case.description else ""
        click.echo(f"  {case.name}{tags}{about}")


def _split_csv(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return tuple()
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return tuple(parts)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="unitcheck", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
