"""CLI entry point (Typer).

The command runs the scaffold pipeline and renders its outcome; every exit
code of the program is decided here.
"""

from __future__ import annotations

import asyncio
import logging
import platform
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from appseed import __version__
from appseed.cli.info import print_environment_info
from appseed.cli.ui_components import (
    SpinnerReporter,
    print_conflicts,
    print_created,
    print_invalid_name,
    print_legacy_runtime,
    print_not_a_directory,
    print_stale_advisory,
    print_usage,
)
from appseed.core.config import AppSettings
from appseed.core.domain.models import OutcomeKind, ProjectRequest, ScaffoldOutcome
from appseed.core.services.name_validator import NameValidator
from appseed.core.services.scaffold import ScaffoldInitializer
from appseed.core.services.version_gate import ProgressHooks, VersionGate

PROG_NAME = "appseed"

app = typer.Typer(add_completion=False, help="Create a new app in <project-directory>.")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        _console.print(__version__)
        raise typer.Exit()


def _render(outcome: ScaffoldOutcome, validator: NameValidator, settings: AppSettings) -> None:
    request = outcome.request
    kind = outcome.kind
    if kind is OutcomeKind.INVALID_NAME and outcome.verdict is not None:
        print_invalid_name(_err_console, request.app_name, outcome.verdict, validator.reserved_names)
    elif kind is OutcomeKind.NOT_A_DIRECTORY:
        print_not_a_directory(_err_console, request)
    elif kind is OutcomeKind.DIRECTORY_CONFLICT and outcome.report is not None:
        print_conflicts(_console, request.requested_name, outcome.report)
    elif kind is OutcomeKind.STALE_ABORT and outcome.decision is not None and outcome.decision.advisory_message:
        print_stale_advisory(_err_console, outcome.decision.advisory_message)
    elif kind is OutcomeKind.CREATED:
        if outcome.legacy_runtime:
            print_legacy_runtime(_console, platform.python_version(), settings.min_runtime_version)
        print_created(_console, request)


@app.command()
def create(
    project_directory: Optional[str] = typer.Argument(
        None,
        metavar="<project-directory>",
        help="Directory (and package name) of the new project.",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Print additional logs."),
    info: bool = typer.Option(False, "--info", help="Print environment debug info."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Create a new app in <project-directory>."""

    _configure_logging(verbose)

    if info:
        print_environment_info(_console)
        return

    if not project_directory:
        print_usage(_err_console, PROG_NAME)
        raise typer.Exit(1)

    settings = AppSettings()
    reporter = SpinnerReporter(_console)
    validator = NameValidator()
    gate = VersionGate(settings, hooks=ProgressHooks(start=reporter.start, finish=reporter.finish))
    initializer = ScaffoldInitializer(settings, validator=validator, gate=gate)

    request = ProjectRequest.from_input(project_directory)
    outcome = asyncio.run(initializer.run(request))
    _render(outcome, validator, settings)
    raise typer.Exit(outcome.exit_code)


def run() -> None:
    app(prog_name=PROG_NAME)
