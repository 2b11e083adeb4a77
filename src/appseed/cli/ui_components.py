"""Componentes de UI para CLI (Rich).

Separan la presentación de los resultados (`ScaffoldOutcome`) de la lógica
de los comandos.
"""

from __future__ import annotations

from rich.console import Console
from rich.status import Status
from rich.text import Text

from appseed.core.domain.models import ConflictReport, ProjectRequest, ValidationVerdict


def display_name(value: str) -> str:
    """Nombre imprimible aunque venga de un argv no UTF-8 (surrogates)."""

    return value.encode("utf-8", errors="backslashreplace").decode("utf-8")


def print_usage(console: Console, prog: str) -> None:
    console.print("Please specify the project directory:", style="red")
    console.print(f"  [cyan]{prog}[/cyan] [green]<project-directory>[/green]")
    console.print()
    console.print("For example:")
    console.print(f"  [cyan]{prog}[/cyan] [green]my-app[/green]")
    console.print()
    console.print(f"Run [cyan]{prog} --help[/cyan] to see all options.")


def print_invalid_name(
    console: Console,
    name: str,
    verdict: ValidationVerdict,
    reserved_names: tuple[str, ...],
) -> None:
    if verdict.reserved_collision:
        console.print(
            Text.assemble(
                ("Cannot create a project named ", "red"),
                (f'"{display_name(name)}"', "green"),
                (" because a dependency with the same name exists.\n", "red"),
                ("Due to the way npm works, the following names are not allowed:\n", "red"),
            )
        )
        for dep in reserved_names:
            console.print(f"  {dep}", style="cyan", highlight=False)
    else:
        console.print(
            Text.assemble(
                ("Cannot create a project named ", "red"),
                (f'"{display_name(name)}"', "green"),
                (" because of npm naming restrictions:\n", "red"),
            )
        )
        for problem in [*verdict.errors, *verdict.warnings]:
            console.print(f"  * {problem}", style="red", highlight=False)
    console.print("\nPlease choose a different project name.", style="red")


def print_conflicts(console: Console, name: str, report: ConflictReport) -> None:
    console.print(
        Text.assemble(
            "The directory ",
            (display_name(name), "green"),
            " contains files that could conflict:",
        )
    )
    console.print()
    for entry in report.conflicts:
        if entry.is_directory:
            console.print(f"  {display_name(entry.name)}/", style="blue", highlight=False)
        else:
            console.print(f"  {display_name(entry.name)}", highlight=False)
    console.print()
    console.print("Either try using a new directory name, or remove the files listed above.")


def print_not_a_directory(console: Console, request: ProjectRequest) -> None:
    console.print(
        Text.assemble(
            ("Cannot create a project in ", "red"),
            (display_name(str(request.resolved_path)), "green"),
            (" because a file with that name already exists.", "red"),
        )
    )


def print_stale_advisory(console: Console, message: str) -> None:
    console.print()
    console.print(message, style="yellow", highlight=False)
    console.print()


def print_legacy_runtime(console: Console, runtime: str, minimum: str) -> None:
    console.print(
        f"You are using Python {runtime} so the project will be bootstrapped with an old "
        f"unsupported version of tools.\n\n"
        f"Please update to Python {minimum} or higher for a better, fully supported experience.\n",
        style="yellow",
        highlight=False,
    )


def print_created(console: Console, request: ProjectRequest) -> None:
    console.print(Text.assemble("Created a new app in ", (display_name(str(request.resolved_path)), "green"), "."))
    console.print()


class SpinnerReporter:
    """Spinner de Rich para las fuentes de versión que muestran progreso."""

    def __init__(self, console: Console) -> None:
        self._console = console
        self._status: Status | None = None

    def start(self, description: str) -> None:
        self._status = self._console.status(description)
        self._status.start()

    def finish(self, description: str, ok: bool) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
        if ok:
            self._console.print(f"[green]✔[/green] {description}")
        else:
            self._console.print(f"[red]✖[/red] {description}: request failed, refetching...")
