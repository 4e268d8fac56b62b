"""Rich terminal output for the generator.

Provides the run header, section titles, spinner-wrapped steps with
success/failure lines, and the final summary with next-step hints.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from create_js_backend.models.result import GenerationResult, StepOutcome

if TYPE_CHECKING:
    from create_js_backend.models.config import GeneratorConfig


def render_header(project_name: str, console: Console) -> None:
    console.print(f"\n[blue]Creating new project: {escape(project_name)}[/blue]\n")


def render_section(title: str, hint: str, console: Console) -> None:
    """Print a section title followed by a dim one-line hint."""
    console.print(f"\n[magenta]--- {escape(title)} ---[/magenta]")
    console.print(f"[dim]{escape(hint)}[/dim]")


@contextmanager
def step_status(message: str, console: Console) -> Iterator[None]:
    """Show a spinner with message while the wrapped step runs."""
    with console.status(escape(message)):
        yield


def step_succeeded(message: str, console: Console) -> None:
    console.print(f"[green]✓ {escape(message)}[/green]")


def step_failed(message: str, detail: str, console: Console) -> None:
    """Print a failed step followed by the underlying error message."""
    console.print(f"[red]✗ {escape(message)}[/red]")
    if detail:
        console.print(f"[red]{escape(detail)}[/red]")


def render_info(message: str, console: Console) -> None:
    console.print(f"[yellow]{escape(message)}[/yellow]")


def render_summary(
    result: GenerationResult, config: GeneratorConfig, console: Console
) -> None:
    """Render the completion banner and next-step hints.

    The install hint is shown only when dependencies were not installed
    (skipped or failed).
    """
    pm = config.package_manager
    console.print(
        f'\n[green]\U0001f389 Project "{escape(result.project_name)}" created successfully![/green]'
    )
    console.print("\n[cyan]Next steps:[/cyan]")
    console.print(f"[cyan]  cd {escape(result.project_name)}[/cyan]")
    if result.install != StepOutcome.OK:
        console.print(f"[cyan]  {pm} install[/cyan]")
    console.print(f"[cyan]  {pm} run dev (or {pm} start)[/cyan]")
    console.print("[cyan]  Don't forget to configure your .env file![/cyan]")
    console.print("\nHappy coding!")
