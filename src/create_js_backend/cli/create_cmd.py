"""The create command: scaffold a new project interactively.

Wires the terminal answer provider, the subprocess runner, and the Rich
console into ProjectGenerator, and maps outcomes to exit codes:
0 on success or operator abort, 1 on a fatal step failure.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from create_js_backend import __version__
from create_js_backend.errors import ConfigError, GeneratorError, InvalidAnswerError
from create_js_backend.execution.runner import SubprocessRunner
from create_js_backend.generator import ProjectGenerator
from create_js_backend.models.config import load_generator_config
from create_js_backend.prompts.providers import TerminalAnswerProvider

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"create-js-backend {__version__}")
        raise typer.Exit()


def _validate_project_name(value: str) -> str:
    if not value or not value.strip():
        raise typer.BadParameter("Project name cannot be empty.")
    if Path(value).is_absolute():
        raise typer.BadParameter("Project name must be relative to the current directory.")
    cwd = Path.cwd().resolve()
    target = (cwd / value).resolve()
    if target == cwd or target in cwd.parents:
        raise typer.BadParameter("Project name must not point at the current directory or a parent of it.")
    return value


def create(
    project_name: str = typer.Argument(
        ...,
        help="Name of the new project (for directory and initial setup)",
        callback=_validate_project_name,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a new Node.js backend project from the bundled boilerplate.

    Copies the boilerplate into ./PROJECT_NAME, asks for the package.json
    details, optionally installs dependencies, and initializes a git
    repository.
    """
    try:
        config = load_generator_config()
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    generator = ProjectGenerator(
        config=config,
        answers=TerminalAnswerProvider(console),
        runner=SubprocessRunner(),
        console=console,
    )

    try:
        generator.generate(project_name)
    except InvalidAnswerError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except GeneratorError:
        # Already reported by the failing step
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted.[/yellow]")
        raise typer.Exit(code=130)
    except EOFError:
        console.print("\n[yellow]Aborted: no more input.[/yellow]")
        raise typer.Exit(code=1)
