"""create-js-backend CLI entry point."""

import typer

from create_js_backend.cli.create_cmd import create

app = typer.Typer(
    name="create-js-backend",
    help="A CLI to create new Node.js backend projects with boilerplate.",
    add_completion=False,
)

# Single command: invoked directly as `create-js-backend <project-name>`
app.command()(create)
