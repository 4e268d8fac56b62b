"""Shared fixtures for create-js-backend tests."""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from create_js_backend.errors import CommandError
from create_js_backend.execution.runner import CommandResult, CommandRunner
from create_js_backend.models.config import GeneratorConfig


class RecordingRunner(CommandRunner):
    """CommandRunner fake that records invocations instead of spawning processes.

    Exit codes come from ``returncodes`` (default 0); commands listed in
    ``missing`` raise CommandError as if the binary were not installed.
    """

    def __init__(
        self,
        returncodes: dict[str, int] | None = None,
        missing: set[str] | None = None,
    ) -> None:
        self.returncodes = returncodes or {}
        self.missing = missing or set()
        self.calls: list[tuple[str, list[str], Path]] = []

    def run(self, command: str, args: list[str], cwd: Path) -> CommandResult:
        self.calls.append((command, list(args), cwd))
        if command in self.missing:
            raise CommandError(command, "No such file or directory")
        code = self.returncodes.get(command, 0)
        stderr = f"{command} exploded" if code else ""
        return CommandResult(command=command, args=list(args), returncode=code, stderr=stderr)


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def console_buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def console(console_buffer: StringIO) -> Console:
    """A non-terminal Rich console writing into console_buffer."""
    return Console(file=console_buffer, width=200, color_system=None)


@pytest.fixture
def boilerplate(tmp_path: Path) -> Path:
    """A small boilerplate tree with a manifest and nested files."""
    root = tmp_path / "boilerplate"
    (root / "src" / "models").mkdir(parents=True)
    manifest = {
        "name": "starter",
        "version": "0.0.1",
        "type": "module",
        "scripts": {"dev": "nodemon src/index.js"},
        "dependencies": {"express": "^4.19.2"},
    }
    (root / "package.json").write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    (root / "src" / "index.js").write_text("console.log('hi')\n", encoding="utf-8")
    (root / "src" / "models" / "user.model.js").write_text("export const User = {}\n", encoding="utf-8")
    (root / ".env.example").write_text("PORT=4000\n", encoding="utf-8")
    return root


@pytest.fixture
def config(boilerplate: Path) -> GeneratorConfig:
    return GeneratorConfig(boilerplate_dir=boilerplate)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Directory new projects are created in (the operator's cwd)."""
    path = tmp_path / "work"
    path.mkdir()
    return path
