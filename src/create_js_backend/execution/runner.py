"""Command runners for the external package manager and VCS tools.

CommandRunner is the seam between the generator and real processes:
SubprocessRunner spawns them, tests substitute a recording fake.
"""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from create_js_backend.errors import CommandError


@dataclass
class CommandResult:
    """Exit status and captured output of one command invocation."""

    command: str
    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def error_message(self) -> str:
        """Describe a failed invocation, preferring the last stderr line."""
        invocation = " ".join([self.command, *self.args])
        detail = self.stderr.strip().splitlines()
        if detail:
            return f"Command failed with exit code {self.returncode}: {invocation}\n{detail[-1]}"
        return f"Command failed with exit code {self.returncode}: {invocation}"


class CommandRunner(ABC):
    """Runs an external executable in a given working directory."""

    @abstractmethod
    def run(self, command: str, args: list[str], cwd: Path) -> CommandResult:
        """Run command with args in cwd and wait for it to exit.

        Raises:
            CommandError: If the executable cannot be started.
        """
        ...


class SubprocessRunner(CommandRunner):
    """Run commands with subprocess, capturing output. No timeout is applied."""

    def run(self, command: str, args: list[str], cwd: Path) -> CommandResult:
        try:
            completed = subprocess.run(
                [command, *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            reason = e.strerror or str(e)
            if e.filename is not None:
                reason = f"{reason}: {e.filename}"
            raise CommandError(command, reason) from e

        return CommandResult(
            command=command,
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
