"""Exception hierarchy for project generation.

Fatal errors (removal, copy, manifest, answers, config) stop the run and
map to a non-zero exit code. CommandError is raised by command runners
when an executable cannot be started and is handled by the optional
steps as a non-fatal failure.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for all project generation errors."""


class ConfigError(GeneratorError):
    """Raised when the generator configuration is invalid."""


class DirectoryRemovalError(GeneratorError):
    """Raised when an existing target directory cannot be removed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not remove {path}: {reason}")


class BoilerplateCopyError(GeneratorError):
    """Raised when the boilerplate tree cannot be copied into the target."""

    def __init__(self, source: Path, target: Path, reason: str) -> None:
        self.source = source
        self.target = target
        self.reason = reason
        super().__init__(f"Could not copy {source} to {target}: {reason}")


class ManifestError(GeneratorError):
    """Raised when the project manifest cannot be read, parsed, or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InvalidAnswerError(GeneratorError):
    """Raised when an answer provider cannot produce a valid answer."""

    def __init__(self, question: str, value: object, reason: str) -> None:
        self.question = question
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid answer for '{question}' ({value!r}): {reason}")


class CommandError(GeneratorError):
    """Raised when an external command cannot be started at all."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"{command}: {reason}")
