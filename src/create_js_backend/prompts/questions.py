"""Question definitions for the interactive steps.

Each step asks a fixed, ordered set of named questions. Providers turn
a question list into an answers mapping keyed by question name, so the
orchestration never depends on how answers are obtained.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from create_js_backend.models.config import GeneratorConfig

QuestionKind = Literal["confirm", "input", "choice"]


@dataclass
class Question:
    """A single named prompt with its default and constraints."""

    name: str
    kind: QuestionKind
    message: str
    default: Any = None
    choices: list[str] = field(default_factory=list)
    validate: Callable[[str], bool | str] | None = None  # True or an error message

    def check(self, value: Any) -> str | None:
        """Return an error message if value is not acceptable, else None."""
        if self.kind == "confirm":
            if not isinstance(value, bool):
                return "expected yes or no"
            return None
        if not isinstance(value, str):
            return "expected text"
        if self.kind == "choice" and value not in self.choices:
            return f"must be one of: {', '.join(self.choices)}"
        if self.validate is not None:
            outcome = self.validate(value)
            if outcome is not True:
                return outcome if isinstance(outcome, str) else "invalid value"
        return None


def _non_empty_package_name(value: str) -> bool | str:
    return len(value) > 0 or "Package name cannot be empty."


def overwrite_question(project_name: str) -> Question:
    return Question(
        name="overwrite",
        kind="confirm",
        message=f'Directory "{project_name}" already exists. Overwrite?',
        default=False,
    )


def metadata_questions(config: GeneratorConfig, target: Path) -> list[Question]:
    """Questions for the manifest fields, in the order they are asked.

    Names match the manifest keys they fill (the entry point is "main").
    """
    return [
        Question(
            name="name",
            kind="input",
            message="package name:",
            default=target.name,
            validate=_non_empty_package_name,
        ),
        Question(
            name="description",
            kind="input",
            message="description:",
            default=config.default_description,
        ),
        Question(
            name="version",
            kind="input",
            message="version:",
            default=config.default_version,
        ),
        Question(name="author", kind="input", message="author:", default=""),
        Question(
            name="license",
            kind="choice",
            message="license:",
            choices=list(config.license_choices),
            default=config.license_choices[0],
        ),
        Question(
            name="main",
            kind="input",
            message="entry point:",
            default=config.default_entry_point,
        ),
    ]


def install_question(config: GeneratorConfig) -> Question:
    return Question(
        name="install_deps",
        kind="confirm",
        message=f"Install {config.package_manager} dependencies ({config.package_manager} install)?",
        default=True,
    )
