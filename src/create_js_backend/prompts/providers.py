"""Answer providers: where answers to the generator's questions come from.

TerminalAnswerProvider asks the operator through Rich prompts.
ScriptedAnswerProvider returns pre-recorded answers (falling back to
defaults) and is used for tests and non-interactive runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from create_js_backend.errors import InvalidAnswerError
from create_js_backend.prompts.questions import Question


class VerbatimPrompt(Prompt):
    """Free-text prompt that returns the line exactly as typed (no trimming)."""

    def process_response(self, value: str) -> str:
        return value


class AnswerProvider(ABC):
    """Produces answers for an ordered list of questions."""

    @abstractmethod
    def ask(self, questions: list[Question]) -> dict[str, Any]:
        """Answer every question, in order.

        Returns:
            Mapping of question name to answer. Confirm answers are bool,
            all others are str.
        """
        ...


class TerminalAnswerProvider(AnswerProvider):
    """Ask questions interactively on the terminal."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def ask(self, questions: list[Question]) -> dict[str, Any]:
        return {question.name: self._ask_one(question) for question in questions}

    def _ask_one(self, question: Question) -> Any:
        message = escape(question.message)
        if question.kind == "confirm":
            return Confirm.ask(message, default=bool(question.default), console=self.console)

        if question.kind == "choice":
            return Prompt.ask(
                message,
                choices=question.choices,
                default=question.default,
                console=self.console,
            )

        default = question.default if question.default is not None else ""
        while True:
            value = VerbatimPrompt.ask(
                message,
                default=default,
                show_default=bool(default),
                console=self.console,
            )
            error = question.check(value)
            if error is None:
                return value
            self.console.print(f"[red]>> {escape(error)}[/red]")


class ScriptedAnswerProvider(AnswerProvider):
    """Return scripted answers, using each question's default when absent.

    Every answer is validated against its question; an invalid answer
    raises InvalidAnswerError instead of being passed through.

    Args:
        answers: Mapping of question name to answer.
    """

    def __init__(self, answers: Mapping[str, Any] | None = None) -> None:
        self.answers = dict(answers or {})
        self.asked: list[str] = []

    def ask(self, questions: list[Question]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for question in questions:
            self.asked.append(question.name)
            value = self.answers.get(question.name, question.default)
            if question.kind != "confirm" and value is None:
                value = ""
            error = question.check(value)
            if error is not None:
                raise InvalidAnswerError(question.name, value, error)
            result[question.name] = value
        return result
