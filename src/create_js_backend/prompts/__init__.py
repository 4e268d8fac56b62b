"""Interactive questions and the providers that answer them."""

from create_js_backend.prompts.providers import (
    AnswerProvider,
    ScriptedAnswerProvider,
    TerminalAnswerProvider,
)
from create_js_backend.prompts.questions import (
    Question,
    install_question,
    metadata_questions,
    overwrite_question,
)

__all__ = [
    "AnswerProvider",
    "Question",
    "ScriptedAnswerProvider",
    "TerminalAnswerProvider",
    "install_question",
    "metadata_questions",
    "overwrite_question",
]
