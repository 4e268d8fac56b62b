"""External command execution (package manager, version control)."""

from create_js_backend.execution.runner import CommandResult, CommandRunner, SubprocessRunner

__all__ = ["CommandResult", "CommandRunner", "SubprocessRunner"]
