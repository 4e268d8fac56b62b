"""Project generator: the linear create-a-project run.

ProjectGenerator walks the states in GenerationState order:

    START -> CHECK_EXISTING -> [ABORTED | CLEANED] -> COPYING
          -> METADATA_PROMPT -> MANIFEST_MERGE -> INSTALL_PROMPT
          -> VCS_INIT -> DONE

Removal, copy, and manifest failures are fatal and re-raised after being
reported. Install and VCS failures are reported and the run continues.
The target directory is passed to every step; the process working
directory is never changed.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from create_js_backend.cli.output import (
    render_header,
    render_info,
    render_section,
    render_summary,
    step_failed,
    step_status,
    step_succeeded,
)
from create_js_backend.errors import (
    BoilerplateCopyError,
    CommandError,
    DirectoryRemovalError,
    InvalidAnswerError,
    ManifestError,
)
from create_js_backend.execution.runner import CommandResult, CommandRunner
from create_js_backend.manifest.models import ManifestFields
from create_js_backend.manifest.store import update_manifest
from create_js_backend.models.config import GeneratorConfig
from create_js_backend.models.result import GenerationResult, GenerationState, StepOutcome
from create_js_backend.prompts.providers import AnswerProvider
from create_js_backend.prompts.questions import (
    install_question,
    metadata_questions,
    overwrite_question,
)
from create_js_backend.scaffold.copier import copy_boilerplate, remove_existing


class ProjectGenerator:
    """Create a new project from the boilerplate.

    Args:
        config: Generator settings (tools, boilerplate location, defaults).
        answers: Source of answers for every interactive question.
        runner: Runs the package manager and VCS commands.
        console: Rich console for all operator-facing output.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        answers: AnswerProvider,
        runner: CommandRunner,
        console: Console,
    ) -> None:
        self.config = config
        self.answers = answers
        self.runner = runner
        self.console = console

    def generate(self, project_name: str, cwd: Path | None = None) -> GenerationResult:
        """Run every step for project_name, relative to cwd.

        Returns:
            GenerationResult in state DONE, or ABORTED if the operator
            declined to overwrite an existing directory.

        Raises:
            DirectoryRemovalError: Existing directory could not be removed.
            BoilerplateCopyError: Boilerplate could not be copied.
            InvalidAnswerError: Answers did not form valid manifest fields.
            ManifestError: Manifest could not be read or written.
        """
        base = cwd if cwd is not None else Path.cwd()
        target = base / project_name
        result = GenerationResult(project_name=project_name, target=target)

        render_header(project_name, self.console)

        result.state = GenerationState.CHECK_EXISTING
        existed = target.exists()
        if not self.check_existing(target, project_name):
            result.state = GenerationState.ABORTED
            return result
        if existed:
            result.replaced_existing = True
            result.state = GenerationState.CLEANED

        result.state = GenerationState.COPYING
        self.copy(target)

        result.state = GenerationState.METADATA_PROMPT
        fields = self.collect_metadata(target)

        result.state = GenerationState.MANIFEST_MERGE
        result.manifest = self.merge_manifest(target, fields)

        result.state = GenerationState.INSTALL_PROMPT
        result.install = self.install(target)

        result.state = GenerationState.VCS_INIT
        result.vcs = self.init_vcs(target)

        result.state = GenerationState.DONE
        render_summary(result, self.config, self.console)
        return result

    def check_existing(self, target: Path, project_name: str) -> bool:
        """Ask before replacing an existing target; False means abort."""
        if not target.exists():
            return True

        answers = self.answers.ask([overwrite_question(project_name)])
        if not answers["overwrite"]:
            render_info("Aborting project creation.", self.console)
            return False

        try:
            with step_status("Removing existing directory...", self.console):
                remove_existing(target)
        except DirectoryRemovalError as e:
            step_failed("Failed to remove existing directory.", e.reason, self.console)
            raise
        step_succeeded("Existing directory removed.", self.console)
        return True

    def copy(self, target: Path) -> list[str]:
        try:
            with step_status("Copying boilerplate files...", self.console):
                copied = copy_boilerplate(self.config.boilerplate_dir, target)
        except BoilerplateCopyError as e:
            step_failed("Error copying boilerplate!", e.reason, self.console)
            raise
        step_succeeded("Boilerplate copied!", self.console)
        return copied

    def collect_metadata(self, target: Path) -> ManifestFields:
        render_section(
            "Project Metadata Setup",
            f"This will guide you through setting up {self.config.manifest_name}.",
            self.console,
        )
        answers = self.answers.ask(metadata_questions(self.config, target))
        try:
            return ManifestFields.from_answers(answers, self.config.license_choices)
        except ValidationError as e:
            first = e.errors()[0]
            field_name = str(first["loc"][0]) if first["loc"] else "manifest"
            raise InvalidAnswerError(field_name, answers.get(field_name), first["msg"]) from e

    def merge_manifest(self, target: Path, fields: ManifestFields) -> dict:
        manifest_name = self.config.manifest_name
        try:
            merged = update_manifest(target, fields, manifest_name)
        except ManifestError as e:
            step_failed(f"Failed to update {manifest_name}.", e.reason, self.console)
            raise
        step_succeeded(f"{manifest_name} updated with your details!", self.console)
        return merged

    def install(self, target: Path) -> StepOutcome:
        """Prompt for and run the dependency install; failures are non-fatal."""
        answers = self.answers.ask([install_question(self.config)])
        if not answers["install_deps"]:
            return StepOutcome.SKIPPED

        pm = self.config.package_manager
        return self._run_optional(
            pm,
            ["install"],
            target,
            status=f"Installing {pm} dependencies...",
            succeeded="Dependencies installed!",
            failed="Dependency installation failed!",
        )

    def init_vcs(self, target: Path) -> StepOutcome:
        """Initialize the repository; failures are non-fatal."""
        vcs = self.config.vcs
        return self._run_optional(
            vcs,
            ["init"],
            target,
            status=f"Initializing {vcs} repository...",
            succeeded=f"{vcs} repository initialized!",
            failed=f"{vcs} initialization failed!",
        )

    def _run_optional(
        self,
        command: str,
        args: list[str],
        cwd: Path,
        status: str,
        succeeded: str,
        failed: str,
    ) -> StepOutcome:
        outcome: CommandResult | None = None
        error = ""
        try:
            with step_status(status, self.console):
                outcome = self.runner.run(command, args, cwd)
        except CommandError as e:
            error = str(e)

        if outcome is not None and outcome.ok:
            step_succeeded(succeeded, self.console)
            return StepOutcome.OK

        if outcome is not None:
            error = outcome.error_message()
        step_failed(failed, error, self.console)
        return StepOutcome.FAILED
