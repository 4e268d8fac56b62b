"""Generation state and result models.

GenerationState follows the linear run: every state after CHECK_EXISTING
only moves forward, and ABORTED is the only terminal state reached
before DONE.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class GenerationState(str, Enum):
    """Where a generator run currently is (or where it stopped)."""

    START = "start"
    CHECK_EXISTING = "check_existing"
    ABORTED = "aborted"
    CLEANED = "cleaned"
    COPYING = "copying"
    METADATA_PROMPT = "metadata_prompt"
    MANIFEST_MERGE = "manifest_merge"
    INSTALL_PROMPT = "install_prompt"
    VCS_INIT = "vcs_init"
    DONE = "done"


class StepOutcome(str, Enum):
    """Outcome of an optional, non-fatal step."""

    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"


class GenerationResult(BaseModel):
    """Summary of a single generator run."""

    model_config = {"extra": "forbid"}

    project_name: str
    target: Path
    state: GenerationState = GenerationState.START
    replaced_existing: bool = False
    manifest: dict[str, Any] = Field(default_factory=dict)
    install: StepOutcome = StepOutcome.SKIPPED
    vcs: StepOutcome = StepOutcome.SKIPPED

    @property
    def aborted(self) -> bool:
        return self.state == GenerationState.ABORTED

    @property
    def completed(self) -> bool:
        return self.state == GenerationState.DONE
