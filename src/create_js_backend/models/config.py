"""Generator configuration model.

Captures the external tools, bundled asset location, and prompt
defaults with sensible values. A few fields can be overridden from
environment variables; there are no command-line flags for them.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from create_js_backend.errors import ConfigError
from create_js_backend.scaffold.copier import boilerplate_dir as bundled_boilerplate_dir

ENV_PREFIX = "CREATE_JS_BACKEND_"

# Environment variable suffix -> GeneratorConfig field
_ENV_FIELDS: dict[str, str] = {
    "PACKAGE_MANAGER": "package_manager",
    "VCS": "vcs",
    "BOILERPLATE": "boilerplate_dir",
}


class GeneratorConfig(BaseModel):
    """Settings for a single generator run."""

    model_config = {"extra": "forbid"}

    package_manager: str = "npm"
    vcs: str = "git"
    boilerplate_dir: Path = Field(default_factory=bundled_boilerplate_dir)
    manifest_name: str = "package.json"
    license_choices: list[str] = Field(
        default_factory=lambda: ["ISC", "MIT", "UNLICENSED"], min_length=1
    )
    default_description: str = "Boilerplate for JavaScript backend application"
    default_version: str = "1.0.0"
    default_entry_point: str = "index.js"

    @field_validator("package_manager", "vcs", "manifest_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


def load_generator_config(environ: Mapping[str, str] | None = None) -> GeneratorConfig:
    """Build a GeneratorConfig from defaults plus environment overrides.

    Args:
        environ: Mapping to read overrides from. Defaults to os.environ.

    Returns:
        Validated GeneratorConfig instance.

    Raises:
        ConfigError: If an override fails validation.
    """
    if environ is None:
        environ = os.environ

    overrides: dict[str, str] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is not None:
            overrides[field_name] = value

    try:
        return GeneratorConfig.model_validate(overrides)
    except ValidationError as e:
        problems = "; ".join(
            f"{ENV_PREFIX}{_env_suffix(err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e


def _env_suffix(loc: tuple) -> str:
    field_name = str(loc[0]) if loc else ""
    for suffix, name in _ENV_FIELDS.items():
        if name == field_name:
            return suffix
    return field_name.upper()
