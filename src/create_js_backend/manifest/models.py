"""The manifest fields collected from the operator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class ManifestFields(BaseModel):
    """The six package.json fields the generator fills in.

    When validated with a ``license_choices`` context, the license must
    be one of those choices.
    """

    model_config = {"extra": "forbid"}

    name: str = Field(min_length=1)
    description: str = ""
    version: str
    author: str = ""
    license: str
    main: str

    @field_validator("license")
    @classmethod
    def _license_in_choices(cls, value: str, info: ValidationInfo) -> str:
        choices = (info.context or {}).get("license_choices")
        if choices is not None and value not in choices:
            raise ValueError(f"license must be one of: {', '.join(choices)}")
        return value

    @classmethod
    def from_answers(
        cls, answers: dict[str, Any], license_choices: list[str] | None = None
    ) -> ManifestFields:
        context = {"license_choices": license_choices} if license_choices is not None else None
        return cls.model_validate(answers, context=context)
