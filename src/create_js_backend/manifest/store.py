"""Read, merge, and write the project manifest (package.json).

The manifest is a flat JSON object. Collected fields are merged over
whatever the boilerplate shipped: existing keys keep their position,
collected values win on collision, new keys are appended. Writes use
2-space indentation and go through a temp file and rename.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from create_js_backend.errors import ManifestError
from create_js_backend.manifest.models import ManifestFields

MANIFEST_NAME = "package.json"


def read_manifest(path: Path) -> dict[str, Any]:
    """Load a manifest file as a dict.

    Raises:
        ManifestError: If the file is missing, unreadable, not UTF-8,
            not valid JSON, or not a JSON object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestError(path, "manifest not found in project") from None
    except UnicodeDecodeError as e:
        raise ManifestError(path, f"manifest is not valid UTF-8: {e.reason}") from e
    except OSError as e:
        raise ManifestError(path, e.strerror or str(e)) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(path, f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e

    if not isinstance(data, dict):
        raise ManifestError(path, "manifest must be a JSON object")
    return data


def merge_manifest(existing: dict[str, Any], fields: ManifestFields) -> dict[str, Any]:
    """Shallow-merge the collected fields over an existing manifest.

    Returns a new dict; the input is not modified.
    """
    merged = dict(existing)
    merged.update(fields.model_dump())
    return merged


def write_manifest(path: Path, data: dict[str, Any]) -> None:
    """Write a manifest as 2-space indented JSON with a trailing newline.

    Raises:
        ManifestError: If the file cannot be written.
    """
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_text(content, encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise ManifestError(path, e.strerror or str(e)) from e


def update_manifest(
    project_dir: Path, fields: ManifestFields, manifest_name: str = MANIFEST_NAME
) -> dict[str, Any]:
    """Read, merge, and write back the manifest inside project_dir.

    Returns:
        The merged manifest as written.
    """
    path = project_dir / manifest_name
    merged = merge_manifest(read_manifest(path), fields)
    write_manifest(path, merged)
    return merged
