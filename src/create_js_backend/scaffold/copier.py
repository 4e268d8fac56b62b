"""Copy the bundled boilerplate tree into a new project directory.

The boilerplate is an opaque asset tree: files are copied byte-for-byte
with their relative layout, nothing is rendered or rewritten here.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from create_js_backend.errors import BoilerplateCopyError, DirectoryRemovalError


def boilerplate_dir() -> Path:
    """Return the path to the boilerplate tree shipped with the package."""
    return Path(__file__).parent / "boilerplate"


def remove_existing(target: Path) -> None:
    """Remove an existing directory (recursively) or file at target.

    Raises:
        DirectoryRemovalError: If the path cannot be removed.
    """
    try:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
    except OSError as e:
        raise DirectoryRemovalError(target, e.strerror or str(e)) from e


def copy_boilerplate(source: Path, target: Path) -> list[str]:
    """Recursively copy source into target, overwriting existing entries.

    Args:
        source: Boilerplate directory to copy from.
        target: Project directory to copy into (created if missing).

    Returns:
        Sorted list of copied file paths, relative to target.

    Raises:
        BoilerplateCopyError: If source is missing or the copy fails.
    """
    if not source.is_dir():
        raise BoilerplateCopyError(source, target, "boilerplate directory not found")

    try:
        shutil.copytree(source, target, dirs_exist_ok=True)
    except shutil.Error as e:
        # copytree collects per-file failures as (src, dst, reason) tuples
        first = e.args[0][0] if e.args and e.args[0] else None
        reason = first[2] if first else str(e)
        raise BoilerplateCopyError(source, target, reason) from e
    except OSError as e:
        raise BoilerplateCopyError(source, target, e.strerror or str(e)) from e

    return sorted(
        path.relative_to(source).as_posix() for path in source.rglob("*") if path.is_file()
    )
