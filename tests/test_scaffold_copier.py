"""Tests for boilerplate copying and existing-directory removal."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from create_js_backend.errors import BoilerplateCopyError, DirectoryRemovalError
from create_js_backend.scaffold.copier import boilerplate_dir, copy_boilerplate, remove_existing


def _tree(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes() for p in root.rglob("*") if p.is_file()
    }


class TestCopyBoilerplate:
    def test_copies_tree_byte_for_byte(self, boilerplate: Path, tmp_path: Path) -> None:
        target = tmp_path / "demo"
        copy_boilerplate(boilerplate, target)
        assert _tree(target) == _tree(boilerplate)

    def test_returns_relative_file_list(self, boilerplate: Path, tmp_path: Path) -> None:
        copied = copy_boilerplate(boilerplate, tmp_path / "demo")
        assert copied == [
            ".env.example",
            "package.json",
            "src/index.js",
            "src/models/user.model.js",
        ]

    def test_overwrites_remnants_in_existing_target(
        self, boilerplate: Path, tmp_path: Path
    ) -> None:
        target = tmp_path / "demo"
        (target / "src").mkdir(parents=True)
        (target / "src" / "index.js").write_text("stale", encoding="utf-8")
        copy_boilerplate(boilerplate, target)
        assert (target / "src" / "index.js").read_text(encoding="utf-8") == "console.log('hi')\n"

    def test_missing_source_raises(self, tmp_path: Path) -> None:
        with pytest.raises(BoilerplateCopyError, match="not found"):
            copy_boilerplate(tmp_path / "nope", tmp_path / "demo")
        assert not (tmp_path / "demo").exists()

    def test_os_error_wrapped(
        self, boilerplate: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _fail(*args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(shutil, "copytree", _fail)
        with pytest.raises(BoilerplateCopyError) as exc_info:
            copy_boilerplate(boilerplate, tmp_path / "demo")
        assert exc_info.value.reason == "Permission denied"

    def test_bundled_boilerplate_has_manifest(self) -> None:
        assert (boilerplate_dir() / "package.json").is_file()


class TestRemoveExisting:
    def test_removes_directory_recursively(self, tmp_path: Path) -> None:
        target = tmp_path / "demo"
        (target / "nested").mkdir(parents=True)
        (target / "nested" / "file.txt").write_text("x", encoding="utf-8")
        remove_existing(target)
        assert not target.exists()

    def test_removes_plain_file(self, tmp_path: Path) -> None:
        target = tmp_path / "demo"
        target.write_text("x", encoding="utf-8")
        remove_existing(target)
        assert not target.exists()

    def test_failure_raises_removal_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = tmp_path / "demo"
        target.mkdir()

        def _fail(path, *args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(shutil, "rmtree", _fail)
        with pytest.raises(DirectoryRemovalError) as exc_info:
            remove_existing(target)
        assert exc_info.value.path == target
        assert target.exists()
