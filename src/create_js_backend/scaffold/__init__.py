"""Boilerplate copying for new projects."""

from create_js_backend.scaffold.copier import boilerplate_dir, copy_boilerplate, remove_existing

__all__ = ["boilerplate_dir", "copy_boilerplate", "remove_existing"]
