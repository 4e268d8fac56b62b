"""Project manifest model and JSON persistence."""

from create_js_backend.manifest.models import ManifestFields
from create_js_backend.manifest.store import (
    MANIFEST_NAME,
    merge_manifest,
    read_manifest,
    update_manifest,
    write_manifest,
)

__all__ = [
    "MANIFEST_NAME",
    "ManifestFields",
    "merge_manifest",
    "read_manifest",
    "update_manifest",
    "write_manifest",
]
