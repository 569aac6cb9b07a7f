"""URL and module-name helpers shared by the manifest services."""

from __future__ import annotations

import posixpath

from expo_updates_manifest.core.constants import SCRIPT_EXTENSIONS


def strip_script_extension(module_name: str) -> str:
    """Remove a trailing script extension, e.g. ``index.js`` -> ``index``."""
    root, extension = posixpath.splitext(module_name)
    return root if extension in SCRIPT_EXTENSIONS else module_name
