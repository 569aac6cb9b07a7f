"""
File-system asset collector.

Collects the static assets an Expo project bundles: every file matching the
app config's ``assetBundlePatterns`` plus the icon and splash images the
config references. Each asset is described by its content hash, content
type, extension and the URL it is served from.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
import mimetypes
from pathlib import Path
from typing import Any

from expo_updates_manifest.core.interfaces.asset_collector_interface import (
    AssetUrlBuilder,
    IAssetCollector,
)

logger = logging.getLogger(__name__)

# Dotted paths into the app config that may reference image files
_IMAGE_CONFIG_PATHS = (
    "icon",
    "splash.image",
    "ios.icon",
    "ios.splash.image",
    "android.icon",
    "android.splash.image",
    "android.adaptiveIcon.foregroundImage",
    "android.adaptiveIcon.backgroundImage",
)

_DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _get_path(exp: dict[str, Any], dotted: str) -> Any:
    value: Any = exp
    for part in dotted.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def _expand_pattern(pattern: str) -> str:
    """Make a trailing ``**`` match files at any depth, as in npm globs."""
    if pattern == "**" or pattern.endswith("/**"):
        return pattern + "/*"
    return pattern


def _content_type(path: Path) -> str:
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or _DEFAULT_CONTENT_TYPE


def _md5_file(path: Path) -> str:
    digest = hashlib.md5()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


class FileAssetCollector(IAssetCollector):
    """Collects project assets from the project directory."""

    def find_asset_paths(self, project_root: str, exp: dict[str, Any]) -> list[str]:
        """Return asset paths relative to ``project_root``, sorted and de-duplicated."""
        root = Path(project_root).resolve()
        found: set[str] = set()

        patterns = exp.get("assetBundlePatterns") or []
        if isinstance(patterns, str):
            patterns = [patterns]
        for pattern in patterns:
            if not isinstance(pattern, str) or not pattern or pattern.startswith("/"):
                continue
            if pattern.startswith("./"):
                pattern = pattern[2:]
            for match in root.glob(_expand_pattern(pattern)):
                relative = match.relative_to(root)
                if match.is_file() and "node_modules" not in relative.parts:
                    found.add(relative.as_posix())

        for dotted in _IMAGE_CONFIG_PATHS:
            value = _get_path(exp, dotted)
            if not isinstance(value, str) or not value:
                continue
            candidate = (root / value).resolve()
            try:
                relative = candidate.relative_to(root)
            except ValueError:
                logger.warning("Ignoring asset %s outside of %s", value, project_root)
                continue
            if candidate.is_file():
                found.add(relative.as_posix())
            else:
                logger.warning("Asset %s referenced by %s does not exist", value, dotted)

        return sorted(found)

    def describe_asset(
        self, project_root: str, relative_path: str, url_builder: AssetUrlBuilder
    ) -> dict[str, Any]:
        path = Path(project_root) / relative_path
        file_hash = _md5_file(path)
        return {
            "hash": file_hash,
            "key": file_hash,
            "contentType": _content_type(path),
            "fileExtension": path.suffix,
            "url": url_builder(relative_path),
        }

    async def collect_manifest_assets(
        self,
        project_root: str,
        exp: dict[str, Any],
        url_builder: AssetUrlBuilder,
    ) -> list[dict[str, Any]]:
        paths = await asyncio.to_thread(self.find_asset_paths, project_root, exp)
        assets: list[dict[str, Any]] = []
        for relative_path in paths:
            assets.append(
                await asyncio.to_thread(
                    self.describe_asset, project_root, relative_path, url_builder
                )
            )
        return assets
