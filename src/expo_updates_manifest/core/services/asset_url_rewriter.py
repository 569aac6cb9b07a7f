from __future__ import annotations

import logging
import re
from typing import Any

from expo_updates_manifest.core.common.exceptions import InvalidBundleUrlError
from expo_updates_manifest.core.constants import ASSETS_PATH_SEGMENT
from expo_updates_manifest.core.interfaces.asset_collector_interface import (
    AssetUrlBuilder,
    IAssetCollector,
)

logger = logging.getLogger(__name__)

# Leading scheme://host/ of an absolute http(s) URL
_BUNDLE_ORIGIN_PATTERN = re.compile(r"^https?://.*?/")


def get_bundle_origin(bundle_url: str) -> str:
    """Return the ``scheme://host/`` prefix of ``bundle_url``.

    Raises:
        InvalidBundleUrlError: If the URL is not an absolute http(s) URL
    """
    match = _BUNDLE_ORIGIN_PATTERN.match(bundle_url or "")
    if match is None:
        raise InvalidBundleUrlError(
            f"Bundle URL is not an absolute http(s) URL: {bundle_url!r}",
            bundle_url=bundle_url,
        )
    return match.group(0)


def build_asset_url_builder(bundle_url: str) -> AssetUrlBuilder:
    """Return a function mapping relative asset paths to URLs on the bundle host."""
    prefix = get_bundle_origin(bundle_url) + ASSETS_PATH_SEGMENT

    def _asset_url(path: str) -> str:
        return prefix + path.lstrip("/")

    return _asset_url


class AssetUrlRewriter:
    """Resolves project assets into descriptors with absolute URLs."""

    def __init__(self, asset_collector: IAssetCollector) -> None:
        self._asset_collector = asset_collector

    async def resolve_assets(
        self, project_root: str, exp: dict[str, Any], bundle_url: str
    ) -> list[dict[str, Any]]:
        url_builder = build_asset_url_builder(bundle_url)
        assets = await self._asset_collector.collect_manifest_assets(
            project_root, exp, url_builder
        )
        logger.debug("Resolved %d assets for %s", len(assets), project_root)
        return list(assets)
