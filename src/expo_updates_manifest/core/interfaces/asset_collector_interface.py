from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

AssetUrlBuilder = Callable[[str], str]


class IAssetCollector(ABC):
    """Collects the static assets referenced by a project bundle."""

    @abstractmethod
    async def collect_manifest_assets(
        self,
        project_root: str,
        exp: dict[str, Any],
        url_builder: AssetUrlBuilder,
    ) -> list[dict[str, Any]]:
        """Return one asset descriptor per asset, in a stable order.

        ``url_builder`` maps an asset path relative to the project root to the
        URL a client fetches it from.
        """
