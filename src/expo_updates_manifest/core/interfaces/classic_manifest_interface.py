from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IClassicManifestProvider(ABC):
    """Produces the classic (Expo Go) manifest for a project."""

    @abstractmethod
    async def get_manifest_response(
        self, project_root: str, platform: str, host: str | None
    ) -> dict[str, Any]:
        """Return the classic manifest response; the manifest lives under ``exp``."""
