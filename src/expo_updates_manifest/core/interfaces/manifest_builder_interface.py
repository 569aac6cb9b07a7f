from __future__ import annotations

from abc import ABC, abstractmethod

from expo_updates_manifest.core.domain.manifest import ManifestResponse
from expo_updates_manifest.core.domain.request import IncomingRequest


class IManifestBuilder(ABC):
    """Assembles an Expo Updates manifest for a request."""

    @abstractmethod
    async def build_manifest_response(
        self, project_root: str, request: IncomingRequest
    ) -> ManifestResponse:
        """Build the manifest body and headers.

        Failures from any collaborator propagate unchanged.
        """
