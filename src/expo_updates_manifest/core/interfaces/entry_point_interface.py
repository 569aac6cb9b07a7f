from __future__ import annotations

from abc import ABC, abstractmethod

from expo_updates_manifest.core.domain.project_config import ProjectConfig


class IEntryPointResolver(ABC):
    """Resolves the JavaScript entry point of a project for a platform."""

    @abstractmethod
    def resolve_entry_point(
        self, project_root: str, platform: str, project_config: ProjectConfig
    ) -> str:
        """Return the entry point path relative to the project root."""
