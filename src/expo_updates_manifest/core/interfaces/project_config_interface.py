from __future__ import annotations

from abc import ABC, abstractmethod

from expo_updates_manifest.core.domain.project_config import ProjectConfig


class IProjectConfigLoader(ABC):
    """Loads the project configuration for a project root."""

    @abstractmethod
    def get_config(self, project_root: str) -> ProjectConfig:
        """Return the project configuration.

        Raises:
            ProjectConfigError: If no usable project configuration exists
        """
