from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from expo_updates_manifest.core.interfaces.model_bases import InternalDTO


@dataclass
class ProjectConfig(InternalDTO):
    """Project configuration as read from the project root.

    ``exp`` is the Expo app config (the ``expo`` object of ``app.json``
    merged with defaults), ``pkg`` the parsed ``package.json`` and
    ``root_config`` the raw app config file contents when one exists.
    """

    exp: dict[str, Any]
    pkg: dict[str, Any]
    root_config: dict[str, Any] | None = None
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)
