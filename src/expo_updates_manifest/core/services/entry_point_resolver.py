from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from expo_updates_manifest.core.common.exceptions import EntryPointNotFoundError
from expo_updates_manifest.core.domain.project_config import ProjectConfig
from expo_updates_manifest.core.interfaces.entry_point_interface import (
    IEntryPointResolver,
)

logger = logging.getLogger(__name__)


def _candidates(platform: str, project_config: ProjectConfig) -> list[str]:
    candidates: list[str] = []
    configured = project_config.exp.get("entryPoint")
    if isinstance(configured, str) and configured:
        candidates.append(configured)
    main = project_config.pkg.get("main")
    if isinstance(main, str) and main:
        candidates.append(main)
    candidates.extend(
        [
            f"index.{platform}.js",
            "index.js",
            f"index.{platform}.ts",
            f"index.{platform}.tsx",
            "index.ts",
            "index.tsx",
            "App.js",
        ]
    )
    return candidates


class EntryPointResolver(IEntryPointResolver):
    """Finds the first existing entry point file for a platform."""

    def resolve_entry_point(
        self, project_root: str, platform: str, project_config: ProjectConfig
    ) -> str:
        root = Path(project_root)
        for candidate in _candidates(platform, project_config):
            relative = PurePosixPath(candidate.replace("\\", "/"))
            if relative.is_absolute():
                # Absolute paths inside the project are made relative
                try:
                    relative = PurePosixPath(
                        Path(candidate).resolve().relative_to(root.resolve()).as_posix()
                    )
                except ValueError:
                    logger.warning(
                        "Ignoring entry point %s outside of %s", candidate, project_root
                    )
                    continue
            options = [relative]
            if not relative.suffix:
                # package.json "main" may omit the extension
                options += [relative.with_suffix(ext) for ext in (".js", ".ts", ".tsx")]
            for option in options:
                if (root / option).is_file():
                    return str(option)

        raise EntryPointNotFoundError(
            f"Unable to resolve entry point for platform {platform!r} in {project_root}",
            platform=platform,
        )
