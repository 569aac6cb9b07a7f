"""Reads Expo project configuration from ``package.json`` and ``app.json``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from expo_updates_manifest.core.common.exceptions import ProjectConfigError
from expo_updates_manifest.core.domain.project_config import ProjectConfig
from expo_updates_manifest.core.interfaces.project_config_interface import (
    IProjectConfigLoader,
)

logger = logging.getLogger(__name__)

APP_CONFIG_FILENAMES = ("app.json", "app.config.json")


def _read_json(path: Path, project_root: str) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ProjectConfigError(
            f"Invalid JSON in {path.name}: {e}", project_root=project_root
        ) from e
    if not isinstance(data, dict):
        raise ProjectConfigError(
            f"{path.name} must contain a JSON object", project_root=project_root
        )
    return data


def _installed_sdk_version(root: Path) -> str | None:
    """Return ``<major>.0.0`` of the installed ``expo`` package, if any."""
    expo_package = root / "node_modules" / "expo" / "package.json"
    if not expo_package.is_file():
        return None
    try:
        with expo_package.open(encoding="utf-8") as f:
            version = json.load(f).get("version")
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Unable to read %s: %s", expo_package, e)
        return None
    if not isinstance(version, str) or not version.split(".")[0].isdigit():
        return None
    return f"{version.split('.')[0]}.0.0"


class ProjectConfigLoader(IProjectConfigLoader):
    """Loads the Expo config of a project from its static JSON files."""

    def get_config(self, project_root: str) -> ProjectConfig:
        root = Path(project_root)
        package_json = root / "package.json"
        if not package_json.is_file():
            raise ProjectConfigError(
                f"No package.json found in project root {project_root}",
                project_root=project_root,
            )
        pkg = _read_json(package_json, project_root)

        root_config: dict[str, Any] | None = None
        config_path: Path | None = None
        for filename in APP_CONFIG_FILENAMES:
            candidate = root / filename
            if candidate.is_file():
                root_config = _read_json(candidate, project_root)
                config_path = candidate
                break

        exp: dict[str, Any] = {}
        if root_config is not None:
            expo_section = root_config.get("expo", root_config)
            if not isinstance(expo_section, dict):
                raise ProjectConfigError(
                    f"The expo key in {config_path.name} must be an object",
                    project_root=project_root,
                )
            exp = dict(expo_section)

        warnings: list[str] = []
        if pkg.get("name"):
            exp.setdefault("name", pkg["name"])
            exp.setdefault("slug", pkg["name"])
        if pkg.get("version"):
            exp.setdefault("version", pkg["version"])
        if not exp.get("name"):
            warnings.append("Project has no name in app.json or package.json")

        if "sdkVersion" not in exp:
            sdk_version = _installed_sdk_version(root)
            if sdk_version:
                exp["sdkVersion"] = sdk_version

        for warning in warnings:
            logger.warning("%s (%s)", warning, project_root)

        return ProjectConfig(
            exp=exp,
            pkg=pkg,
            root_config=root_config,
            config_path=str(config_path) if config_path else None,
            warnings=warnings,
        )
