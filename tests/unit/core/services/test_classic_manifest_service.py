from pathlib import Path
from urllib.parse import parse_qs, urlsplit

import pytest

from expo_updates_manifest.core.common.exceptions import ProjectConfigError
from expo_updates_manifest.core.config.app_config import AppConfig
from expo_updates_manifest.core.services.classic_manifest_service import (
    ClassicManifestService,
)
from expo_updates_manifest.core.services.entry_point_resolver import (
    EntryPointResolver,
)
from expo_updates_manifest.core.services.project_config_loader import (
    ProjectConfigLoader,
)


def make_service(config: AppConfig) -> ClassicManifestService:
    return ClassicManifestService(config, ProjectConfigLoader(), EntryPointResolver())


@pytest.mark.asyncio
async def test_manifest_contains_project_config_and_bundle_url(
    expo_project: Path, app_config: AppConfig
) -> None:
    response = await make_service(app_config).get_manifest_response(
        str(expo_project), "ios", "192.168.0.10:19000"
    )
    exp = response["exp"]

    assert exp["name"] == "Demo"
    assert exp["sdkVersion"] == "45.0.0"
    assert exp["mainModuleName"] == "index"
    assert exp["hostUri"] == "192.168.0.10:19000"
    assert exp["logUrl"] == "http://192.168.0.10:19000/logs"
    assert exp["developer"] == {"tool": "expo-cli", "projectRoot": str(expo_project)}

    bundle_url = urlsplit(exp["bundleUrl"])
    assert bundle_url.scheme == "http"
    assert bundle_url.netloc == "192.168.0.10:19000"
    assert bundle_url.path == "/index.bundle"
    assert parse_qs(bundle_url.query) == {
        "platform": ["ios"],
        "dev": ["true"],
        "hot": ["false"],
        "minify": ["false"],
    }


@pytest.mark.asyncio
async def test_missing_host_falls_back_to_server_address(
    expo_project: Path, app_config: AppConfig
) -> None:
    response = await make_service(app_config).get_manifest_response(
        str(expo_project), "android", None
    )
    assert response["exp"]["bundleUrl"].startswith("http://127.0.0.1:19000/index.bundle?")


@pytest.mark.asyncio
async def test_packager_options_are_reflected(expo_project: Path) -> None:
    config = AppConfig(
        project_root=str(expo_project), packager_opts={"dev": False, "minify": True}
    )
    response = await make_service(config).get_manifest_response(
        str(expo_project), "ios", "localhost:19000"
    )
    exp = response["exp"]
    assert exp["packagerOpts"] == {"dev": False, "minify": True}
    assert "dev=false" in exp["bundleUrl"]
    assert "minify=true" in exp["bundleUrl"]


@pytest.mark.asyncio
async def test_missing_project_propagates_error(tmp_path: Path) -> None:
    service = make_service(AppConfig(project_root=str(tmp_path)))
    with pytest.raises(ProjectConfigError):
        await service.get_manifest_response(str(tmp_path), "ios", "localhost:19000")
