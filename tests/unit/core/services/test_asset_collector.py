import hashlib
from pathlib import Path

import pytest

from expo_updates_manifest.core.services.asset_collector import FileAssetCollector
from expo_updates_manifest.core.services.asset_url_rewriter import (
    build_asset_url_builder,
)
from tests.conftest import PNG_BYTES

BUNDLE_URL = "http://localhost:19000/index.bundle?platform=ios"


@pytest.mark.asyncio
async def test_collects_pattern_matches_and_icon_once(expo_project: Path) -> None:
    exp = {"icon": "./assets/icon.png", "assetBundlePatterns": ["assets/*"]}

    assets = await FileAssetCollector().collect_manifest_assets(
        str(expo_project), exp, build_asset_url_builder(BUNDLE_URL)
    )

    assert [asset["url"] for asset in assets] == [
        "http://localhost:19000/assets/assets/data.json",
        "http://localhost:19000/assets/assets/icon.png",
    ]
    icon = assets[1]
    assert icon["hash"] == hashlib.md5(PNG_BYTES).hexdigest()
    assert icon["key"] == icon["hash"]
    assert icon["contentType"] == "image/png"
    assert icon["fileExtension"] == ".png"


def test_missing_and_outside_references_are_skipped(expo_project: Path) -> None:
    exp = {
        "icon": "./assets/missing.png",
        "splash": {"image": "../outside.png"},
        "android": {"adaptiveIcon": {"foregroundImage": "./assets/icon.png"}},
    }

    assert FileAssetCollector().find_asset_paths(str(expo_project), exp) == [
        "assets/icon.png"
    ]


def test_node_modules_are_excluded(expo_project: Path) -> None:
    vendored = expo_project / "node_modules" / "lib" / "image.png"
    vendored.parent.mkdir(parents=True)
    vendored.write_bytes(PNG_BYTES)

    paths = FileAssetCollector().find_asset_paths(
        str(expo_project), {"assetBundlePatterns": ["**/*.png"]}
    )

    assert paths == ["assets/icon.png"]


@pytest.mark.asyncio
async def test_no_assets_configured(expo_project: Path) -> None:
    assets = await FileAssetCollector().collect_manifest_assets(
        str(expo_project), {}, build_asset_url_builder(BUNDLE_URL)
    )
    assert assets == []


def test_trailing_double_star_matches_nested_files(tmp_path: Path) -> None:
    (tmp_path / "assets" / "img").mkdir(parents=True)
    (tmp_path / "assets" / "b.png").write_bytes(PNG_BYTES)
    (tmp_path / "assets" / "img" / "a.png").write_bytes(PNG_BYTES)

    paths = FileAssetCollector().find_asset_paths(
        str(tmp_path), {"assetBundlePatterns": ["assets/**"]}
    )

    assert paths == ["assets/b.png", "assets/img/a.png"]


def test_project_inside_node_modules_keeps_its_assets(tmp_path: Path) -> None:
    project = tmp_path / "node_modules" / "p"
    (project / "assets").mkdir(parents=True)
    (project / "assets" / "b.png").write_bytes(PNG_BYTES)

    paths = FileAssetCollector().find_asset_paths(
        str(project), {"assetBundlePatterns": ["assets/*"]}
    )

    assert paths == ["assets/b.png"]
