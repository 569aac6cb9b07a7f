import contextlib
import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from expo_updates_manifest.core.app.application_factory import build_app
from expo_updates_manifest.core.config.app_config import AppConfig
from tests.doubles import RecordingAnalytics, RecordingErrorLogger

# Smallest valid PNG (1x1 transparent pixel)
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)


def write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def expo_project(tmp_path: Path) -> Path:
    """Create a minimal Expo project with an entry point and two assets."""
    root = tmp_path / "demo-app"
    write_json(
        root / "package.json",
        {"name": "demo-app", "version": "1.2.3", "main": "index.js"},
    )
    write_json(
        root / "app.json",
        {
            "expo": {
                "name": "Demo",
                "slug": "demo",
                "sdkVersion": "45.0.0",
                "icon": "./assets/icon.png",
                "assetBundlePatterns": ["assets/*"],
            }
        },
    )
    (root / "index.js").write_text("console.log('demo');\n", encoding="utf-8")
    (root / "assets").mkdir()
    (root / "assets" / "icon.png").write_bytes(PNG_BYTES)
    (root / "assets" / "data.json").write_text("{}", encoding="utf-8")
    return root


@pytest.fixture
def app_config(expo_project: Path) -> AppConfig:
    return AppConfig(project_root=str(expo_project), host="127.0.0.1", port=19000)


@pytest.fixture
def analytics() -> RecordingAnalytics:
    return RecordingAnalytics()


@pytest.fixture
def error_logger() -> RecordingErrorLogger:
    return RecordingErrorLogger()


@pytest.fixture
def manifest_app(
    app_config: AppConfig,
    analytics: RecordingAnalytics,
    error_logger: RecordingErrorLogger,
) -> FastAPI:
    """The application wired with the default file-system collaborators."""
    return build_app(app_config, analytics=analytics, error_logger=error_logger)


@pytest.fixture
def test_client(manifest_app: FastAPI) -> Iterator[TestClient]:
    client = TestClient(manifest_app)
    try:
        yield client
    finally:
        with contextlib.suppress(Exception):
            client.close()
