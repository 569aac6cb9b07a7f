from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from expo_updates_manifest.core.config.app_config import (
    AppConfig,
    LogLevel,
    load_config,
)


def test_defaults() -> None:
    config = AppConfig()

    assert config.host == "127.0.0.1"
    assert config.port == 19000
    assert config.developer_tool == "expo-cli"
    assert config.logging.level == LogLevel.INFO
    assert config.analytics.enabled is False
    assert config.server_host == "127.0.0.1:19000"


def test_from_env() -> None:
    config = AppConfig.from_env(
        environ={
            "APP_HOST": "0.0.0.0",
            "APP_PORT": "8081",
            "PROJECT_ROOT": "/projects/demo",
            "DEVELOPER_TOOL": "expo-dev-server",
            "LOG_LEVEL": "debug",
            "REQUEST_LOGGING": "yes",
            "ANALYTICS_ENABLED": "true",
            "ANALYTICS_ENDPOINT": "https://analytics.example.com/track",
            "ANALYTICS_TIMEOUT": "2.5",
        }
    )

    assert config.host == "0.0.0.0"
    assert config.port == 8081
    assert config.project_root == "/projects/demo"
    assert config.developer_tool == "expo-dev-server"
    assert config.logging.level == LogLevel.DEBUG
    assert config.logging.request_logging is True
    assert config.analytics.enabled is True
    assert config.analytics.endpoint == "https://analytics.example.com/track"
    assert config.analytics.timeout == 2.5


def test_from_env_invalid_numbers_fall_back_to_defaults() -> None:
    config = AppConfig.from_env(
        environ={"APP_PORT": "not-a-port", "ANALYTICS_TIMEOUT": "soon"}
    )
    assert config.port == 19000
    assert config.analytics.timeout == 5.0


@pytest.mark.parametrize("port", [0, 70000])
def test_port_out_of_range_is_rejected(port: int) -> None:
    with pytest.raises(ValidationError):
        AppConfig(port=port)


def test_analytics_endpoint_must_be_http() -> None:
    with pytest.raises(ValidationError):
        AppConfig(analytics={"endpoint": "ftp://analytics.example.com"})


def test_load_config_merges_yaml_and_env(tmp_path: Path) -> None:
    config_file = tmp_path / "server.yaml"
    config_file.write_text(
        yaml.safe_dump(
            {
                "port": 19500,
                "developer_tool": "from-file",
                "logging": {"level": "WARNING", "log_file": "server.log"},
                "packager_opts": {"minify": True},
            }
        ),
        encoding="utf-8",
    )

    config = load_config(config_file, environ={"APP_PORT": "19600"})

    assert config.port == 19600
    assert config.developer_tool == "from-file"
    assert config.logging.level == LogLevel.WARNING
    assert config.logging.log_file == "server.log"
    assert config.packager_opts.minify is True
    assert config.packager_opts.dev is True


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yaml", environ={})
    assert config.port == 19000


def test_load_config_rejects_unknown_format(tmp_path: Path) -> None:
    config_file = tmp_path / "server.json"
    config_file.write_text("{}", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported configuration file format"):
        load_config(config_file, environ={})
