from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator

from expo_updates_manifest.core.constants import DEFAULT_DEVELOPER_TOOL
from expo_updates_manifest.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 19000


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_value(
    env: Mapping[str, str],
    name: str,
    default: Any,
    *,
    transform: Callable[[str], Any] | None = None,
) -> Any:
    """Return an environment variable value, optionally transformed."""
    if name in env:
        raw_value = env[name]
        return transform(raw_value) if transform is not None else raw_value
    return default


def _to_int(value: str, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def _to_float(value: str, fallback: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return fallback


def _merge_dicts(base: dict[str, Any], override: Mapping[str, Any]) -> None:
    """Recursively merge ``override`` into ``base`` in place."""
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _merge_dicts(base[key], value)
        else:
            base[key] = value


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    request_logging: bool = False
    response_logging: bool = False
    log_file: str | None = None


class AnalyticsConfig(DomainModel):
    """Analytics sink configuration."""

    enabled: bool = False
    endpoint: str | None = None
    write_key: str | None = None
    timeout: float = 5.0  # seconds

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str | None) -> str | None:
        """Validate the analytics endpoint if provided."""
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError("Analytics endpoint must start with http:// or https://")
        return v


class PackagerOptions(DomainModel):
    """Bundler options advertised in the classic manifest."""

    dev: bool = True
    minify: bool = False


class AppConfig(DomainModel):
    """Complete application configuration."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    project_root: str = Field(default_factory=os.getcwd)
    developer_tool: str = DEFAULT_DEVELOPER_TOOL

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    packager_opts: PackagerOptions = Field(default_factory=PackagerOptions)

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @property
    def server_host(self) -> str:
        """The ``host:port`` pair this server is reachable on."""
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create AppConfig from environment variables.

        Returns:
            AppConfig instance
        """
        env: Mapping[str, str] = environ if environ is not None else os.environ
        return cls.model_validate(_config_from_env(env))


def _config_from_env(env: Mapping[str, str]) -> dict[str, Any]:
    """Build a configuration dict containing only defaults and env overrides."""
    defaults = AppConfig()
    return {
        "host": _get_env_value(env, "APP_HOST", defaults.host),
        "port": _get_env_value(
            env,
            "APP_PORT",
            defaults.port,
            transform=lambda value: _to_int(value, DEFAULT_PORT),
        ),
        "project_root": _get_env_value(env, "PROJECT_ROOT", defaults.project_root),
        "developer_tool": _get_env_value(
            env, "DEVELOPER_TOOL", defaults.developer_tool
        ),
        "logging": {
            "level": _get_env_value(
                env,
                "LOG_LEVEL",
                defaults.logging.level.value,
                transform=lambda value: value.strip().upper(),
            ),
            "log_file": _get_env_value(env, "LOG_FILE", defaults.logging.log_file),
            "request_logging": _env_to_bool(
                "REQUEST_LOGGING", defaults.logging.request_logging, env
            ),
            "response_logging": _env_to_bool(
                "RESPONSE_LOGGING", defaults.logging.response_logging, env
            ),
        },
        "analytics": {
            "enabled": _env_to_bool(
                "ANALYTICS_ENABLED", defaults.analytics.enabled, env
            ),
            "endpoint": _get_env_value(
                env, "ANALYTICS_ENDPOINT", defaults.analytics.endpoint
            ),
            "write_key": _get_env_value(
                env, "ANALYTICS_WRITE_KEY", defaults.analytics.write_key
            ),
            "timeout": _get_env_value(
                env,
                "ANALYTICS_TIMEOUT",
                defaults.analytics.timeout,
                transform=lambda value: _to_float(value, 5.0),
            ),
        },
    }


# Environment variables that override file values, keyed by config path
_ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "APP_HOST": ("host",),
    "APP_PORT": ("port",),
    "PROJECT_ROOT": ("project_root",),
    "DEVELOPER_TOOL": ("developer_tool",),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FILE": ("logging", "log_file"),
    "REQUEST_LOGGING": ("logging", "request_logging"),
    "RESPONSE_LOGGING": ("logging", "response_logging"),
    "ANALYTICS_ENABLED": ("analytics", "enabled"),
    "ANALYTICS_ENDPOINT": ("analytics", "endpoint"),
    "ANALYTICS_WRITE_KEY": ("analytics", "write_key"),
    "ANALYTICS_TIMEOUT": ("analytics", "timeout"),
}


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from file and environment.

    Values from a ``.env`` file are loaded into the process environment first
    (when no explicit ``environ`` is given); environment variables override
    values from the YAML configuration file.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Optional environment mapping, defaults to ``os.environ``

    Returns:
        AppConfig instance
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config_data: dict[str, Any] = AppConfig().model_dump(mode="json")

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning("Configuration file not found: %s", config_path)
        else:
            if path.suffix.lower() not in [".yaml", ".yml"]:
                raise ValueError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml)."
                )
            import yaml

            with open(path, encoding="utf-8") as f:
                file_config: dict[str, Any] = yaml.safe_load(f) or {}
            if not isinstance(file_config, dict):
                raise ValueError(
                    f"Configuration file {path} must contain a mapping at the top level"
                )
            _merge_dicts(config_data, file_config)

    env_data = _config_from_env(environ)
    for name, config_path_parts in _ENV_OVERRIDES.items():
        if name not in environ:
            continue
        source: Any = env_data
        target: dict[str, Any] = config_data
        for part in config_path_parts[:-1]:
            source = source[part]
            target = target.setdefault(part, {})
        target[config_path_parts[-1]] = source[config_path_parts[-1]]

    return AppConfig.model_validate(config_data)
