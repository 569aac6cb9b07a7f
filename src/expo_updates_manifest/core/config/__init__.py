# Configuration package

from expo_updates_manifest.core.config.app_config import (
    AnalyticsConfig,
    AppConfig,
    LoggingConfig,
    LogLevel,
    PackagerOptions,
    load_config,
)

__all__ = [
    "AnalyticsConfig",
    "AppConfig",
    "LogLevel",
    "LoggingConfig",
    "PackagerOptions",
    "load_config",
]
