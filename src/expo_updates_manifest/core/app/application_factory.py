"""
Application factory for creating the FastAPI application.

Wires the default project collaborators into the manifest builder and
installs the manifest middleware. Every collaborator can be replaced, which
is how tests and embedding tools provide their own implementations.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI

from expo_updates_manifest import __version__
from expo_updates_manifest.core.app.middleware.logging_middleware import (
    RequestLoggingMiddleware,
)
from expo_updates_manifest.core.app.middleware.manifest_middleware import (
    ManifestMiddleware,
)
from expo_updates_manifest.core.config.app_config import AppConfig
from expo_updates_manifest.core.interfaces.analytics_interface import (
    IAnalyticsService,
)
from expo_updates_manifest.core.interfaces.asset_collector_interface import (
    IAssetCollector,
)
from expo_updates_manifest.core.interfaces.classic_manifest_interface import (
    IClassicManifestProvider,
)
from expo_updates_manifest.core.interfaces.entry_point_interface import (
    IEntryPointResolver,
)
from expo_updates_manifest.core.interfaces.error_logger_interface import IErrorLogger
from expo_updates_manifest.core.interfaces.manifest_builder_interface import (
    IManifestBuilder,
)
from expo_updates_manifest.core.interfaces.project_config_interface import (
    IProjectConfigLoader,
)
from expo_updates_manifest.core.services.analytics_service import AnalyticsService
from expo_updates_manifest.core.services.asset_collector import FileAssetCollector
from expo_updates_manifest.core.services.asset_url_rewriter import AssetUrlRewriter
from expo_updates_manifest.core.services.classic_manifest_service import (
    ClassicManifestService,
)
from expo_updates_manifest.core.services.entry_point_resolver import (
    EntryPointResolver,
)
from expo_updates_manifest.core.services.error_logger import ProjectErrorLogger
from expo_updates_manifest.core.services.manifest_builder import ManifestBuilder
from expo_updates_manifest.core.services.project_config_loader import (
    ProjectConfigLoader,
)

logger = logging.getLogger(__name__)


def build_manifest_builder(
    config: AppConfig,
    *,
    config_loader: IProjectConfigLoader | None = None,
    entry_point_resolver: IEntryPointResolver | None = None,
    classic_manifest_provider: IClassicManifestProvider | None = None,
    asset_collector: IAssetCollector | None = None,
) -> ManifestBuilder:
    """Create a manifest builder backed by the default file-system collaborators."""
    config_loader = config_loader or ProjectConfigLoader()
    entry_point_resolver = entry_point_resolver or EntryPointResolver()
    classic_manifest_provider = classic_manifest_provider or ClassicManifestService(
        config, config_loader, entry_point_resolver
    )
    return ManifestBuilder(
        config_loader,
        entry_point_resolver,
        classic_manifest_provider,
        AssetUrlRewriter(asset_collector or FileAssetCollector()),
    )


def build_app(
    config: AppConfig | dict[str, Any] | None = None,
    *,
    builder: IManifestBuilder | None = None,
    analytics: IAnalyticsService | None = None,
    error_logger: IErrorLogger | None = None,
) -> FastAPI:
    """Build the FastAPI application serving the manifest route.

    Args:
        config: The application configuration (AppConfig object or dict)
        builder: Optional manifest builder replacing the default one
        analytics: Optional analytics sink
        error_logger: Optional project error logger

    Returns:
        The FastAPI ASGI application instance.
    """
    if config is None:
        config = AppConfig.from_env()
    elif isinstance(config, dict):
        config = AppConfig(**config)

    builder = builder or build_manifest_builder(config)
    analytics = analytics or AnalyticsService(config.analytics)
    error_logger = error_logger or ProjectErrorLogger()

    app = FastAPI(title="Expo Updates Manifest Server", version=__version__)
    app.state.app_config = config
    app.state.manifest_builder = builder

    app.add_middleware(
        ManifestMiddleware,
        project_root=config.project_root,
        builder=builder,
        analytics=analytics,
        error_logger=error_logger,
        developer_tool=config.developer_tool,
    )
    if config.logging.request_logging or config.logging.response_logging:
        # Added last so it wraps the manifest middleware
        app.add_middleware(
            RequestLoggingMiddleware,
            log_requests=config.logging.request_logging,
            log_responses=config.logging.response_logging,
        )

    @app.get("/status")
    async def status() -> dict[str, Any]:
        return {"status": "running", "projectRoot": config.project_root}

    logger.info("Serving Expo Updates manifests for %s", config.project_root)
    return app
