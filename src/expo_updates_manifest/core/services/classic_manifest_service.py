"""
Classic manifest provider.

Produces the legacy Expo Go manifest (``exp``) for a project: the project's
app config enriched with the bundle URL and development server details for
the requesting host and platform.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlencode

from expo_updates_manifest.core.common.url_utils import strip_script_extension
from expo_updates_manifest.core.config.app_config import AppConfig
from expo_updates_manifest.core.interfaces.classic_manifest_interface import (
    IClassicManifestProvider,
)
from expo_updates_manifest.core.interfaces.entry_point_interface import (
    IEntryPointResolver,
)
from expo_updates_manifest.core.interfaces.project_config_interface import (
    IProjectConfigLoader,
)

logger = logging.getLogger(__name__)


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


class ClassicManifestService(IClassicManifestProvider):
    """Builds classic manifests served by the development server."""

    def __init__(
        self,
        app_config: AppConfig,
        config_loader: IProjectConfigLoader,
        entry_point_resolver: IEntryPointResolver,
    ) -> None:
        self._app_config = app_config
        self._config_loader = config_loader
        self._entry_point_resolver = entry_point_resolver

    def build_bundle_url(self, host: str, main_module_name: str, platform: str) -> str:
        opts = self._app_config.packager_opts
        query = urlencode(
            {
                "platform": platform,
                "dev": _bool_param(opts.dev),
                "hot": "false",
                "minify": _bool_param(opts.minify),
            }
        )
        return f"http://{host}/{main_module_name}.bundle?{query}"

    async def get_manifest_response(
        self, project_root: str, platform: str, host: str | None
    ) -> dict[str, Any]:
        # Project files are read off the event loop
        project_config = await asyncio.to_thread(
            self._config_loader.get_config, project_root
        )
        entry_point = await asyncio.to_thread(
            self._entry_point_resolver.resolve_entry_point,
            project_root,
            platform,
            project_config,
        )
        main_module_name = strip_script_extension(entry_point)

        if not host:
            host = self._app_config.server_host
            logger.debug("Request has no Host header, using %s", host)

        exp: dict[str, Any] = dict(project_config.exp)
        exp.update(
            {
                "mainModuleName": main_module_name,
                "bundleUrl": self.build_bundle_url(host, main_module_name, platform),
                "hostUri": host,
                "debuggerHost": host,
                "logUrl": f"http://{host}/logs",
                "developer": {
                    "tool": self._app_config.developer_tool,
                    "projectRoot": project_root,
                },
                "packagerOpts": self._app_config.packager_opts.model_dump(),
            }
        )
        return {"exp": exp}
